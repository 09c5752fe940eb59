from larasanic_jsonapi.authorization.authorizer import Authorizer

__all__ = ['Authorizer']
