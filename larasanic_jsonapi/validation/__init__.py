from larasanic_jsonapi.validation.validators import Validators

__all__ = ['Validators']
