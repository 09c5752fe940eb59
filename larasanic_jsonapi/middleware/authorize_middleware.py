"""
Authorize Middleware
Applies the authorizer a JSON:API route was compiled with
(route middleware 'json-api.authorize:{identity}')
"""
from typing import Callable, Mapping
from sanic import Request
from larasanic_jsonapi.authorization import Authorizer
from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.http import RequestInterpreter, ResponseHelper
from larasanic_jsonapi.logging import getLogger
from larasanic_jsonapi.middleware.base_middleware import Middleware

logger = getLogger(__name__)


class AuthorizeMiddleware(Middleware):
    """
    Rejects the request with a 403 error document when the authorizer
    denies it
    """

    def __init__(self, identity: str, authorizer: Authorizer):
        self.identity = identity
        self.authorizer = authorizer

    async def before_request(self, request: Request):
        interpreter = RequestInterpreter.from_request(request)

        if await self.authorizer.authorize(request, interpreter):
            return None

        logger.info(
            f"Authorizer '{self.identity}' denied {request.method} {request.path}",
            extra={'authorizer': self.identity, 'resource_type': interpreter.get_resource_type()},
        )
        return ResponseHelper.forbidden()


def authorize_factory(authorizers: Mapping[str, Authorizer]) -> Callable[[str], AuthorizeMiddleware]:
    """
    Build the 'json-api.authorize' middleware factory over the given
    authorizers

    Usage:
        registry.register_factory(MIDDLEWARE_AUTHORIZE, authorize_factory({'articles': ArticlesAuthorizer()}))
    """
    def factory(identity: str) -> AuthorizeMiddleware:
        if not identity or identity not in authorizers:
            raise ConfigurationException(f"Authorizer '{identity}' is not registered")
        return AuthorizeMiddleware(identity, authorizers[identity])

    return factory
