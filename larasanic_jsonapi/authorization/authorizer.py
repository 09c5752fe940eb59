"""
Authorizer
Contract of an authorization policy selected by identity
"""
from abc import ABC, abstractmethod
from sanic import Request
from larasanic_jsonapi.http.requests import RequestInterpreter


class Authorizer(ABC):
    """
    Authorization policy for one or more resource types

    Registered under an identity and applied by the json-api.authorize
    route middleware.

    Example:
        class ArticlesAuthorizer(Authorizer):
            async def authorize(self, request, interpreter):
                if interpreter.is_index() or interpreter.is_read_resource():
                    return True
                return request.ctx.user is not None
    """

    @abstractmethod
    async def authorize(self, request: Request, interpreter: RequestInterpreter) -> bool:
        """
        Returns:
            True to let the request through, False to reject it with 403
        """
        pass
