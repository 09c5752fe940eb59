"""
Matched Route
Per-request snapshot of the route the router matched
"""
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Optional

if TYPE_CHECKING:
    from sanic import Request
    from larasanic_jsonapi.routing.route import Route


class MatchedRoute:
    """
    Resolved route parameters (route defaults merged with path parameters)
    plus the request method and path

    Usage:
        MatchedRoute({'resource_type': 'articles', 'resource_id': '42'}, 'GET', '/articles/42')
        MatchedRoute.from_request(request, route)
    """

    __slots__ = ('_parameters', '_method', '_path', '_route')

    def __init__(
        self,
        parameters: Mapping[str, Any],
        method: str,
        path: str,
        route: Optional['Route'] = None
    ):
        self._parameters = MappingProxyType(dict(parameters))
        self._method = method.upper()
        self._path = path
        self._route = route

    @classmethod
    def from_request(cls, request: 'Request', route: 'Route') -> 'MatchedRoute':
        """Build from a Sanic request matched to a compiled route"""
        parameters = dict(route.get_defaults())
        parameters.update(request.match_info)
        return cls(parameters, request.method, request.path, route)

    @classmethod
    def from_uri(cls, route: 'Route', method: str, path: str) -> Optional['MatchedRoute']:
        """Build by matching a path against a compiled route, without Sanic"""
        parameters = route.extract_parameters(path)
        if parameters is None:
            return None
        return cls(parameters, method, path, route)

    def parameter(self, name: str, default: Any = None) -> Any:
        return self._parameters.get(name, default)

    @property
    def parameters(self) -> Mapping[str, Any]:
        return self._parameters

    @property
    def method(self) -> str:
        return self._method

    @property
    def path(self) -> str:
        return self._path

    @property
    def route(self) -> Optional['Route']:
        return self._route

    def __repr__(self) -> str:
        return f"<MatchedRoute {self._method} {self._path} {dict(self._parameters)!r}>"
