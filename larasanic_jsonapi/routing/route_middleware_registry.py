"""
Route Middleware Registry
Laravel-style route middleware management system

Entries are either a plain name ('auth') or a parameterized name
('json-api.authorize:articles'). Parameterized names are built by a
factory registered under the name, once per distinct parameter.
"""
from typing import Callable, Dict, Iterable, List, Optional, Tuple
from functools import wraps
from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.middleware.base_middleware import Middleware

MiddlewareFactory = Callable[[str], Middleware]


class RouteMiddlewareRegistry:
    def __init__(self):
        """Initialize empty registry"""
        self._middleware: Dict[str, Middleware] = {}
        self._factories: Dict[str, MiddlewareFactory] = {}
        self._resolved: Dict[str, Middleware] = {}

    def register(self, name: str, middleware_instance: Middleware):
        self._middleware[name] = middleware_instance

    def register_factory(self, name: str, factory: MiddlewareFactory):
        """
        Register a factory building middleware from the entry parameter

        Usage:
            registry.register_factory('json-api.authorize', authorize_factory(authorizers))
        """
        self._factories[name] = factory

    @staticmethod
    def parse(entry: str) -> Tuple[str, Optional[str]]:
        """Split 'name:parameter' into its name and parameter"""
        name, _, parameter = entry.partition(':')
        return name, parameter or None

    def get(self, name: str) -> Optional[Middleware]:
        return self._middleware.get(name)

    def has(self, entry: str) -> bool:
        name, parameter = self.parse(entry)
        if parameter is None:
            return name in self._middleware or name in self._factories
        return name in self._factories

    def resolve(self, entry: str) -> Middleware:
        """
        Resolve a middleware entry to an instance

        Raises:
            ConfigurationException: If the name is not registered, or the
                factory rejects the parameter
        """
        if entry in self._resolved:
            return self._resolved[entry]

        name, parameter = self.parse(entry)

        if parameter is None and name in self._middleware:
            middleware = self._middleware[name]
        elif name in self._factories:
            middleware = self._factories[name](parameter)
        else:
            raise ConfigurationException(f"Route middleware '{entry}' not found in registry")

        self._resolved[entry] = middleware
        return middleware

    def resolve_all(self, entries: Iterable[str]) -> List[Middleware]:
        return [self.resolve(entry) for entry in entries]

    def wrap_handler(self, handler: Callable, middleware_names: List[str]) -> Callable:
        if not middleware_names:
            return handler

        # Apply in reverse order so execution order matches list order
        # ['auth', 'verified'] becomes: auth(verified(handler))
        wrapped = handler
        for name in reversed(middleware_names):
            wrapped = self._create_wrapper(wrapped, self.resolve(name), name)

        return wrapped

    def _create_wrapper(self, handler: Callable, middleware: Middleware, name: str) -> Callable:
        @wraps(handler)
        async def wrapper(request, *args, **kwargs):
            result = await middleware.before_request(request)

            if result is not None:
                # Middleware returned a response early, stop the pipeline
                return result

            response = await handler(request, *args, **kwargs)

            return await middleware.after_response(request, response)

        wrapper._middleware_name = name
        return wrapper

    def get_registered(self) -> List[str]:
        return list(self._middleware.keys()) + list(self._factories.keys())
