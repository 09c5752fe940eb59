"""
Route Mounter
Registers compiled routes with a Sanic app or blueprint
"""
from typing import Any, Callable, Dict, List, Union

from sanic import Blueprint, Request, Sanic

from larasanic_jsonapi.defaults import REQUEST_CONTEXT_KEY
from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.http.requests import MatchedRoute
from larasanic_jsonapi.logging import getLogger
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.routing.route_middleware_registry import RouteMiddlewareRegistry
from larasanic_jsonapi.routing.router import Router
from larasanic_jsonapi.support import ClassLoader

logger = getLogger(__name__)


class RouteMounter:
    """
    Mounts a router's routes on Sanic

    Each handler is wrapped so that, in order:
    1. the MatchedRoute is captured on request.ctx.json_api
    2. the route middleware runs (authorize, validate, ...)
    3. the controller method runs

    Usage:
        RouteMounter(registry).mount(app, router, prefix='/api/v1')
    """

    def __init__(self, middleware: RouteMiddlewareRegistry = None):
        self.middleware = middleware or RouteMiddlewareRegistry()
        self._controllers: Dict[Any, Any] = {}

    def mount(self, app: Union[Sanic, Blueprint], router: Router, prefix: str = '') -> List[Route]:
        """
        Every handler is built before the first one is added, so a
        resolution error leaves the app without any of these routes.

        Raises:
            ConfigurationException: If a controller or middleware cannot be
                resolved
        """
        prefix = '/' + prefix.strip('/') if prefix.strip('/') else ''
        routes = router.get_routes()
        handlers = [self.build_handler(route) for route in routes]

        for route, handler in zip(routes, handlers):
            uri = f"{prefix}/{route.get_compiled_uri()}"

            app.add_route(
                handler,
                uri,
                methods=route.get_methods(),
                name=route.get_name()
            )

        logger.info(f"Mounted {len(routes)} JSON:API routes", extra={'prefix': prefix or '/'})
        return routes

    def build_handler(self, route: Route) -> Callable:
        """Controller method wrapped with the route middleware and context capture"""
        handler = self.middleware.wrap_handler(self.resolve_handler(route), route.get_middleware())
        return self._capture_context(route, handler)

    @staticmethod
    def _capture_context(route: Route, handler: Callable) -> Callable:
        async def json_api_handler(request: Request, *args, **kwargs):
            setattr(request.ctx, REQUEST_CONTEXT_KEY, MatchedRoute.from_request(request, route))
            return await handler(request, *args, **kwargs)

        json_api_handler.__name__ = (route.get_name() or route.get_controller_method()).replace('.', '_')
        return json_api_handler

    def resolve_handler(self, route: Route) -> Callable:
        """
        Resolve 'controller@method' to a bound coroutine

        Controllers may be a dotted path, a class (instantiated once) or
        an instance.
        """
        action = route.get_action()
        if callable(action) and not isinstance(action, dict):
            return action

        controller = self.resolve_controller(route.get_controller())
        method = route.get_controller_method()
        handler = getattr(controller, method, None)

        if handler is None or not callable(handler):
            raise ConfigurationException(
                f"Controller {type(controller).__name__} has no method '{method}' "
                f"for route {route.get_name()}"
            )

        return handler

    def resolve_controller(self, controller: Any) -> Any:
        key = controller
        if key in self._controllers:
            return self._controllers[key]

        if isinstance(controller, str):
            try:
                controller = ClassLoader.load(controller)
            except (ImportError, AttributeError, ValueError) as e:
                raise ConfigurationException(f"Cannot load controller '{key}': {e}") from e

        if isinstance(controller, type):
            controller = controller()

        self._controllers[key] = controller
        return controller
