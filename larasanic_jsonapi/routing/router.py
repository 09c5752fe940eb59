"""
Router
Main routing class that manages route registration and resolution
"""
from typing import Union, List, Dict, Optional, Callable, Iterable
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.routing.route_collection import RouteCollection


class Router:
    def __init__(self):
        """
        Initialize the Router
        """
        self.routes = RouteCollection()
        self._group_stack: List[Dict] = []

    # =========================================================================
    # Route Registration Methods
    # =========================================================================

    def get(self, uri: str, action: Union[Callable, str, Dict] = None) -> Route:
        """
        Register a GET route
        """
        return self.add_route(['GET', 'HEAD'], uri, action)

    def patch(self, uri: str, action: Union[Callable, str, Dict] = None) -> Route:
        """Register a PATCH route"""
        return self.add_route(['PATCH'], uri, action)

    def delete(self, uri: str, action: Union[Callable, str, Dict] = None) -> Route:
        """Register a DELETE route"""
        return self.add_route(['DELETE'], uri, action)

    def match(self, methods: List[str], uri: str, action: Union[Callable, str, Dict] = None) -> Route:
        """
        Register a route for specific HTTP methods
        Args:
            methods: List of HTTP methods
            uri: Route URI
            action: Handler function, controller string, or action dict
        """
        return self.add_route(methods, uri, action)

    def add_route(self, methods: List[str], uri: str, action: Union[Callable, str, Dict]) -> Route:
        """
        Add a route to the collection
        """
        route = self.create_route(methods, uri, action)
        return self.routes.add(route)

    def create_route(self, methods: List[str], uri: str, action: Union[Callable, str, Dict]) -> Route:
        """
        Create a new Route instance with group attributes applied
        """
        route = Route(methods, uri, action)

        # Apply group attributes from outermost to innermost
        for group in self._group_stack:
            if 'prefix' in group:
                route.prefix(group['prefix'])

            if 'middleware' in group:
                route.middleware(group['middleware'])

            if 'as' in group:
                prefix = (route.get_group_name_prefix() or '') + group['as']
                route._group_name_prefix = prefix

            if 'where' in group:
                route.where(group['where'])

            if 'defaults' in group:
                route.defaults(group['defaults'])

        # Name from the action dict ('as') gets the group name prefix
        if isinstance(action, dict) and action.get('as'):
            route.name(action['as'])

        return route

    # =========================================================================
    # Route Grouping
    # =========================================================================

    def group(self, attributes: Dict, routes: Callable):
        """
        Usage:
            router.group({'prefix': 'articles', 'as': 'articles.', 'middleware': ['auth']}, lambda: [
                router.get('/', {'controller': ArticlesController, 'method': 'index', 'as': 'index'})
            ])
        """
        self._group_stack.append(attributes)
        try:
            routes()
        finally:
            self._group_stack.pop()

    def merge(self, routes: Iterable[Route]) -> List[Route]:
        """
        Add already created routes (e.g. compiled on a staging router),
        all or nothing
        """
        return self.routes.extend(routes)

    # =========================================================================
    # Route Resolution
    # =========================================================================

    def get_routes(self) -> List[Route]:
        """Get all routes as a list"""
        return self.routes.get_routes()

    def get_route_by_name(self, name: str) -> Optional[Route]:
        """Get a route by name"""
        return self.routes.get_by_name(name)

    def has(self, name: str) -> bool:
        """Check if a named route exists"""
        return self.routes.has_named_route(name)

    def find(self, uri: str, method: str) -> Optional[Route]:
        """Find the route answering a request URI and method"""
        return self.routes.match(uri, method)
