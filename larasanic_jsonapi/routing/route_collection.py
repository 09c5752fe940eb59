"""
Route Collection
Manages a collection of routes with lookup capabilities
"""
from typing import Dict, List, Optional, Iterable
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.exceptions import ConfigurationException


class RouteCollection:
    """
    Collection of routes with name-based and method-based lookup

    Unlike a plain router table, a JSON:API routing table refuses two
    routes answering the same (method, URI) pair.
    """

    def __init__(self):
        """Initialize an empty route collection"""
        self._routes: List[Route] = []
        self._routes_by_name: Dict[str, Route] = {}
        self._routes_by_method: Dict[str, List[Route]] = {
            'GET': [],
            'POST': [],
            'PUT': [],
            'PATCH': [],
            'DELETE': [],
            'OPTIONS': [],
            'HEAD': []
        }
        self._all_routes: Dict[str, Route] = {}

    @staticmethod
    def _key(method: str, uri: str) -> str:
        return f"{method.upper()}:{uri.strip('/')}"

    def add(self, route: Route) -> Route:
        """
        Add a route to the collection

        Raises:
            ConfigurationException: If the (method, URI) pair or the route
                name is already taken
        """
        self._check_conflicts(route, self._all_routes, self._routes_by_name)

        self._routes.append(route)

        if route.get_name():
            self._routes_by_name[route.get_name()] = route

        for method in route.get_methods():
            if method in self._routes_by_method:
                self._routes_by_method[method].append(route)
            self._all_routes[self._key(method, route.get_uri())] = route

        return route

    def extend(self, routes: Iterable[Route]) -> List[Route]:
        """
        Add several routes, all or nothing

        Every route is checked against the collection and against the
        other new routes before any of them is added.
        """
        routes = list(routes)
        pending_uris = dict(self._all_routes)
        pending_names = dict(self._routes_by_name)

        for route in routes:
            self._check_conflicts(route, pending_uris, pending_names)
            for method in route.get_methods():
                pending_uris[self._key(method, route.get_uri())] = route
            if route.get_name():
                pending_names[route.get_name()] = route

        for route in routes:
            self.add(route)

        return routes

    def _check_conflicts(self, route: Route, uris: Dict[str, Route], names: Dict[str, Route]):
        for method in route.get_methods():
            existing = uris.get(self._key(method, route.get_uri()))
            if existing is not None:
                raise ConfigurationException(
                    f"Route {method} /{route.get_uri()} ({route.get_name()}) "
                    f"overlaps existing route {existing.get_name()}"
                )

        if route.get_name() and route.get_name() in names:
            raise ConfigurationException(f"Duplicate route name: {route.get_name()}")

    def get_by_name(self, name: str) -> Optional[Route]:
        """Get route by name"""
        return self._routes_by_name.get(name)

    def get_by_method(self, method: str) -> List[Route]:
        """Get all routes for a specific HTTP method"""
        return self._routes_by_method.get(method.upper(), [])

    def match(self, uri: str, method: str) -> Optional[Route]:
        """
        Find a route that matches the URI and method

        Args:
            uri: Request URI
            method: HTTP method

        Returns:
            Matching route or None
        """
        key = self._key(method, uri)
        if key in self._all_routes:
            return self._all_routes[key]

        for route in self.get_by_method(method):
            if route.matches(uri, method):
                return route

        return None

    def get_routes(self) -> List[Route]:
        """Get all routes"""
        return self._routes

    def has_named_route(self, name: str) -> bool:
        """Check if a named route exists"""
        return name in self._routes_by_name

    def count(self) -> int:
        """Get total number of routes"""
        return len(self._routes)

    def __iter__(self):
        return iter(self._routes)

    def __len__(self):
        return len(self._routes)

    def to_dict(self) -> Dict[str, any]:
        """
        Convert route collection to a dictionary representation

        Returns:
            Dict with route information organized by name, method, and metadata
        """
        routes_list = []

        for route in self._routes:
            route_dict = {
                'name': route.get_name(),
                'uri': route.get_uri(),
                'methods': route.get_methods(),
                'action': route.get_action_name(),
                'middleware': route.get_middleware(),
                'parameters': route.get_parameter_names(),
            }

            if route.get_wheres():
                route_dict['constraints'] = route.get_wheres()

            if route.get_defaults():
                route_dict['defaults'] = route.get_defaults()

            routes_list.append(route_dict)

        return {
            'total': len(self._routes),
            'routes': routes_list,
            'by_method': {
                method: len(routes)
                for method, routes in self._routes_by_method.items()
                if routes
            },
            'named_routes': len(self._routes_by_name),
        }

    def __repr__(self):
        return f"<RouteCollection ({len(self._routes)} routes)>"
