"""
Resource Registrar
Registers JSON:API resources on a router
"""
from typing import Any, Dict, List, Mapping, Optional, Union

from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.logging import getLogger
from larasanic_jsonapi.routing.api_resource import ApiDefaults, ApiResource, ResourceOptions
from larasanic_jsonapi.routing.resource_group import ResourceGroup
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.routing.route_middleware_registry import RouteMiddlewareRegistry
from larasanic_jsonapi.routing.router import Router

logger = getLogger(__name__)


class ResourceRegistrar:
    """
    Entry point for declaring JSON:API resources at bootstrap

    Usage:
        registrar = ResourceRegistrar(router, ApiDefaults.from_config(), registry)
        registrar.resource('articles', ApiResource('articles', authorizer='articles'),
                           has_many='comments', custom_methods={'publish': {'method': 'POST'}})
        registrar.resource('comments', except_=['delete'])
    """

    def __init__(
        self,
        router: Router,
        defaults: Optional[ApiDefaults] = None,
        middleware: Optional[RouteMiddlewareRegistry] = None
    ):
        """
        Args:
            router: Router receiving the compiled routes
            defaults: API-wide policy and controller defaults
            middleware: When given, every middleware entry of a compiled
                route must resolve in it before the routes are registered
        """
        self.router = router
        self.defaults = defaults or ApiDefaults()
        self.middleware = middleware
        self._resources: Dict[str, ApiResource] = {}

    def resource(
        self,
        resource_type: str,
        api_resource: Optional[ApiResource] = None,
        options: Union[ResourceOptions, Mapping[str, Any], None] = None,
        **kwargs
    ) -> List[Route]:
        """
        Compile and register one resource type

        Raises:
            ConfigurationException: On any configuration error; the router
                is left untouched in that case
        """
        if resource_type in self._resources:
            raise ConfigurationException(f"Resource type '{resource_type}' is already registered")

        if api_resource is not None and api_resource.get_resource_type() != resource_type:
            raise ConfigurationException(
                f"ApiResource '{api_resource.get_resource_type()}' registered as '{resource_type}'"
            )

        if not isinstance(options, ResourceOptions):
            options = ResourceOptions(options, **kwargs)
        elif kwargs:
            options = ResourceOptions(options.all(), **kwargs)

        group = ResourceGroup(resource_type, api_resource, options, self.defaults)
        routes = group.compile()

        if self.middleware is not None:
            for route in routes:
                self.middleware.resolve_all(route.get_middleware())

        self.router.merge(routes)
        self._resources[resource_type] = group.api_resource

        logger.info(
            f"Registered resource type '{resource_type}'",
            extra={'resource_type': resource_type, 'routes': len(routes)},
        )
        return routes

    def resources(self, resources: Mapping[str, Any]) -> List[Route]:
        """
        Register several resources

        Args:
            resources: resource type -> options mapping (an 'api_resource'
                key, when present, holds the ApiResource)
        """
        routes = []
        for resource_type, options in resources.items():
            options = dict(options or {})
            api_resource = options.pop('api_resource', None)
            routes.extend(self.resource(resource_type, api_resource, options))
        return routes

    def get_resource(self, resource_type: str) -> Optional[ApiResource]:
        return self._resources.get(resource_type)

    def get_resource_types(self) -> List[str]:
        return list(self._resources.keys())
