"""
Resource Group
Compiles the routes of one JSON:API resource type
"""
from typing import Any, Dict, List, Optional

from larasanic_jsonapi.defaults import (
    RESOURCE_VERBS,
    RESOURCE_METHODS,
    HTTP_METHODS,
    MIDDLEWARE_AUTHORIZE,
    MIDDLEWARE_VALIDATE,
)
from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.logging import getLogger
from larasanic_jsonapi.routing.api_resource import ApiDefaults, ApiResource, ResourceOptions
from larasanic_jsonapi.routing.registers_resources import RegistersResources
from larasanic_jsonapi.routing.relationships_group import RelationshipsGroup
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.routing.router import Router
from larasanic_jsonapi.support import Str

logger = getLogger(__name__)


class ResourceGroup(RegistersResources):
    """
    Compiles one resource type into a route group

    All routes share one group: URL prefix is the dasherized resource type,
    the name prefix is "{resource_type}." and the middleware chain is the
    options middleware followed by the authorize and validate middleware.

    Usage:
        group = ResourceGroup('blogPosts', ApiResource('blogPosts', authorizer='posts'), options)
        routes = group.compile()           # list of Route, nothing registered
        group.add_resource(router)         # compile and merge into router

    Resulting routes:
        GET    blog-posts                 blogPosts.index
        POST   blog-posts                 blogPosts.create
        GET    blog-posts/{resource_id}   blogPosts.read
        PATCH  blog-posts/{resource_id}   blogPosts.update
        DELETE blog-posts/{resource_id}   blogPosts.delete
    """

    def __init__(
        self,
        resource_type: str,
        api_resource: Optional[ApiResource] = None,
        options: Optional[ResourceOptions] = None,
        defaults: Optional[ApiDefaults] = None
    ):
        self.resource_type = resource_type
        self.api_resource = api_resource or ApiResource(resource_type)
        self.options = options or ResourceOptions()
        self.defaults = defaults or ApiDefaults()

    def add_resource(self, router: Router) -> List[Route]:
        """
        Compile the resource and merge its routes into the router

        Nothing is added to the router unless every route compiles.
        """
        return router.merge(self.compile())

    def compile(self) -> List[Route]:
        """Compile the resource's routes on a staging router"""
        staging = Router()

        def routes():
            self.add_resource_routes(staging)
            self.add_relationship_routes(staging)

        staging.group(self.group_action(), routes)

        compiled = staging.get_routes()
        logger.info(
            f"Compiled {len(compiled)} routes for resource type '{self.resource_type}'",
            extra={'resource_type': self.resource_type},
        )
        return compiled

    def group_action(self) -> Dict[str, Any]:
        return {
            'middleware': self.middleware(),
            'as': f"{self.resource_type}.",
            'prefix': Str.dasherize(self.resource_type),
        }

    # =========================================================================
    # Middleware
    # =========================================================================

    def middleware(self) -> List[str]:
        """
        Route middleware shared by every route of the resource: the
        configured middleware, then the authorizer, then the validators
        """
        middleware = list(self._as_list(self.options.get('middleware')))
        authorizer = self.authorizer()
        validators = self.validators()

        if authorizer:
            middleware.append(f"{MIDDLEWARE_AUTHORIZE}:{authorizer}")

        if validators:
            middleware.append(f"{MIDDLEWARE_VALIDATE}:{validators}")

        return middleware

    def authorizer(self) -> Optional[str]:
        """Options override, then the resource's authorizer, then the default"""
        return (
            self.options.get('authorizer')
            or self.api_resource.get_authorizer()
            or self.defaults.get_authorizer()
        )

    def validators(self) -> Optional[str]:
        """Options override, then the resource's validators, then the default"""
        return (
            self.options.get('validators')
            or self.api_resource.get_validators()
            or self.defaults.get_validators()
        )

    # =========================================================================
    # Resource Routes
    # =========================================================================

    def add_resource_routes(self, router: Router):
        for action in self.resource_actions():
            self.resource_route(router, action)

    def add_relationship_routes(self, router: Router):
        self.relationships_group().add_relationships(router)

    def relationships_group(self) -> RelationshipsGroup:
        return RelationshipsGroup(self.resource_type, self.options, self.defaults)

    def custom_methods(self) -> Dict[str, Any]:
        custom_methods = self.options.get('custom_methods', {})

        if not hasattr(custom_methods, 'items'):
            raise ConfigurationException(
                f"custom_methods for resource type '{self.resource_type}' must be a mapping"
            )

        for action, definition in custom_methods.items():
            if not hasattr(definition, 'get'):
                raise ConfigurationException(
                    f"Custom action '{action}' of resource type '{self.resource_type}' "
                    f"must be a mapping with a 'method' key"
                )

        return custom_methods

    def resource_actions(self) -> List[str]:
        """Built-in verbs first, then custom actions in configuration order"""
        actions = list(RESOURCE_VERBS)
        for action in self.custom_methods():
            if action not in actions:
                actions.append(action)

        return self.diff_actions(actions, self.options)

    def resource_route(self, router: Router, action: str) -> Route:
        route = self.create_route(
            router,
            self.route_method(action),
            self.route_url(action),
            self.route_action(action)
        )

        logger.debug(
            f"{'|'.join(route.get_methods())} /{route.get_uri()} -> {route.get_name()}",
            extra={'resource_type': self.resource_type, 'route': route.get_name()},
        )
        return route

    def route_url(self, action: str) -> str:
        """
        URL of an action, relative to the group prefix

        Built-in verbs always use the collection or instance URL, unless a
        custom method of the same name configures its own url.
        """
        custom = self.custom_methods().get(action)

        if custom is not None and custom.get('url'):
            return f"{self.resource_url()}/{custom.get('url').strip('/')}"

        if action in ('index', 'create'):
            return self.base_url()

        if action in RESOURCE_VERBS:
            return self.resource_url()

        return f"{self.resource_url()}/{action}"

    def route_action(self, action: str) -> Dict[str, Any]:
        return {
            'controller': self.controller(),
            'method': action,
            'as': action,
        }

    def route_method(self, action: str) -> str:
        """
        HTTP method of an action: built-in mapping first, then the custom
        method definition

        Raises:
            ConfigurationException: If no method resolves or it is not a
                known HTTP method
        """
        if action in RESOURCE_METHODS:
            return RESOURCE_METHODS[action]

        method = self.custom_methods().get(action, {}).get('method')

        if not method:
            raise ConfigurationException(
                f"No HTTP method configured for custom action '{action}' "
                f"of resource type '{self.resource_type}'"
            )

        method = str(method).upper()
        if method not in HTTP_METHODS:
            raise ConfigurationException(
                f"Invalid HTTP method '{method}' for custom action '{action}' "
                f"of resource type '{self.resource_type}'"
            )

        return method
