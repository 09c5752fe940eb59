"""
Registers Resources
Behaviour shared by the resource and relationship route compilers
"""
from typing import Any, Iterable, List, Optional

from larasanic_jsonapi.defaults import (
    PARAM_RESOURCE_TYPE,
    PARAM_RESOURCE_ID,
    KEYWORD_RELATIONSHIPS,
)
from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.routing.api_resource import ApiDefaults, ResourceOptions
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.routing.router import Router
from larasanic_jsonapi.support import Str


class RegistersResources:
    """
    Mixin for route compilers scoped to one resource type

    Subclasses set resource_type, options and defaults.
    """

    resource_type: str
    options: ResourceOptions
    defaults: ApiDefaults

    def base_url(self) -> str:
        return ''

    def resource_url(self) -> str:
        return f"{{{PARAM_RESOURCE_ID}}}"

    def related_url(self, relationship: str) -> str:
        return f"{self.resource_url()}/{Str.dasherize(relationship)}"

    def relationship_url(self, relationship: str) -> str:
        return f"{self.resource_url()}/{KEYWORD_RELATIONSHIPS}/{Str.dasherize(relationship)}"

    def controller(self) -> Any:
        """
        Controller handling this resource: the resource's own controller
        option, then the API default

        Raises:
            ConfigurationException: If neither is configured
        """
        controller = self.options.get('controller') or self.defaults.get_controller()

        if controller is None:
            raise ConfigurationException(
                f"No controller configured for resource type '{self.resource_type}'"
            )

        return controller

    def create_route(self, router: Router, method: str, uri: str, action: dict) -> Route:
        """
        Register a route binding the resource type as a route default, and
        the id constraint on instance URLs
        """
        route = router.match(self.route_methods(method), uri, action)
        route.defaults(PARAM_RESOURCE_TYPE, self.resource_type)

        id_constraint = self.id_constraint(uri)
        if id_constraint:
            route.where(PARAM_RESOURCE_ID, id_constraint)

        return route

    @staticmethod
    def route_methods(method: str) -> List[str]:
        # GET routes also answer HEAD
        if method == 'GET':
            return ['GET', 'HEAD']
        return [method]

    def id_constraint(self, uri: str) -> Optional[str]:
        if uri == self.base_url():
            return None
        return self.options.get('id')

    def diff_actions(self, defaults: Iterable[str], options: Any) -> List[str]:
        """
        Apply the 'only' / 'except' filters to an ordered action list

        Raises:
            ConfigurationException: If a filter names an unknown action or
                the result is empty
        """
        defaults = list(defaults)
        only = self._as_list(options.get('only'))
        exclude = self._as_list(options.get('except'))

        for action in only + exclude:
            if action not in defaults:
                raise ConfigurationException(
                    f"Unknown action '{action}' for resource type '{self.resource_type}'. "
                    f"Expected one of: {', '.join(defaults)}"
                )

        if only:
            actions = [action for action in defaults if action in only]
        else:
            actions = [action for action in defaults if action not in exclude]

        if not actions:
            raise ConfigurationException(
                f"No actions left to register for resource type '{self.resource_type}'"
            )

        return actions

    @staticmethod
    def _as_list(value: Any) -> List[str]:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return list(value)
