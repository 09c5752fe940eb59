"""
Relationships Group
Compiles the relationship routes of one JSON:API resource type
"""
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Tuple

from larasanic_jsonapi.defaults import (
    PARAM_RELATIONSHIP_NAME,
    HAS_ONE_ACTIONS,
    HAS_MANY_ACTIONS,
    RELATIONSHIP_METHODS,
    RELATIONSHIP_CONTROLLER_METHODS,
)
from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.logging import getLogger
from larasanic_jsonapi.routing.api_resource import ApiDefaults, ResourceOptions
from larasanic_jsonapi.routing.registers_resources import RegistersResources
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.routing.router import Router

logger = getLogger(__name__)

_EMPTY = MappingProxyType({})


class RelationshipsGroup(RegistersResources):
    """
    Relationship routes, registered inside the resource's group so they
    share its prefix, name prefix and middleware

    Usage:
        ResourceOptions(has_one='author', has_many={'comments': {'except': ['remove']}})

    Resulting routes for has_many 'comments' on 'articles':
        GET    articles/{resource_id}/comments                articles.relationships.comments
        GET    articles/{resource_id}/relationships/comments  articles.relationships.comments.read
        PATCH  articles/{resource_id}/relationships/comments  articles.relationships.comments.replace
        POST   articles/{resource_id}/relationships/comments  articles.relationships.comments.add
    """

    def __init__(
        self,
        resource_type: str,
        options: ResourceOptions,
        defaults: Optional[ApiDefaults] = None
    ):
        self.resource_type = resource_type
        self.options = options
        self.defaults = defaults or ApiDefaults()

    def add_relationships(self, router: Router) -> List[Route]:
        routes = []

        for relationship, actions in self.relationships():
            for action in actions:
                routes.append(self.relationship_route(router, relationship, action))

        return routes

    def relationships(self) -> List[Tuple[str, List[str]]]:
        """Ordered (relationship, actions) pairs: has-one first, then has-many"""
        relationships = []

        for relationship, options in self._normalize('has_one'):
            relationships.append((relationship, self.diff_actions(HAS_ONE_ACTIONS, options)))

        for relationship, options in self._normalize('has_many'):
            relationships.append((relationship, self.diff_actions(HAS_MANY_ACTIONS, options)))

        return relationships

    def _normalize(self, key: str) -> List[Tuple[str, Mapping[str, Any]]]:
        """Accept a name, a list of names, or a mapping of name to options"""
        value = self.options.get(key)

        if value is None:
            return []

        if isinstance(value, str):
            return [(value, _EMPTY)]

        if hasattr(value, 'items'):
            normalized = []
            for relationship, options in value.items():
                if options is not None and not hasattr(options, 'get'):
                    raise ConfigurationException(
                        f"Options of relationship '{relationship}' on resource type "
                        f"'{self.resource_type}' must be a mapping"
                    )
                normalized.append((relationship, options or _EMPTY))
            return normalized

        return [(relationship, _EMPTY) for relationship in value]

    def relationship_route(self, router: Router, relationship: str, action: str) -> Route:
        route = self.create_route(
            router,
            RELATIONSHIP_METHODS[action],
            self.route_url(relationship, action),
            self.route_action(relationship, action)
        )
        route.defaults(PARAM_RELATIONSHIP_NAME, relationship)

        logger.debug(
            f"{'|'.join(route.get_methods())} /{route.get_uri()} -> {route.get_name()}",
            extra={'resource_type': self.resource_type, 'route': route.get_name()},
        )
        return route

    def route_url(self, relationship: str, action: str) -> str:
        if action == 'related':
            return self.related_url(relationship)

        return self.relationship_url(relationship)

    def route_action(self, relationship: str, action: str) -> Dict[str, Any]:
        name = f"relationships.{relationship}"
        if action != 'related':
            name = f"{name}.{action}"

        return {
            'controller': self.controller(),
            'method': RELATIONSHIP_CONTROLLER_METHODS[action],
            'as': name,
        }
