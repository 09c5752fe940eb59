"""
larasanic-jsonapi
JSON:API resource routing for Sanic, Laravel style
"""
from larasanic_jsonapi.routing import (
    Router,
    Route,
    RouteMiddlewareRegistry,
    ApiResource,
    ApiDefaults,
    ResourceOptions,
    ResourceGroup,
    RelationshipsGroup,
    ResourceRegistrar,
    RouteMounter,
)
from larasanic_jsonapi.http import MatchedRoute, RequestInterpreter
from larasanic_jsonapi.exceptions import (
    JsonApiException,
    ConfigurationException,
    RoutingIntegrityException,
)

__all__ = [
    'Router',
    'Route',
    'RouteMiddlewareRegistry',
    'ApiResource',
    'ApiDefaults',
    'ResourceOptions',
    'ResourceGroup',
    'RelationshipsGroup',
    'ResourceRegistrar',
    'RouteMounter',
    'MatchedRoute',
    'RequestInterpreter',
    'JsonApiException',
    'ConfigurationException',
    'RoutingIntegrityException',
]
