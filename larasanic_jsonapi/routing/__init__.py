"""
Routing Package
JSON:API route compilation on a Laravel-style router
"""
from larasanic_jsonapi.routing.router import Router
from larasanic_jsonapi.routing.route import Route
from larasanic_jsonapi.routing.route_collection import RouteCollection
from larasanic_jsonapi.routing.route_middleware_registry import RouteMiddlewareRegistry
from larasanic_jsonapi.routing.api_resource import ApiResource, ApiDefaults, ResourceOptions
from larasanic_jsonapi.routing.resource_group import ResourceGroup
from larasanic_jsonapi.routing.relationships_group import RelationshipsGroup
from larasanic_jsonapi.routing.resource_registrar import ResourceRegistrar
from larasanic_jsonapi.routing.route_mounter import RouteMounter

__all__ = [
    'Router',
    'Route',
    'RouteCollection',
    'RouteMiddlewareRegistry',
    'ApiResource',
    'ApiDefaults',
    'ResourceOptions',
    'ResourceGroup',
    'RelationshipsGroup',
    'ResourceRegistrar',
    'RouteMounter',
]
