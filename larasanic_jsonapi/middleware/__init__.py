"""
Middleware Package
Exports all middleware classes for easy import
"""
from larasanic_jsonapi.middleware.base_middleware import Middleware
from larasanic_jsonapi.middleware.authorize_middleware import AuthorizeMiddleware, authorize_factory
from larasanic_jsonapi.middleware.validate_middleware import ValidateMiddleware, validate_factory

__all__ = [
    'Middleware',
    'AuthorizeMiddleware',
    'authorize_factory',
    'ValidateMiddleware',
    'validate_factory',
]
