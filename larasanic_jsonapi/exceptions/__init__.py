"""
Exceptions Package
JSON:API exceptions and error rendering
"""
from larasanic_jsonapi.exceptions.custom import (
    JsonApiException,
    ConfigurationException,
    RoutingIntegrityException,
    BadRequestException,
    ForbiddenException,
    ValidationException,
)

__all__ = [
    'JsonApiException',
    'ConfigurationException',
    'RoutingIntegrityException',
    'BadRequestException',
    'ForbiddenException',
    'ValidationException',
]
