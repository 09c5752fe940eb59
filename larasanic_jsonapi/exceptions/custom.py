"""
Custom Exception Classes
JSON:API exceptions with HTTP status codes
"""
from typing import Optional, List, Dict, Any


class JsonApiException(Exception):
    """Base exception for all JSON:API routing exceptions"""
    status_code = 500
    message = "An error occurred"

    def __init__(self, message: Optional[str] = None, status_code: Optional[int] = None):
        self.message = message or self.__class__.message
        self.status_code = status_code or self.__class__.status_code
        super().__init__(self.message)


class ConfigurationException(JsonApiException):
    """
    Configuration error exception

    Raised while compiling resource routes at bootstrap. Never caught by
    the compiler: a partially compiled routing table must not be used.

    Example:
        raise ConfigurationException("Custom action 'publish' has no HTTP method")
    """
    status_code = 500
    message = "Invalid JSON:API route configuration"


class RoutingIntegrityException(JsonApiException):
    """
    Routing integrity exception

    Raised when a matched route does not carry the parameters every
    compiled JSON:API route binds (e.g. the resource type).
    """
    status_code = 500
    message = "No matching resource type from the current route."


class BadRequestException(JsonApiException):
    """
    Bad request exception

    Example:
        raise BadRequestException("Invalid JSON payload")
    """
    status_code = 400
    message = "Bad request"


class ForbiddenException(JsonApiException):
    """
    Forbidden exception

    Example:
        raise ForbiddenException("You are not allowed to update this resource")
    """
    status_code = 403
    message = "Access forbidden"


class ValidationException(JsonApiException):
    """
    Validation error exception

    Carries a list of JSON:API error objects.

    Example:
        raise ValidationException(errors=[{'detail': 'Title is required'}])
    """
    status_code = 422
    message = "Validation failed"

    def __init__(
        self,
        message: Optional[str] = None,
        errors: Optional[List[Dict[str, Any]]] = None,
        status_code: Optional[int] = None
    ):
        super().__init__(message, status_code)
        self.errors = errors or []
