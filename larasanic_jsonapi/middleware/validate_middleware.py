"""
Validate Middleware
Applies the validator set a JSON:API route was compiled with
(route middleware 'json-api.validate:{identity}')
"""
import json
from typing import Any, Callable, Dict, Mapping, Optional
from sanic import Request
from larasanic_jsonapi.exceptions import BadRequestException, ConfigurationException
from larasanic_jsonapi.http import RequestInterpreter, ResponseHelper
from larasanic_jsonapi.logging import getLogger
from larasanic_jsonapi.middleware.base_middleware import Middleware
from larasanic_jsonapi.validation import Validators

logger = getLogger(__name__)


class ValidateMiddleware(Middleware):
    """
    Rejects the request with a 422 error document when the validator set
    reports errors, or 400 when the body is not valid JSON
    """

    def __init__(self, identity: str, validators: Validators):
        self.identity = identity
        self.validators = validators

    async def before_request(self, request: Request):
        interpreter = RequestInterpreter.from_request(request)

        if not interpreter.is_expecting_document():
            return None

        try:
            document = self.decode(request)
        except BadRequestException as e:
            return ResponseHelper.bad_request(e.message)

        errors = await self.validators.validate(request, interpreter, document)

        if not errors:
            return None

        logger.info(
            f"Validators '{self.identity}' rejected {request.method} {request.path}",
            extra={'validators': self.identity, 'errors': len(errors)},
        )
        return ResponseHelper.validation_error(errors)

    @staticmethod
    def decode(request: Request) -> Optional[Dict[str, Any]]:
        """
        Raises:
            BadRequestException: If the body is not a JSON object
        """
        if not request.body:
            return None

        try:
            document = json.loads(request.body)
        except ValueError as e:
            raise BadRequestException(f"Request body is not valid JSON: {e}") from e

        if not isinstance(document, dict):
            raise BadRequestException("Request document must be a JSON object")

        return document


def validate_factory(validators: Mapping[str, Validators]) -> Callable[[str], ValidateMiddleware]:
    """
    Build the 'json-api.validate' middleware factory over the given
    validator sets
    """
    def factory(identity: str) -> ValidateMiddleware:
        if not identity or identity not in validators:
            raise ConfigurationException(f"Validators '{identity}' are not registered")
        return ValidateMiddleware(identity, validators[identity])

    return factory
