"""
Centralized Error Handler
Renders JSON:API exceptions as error documents
"""
import traceback
from typing import Dict, Any, List
from sanic import Request
from larasanic_jsonapi.exceptions.custom import JsonApiException, RoutingIntegrityException
from larasanic_jsonapi.http.response_helper import ResponseHelper
from larasanic_jsonapi.logging import getLogger


class ErrorHandler:
    """
    Provides JSON:API error responses and error reporting

    Usage:
        handler = ErrorHandler(debug=True)
        app.error_handler.add(JsonApiException, handler.handle_error)
    """

    def __init__(self, debug: bool = False):
        self.debug = debug
        self.logger = getLogger('larasanic_jsonapi.errors')

    async def handle_error(self, request: Request, error: Exception):
        """Handle error and return a JSON:API error document"""
        status_code = self._get_status_code(error)
        self._log_error(error, request, status_code)

        return ResponseHelper.errors(self._build_errors(error, status_code), status=status_code)

    def _build_errors(self, error: Exception, status_code: int) -> List[Dict[str, Any]]:
        # Validation errors already are JSON:API error objects
        errors = list(getattr(error, 'errors', None) or [])
        if errors:
            return errors

        error_object = {
            'status': str(status_code),
            'title': error.__class__.__name__,
            'detail': self._get_error_message(error),
        }

        if self.debug:
            error_object['meta'] = {'trace': traceback.format_exception(type(error), error, error.__traceback__)}

        return [error_object]

    def _get_error_message(self, error: Exception) -> str:
        if isinstance(error, JsonApiException):
            return error.message
        return 'Internal server error'

    def _get_status_code(self, error: Exception) -> int:
        return getattr(error, 'status_code', 500)

    def _log_error(self, error: Exception, request: Request, status_code: int):
        context = {'path': request.path, 'method': request.method, 'status': status_code}

        if isinstance(error, RoutingIntegrityException) or status_code >= 500:
            self.logger.error(f"{error.__class__.__name__}: {error}", exc_info=error, extra=context)
        else:
            self.logger.info(f"{error.__class__.__name__}: {error}", extra=context)
