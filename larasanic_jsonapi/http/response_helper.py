"""
Response Helpers
JSON:API error documents
"""
from typing import Any, Dict, List, Optional
from sanic.response import json, HTTPResponse
from larasanic_jsonapi.defaults import MEDIA_TYPE


class ResponseHelper:
    """
    Response helper for JSON:API error documents

    Example:
        return ResponseHelper.forbidden('You cannot update this article')
        return ResponseHelper.validation_error([{'detail': 'Title is required'}])
    """

    @staticmethod
    def errors(errors: List[Dict[str, Any]], status: int = 400) -> HTTPResponse:
        """Return a JSON:API document with a top-level errors member"""
        return json({'errors': errors}, status=status, content_type=MEDIA_TYPE)

    @staticmethod
    def error(
        title: str,
        status: int = 400,
        detail: Optional[str] = None,
        code: Optional[str] = None
    ) -> HTTPResponse:
        """Return a document with a single error object"""
        error = {'status': str(status), 'title': title}
        if detail:
            error['detail'] = detail
        if code:
            error['code'] = code

        return ResponseHelper.errors([error], status=status)

    @staticmethod
    def bad_request(detail: Optional[str] = None) -> HTTPResponse:
        return ResponseHelper.error('Bad Request', 400, detail)

    @staticmethod
    def forbidden(detail: Optional[str] = None) -> HTTPResponse:
        return ResponseHelper.error('Forbidden', 403, detail)

    @staticmethod
    def validation_error(errors: List[Dict[str, Any]]) -> HTTPResponse:
        """422 response; error objects without a status get '422'"""
        errors = [{'status': '422', **error} for error in errors]
        return ResponseHelper.errors(errors, status=422)
