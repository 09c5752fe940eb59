"""
HTTP Module
Request interpretation and JSON:API responses
"""
from larasanic_jsonapi.http.requests import MatchedRoute, RequestInterpreter
from larasanic_jsonapi.http.response_helper import ResponseHelper

__all__ = [
    'MatchedRoute',
    'RequestInterpreter',
    'ResponseHelper',
]
