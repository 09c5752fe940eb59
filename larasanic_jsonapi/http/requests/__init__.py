"""
JSON:API request classification
"""
from larasanic_jsonapi.http.requests.matched_route import MatchedRoute
from larasanic_jsonapi.http.requests.request_interpreter import RequestInterpreter

__all__ = [
    'MatchedRoute',
    'RequestInterpreter',
]
