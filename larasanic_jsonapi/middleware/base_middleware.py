"""
Route Middleware Contract
"""
from abc import ABC, abstractmethod
from sanic import Request


class Middleware(ABC):
    """
    Route middleware resolved by name from the RouteMiddlewareRegistry

    before_request runs in route middleware order; returning a response
    stops the chain and that response is sent instead. after_response
    runs in reverse order and may replace the response.
    """

    @abstractmethod
    async def before_request(self, request: Request):
        """Return None to continue, or an HTTPResponse to answer now"""

    async def after_response(self, request: Request, response):
        return response
