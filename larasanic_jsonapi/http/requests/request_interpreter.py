"""
Request Interpreter
Classifies a matched request according to JSON:API semantics
"""
import re
from typing import TYPE_CHECKING, Optional

from larasanic_jsonapi.defaults import (
    PARAM_RESOURCE_TYPE,
    PARAM_RESOURCE_ID,
    PARAM_RELATIONSHIP_NAME,
    KEYWORD_RELATIONSHIPS,
    REQUEST_CONTEXT_KEY,
)
from larasanic_jsonapi.exceptions import RoutingIntegrityException
from larasanic_jsonapi.http.requests.matched_route import MatchedRoute

if TYPE_CHECKING:
    from sanic import Request


class RequestInterpreter:
    """
    Read-only view of the JSON:API meaning of one request

    Controllers and middleware branch on this instead of parsing the path
    themselves. Create one per request; never share between requests.

    Usage:
        interpreter = RequestInterpreter.from_request(request)
        if interpreter.is_update_resource():
            ...
    """

    RELATIONSHIP_DATA_PATTERN = re.compile(rf'(^|/){KEYWORD_RELATIONSHIPS}/[^/]+/?$')
    RESOURCE_ID_SEGMENT = f"{{{PARAM_RESOURCE_ID}}}"

    def __init__(self, matched_route: MatchedRoute):
        self._matched_route = matched_route

    @classmethod
    def from_request(cls, request: 'Request') -> 'RequestInterpreter':
        """
        Build from the matched route captured on request.ctx when the
        route was mounted

        Raises:
            RoutingIntegrityException: If the request did not go through a
                mounted JSON:API route
        """
        matched_route = getattr(request.ctx, REQUEST_CONTEXT_KEY, None)

        if matched_route is None:
            raise RoutingIntegrityException(
                f"No JSON:API route context on request {request.method} {request.path}."
            )

        return cls(matched_route)

    def get_matched_route(self) -> MatchedRoute:
        return self._matched_route

    def is_method(self, method: str) -> bool:
        return self._matched_route.method == method.upper()

    def get_resource_type(self) -> str:
        """
        Raises:
            RoutingIntegrityException: If the route does not bind a resource type
        """
        name = self._matched_route.parameter(PARAM_RESOURCE_TYPE)

        if not name:
            raise RoutingIntegrityException('No matching resource type from the current route.')

        return name

    def get_resource_id(self) -> Optional[str]:
        resource_id = self._matched_route.parameter(PARAM_RESOURCE_ID)
        if resource_id is None or resource_id == '':
            return None
        return str(resource_id)

    def get_relationship_name(self) -> Optional[str]:
        return self._matched_route.parameter(PARAM_RELATIONSHIP_NAME) or None

    def is_relationship(self) -> bool:
        return self.get_relationship_name() is not None

    def _url(self) -> str:
        """
        URI template of the matched route (articles/{resource_id}/comments),
        or the request path when the route is not known

        Templates keep the id as a placeholder, so an id that reads
        'relationships' is never taken for the keyword.
        """
        route = self._matched_route.route
        if route is not None:
            return route.get_uri()
        return self._matched_route.path

    def _is_resource_url(self) -> bool:
        """The URL ends at the resource id: {type}/{id} and nothing after it"""
        resource_id = self.get_resource_id()
        if resource_id is None:
            return False

        if self._matched_route.route is not None:
            return self._url().endswith(self.RESOURCE_ID_SEGMENT)

        return self._matched_route.path.rstrip('/').endswith(f"/{resource_id}")

    def is_relationship_data(self) -> bool:
        """
        Whether the request addresses the relationship linkage
        (.../relationships/{name}) rather than the related resource(s)
        (.../{name})
        """
        return self.is_relationship() and \
            self.RELATIONSHIP_DATA_PATTERN.search(self._url()) is not None

    def is_expecting_document(self) -> bool:
        """
        Is this a request where we expect a document to be sent by the client?

        Every request is treated as document bearing. The narrower policy
        would be: is_create_resource, is_update_resource,
        is_replace_relationship, is_add_to_relationship or
        is_remove_from_relationship.
        """
        return True

    # =========================================================================
    # Resource requests
    # =========================================================================

    def _is_resource_request(self) -> bool:
        return not self.is_relationship()

    def is_index(self) -> bool:
        """GET /{type}"""
        return self.is_method('GET') and self._is_resource_request() and self.get_resource_id() is None

    def is_create_resource(self) -> bool:
        """POST /{type}"""
        return self.is_method('POST') and self._is_resource_request() and self.get_resource_id() is None

    def is_read_resource(self) -> bool:
        """GET /{type}/{id}; custom actions under the id are not reads"""
        return self.is_method('GET') and self._is_resource_request() and self._is_resource_url()

    def is_update_resource(self) -> bool:
        """PATCH /{type}/{id}"""
        return self.is_method('PATCH') and self._is_resource_request() and self._is_resource_url()

    def is_delete_resource(self) -> bool:
        """DELETE /{type}/{id}"""
        return self.is_method('DELETE') and self._is_resource_request() and self._is_resource_url()

    # =========================================================================
    # Relationship requests
    # =========================================================================

    def is_read_related_resource(self) -> bool:
        """GET /{type}/{id}/{relationship}"""
        return self.is_method('GET') and self.is_relationship() and not self.is_relationship_data()

    def is_read_relationship(self) -> bool:
        """GET /{type}/{id}/relationships/{relationship}"""
        return self.is_method('GET') and self.is_relationship_data()

    def is_modify_relationship(self) -> bool:
        return self.is_replace_relationship() or \
            self.is_add_to_relationship() or \
            self.is_remove_from_relationship()

    def is_replace_relationship(self) -> bool:
        """PATCH /{type}/{id}/relationships/{relationship}"""
        return self.is_method('PATCH') and self.is_relationship_data()

    def is_add_to_relationship(self) -> bool:
        """POST /{type}/{id}/relationships/{relationship}"""
        return self.is_method('POST') and self.is_relationship_data()

    def is_remove_from_relationship(self) -> bool:
        """DELETE /{type}/{id}/relationships/{relationship}"""
        return self.is_method('DELETE') and self.is_relationship_data()

    def __repr__(self) -> str:
        return f"<RequestInterpreter {self._matched_route!r}>"
