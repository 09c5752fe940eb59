"""Tests for larasanic_jsonapi.http.requests: JSON:API request classification."""

from types import SimpleNamespace

import pytest

from larasanic_jsonapi.exceptions import RoutingIntegrityException
from larasanic_jsonapi.http import MatchedRoute, RequestInterpreter
from larasanic_jsonapi.routing import ApiDefaults, ResourceRegistrar, Router
from tests.conftest import ArticlesController


def _interpreter(method, path, **parameters):
    return RequestInterpreter(MatchedRoute(parameters, method, path))


@pytest.fixture
def articles_router():
    router = Router()
    ResourceRegistrar(router, ApiDefaults(controller=ArticlesController)).resource(
        'articles', has_one='author', has_many='comments'
    )
    return router


def _classify(router, method, path):
    route = router.find(path, method)
    assert route is not None, f"no route for {method} {path}"
    return RequestInterpreter(MatchedRoute.from_uri(route, method, path))


class TestEndToEnd:
    def test_relationship_linkage(self, articles_router) -> None:
        interpreter = _classify(articles_router, 'GET', '/articles/42/relationships/comments')
        assert interpreter.get_resource_type() == 'articles'
        assert interpreter.get_resource_id() == '42'
        assert interpreter.get_relationship_name() == 'comments'
        assert interpreter.is_relationship_data() is True
        assert interpreter.is_read_relationship() is True

    def test_related_resource(self, articles_router) -> None:
        interpreter = _classify(articles_router, 'GET', '/articles/42/comments')
        assert interpreter.get_relationship_name() == 'comments'
        assert interpreter.is_relationship_data() is False
        assert interpreter.is_read_related_resource() is True

    def test_collection(self, articles_router) -> None:
        interpreter = _classify(articles_router, 'GET', '/articles')
        assert interpreter.get_resource_type() == 'articles'
        assert interpreter.get_resource_id() is None
        assert interpreter.get_relationship_name() is None
        assert interpreter.is_index() is True

    def test_create(self, articles_router) -> None:
        assert _classify(articles_router, 'POST', '/articles').is_create_resource() is True

    def test_update(self, articles_router) -> None:
        interpreter = _classify(articles_router, 'PATCH', '/articles/7')
        assert interpreter.is_update_resource() is True
        assert interpreter.is_read_resource() is False

    def test_add_to_has_many(self, articles_router) -> None:
        interpreter = _classify(articles_router, 'POST', '/articles/7/relationships/comments')
        assert interpreter.is_add_to_relationship() is True
        assert interpreter.is_modify_relationship() is True
        assert interpreter.is_create_resource() is False

    def test_matched_route_parameters(self, articles_router) -> None:
        route = articles_router.find('/articles/7/author', 'GET')
        matched = MatchedRoute.from_uri(route, 'GET', '/articles/7/author')
        assert dict(matched.parameters) == {
            'resource_type': 'articles',
            'relationship_name': 'author',
            'resource_id': '7',
        }
        assert matched.route is route

    def test_from_uri_without_match(self, articles_router) -> None:
        route = articles_router.get_route_by_name('articles.read')
        assert MatchedRoute.from_uri(route, 'GET', '/comments/7') is None


class TestResourceType:
    def test_missing(self) -> None:
        with pytest.raises(RoutingIntegrityException):
            _interpreter('GET', '/articles').get_resource_type()

    def test_empty(self) -> None:
        interpreter = _interpreter('GET', '/articles', resource_type='')
        with pytest.raises(RoutingIntegrityException, match='No matching resource type'):
            interpreter.get_resource_type()

    def test_is_a_server_fault(self) -> None:
        assert RoutingIntegrityException.status_code == 500


class TestQueries:
    def test_integer_id_is_returned_as_string(self) -> None:
        interpreter = _interpreter('GET', '/articles/42', resource_type='articles', resource_id=42)
        assert interpreter.get_resource_id() == '42'

    def test_linkage_requires_relationship_name(self) -> None:
        interpreter = _interpreter('GET', '/articles/1/relationships/comments', resource_type='articles', resource_id='1')
        assert interpreter.is_relationship_data() is False

    def test_relationship_data_with_trailing_slash(self) -> None:
        interpreter = _interpreter(
            'DELETE', '/articles/1/relationships/comments/',
            resource_type='articles', resource_id='1', relationship_name='comments',
        )
        assert interpreter.is_relationship_data() is True
        assert interpreter.is_remove_from_relationship() is True

    def test_relationship_named_relationships(self) -> None:
        interpreter = _interpreter(
            'GET', '/articles/1/relationships',
            resource_type='articles', resource_id='1', relationship_name='relationships',
        )
        assert interpreter.is_relationship_data() is False

    @pytest.mark.parametrize('method', ['GET', 'POST', 'PATCH', 'DELETE'])
    def test_always_expecting_document(self, method) -> None:
        assert _interpreter(method, '/articles', resource_type='articles').is_expecting_document() is True

    def test_is_method_case_insensitive(self) -> None:
        interpreter = _interpreter('patch', '/articles/1', resource_type='articles', resource_id='1')
        assert interpreter.is_method('PATCH')
        assert interpreter.is_method('patch')

    def test_queries_are_idempotent(self) -> None:
        interpreter = _interpreter(
            'PATCH', '/articles/1/relationships/tags',
            resource_type='articles', resource_id='1', relationship_name='tags',
        )
        first = (interpreter.get_resource_id(), interpreter.is_relationship_data(), interpreter.is_replace_relationship())
        second = (interpreter.get_resource_id(), interpreter.is_relationship_data(), interpreter.is_replace_relationship())
        assert first == second == ('1', True, True)


class TestFromRequest:
    def test_reads_captured_context(self) -> None:
        matched = MatchedRoute({'resource_type': 'articles'}, 'GET', '/articles')
        request = SimpleNamespace(ctx=SimpleNamespace(json_api=matched), method='GET', path='/articles')
        assert RequestInterpreter.from_request(request).get_matched_route() is matched

    def test_request_outside_json_api_route(self) -> None:
        request = SimpleNamespace(ctx=SimpleNamespace(), method='GET', path='/health')
        with pytest.raises(RoutingIntegrityException, match='/health'):
            RequestInterpreter.from_request(request)


@pytest.fixture
def custom_actions_router():
    router = Router()
    ResourceRegistrar(router, ApiDefaults(controller=ArticlesController)).resource(
        'articles',
        has_one='author',
        custom_methods={
            'preview': {'method': 'GET'},
            'archive': {'method': 'PATCH'},
            'purge': {'method': 'DELETE'},
        },
    )
    return router


class TestCustomActions:
    def test_custom_get_is_not_a_read(self, custom_actions_router) -> None:
        interpreter = _classify(custom_actions_router, 'GET', '/articles/7/preview')
        assert interpreter.get_resource_id() == '7'
        assert interpreter.is_read_resource() is False
        assert interpreter.is_index() is False

    def test_custom_patch_is_not_an_update(self, custom_actions_router) -> None:
        assert _classify(custom_actions_router, 'PATCH', '/articles/7/archive').is_update_resource() is False

    def test_custom_delete_is_not_a_delete(self, custom_actions_router) -> None:
        assert _classify(custom_actions_router, 'DELETE', '/articles/7/purge').is_delete_resource() is False

    def test_built_in_verbs_still_classified(self, custom_actions_router) -> None:
        assert _classify(custom_actions_router, 'GET', '/articles/7').is_read_resource() is True
        assert _classify(custom_actions_router, 'PATCH', '/articles/7').is_update_resource() is True
        assert _classify(custom_actions_router, 'DELETE', '/articles/7').is_delete_resource() is True

    def test_custom_action_without_route_uses_path(self) -> None:
        interpreter = _interpreter('GET', '/articles/7/preview', resource_type='articles', resource_id='7')
        assert interpreter.is_read_resource() is False


class TestResourceIdNamedRelationships:
    def test_related_resource_is_not_linkage(self, custom_actions_router) -> None:
        interpreter = _classify(custom_actions_router, 'GET', '/articles/relationships/author')
        assert interpreter.get_resource_id() == 'relationships'
        assert interpreter.is_relationship_data() is False
        assert interpreter.is_read_related_resource() is True

    def test_linkage_with_same_id(self, custom_actions_router) -> None:
        interpreter = _classify(custom_actions_router, 'GET', '/articles/relationships/relationships/author')
        assert interpreter.is_relationship_data() is True
        assert interpreter.is_read_relationship() is True
