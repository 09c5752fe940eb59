"""Tests for larasanic_jsonapi.routing.relationships_group: relationship route compiler."""

import pytest

from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.routing import ApiDefaults, ResourceGroup, ResourceOptions
from tests.conftest import ArticlesController


def _relationship_routes(resource_type='articles', **options):
    group = ResourceGroup(
        resource_type,
        options=ResourceOptions(only=['read'], **options),
        defaults=ApiDefaults(controller=ArticlesController, authorizer='default'),
    )
    return [route for route in group.compile() if route.get_defaults().get('relationship_name')]


def _table(routes):
    return [(route.get_methods()[0], route.get_uri(), route.get_name()) for route in routes]


class TestHasOne:
    def test_routes(self) -> None:
        assert _table(_relationship_routes(has_one='author')) == [
            ('GET', 'articles/{resource_id}/author', 'articles.relationships.author'),
            ('GET', 'articles/{resource_id}/relationships/author', 'articles.relationships.author.read'),
            ('PATCH', 'articles/{resource_id}/relationships/author', 'articles.relationships.author.replace'),
        ]

    def test_controller_methods(self) -> None:
        methods = [route.get_controller_method() for route in _relationship_routes(has_one='author')]
        assert methods == ['read_related_resource', 'read_relationship', 'replace_relationship']

    def test_add_is_not_a_has_one_action(self) -> None:
        with pytest.raises(ConfigurationException, match="Unknown action 'add'"):
            _relationship_routes(has_one={'author': {'only': ['add']}})


class TestHasMany:
    def test_routes(self) -> None:
        assert _table(_relationship_routes(has_many='comments')) == [
            ('GET', 'articles/{resource_id}/comments', 'articles.relationships.comments'),
            ('GET', 'articles/{resource_id}/relationships/comments', 'articles.relationships.comments.read'),
            ('PATCH', 'articles/{resource_id}/relationships/comments', 'articles.relationships.comments.replace'),
            ('POST', 'articles/{resource_id}/relationships/comments', 'articles.relationships.comments.add'),
            ('DELETE', 'articles/{resource_id}/relationships/comments', 'articles.relationships.comments.remove'),
        ]

    def test_per_relationship_filters(self) -> None:
        routes = _relationship_routes(has_many={'comments': {'except': ['add', 'remove']}, 'tags': {'only': 'related'}})
        assert [route.get_name() for route in routes] == [
            'articles.relationships.comments',
            'articles.relationships.comments.read',
            'articles.relationships.comments.replace',
            'articles.relationships.tags',
        ]

    def test_list_of_names(self) -> None:
        routes = _relationship_routes(has_many=['comments', 'tags'])
        assert len(routes) == 10

    def test_relationship_options_must_be_a_mapping(self) -> None:
        with pytest.raises(ConfigurationException, match="relationship 'comments'"):
            _relationship_routes(has_many={'comments': 'add'})


class TestSharedGroup:
    def test_has_one_registered_before_has_many(self) -> None:
        routes = _relationship_routes(has_one='author', has_many='comments')
        assert routes[0].get_name() == 'articles.relationships.author'
        assert routes[3].get_name() == 'articles.relationships.comments'

    def test_relationship_routes_follow_resource_routes(self) -> None:
        group = ResourceGroup(
            'articles',
            options=ResourceOptions(has_one='author'),
            defaults=ApiDefaults(controller=ArticlesController),
        )
        names = [route.get_name() for route in group.compile()]
        assert names[:5] == ['articles.index', 'articles.create', 'articles.read', 'articles.update', 'articles.delete']
        assert names[5] == 'articles.relationships.author'

    def test_inherit_group_middleware(self) -> None:
        for route in _relationship_routes(has_many='comments'):
            assert route.get_middleware() == ['json-api.authorize:default']

    def test_route_defaults(self) -> None:
        route = _relationship_routes(has_one='author')[0]
        assert route.get_defaults() == {'resource_type': 'articles', 'relationship_name': 'author'}

    def test_dasherized_relationship_url(self) -> None:
        route = _relationship_routes('blogPosts', has_many='relatedPosts')[1]
        assert route.get_uri() == 'blog-posts/{resource_id}/relationships/related-posts'
        assert route.get_name() == 'blogPosts.relationships.relatedPosts.read'
        assert route.get_defaults()['relationship_name'] == 'relatedPosts'

    def test_id_constraint_applies(self) -> None:
        route = _relationship_routes(has_one='author', id='[0-9]+')[0]
        assert route.get_wheres() == {'resource_id': '[0-9]+'}

    def test_resource_type_named_relationships_keeps_group_prefix(self) -> None:
        names = [route.get_name() for route in _relationship_routes('relationships', has_one='author')]
        assert names == [
            'relationships.relationships.author',
            'relationships.relationships.author.read',
            'relationships.relationships.author.replace',
        ]
