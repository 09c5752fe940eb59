"""Tests for larasanic_jsonapi.routing.route_middleware_registry."""

import pytest
from sanic import response

from larasanic_jsonapi.exceptions import ConfigurationException
from larasanic_jsonapi.middleware import Middleware
from larasanic_jsonapi.routing import RouteMiddlewareRegistry


class RecordingMiddleware(Middleware):
    def __init__(self, name, calls, stop=False):
        self.name = name
        self.calls = calls
        self.stop = stop

    async def before_request(self, request):
        self.calls.append(f"before:{self.name}")
        if self.stop:
            return response.json({'stopped': self.name}, status=403)
        return None

    async def after_response(self, request, result):
        self.calls.append(f"after:{self.name}")
        return result


@pytest.fixture
def calls():
    return []


class TestResolve:
    def test_plain_name(self, calls) -> None:
        registry = RouteMiddlewareRegistry()
        auth = RecordingMiddleware('auth', calls)
        registry.register('auth', auth)
        assert registry.resolve('auth') is auth
        assert registry.get('auth') is auth

    def test_parameterized_entry_uses_factory_once(self, calls) -> None:
        registry = RouteMiddlewareRegistry()
        built = []

        def factory(parameter):
            built.append(parameter)
            return RecordingMiddleware(parameter, calls)

        registry.register_factory('json-api.authorize', factory)
        first = registry.resolve('json-api.authorize:articles')
        second = registry.resolve('json-api.authorize:articles')

        assert first is second
        assert first.name == 'articles'
        assert built == ['articles']

    def test_unknown_entry(self) -> None:
        registry = RouteMiddlewareRegistry()
        with pytest.raises(ConfigurationException, match="'json-api.validate:articles' not found"):
            registry.resolve('json-api.validate:articles')

    def test_parameter_requires_a_factory(self, calls) -> None:
        registry = RouteMiddlewareRegistry()
        registry.register('auth', RecordingMiddleware('auth', calls))
        assert registry.has('auth')
        assert not registry.has('auth:admin')
        with pytest.raises(ConfigurationException):
            registry.resolve('auth:admin')

    def test_parse(self) -> None:
        assert RouteMiddlewareRegistry.parse('json-api.authorize:articles') == ('json-api.authorize', 'articles')
        assert RouteMiddlewareRegistry.parse('auth') == ('auth', None)

    def test_get_registered(self, calls) -> None:
        registry = RouteMiddlewareRegistry()
        registry.register('auth', RecordingMiddleware('auth', calls))
        registry.register_factory('json-api.authorize', lambda parameter: None)
        assert registry.get_registered() == ['auth', 'json-api.authorize']


class TestWrapHandler:
    @pytest.mark.asyncio
    async def test_runs_in_list_order(self, calls) -> None:
        registry = RouteMiddlewareRegistry()
        registry.register('throttle', RecordingMiddleware('throttle', calls))
        registry.register('auth', RecordingMiddleware('auth', calls))

        async def handler(request):
            calls.append('handler')
            return 'ok'

        wrapped = registry.wrap_handler(handler, ['throttle', 'auth'])

        assert await wrapped(object()) == 'ok'
        assert calls == ['before:throttle', 'before:auth', 'handler', 'after:auth', 'after:throttle']
        assert wrapped._middleware_name == 'throttle'

    @pytest.mark.asyncio
    async def test_short_circuit(self, calls) -> None:
        registry = RouteMiddlewareRegistry()
        registry.register('deny', RecordingMiddleware('deny', calls, stop=True))
        registry.register('auth', RecordingMiddleware('auth', calls))

        async def handler(request):
            calls.append('handler')

        result = await registry.wrap_handler(handler, ['deny', 'auth'])(object())

        assert result.status == 403
        assert calls == ['before:deny']

    def test_no_middleware_returns_handler(self) -> None:
        async def handler(request):
            return None

        assert RouteMiddlewareRegistry().wrap_handler(handler, []) is handler
