"""
Shared fixtures for the JSON:API routing tests

Fixture layout:
    ├── ArticlesController: controller answering every JSON:API action
    ├── defaults: ApiDefaults pointing at ArticlesController
    └── router: empty Router
"""
import pytest
from sanic import response

from larasanic_jsonapi.http import RequestInterpreter
from larasanic_jsonapi.routing import ApiDefaults, Router
from larasanic_jsonapi.support import Config


class ArticlesController:
    """Echoes what the request interpreter sees"""

    async def _describe(self, request, action):
        interpreter = RequestInterpreter.from_request(request)
        return response.json({
            'action': action,
            'resource_type': interpreter.get_resource_type(),
            'resource_id': interpreter.get_resource_id(),
            'relationship_name': interpreter.get_relationship_name(),
            'relationship_data': interpreter.is_relationship_data(),
        })

    async def index(self, request):
        return await self._describe(request, 'index')

    async def create(self, request):
        return await self._describe(request, 'create')

    async def read(self, request, resource_id):
        return await self._describe(request, 'read')

    async def update(self, request, resource_id):
        return await self._describe(request, 'update')

    async def delete(self, request, resource_id):
        return await self._describe(request, 'delete')

    async def publish(self, request, resource_id):
        return await self._describe(request, 'publish')

    async def read_related_resource(self, request, resource_id):
        return await self._describe(request, 'read_related_resource')

    async def read_relationship(self, request, resource_id):
        return await self._describe(request, 'read_relationship')

    async def replace_relationship(self, request, resource_id):
        return await self._describe(request, 'replace_relationship')

    async def add_to_relationship(self, request, resource_id):
        return await self._describe(request, 'add_to_relationship')

    async def remove_from_relationship(self, request, resource_id):
        return await self._describe(request, 'remove_from_relationship')


@pytest.fixture
def defaults():
    return ApiDefaults(controller=ArticlesController)


@pytest.fixture
def router():
    return Router()


@pytest.fixture(autouse=True)
def clean_config():
    yield
    Config.clear_runtime_overrides()


def signature(routes):
    """(methods, uri, name, middleware) of each route, in order"""
    return [
        (tuple(route.get_methods()), route.get_uri(), route.get_name(), tuple(route.get_middleware()))
        for route in routes
    ]
