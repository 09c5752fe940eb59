"""
API Resource Declarations
Read-only inputs of the route compiler: the resource descriptor, its route
options and the API-wide defaults
"""
from types import MappingProxyType
from typing import Any, Mapping, Optional

from larasanic_jsonapi.defaults import DEFAULT_CONFIG_NAME


def _freeze(value: Any) -> Any:
    """Recursively convert dicts to read-only mappings and lists to tuples"""
    if isinstance(value, Mapping):
        return MappingProxyType({key: _freeze(item) for key, item in value.items()})
    if isinstance(value, (list, tuple, set, frozenset)):
        return tuple(_freeze(item) for item in value)
    return value


class ApiResource:
    """
    Descriptor of one JSON:API resource type

    Usage:
        ApiResource('articles', authorizer='articles', validators='articles')
    """

    __slots__ = ('_resource_type', '_authorizer', '_validators')

    def __init__(
        self,
        resource_type: str,
        authorizer: Optional[str] = None,
        validators: Optional[str] = None
    ):
        object.__setattr__(self, '_resource_type', resource_type)
        object.__setattr__(self, '_authorizer', authorizer)
        object.__setattr__(self, '_validators', validators)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is read-only")

    def get_resource_type(self) -> str:
        return self._resource_type

    def get_authorizer(self) -> Optional[str]:
        """Identity of the authorizer registered for this resource"""
        return self._authorizer

    def get_validators(self) -> Optional[str]:
        """Identity of the validator set registered for this resource"""
        return self._validators

    def __eq__(self, other):
        if not isinstance(other, ApiResource):
            return NotImplemented
        return (self._resource_type, self._authorizer, self._validators) == \
            (other._resource_type, other._authorizer, other._validators)

    def __hash__(self):
        return hash((self._resource_type, self._authorizer, self._validators))

    def __repr__(self) -> str:
        return f"<ApiResource {self._resource_type}>"


class ResourceOptions:
    """
    Immutable route options for one resource type (Fluent-style access)

    Recognised keys:
        only, except       - action filters
        custom_methods     - {'publish': {'method': 'POST', 'url': 'publish'}}
        middleware         - route middleware applied before policies
        authorizer         - authorizer identity override
        validators         - validator set identity override
        controller         - controller class, dotted path or instance
        id                 - regex constraint for the resource id
        has_one, has_many  - relationship declarations

    Usage:
        options = ResourceOptions(only=['index', 'read'], has_many='comments')
        options.get('only')  # ('index', 'read')
    """

    __slots__ = ('_attributes',)

    def __init__(self, attributes: Optional[Mapping[str, Any]] = None, **options):
        merged = dict(attributes or {})
        merged.update(options)
        if 'except_' in merged:
            # 'except' is a keyword, so keyword callers spell it except_
            merged['except'] = merged.pop('except_')
        object.__setattr__(self, '_attributes', _freeze(merged))

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is read-only")

    def get(self, key: str, default: Any = None) -> Any:
        """Get an option, falling back to default when missing or None"""
        value = self._attributes.get(key)
        return default if value is None else value

    def has(self, key: str) -> bool:
        return self._attributes.get(key) is not None

    def all(self) -> Mapping[str, Any]:
        return self._attributes

    def __repr__(self) -> str:
        return f"<ResourceOptions {dict(self._attributes)!r}>"


class ApiDefaults:
    """
    API-wide defaults, passed explicitly to the route compiler

    Usage:
        defaults = ApiDefaults(authorizer='default', controller=ResourceController)
        defaults = ApiDefaults.from_config()
    """

    __slots__ = ('_authorizer', '_validators', '_controller')

    def __init__(
        self,
        authorizer: Optional[str] = None,
        validators: Optional[str] = None,
        controller: Any = None
    ):
        object.__setattr__(self, '_authorizer', authorizer)
        object.__setattr__(self, '_validators', validators)
        object.__setattr__(self, '_controller', controller)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is read-only")

    @classmethod
    def from_config(cls, config_name: str = DEFAULT_CONFIG_NAME) -> 'ApiDefaults':
        """
        Build defaults from config/<config_name>.py

        Reads DEFAULT_AUTHORIZER, DEFAULT_VALIDATORS and DEFAULT_CONTROLLER.
        """
        from larasanic_jsonapi.support import Config

        return cls(
            authorizer=Config.get(f'{config_name}.DEFAULT_AUTHORIZER'),
            validators=Config.get(f'{config_name}.DEFAULT_VALIDATORS'),
            controller=Config.get(f'{config_name}.DEFAULT_CONTROLLER'),
        )

    def get_authorizer(self) -> Optional[str]:
        return self._authorizer

    def get_validators(self) -> Optional[str]:
        return self._validators

    def get_controller(self) -> Any:
        return self._controller
