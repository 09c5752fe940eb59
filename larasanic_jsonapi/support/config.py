"""
Config
Dot-notation access to config/<file>.py modules
"""
import importlib
import threading
from typing import Any, Dict, Optional

_MISSING = object()


class Config:
    """
    Read settings as '<file>.<KEY>[.<key>...]', case-insensitively

    The first segment names a module under the config package, loaded on
    first use; the rest walks its attributes and dict keys.

    Usage:
        Config.get('json_api.DEFAULT_AUTHORIZER')
        Config.get('app.ALLOWED_LOGGING_HANDLERS', {})
        Config.set('json_api.DEFAULT_CONTROLLER', 'app.controllers.ResourceController')

    Expected layout:
        config/
        ├── app.py
        └── json_api.py     DEFAULT_AUTHORIZER, DEFAULT_VALIDATORS, DEFAULT_CONTROLLER
    """

    _lock = threading.Lock()
    _modules: Dict[str, Any] = {}
    _overrides: Dict[str, Any] = {}

    @classmethod
    def get(cls, key: str, default: Any = None) -> Any:
        key = key.lower()
        if key in cls._overrides:
            return cls._overrides[key]

        file_name, *path = key.split('.')
        value = cls.all(file_name)
        if value is None:
            return default

        for part in path:
            value = cls._lookup(value, part)
            if value is _MISSING:
                return default

        return value

    @staticmethod
    def _lookup(value: Any, part: str) -> Any:
        """Find `part` among dict keys or module/object attributes, ignoring case"""
        if isinstance(value, dict):
            candidates = value.items()
        elif hasattr(value, '__dict__'):
            candidates = ((name, getattr(value, name)) for name in dir(value))
        else:
            return _MISSING

        for name, item in candidates:
            if str(name).lower() == part:
                return item
        return _MISSING

    @classmethod
    def _load(cls, file_name: str):
        with cls._lock:
            if file_name in cls._modules:
                return
            try:
                cls._modules[file_name] = importlib.import_module(f'config.{file_name}')
            except ImportError:
                # No such config file: every key in it reads as its default
                cls._modules[file_name] = None

    @classmethod
    def set(cls, key: str, value: Any):
        """Override a key for the life of the process"""
        cls._overrides[key.lower()] = value

    @classmethod
    def has(cls, key: str) -> bool:
        return cls.get(key) is not None

    @classmethod
    def all(cls, file_name: str) -> Optional[Any]:
        """The config module for `file_name`, or None if there is none"""
        file_name = file_name.lower()
        if file_name not in cls._modules:
            cls._load(file_name)
        return cls._modules[file_name]

    @classmethod
    def clear_runtime_overrides(cls):
        cls._overrides.clear()
