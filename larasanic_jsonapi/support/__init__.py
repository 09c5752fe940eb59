"""
Support Classes
"""

from larasanic_jsonapi.support.config import Config
from larasanic_jsonapi.support.class_loader import ClassLoader
from larasanic_jsonapi.support.str import Str

__all__ = [
    'Config',
    'ClassLoader',
    'Str',
]
