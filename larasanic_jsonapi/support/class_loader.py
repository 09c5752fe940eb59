"""
Class Loader
Resolves controllers configured as dotted paths
"""
import importlib
from typing import Type


class ClassLoader:
    @staticmethod
    def load(class_path: str) -> Type:
        """
        Import 'package.module.ClassName' and return the class

        Raises:
            ValueError: If the path has no module part
            ImportError: If the module cannot be imported
            AttributeError: If the module has no such class
        """
        module_path, _, class_name = class_path.rpartition('.')
        if not module_path:
            raise ValueError(f"'{class_path}' is not a dotted class path")

        return getattr(importlib.import_module(module_path), class_name)
