"""Module system: namespace model, registry, path resolution, host bindings."""

from .module_info import Module, Binding
from .registry import ModuleRegistry, ModuleRedefinitionError
from .path_resolver import PathResolver, resolve_module
from .binder import Binder

__all__ = [
    'Module',
    'Binding',
    'ModuleRegistry',
    'ModuleRedefinitionError',
    'PathResolver',
    'resolve_module',
    'Binder',
]
