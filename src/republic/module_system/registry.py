"""
Module Registry

Explicit owner of the loaded module tree. Absolute module paths start at
one of the registry's root modules. One registry per host session; it is
passed to the path resolver rather than looked up globally, so resolution
can be exercised against a throwaway registry in isolation.
"""

import logging
from typing import Dict, List

from .module_info import Module
from ..shared.errors import UnresolvedPathError

logger = logging.getLogger(__name__)


class ModuleRedefinitionError(ValueError):
    """Raised when a root module name is registered twice."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"root module '{name}' is already registered")


class ModuleRegistry:
    """Root modules by name."""

    def __init__(self) -> None:
        self._roots: Dict[str, Module] = {}

    def new_root(self, name: str) -> Module:
        """Create and register a root-level module."""
        if name in self._roots:
            raise ModuleRedefinitionError(name)
        module = Module(name, registry=self)
        self._roots[name] = module
        logger.debug(f"ModuleRegistry: registered root module '{name}'")
        return module

    def has_root(self, name: str) -> bool:
        return name in self._roots

    def root_module(self, name: str) -> Module:
        """Root module named `name`; UnresolvedPathError if not loaded."""
        module = self._roots.get(name)
        if module is None:
            raise UnresolvedPathError(
                f"root module '{name}' is not loaded",
                note=f"loaded root modules: {', '.join(sorted(self._roots)) or '(none)'}",
            )
        return module

    def roots(self) -> List[Module]:
        return [self._roots[name] for name in sorted(self._roots)]

    def __contains__(self, name: str) -> bool:
        return name in self._roots

    def __repr__(self) -> str:
        return f"ModuleRegistry(roots={sorted(self._roots)})"
