"""
Pytest configuration and shared fixtures for the Republic test suite.

Every test gets a fresh ModuleRegistry with a `Main` root, so module trees
never leak between tests.
"""

import sys
import pytest
from typing import Any, Callable, Dict, Iterable, Optional, Set
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))
from republic.frontend.parser import ClauseParser
from republic.module_system.module_info import Module
from republic.module_system.registry import ModuleRegistry


# =============================================================================
# Helpers
# =============================================================================

def public_set(module: Module) -> Set[str]:
    """All public names of a module (exported ones included)."""
    return {n for n in module.names(all=True, imported=True) if module.is_public(n)}


def exported_set(module: Module) -> Set[str]:
    return {n for n in module.names(all=True, imported=True) if module.is_exported(n)}


# =============================================================================
# Session-scoped fixtures
# =============================================================================

@pytest.fixture(scope="session")
def session_parser():
    """Parser is stateless between parses; Lark grammar is built once."""
    return ClauseParser()


# =============================================================================
# Function-scoped fixtures (default - one per test)
# =============================================================================

@pytest.fixture
def registry():
    return ModuleRegistry()


@pytest.fixture
def main(registry):
    """The `Main` root module of a fresh registry."""
    return registry.new_root("Main")


@pytest.fixture
def make_module(main):
    """
    Factory for populated modules:

        make_module("Y", {"A": 1, "B": 2}, exported=["A"], public=["B"])

    Modules are created under `Main` unless `parent` is given.
    """
    def _make_module(
        name: str,
        values: Optional[Dict[str, Any]] = None,
        exported: Iterable[str] = (),
        public: Iterable[str] = (),
        parent: Optional[Module] = None,
    ) -> Module:
        module = (parent or main).define_submodule(name)
        for key, value in (values or {}).items():
            module.bind(key, value)
        exported = list(exported)
        public = list(public)
        if exported:
            module.export(*exported)
        if public:
            module.public(*public)
        return module

    return _make_module


@pytest.fixture
def public_names() -> Callable[[Module], Set[str]]:
    return public_set


@pytest.fixture
def exported_names() -> Callable[[Module], Set[str]]:
    return exported_set
