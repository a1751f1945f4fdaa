"""
Module Path Resolution

Pure path resolution over the already-loaded module tree. No filesystem
or network access: every segment must name an existing module binding.

Rust Pattern: rustc_resolve path resolution with self::/super:: prefixes

- Main.Foo.Bar  -> root 'Main', then child 'Foo', then child 'Bar'
- .Inner        -> current module, then child 'Inner'
- ..Sibling     -> parent of current module, then child 'Sibling'
- .             -> current module itself

This class is stateless apart from the registry it reads and can be
shared/reused.
"""

import logging

from .module_info import Module
from .registry import ModuleRegistry
from ..shared.clauses import ModulePath, PathLike
from ..shared.errors import UnresolvedPathError

logger = logging.getLogger(__name__)


class PathResolver:
    """Resolves ModulePath expressions to Module handles."""

    def __init__(self, registry: ModuleRegistry):
        self.registry = registry

    def resolve(self, path: PathLike, current: Module) -> Module:
        """
        Resolve `path` as written inside module `current`.

        Raises:
            UnresolvedPathError: a segment is missing or not a module, or a
                relative path ascends past the root.
        """
        if isinstance(path, str):
            path = ModulePath.from_dotted(path)
        if path.is_empty:
            raise UnresolvedPathError("empty module path")

        if path.is_relative:
            module = current
            for _ in range(path.relative_depth - 1):
                if module.parent is None:
                    raise UnresolvedPathError(
                        f"relative path '{path}' ascends past root module '{module.name}'"
                    )
                module = module.parent
            children = path.segments
        else:
            module = self.registry.root_module(path.segments[0])
            children = path.segments[1:]

        for segment in children:
            module = self._child(module, segment, path)

        logger.debug(f"PathResolver: '{path}' from {current.qualified_name} -> {module.qualified_name}")
        return module

    def _child(self, module: Module, segment: str, path: ModulePath) -> Module:
        binding = module.lookup(segment)
        if binding is None:
            raise UnresolvedPathError(
                f"'{segment}' is not defined in module '{module.qualified_name}' "
                f"(while resolving '{path}')"
            )
        if not isinstance(binding.value, Module):
            raise UnresolvedPathError(
                f"'{module.qualified_name}.{segment}' is not a module "
                f"(while resolving '{path}')"
            )
        return binding.value


def resolve_module(current: Module, path: PathLike) -> Module:
    """Resolve `path` from inside `current` using the module's own registry."""
    if current.registry is None:
        raise UnresolvedPathError(
            f"module '{current.qualified_name}' is not attached to a registry"
        )
    return PathResolver(current.registry).resolve(path, current)
