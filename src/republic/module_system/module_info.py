"""
Module System Types

In-process namespace model the republication engine operates on.

Rust Pattern: rustc_resolve::module::Module

A Module owns:
- a symbol table (name -> Binding), including bindings created by imports
- a `public` name set and an `exported` name set (exported ⊆ public)
- the list of modules it `using`s, whose exported names are reachable
  by lookup without being bound locally

Every module binds its own name to itself and exports it.
Visibility is only ever widened.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Set, Tuple, TYPE_CHECKING

from ..shared.errors import UndefinedNameError, VisibilityConflictError
from ..shared.visibility import Visibility
from ..utils.config import PATH_SEPARATOR

if TYPE_CHECKING:
    from .registry import ModuleRegistry

logger = logging.getLogger(__name__)


@dataclass
class Binding:
    """One name bound in a module."""
    name: str
    value: Any
    owner: Module = field(repr=False)
    imported: bool = False
    origin: Optional[Module] = field(default=None, repr=False)


@dataclass(eq=False)
class Module:
    """
    A named namespace node in the module tree.

    Rust Pattern: rustc_resolve::module::Module
    """
    name: str
    parent: Optional[Module] = field(default=None, repr=False)
    registry: Optional[ModuleRegistry] = field(default=None, repr=False)
    _bindings: Dict[str, Binding] = field(default_factory=dict, repr=False)
    _public: Set[str] = field(default_factory=set, repr=False)
    _exported: Set[str] = field(default_factory=set, repr=False)
    _using: List[Module] = field(default_factory=list, repr=False)

    def __post_init__(self):
        self._bindings[self.name] = Binding(self.name, self, self)
        self._public.add(self.name)
        self._exported.add(self.name)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    def fullname(self) -> Tuple[str, ...]:
        """Path from the root, e.g. ('Main', 'Outer', 'Inner')"""
        if self.parent is None:
            return (self.name,)
        return self.parent.fullname() + (self.name,)

    @property
    def qualified_name(self) -> str:
        return PATH_SEPARATOR.join(self.fullname())

    def define_submodule(self, name: str) -> Module:
        """Create a child module bound (privately) under `name`."""
        submodule = Module(name, parent=self, registry=self.registry)
        self.bind(name, submodule)
        logger.debug(f"Defined submodule {submodule.qualified_name}")
        return submodule

    # ------------------------------------------------------------------
    # Bindings
    # ------------------------------------------------------------------

    def bind(self, name: str, value: Any, imported: bool = False,
             origin: Optional[Module] = None) -> Binding:
        """Bind `name` in this module, replacing any previous binding."""
        binding = Binding(name, value, self, imported=imported, origin=origin)
        self._bindings[name] = binding
        return binding

    def has_binding(self, name: str) -> bool:
        """True if `name` is bound in this module's own symbol table."""
        return name in self._bindings

    def binding(self, name: str) -> Optional[Binding]:
        """Own binding for `name` (no lookup through used modules)."""
        return self._bindings.get(name)

    def add_using(self, upstream: Module) -> None:
        if upstream not in self._using:
            self._using.append(upstream)

    @property
    def used_modules(self) -> List[Module]:
        return list(self._using)

    def lookup(self, name: str) -> Optional[Binding]:
        """
        Resolve `name` as seen from inside this module: own bindings first,
        then names exported by used modules (recursively).
        """
        return self._lookup(name, set())

    def _lookup(self, name: str, seen: Set[int]) -> Optional[Binding]:
        if id(self) in seen:
            return None
        seen.add(id(self))
        if name in self._bindings:
            return self._bindings[name]
        for upstream in self._using:
            if upstream.is_exported(name):
                found = upstream._lookup(name, seen)
                if found is not None:
                    return found
        return None

    def get(self, name: str) -> Any:
        """Value of `name` (qualified access, Module.name)."""
        found = self.lookup(name)
        if found is None:
            raise UndefinedNameError(f"'{name}' is not defined in module '{self.qualified_name}'")
        return found.value

    def names(self, all: bool = False, imported: bool = False) -> List[str]:
        """
        Names known to this module, sorted.

        all=False keeps only public names; imported=False drops names bound
        by import/using. Names declared public or exported are always
        candidates, bound locally or not.
        """
        result: Set[str] = set()
        for name, binding in self._bindings.items():
            if binding.imported and not imported:
                continue
            result.add(name)
        result |= self._public
        if not all:
            result = {n for n in result if n in self._public}
        return sorted(result)

    # ------------------------------------------------------------------
    # Visibility
    # ------------------------------------------------------------------

    def is_public(self, name: str) -> bool:
        return name in self._public

    def is_exported(self, name: str) -> bool:
        return name in self._exported

    def visibility(self, name: str) -> Visibility:
        if name in self._exported:
            return Visibility.EXPORTED
        if name in self._public:
            return Visibility.PUBLIC
        return Visibility.PRIVATE

    def public_names(self) -> Set[str]:
        """All public names (including exported ones)."""
        return set(self._public)

    def exported_names(self) -> Set[str]:
        return set(self._exported)

    def public(self, *names: str) -> None:
        """
        `public a, b` declaration.

        Raises VisibilityConflictError for a name that is already exported.
        """
        for name in names:
            if name in self._exported:
                raise VisibilityConflictError(self.qualified_name, name, "public", "exported")
        self._public.update(names)

    def export(self, *names: str) -> None:
        """
        `export a, b` declaration.

        Raises VisibilityConflictError for a name that is already public
        but not exported.
        """
        for name in names:
            if name in self._public and name not in self._exported:
                raise VisibilityConflictError(self.qualified_name, name, "exported", "public")
        self._exported.update(names)
        self._public.update(names)

    def __str__(self) -> str:
        return f"Module({self.qualified_name}, {len(self._bindings)} bindings, {len(self._public)} public)"

    def __repr__(self) -> str:
        return (f"Module(name={self.qualified_name!r}, "
                f"public={sorted(self._public - self._exported)}, "
                f"exported={sorted(self._exported)})")
