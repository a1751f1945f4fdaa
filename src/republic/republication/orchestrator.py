"""
Republication Orchestrator

Entry point of the engine. Dispatches over the clause shape, performs the
plain host `using`/`import` the clause describes, then declares the
visibility of the consumed names in the consuming module:

    reexport=False (default): every republished name becomes public
    reexport=True:            exported upstream -> exported here,
                              public-only upstream -> public here

Public-only upstream names are bound locally before they are declared,
because a whole-module `using` only makes exported names reachable.

Rust Pattern: rustc_resolve::imports (`pub use` re-exports)

Clause validation runs on the whole tree before any resolution. Path
resolution for a clause completes before that clause binds anything, so
an UnresolvedPathError leaves the clause without partial effects.
"""

import logging
from typing import Any, List, Optional, Sequence, Tuple

from .classifier import classify
from .declarator import declare_exported, declare_public
from .aliases import extract_names
from .validation import validate
from ..module_system.binder import Binder
from ..module_system.module_info import Module
from ..module_system.path_resolver import PathResolver
from ..module_system.registry import ModuleRegistry
from ..shared.clause_visitor import ClauseVisitor
from ..shared.clauses import (
    BlockClause,
    Clause,
    DottedImportClause,
    ModuleDefinitionClause,
    ModulePath,
    QualifiedNamesClause,
    WholeModuleClause,
)
from ..shared.errors import MalformedClauseError, UnresolvedPathError
from ..utils.config import DEFAULT_REEXPORT, POLICY_KEYWORD

logger = logging.getLogger(__name__)


def republish_names(consumer: Module, upstream: Module, reexport: bool,
                    binder: Optional[Binder] = None) -> None:
    """Republish everything `upstream` made public or exported."""
    binder = binder or Binder()
    classification = classify(upstream)
    exported = sorted(classification.exported)
    public_only = sorted(classification.public_only)

    if reexport:
        declare_exported(consumer, exported)
    else:
        declare_public(consumer, exported)

    for name in public_only:
        if consumer.has_binding(name):
            continue
        if upstream.lookup(name) is None:
            # Declared public upstream but never bound there
            logger.debug(f"republish_names: '{upstream.qualified_name}.{name}' has no binding to import")
            continue
        binder.import_symbol(consumer, upstream, name)
    declare_public(consumer, public_only)


def republish_symbols(consumer: Module, upstream: Module,
                      orig_names: Sequence[str], local_names: Sequence[str],
                      reexport: bool) -> None:
    """Republish explicitly listed (possibly renamed) upstream names."""
    exported: List[str] = []
    public_only: List[str] = []
    for orig, local_name in zip(orig_names, local_names):
        if reexport and upstream.is_exported(orig):
            exported.append(local_name)
        else:
            public_only.append(local_name)
    declare_exported(consumer, exported)
    declare_public(consumer, public_only)


class _RepublishVisitor(ClauseVisitor[None]):
    """Per-invocation state: consuming module and policy."""

    def __init__(self, consumer: Module, reexport: bool, resolver: PathResolver, binder: Binder):
        self.consumer = consumer
        self.reexport = reexport
        self.resolver = resolver
        self.binder = binder

    def visit_block(self, clause: BlockClause) -> None:
        for sub in clause.clauses:
            sub.accept(self)

    def visit_module_definition(self, clause: ModuleDefinitionClause) -> None:
        submodule = self.consumer.define_submodule(clause.name)
        if clause.body is not None:
            clause.body(submodule)
        self.visit_whole_module(WholeModuleClause((ModulePath(1, (clause.name,)),)))

    def visit_whole_module(self, clause: WholeModuleClause) -> None:
        upstreams = [self.resolver.resolve(path, self.consumer) for path in clause.modules]
        for upstream in upstreams:
            self.binder.using(self.consumer, upstream)
        for upstream in upstreams:
            republish_names(self.consumer, upstream, self.reexport, self.binder)

    def visit_qualified_names(self, clause: QualifiedNamesClause) -> None:
        upstream = self.resolver.resolve(clause.module, self.consumer)
        orig_names, local_names = extract_names(clause.items)
        self._import_all(upstream, orig_names, local_names)
        republish_symbols(self.consumer, upstream, orig_names, local_names, self.reexport)

    def visit_dotted_import(self, clause: DottedImportClause) -> None:
        plan: List[Tuple[Any, Module]] = []
        for entry in clause.entries:
            if entry.is_module_import:
                plan.append((entry, self.resolver.resolve(entry.path, self.consumer)))
            else:
                owner = self.resolver.resolve(entry.owner, self.consumer)
                self._require(owner, [entry.symbol])
                plan.append((entry, owner))

        for entry, target in plan:
            if entry.is_module_import:
                # import Foo as F
                self.binder.import_module(self.consumer, target, entry.local_name)
                if self.reexport:
                    declare_exported(self.consumer, [entry.local_name])
                else:
                    declare_public(self.consumer, [entry.local_name])
            else:
                self._import_all(target, [entry.symbol], [entry.local_name])
                republish_symbols(self.consumer, target, [entry.symbol], [entry.local_name], self.reexport)

    def _require(self, upstream: Module, names: Sequence[str]) -> None:
        for name in names:
            if upstream.lookup(name) is None:
                raise UnresolvedPathError(
                    f"'{name}' is not defined in module '{upstream.qualified_name}'"
                )

    def _import_all(self, upstream: Module, orig_names: Sequence[str], local_names: Sequence[str]) -> None:
        # Check every name first so a missing one leaves the clause without effects
        self._require(upstream, orig_names)
        for orig, local_name in zip(orig_names, local_names):
            self.binder.import_symbol(self.consumer, upstream, orig, local_name)


class Republisher:
    """
    Reusable republication engine bound to one module registry.

    Carries no state across invocations; policy and consuming module are
    per call.
    """

    def __init__(self, registry: ModuleRegistry, binder: Optional[Binder] = None):
        self.registry = registry
        self.resolver = PathResolver(registry)
        self.binder = binder or Binder()

    def republish(self, module: Module, clause: Clause, reexport: bool = DEFAULT_REEXPORT) -> None:
        """
        Apply `clause` to `module` under the given policy.

        Raises:
            MalformedClauseError: clause (or policy) has an unrecognized shape;
                raised before any mutation.
            UnresolvedPathError: a module path or imported symbol does not resolve.
        """
        if not isinstance(reexport, bool):
            raise MalformedClauseError(
                f"expected `{POLICY_KEYWORD}=true` or `{POLICY_KEYWORD}=false`, got {reexport!r}"
            )
        validate(clause)
        logger.debug(f"republish into {module.qualified_name} ({POLICY_KEYWORD}={reexport}): {clause}")
        clause.accept(_RepublishVisitor(module, reexport, self.resolver, self.binder))


def republic(module: Module, clause: Clause, reexport: bool = DEFAULT_REEXPORT) -> None:
    """Republish `clause` into `module` using the module's own registry."""
    if module.registry is None:
        raise UnresolvedPathError(
            f"module '{module.qualified_name}' is not attached to a registry"
        )
    Republisher(module.registry).republish(module, clause, reexport)
