"""
Host Binding Mechanism

The plain `using` / `import` actions the republication engine builds on:

- using(consumer, upstream):   upstream's exported names become reachable
                               in consumer; upstream is bound under its name
- import_symbol(...):          bind one upstream name locally (optionally renamed)
- import_module(...):          bind a module handle locally under an alias

None of these touch visibility; declaring tiers is the engine's job.

Rust Pattern: rustc_resolve::imports (plain `use`, before `pub use`)

This class is stateless and can be shared/reused.
"""

import logging
from typing import Optional

from .module_info import Binding, Module
from ..shared.errors import UnresolvedPathError

logger = logging.getLogger(__name__)


class Binder:
    """Creates bindings in a consuming module."""

    def using(self, consumer: Module, upstream: Module) -> None:
        consumer.add_using(upstream)
        if not consumer.has_binding(upstream.name):
            consumer.bind(upstream.name, upstream, imported=True, origin=upstream)
        logger.debug(f"Binder: {consumer.qualified_name} using {upstream.qualified_name}")

    def import_symbol(
        self,
        consumer: Module,
        upstream: Module,
        name: str,
        local_name: Optional[str] = None,
    ) -> Binding:
        """
        Bind upstream's `name` in consumer as `local_name` (default: `name`).

        An existing local binding to the same value is kept. An existing
        binding to a different value wins and the import is ignored with a
        warning.

        Raises:
            UnresolvedPathError: `name` is not reachable in upstream.
        """
        if local_name is None:
            local_name = name
        source = upstream.lookup(name)
        if source is None:
            raise UnresolvedPathError(
                f"'{name}' is not defined in module '{upstream.qualified_name}'"
            )

        existing = consumer.binding(local_name)
        if existing is not None:
            if existing.value is not source.value:
                logger.warning(
                    f"import of {upstream.qualified_name}.{name} into {consumer.qualified_name} "
                    f"conflicts with an existing identifier '{local_name}'; ignored"
                )
            return existing

        logger.debug(f"Binder: {consumer.qualified_name}.{local_name} <- {upstream.qualified_name}.{name}")
        return consumer.bind(local_name, source.value, imported=True, origin=upstream)

    def import_module(self, consumer: Module, upstream: Module, local_name: Optional[str] = None) -> Binding:
        """Bind the module handle `upstream` in consumer (import Foo as F)."""
        if local_name is None:
            local_name = upstream.name
        existing = consumer.binding(local_name)
        if existing is not None:
            if existing.value is not upstream:
                logger.warning(
                    f"import of module {upstream.qualified_name} into {consumer.qualified_name} "
                    f"conflicts with an existing identifier '{local_name}'; ignored"
                )
            return existing
        logger.debug(f"Binder: {consumer.qualified_name}.{local_name} <- module {upstream.qualified_name}")
        return consumer.bind(local_name, upstream, imported=True, origin=upstream)
