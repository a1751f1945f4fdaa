"""
Conflict-Safe Declarator

Batch visibility declarations that drop names whose transition would be
illegal instead of failing:

- declare_public skips names already exported (public-after-export)
- declare_exported skips names already public but not exported
  (export-after-public)

A declaration the consumer made before republication is therefore
authoritative. The module's visibility sets are read fresh on every call.
"""

import logging
from typing import Iterable, List

from ..module_system.module_info import Module

logger = logging.getLogger(__name__)


def _unique(names: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(names))


def declare_public(module: Module, names: Iterable[str]) -> List[str]:
    """Declare `names` public in `module`; returns the names actually declared."""
    requested = _unique(names)
    remaining = [n for n in requested if not module.is_exported(n)]
    skipped = len(requested) - len(remaining)
    if skipped:
        logger.debug(f"declare_public({module.qualified_name}): kept {skipped} already-exported name(s)")
    if remaining:
        module.public(*remaining)
        logger.debug(f"declare_public({module.qualified_name}): {remaining}")
    return remaining


def declare_exported(module: Module, names: Iterable[str]) -> List[str]:
    """Declare `names` exported in `module`; returns the names actually declared."""
    requested = _unique(names)
    remaining = [n for n in requested if not module.is_public(n) or module.is_exported(n)]
    skipped = len(requested) - len(remaining)
    if skipped:
        logger.debug(f"declare_exported({module.qualified_name}): kept {skipped} public-only name(s)")
    if remaining:
        module.export(*remaining)
        logger.debug(f"declare_exported({module.qualified_name}): {remaining}")
    return remaining
