"""
Visibility Classifier

Partitions an upstream module's names by the tier the upstream module
itself recorded. All known names are enumerated (own definitions, names
brought in by the upstream's own imports, and names it declared without
binding), so a chain of re-publishing modules loses nothing. Names with
no recorded tier stay private and are never republished.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet

from ..module_system.module_info import Module

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class VisibilityClassification:
    """Disjoint name sets of one upstream module."""
    exported: FrozenSet[str]
    public_only: FrozenSet[str]

    def __repr__(self) -> str:
        return (f"VisibilityClassification(exported={sorted(self.exported)}, "
                f"public_only={sorted(self.public_only)})")


def classify(upstream: Module) -> VisibilityClassification:
    """Read-only classification of `upstream`'s names."""
    exported = set()
    public_only = set()
    for name in upstream.names(all=True, imported=True):
        if upstream.is_exported(name):
            exported.add(name)
        elif upstream.is_public(name):
            public_only.add(name)
    logger.debug(
        f"classify({upstream.qualified_name}): {len(exported)} exported, {len(public_only)} public-only"
    )
    return VisibilityClassification(frozenset(exported), frozenset(public_only))
