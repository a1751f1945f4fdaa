"""
Visibility tiers.

EXPORTED implies PUBLIC. Modules store visibility as two growing name sets
(public, exported); this enum is the per-name view of those sets.
"""

from enum import Enum


class Visibility(Enum):
    PRIVATE = "private"
    PUBLIC = "public"
    EXPORTED = "exported"

    @property
    def is_public(self) -> bool:
        """True for PUBLIC and EXPORTED (qualified access allowed)"""
        return self is not Visibility.PRIVATE

    @property
    def is_exported(self) -> bool:
        return self is Visibility.EXPORTED
