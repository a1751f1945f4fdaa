"""Republication engine: classification, conflict-safe declaration, orchestration."""

from .aliases import extract_names
from .classifier import classify, VisibilityClassification
from .declarator import declare_public, declare_exported
from .validation import ClauseValidator, validate
from .orchestrator import Republisher, republic, republish_names, republish_symbols

__all__ = [
    'extract_names',
    'classify',
    'VisibilityClassification',
    'declare_public',
    'declare_exported',
    'ClauseValidator',
    'validate',
    'Republisher',
    'republic',
    'republish_names',
    'republish_symbols',
]
