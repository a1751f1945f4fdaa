"""
Clause Visitor Pattern

Abstract visitor over the five consumption-clause shapes. Each clause
node implements accept(); consumers (validation, republication) subclass
ClauseVisitor and get one visit_* method per shape, so a missing shape is
an abstract-method error at construction time rather than a silent
fall-through.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar, TYPE_CHECKING

if TYPE_CHECKING:
    from .clauses import (
        BlockClause,
        DottedImportClause,
        ModuleDefinitionClause,
        QualifiedNamesClause,
        WholeModuleClause,
    )

T = TypeVar('T')


class ClauseVisitor(ABC, Generic[T]):
    """Visitor over consumption clauses."""

    @abstractmethod
    def visit_block(self, clause: 'BlockClause') -> T:
        ...

    @abstractmethod
    def visit_module_definition(self, clause: 'ModuleDefinitionClause') -> T:
        ...

    @abstractmethod
    def visit_whole_module(self, clause: 'WholeModuleClause') -> T:
        ...

    @abstractmethod
    def visit_qualified_names(self, clause: 'QualifiedNamesClause') -> T:
        ...

    @abstractmethod
    def visit_dotted_import(self, clause: 'DottedImportClause') -> T:
        ...
