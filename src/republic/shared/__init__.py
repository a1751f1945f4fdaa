"""
Shared components: clause tree, visibility tiers, diagnostics.
"""

from .source_location import SourceLocation
from .visibility import Visibility
from .errors import (
    Diagnostic,
    format_diagnostic,
    RepublicError,
    UnresolvedPathError,
    MalformedClauseError,
    UndefinedNameError,
    VisibilityConflictError,
    RepublicImplementationError,
)
from .clause_visitor import ClauseVisitor
from .clauses import (
    Clause,
    ModulePath,
    ImportItem,
    WholeModuleClause,
    QualifiedNamesClause,
    DottedImport,
    DottedImportClause,
    ModuleDefinitionClause,
    BlockClause,
)
