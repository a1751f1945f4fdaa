"""
Republic: three-tier symbol visibility re-publication.

A consuming module re-exposes names from upstream modules as public
(qualified access) or exported (also brought in by `using`), following the
tier each name already holds upstream and a per-invocation `reexport`
policy.

    registry = ModuleRegistry()
    main = registry.new_root("Main")
    core = main.define_submodule("Core")
    core.bind("A", 1)
    core.export("A")
    api = main.define_submodule("API")
    republish_source(api, "using Main.Core")
    api.is_public("A"), api.is_exported("A")   # (True, False)
"""

from .shared import (
    Visibility,
    SourceLocation,
    RepublicError,
    UnresolvedPathError,
    MalformedClauseError,
    UndefinedNameError,
    VisibilityConflictError,
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
from .module_system import Module, Binding, ModuleRegistry, PathResolver, Binder, resolve_module
from .republication import (
    extract_names,
    classify,
    declare_public,
    declare_exported,
    republish_names,
    republish_symbols,
    Republisher,
    republic,
)
from .frontend import ClauseParser, parse_clause
from .driver import RepublicDriver, republish_source

__all__ = [
    'Visibility',
    'SourceLocation',
    'RepublicError',
    'UnresolvedPathError',
    'MalformedClauseError',
    'UndefinedNameError',
    'VisibilityConflictError',
    'Clause',
    'ModulePath',
    'ImportItem',
    'WholeModuleClause',
    'QualifiedNamesClause',
    'DottedImport',
    'DottedImportClause',
    'ModuleDefinitionClause',
    'BlockClause',
    'Module',
    'Binding',
    'ModuleRegistry',
    'PathResolver',
    'Binder',
    'resolve_module',
    'extract_names',
    'classify',
    'declare_public',
    'declare_exported',
    'republish_names',
    'republish_symbols',
    'Republisher',
    'republic',
    'ClauseParser',
    'parse_clause',
    'RepublicDriver',
    'republish_source',
]
