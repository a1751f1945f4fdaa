"""
Clause validation.

Runs over the whole clause tree before anything is resolved or bound, so
a malformed clause anywhere inside a block fails the invocation without
partial mutation.
"""

import re
from typing import Any, Optional

from ..shared.clause_visitor import ClauseVisitor
from ..shared.clauses import (
    BlockClause,
    Clause,
    DottedImport,
    DottedImportClause,
    ImportItem,
    ModuleDefinitionClause,
    ModulePath,
    QualifiedNamesClause,
    WholeModuleClause,
)
from ..shared.errors import MalformedClauseError
from ..utils.config import IMPORT_KEYWORD, NAME_PATTERN, USING_KEYWORD

_NAME_RE = re.compile(rf"^{NAME_PATTERN}$")


def is_valid_name(name: Any) -> bool:
    return isinstance(name, str) and _NAME_RE.match(name) is not None


class ClauseValidator(ClauseVisitor[None]):
    """Raises MalformedClauseError on the first structural problem."""

    def validate(self, clause: Any) -> None:
        if not isinstance(clause, Clause):
            raise MalformedClauseError(
                f"expected a consumption clause, got {type(clause).__name__}",
                help="use `using`, `import`, a module definition or a block",
            )
        clause.accept(self)

    def visit_block(self, clause: BlockClause) -> None:
        for sub in clause.clauses:
            self.validate(sub)

    def visit_module_definition(self, clause: ModuleDefinitionClause) -> None:
        if not is_valid_name(clause.name):
            self._fail(f"invalid module name {clause.name!r}", clause)
        if clause.body is not None and not callable(clause.body):
            self._fail(f"module body for '{clause.name}' is not callable", clause)

    def visit_whole_module(self, clause: WholeModuleClause) -> None:
        if not clause.modules:
            self._fail("`using` needs at least one module", clause)
        for path in clause.modules:
            self._check_path(path, clause)
            if path.relative_depth == 0 and not path.segments:
                self._fail("empty module path", clause)

    def visit_qualified_names(self, clause: QualifiedNamesClause) -> None:
        if clause.keyword not in (USING_KEYWORD, IMPORT_KEYWORD):
            self._fail(f"unknown clause keyword {clause.keyword!r}", clause)
        self._check_path(clause.module, clause)
        if clause.module.is_empty:
            self._fail("empty module path before ':'", clause)
        if not clause.items:
            self._fail(f"no names listed after '{clause.module}:'", clause)
        for item in clause.items:
            if not isinstance(item, ImportItem):
                self._fail(
                    f"cannot mix module-wide and symbol-specific syntax: {item!r} is not a name",
                    clause,
                )
            if not is_valid_name(item.name):
                self._fail(f"invalid name {item.name!r} in symbol list", clause)
            if item.alias is not None and not is_valid_name(item.alias):
                self._fail(f"invalid alias {item.alias!r} for '{item.name}'", clause)

    def visit_dotted_import(self, clause: DottedImportClause) -> None:
        if not clause.entries:
            self._fail("`import` needs at least one entry", clause)
        for entry in clause.entries:
            if not isinstance(entry, DottedImport):
                self._fail(f"unrecognized import entry {entry!r}", clause)
            self._check_path(entry.path, clause)
            if not entry.path.segments:
                self._fail(f"import entry '{entry.path}' names no symbol", clause)
            if entry.alias is not None and not is_valid_name(entry.alias):
                self._fail(f"invalid alias {entry.alias!r} for '{entry.path}'", clause)

    def _check_path(self, path: Any, clause: Clause) -> None:
        if not isinstance(path, ModulePath):
            self._fail(f"expected a module path, got {path!r}", clause)
        if path.relative_depth < 0:
            self._fail(f"negative relative depth in '{path}'", clause)
        for segment in path.segments:
            if not is_valid_name(segment):
                self._fail(f"invalid path segment {segment!r} in '{path}'", clause)

    def _fail(self, message: str, clause: Optional[Clause]) -> None:
        location = clause.location if clause is not None else None
        raise MalformedClauseError(message, location=location)


def validate(clause: Any) -> None:
    ClauseValidator().validate(clause)
