"""
Republication Clause Transformer
Converts the Lark parse tree of a clause into the immutable clause tree
"""

import logging
from typing import List, Optional, Tuple

from lark import Token, Transformer, v_args
from typing_extensions import TypeAlias

from ..shared.clauses import (
    BlockClause,
    Clause,
    DottedImport,
    DottedImportClause,
    ImportItem,
    ModulePath,
    QualifiedNamesClause,
    WholeModuleClause,
)
from ..shared.errors import MalformedClauseError
from ..shared.source_location import SourceLocation
from ..utils.config import (
    BOOLEAN_FALSE_LITERAL,
    BOOLEAN_TRUE_LITERAL,
    DEFAULT_REEXPORT,
    DEFAULT_SOURCE_NAME,
    IMPORT_KEYWORD,
    POLICY_KEYWORD,
    RELATIVE_MARKER,
    USING_KEYWORD,
)

# Lark Meta object carries position information
LarkMeta: TypeAlias = object
Invocation: TypeAlias = Tuple[bool, Clause]

logger: logging.Logger = logging.getLogger(__name__)


@v_args(inline=True, meta=True)
class ClauseTransformer(Transformer):
    """Lark tree -> (reexport, Clause)"""

    def __init__(self) -> None:
        super().__init__()
        self.current_file: str = DEFAULT_SOURCE_NAME

    def _extract_location(self, meta: LarkMeta) -> Optional[SourceLocation]:
        if getattr(meta, "empty", True):
            return None
        return SourceLocation(
            file=self.current_file,
            line=meta.line,
            column=meta.column,
            end_line=meta.end_line,
            end_column=meta.end_column,
        )

    def _token_location(self, token: Token) -> SourceLocation:
        return SourceLocation(
            file=self.current_file,
            line=token.line,
            column=token.column,
            end_line=token.end_line,
            end_column=token.end_column,
        )

    # =========================================================================
    # INVOCATION
    # =========================================================================

    def start(self, meta: LarkMeta, *children) -> Invocation:
        """Grammar: policy? clause"""
        if len(children) == 2:
            return children[0], children[1]
        return DEFAULT_REEXPORT, children[0]

    def policy(self, meta: LarkMeta, key: Token, value: Token) -> bool:
        """Grammar: NAME "=" NAME"""
        if str(key) == POLICY_KEYWORD:
            if str(value) == BOOLEAN_TRUE_LITERAL:
                return True
            if str(value) == BOOLEAN_FALSE_LITERAL:
                return False
        raise MalformedClauseError(
            f"expected `{POLICY_KEYWORD}={BOOLEAN_TRUE_LITERAL}` or "
            f"`{POLICY_KEYWORD}={BOOLEAN_FALSE_LITERAL}`, got `{key}={value}`",
            location=self._extract_location(meta),
        )

    # =========================================================================
    # CLAUSES
    # =========================================================================

    def block_clause(self, meta: LarkMeta, *clauses: Clause) -> BlockClause:
        """Grammar: "begin" (clause ";"?)* "end" """
        return BlockClause(clauses, location=self._extract_location(meta))

    def using_modules(self, meta: LarkMeta, modules: List[ModulePath]) -> WholeModuleClause:
        """Grammar: "using" module_list"""
        return WholeModuleClause(modules, location=self._extract_location(meta))

    def using_names(self, meta: LarkMeta, module: ModulePath, items: List[ImportItem]) -> QualifiedNamesClause:
        """Grammar: "using" module_path ":" import_item_list"""
        return QualifiedNamesClause(module, items, keyword=USING_KEYWORD, location=self._extract_location(meta))

    def import_names(self, meta: LarkMeta, module: ModulePath, items: List[ImportItem]) -> QualifiedNamesClause:
        """Grammar: "import" module_path ":" import_item_list"""
        return QualifiedNamesClause(module, items, keyword=IMPORT_KEYWORD, location=self._extract_location(meta))

    def import_dotted(self, meta: LarkMeta, *entries: DottedImport) -> DottedImportClause:
        """Grammar: "import" dotted_item ("," dotted_item)*"""
        return DottedImportClause(entries, location=self._extract_location(meta))

    # =========================================================================
    # PIECES
    # =========================================================================

    def module_list(self, meta: LarkMeta, *paths: ModulePath) -> List[ModulePath]:
        return list(paths)

    def dotted_item(self, meta: LarkMeta, path: ModulePath, alias: Optional[Token] = None) -> DottedImport:
        """Grammar: module_path ("as" NAME)?"""
        return DottedImport(path, str(alias) if alias is not None else None)

    def import_item_list(self, meta: LarkMeta, *items: ImportItem) -> List[ImportItem]:
        return list(items)

    def import_item(self, meta: LarkMeta, name: Token, alias: Optional[Token] = None) -> ImportItem:
        """Grammar: NAME ("as" NAME)?"""
        return ImportItem(str(name), str(alias) if alias is not None else None)

    def module_path(self, meta: LarkMeta, *tokens: Token) -> ModulePath:
        """Grammar: DOTS? NAME (DOTS NAME)*"""
        depth = 0
        parts = list(tokens)
        if parts[0].type == "DOTS":
            depth = len(parts.pop(0))
        segments = []
        for token in parts:
            if token.type == "NAME":
                segments.append(str(token))
            elif str(token) != RELATIVE_MARKER:
                raise MalformedClauseError(
                    f"unexpected `{token}` inside module path",
                    location=self._token_location(token),
                    help="relative markers are only allowed at the start of a path",
                )
        return ModulePath(depth, tuple(segments))
