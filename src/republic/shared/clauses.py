"""
Consumption Clauses

Immutable description of one import/using request handed to the
republication engine. Five shapes:

- WholeModuleClause:      using Foo, .Bar
- QualifiedNamesClause:   using Foo: a, b as c   (or import Foo: ...)
- DottedImportClause:     import Foo.a, Bar.b as c, Baz as B
- ModuleDefinitionClause: a nested module definition (programmatic body)
- BlockClause:            begin ... end

Constructors accept plain strings for paths and names and coerce them to
ModulePath / ImportItem, the same way a dotted string is split into
segments.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple, Union, TYPE_CHECKING

from .clause_visitor import ClauseVisitor, T
from .errors import RepublicImplementationError
from .source_location import SourceLocation
from ..utils.config import ALIAS_KEYWORD, IMPORT_KEYWORD, PATH_SEPARATOR, RELATIVE_MARKER, USING_KEYWORD

if TYPE_CHECKING:
    from ..module_system.module_info import Module


@dataclass(frozen=True)
class ModulePath:
    """
    Symbolic module path.

    relative_depth == 0: absolute, segments[0] names a root module.
    relative_depth == n: n leading markers; 1 = current module, each extra
    marker ascends one level. segments are then traversed as children.
    """
    relative_depth: int = 0
    segments: Tuple[str, ...] = ()

    def __post_init__(self):
        if not isinstance(self.segments, tuple):
            object.__setattr__(self, 'segments', tuple(self.segments))

    @classmethod
    def from_dotted(cls, text: str) -> 'ModulePath':
        """Build a path from 'Main.Foo', '.Inner' or '..Outer.Inner'."""
        stripped = text.lstrip(RELATIVE_MARKER)
        depth = len(text) - len(stripped)
        segments = tuple(stripped.split(PATH_SEPARATOR)) if stripped else ()
        return cls(depth, segments)

    @property
    def is_relative(self) -> bool:
        return self.relative_depth > 0

    @property
    def is_empty(self) -> bool:
        """No markers and no segments: names nothing."""
        return self.relative_depth == 0 and not self.segments

    @property
    def last(self) -> Optional[str]:
        return self.segments[-1] if self.segments else None

    def parent(self) -> 'ModulePath':
        """Path with the final segment stripped (markers are kept)."""
        return ModulePath(self.relative_depth, self.segments[:-1])

    def child(self, name: str) -> 'ModulePath':
        return ModulePath(self.relative_depth, self.segments + (name,))

    def __str__(self) -> str:
        return RELATIVE_MARKER * self.relative_depth + PATH_SEPARATOR.join(self.segments)


PathLike = Union[ModulePath, str]


def _as_path(value: PathLike) -> ModulePath:
    if isinstance(value, str):
        return ModulePath.from_dotted(value)
    return value


@dataclass(frozen=True)
class ImportItem:
    """One entry of a symbol list: bare `name` or `name as alias`."""
    name: str
    alias: Optional[str] = None

    @property
    def local_name(self) -> str:
        return self.alias if self.alias is not None else self.name

    def __str__(self) -> str:
        if self.alias is None:
            return self.name
        return f"{self.name} {ALIAS_KEYWORD} {self.alias}"


ItemLike = Union[ImportItem, str, Tuple[str, Optional[str]]]


def as_import_item(value: ItemLike) -> ImportItem:
    if isinstance(value, ImportItem):
        return value
    if isinstance(value, str):
        return ImportItem(value)
    if isinstance(value, tuple) and len(value) == 2:
        return ImportItem(value[0], value[1])
    # Left for the validator to reject
    return value


class Clause:
    """Base class for consumption clauses."""

    location: Optional[SourceLocation] = None

    def accept(self, visitor: ClauseVisitor[T]) -> T:
        raise RepublicImplementationError(
            f"{type(self).__name__} does not implement accept()"
        )


@dataclass(frozen=True)
class WholeModuleClause(Clause):
    """using Foo, Bar"""
    modules: Tuple[ModulePath, ...]
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'modules', tuple(_as_path(m) for m in self.modules))

    def accept(self, visitor: ClauseVisitor[T]) -> T:
        return visitor.visit_whole_module(self)

    def __str__(self) -> str:
        return f"{USING_KEYWORD} " + ", ".join(str(m) for m in self.modules)


@dataclass(frozen=True)
class QualifiedNamesClause(Clause):
    """using Foo: a, b as c"""
    module: ModulePath
    items: Tuple[ImportItem, ...]
    keyword: str = USING_KEYWORD
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'module', _as_path(self.module))
        object.__setattr__(self, 'items', tuple(as_import_item(i) for i in self.items))

    def accept(self, visitor: ClauseVisitor[T]) -> T:
        return visitor.visit_qualified_names(self)

    def __str__(self) -> str:
        return f"{self.keyword} {self.module}: " + ", ".join(str(i) for i in self.items)


@dataclass(frozen=True)
class DottedImport:
    """
    One entry of `import A.b, C as D`.

    path includes the final symbol. When the owner path (path minus the
    final segment) is empty, the entry imports a root module itself.
    """
    path: ModulePath
    alias: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'path', _as_path(self.path))

    @property
    def symbol(self) -> Optional[str]:
        return self.path.last

    @property
    def owner(self) -> ModulePath:
        return self.path.parent()

    @property
    def is_module_import(self) -> bool:
        return self.owner.is_empty

    @property
    def local_name(self) -> Optional[str]:
        return self.alias if self.alias is not None else self.symbol

    def __str__(self) -> str:
        if self.alias is None:
            return str(self.path)
        return f"{self.path} {ALIAS_KEYWORD} {self.alias}"


def _as_dotted(value: Any) -> Any:
    if isinstance(value, (str, ModulePath)):
        return DottedImport(value)
    if isinstance(value, tuple) and len(value) == 2:
        return DottedImport(value[0], value[1])
    return value


@dataclass(frozen=True)
class DottedImportClause(Clause):
    """import Foo.a, Bar.b as c, Baz as B"""
    entries: Tuple[DottedImport, ...]
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'entries', tuple(_as_dotted(e) for e in self.entries))

    def accept(self, visitor: ClauseVisitor[T]) -> T:
        return visitor.visit_dotted_import(self)

    def __str__(self) -> str:
        return f"{IMPORT_KEYWORD} " + ", ".join(str(e) for e in self.entries)


@dataclass(frozen=True)
class ModuleDefinitionClause(Clause):
    """
    Definition of a nested module named `name` inside the consuming module.

    body(module) populates the freshly created submodule before it is
    consumed as a whole-module `using` of itself.
    """
    name: str
    body: Optional[Callable[['Module'], None]] = field(default=None, compare=False)
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def accept(self, visitor: ClauseVisitor[T]) -> T:
        return visitor.visit_module_definition(self)

    def __str__(self) -> str:
        return f"module {self.name}"


@dataclass(frozen=True)
class BlockClause(Clause):
    """begin ... end"""
    clauses: Tuple[Clause, ...]
    location: Optional[SourceLocation] = field(default=None, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'clauses', tuple(self.clauses))

    def accept(self, visitor: ClauseVisitor[T]) -> T:
        return visitor.visit_block(self)

    def __str__(self) -> str:
        inner = "; ".join(str(c) for c in self.clauses)
        return f"begin {inner} end"
