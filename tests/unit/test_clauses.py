"""
Tests for the clause tree: path parsing helpers, coercion of plain strings,
and alias extraction.
"""

import pytest

from republic.republication.aliases import extract_names
from republic.shared.clauses import (
    BlockClause,
    Clause,
    DottedImport,
    DottedImportClause,
    ImportItem,
    ModulePath,
    QualifiedNamesClause,
    WholeModuleClause,
)
from republic.shared.errors import RepublicImplementationError


class TestModulePath:

    def test_absolute(self):
        path = ModulePath.from_dotted("Main.Foo.Bar")
        assert path == ModulePath(0, ("Main", "Foo", "Bar"))
        assert not path.is_relative
        assert str(path) == "Main.Foo.Bar"

    def test_relative(self):
        path = ModulePath.from_dotted("..Outer.Inner")
        assert path.relative_depth == 2
        assert path.segments == ("Outer", "Inner")
        assert str(path) == "..Outer.Inner"

    def test_current_module_marker(self):
        path = ModulePath.from_dotted(".")
        assert path == ModulePath(1, ())
        assert not path.is_empty

    def test_empty(self):
        assert ModulePath.from_dotted("").is_empty

    def test_parent_keeps_markers(self):
        assert ModulePath.from_dotted(".Inner").parent() == ModulePath(1, ())
        assert ModulePath.from_dotted("Foo").parent().is_empty

    def test_list_segments_coerced(self):
        assert ModulePath(0, ["A", "B"]).segments == ("A", "B")


class TestClauseCoercion:

    def test_whole_module_accepts_strings(self):
        clause = WholeModuleClause(["Main.Y3", ".Inner"])
        assert clause.modules == (ModulePath(0, ("Main", "Y3")), ModulePath(1, ("Inner",)))
        assert str(clause) == "using Main.Y3, .Inner"

    def test_qualified_names_items(self):
        clause = QualifiedNamesClause("Main.Y", ["a", ("b", "c"), ImportItem("d")])
        assert clause.items == (ImportItem("a"), ImportItem("b", "c"), ImportItem("d"))
        assert str(clause) == "using Main.Y: a, b as c, d"

    def test_dotted_entries(self):
        clause = DottedImportClause(["Main.Y.a", ("Main.Y.b", "c"), ("Test", "T")])
        first, second, third = clause.entries
        assert first.symbol == "a" and first.local_name == "a"
        assert first.owner == ModulePath(0, ("Main", "Y"))
        assert second.local_name == "c"
        assert third.is_module_import
        assert not first.is_module_import
        assert str(clause) == "import Main.Y.a, Main.Y.b as c, Test as T"

    def test_relative_dotted_is_not_module_import(self):
        entry = DottedImport(".Inner")
        assert not entry.is_module_import
        assert entry.owner == ModulePath(1, ())

    def test_clauses_are_hashable_and_comparable(self):
        a = BlockClause([WholeModuleClause(["Main.A"])])
        b = BlockClause((WholeModuleClause(("Main.A",)),))
        assert a == b
        assert hash(a) == hash(b)


class TestExtractNames:

    def test_bare_and_aliased(self):
        orig, local = extract_names([ImportItem("a"), ImportItem("b", "c")])
        assert orig == ["a", "b"]
        assert local == ["a", "c"]

    def test_order_and_duplicates_preserved(self):
        orig, local = extract_names(["x", ("y", "z"), "x"])
        assert orig == ["x", "y", "x"]
        assert local == ["x", "z", "x"]

    def test_empty(self):
        assert extract_names([]) == ([], [])

    def test_no_validation(self):
        orig, local = extract_names(["does_not_exist"])
        assert orig == local == ["does_not_exist"]


def test_bare_clause_cannot_be_visited():
    with pytest.raises(RepublicImplementationError):
        Clause().accept(None)
