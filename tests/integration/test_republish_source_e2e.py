"""
End-to-end tests for textual invocations: parse + republish.
"""

import pytest

from republic import (
    BlockClause,
    MalformedClauseError,
    RepublicDriver,
    UnresolvedPathError,
    republish_source,
)


@pytest.fixture
def driver(session_parser):
    return RepublicDriver(session_parser)


@pytest.fixture
def upstreams(make_module):
    make_module("Y2", {"A": 1, "B": 2}, exported=["A"], public=["B"])
    make_module("Y_as", {"E": 1, "P": 2}, exported=["E"], public=["P"])


class TestDriver:

    def test_default_policy(self, driver, upstreams, make_module, public_names, exported_names):
        x = make_module("X")
        driver.run(x, "using Main.Y2")

        assert {"A", "B"} <= public_names(x)
        assert exported_names(x) == {"X"}

    def test_reexport_policy(self, driver, upstreams, make_module, exported_names):
        x = make_module("X")
        driver.run(x, "reexport=true using Main.Y_as: E as RE, P as RP")

        assert exported_names(x) == {"RE", "X"}
        assert x.is_public("RP")
        assert x.get("RP") == 2

    def test_block_source(self, driver, upstreams, make_module, public_names):
        x = make_module("X")
        clause = driver.run(x, """
            reexport=false begin
                using Main.Y2: A
                import Main.Y_as.E as E2   # renamed
            end
        """, source_file="x.rep")

        assert isinstance(clause, BlockClause)
        assert clause.location.file == "x.rep"
        assert {"A", "E2"} <= public_names(x)

    def test_relative_source(self, driver, make_module):
        outer = make_module("Outer")
        make_module("Inner", {"X": 1}, exported=["X"], parent=outer)
        mid = make_module("Mid", parent=outer)
        driver.run(mid, "using ...Outer.Inner: X")
        assert mid.get("X") == 1

    def test_malformed_source_changes_nothing(self, driver, upstreams, make_module):
        x = make_module("X")
        before = x.names(all=True, imported=True)
        with pytest.raises(MalformedClauseError):
            driver.run(x, "reexport=yes using Main.Y2")
        assert x.names(all=True, imported=True) == before

    def test_unresolved_source(self, driver, make_module):
        x = make_module("X")
        with pytest.raises(UnresolvedPathError):
            driver.run(x, "import Main.Nope.f")


def test_republish_source_default_driver(upstreams, make_module, exported_names):
    x = make_module("X")
    republish_source(x, "reexport=true import Main.Y2.A, Main.Y2.B")
    assert exported_names(x) == {"A", "X"}
    assert x.is_public("B")
