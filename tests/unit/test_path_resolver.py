"""
Tests for PathResolver: absolute and relative module paths over the
loaded module tree.
"""

import pytest

from republic.module_system.module_info import Module
from republic.module_system.path_resolver import PathResolver, resolve_module
from republic.module_system.registry import ModuleRegistry
from republic.shared.clauses import ModulePath
from republic.shared.errors import UnresolvedPathError


@pytest.fixture
def tree(main):
    """Main.Outer.{Inner, Mid}"""
    outer = main.define_submodule("Outer")
    inner = outer.define_submodule("Inner")
    mid = outer.define_submodule("Mid")
    inner.bind("X", 1)
    return {"Main": main, "Outer": outer, "Inner": inner, "Mid": mid}


class TestAbsolutePaths:

    def test_root_only(self, registry, tree):
        assert PathResolver(registry).resolve("Main", tree["Mid"]) is tree["Main"]

    def test_multi_segment(self, registry, tree):
        resolver = PathResolver(registry)
        assert resolver.resolve("Main.Outer.Inner", tree["Mid"]) is tree["Inner"]

    def test_module_path_object(self, registry, tree):
        path = ModulePath(0, ("Main", "Outer"))
        assert PathResolver(registry).resolve(path, tree["Main"]) is tree["Outer"]

    def test_unknown_root(self, registry, tree):
        with pytest.raises(UnresolvedPathError):
            PathResolver(registry).resolve("Nope.Outer", tree["Main"])

    def test_missing_segment(self, registry, tree):
        with pytest.raises(UnresolvedPathError) as exc_info:
            PathResolver(registry).resolve("Main.Outer.Missing", tree["Main"])
        assert "Missing" in exc_info.value.message

    def test_non_module_segment(self, registry, tree):
        with pytest.raises(UnresolvedPathError) as exc_info:
            PathResolver(registry).resolve("Main.Outer.Inner.X", tree["Main"])
        assert "not a module" in exc_info.value.message

    def test_empty_path(self, registry, tree):
        with pytest.raises(UnresolvedPathError):
            PathResolver(registry).resolve(ModulePath(), tree["Main"])

    def test_isolated_registry_sees_only_its_roots(self, tree):
        other = ModuleRegistry()
        other.new_root("Other")
        with pytest.raises(UnresolvedPathError):
            PathResolver(other).resolve("Main.Outer", tree["Mid"])


class TestRelativePaths:

    def test_single_marker_is_current_module(self, registry, tree):
        assert PathResolver(registry).resolve(".", tree["Mid"]) is tree["Mid"]

    def test_two_markers_is_parent(self, registry, tree):
        assert PathResolver(registry).resolve("..", tree["Mid"]) is tree["Outer"]

    def test_child_of_current(self, registry, tree):
        assert PathResolver(registry).resolve(".Inner", tree["Outer"]) is tree["Inner"]

    def test_sibling(self, registry, tree):
        assert PathResolver(registry).resolve("..Inner", tree["Mid"]) is tree["Inner"]

    def test_three_markers_then_segments(self, registry, tree):
        # Mid -> Outer -> Main, then Outer.Inner
        resolved = PathResolver(registry).resolve("...Outer.Inner", tree["Mid"])
        assert resolved is tree["Inner"]

    def test_ascending_past_root_fails(self, registry, tree):
        with pytest.raises(UnresolvedPathError) as exc_info:
            PathResolver(registry).resolve("..", tree["Main"])
        assert "past root" in exc_info.value.message

    def test_ascending_past_root_from_depth(self, registry, tree):
        with pytest.raises(UnresolvedPathError):
            PathResolver(registry).resolve("....", tree["Mid"])

    def test_relative_missing_child(self, registry, tree):
        with pytest.raises(UnresolvedPathError):
            PathResolver(registry).resolve(".Nope", tree["Outer"])

    def test_resolution_is_pure(self, registry, tree):
        before = set(tree["Outer"].names(all=True, imported=True))
        PathResolver(registry).resolve(".Inner", tree["Outer"])
        assert set(tree["Outer"].names(all=True, imported=True)) == before


class TestResolveModuleHelper:

    def test_uses_module_registry(self, tree):
        assert resolve_module(tree["Mid"], "Main.Outer.Inner") is tree["Inner"]

    def test_requires_registry(self):
        orphan = Module("Orphan")
        with pytest.raises(UnresolvedPathError):
            resolve_module(orphan, ".")
