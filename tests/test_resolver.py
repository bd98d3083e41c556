"""Tests for suffix-based path resolution."""

from fsgraph.analysis.resolver import SuffixIndex


def test_registers_every_suffix():
    index = SuffixIndex(["a/b/c.fs"])
    assert "a/b/c.fs" in index
    assert "b/c.fs" in index
    assert "c.fs" in index
    assert "a/b" not in index
    assert len(index) == 3


def test_exact_path_resolves():
    index = SuffixIndex(["a/b/c.fs", "x/b/c.fs"])
    assert index.resolve("a/b/c.fs") == "a/b/c.fs"
    assert index.resolve("x/b/c.fs") == "x/b/c.fs"


def test_ambiguous_suffix_is_unresolved():
    index = SuffixIndex(["a/b/c.fs", "x/b/c.fs"])
    assert sorted(index.candidates("b/c.fs")) == ["a/b/c.fs", "x/b/c.fs"]
    assert index.resolve("b/c.fs") is None
    assert index.resolve("c.fs") is None


def test_declared_prefix_dropped_until_unique():
    index = SuffixIndex(["std/geometry.fs", "std/math/vector.fs"])
    assert index.resolve("onshape/std/math/vector.fs") == "std/math/vector.fs"
    assert index.resolve("onshape/std/geometry.fs") == "std/geometry.fs"


def test_shorter_unique_suffix_wins_over_ambiguous_longer():
    index = SuffixIndex(["a/b/c.fs", "x/b/c.fs", "a/d.fs"])
    assert index.resolve("q/a/d.fs") == "a/d.fs"
    assert index.resolve("q/b/c.fs") is None


def test_absent_is_unresolved():
    index = SuffixIndex(["a/b.fs"])
    assert index.resolve("missing/mod.fs") is None
    assert index.resolve("") is None


def test_declared_path_normalized_before_lookup():
    index = SuffixIndex(["a/b.fs"])
    assert index.resolve("./a//b.fs") == "a/b.fs"
    assert index.resolve("a\\b.fs") == "a/b.fs"


def test_resolution_independent_of_insertion_order():
    files = ["p/q/r.fs", "z/q/r.fs", "p/s.fs", "t/u/v.fs"]
    forward = SuffixIndex(files)
    backward = SuffixIndex(reversed(files))
    for declared in ["q/r.fs", "p/q/r.fs", "x/p/s.fs", "u/v.fs", "r.fs", "nope.fs"]:
        assert forward.resolve(declared) == backward.resolve(declared)
