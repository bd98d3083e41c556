"""Tests for choosing a module's display path."""

from fsgraph.analysis.aliases import AliasCounter, choose_module_path


def test_no_aliases_uses_fallback():
    assert choose_module_path(None, "lib/util.fs") == "lib/util.fs"
    assert choose_module_path({}, "lib/util.fs") == "lib/util.fs"


def test_highest_count_wins():
    aliases = {"onshape/std/lib/util.fs": 1, "util.fs": 3}
    assert choose_module_path(aliases, "lib/util.fs") == "util.fs"


def test_tie_goes_to_longest():
    aliases = {"util.fs": 2, "onshape/std/lib/util.fs": 2, "std/lib/util.fs": 2}
    assert choose_module_path(aliases, "lib/util.fs") == "onshape/std/lib/util.fs"


def test_tie_on_length_goes_to_lexically_smallest():
    aliases = {"b/util.fs": 1, "a/util.fs": 1}
    assert choose_module_path(aliases, "lib/util.fs") == "a/util.fs"


def test_counter_accumulates_per_target():
    counter = AliasCounter()
    counter.record("lib/util.fs", "util.fs")
    counter.record("lib/util.fs", "std/lib/util.fs")
    counter.record("lib/util.fs", "util.fs")
    assert counter.get("lib/util.fs") == {"util.fs": 2, "std/lib/util.fs": 1}
    assert counter.choose("lib/util.fs") == "util.fs"
    assert counter.get("other.fs") is None
    assert counter.choose("other.fs") == "other.fs"
