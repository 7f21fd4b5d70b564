"""Tests for OptListPolicy."""

import pytest

from optlist import (
    Absent,
    DisallowedValueKindError,
    DuplicateNameError,
    Entry,
    Kind,
    OptListError,
    OptListPolicy,
    UnknownKindError,
)


def test_defaults():
    policy = OptListPolicy()
    assert policy.moniker == "unnamed"
    assert policy.require_unique is False
    assert policy.must_be is None


def test_must_be_normalized():
    assert OptListPolicy(must_be="array").must_be == frozenset({Kind.Sequence})
    assert OptListPolicy(must_be=["HASH", Kind.Callable]).must_be == {Kind.Mapping, Kind.Callable}


def test_bad_kind_fails_on_construction():
    with pytest.raises(UnknownKindError):
        OptListPolicy(must_be="GLOB")


def test_canonicalize_uses_settings():
    policy = OptListPolicy("import", require_unique=True)
    assert policy.canonicalize(["a", "b", [1]]) == [Entry("a"), Entry("b", [1])]
    with pytest.raises(DuplicateNameError) as excinfo:
        policy.canonicalize(["a", "a"])
    assert excinfo.value.moniker == "import"


def test_expand_uses_must_be():
    policy = OptListPolicy("export", must_be="array")
    assert policy.expand({"foo": None, "bar": [1, 2]}) == {"foo": Absent, "bar": [1, 2]}
    with pytest.raises(DisallowedValueKindError, match="export"):
        policy.expand(["y", {"A": 1}])


def test_replace():
    policy = OptListPolicy("a")
    changed = policy.replace(require_unique=True, must_be=["CODE"])
    assert changed.require_unique
    assert changed.must_be == {Kind.Callable}
    assert policy.require_unique is False


def test_frozen():
    with pytest.raises(AttributeError):
        OptListPolicy().moniker = "x"


class TestFromMapping:
    def test_all_keys(self):
        policy = OptListPolicy.from_mapping(
            {"moniker": "group", "unique": 1, "must_be": ["array", "hash"]}
        )
        assert policy.moniker == "group"
        assert policy.require_unique is True
        assert policy.must_be == {Kind.Sequence, Kind.Mapping}

    def test_empty(self):
        assert OptListPolicy.from_mapping({}) == OptListPolicy()

    def test_unknown_key(self):
        with pytest.raises(OptListError, match="strict"):
            OptListPolicy.from_mapping({"strict": True})


def test_describe():
    policy = OptListPolicy("import", True, ["HASH", "ARRAY"])
    assert policy.describe() == {
        "moniker": "import",
        "require_unique": True,
        "must_be": ["Mapping", "Sequence"],
    }


def test_empty_must_be_string_means_any():
    policy = OptListPolicy("group", must_be="")
    assert policy.must_be is None
    assert policy.canonicalize(["a", {"A": 1}]) == [Entry("a", {"A": 1})]
