"""Tests for optlist.result."""

import pytest

from optlist import (
    Absent,
    DisallowedValueKindError,
    DuplicateNameError,
    Entry,
    Err,
    Ok,
    try_canonicalize,
    try_expand,
)


def test_ok_canonicalize():
    result = try_canonicalize(["a", "b", [1, 2]])
    assert isinstance(result, Ok)
    assert result.is_ok
    assert result.unwrap() == [Entry("a"), Entry("b", [1, 2])]


def test_err_duplicate():
    result = try_canonicalize(["x", "x"], "test", True)
    assert isinstance(result, Err)
    assert not result.is_ok
    assert isinstance(result.error, DuplicateNameError)
    with pytest.raises(DuplicateNameError):
        result.unwrap()


def test_ok_expand():
    result = try_expand({"foo": None})
    assert result.is_ok
    assert result.unwrap() == {"foo": Absent}


def test_err_expand_kind():
    result = try_expand(["y", {"A": 1}], "test", "array")
    assert isinstance(result, Err)
    assert isinstance(result.error, DisallowedValueKindError)
    assert result.error.moniker == "test"


def test_type_errors_still_raise():
    with pytest.raises(TypeError):
        try_canonicalize(42)
