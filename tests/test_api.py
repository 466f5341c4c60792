"""Tests for the copy entry points."""

import sys
import threading
from unittest.mock import patch

import pytest

import deepclone
from deepclone import (
    Copier,
    CopyDepthError,
    UnsupportedTypeError,
    copy,
    copy_skip_unsupported,
    must_copy,
)


def _nested(depth):
    value: list = []
    for _ in range(depth):
        value = [value]
    return value


def test_copy_success(node_cls):
    original = node_cls(1, node_cls(2))

    result = copy(original)

    assert result.ok
    assert result.value == original
    assert result.value.next is not original.next


def test_copy_failure_returns_no_value():
    result = copy({"lock": threading.Lock()})

    assert not result.ok
    assert result.value is None
    assert isinstance(result.error, UnsupportedTypeError)


def test_copy_skip_unsupported_never_reports_unsupported():
    result = copy_skip_unsupported({"lock": threading.Lock(), "n": 1})

    assert result.ok
    assert result.value == {"lock": None, "n": 1}


def test_must_copy_raises():
    with pytest.raises(UnsupportedTypeError):
        must_copy([lambda: None])


def test_must_copy_returns_copy():
    original = {"a": [1]}

    copied = must_copy(original)

    assert copied == original
    assert copied["a"] is not original["a"]


@pytest.mark.parametrize("entry", [copy, copy_skip_unsupported])
def test_none_input_short_circuits(entry):
    with patch("deepclone.api.CopyContext") as context_cls:
        result = entry(None)

    assert result.ok and result.value is None
    context_cls.assert_not_called()


def test_must_copy_none():
    assert must_copy(None) is None


def test_top_level_unsupported_lenient_is_none():
    assert copy_skip_unsupported(lambda: None).value is None


def test_each_call_uses_fresh_tracker():
    """Nothing persists between calls: two copies of one object are distinct."""
    original = [1]

    assert must_copy(original) is not must_copy(original)


def test_interpreter_recursion_limit_reported_as_depth_error():
    deep = _nested(sys.getrecursionlimit() * 2)

    result = copy_skip_unsupported(deep)

    assert not result.ok
    assert isinstance(result.error, CopyDepthError)
    assert result.error.max_depth is None


def test_copier_modes():
    strict = Copier()
    lenient = Copier(skip_unsupported=True)
    original = [threading.Lock()]

    assert isinstance(strict.copy(original).error, UnsupportedTypeError)
    assert lenient(original) == [None]


def test_copier_max_depth():
    copier = Copier(max_depth=3)

    assert copier(_nested(2)) == _nested(2)
    with pytest.raises(CopyDepthError):
        copier(_nested(5))


def test_copier_rejects_non_positive_depth():
    with pytest.raises(ValueError, match="max_depth must be positive"):
        Copier(max_depth=0)


def test_copier_warns_when_depth_unreachable():
    with pytest.warns(RuntimeWarning, match="recursion limit"):
        Copier(max_depth=sys.getrecursionlimit())


def test_package_exports_entry_points():
    assert deepclone.copy is copy
    assert deepclone.must_copy is must_copy
    assert deepclone.copy_skip_unsupported is copy_skip_unsupported
