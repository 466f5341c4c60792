"""Tests for copy models and failure types."""

import pytest

from deepclone import (
    CopyDepthError,
    CopyError,
    CopyResult,
    IdentityKey,
    SelfCopying,
    UnsupportedTypeError,
)


class Cloneable:
    def __deep_copy__(self):
        return Cloneable()


class NotCloneable:
    pass


def test_self_copying_protocol_detection():
    assert isinstance(Cloneable(), SelfCopying)
    assert not isinstance(NotCloneable(), SelfCopying)


def test_identity_key_equal_for_same_object():
    obj = NotCloneable()

    assert IdentityKey.of(obj) == IdentityKey.of(obj)
    assert IdentityKey.of(obj).type is NotCloneable


def test_identity_key_differs_for_equal_values():
    """Equal but distinct objects are different storage."""
    a, b = [1], [1]

    assert IdentityKey.of(a) != IdentityKey.of(b)


def test_copy_result_success():
    result = CopyResult(value=[1])

    assert result.ok
    assert result.unwrap() == [1]


def test_copy_result_failure_unwrap_raises():
    error = UnsupportedTypeError(type(len))
    result = CopyResult(error=error)

    assert not result.ok
    assert result.value is None
    with pytest.raises(UnsupportedTypeError) as exc_info:
        result.unwrap()
    assert exc_info.value is error


def test_unsupported_type_error_names_type():
    error = UnsupportedTypeError(NotCloneable, "cannot be allocated without arguments")

    assert error.value_type is NotCloneable
    assert "NotCloneable" in str(error)
    assert "cannot be allocated" in str(error)
    assert isinstance(error, CopyError)
    assert isinstance(error, TypeError)


def test_copy_depth_error_messages():
    assert "max_depth=3" in str(CopyDepthError(3))
    assert "recursion limit" in str(CopyDepthError())
    assert isinstance(CopyDepthError(), RecursionError)
