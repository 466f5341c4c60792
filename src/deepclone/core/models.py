"""Copy models: the self-copy protocol, identity keys, and call results.

SelfCopying is an optional interface that types implement to take over their
own deep copy. The engine detects it per concrete value during traversal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Protocol, Self, TypeVar, runtime_checkable

from deepclone.core.errors import CopyError

T = TypeVar("T")


@runtime_checkable
class SelfCopying(Protocol):
    """Instance → independently owned instance of the same concrete type."""

    def __deep_copy__(self) -> Self: ...


@dataclass(frozen=True, slots=True)
class IdentityKey:
    """Identifies one original object for cycle and sharing tracking.

    Pairs the object's ``id()`` with its concrete type, so two keys are equal
    only when they denote the same live object.
    """

    identity: int
    type: type

    @classmethod
    def of(cls, value: Any) -> IdentityKey:
        """Build the key for a live object.

        Args:
            value: Object to identify.

        Returns:
            IdentityKey of (id(value), type(value)).
        """
        return cls(identity=id(value), type=type(value))


@dataclass(frozen=True)
class CopyResult(Generic[T]):
    """Outcome of one copy call: either a value or a failure."""

    value: T | None = None
    """The copy. None when the call failed."""

    error: CopyError | None = None
    """The failure, or None on success."""

    @property
    def ok(self) -> bool:
        """True if the copy succeeded."""
        return self.error is None

    def unwrap(self) -> T:
        """Return the copy, raising the failure if there was one.

        Returns:
            The copied value.

        Raises:
            CopyError: The failure recorded for this call.
        """
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
