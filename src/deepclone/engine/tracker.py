"""Identity tracking service.

IdentityTracker is the per-invocation memo that maps each original object to
the copy created for it. It is what makes cycles terminate and shared
references stay shared.
"""

from __future__ import annotations

from typing import Any

from deepclone.core.models import IdentityKey


class IdentityTracker:
    """Maps original objects, by identity and type, to their copies.

    A copy is registered as soon as its empty storage exists, before any
    child is copied, so a cycle back to the same original observes the
    partially filled copy instead of recursing again.

    Originals are retained until the tracker is dropped, which keeps their
    ``id()`` values from being reused by other objects mid-copy.
    """

    def __init__(self) -> None:
        """Initialize an empty tracker."""
        self._copies: dict[IdentityKey, Any] = {}
        self._originals: list[Any] = []

    def register(self, original: Any, copy: Any) -> None:
        """Record the copy created for an original.

        Args:
            original: Object being copied.
            copy: Its (possibly still empty) copy.

        Raises:
            RuntimeError: If the original already has a registered copy.
        """
        key = IdentityKey.of(original)
        if key in self._copies:
            raise RuntimeError(f"Identity collision: {key} registered twice")
        self._copies[key] = copy
        self._originals.append(original)

    def get(self, original: Any, default: Any = None) -> Any:
        """Look up the copy registered for an original.

        Args:
            original: Object to look up.
            default: Returned when the original is untracked.

        Returns:
            The registered copy, or default.
        """
        return self._copies.get(IdentityKey.of(original), default)

    def __contains__(self, original: Any) -> bool:
        return IdentityKey.of(original) in self._copies

    def __getitem__(self, original: Any) -> Any:
        return self._copies[IdentityKey.of(original)]

    def __len__(self) -> int:
        return len(self._copies)
