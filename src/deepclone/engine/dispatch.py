"""Dispatch spine: extension hook check, kind dispatch, and depth accounting.

Usage:
    context = CopyContext(skip_unsupported=True)
    snapshot = context.copy(state)
"""

from __future__ import annotations

from typing import Any

from deepclone.core.errors import CopyDepthError
from deepclone.core.kinds import Kind, classify
from deepclone.core.models import SelfCopying
from deepclone.engine.copiers import COPIERS
from deepclone.engine.tracker import IdentityTracker

IDENTITY_KINDS: frozenset[Kind] = frozenset(
    {
        Kind.FIXED_SEQUENCE,
        Kind.DYNAMIC_SEQUENCE,
        Kind.MAPPING,
        Kind.REFERENCE,
        Kind.DYNAMIC_WRAPPER,
        Kind.RECORD,
    }
)
"""Kinds whose values are reached by reference and may be shared or cyclic."""


def has_self_copy(value: Any) -> bool:
    """Check whether a value supplies its own deep copy.

    Classes that define ``__deep_copy__`` do not count; only their instances do.

    Args:
        value: Any object.

    Returns:
        True if value implements the SelfCopying protocol.
    """
    return not isinstance(value, type) and isinstance(value, SelfCopying)


class CopyContext:
    """State of one top-level copy invocation.

    Holds the identity tracker, the unsupported-kind mode and the current
    nesting depth. A context is used for exactly one call and then dropped.

    Args:
        skip_unsupported: Replace unsupported values with None instead of failing.
        max_depth: Maximum container nesting to follow (None for no limit).
    """

    __slots__ = ("skip_unsupported", "max_depth", "tracker", "depth")

    def __init__(self, skip_unsupported: bool = False, max_depth: int | None = None):
        """Initialize a fresh context with an empty tracker.

        Args:
            skip_unsupported: Replace unsupported values with None instead of failing.
            max_depth: Maximum container nesting to follow (None for no limit).
        """
        self.skip_unsupported = skip_unsupported
        self.max_depth = max_depth
        self.tracker = IdentityTracker()
        self.depth = 0

    def copy(self, value: Any) -> Any:
        """Deep copy one value within this invocation.

        Order per node: self-copy hook, classification, tracker lookup for
        identity-bearing kinds, then the kind's copier.

        Args:
            value: Value to copy.

        Returns:
            The copy (or None for a skipped unsupported value).

        Raises:
            UnsupportedTypeError: Unsupported value in strict mode.
            CopyDepthError: Nesting exceeds max_depth.
        """
        if has_self_copy(value):
            return value.__deep_copy__()

        kind = classify(type(value))
        if kind is Kind.SCALAR:
            return value

        if kind in IDENTITY_KINDS:
            existing = self.tracker.get(value)
            if existing is not None:
                return existing

        if self.max_depth is not None and self.depth >= self.max_depth:
            raise CopyDepthError(self.max_depth)

        self.depth += 1
        try:
            return COPIERS[kind](value, self)
        finally:
            self.depth -= 1
