"""Entry points: strict, lenient, and raising deep copy calls.

Usage:
    result = copy(state)
    if result.ok:
        snapshot = result.value

    snapshot = copy_skip_unsupported(state).unwrap()  # unsupported parts become None
    snapshot = must_copy(state)  # raises CopyError on failure

    copier = Copier(skip_unsupported=True, max_depth=64)
    snapshot = copier(state)
"""

from __future__ import annotations

import sys
import warnings
from typing import TYPE_CHECKING, Any, TypeVar

from deepclone.core.errors import CopyDepthError, CopyError
from deepclone.core.models import CopyResult
from deepclone.engine.dispatch import CopyContext

if TYPE_CHECKING:
    from deepclone.config import CopySettings

T = TypeVar("T")

# Interpreter frames consumed per level of container nesting.
_FRAMES_PER_LEVEL = 2


class Copier:
    """Configured deep copy entry point.

    Every call runs with a fresh identity tracker; nothing carries over
    between calls, so one Copier can be reused freely.

    Args:
        skip_unsupported: Replace unsupported values with None instead of failing.
        max_depth: Maximum container nesting to follow (None for no limit).
    """

    def __init__(self, skip_unsupported: bool = False, max_depth: int | None = None):
        """Initialize copier.

        Args:
            skip_unsupported: Replace unsupported values with None instead of failing.
            max_depth: Maximum container nesting to follow (None for no limit).

        Raises:
            ValueError: If max_depth is not positive.
        """
        if max_depth is not None and max_depth < 1:
            raise ValueError(f"max_depth must be positive, got {max_depth}")
        if max_depth is not None and max_depth * _FRAMES_PER_LEVEL > sys.getrecursionlimit():
            warnings.warn(
                f"max_depth={max_depth} is beyond the interpreter recursion limit "
                f"({sys.getrecursionlimit()}); deep graphs will fail before reaching it.",
                RuntimeWarning,
                stacklevel=2,
            )
        self.skip_unsupported = skip_unsupported
        self.max_depth = max_depth

    @classmethod
    def from_settings(cls, settings: CopySettings) -> Copier:
        """Build a copier from loaded settings.

        Args:
            settings: CopySettings instance (e.g. read from DEEPCLONE_* variables).

        Returns:
            Copier configured with the settings' mode and depth limit.
        """
        return cls(skip_unsupported=settings.skip_unsupported, max_depth=settings.max_depth)

    def _run(self, value: Any) -> Any:
        if value is None:
            return None
        context = CopyContext(skip_unsupported=self.skip_unsupported, max_depth=self.max_depth)
        try:
            return context.copy(value)
        except CopyDepthError:
            raise
        except RecursionError as e:
            raise CopyDepthError() from e

    def copy(self, value: T) -> CopyResult[T]:
        """Deep copy a value, reporting failure in the result.

        Args:
            value: Value to copy.

        Returns:
            CopyResult holding the copy, or None and the failure.
        """
        try:
            return CopyResult(value=self._run(value))
        except CopyError as e:
            return CopyResult(error=e)

    def must_copy(self, value: T) -> T:
        """Deep copy a value, raising on failure.

        Args:
            value: Value to copy.

        Returns:
            The copy.

        Raises:
            CopyError: If the copy failed.
        """
        return self._run(value)  # type: ignore[no-any-return]

    def __call__(self, value: T) -> T:
        """Alias for must_copy()."""
        return self.must_copy(value)


_strict = Copier()
_lenient = Copier(skip_unsupported=True)


def copy(value: T) -> CopyResult[T]:
    """Deep copy a value in strict mode.

    Any non-None unsupported value (function, lock, queue, ...) anywhere in
    the graph fails the whole call.

    Args:
        value: Value to copy.

    Returns:
        CopyResult with the copy on success, or None and an
        UnsupportedTypeError / CopyDepthError on failure.
    """
    return _strict.copy(value)


def copy_skip_unsupported(value: T) -> CopyResult[T]:
    """Deep copy a value, replacing unsupported values with None.

    Args:
        value: Value to copy.

    Returns:
        CopyResult with the copy; fails only with CopyDepthError.
    """
    return _lenient.copy(value)


def must_copy(value: T) -> T:
    """Deep copy a value in strict mode, raising on failure.

    Args:
        value: Value to copy.

    Returns:
        The copy.

    Raises:
        UnsupportedTypeError: If an unsupported value is encountered.
        CopyDepthError: If the graph is nested too deeply to follow.
    """
    return _strict.must_copy(value)
