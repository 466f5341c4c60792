"""Copy failure taxonomy.

All failures raised by the engine derive from CopyError so callers can catch
them in one place. Exceptions raised by user-supplied ``__deep_copy__`` hooks
are never wrapped.
"""

from __future__ import annotations


def qualified_name(tp: type) -> str:
    return f"{tp.__module__}.{tp.__qualname__}"


class CopyError(Exception):
    """Base class for deep copy failures."""

    pass


class UnsupportedTypeError(CopyError, TypeError):
    """Raised in strict mode when a value of an unsupported kind is encountered.

    Args:
        value_type: Concrete type of the offending value.
        reason: Optional detail on why the type is unsupported.
    """

    def __init__(self, value_type: type, reason: str | None = None):
        self.value_type = value_type
        self.reason = reason
        message = f"unsupported non-None value for type: {qualified_name(value_type)}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class CopyDepthError(CopyError, RecursionError):
    """Raised when a value graph nests deeper than the copy can follow.

    Args:
        max_depth: Configured nesting limit, or None when the interpreter's
            own recursion limit was exhausted.
    """

    def __init__(self, max_depth: int | None = None):
        self.max_depth = max_depth
        if max_depth is None:
            message = "value graph exceeds the interpreter recursion limit"
        else:
            message = f"value graph nests deeper than max_depth={max_depth}"
        super().__init__(message)
