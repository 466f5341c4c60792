"""deepclone: cycle-safe, share-preserving deep copies of arbitrary object graphs.

Usage:
    from dataclasses import dataclass
    import deepclone

    @dataclass
    class Node:
        value: int
        next: "Node | None" = None

    head = Node(1)
    head.next = head  # cycle

    result = deepclone.copy(head)
    clone = result.unwrap()
    assert clone.next is clone and clone is not head

    # Unsupported values (functions, locks, queues, ...) fail strict copies
    # and become None under copy_skip_unsupported().
    clone = deepclone.copy_skip_unsupported({"job": Node(2), "lock": threading.Lock()}).unwrap()
"""

__version__ = "0.1.0"

# Entry points
from deepclone.api import (
    Copier,
    copy,
    copy_skip_unsupported,
    must_copy,
)

# Core primitives
from deepclone.core import (
    CopyDepthError,
    CopyError,
    CopyResult,
    IdentityKey,
    Kind,
    SelfCopying,
    UnsupportedTypeError,
    classify,
    kind_of,
)

# Engine
from deepclone.engine import (
    CopyContext,
    IdentityTracker,
)

__all__ = [
    # Version
    "__version__",
    # Entry points
    "copy",
    "copy_skip_unsupported",
    "must_copy",
    "Copier",
    # Core
    "Kind",
    "classify",
    "kind_of",
    "SelfCopying",
    "IdentityKey",
    "CopyResult",
    "CopyError",
    "UnsupportedTypeError",
    "CopyDepthError",
    # Engine
    "CopyContext",
    "IdentityTracker",
]
