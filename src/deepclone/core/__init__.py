"""Core functionalities: stateless classification, protocols, and failure types.

Architecture Note:
    core/ contains pure, stateless building blocks with no per-call state.
    The per-invocation machinery (identity tracking, recursion) lives in engine/.
"""

from deepclone.core.errors import CopyDepthError, CopyError, UnsupportedTypeError
from deepclone.core.kinds import Kind, classify, kind_of
from deepclone.core.models import CopyResult, IdentityKey, SelfCopying

__all__ = [
    # Kinds
    "Kind",
    "classify",
    "kind_of",
    # Models
    "SelfCopying",
    "IdentityKey",
    "CopyResult",
    # Errors
    "CopyError",
    "UnsupportedTypeError",
    "CopyDepthError",
]
