"""Copy engine: per-invocation state, dispatch, and per-kind copiers."""

from deepclone.engine.copiers import COPIERS, apply_unsupported_policy
from deepclone.engine.dispatch import IDENTITY_KINDS, CopyContext, has_self_copy
from deepclone.engine.tracker import IdentityTracker

__all__ = [
    "CopyContext",
    "IdentityTracker",
    "COPIERS",
    "IDENTITY_KINDS",
    "apply_unsupported_policy",
    "has_self_copy",
]
