"""Configuration module using Pydantic Settings.

Provides typed copier configuration with environment variable support.

Usage:
    from deepclone.config import CopySettings

    settings = CopySettings(skip_unsupported=True)
"""

from deepclone.config.settings import CopySettings

__all__ = [
    "CopySettings",
]
