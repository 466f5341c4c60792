"""Configuration settings using Pydantic Settings.

Provides typed copier configuration with environment variable support.

Usage:
    from deepclone import Copier
    from deepclone.config import CopySettings

    # Load from environment variables (DEEPCLONE_*)
    copier = Copier.from_settings(CopySettings())

    # Or override with explicit values
    copier = Copier.from_settings(CopySettings(skip_unsupported=True, max_depth=100))
"""

from __future__ import annotations

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install deepclone[config]"
    ) from e


class CopySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for Copier instances.

    Attributes:
        skip_unsupported: Replace unsupported values with None instead of failing.
        max_depth: Maximum container nesting to follow (None for no limit).

    Environment Variables:
        DEEPCLONE_SKIP_UNSUPPORTED
        DEEPCLONE_MAX_DEPTH
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEPCLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    skip_unsupported: bool = False
    max_depth: int | None = Field(default=None, gt=0)
