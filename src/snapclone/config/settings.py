"""Configuration settings using Pydantic Settings.

Provides typed engine configuration with environment variable support.

Usage:
    from snapclone.config import CloneSettings

    # Load from environment variables (SNAPCLONE_*)
    settings = CloneSettings()

    # Or override with explicit values
    settings = CloneSettings(max_depth=64, unsupported="passthrough")
    engine = CloneEngine(settings.to_config())
"""

from __future__ import annotations

from typing import Literal

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install snapclone[config]"
    ) from e

from snapclone.core.kind import UnsupportedHandling
from snapclone.engine.models import CloneConfig


class CloneSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the clone engine.

    Attributes:
        max_depth: Deepest container nesting allowed (None for unlimited).
        unsupported: Policy for values of unknown type (error, passthrough).

    Environment Variables:
        SNAPCLONE_MAX_DEPTH
        SNAPCLONE_UNSUPPORTED
    """

    model_config = SettingsConfigDict(
        env_prefix="SNAPCLONE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    max_depth: int | None = Field(default=None, ge=0)
    unsupported: Literal["error", "passthrough"] = "error"

    def to_config(self) -> CloneConfig:
        """Build the engine configuration these settings describe.

        Returns:
            Frozen CloneConfig.
        """
        return CloneConfig(
            max_depth=self.max_depth,
            unsupported=UnsupportedHandling.from_name(self.unsupported),
        )
