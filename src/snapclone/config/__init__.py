"""Configuration module using Pydantic Settings.

Provides typed engine configuration with environment variable support.

Usage:
    from snapclone.config import CloneSettings

    settings = CloneSettings(max_depth=32)
    engine = CloneEngine.from_settings(settings)
"""

from snapclone.config.settings import CloneSettings

__all__ = [
    "CloneSettings",
]
