"""Engine configuration.

Passed to `CloneEngine` at construction or to `clone()` per call.
"""

from __future__ import annotations

from dataclasses import dataclass

from snapclone.core.kind import UnsupportedHandling


@dataclass(frozen=True, slots=True)
class CloneConfig:
    """Configuration for clone behaviour."""

    max_depth: int | None = None
    """Deepest container nesting allowed, root is depth 0. None = unlimited (default)."""

    unsupported: UnsupportedHandling = UnsupportedHandling.ERROR
    """What to do with values of unknown type. Default: raise UnsupportedTypeError."""

    def __post_init__(self) -> None:
        if self.max_depth is not None and self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0 or None, got {self.max_depth}")
