"""Value kinds: classification, policies, and policy operations."""

from snapclone.core.kind.core import is_container, kind_of
from snapclone.core.kind.models import UnsupportedHandling, ValueKind

__all__ = [
    # Models
    "ValueKind",
    "UnsupportedHandling",
    # Core
    "kind_of",
    "is_container",
]
