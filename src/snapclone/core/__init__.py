"""Core primitives: value domain types, kinds, and errors."""

from snapclone.core.errors import (
    CloneDepthError,
    CloneError,
    UnsupportedTypeError,
    UnsupportedTypeWarning,
)
from snapclone.core.kind import UnsupportedHandling, ValueKind, is_container, kind_of
from snapclone.core.types import UNDEFINED, Atomic, Copy, Symbol, Undefined, Value

__all__ = [
    # Types
    "Copy",
    "Value",
    "Atomic",
    "Undefined",
    "UNDEFINED",
    "Symbol",
    # Kinds
    "ValueKind",
    "UnsupportedHandling",
    "kind_of",
    "is_container",
    # Errors
    "CloneError",
    "UnsupportedTypeError",
    "CloneDepthError",
    "UnsupportedTypeWarning",
]
