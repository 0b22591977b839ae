"""Snapshot holders built on the clone engine."""

from snapclone.ref.named import ACCESSOR_SUFFIXES, named_ref
from snapclone.ref.resettable import Ref, ResettableRef

__all__ = [
    "Ref",
    "ResettableRef",
    "named_ref",
    "ACCESSOR_SUFFIXES",
]
