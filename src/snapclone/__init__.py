"""snapclone: structural deep copies for snapshotting arbitrary values.

Usage:
    from snapclone import clone, structurally_equal

    shared = {"x": 1}
    state = {"p": shared, "q": shared, "seen": {1, 2}}
    state["self"] = state

    snapshot = clone(state)
    assert snapshot["self"] is snapshot
    assert snapshot["p"] is snapshot["q"]
    assert snapshot["p"] is not shared
    assert structurally_equal(snapshot, state)
"""

__version__ = "0.1.0"

# Core primitives
from snapclone.core import (
    UNDEFINED,
    CloneDepthError,
    CloneError,
    Copy,
    Symbol,
    Undefined,
    UnsupportedHandling,
    UnsupportedTypeError,
    UnsupportedTypeWarning,
    Value,
    ValueKind,
    is_container,
    kind_of,
)

# Engine
from snapclone.engine import (
    CloneConfig,
    CloneEngine,
    clone,
    structurally_equal,
)

# Snapshot holders
from snapclone.ref import (
    Ref,
    ResettableRef,
    named_ref,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "Value",
    "Undefined",
    "UNDEFINED",
    "Symbol",
    "ValueKind",
    "UnsupportedHandling",
    "kind_of",
    "is_container",
    "CloneError",
    "UnsupportedTypeError",
    "CloneDepthError",
    "UnsupportedTypeWarning",
    # Engine
    "CloneEngine",
    "CloneConfig",
    "clone",
    "structurally_equal",
    # Holders
    "Ref",
    "ResettableRef",
    "named_ref",
]
