"""Named accessor bundles over a `ResettableRef`.

Usage:
    user = named_ref("User", {"name": "Ada"})
    user["user_ref"].value["name"] = "Grace"
    user["user_reset"]()
    user["user_initial"]()   # {"name": "Ada"}
"""

from __future__ import annotations

from typing import Any

from snapclone.engine import CloneEngine
from snapclone.ref.resettable import Ref, ResettableRef

ACCESSOR_SUFFIXES = (
    "ref",
    "initial",
    "reset",
    "last_value_before_last_reset",
    "unconnected",
)


def named_ref[T](
    name: str, value: T | Ref[T], *, engine: CloneEngine | None = None
) -> dict[str, Any]:
    """Wrap a value in a ResettableRef and expose it under prefixed names.

    Keys are `{name}_ref`, `{name}_initial`, `{name}_reset`,
    `{name}_last_value_before_last_reset` and `{name}_unconnected`, with the
    name lower-cased.

    Args:
        name: Prefix for the accessor names.
        value: Initial value, or an existing Ref to wrap.
        engine: Clone engine for snapshots (default engine if None).

    Returns:
        Dict mapping accessor names to the Ref, bound methods, and the
        unconnected Ref.

    Raises:
        ValueError: If the lower-cased name is not a valid identifier.
    """
    prefix = name.lower()
    if not prefix.isidentifier():
        raise ValueError(f"Ref name must be a valid identifier, got {name!r}")

    holder = ResettableRef(value, engine=engine)
    return {
        f"{prefix}_ref": holder.ref,
        f"{prefix}_initial": holder.initial,
        f"{prefix}_reset": holder.reset,
        f"{prefix}_last_value_before_last_reset": holder.last_value_before_last_reset,
        f"{prefix}_unconnected": holder.unconnected,
    }
