"""Value holders that keep an initial snapshot and can reset to it.

Every snapshot stored or handed out by `ResettableRef` is a fresh clone, so
callers can never mutate the stored initial or last value through a returned
reference.

Usage:
    form = ResettableRef({"name": "", "tags": []})
    form.value["tags"].append("draft")
    form.is_dirty()                       # True
    form.reset()
    form.value                            # {"name": "", "tags": []}
    form.last_value_before_last_reset()   # {"name": "", "tags": ["draft"]}
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from snapclone.core.types import Copy
from snapclone.engine import CloneEngine, get_default_engine, structurally_equal


@dataclass(slots=True)
class Ref[T]:
    """Mutable box holding a single value. Several holders may share one Ref."""

    value: T


class ResettableRef[T]:
    """Holder of a current value plus an initial snapshot.

    Args:
        value: Initial value, or an existing Ref to wrap. A wrapped Ref is
            shared, not copied: writes through it are visible here.
        engine: Clone engine used for every snapshot (default engine if None).
    """

    def __init__(self, value: T | Ref[T], *, engine: CloneEngine | None = None) -> None:
        """Capture the initial snapshot.

        Args:
            value: Initial value or Ref to wrap.
            engine: Clone engine for snapshots.
        """
        self._engine = engine or get_default_engine()
        self.ref: Ref[T] = value if isinstance(value, Ref) else Ref(value)
        self._initial: T = self._engine.clone(self.ref.value)
        self.unconnected: Ref[T] = Ref(self._engine.clone(self.ref.value))
        """Independent copy of the initial value, never touched by reset()."""
        self._last_value: Any = None
        self._has_last_value = False

    @property
    def value(self) -> T:
        """Current value (not a copy)."""
        return self.ref.value

    @value.setter
    def value(self, new_value: T) -> None:
        self.ref.value = new_value

    def initial(self) -> Copy[T]:
        """Get a fresh copy of the initial snapshot.

        Returns:
            Clone of the value captured at construction.
        """
        return self._engine.clone(self._initial)

    def reset(self) -> None:
        """Restore the initial value, remembering the value being replaced."""
        self._last_value = self._engine.clone(self.ref.value)
        self._has_last_value = True
        self.ref.value = self._engine.clone(self._initial)

    def last_value_before_last_reset(self) -> Copy[T] | None:
        """Get a copy of the value replaced by the most recent reset().

        Returns:
            Clone of the replaced value, or None if reset() was never called.
            Falsy values such as 0 or [] are returned as-is.
        """
        if not self._has_last_value:
            return None
        return self._engine.clone(self._last_value)

    def is_dirty(self) -> bool:
        """Check whether the current value differs from the initial snapshot.

        Returns:
            True if not structurally equal to the initial value.
        """
        return not structurally_equal(self.ref.value, self._initial)

    def __repr__(self) -> str:
        return f"ResettableRef({self.ref.value!r})"
