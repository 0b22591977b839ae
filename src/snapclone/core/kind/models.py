"""Value kind models: the closed variant the engine dispatches on, and policies.

Every value is classified into exactly one `ValueKind`. Container kinds are
tracked by identity while cloning. Atomic and callable kinds are shared.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
from typing import Any


class ValueKind(Enum):
    """Kind of a value within the clone domain."""

    ATOMIC = auto()  # None, UNDEFINED, bool, numbers, str, bytes, Symbol
    CALLABLE = auto()  # Functions, methods, classes: opaque, shared
    DATE = auto()  # datetime.datetime, datetime.date
    SEQUENCE = auto()  # list
    TUPLE = auto()  # tuple
    MAPPING = auto()  # dict
    RECORD = auto()  # types.SimpleNamespace
    SET = auto()  # set
    FROZENSET = auto()  # frozenset
    UNSUPPORTED = auto()  # Anything else, handled by UnsupportedHandling

    @property
    def is_container(self) -> bool:
        """Whether values of this kind are tracked by identity and copied."""
        return self not in (ValueKind.ATOMIC, ValueKind.CALLABLE, ValueKind.UNSUPPORTED)


class UnsupportedHandling(Enum):
    """Strategy for values whose type the engine does not recognize."""

    ERROR = auto()  # Raise UnsupportedTypeError (default)
    PASSTHROUGH = auto()  # Share by reference and warn

    def get_strategy(self) -> Callable[[Any, str], Any]:
        """Get the handler function for this policy.

        Returns:
            Function taking (value, path) and returning the value to place in the clone.
        """
        # Late import to avoid circular dependency
        from snapclone.core.kind import operations

        strategies = {
            UnsupportedHandling.ERROR: operations.unsupported_error,
            UnsupportedHandling.PASSTHROUGH: operations.unsupported_passthrough,
        }
        return strategies[self]

    @classmethod
    def from_name(cls, name: str) -> UnsupportedHandling:
        """Look up a policy by case-insensitive name, e.g. "passthrough".

        Raises:
            ValueError: If no policy has that name.
        """
        try:
            return cls[name.upper()]
        except KeyError:
            choices = ", ".join(member.name.lower() for member in cls)
            raise ValueError(f"Unknown unsupported-type policy {name!r} (expected {choices})") from None
