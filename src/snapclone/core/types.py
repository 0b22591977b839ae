"""Core type definitions for snapclone."""

from __future__ import annotations

import datetime as dt
from collections.abc import Callable
from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace
from typing import Any, Final

type Copy[T] = T
"""Type alias indicating a value is an independent structural copy.

When you see `Copy[T]` in a return type, the returned value shares no mutable
container with its source. Mutating it never affects the original.
"""


class Undefined:
    """Marker for a value that is absent, as opposed to explicitly `None`.

    There is exactly one instance, `UNDEFINED`. It is falsy and survives
    copying and pickling as itself.
    """

    _instance: Undefined | None = None

    def __new__(cls) -> Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False

    def __copy__(self) -> Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Final = Undefined()


class Symbol:
    """Opaque, identity-compared handle.

    Two symbols are equal only if they are the same object, even when their
    descriptions match. Usable as a dict key alongside strings.

    Usage:
        secret = Symbol("secret")
        record = {"name": "x", secret: 42}
    """

    __slots__ = ("description",)

    description: str | None

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"

    def __copy__(self) -> Symbol:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Symbol:
        return self


type Atomic = (
    None
    | Undefined
    | bool
    | int
    | float
    | complex
    | Decimal
    | Fraction
    | str
    | bytes
    | Symbol
    | Callable[..., Any]
)
"""Values returned by identity: immutable scalars and opaque callables."""

type Value = (
    Atomic
    | dt.datetime
    | dt.date
    | list[Value]
    | tuple[Value, ...]
    | set[Value]
    | frozenset[Value]
    | dict[Any, Value]
    | SimpleNamespace
)
"""The closed value domain understood by the clone engine."""
