"""Classification of values into the closed `ValueKind` variant.

Container kinds match on exact type. A subclass of `list` or `dict` carries
behaviour the engine knows nothing about, so it is UNSUPPORTED rather than
silently copied into the base type.

Usage:
    kind_of([1, 2])        # ValueKind.SEQUENCE
    kind_of(print)         # ValueKind.CALLABLE
    kind_of(OrderedDict()) # ValueKind.UNSUPPORTED
"""

from __future__ import annotations

import datetime as dt
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from types import NoneType, SimpleNamespace
from typing import Any

from snapclone.core.kind.models import ValueKind
from snapclone.core.types import Symbol, Undefined

_CONTAINER_KINDS: dict[type, ValueKind] = {
    list: ValueKind.SEQUENCE,
    tuple: ValueKind.TUPLE,
    dict: ValueKind.MAPPING,
    SimpleNamespace: ValueKind.RECORD,
    set: ValueKind.SET,
    frozenset: ValueKind.FROZENSET,
    dt.datetime: ValueKind.DATE,
    dt.date: ValueKind.DATE,
}

# Immutable scalars. Subclasses are accepted: they cannot hold containers by value.
_ATOMIC_TYPES: tuple[type, ...] = (
    NoneType,
    Undefined,
    bool,
    int,
    float,
    complex,
    Decimal,
    Fraction,
    str,
    bytes,
    Symbol,
    range,
    dt.time,
    dt.timedelta,
    dt.tzinfo,
    Enum,
)


def kind_of(value: Any) -> ValueKind:
    """Classify a value for clone dispatch.

    Args:
        value: Any Python object.

    Returns:
        The value's kind. Never raises.
    """
    kind = _CONTAINER_KINDS.get(type(value))
    if kind is not None:
        return kind
    if isinstance(value, _ATOMIC_TYPES):
        return ValueKind.ATOMIC
    if callable(value):
        return ValueKind.CALLABLE
    return ValueKind.UNSUPPORTED


def is_container(value: Any) -> bool:
    """Check whether a value is copied structurally rather than shared.

    Args:
        value: Any Python object.

    Returns:
        True if the value's kind is a container kind.
    """
    return kind_of(value).is_container
