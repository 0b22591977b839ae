"""Structural equality for checking snapshots against their sources.

Built-in `==` recurses forever on self-referential containers, treats
`True == 1`, and never considers NaN equal to itself. `structurally_equal`
fixes all three and additionally requires both sides to share references in
the same places, so a clone compares equal to its source while an unaliased
rebuild of an aliased graph does not.
"""

from __future__ import annotations

import cmath
from decimal import Decimal
from typing import Any, assert_never

from snapclone.core.kind import ValueKind, kind_of


class _Pairing:
    """Bijection between container identities on the left and right side."""

    __slots__ = ("_forward", "_backward")

    def __init__(self) -> None:
        self._forward: dict[int, tuple[Any, Any]] = {}
        self._backward: dict[int, tuple[Any, Any]] = {}

    def check(self, a: Any, b: Any) -> bool | None:
        """Return None if neither side is paired yet, else whether a and b are paired together."""
        forward = self._forward.get(id(a))
        backward = self._backward.get(id(b))
        if forward is None and backward is None:
            return None
        return (
            forward is not None
            and forward[1] is b
            and backward is not None
            and backward[1] is a
        )

    def pair(self, a: Any, b: Any) -> None:
        self._forward[id(a)] = (a, b)
        self._backward[id(b)] = (b, a)


def _is_nan(value: Any) -> bool:
    if isinstance(value, float):
        return value != value
    if isinstance(value, complex):
        return cmath.isnan(value)
    if isinstance(value, Decimal):
        return value.is_nan()
    return False


def _atomic_equal(a: Any, b: Any) -> bool:
    if a is b:
        return True
    if type(a) is not type(b):
        return False
    if _is_nan(a) and _is_nan(b):
        return True
    return bool(a == b)


def _set_equal(a: set[Any] | frozenset[Any], b: set[Any] | frozenset[Any]) -> bool:
    if len(a) != len(b):
        return False
    # Members are hashable, so == groups likely candidates; NaN members fall back to a scan
    buckets: dict[Any, list[Any]] = {}
    for member in b:
        buckets.setdefault(member, []).append(member)
    for member in a:
        candidates = buckets.get(member)
        if not candidates:
            candidates = list(b)
        if not any(_equal(member, other, _Pairing()) for other in candidates):
            return False
    return True


def _items_equal(a: dict[Any, Any], b: dict[Any, Any], pairing: _Pairing) -> bool:
    if len(a) != len(b):
        return False
    for (key_a, item_a), (key_b, item_b) in zip(a.items(), b.items(), strict=True):
        if not _equal(key_a, key_b, _Pairing()):
            return False
        if not _equal(item_a, item_b, pairing):
            return False
    return True


def _equal(a: Any, b: Any, pairing: _Pairing) -> bool:
    kind = kind_of(a)

    if kind.is_container:
        if type(a) is not type(b):
            return False
        paired = pairing.check(a, b)
        if paired is not None:
            return paired
        pairing.pair(a, b)

    match kind:
        case ValueKind.ATOMIC:
            return _atomic_equal(a, b)
        case ValueKind.CALLABLE:
            return a is b
        case ValueKind.UNSUPPORTED:
            return a is b or (type(a) is type(b) and bool(a == b))
        case ValueKind.DATE:
            return bool(a == b) and getattr(a, "tzinfo", None) == getattr(b, "tzinfo", None)
        case ValueKind.SEQUENCE | ValueKind.TUPLE:
            return len(a) == len(b) and all(
                _equal(x, y, pairing) for x, y in zip(a, b, strict=True)
            )
        case ValueKind.MAPPING:
            return _items_equal(a, b, pairing)
        case ValueKind.RECORD:
            return _items_equal(vars(a), vars(b), pairing)
        case ValueKind.SET | ValueKind.FROZENSET:
            return _set_equal(a, b)
        case _:
            assert_never(kind)


def structurally_equal(a: Any, b: Any) -> bool:
    """Deep equality over the clone domain.

    Containers must have the same exact type, equal contents in the same
    order, and the same aliasing and cycle topology. NaN equals NaN.
    Callables, symbols and UNDEFINED compare by identity. Terminates on
    cyclic input.

    Args:
        a: First value.
        b: Second value.

    Returns:
        True if the values are structurally equal, False otherwise.
    """
    return _equal(a, b, _Pairing())
