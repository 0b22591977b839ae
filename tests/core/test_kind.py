"""Tests for value kind classification and policies."""

import datetime as dt
import enum
import functools
import math
from collections import OrderedDict, defaultdict
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from types import SimpleNamespace

import pytest

from snapclone import UNDEFINED, Symbol, UnsupportedHandling, ValueKind, is_container, kind_of
from snapclone.core.kind import operations


class Color(enum.Enum):
    RED = 1


@dataclass
class Point:
    x: int
    y: int


class CallableThing:
    def __call__(self):
        return 1


@pytest.mark.parametrize(
    "value",
    [
        None,
        UNDEFINED,
        True,
        0,
        10**40,
        1.5,
        math.nan,
        math.inf,
        -math.inf,
        1 + 2j,
        Decimal("1.1"),
        Fraction(1, 3),
        "text",
        b"bytes",
        Symbol("s"),
        range(3),
        dt.time(12, 0),
        dt.timedelta(days=1),
        dt.timezone.utc,
        Color.RED,
    ],
)
def test_atomic_values(value):
    assert kind_of(value) is ValueKind.ATOMIC
    assert not is_container(value)


@pytest.mark.parametrize(
    "value",
    [len, lambda: None, functools.partial(int, "1"), Point, CallableThing(), "x".upper],
)
def test_callables_are_opaque(value):
    assert kind_of(value) is ValueKind.CALLABLE
    assert not is_container(value)


@pytest.mark.parametrize(
    ("value", "kind"),
    [
        ([], ValueKind.SEQUENCE),
        ((), ValueKind.TUPLE),
        ({}, ValueKind.MAPPING),
        (SimpleNamespace(), ValueKind.RECORD),
        (set(), ValueKind.SET),
        (frozenset(), ValueKind.FROZENSET),
        (dt.datetime(2024, 1, 1), ValueKind.DATE),
        (dt.date(2024, 1, 1), ValueKind.DATE),
    ],
)
def test_container_kinds(value, kind):
    assert kind_of(value) is kind
    assert is_container(value)


@pytest.mark.parametrize(
    "value",
    [OrderedDict(), defaultdict(list), Point(1, 2), object(), bytearray(b"x")],
)
def test_unknown_types_are_unsupported(value):
    """CRITICAL: Subclasses and custom instances are never treated as plain containers.

    Why: Copying an OrderedDict into a dict would lose its type identity.
    """
    assert kind_of(value) is ValueKind.UNSUPPORTED
    assert not is_container(value)


def test_unsupported_handling_strategies():
    assert UnsupportedHandling.ERROR.get_strategy() is operations.unsupported_error
    assert UnsupportedHandling.PASSTHROUGH.get_strategy() is operations.unsupported_passthrough


def test_unsupported_handling_from_name():
    assert UnsupportedHandling.from_name("passthrough") is UnsupportedHandling.PASSTHROUGH
    assert UnsupportedHandling.from_name("ERROR") is UnsupportedHandling.ERROR
    with pytest.raises(ValueError, match="expected error, passthrough"):
        UnsupportedHandling.from_name("copy")
