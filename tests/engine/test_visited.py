"""Tests for the identity-keyed visited map."""

import pytest

from snapclone.engine import VisitedMap


def test_register_and_lookup():
    visited = VisitedMap()
    original = [1]
    copy = [1]

    visited.register(original, copy)

    assert original in visited
    assert visited.lookup(original) is copy
    assert len(visited) == 1


def test_keyed_by_identity_not_equality():
    """Equal but distinct originals get separate entries."""
    visited = VisitedMap()
    first, second = [1], [1]

    visited.register(first, "first")

    assert first in visited
    assert second not in visited
    with pytest.raises(KeyError):
        visited.lookup(second)


def test_double_registration_rejected():
    visited = VisitedMap()
    original = {}
    visited.register(original, {})

    with pytest.raises(RuntimeError, match="registered twice"):
        visited.register(original, {})


def test_keeps_originals_alive():
    """Originals are held so their ids cannot be recycled mid-call."""
    visited = VisitedMap()
    visited.register([1, 2, 3], "copy")

    # A fresh list may not reuse the registered list's id while the map lives
    probe = [4, 5, 6]
    assert probe not in visited
