"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from snapclone import CloneConfig, CloneEngine, UnsupportedHandling


@pytest.fixture
def engine():
    """Engine with default configuration."""
    return CloneEngine()


@pytest.fixture
def passthrough_engine():
    """Engine that shares unsupported values instead of raising."""
    return CloneEngine(CloneConfig(unsupported=UnsupportedHandling.PASSTHROUGH))


class Opaque:
    """Custom class the engine does not know how to clone."""

    def __init__(self, payload):
        self.payload = payload


@pytest.fixture
def opaque_cls():
    return Opaque
