"""Errors and warnings raised while cloning."""

from __future__ import annotations

from typing import Any


class CloneError(Exception):
    """Base class for clone failures."""

    pass


class UnsupportedTypeError(CloneError, TypeError):
    """Raised when a value outside the clone domain is encountered.

    Attributes:
        value: The offending value.
        value_type: Its exact type.
        path: Location of the value inside the cloned input, e.g. "root['a'][0]".
    """

    def __init__(self, value: Any, path: str = "root") -> None:
        self.value = value
        self.value_type = type(value)
        self.path = path
        super().__init__(
            f"Cannot clone value of type {self.value_type.__qualname__} at {path}. "
            f"Supported containers are list, tuple, dict, set, frozenset, "
            f"SimpleNamespace, datetime and date."
        )


class CloneDepthError(CloneError, ValueError):
    """Raised when input nests containers deeper than the configured limit.

    Also raised when the input nests deeper than the interpreter recursion
    limit allows, in which case max_depth is None.

    Attributes:
        max_depth: The configured limit, or None if unlimited.
        path: Location of the first container past the limit.
    """

    def __init__(self, max_depth: int | None, path: str) -> None:
        self.max_depth = max_depth
        self.path = path
        if max_depth is None:
            super().__init__(f"Container at {path} exceeds the interpreter recursion limit")
        else:
            super().__init__(f"Container at {path} exceeds max_depth={max_depth}")


class UnsupportedTypeWarning(UserWarning):
    """Emitted when an unsupported value is shared by reference instead of copied."""
