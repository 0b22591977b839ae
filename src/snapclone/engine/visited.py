"""Identity-keyed map from original containers to their clones.

One map lives for exactly one top-level clone call. Registering a shell before
copying its children is what lets a self-reference resolve to the shell
instead of recursing forever.
"""

from __future__ import annotations

from typing import Any


class VisitedMap:
    """Original → clone mapping keyed by object identity.

    Structure:
        _entries[id(original)] = (original, clone)

    The original is stored alongside its clone so that its id cannot be reused
    by another object while the call is running.
    """

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        """Initialize an empty map."""
        self._entries: dict[int, tuple[Any, Any]] = {}

    def __contains__(self, original: object) -> bool:
        return id(original) in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def lookup(self, original: Any) -> Any:
        """Get the clone registered for an original.

        Args:
            original: Container previously passed to register().

        Returns:
            The clone registered for that identity.

        Raises:
            KeyError: If the original was never registered.
        """
        return self._entries[id(original)][1]

    def register(self, original: Any, clone: Any) -> None:
        """Record the clone for an original.

        Args:
            original: Source container.
            clone: Its (possibly still empty) copy.

        Raises:
            RuntimeError: If the original is already registered.
        """
        key = id(original)
        if key in self._entries:
            raise RuntimeError(
                f"{type(original).__qualname__} at id {key} registered twice in one clone call"
            )
        self._entries[key] = (original, clone)
