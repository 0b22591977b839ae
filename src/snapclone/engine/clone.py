"""Deep Copy Engine: structural, identity-tracked cloning.

Each call walks the input once. Containers are copied into new instances of
the same kind. Atomic values and callables are returned as-is. Every container
identity seen more than once maps to a single clone, so shared references and
cycles in the input reappear in the output.

Usage:
    from snapclone import clone

    state = {"items": [1, 2]}
    state["self"] = state

    snapshot = clone(state)
    assert snapshot["self"] is snapshot
    assert snapshot["items"] is not state["items"]
"""

from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import TYPE_CHECKING, Any, assert_never, cast

from snapclone.core.errors import CloneDepthError
from snapclone.core.kind import ValueKind, kind_of
from snapclone.core.types import Copy
from snapclone.engine.models import CloneConfig
from snapclone.engine.visited import VisitedMap

if TYPE_CHECKING:
    from snapclone.config import CloneSettings

# Path segment templates, formatted only when an error needs a location
_INDEX = "[{}]"
_KEY = "[{!r}]"
_DICT_KEY = "<key {!r}>"
_ATTR = ".{}"
_MEMBER = "{{{!r}}}"

type PathSegment = tuple[str, Any]


def format_path(segments: list[PathSegment]) -> str:
    """Render path segments as a readable location.

    Args:
        segments: (template, key) pairs from the root down.

    Returns:
        Location string such as "root['users'][0].name".
    """
    return "root" + "".join(template.format(key) for template, key in segments)


@dataclass(slots=True)
class _CloneRun:
    """State for one top-level clone call. Discarded when the call returns."""

    visited: VisitedMap = field(default_factory=VisitedMap)
    path: list[PathSegment] = field(default_factory=list)
    building: dict[int, int] = field(default_factory=dict)
    """Depth at which each tuple or frozenset still being populated was entered."""
    shift: int = 0
    """Path segments that do not count as depth, walked since re-entering one of those."""

    @property
    def depth(self) -> int:
        return len(self.path) - self.shift


class CloneEngine:
    """Structural deep-copy engine.

    Holds only immutable configuration, so one engine can serve any number of
    calls, including concurrent ones on different threads.

    Args:
        config: Engine configuration. Defaults to unlimited depth and
            UnsupportedHandling.ERROR.
    """

    def __init__(self, config: CloneConfig | None = None) -> None:
        """Initialize engine.

        Args:
            config: Engine configuration (default CloneConfig()).
        """
        self._config = config or CloneConfig()
        self._on_unsupported = self._config.unsupported.get_strategy()

    @classmethod
    def from_settings(cls, settings: CloneSettings | None = None) -> CloneEngine:
        """Build an engine from pydantic settings.

        Args:
            settings: Loaded settings. If None, reads SNAPCLONE_* environment variables.

        Returns:
            Engine configured from the settings.

        Raises:
            ImportError: If pydantic-settings is not installed.
        """
        # Late import: pydantic-settings is an optional extra
        from snapclone.config import CloneSettings

        if settings is None:
            settings = CloneSettings()
        return cls(settings.to_config())

    @property
    def config(self) -> CloneConfig:
        """Configuration this engine was built with."""
        return self._config

    def clone[V](self, value: V) -> Copy[V]:
        """Produce an independent structural copy of a value.

        Args:
            value: Any value in the clone domain, including cyclic graphs.

        Returns:
            Copy sharing no container with the input. Atomic values and
            callables are the same objects as in the input.

        Raises:
            UnsupportedTypeError: If the input holds a value of unknown type and
                the policy is UnsupportedHandling.ERROR.
            CloneDepthError: If containers nest deeper than config.max_depth, or
                deeper than the interpreter recursion limit allows.
        """
        run = _CloneRun()
        try:
            return cast(V, self._clone(value, run))
        except RecursionError:
            raise CloneDepthError(None, format_path(run.path)) from None

    def _clone(self, value: Any, run: _CloneRun) -> Any:
        kind = kind_of(value)

        if kind.is_container:
            if value in run.visited:
                return run.visited.lookup(value)
            entered_at = run.building.get(id(value))
            if entered_at is not None:
                # Cycle back into a tuple or frozenset under construction:
                # populate it again at the depth it was first entered
                shift = run.depth - entered_at
                run.shift += shift
                result = self._populate(value, kind, run)
                run.shift -= shift
                return result
            max_depth = self._config.max_depth
            if max_depth is not None and run.depth > max_depth:
                raise CloneDepthError(max_depth, format_path(run.path))

        return self._populate(value, kind, run)

    def _populate(self, value: Any, kind: ValueKind, run: _CloneRun) -> Any:
        match kind:
            case ValueKind.ATOMIC | ValueKind.CALLABLE:
                return value
            case ValueKind.UNSUPPORTED:
                return self._on_unsupported(value, format_path(run.path))
            case ValueKind.DATE:
                return self._clone_date(value, run)
            case ValueKind.SEQUENCE:
                return self._clone_list(value, run)
            case ValueKind.MAPPING:
                return self._clone_dict(value, run)
            case ValueKind.RECORD:
                return self._clone_namespace(value, run)
            case ValueKind.SET:
                return self._clone_set(value, run)
            case ValueKind.TUPLE:
                return self._clone_tuple(value, run)
            case ValueKind.FROZENSET:
                return self._clone_frozenset(value, run)
            case _:
                assert_never(kind)

    def _clone_date(self, value: dt.date, run: _CloneRun) -> dt.date:
        # Field-by-field rebuild always yields a new instance
        result: dt.date
        if isinstance(value, dt.datetime):
            result = dt.datetime(
                value.year,
                value.month,
                value.day,
                value.hour,
                value.minute,
                value.second,
                value.microsecond,
                value.tzinfo,
                fold=value.fold,
            )
        else:
            result = dt.date(value.year, value.month, value.day)
        run.visited.register(value, result)
        return result

    def _clone_list(self, value: list[Any], run: _CloneRun) -> list[Any]:
        result: list[Any] = []
        run.visited.register(value, result)
        path = run.path
        for index, item in enumerate(value):
            path.append((_INDEX, index))
            result.append(self._clone(item, run))
            path.pop()
        return result

    def _clone_dict(self, value: dict[Any, Any], run: _CloneRun) -> dict[Any, Any]:
        result: dict[Any, Any] = {}
        run.visited.register(value, result)
        path = run.path
        for key, item in value.items():
            path.append((_DICT_KEY, key))
            new_key = self._clone(key, run)
            path[-1] = (_KEY, key)
            result[new_key] = self._clone(item, run)
            path.pop()
        return result

    def _clone_namespace(self, value: SimpleNamespace, run: _CloneRun) -> SimpleNamespace:
        result = SimpleNamespace()
        run.visited.register(value, result)
        path = run.path
        for name, item in vars(value).items():
            path.append((_ATTR, name))
            setattr(result, name, self._clone(item, run))
            path.pop()
        return result

    def _clone_set(self, value: set[Any], run: _CloneRun) -> set[Any]:
        result: set[Any] = set()
        run.visited.register(value, result)
        path = run.path
        for member in value:
            path.append((_MEMBER, member))
            result.add(self._clone(member, run))
            path.pop()
        return result

    def _clone_tuple(self, value: tuple[Any, ...], run: _CloneRun) -> tuple[Any, ...]:
        items: list[Any] = []
        path = run.path
        run.building.setdefault(id(value), run.depth)
        for index, item in enumerate(value):
            path.append((_INDEX, index))
            items.append(self._clone(item, run))
            path.pop()
        run.building.pop(id(value), None)
        # A mutable child may have cycled back here and built this tuple already
        if value in run.visited:
            return cast(tuple[Any, ...], run.visited.lookup(value))
        result = tuple(items)
        run.visited.register(value, result)
        return result

    def _clone_frozenset(self, value: frozenset[Any], run: _CloneRun) -> frozenset[Any]:
        members: list[Any] = []
        path = run.path
        run.building.setdefault(id(value), run.depth)
        for member in value:
            path.append((_MEMBER, member))
            members.append(self._clone(member, run))
            path.pop()
        run.building.pop(id(value), None)
        if value in run.visited:
            return cast(frozenset[Any], run.visited.lookup(value))
        result = frozenset(members)
        run.visited.register(value, result)
        return result


# Module-level engine with default configuration
_default_engine = CloneEngine()


def get_default_engine() -> CloneEngine:
    """Access the engine used by `clone()` when no config is given.

    Returns:
        The process-wide default CloneEngine.
    """
    return _default_engine


def clone[V](value: V, *, config: CloneConfig | None = None) -> Copy[V]:
    """Produce an independent structural copy of a value.

    Args:
        value: Any value in the clone domain, including cyclic graphs.
        config: Optional per-call configuration. Uses the default engine if None.

    Returns:
        Copy sharing no container with the input.

    Raises:
        UnsupportedTypeError: If the input holds a value of unknown type and
            the policy is UnsupportedHandling.ERROR.
        CloneDepthError: If containers nest deeper than config.max_depth.
    """
    engine = _default_engine if config is None else CloneEngine(config)
    return engine.clone(value)
