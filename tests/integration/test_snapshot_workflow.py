"""Integration tests: snapshot, edit, compare, restore."""

import datetime as dt
from types import SimpleNamespace

import pytest

from snapclone import (
    UNDEFINED,
    CloneConfig,
    CloneEngine,
    ResettableRef,
    Symbol,
    UnsupportedHandling,
    UnsupportedTypeWarning,
    clone,
    structurally_equal,
)


def build_state():
    owner = SimpleNamespace(name="ada", joined=dt.date(2020, 1, 1))
    board = {
        "title": "Sprint",
        "owner": owner,
        "columns": [
            {"name": "todo", "cards": [{"id": 1, "assignee": owner, "labels": {"bug"}}]},
            {"name": "done", "cards": []},
        ],
        "archived": UNDEFINED,
        "on_change": print,
        Symbol("internal"): ("cache", 42),
    }
    board["self"] = board
    return board


def test_snapshot_edit_restore_cycle():
    """Full workflow over a graph with cycles, aliases, and every container kind."""
    board = build_state()
    holder = ResettableRef(board)
    snapshot = holder.initial()

    assert structurally_equal(snapshot, board)
    assert snapshot["columns"][0]["cards"][0]["assignee"] is snapshot["owner"]

    board["columns"][0]["cards"].append({"id": 2, "assignee": board["owner"], "labels": set()})
    board["owner"].name = "grace"
    assert holder.is_dirty()

    holder.reset()

    restored = holder.value
    assert restored is not board
    assert restored["owner"].name == "ada"
    assert len(restored["columns"][0]["cards"]) == 1
    assert restored["self"] is restored
    assert restored["on_change"] is print
    assert not holder.is_dirty()

    previous = holder.last_value_before_last_reset()
    assert previous["owner"].name == "grace"
    assert previous["columns"][0]["cards"][1]["assignee"] is previous["owner"]


def test_state_with_foreign_object_needs_policy():
    class Connection:
        pass

    conn = Connection()
    state = {"db": conn, "rows": [1, 2]}

    with pytest.raises(TypeError):
        clone(state)

    engine = CloneEngine(CloneConfig(unsupported=UnsupportedHandling.PASSTHROUGH))
    with pytest.warns(UnsupportedTypeWarning):
        holder = ResettableRef(state, engine=engine)

    with pytest.warns(UnsupportedTypeWarning):
        initial = holder.initial()
    assert initial["db"] is conn
    assert initial["rows"] is not state["rows"]
