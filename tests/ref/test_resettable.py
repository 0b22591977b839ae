"""Tests for ResettableRef snapshot holder."""

from snapclone import CloneConfig, CloneEngine, Ref, ResettableRef


def test_initial_snapshot_is_independent():
    """CRITICAL: Mutating the live value never changes the initial snapshot.

    Why: reset() must restore the value as it was at construction.
    """
    source = {"items": [1, 2]}
    holder = ResettableRef(source)

    holder.value["items"].append(3)

    assert holder.initial() == {"items": [1, 2]}
    assert holder.value is source


def test_initial_returns_fresh_copy_each_time():
    holder = ResettableRef([1])

    first = holder.initial()
    first.append(99)

    assert holder.initial() == [1]
    assert holder.initial() is not holder.initial()


def test_reset_restores_initial_value():
    holder = ResettableRef({"count": 0})
    holder.value["count"] = 5

    holder.reset()

    assert holder.value == {"count": 0}


def test_reset_hands_out_fresh_copies():
    holder = ResettableRef({"tags": []})

    holder.reset()
    holder.value["tags"].append("x")
    holder.reset()

    assert holder.value == {"tags": []}


def test_last_value_before_last_reset():
    holder = ResettableRef([1])
    assert holder.last_value_before_last_reset() is None

    holder.value.append(2)
    holder.reset()

    last = holder.last_value_before_last_reset()
    assert last == [1, 2]

    last.append(3)
    assert holder.last_value_before_last_reset() == [1, 2]


def test_last_value_keeps_falsy_values():
    """A replaced value of 0 is reported, not mistaken for no reset."""
    holder = ResettableRef(5)
    holder.value = 0

    holder.reset()

    assert holder.last_value_before_last_reset() == 0
    assert holder.value == 5


def test_wraps_existing_ref_without_copying():
    ref = Ref({"a": 1})
    holder = ResettableRef(ref)

    assert holder.ref is ref
    ref.value["a"] = 2
    assert holder.value == {"a": 2}

    holder.reset()
    assert ref.value == {"a": 1}


def test_unconnected_is_separate_copy():
    holder = ResettableRef({"a": [1]})

    holder.unconnected.value["a"].append(2)

    assert holder.value == {"a": [1]}
    assert holder.initial() == {"a": [1]}

    holder.value["a"].append(3)
    holder.reset()
    assert holder.unconnected.value == {"a": [1, 2]}


def test_is_dirty():
    holder = ResettableRef({"a": 1})
    assert not holder.is_dirty()

    holder.value["a"] = 2
    assert holder.is_dirty()

    holder.reset()
    assert not holder.is_dirty()


def test_cyclic_value_round_trips():
    state: dict = {"name": "root"}
    state["self"] = state
    holder = ResettableRef(state)

    holder.value["name"] = "changed"
    holder.reset()

    assert holder.value["self"] is holder.value
    assert holder.value["name"] == "root"


def test_custom_engine_is_used():
    engine = CloneEngine(CloneConfig(max_depth=5))
    holder = ResettableRef([1], engine=engine)

    holder.reset()

    assert holder.value == [1]
    assert holder._engine is engine


def test_repr():
    assert repr(ResettableRef([1])) == "ResettableRef([1])"
