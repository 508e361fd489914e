from datetime import datetime, timedelta

import pytest

from training.exceptions import IndexOutOfRange
from training.models import TrainingSet
from training.session_store import SessionStore

T0 = datetime(2025, 9, 6, 10, 0, 0)


def make_set(exercise: str) -> TrainingSet:
    return TrainingSet(exercise=exercise, weight=50, reps=8, start_time=T0, end_time=T0 + timedelta(seconds=30))


@pytest.fixture
def abc_store() -> SessionStore:
    store = SessionStore()
    for name in ["C", "B", "A"]:
        store.insert_front(make_set(name))
    return store


def names(store: SessionStore):
    return [s.exercise for s in store]


def test_insert_front_newest_first(abc_store):
    assert names(abc_store) == ["A", "B", "C"]
    assert abc_store[0].exercise == "A"
    assert len(abc_store) == 3


def test_delete_positions_resolved_against_list_before_deletion(abc_store):
    removed = abc_store.delete_at({0, 2})

    assert names(abc_store) == ["B"]
    assert [s.exercise for s in removed] == ["A", "C"]


def test_delete_duplicate_positions(abc_store):
    abc_store.delete_at([1, 1])

    assert names(abc_store) == ["A", "C"]


def test_delete_empty_positions_is_noop(abc_store):
    fields = []
    abc_store.changed.connect(fields.append)

    assert abc_store.delete_at([]) == []
    assert names(abc_store) == ["A", "B", "C"]
    assert fields == []


@pytest.mark.parametrize("positions", [{3}, {0, 3}, {-1}])
def test_delete_out_of_range_leaves_list_intact(abc_store, positions):
    with pytest.raises(IndexOutOfRange):
        abc_store.delete_at(positions)

    assert names(abc_store) == ["A", "B", "C"]


def test_clear(abc_store):
    abc_store.clear()

    assert len(abc_store) == 0
    assert abc_store.sets == ()


def test_changes_are_announced():
    store = SessionStore()
    fields = []
    store.changed.connect(fields.append)

    store.insert_front(make_set("A"))
    store.insert_front(make_set("B"))
    store.delete_at([0])
    store.clear()

    assert fields == ["sets", "sets", "sets", "sets"]


def test_sets_snapshot_is_immutable(abc_store):
    snapshot = abc_store.sets
    abc_store.clear()

    assert [s.exercise for s in snapshot] == ["A", "B", "C"]


def test_disconnected_listener_not_called():
    store = SessionStore()
    fields = []
    disconnect = store.changed.connect(fields.append)

    store.insert_front(make_set("A"))
    disconnect()
    store.clear()

    assert fields == ["sets"]
