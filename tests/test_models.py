from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta

import pytest

from training.models import TrainingSet

T0 = datetime(2025, 9, 6, 10, 0, 0)


def test_duration():
    training_set = TrainingSet("Bench Press", 60, 10, T0, T0 + timedelta(seconds=90))

    assert training_set.duration == timedelta(seconds=90)


def test_zero_weight_allowed():
    training_set = TrainingSet("Pull-ups", 0, 12, T0, T0)

    assert training_set.weight == 0
    assert training_set.duration == timedelta(0)


def test_ids_are_unique():
    first = TrainingSet("Squats", 100, 5, T0, T0)
    second = TrainingSet("Squats", 100, 5, T0, T0)

    assert first.id != second.id


def test_frozen():
    training_set = TrainingSet("Squats", 100, 5, T0, T0)

    with pytest.raises(FrozenInstanceError):
        training_set.reps = 6


@pytest.mark.parametrize("kwargs", [
    {"exercise": ""},
    {"weight": -1},
    {"reps": 0},
    {"end_time": T0 - timedelta(seconds=1)},
])
def test_invalid_values_rejected(kwargs):
    values = {"exercise": "Squats", "weight": 100, "reps": 5, "start_time": T0, "end_time": T0}
    values.update(kwargs)

    with pytest.raises(ValueError):
        TrainingSet(**values)
