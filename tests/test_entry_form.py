from datetime import timedelta

import pytest

from training.entry_form import EntryForm
from utils.debounce import Debouncer


def test_defaults(form, clock):
    assert form.exercise == ""
    assert form.weight == 0
    assert form.reps == 0
    assert form.start_time == clock.now
    assert form.end_time == clock.now
    assert form.suggestions_visible is False
    assert form.can_save is False


def test_can_save_ignores_zero_weight(form):
    form.exercise = "Pull-ups"
    form.reps = 10

    assert form.weight == 0
    assert form.can_save is True


@pytest.mark.parametrize("exercise, reps", [("", 10), ("Squats", 0), ("Squats", -3)])
def test_can_save_requires_exercise_and_reps(form, exercise, reps):
    form.exercise = exercise
    form.reps = reps
    form.weight = 100

    assert form.can_save is False


def test_can_save_false_when_start_moves_past_end(form, clock):
    form.exercise = "Squats"
    form.reps = 5
    clock.advance(30)
    form.start_time = clock.now

    assert form.end_time < form.start_time
    assert form.can_save is False

    form.end_time = clock.now
    assert form.can_save is True


def test_end_time_clamped_to_start(form, clock):
    form.start_time = clock.now + timedelta(minutes=5)
    form.end_time = clock.now

    assert form.end_time == form.start_time


def test_end_time_after_start_kept(form, clock):
    later = clock.now + timedelta(seconds=45)
    form.end_time = later

    assert form.end_time == later


def test_negative_weight_clamped(form):
    form.weight = -5

    assert form.weight == 0


def test_bench_press_scenario(form, catalog, store, clock):
    form.exercise = "Bench Press"
    form.weight = 60
    form.reps = 10
    form.start_time = clock.now
    form.end_time = clock.now + timedelta(seconds=90)

    assert form.can_save is True

    saved = form.save()

    assert store[0] is saved
    assert saved.exercise == "Bench Press"
    assert saved.weight == 60
    assert saved.reps == 10
    assert saved.duration == timedelta(seconds=90)
    assert catalog.recents[0] == "Bench Press"


def test_save_copies_draft_with_truncation(form, store, clock):
    form.exercise = "Squats"
    form.weight = 82.9
    form.reps = 7.6
    form.end_time = clock.now + timedelta(seconds=61)

    saved = form.save()

    assert store[0] == saved
    assert saved.weight == 82
    assert saved.reps == 7
    assert saved.start_time == form.start_time
    assert saved.end_time == form.end_time


def test_save_does_not_reset_draft(form):
    form.exercise = "Squats"
    form.reps = 5

    form.save()

    assert form.exercise == "Squats"
    assert form.reps == 5


def test_save_invalid_draft_is_noop(form, catalog, store):
    form.exercise = "Squats"

    assert form.save() is None
    assert len(store) == 0
    assert catalog.recents == []


def test_fractional_reps_below_one_cannot_be_saved(form, store):
    form.exercise = "Squats"
    form.reps = 0.5

    assert form.can_save is False
    assert form.save() is None
    assert len(store) == 0


def test_saves_are_newest_first(form, store):
    for name in ["A", "B"]:
        form.exercise = name
        form.reps = 1
        form.save()

    assert [s.exercise for s in store] == ["B", "A"]


def test_reset_draft(form, clock):
    form.exercise = "Squats"
    form.weight = 100
    form.reps = 5
    form.suggestions_visible = True
    clock.advance(120)

    form.reset_draft()

    assert form.exercise == ""
    assert form.weight == 0
    assert form.reps == 0
    assert form.start_time == clock.now
    assert form.end_time == clock.now
    assert form.suggestions_visible is False


def test_select_exercise_hides_suggestions(form):
    form.suggestions_visible = True
    form.select_exercise("Deadlift")

    assert form.exercise == "Deadlift"
    assert form.suggestions_visible is False


def test_suggestions_without_filter(form, catalog):
    catalog.add_recent("Squats")
    catalog.add_recent("Pull-ups")

    assert form.filtered_suggestions == [
        "Pull-ups", "Squats", "Bench Press", "Deadlift", "Leg Press", "Squats"
    ]


def test_suggestions_filtered_case_insensitive(form):
    form.exercise = "press"

    assert form.filtered_suggestions == ["Bench Press", "Leg Press"]


def test_suggestions_keep_recents_first(form, catalog):
    catalog.add_recent("Overhead PRESS")
    form.exercise = "PRESS"

    assert form.filtered_suggestions == ["Overhead PRESS", "Bench Press", "Leg Press"]


def test_suggestions_follow_catalog_changes(form, catalog):
    form.exercise = "curl"
    assert form.filtered_suggestions == []

    catalog.add_favorite("Biceps Curl")
    assert form.filtered_suggestions == ["Biceps Curl"]


def test_weight_and_reps_text(form):
    form.set_weight_text("1 2 5kg")
    form.set_reps_text("12 reps")

    assert form.weight == 125
    assert form.reps == 12

    form.set_weight_text("9999")
    form.set_reps_text("")

    assert form.weight == 500
    assert form.reps == 0


def test_steppers_respect_ranges(form):
    form.step_weight(-1)
    assert form.weight == 0

    form.step_weight(3)
    assert form.weight == 3

    form.reps = 100
    form.step_reps(1)
    assert form.reps == 100


def test_custom_ranges(catalog, store, clock):
    form = EntryForm(catalog, store, clock=clock, weight_range=(0, 50), reps_range=(1, 20))
    form.set_weight_text("80")
    form.set_reps_text("30")

    assert form.weight == 50
    assert form.reps == 20


def test_quick_input(form):
    assert form.apply_quick_input("60x10") is True
    assert (form.weight, form.reps) == (60, 10)

    assert form.apply_quick_input("+5") is True
    assert form.weight == 65

    assert form.apply_quick_input("-100") is True
    assert form.weight == 0

    assert form.apply_quick_input("hello") is False
    assert (form.weight, form.reps) == (0, 10)


def test_field_changes_are_announced(form):
    fields = []
    form.changed.connect(fields.append)

    form.exercise = "Squats"
    form.weight = 10
    form.reps = 5
    form.end_time = form.start_time

    assert fields == ["exercise", "weight", "reps", "end_time"]


@pytest.mark.asyncio
async def test_suggestions_revealed_after_quiet_period(catalog, store, clock):
    form = EntryForm(catalog, store, debouncer=Debouncer(0.01), clock=clock)

    form.exercise = "pre"
    form.exercise = "press"
    assert form.suggestions_visible is False

    assert await form.wait_for_suggestions() is True
    assert form.suggestions_visible is True


@pytest.mark.asyncio
async def test_empty_text_does_not_reveal_suggestions(catalog, store, clock):
    form = EntryForm(catalog, store, debouncer=Debouncer(0.01), clock=clock)

    form.exercise = ""

    assert await form.wait_for_suggestions() is False
    assert form.suggestions_visible is False


@pytest.mark.asyncio
async def test_select_exercise_cancels_pending_reveal(catalog, store, clock):
    form = EntryForm(catalog, store, debouncer=Debouncer(0.05), clock=clock)

    form.exercise = "squ"
    form.select_exercise("Squats")

    assert await form.wait_for_suggestions() is False
    assert form.suggestions_visible is False


@pytest.mark.asyncio
async def test_wait_without_debouncer_reports_visibility(form):
    assert await form.wait_for_suggestions() is False

    form.suggestions_visible = True
    assert await form.wait_for_suggestions() is True


def test_reps_step_down_from_empty_draft(form):
    assert form.reps == 0

    form.step_reps(-1)

    assert form.reps == 1
    assert form.can_save is False
