"""Tests for double-progression suggestions and session duration."""
from datetime import datetime, timedelta

import pytest

from mesoplan.models.enums import DayFocus, Muscle, OverloadAction
from mesoplan.schemas.program import ProgramDay, ProgramExercise
from mesoplan.services.progressive_overload import estimate_duration, get_overload_suggestions

LAST = datetime(2026, 10, 12, 10, 0)
PREVIOUS = LAST - timedelta(days=7)


def _prescribed(exercise_id="ex_023", muscle=Muscle.CHEST, sets=3, rest_time=150, min_reps=6, max_reps=10):
    return ProgramExercise(
        exercise_id=exercise_id,
        muscle=muscle,
        sets=sets,
        reps=max_reps,
        min_reps=min_reps,
        max_reps=max_reps,
        rest_time=rest_time,
        suggested_weight=60,
    )


@pytest.fixture
def day():
    return ProgramDay(day_index=0, label="Upper A", focus=DayFocus.UPPER, exercises=[_prescribed()])


class TestSuggestions:
    """History is passed newest first."""

    def test_increase_after_two_sessions_at_top_of_range(self, catalog, day, make_session):
        history = [
            make_session(LAST, {"ex_023": [(10, 60)] * 3}),
            make_session(PREVIOUS, {"ex_023": [(10, 60)] * 3}),
        ]
        [suggestion] = get_overload_suggestions(history, day, catalog)
        assert suggestion.action == OverloadAction.INCREASE_WEIGHT
        assert suggestion.current_weight == 60
        assert suggestion.suggested_weight == 62.5
        assert suggestion.target_reps == 6
        assert suggestion.message == "62.5 kg (back to 6 reps)"

    def test_single_session_at_top_is_not_enough(self, catalog, day, make_session):
        history = [make_session(LAST, {"ex_023": [(10, 60)] * 3})]
        assert get_overload_suggestions(history, day, catalog) == []

    def test_decrease_when_most_sets_miss_the_floor(self, catalog, day, make_session):
        history = [make_session(LAST, {"ex_023": [(7, 60), (5, 60), (4, 60)]})]
        [suggestion] = get_overload_suggestions(history, day, catalog)
        assert suggestion.action == OverloadAction.DECREASE_WEIGHT
        assert suggestion.suggested_weight == 57.5
        assert suggestion.message == "Drop to 57.5 kg"

    def test_add_rep_inside_range(self, catalog, day, make_session):
        history = [make_session(LAST, {"ex_023": [(8, 60), (7, 60), (8, 60)]})]
        [suggestion] = get_overload_suggestions(history, day, catalog)
        assert suggestion.action == OverloadAction.ADD_REP
        assert suggestion.suggested_weight == 60
        assert suggestion.target_reps == 9
        assert suggestion.message == "+1 rep (aim for 10)"

    def test_dumbbell_step(self, catalog, make_session):
        day = ProgramDay(
            day_index=0, label="Upper A", focus=DayFocus.UPPER,
            exercises=[_prescribed("ex_026", min_reps=8, max_reps=12)],
        )
        history = [
            make_session(LAST, {"ex_026": [(12, 24)] * 3}),
            make_session(PREVIOUS, {"ex_026": [(12, 24)] * 3}),
        ]
        [suggestion] = get_overload_suggestions(history, day, catalog)
        assert suggestion.suggested_weight == 26

    def test_open_sessions_and_missing_history_are_ignored(self, catalog, day, make_session):
        history = [make_session(LAST, {"ex_023": [(4, 60)] * 3}, closed=False)]
        assert get_overload_suggestions(history, day, catalog) == []
        assert get_overload_suggestions([], day, catalog) == []


def test_estimate_duration(catalog):
    day = ProgramDay(
        day_index=0,
        label="Upper A",
        focus=DayFocus.UPPER,
        exercises=[
            _prescribed(),  # 3 x (50 + 150)
            _prescribed("ex_034", Muscle.BICEPS, rest_time=90),  # 3 x (35 + 90)
        ],
    )
    assert estimate_duration(day, catalog) == 16
