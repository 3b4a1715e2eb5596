"""Tests for exercise tiers, target RIR and rounding helpers."""
import pytest

from mesoplan.core.numeric import round_half_away, round_to_step
from mesoplan.models.enums import ExerciseCategory
from mesoplan.services.exercise_classification import get_exercise_category, get_target_rir


@pytest.mark.parametrize(
    "exercise_id,category",
    [
        ("ex_023", ExerciseCategory.HEAVY_BARBELL_COMPOUND),  # bench press
        ("ex_110", ExerciseCategory.HEAVY_BARBELL_COMPOUND),  # trap bar deadlift
        ("ex_026", ExerciseCategory.DUMBBELL_COMPOUND),
        ("ex_010", ExerciseCategory.DUMBBELL_COMPOUND),  # pull-up
        ("ex_053", ExerciseCategory.MACHINE_COMPOUND),
        ("ex_005", ExerciseCategory.MACHINE_COMPOUND),  # lat pulldown
        ("ex_034", ExerciseCategory.ISOLATION),
        ("ex_055", ExerciseCategory.MACHINE_ISOLATION),
        ("ex_063", ExerciseCategory.ABS_CALVES),
        ("ex_070", ExerciseCategory.ABS_CALVES),  # cable crunch
        ("ex_071", ExerciseCategory.ABS_CALVES),
    ],
)
def test_exercise_category(catalog, exercise_id, category):
    assert get_exercise_category(exercise_id, catalog) == category


def test_unknown_exercise_is_isolation(catalog):
    assert get_exercise_category("ex_999", catalog) == ExerciseCategory.ISOLATION


class TestTargetRir:
    """RIR ramps 4 -> 0 across training weeks, deload resets to 4."""

    def test_five_week_ramp(self):
        assert [get_target_rir(w, 5, False) for w in range(4)] == [4, 3, 1, 0]

    def test_four_week_ramp(self):
        assert [get_target_rir(w, 4, False) for w in range(3)] == [4, 2, 0]

    def test_deload_week(self):
        assert get_target_rir(4, 5, True) == 4

    def test_single_training_week(self):
        assert get_target_rir(0, 2, False) == 3


class TestRounding:
    def test_halves_round_away_from_zero(self):
        assert round_half_away(2.5) == 3
        assert round_half_away(3.5) == 4
        assert round_half_away(-2.5) == -3
        assert round_half_away(0.49) == 0

    def test_round_to_step(self):
        assert round_to_step(56.375, 2.5) == 57.5
        assert round_to_step(57.0, 0.5) == 57.0
        assert round_to_step(10.4, 2) == 10
