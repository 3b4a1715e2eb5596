"""Tests for bodyweight-based load estimation."""
from mesoplan.models.enums import Equipment, ExperienceLevel, Sex
from mesoplan.services.weight_estimation import (
    estimate_weight,
    overload_step,
    round_to_increment,
    weight_increment,
)


def _estimate(exercise_id, equipment, target, sex=Sex.MALE, experience=ExperienceLevel.INTERMEDIATE, **kwargs):
    return estimate_weight(exercise_id, equipment, target, 80, sex, experience, **kwargs)


class TestEstimateWeight:
    """Estimates for an 80 kg lifter."""

    def test_per_exercise_ratio(self):
        # 80 * 0.70 = 56 -> nearest 2.5
        assert _estimate("ex_023", Equipment.BARBELL, "pecs") == 55.0

    def test_experience_column(self):
        assert _estimate("ex_023", Equipment.BARBELL, "pecs", experience=ExperienceLevel.BEGINNER) == 35.0
        assert _estimate("ex_023", Equipment.BARBELL, "pecs", experience=ExperienceLevel.ADVANCED) == 75.0

    def test_female_upper_body_modifier(self):
        assert _estimate("ex_023", Equipment.BARBELL, "pecs", sex=Sex.FEMALE) == 30.0

    def test_female_lower_body_modifier(self):
        assert _estimate("ex_051", Equipment.BARBELL, "quads", sex=Sex.FEMALE) == 60.0

    def test_fallback_by_muscle_and_equipment(self):
        # Dumbbell fly has no per-exercise ratio: chest/dumbbell 0.13 -> 10.4 -> 10
        assert _estimate("ex_028", Equipment.DUMBBELL, "pecs") == 10.0

    def test_bodyweight_and_band_exercises_are_unloaded(self):
        assert _estimate("ex_010", Equipment.BODY_WEIGHT, "lats") == 0
        assert _estimate("ex_095", Equipment.RESISTANCE_BAND, "pecs") == 0

    def test_no_history_trims_estimate(self):
        assert _estimate("ex_023", Equipment.BARBELL, "pecs", has_history=False) == 47.5
        assert _estimate("ex_023", Equipment.BARBELL, "pecs", has_history=True) == 55.0

    def test_unmapped_equipment_returns_zero(self):
        assert _estimate("ex_999", Equipment.OTHER, "pecs") == 0


class TestIncrements:
    def test_increment_by_equipment(self):
        assert weight_increment(Equipment.DUMBBELL) == 2.0
        assert weight_increment(Equipment.MACHINE) == 5.0
        assert weight_increment(Equipment.BARBELL) == 2.5

    def test_overload_step_by_equipment(self):
        assert overload_step(Equipment.KETTLEBELL) == 2.0
        assert overload_step(Equipment.CABLE) == 2.5

    def test_round_never_below_one_increment(self):
        assert round_to_increment(0.5, Equipment.DUMBBELL) == 2.0
        assert round_to_increment(0, Equipment.DUMBBELL) == 0
