"""
Exercise Classification

Maps an exercise to one of six prescription tiers (which drive rep range,
rest and load defaults) and derives the target reps-in-reserve for a week of
a mesocycle.
"""

from __future__ import annotations

from mesoplan.core.numeric import round_half_away
from mesoplan.models.enums import Equipment, ExerciseCategory
from mesoplan.schemas.catalog import Exercise
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog

ABS_CALVES_TARGETS = frozenset(
    {"abs", "lower abs", "core stability", "obliques", "gastrocnemius", "soleus", "calves"}
)

HEAVY_BARBELL_EQUIPMENT = frozenset(
    {Equipment.BARBELL, Equipment.EZ_BAR, Equipment.TRAP_BAR, Equipment.SMITH_MACHINE}
)

MACHINE_EQUIPMENT = frozenset({Equipment.MACHINE, Equipment.CABLE})

MAX_RIR = 4
DELOAD_RIR = 4
SHORT_MESO_RIR = 3


def classify_exercise(exercise: Exercise) -> ExerciseCategory:
    """Classify an exercise into its prescription tier (first match wins)."""
    if exercise.target in ABS_CALVES_TARGETS:
        return ExerciseCategory.ABS_CALVES

    if exercise.compound:
        if exercise.equipment in HEAVY_BARBELL_EQUIPMENT:
            return ExerciseCategory.HEAVY_BARBELL_COMPOUND
        if exercise.equipment in MACHINE_EQUIPMENT:
            return ExerciseCategory.MACHINE_COMPOUND
        return ExerciseCategory.DUMBBELL_COMPOUND

    if exercise.equipment in MACHINE_EQUIPMENT:
        return ExerciseCategory.MACHINE_ISOLATION
    return ExerciseCategory.ISOLATION


def get_exercise_category(
    exercise_id: str, catalog: ExerciseCatalog | None = None
) -> ExerciseCategory:
    """Classify a catalog exercise by id; unknown ids fall back to isolation."""
    catalog = catalog or get_exercise_catalog()
    exercise = catalog.get(exercise_id)
    if exercise is None:
        return ExerciseCategory.ISOLATION
    return classify_exercise(exercise)


def get_target_rir(week_index: int, total_weeks: int, is_deload: bool) -> int:
    """Target reps in reserve for a 0-based week of a mesocycle.

    RIR ramps linearly from 4 in the first training week to 0 in the last;
    the deload week resets to 4. Mesocycles with a single training week
    stay at 3.
    """
    if is_deload:
        return DELOAD_RIR
    training_weeks = total_weeks - 1
    if training_weeks <= 1:
        return SHORT_MESO_RIR
    rir = round_half_away(MAX_RIR - week_index / (training_weeks - 1) * MAX_RIR)
    return max(0, min(MAX_RIR, rir))
