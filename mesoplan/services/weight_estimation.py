"""
Weight Estimation

Starting-load estimates expressed as fractions of bodyweight. Ratios are
male working weights for the prescribed rep range (not 1RM), keyed by
experience level; female lifters get a modifier by body region.
"""

from __future__ import annotations

from dataclasses import dataclass

from mesoplan.core.numeric import round_to_step
from mesoplan.models.enums import Equipment, ExperienceLevel, Muscle, Sex
from mesoplan.services.exercise_catalog import muscle_for_target


@dataclass(frozen=True)
class BodyweightRatio:
    beginner: float
    intermediate: float
    advanced: float

    def for_level(self, level: ExperienceLevel) -> float:
        return getattr(self, ExperienceLevel(level).value)


# Per-exercise overrides for key lifts. Dumbbell ratios are per hand.
EXERCISE_BW_RATIOS: dict[str, BodyweightRatio] = {
    # Chest
    "ex_023": BodyweightRatio(0.45, 0.70, 0.95),
    "ex_024": BodyweightRatio(0.35, 0.55, 0.75),
    "ex_025": BodyweightRatio(0.40, 0.65, 0.85),
    "ex_026": BodyweightRatio(0.15, 0.25, 0.35),
    "ex_027": BodyweightRatio(0.12, 0.20, 0.30),
    "ex_031": BodyweightRatio(0.0, 0.0, 0.0),
    "ex_032": BodyweightRatio(0.40, 0.65, 0.90),
    # Back
    "ex_001": BodyweightRatio(0.12, 0.20, 0.30),
    "ex_005": BodyweightRatio(0.40, 0.65, 0.85),
    "ex_006": BodyweightRatio(0.40, 0.60, 0.80),
    "ex_007": BodyweightRatio(0.40, 0.65, 0.85),
    "ex_008": BodyweightRatio(0.35, 0.55, 0.75),
    "ex_009": BodyweightRatio(0.75, 1.20, 1.65),
    "ex_010": BodyweightRatio(0.0, 0.0, 0.0),
    "ex_011": BodyweightRatio(0.0, 0.0, 0.0),
    "ex_085": BodyweightRatio(0.0, 0.0, 0.0),
    "ex_087": BodyweightRatio(0.12, 0.20, 0.28),
    "ex_088": BodyweightRatio(0.40, 0.60, 0.80),
    # Shoulders
    "ex_015": BodyweightRatio(0.10, 0.17, 0.25),
    "ex_016": BodyweightRatio(0.30, 0.48, 0.65),
    "ex_017": BodyweightRatio(0.10, 0.18, 0.27),
    "ex_091": BodyweightRatio(0.30, 0.50, 0.70),
    # Legs
    "ex_051": BodyweightRatio(0.60, 1.00, 1.40),
    "ex_052": BodyweightRatio(0.50, 0.85, 1.20),
    "ex_053": BodyweightRatio(1.00, 1.60, 2.20),
    "ex_054": BodyweightRatio(0.55, 0.90, 1.30),
    "ex_056": BodyweightRatio(0.45, 0.75, 1.05),
    "ex_058": BodyweightRatio(0.40, 0.70, 1.00),
    "ex_059": BodyweightRatio(0.10, 0.18, 0.27),
    "ex_060": BodyweightRatio(0.08, 0.15, 0.22),
    "ex_061": BodyweightRatio(0.50, 0.85, 1.20),
    "ex_062": BodyweightRatio(0.12, 0.22, 0.32),
    "ex_102": BodyweightRatio(0.60, 1.00, 1.40),
    "ex_103": BodyweightRatio(0.10, 0.18, 0.27),
    "ex_104": BodyweightRatio(0.10, 0.17, 0.25),
    "ex_107": BodyweightRatio(0.30, 0.50, 0.70),
    "ex_108": BodyweightRatio(0.0, 0.0, 0.0),
    "ex_109": BodyweightRatio(0.55, 0.90, 1.30),
    "ex_110": BodyweightRatio(0.65, 1.05, 1.50),
    "ex_111": BodyweightRatio(0.15, 0.25, 0.35),
    "ex_112": BodyweightRatio(0.0, 0.0, 0.0),
    # Arms
    "ex_042": BodyweightRatio(0.40, 0.60, 0.80),
}

# Fallbacks keyed by (muscle, equipment); muscle None is the equipment default.
FALLBACK_RATIOS: dict[tuple[Muscle | None, Equipment], BodyweightRatio] = {
    (Muscle.CHEST, Equipment.DUMBBELL): BodyweightRatio(0.08, 0.13, 0.18),
    (Muscle.CHEST, Equipment.CABLE): BodyweightRatio(0.12, 0.20, 0.28),
    (Muscle.CHEST, Equipment.MACHINE): BodyweightRatio(0.20, 0.35, 0.50),
    (Muscle.LATS, Equipment.CABLE): BodyweightRatio(0.15, 0.25, 0.35),
    (Muscle.LATS, Equipment.DUMBBELL): BodyweightRatio(0.10, 0.17, 0.25),
    (Muscle.UPPER_BACK, Equipment.DUMBBELL): BodyweightRatio(0.10, 0.17, 0.25),
    (Muscle.UPPER_BACK, Equipment.CABLE): BodyweightRatio(0.12, 0.20, 0.28),
    (Muscle.SHOULDERS, Equipment.DUMBBELL): BodyweightRatio(0.05, 0.08, 0.12),
    (Muscle.SHOULDERS, Equipment.CABLE): BodyweightRatio(0.06, 0.10, 0.15),
    (Muscle.SHOULDERS, Equipment.MACHINE): BodyweightRatio(0.15, 0.25, 0.35),
    (Muscle.BICEPS, Equipment.BARBELL): BodyweightRatio(0.15, 0.25, 0.35),
    (Muscle.BICEPS, Equipment.DUMBBELL): BodyweightRatio(0.06, 0.10, 0.15),
    (Muscle.BICEPS, Equipment.CABLE): BodyweightRatio(0.10, 0.18, 0.25),
    (Muscle.BICEPS, Equipment.EZ_BAR): BodyweightRatio(0.13, 0.22, 0.30),
    (Muscle.TRICEPS, Equipment.CABLE): BodyweightRatio(0.12, 0.20, 0.28),
    (Muscle.TRICEPS, Equipment.BARBELL): BodyweightRatio(0.18, 0.30, 0.42),
    (Muscle.TRICEPS, Equipment.DUMBBELL): BodyweightRatio(0.06, 0.10, 0.15),
    (Muscle.TRICEPS, Equipment.EZ_BAR): BodyweightRatio(0.15, 0.25, 0.35),
    (Muscle.FOREARMS, Equipment.DUMBBELL): BodyweightRatio(0.05, 0.08, 0.12),
    (Muscle.FOREARMS, Equipment.BARBELL): BodyweightRatio(0.10, 0.17, 0.25),
    (Muscle.QUADS, Equipment.MACHINE): BodyweightRatio(0.25, 0.40, 0.55),
    (Muscle.HAMSTRINGS, Equipment.MACHINE): BodyweightRatio(0.20, 0.35, 0.50),
    (Muscle.CALVES, Equipment.MACHINE): BodyweightRatio(0.40, 0.65, 0.90),
    (Muscle.CALVES, Equipment.DUMBBELL): BodyweightRatio(0.12, 0.20, 0.30),
    (Muscle.GLUTES, Equipment.CABLE): BodyweightRatio(0.15, 0.25, 0.35),
    (None, Equipment.BARBELL): BodyweightRatio(0.25, 0.40, 0.55),
    (None, Equipment.DUMBBELL): BodyweightRatio(0.08, 0.13, 0.20),
    (None, Equipment.CABLE): BodyweightRatio(0.12, 0.20, 0.28),
    (None, Equipment.MACHINE): BodyweightRatio(0.25, 0.40, 0.55),
    (None, Equipment.KETTLEBELL): BodyweightRatio(0.10, 0.17, 0.25),
    (None, Equipment.EZ_BAR): BodyweightRatio(0.15, 0.25, 0.35),
    (None, Equipment.SMITH_MACHINE): BodyweightRatio(0.35, 0.55, 0.75),
    (None, Equipment.TRAP_BAR): BodyweightRatio(0.55, 0.90, 1.25),
}

FEMALE_UPPER_MODIFIER = 0.55
FEMALE_LOWER_MODIFIER = 0.75
NO_HISTORY_MODIFIER = 0.85

LOWER_BODY_MUSCLES = frozenset(
    {Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CALVES, Muscle.LOWER_BACK}
)

UNLOADED_EQUIPMENT = frozenset({Equipment.BODY_WEIGHT, Equipment.RESISTANCE_BAND})
BARBELL_TYPE_EQUIPMENT = frozenset(
    {Equipment.BARBELL, Equipment.EZ_BAR, Equipment.SMITH_MACHINE, Equipment.TRAP_BAR}
)
HANDHELD_EQUIPMENT = frozenset({Equipment.DUMBBELL, Equipment.KETTLEBELL})
STACK_EQUIPMENT = frozenset({Equipment.CABLE, Equipment.MACHINE})


def weight_increment(equipment: Equipment) -> float:
    """Smallest practical load jump used when rounding estimates."""
    if equipment in HANDHELD_EQUIPMENT:
        return 2.0
    if equipment in STACK_EQUIPMENT:
        return 5.0
    return 2.5


def overload_step(equipment: Equipment) -> float:
    """Load change suggested by double progression (cable/machine jumps are smaller)."""
    if equipment in HANDHELD_EQUIPMENT:
        return 2.0
    return 2.5


def round_to_increment(weight: float, equipment: Equipment) -> float:
    """Round a load to the equipment increment, never below one increment."""
    if weight <= 0:
        return 0
    increment = weight_increment(equipment)
    return max(increment, round_to_step(weight, increment))


def estimate_weight(
    exercise_id: str,
    equipment: Equipment,
    target: str,
    bodyweight_kg: float,
    sex: Sex,
    experience: ExperienceLevel,
    has_history: bool | None = None,
) -> float:
    """Estimate a starting load in kg; 0 for bodyweight and band exercises.

    Args:
        exercise_id: Catalog id, checked against per-exercise ratios first.
        equipment: Exercise equipment, used for fallbacks and rounding.
        target: Catalog target string, mapped to a canonical muscle.
        bodyweight_kg: Lifter bodyweight.
        sex: Applies the female upper/lower body modifier.
        experience: Selects the ratio column.
        has_history: ``False`` trims the estimate by 15% for a first
            mesocycle; ``None`` means unknown and leaves it untouched.

    Returns:
        Load rounded to the equipment increment.
    """
    if equipment in UNLOADED_EQUIPMENT:
        return 0

    muscle = muscle_for_target(target)
    ratio = EXERCISE_BW_RATIOS.get(exercise_id)
    if ratio is None:
        ratio = FALLBACK_RATIOS.get((muscle, equipment)) or FALLBACK_RATIOS.get((None, equipment))
    if ratio is None:
        return 0

    weight = bodyweight_kg * ratio.for_level(experience)

    if sex == Sex.FEMALE:
        weight *= FEMALE_LOWER_MODIFIER if muscle in LOWER_BODY_MUSCLES else FEMALE_UPPER_MODIFIER

    if has_history is False:
        weight *= NO_HISTORY_MODIFIER

    return round_to_increment(weight, equipment)
