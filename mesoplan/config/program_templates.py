"""
Static program-building tables.

Split day templates, per-muscle exercise pools, the goal x exercise-tier
rep/rest table and the equipment allowed by each setup. These are data, not
tunables: thresholds that operators may want to change live in
engine_config.yaml instead.
"""

from __future__ import annotations

from dataclasses import dataclass

from mesoplan.models.enums import (
    DayFocus,
    Equipment,
    EquipmentSetup,
    ExerciseCategory,
    Goal,
    Muscle,
    SplitType,
)


# ============================================================================
# Equipment
# ============================================================================

EQUIPMENT_BY_SETUP: dict[EquipmentSetup, frozenset[Equipment]] = {
    EquipmentSetup.FULL_GYM: frozenset(
        {
            Equipment.BARBELL,
            Equipment.DUMBBELL,
            Equipment.CABLE,
            Equipment.MACHINE,
            Equipment.BODY_WEIGHT,
            Equipment.KETTLEBELL,
            Equipment.RESISTANCE_BAND,
            Equipment.EZ_BAR,
            Equipment.SMITH_MACHINE,
            Equipment.TRAP_BAR,
        }
    ),
    EquipmentSetup.HOME_DUMBBELL: frozenset(
        {
            Equipment.DUMBBELL,
            Equipment.BODY_WEIGHT,
            Equipment.RESISTANCE_BAND,
            Equipment.KETTLEBELL,
        }
    ),
    EquipmentSetup.BODYWEIGHT: frozenset(
        {Equipment.BODY_WEIGHT, Equipment.RESISTANCE_BAND}
    ),
}


# ============================================================================
# Splits
# ============================================================================

@dataclass(frozen=True)
class SplitDayTemplate:
    label: str
    focus: DayFocus
    muscles: tuple[Muscle, ...]


_UPPER_A = SplitDayTemplate(
    "Upper A",
    DayFocus.UPPER,
    (Muscle.CHEST, Muscle.LATS, Muscle.SHOULDERS, Muscle.BICEPS, Muscle.TRICEPS),
)
_LOWER_A = SplitDayTemplate(
    "Lower A",
    DayFocus.LOWER,
    (Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CALVES, Muscle.ABS),
)
_UPPER_B = SplitDayTemplate(
    "Upper B",
    DayFocus.UPPER,
    (Muscle.CHEST, Muscle.UPPER_BACK, Muscle.SHOULDERS, Muscle.BICEPS, Muscle.TRICEPS),
)
_LOWER_B = SplitDayTemplate(
    "Lower B",
    DayFocus.LOWER,
    (Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CALVES, Muscle.OBLIQUES),
)
_PUSH = (Muscle.CHEST, Muscle.SHOULDERS, Muscle.TRICEPS)
_PULL = (Muscle.LATS, Muscle.UPPER_BACK, Muscle.BICEPS, Muscle.FOREARMS)

# Keyed by days per week.
SPLIT_TEMPLATES: dict[int, tuple[SplitType, tuple[SplitDayTemplate, ...]]] = {
    3: (
        SplitType.FULL_BODY,
        (
            SplitDayTemplate(
                "Full Body A",
                DayFocus.FULL_BODY,
                (
                    Muscle.CHEST, Muscle.LATS, Muscle.SHOULDERS, Muscle.QUADS,
                    Muscle.HAMSTRINGS, Muscle.BICEPS, Muscle.TRICEPS, Muscle.ABS,
                ),
            ),
            SplitDayTemplate(
                "Full Body B",
                DayFocus.FULL_BODY,
                (
                    Muscle.CHEST, Muscle.UPPER_BACK, Muscle.SHOULDERS, Muscle.QUADS,
                    Muscle.GLUTES, Muscle.BICEPS, Muscle.TRICEPS, Muscle.OBLIQUES,
                ),
            ),
            SplitDayTemplate(
                "Full Body C",
                DayFocus.FULL_BODY,
                (
                    Muscle.CHEST, Muscle.LATS, Muscle.SHOULDERS, Muscle.HAMSTRINGS,
                    Muscle.QUADS, Muscle.BICEPS, Muscle.TRICEPS, Muscle.ABS,
                ),
            ),
        ),
    ),
    4: (SplitType.UPPER_LOWER, (_UPPER_A, _LOWER_A, _UPPER_B, _LOWER_B)),
    5: (
        SplitType.UPPER_LOWER,
        (
            _UPPER_A,
            _LOWER_A,
            _UPPER_B,
            _LOWER_B,
            SplitDayTemplate(
                "Full Body Pump",
                DayFocus.FULL_BODY,
                (Muscle.CHEST, Muscle.LATS, Muscle.SHOULDERS, Muscle.QUADS, Muscle.ABS),
            ),
        ),
    ),
    6: (
        SplitType.PPL,
        (
            SplitDayTemplate("Push A", DayFocus.PUSH, _PUSH),
            SplitDayTemplate("Pull A", DayFocus.PULL, _PULL),
            SplitDayTemplate(
                "Legs A",
                DayFocus.LEGS,
                (Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CALVES, Muscle.ABS),
            ),
            SplitDayTemplate("Push B", DayFocus.PUSH, _PUSH),
            SplitDayTemplate("Pull B", DayFocus.PULL, _PULL),
            SplitDayTemplate(
                "Legs B",
                DayFocus.LEGS,
                (Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CALVES, Muscle.OBLIQUES),
            ),
        ),
    ),
}

SPLIT_NAMES: dict[SplitType, str] = {
    SplitType.FULL_BODY: "Full Body",
    SplitType.UPPER_LOWER: "Upper/Lower",
    SplitType.PPL: "Push/Pull/Legs",
}


# ============================================================================
# Exercise pools (ordered by priority)
# ============================================================================

EXERCISE_POOLS: dict[Muscle, tuple[str, ...]] = {
    Muscle.CHEST: (
        "ex_023", "ex_026", "ex_024", "ex_027", "ex_028", "ex_029",
        "ex_032", "ex_093", "ex_094", "ex_030", "ex_031", "ex_095",
    ),
    Muscle.LATS: (
        "ex_005", "ex_007", "ex_001", "ex_006", "ex_002", "ex_012",
        "ex_087", "ex_010", "ex_011", "ex_085",
    ),
    Muscle.UPPER_BACK: (
        "ex_003", "ex_008", "ex_088", "ex_006", "ex_085", "ex_086",
        "ex_018", "ex_019", "ex_020", "ex_021", "ex_022", "ex_092",
    ),
    Muscle.LOWER_BACK: ("ex_009", "ex_107", "ex_121"),
    Muscle.SHOULDERS: (
        "ex_016", "ex_017", "ex_013", "ex_015", "ex_089", "ex_091", "ex_090",
    ),
    Muscle.BICEPS: (
        "ex_033", "ex_034", "ex_035", "ex_096", "ex_097", "ex_036",
        "ex_038", "ex_098", "ex_037", "ex_100",
    ),
    Muscle.TRICEPS: (
        "ex_039", "ex_040", "ex_041", "ex_042", "ex_099", "ex_101",
        "ex_045", "ex_043", "ex_044",
    ),
    Muscle.FOREARMS: ("ex_047", "ex_049", "ex_048", "ex_046", "ex_050"),
    Muscle.QUADS: (
        "ex_051", "ex_053", "ex_052", "ex_054", "ex_055", "ex_059",
        "ex_062", "ex_060", "ex_103", "ex_104", "ex_109", "ex_110",
        "ex_112", "ex_113", "ex_114", "ex_127", "ex_128", "ex_129", "ex_130",
    ),
    Muscle.HAMSTRINGS: (
        "ex_056", "ex_057", "ex_058", "ex_107", "ex_108", "ex_132",
    ),
    Muscle.GLUTES: (
        "ex_061", "ex_102", "ex_111", "ex_106", "ex_105", "ex_131",
    ),
    Muscle.CALVES: (
        "ex_063", "ex_064", "ex_065", "ex_115", "ex_066", "ex_133",
    ),
    Muscle.ABS: (
        "ex_069", "ex_070", "ex_067", "ex_068", "ex_118", "ex_073",
        "ex_120", "ex_122", "ex_074", "ex_119",
    ),
    Muscle.OBLIQUES: ("ex_071", "ex_076", "ex_075", "ex_117", "ex_116"),
}

# Big movers first, small isolation muscles last.
MUSCLE_SORT_ORDER: dict[Muscle, int] = {
    muscle: index
    for index, muscle in enumerate(
        (
            Muscle.QUADS, Muscle.HAMSTRINGS, Muscle.GLUTES, Muscle.CHEST,
            Muscle.LATS, Muscle.UPPER_BACK, Muscle.LOWER_BACK, Muscle.SHOULDERS,
            Muscle.TRICEPS, Muscle.BICEPS, Muscle.FOREARMS, Muscle.CALVES,
            Muscle.ABS, Muscle.OBLIQUES,
        )
    )
}


# ============================================================================
# Rep / rest prescription by goal x exercise tier
# ============================================================================

@dataclass(frozen=True)
class CategoryConfig:
    min_reps: int
    max_reps: int
    rest_time: int  # seconds


GOAL_CATEGORY_CONFIG: dict[Goal, dict[ExerciseCategory, CategoryConfig]] = {
    Goal.HYPERTROPHY: {
        ExerciseCategory.HEAVY_BARBELL_COMPOUND: CategoryConfig(6, 10, 150),
        ExerciseCategory.DUMBBELL_COMPOUND: CategoryConfig(8, 12, 120),
        ExerciseCategory.MACHINE_COMPOUND: CategoryConfig(8, 15, 120),
        ExerciseCategory.ISOLATION: CategoryConfig(10, 15, 90),
        ExerciseCategory.MACHINE_ISOLATION: CategoryConfig(12, 20, 75),
        ExerciseCategory.ABS_CALVES: CategoryConfig(12, 25, 60),
    },
    Goal.STRENGTH: {
        ExerciseCategory.HEAVY_BARBELL_COMPOUND: CategoryConfig(3, 6, 180),
        ExerciseCategory.DUMBBELL_COMPOUND: CategoryConfig(5, 8, 150),
        ExerciseCategory.MACHINE_COMPOUND: CategoryConfig(6, 10, 120),
        ExerciseCategory.ISOLATION: CategoryConfig(8, 12, 90),
        ExerciseCategory.MACHINE_ISOLATION: CategoryConfig(10, 15, 75),
        ExerciseCategory.ABS_CALVES: CategoryConfig(12, 20, 60),
    },
    Goal.RECOMPOSITION: {
        ExerciseCategory.HEAVY_BARBELL_COMPOUND: CategoryConfig(5, 8, 150),
        ExerciseCategory.DUMBBELL_COMPOUND: CategoryConfig(6, 10, 120),
        ExerciseCategory.MACHINE_COMPOUND: CategoryConfig(8, 12, 120),
        ExerciseCategory.ISOLATION: CategoryConfig(8, 12, 90),
        ExerciseCategory.MACHINE_ISOLATION: CategoryConfig(10, 15, 75),
        ExerciseCategory.ABS_CALVES: CategoryConfig(12, 20, 60),
    },
}
