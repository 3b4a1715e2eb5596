from enum import Enum


class Goal(str, Enum):
    HYPERTROPHY = "hypertrophy"
    STRENGTH = "strength"
    RECOMPOSITION = "recomposition"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class EquipmentSetup(str, Enum):
    FULL_GYM = "full_gym"
    HOME_DUMBBELL = "home_dumbbell"
    BODYWEIGHT = "bodyweight"


class Equipment(str, Enum):
    DUMBBELL = "dumbbell"
    BARBELL = "barbell"
    CABLE = "cable"
    MACHINE = "machine"
    BODY_WEIGHT = "body weight"
    KETTLEBELL = "kettlebell"
    RESISTANCE_BAND = "resistance band"
    EZ_BAR = "ez bar"
    SMITH_MACHINE = "smith machine"
    TRAP_BAR = "trap bar"
    OTHER = "other"


class BodyPart(str, Enum):
    BACK = "back"
    SHOULDERS = "shoulders"
    CHEST = "chest"
    UPPER_ARMS = "upper arms"
    LOWER_ARMS = "lower arms"
    UPPER_LEGS = "upper legs"
    LOWER_LEGS = "lower legs"
    WAIST = "waist"
    CARDIO = "cardio"


class Muscle(str, Enum):
    """Canonical muscle keys used for volume tracking.

    Enum members hash by name, so plain strings must be converted with
    ``Muscle(value)`` before being used as dictionary keys.
    """

    CHEST = "chest"
    UPPER_BACK = "upper back"
    LATS = "lats"
    LOWER_BACK = "lower back"
    SHOULDERS = "shoulders"
    BICEPS = "biceps"
    TRICEPS = "triceps"
    FOREARMS = "forearms"
    QUADS = "quads"
    HAMSTRINGS = "hamstrings"
    GLUTES = "glutes"
    CALVES = "calves"
    ABS = "abs"
    OBLIQUES = "obliques"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class SplitType(str, Enum):
    FULL_BODY = "full_body"
    UPPER_LOWER = "upper_lower"
    PPL = "ppl"


class DayFocus(str, Enum):
    FULL_BODY = "full_body"
    UPPER = "upper"
    LOWER = "lower"
    PUSH = "push"
    PULL = "pull"
    LEGS = "legs"


class ExerciseCategory(str, Enum):
    """Six prescription tiers driving rep range, rest and load defaults."""

    HEAVY_BARBELL_COMPOUND = "heavy_barbell_compound"
    DUMBBELL_COMPOUND = "dumbbell_compound"
    MACHINE_COMPOUND = "machine_compound"
    ISOLATION = "isolation"
    MACHINE_ISOLATION = "machine_isolation"
    ABS_CALVES = "abs_calves"


class VolumeZone(str, Enum):
    BELOW_MV = "below_mv"
    MV_MEV = "mv_mev"
    MEV_MAV = "mev_mav"
    MAV_MRV = "mav_mrv"
    ABOVE_MRV = "above_mrv"


class ReadinessLevel(str, Enum):
    PEAK = "peak"
    GOOD = "good"
    MODERATE = "moderate"
    LOW = "low"


class DeloadSeverity(str, Enum):
    NONE = "none"
    WARNING = "warning"
    URGENT = "urgent"


class OverloadAction(str, Enum):
    DECREASE_WEIGHT = "decrease_weight"
    INCREASE_WEIGHT = "increase_weight"
    ADD_REP = "add_rep"
