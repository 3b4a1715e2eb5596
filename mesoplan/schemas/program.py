"""Schemas for generated programs and active-program state."""
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, model_validator

from mesoplan.models.enums import DayFocus, Muscle, SplitType
from mesoplan.schemas.profile import UserProfile
from mesoplan.schemas.session import ReadinessCheck

# Current field -> baseline shadow field kept for resets and projections.
ORIGINAL_FIELDS: dict[str, str] = {
    "sets": "original_sets",
    "reps": "original_reps",
    "min_reps": "original_min_reps",
    "max_reps": "original_max_reps",
    "rest_time": "original_rest_time",
    "suggested_weight": "original_suggested_weight",
    "target_rir": "original_target_rir",
}


class ProgramExercise(BaseModel):
    """A prescribed exercise on a program day.

    The ``original_*`` fields hold the generated baseline. They are filled
    from the current values when absent and never change afterwards, so
    overrides and feedback deltas are always computed from the baseline.
    """

    exercise_id: str
    muscle: Muscle
    sets: int = Field(ge=1)
    reps: int = Field(ge=1)
    min_reps: int = Field(ge=1)
    max_reps: int = Field(ge=1)
    target_rir: int = Field(default=2, ge=0, le=4)
    rest_time: int = Field(ge=0)
    suggested_weight: float = Field(default=0, ge=0)
    notes: str | None = None

    original_sets: int = Field(ge=1)
    original_reps: int = Field(ge=1)
    original_min_reps: int = Field(ge=1)
    original_max_reps: int = Field(ge=1)
    original_rest_time: int = Field(ge=0)
    original_suggested_weight: float = Field(ge=0)
    original_target_rir: int = Field(ge=0, le=4)

    @model_validator(mode='before')
    @classmethod
    def backfill_originals(cls, data: Any) -> Any:
        """Populate missing baseline fields from the current values."""
        if not isinstance(data, dict):
            return data
        data = dict(data)
        data.setdefault("target_rir", 2)
        data.setdefault("suggested_weight", 0)
        for current, original in ORIGINAL_FIELDS.items():
            if data.get(original) is None and current in data:
                data[original] = data[current]
        return data


class ProgramDay(BaseModel):
    day_index: int = Field(ge=0)
    label: str
    focus: DayFocus
    muscle_targets: list[Muscle] = Field(default_factory=list)
    exercises: list[ProgramExercise] = Field(default_factory=list)
    is_rest_day: bool = False


class ProgramWeek(BaseModel):
    week_number: int = Field(ge=1)
    is_deload: bool = False
    days: list[ProgramDay] = Field(default_factory=list)
    volume_targets: dict[Muscle, int] = Field(default_factory=dict)


class TrainingProgram(BaseModel):
    id: str
    name: str
    split_type: SplitType
    total_weeks: int = Field(ge=1)
    weeks: list[ProgramWeek]
    user_profile: UserProfile
    created_at: datetime | None = None
    started_at: datetime | None = None


class SessionFeedback(BaseModel):
    """Post-session feedback, each answer on a 1..3 scale."""

    pump: int = Field(ge=1, le=3)
    soreness: int = Field(ge=1, le=3)
    performance: int = Field(ge=1, le=3)
    joint_pain: bool = False


def day_key(week: int, day_index: int) -> str:
    """Key used for completed days and session feedback ("week-day")."""
    return f"{week}-{day_index}"


class ActiveProgramState(BaseModel):
    program_id: str
    current_week: int = Field(default=1, ge=1)
    current_day_index: int = Field(default=0, ge=0)
    completed_days: list[str] = Field(default_factory=list)
    start_date: datetime
    last_completed_at: datetime | None = None
    last_readiness: ReadinessCheck | None = None
    session_feedback: dict[str, SessionFeedback] = Field(default_factory=dict)
    feedback_applied_weeks: list[int] = Field(default_factory=list)
