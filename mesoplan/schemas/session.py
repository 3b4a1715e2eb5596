"""Schemas for logged workout sessions and pre-session check-ins."""
from datetime import datetime

from pydantic import BaseModel, Field

# Sets logged at more than this many reps in reserve do not count as effective.
EFFECTIVE_RIR_LIMIT = 3


class CompletedSet(BaseModel):
    reps: int = Field(ge=0)
    weight: float | None = Field(default=None, ge=0)
    completed: bool = False
    rir: int | None = Field(default=None, ge=0)

    @property
    def is_effective(self) -> bool:
        return self.completed and (self.rir is None or self.rir <= EFFECTIVE_RIR_LIMIT)


class CompletedExercise(BaseModel):
    exercise_id: str
    sets: list[CompletedSet] = Field(default_factory=list)


class ReadinessCheck(BaseModel):
    """Pre-session self-report, each answer on a 1..5 scale where 5 is best.

    ``stress`` is optional; when absent it contributes nothing to the score.
    """

    sleep: int = Field(ge=1, le=5)
    energy: int = Field(ge=1, le=5)
    soreness: int = Field(ge=1, le=5)
    stress: int | None = Field(default=None, ge=1, le=5)
    timestamp: datetime | None = None


class WorkoutSession(BaseModel):
    id: str
    start_time: datetime
    end_time: datetime | None = None
    completed_exercises: list[CompletedExercise] = Field(default_factory=list)
    program_id: str | None = None
    program_week: int | None = Field(default=None, ge=1)
    program_day_index: int | None = Field(default=None, ge=0)
    readiness: ReadinessCheck | None = None

    @property
    def is_closed(self) -> bool:
        return self.end_time is not None


class SessionExercise(BaseModel):
    """Session-screen projection of a program exercise."""

    exercise_id: str
    sets: int = Field(ge=1)
    reps: int = Field(ge=1)
    min_reps: int = Field(ge=1)
    max_reps: int = Field(ge=1)
    target_rir: int | None = Field(default=None, ge=0, le=4)
    weight: float = Field(default=0, ge=0)
    rest_time: int = Field(ge=0)
