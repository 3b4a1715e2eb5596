"""Result schemas returned by the adaptation engines."""
from pydantic import BaseModel, Field

from mesoplan.models.enums import (
    DeloadSeverity,
    Muscle,
    OverloadAction,
    ReadinessLevel,
)


class SessionAdjustments(BaseModel):
    volume_multiplier: float
    weight_multiplier: float
    rest_multiplier: float
    rir_delta: int
    level: ReadinessLevel


class ReadinessResult(BaseModel):
    score: int
    level: ReadinessLevel
    adjustments: SessionAdjustments


class VolumeAdjustment(BaseModel):
    muscle: Muscle
    delta_sets: int
    reason: str
    message: str = ""


class DeloadMuscle(BaseModel):
    muscle: Muscle
    weeks_above_mrv: int
    current_sets: int
    mrv: int


class DeloadStatus(BaseModel):
    needs_deload: bool = False
    muscles: list[DeloadMuscle] = Field(default_factory=list)
    severity: DeloadSeverity = DeloadSeverity.NONE
    message: str = ""


class MrvOverflow(BaseModel):
    muscle: Muscle
    sets: int
    mrv: int
    overflow: int


class OverloadSuggestion(BaseModel):
    exercise_id: str
    action: OverloadAction
    current_weight: float
    suggested_weight: float
    target_reps: int
    message: str
