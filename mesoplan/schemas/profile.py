"""User profile schema."""
from datetime import datetime

from pydantic import BaseModel, Field, field_validator

from mesoplan.models.enums import EquipmentSetup, ExperienceLevel, Goal, Muscle, Sex


class UserProfile(BaseModel):
    """Training profile that drives program generation."""

    goal: Goal
    experience: ExperienceLevel
    days_per_week: int = Field(ge=3, le=6)
    sex: Sex
    weight_kg: float = Field(gt=0)
    height_cm: float | None = Field(default=None, gt=0)
    age: int | None = Field(default=None, ge=10, le=100)
    equipment: EquipmentSetup
    priority_muscles: list[Muscle] = Field(default_factory=list, max_length=2)
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator('priority_muscles')
    @classmethod
    def validate_priority_muscles(cls, v: list[Muscle]) -> list[Muscle]:
        """Reject duplicate priority muscles."""
        if len(set(v)) != len(v):
            raise ValueError("priority_muscles must not contain duplicates")
        return v
