"""Persisted program store document."""
from pydantic import BaseModel

from mesoplan.schemas.profile import UserProfile
from mesoplan.schemas.program import ActiveProgramState, TrainingProgram

CURRENT_STORE_VERSION = 3


class ProgramStoreRecord(BaseModel):
    version: int = CURRENT_STORE_VERSION
    user_profile: UserProfile | None = None
    program: TrainingProgram | None = None
    active_state: ActiveProgramState | None = None
