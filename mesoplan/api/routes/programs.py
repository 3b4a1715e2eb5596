"""Program generation and stored-program endpoints."""
from fastapi import APIRouter, Depends, Query

from mesoplan.api.routes.dependencies import get_generator, get_program_repository, response_meta
from mesoplan.core.exceptions import BusinessRuleError, NotFoundError
from mesoplan.repositories.program_repository import JsonProgramRepository
from mesoplan.schemas.base import APIResponse, ResponseMeta
from mesoplan.schemas.profile import UserProfile
from mesoplan.schemas.program import TrainingProgram
from mesoplan.services.program_generator import ProgramGenerator

router = APIRouter()


@router.post("/generate", response_model=APIResponse[TrainingProgram])
def generate(
    profile: UserProfile,
    save: bool = Query(False, description="Persist the profile and program to the program store"),
    generator: ProgramGenerator = Depends(get_generator),
    repository: JsonProgramRepository = Depends(get_program_repository),
    meta: ResponseMeta = Depends(response_meta),
):
    """Generate a periodized program for a profile."""
    program = generator.generate(profile)
    if program is None:
        raise BusinessRuleError("Program could not be generated for this profile")

    if save:
        record = repository.load()
        repository.save(
            record.model_copy(update={"user_profile": profile, "program": program, "active_state": None})
        )
    return APIResponse(data=program, meta=meta)


@router.get("/current", response_model=APIResponse[TrainingProgram])
def current_program(
    repository: JsonProgramRepository = Depends(get_program_repository),
    meta: ResponseMeta = Depends(response_meta),
):
    """Return the program held in the program store."""
    record = repository.load()
    if record.program is None:
        raise NotFoundError("Program", "No program has been saved")
    return APIResponse(data=record.program, meta=meta)
