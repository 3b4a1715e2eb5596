"""Readiness scoring endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mesoplan.api.routes.dependencies import get_readiness, response_meta
from mesoplan.schemas.adaptation import ReadinessResult
from mesoplan.schemas.base import APIResponse, ResponseMeta
from mesoplan.schemas.session import ReadinessCheck, SessionExercise
from mesoplan.services.readiness_engine import ReadinessEngine

router = APIRouter()


class ReadinessApplyRequest(BaseModel):
    check: ReadinessCheck
    exercises: list[SessionExercise]


class ReadinessApplyResponse(BaseModel):
    readiness: ReadinessResult
    exercises: list[SessionExercise]


@router.post("/score", response_model=APIResponse[ReadinessResult])
def score(
    check: ReadinessCheck,
    engine: ReadinessEngine = Depends(get_readiness),
    meta: ResponseMeta = Depends(response_meta),
):
    return APIResponse(data=engine.evaluate(check), meta=meta)


@router.post("/apply", response_model=APIResponse[ReadinessApplyResponse])
def apply(
    body: ReadinessApplyRequest,
    engine: ReadinessEngine = Depends(get_readiness),
    meta: ResponseMeta = Depends(response_meta),
):
    """Score a check-in and adjust the session's exercises accordingly."""
    readiness = engine.evaluate(body.check)
    exercises = engine.apply_adjustments(body.exercises, readiness.adjustments)
    return APIResponse(
        data=ReadinessApplyResponse(readiness=readiness, exercises=exercises),
        meta=meta,
    )
