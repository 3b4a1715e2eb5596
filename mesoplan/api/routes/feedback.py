"""Post-week feedback endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from mesoplan.api.routes.dependencies import get_feedback_service, response_meta
from mesoplan.models.enums import Muscle
from mesoplan.schemas.adaptation import VolumeAdjustment
from mesoplan.schemas.base import APIResponse, ResponseMeta
from mesoplan.schemas.program import SessionFeedback
from mesoplan.services.feedback_adaptation import FeedbackAdaptationService

router = APIRouter()


class FeedbackAdjustmentsRequest(BaseModel):
    feedbacks: list[SessionFeedback] = Field(default_factory=list)
    day_muscle_map: dict[int, list[Muscle]] = Field(default_factory=dict)


@router.post("/adjustments", response_model=APIResponse[list[VolumeAdjustment]])
def adjustments(
    body: FeedbackAdjustmentsRequest,
    service: FeedbackAdaptationService = Depends(get_feedback_service),
    meta: ResponseMeta = Depends(response_meta),
):
    """Per-muscle set deltas for next week from this week's feedback."""
    return APIResponse(
        data=service.compute_adjustments(body.feedbacks, body.day_muscle_map),
        meta=meta,
    )
