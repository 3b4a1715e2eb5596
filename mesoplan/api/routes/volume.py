"""Weekly volume, zone and deload endpoints."""
from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field

from mesoplan.api.routes.dependencies import get_deload_detector, response_meta
from mesoplan.core.exceptions import NotFoundError
from mesoplan.models.enums import Muscle, VolumeZone
from mesoplan.schemas.adaptation import DeloadStatus, MrvOverflow
from mesoplan.schemas.base import APIResponse, ResponseMeta
from mesoplan.schemas.session import WorkoutSession
from mesoplan.services.deload_detection import DeloadDetector
from mesoplan.services.volume_landmarks import get_landmarks, get_volume_zone

router = APIRouter()


class LandmarksResponse(BaseModel):
    mv: int
    mev: int
    mav_low: int
    mav_high: int
    mrv: int


class VolumeZoneResponse(BaseModel):
    muscle: Muscle
    sets: int
    zone: VolumeZone
    landmarks: LandmarksResponse


class HistoryRequest(BaseModel):
    history: list[WorkoutSession] = Field(default_factory=list)
    now: datetime | None = None


class AboveMrvRequest(HistoryRequest):
    week_offset: int = Field(default=0, le=0)


@router.get("/zone", response_model=APIResponse[VolumeZoneResponse])
def zone(
    muscle: str = Query(..., description="Canonical muscle key, e.g. 'upper back'"),
    sets: int = Query(..., ge=0),
    meta: ResponseMeta = Depends(response_meta),
):
    landmarks = get_landmarks(muscle)
    if landmarks is None:
        raise NotFoundError("Muscle", f"No volume landmarks for muscle '{muscle}'", {"muscle": muscle})
    return APIResponse(
        data=VolumeZoneResponse(
            muscle=Muscle(muscle),
            sets=sets,
            zone=get_volume_zone(sets, landmarks),
            landmarks=LandmarksResponse(
                mv=landmarks.mv,
                mev=landmarks.mev,
                mav_low=landmarks.mav_low,
                mav_high=landmarks.mav_high,
                mrv=landmarks.mrv,
            ),
        ),
        meta=meta,
    )


@router.post("/deload-status", response_model=APIResponse[DeloadStatus])
def deload_status(
    body: HistoryRequest,
    detector: DeloadDetector = Depends(get_deload_detector),
    meta: ResponseMeta = Depends(response_meta),
):
    return APIResponse(data=detector.check_deload_status(body.history, body.now), meta=meta)


@router.post("/above-mrv", response_model=APIResponse[list[MrvOverflow]])
def above_mrv(
    body: AboveMrvRequest,
    detector: DeloadDetector = Depends(get_deload_detector),
    meta: ResponseMeta = Depends(response_meta),
):
    return APIResponse(
        data=detector.get_muscles_above_mrv(body.history, body.week_offset, body.now),
        meta=meta,
    )
