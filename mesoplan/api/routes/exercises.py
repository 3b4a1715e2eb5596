"""Exercise catalog endpoints."""
from fastapi import APIRouter, Depends
from pydantic import BaseModel

from mesoplan.api.routes.dependencies import get_catalog, response_meta
from mesoplan.core.exceptions import NotFoundError
from mesoplan.models.enums import ExerciseCategory
from mesoplan.schemas.base import APIResponse, ResponseMeta
from mesoplan.services.exercise_catalog import ExerciseCatalog
from mesoplan.services.exercise_classification import classify_exercise

router = APIRouter()


class ExerciseCategoryResponse(BaseModel):
    exercise_id: str
    name: str
    category: ExerciseCategory


@router.get("/{exercise_id}/category", response_model=APIResponse[ExerciseCategoryResponse])
def exercise_category(
    exercise_id: str,
    catalog: ExerciseCatalog = Depends(get_catalog),
    meta: ResponseMeta = Depends(response_meta),
):
    exercise = catalog.get(exercise_id)
    if exercise is None:
        raise NotFoundError("Exercise", f"Exercise {exercise_id} not found", {"exercise_id": exercise_id})
    return APIResponse(
        data=ExerciseCategoryResponse(
            exercise_id=exercise.id,
            name=exercise.name,
            category=classify_exercise(exercise),
        ),
        meta=meta,
    )
