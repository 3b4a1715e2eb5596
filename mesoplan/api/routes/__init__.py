"""API routes module."""
from mesoplan.api.routes.exercises import router as exercises_router
from mesoplan.api.routes.feedback import router as feedback_router
from mesoplan.api.routes.programs import router as programs_router
from mesoplan.api.routes.readiness import router as readiness_router
from mesoplan.api.routes.volume import router as volume_router

__all__ = [
    "exercises_router",
    "feedback_router",
    "programs_router",
    "readiness_router",
    "volume_router",
]
