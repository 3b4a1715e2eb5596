"""Shared FastAPI dependencies."""
from fastapi import Request

from mesoplan.config.settings import get_settings
from mesoplan.repositories.program_repository import JsonProgramRepository
from mesoplan.schemas.base import ResponseMeta
from mesoplan.services.deload_detection import DeloadDetector
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog
from mesoplan.services.feedback_adaptation import FeedbackAdaptationService
from mesoplan.services.program_generator import ProgramGenerator
from mesoplan.services.readiness_engine import ReadinessEngine


def get_catalog() -> ExerciseCatalog:
    return get_exercise_catalog()


def get_program_repository() -> JsonProgramRepository:
    return JsonProgramRepository(get_settings().program_store_path)


def get_generator() -> ProgramGenerator:
    return ProgramGenerator(catalog=get_catalog())


def get_readiness() -> ReadinessEngine:
    return ReadinessEngine()


def get_deload_detector() -> DeloadDetector:
    return DeloadDetector(catalog=get_catalog())


def get_feedback_service() -> FeedbackAdaptationService:
    return FeedbackAdaptationService()


def response_meta(request: Request) -> ResponseMeta:
    """Envelope metadata carrying the current request ID."""
    return ResponseMeta(request_id=getattr(request.state, "request_id", None))
