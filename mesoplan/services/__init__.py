"""Periodization engine services.

The functions re-exported here are the engine's public Python API; the
service classes behind them accept explicit catalogs and configs for tests
and embedding.
"""
from mesoplan.services.deload_detection import check_deload_status, get_muscles_above_mrv
from mesoplan.services.exercise_classification import (
    classify_exercise,
    get_exercise_category,
    get_target_rir,
)
from mesoplan.services.feedback_adaptation import compute_feedback_adjustments
from mesoplan.services.program_generator import generate_program
from mesoplan.services.progressive_overload import estimate_duration, get_overload_suggestions
from mesoplan.services.readiness_engine import (
    apply_adjustments_to_exercises,
    compute_readiness_score,
    compute_session_adjustments,
    get_readiness_level,
)
from mesoplan.services.volume_landmarks import get_landmarks, get_volume_zone

__all__ = [
    "apply_adjustments_to_exercises",
    "check_deload_status",
    "classify_exercise",
    "compute_feedback_adjustments",
    "compute_readiness_score",
    "compute_session_adjustments",
    "estimate_duration",
    "generate_program",
    "get_exercise_category",
    "get_landmarks",
    "get_muscles_above_mrv",
    "get_overload_suggestions",
    "get_readiness_level",
    "get_target_rir",
    "get_volume_zone",
]
