"""
Readiness Engine

Turns a pre-session check-in into a 0-100 readiness score, maps the score to
a readiness level and a bundle of session multipliers, and projects a program
day's exercises through those multipliers.

Projections return new objects and are never written back to the program,
so repeated check-ins never compound.
"""

from __future__ import annotations

import logging

from mesoplan.config.engine_config_loader import ReadinessConfig, get_engine_config
from mesoplan.core.numeric import round_half_away, round_to_step
from mesoplan.models.enums import ReadinessLevel
from mesoplan.schemas.adaptation import ReadinessResult, SessionAdjustments
from mesoplan.schemas.program import ProgramDay
from mesoplan.schemas.session import ReadinessCheck, SessionExercise


logger = logging.getLogger(__name__)

WEIGHT_STEP_KG = 0.5
NEUTRAL_LEVELS = frozenset({ReadinessLevel.PEAK, ReadinessLevel.GOOD})


class ReadinessEngine:
    """Readiness scoring and session adjustment."""

    def __init__(self, config: ReadinessConfig | None = None):
        self._config = config or get_engine_config().readiness

    def compute_score(self, check: ReadinessCheck) -> int:
        """Score = (sleep + energy + stress + soreness) / divisor * 100, clamped."""
        total = check.sleep + check.energy + check.soreness + (check.stress or 0)
        score = round_half_away(total / self._config.score_divisor * 100)
        return max(0, min(self._config.max_score, score))

    def get_level(self, score: int) -> ReadinessLevel:
        thresholds = self._config.level_thresholds
        for level in (ReadinessLevel.PEAK, ReadinessLevel.GOOD, ReadinessLevel.MODERATE):
            if score >= thresholds[level]:
                return level
        return ReadinessLevel.LOW

    def compute_adjustments(self, score: int) -> SessionAdjustments:
        level = self.get_level(score)
        bundle = self._config.adjustments[level]
        return SessionAdjustments(
            volume_multiplier=bundle.volume_multiplier,
            weight_multiplier=bundle.weight_multiplier,
            rest_multiplier=bundle.rest_multiplier,
            rir_delta=bundle.rir_delta,
            level=level,
        )

    def evaluate(self, check: ReadinessCheck) -> ReadinessResult:
        score = self.compute_score(check)
        adjustments = self.compute_adjustments(score)
        logger.info(f"Readiness score {score} -> {adjustments.level.value}")
        return ReadinessResult(score=score, level=adjustments.level, adjustments=adjustments)

    def apply_adjustments(
        self,
        exercises: list[SessionExercise],
        adjustments: SessionAdjustments,
    ) -> list[SessionExercise]:
        """
        Apply session multipliers to exercises.

        Peak and good readiness return the exercises unchanged. Otherwise
        each exercise is copied with scaled sets (at least 1), load rounded
        to 0.5 kg (bodyweight stays 0), scaled rest and a raised target RIR
        (missing RIR counts as the default), capped at the maximum.
        """
        if adjustments.level in NEUTRAL_LEVELS:
            return list(exercises)

        adjusted = []
        for exercise in exercises:
            base_rir = exercise.target_rir if exercise.target_rir is not None else self._config.default_target_rir
            weight = exercise.weight
            if weight != 0:
                weight = round_to_step(weight * adjustments.weight_multiplier, WEIGHT_STEP_KG)
            adjusted.append(
                exercise.model_copy(
                    update={
                        "sets": max(1, round_half_away(exercise.sets * adjustments.volume_multiplier)),
                        "weight": weight,
                        "rest_time": round_half_away(exercise.rest_time * adjustments.rest_multiplier),
                        "target_rir": min(self._config.max_rir, base_rir + adjustments.rir_delta),
                    }
                )
            )
        return adjusted

    def project_day(
        self,
        day: ProgramDay,
        check: ReadinessCheck | None = None,
        weight_overrides: dict[str, float] | None = None,
    ) -> list[SessionExercise]:
        """Session exercises for a day, adjusted for readiness when a check-in is given."""
        exercises = build_session_exercises(day, weight_overrides)
        if check is None:
            return exercises
        adjustments = self.compute_adjustments(self.compute_score(check))
        return self.apply_adjustments(exercises, adjustments)


def build_session_exercises(
    day: ProgramDay, weight_overrides: dict[str, float] | None = None
) -> list[SessionExercise]:
    """Project a program day into session exercises.

    The session targets the top of the rep range. ``weight_overrides`` maps
    exercise ids to loads (e.g. from overload suggestions) that replace the
    suggested weight.
    """
    weight_overrides = weight_overrides or {}
    return [
        SessionExercise(
            exercise_id=exercise.exercise_id,
            sets=exercise.sets,
            reps=exercise.max_reps,
            min_reps=exercise.min_reps,
            max_reps=exercise.max_reps,
            target_rir=exercise.target_rir,
            weight=weight_overrides.get(exercise.exercise_id, exercise.suggested_weight),
            rest_time=exercise.rest_time,
        )
        for exercise in day.exercises
    ]


def get_readiness_engine() -> ReadinessEngine:
    """Get ReadinessEngine instance backed by the shared config."""
    return ReadinessEngine()


def compute_readiness_score(check: ReadinessCheck) -> int:
    return get_readiness_engine().compute_score(check)


def get_readiness_level(score: int) -> ReadinessLevel:
    return get_readiness_engine().get_level(score)


def compute_session_adjustments(score: int) -> SessionAdjustments:
    return get_readiness_engine().compute_adjustments(score)


def apply_adjustments_to_exercises(
    exercises: list[SessionExercise], adjustments: SessionAdjustments
) -> list[SessionExercise]:
    return get_readiness_engine().apply_adjustments(exercises, adjustments)
