"""
Feedback Adaptation

Turns a week of post-session feedback into per-muscle set deltas for the next
week. Pump, soreness and performance are averaged across the week and matched
against the rule table in engine_config.yaml; the first matching rule sets
the delta for every muscle trained that week.
"""

from __future__ import annotations

import logging
from typing import Iterable, Mapping

from mesoplan.config.engine_config_loader import FeedbackConfig, get_engine_config
from mesoplan.models.enums import Muscle
from mesoplan.schemas.adaptation import VolumeAdjustment
from mesoplan.schemas.program import SessionFeedback


logger = logging.getLogger(__name__)


class FeedbackAdaptationService:
    """Week feedback -> per-muscle volume adjustments."""

    def __init__(self, config: FeedbackConfig | None = None):
        self._config = config or get_engine_config().feedback

    @property
    def config(self) -> FeedbackConfig:
        return self._config

    def compute_adjustments(
        self,
        week_feedbacks: list[SessionFeedback],
        day_muscle_map: Mapping[int, Iterable[Muscle | str]],
    ) -> list[VolumeAdjustment]:
        """
        Compute set deltas from a week's feedback.

        Args:
            week_feedbacks: Feedback for the days of the week that have it.
            day_muscle_map: Day index -> muscles trained that day.

        Returns:
            One adjustment per muscle with a non-zero delta, in first-seen
            order across days. Empty when there is no feedback.
        """
        if not week_feedbacks:
            return []

        n = len(week_feedbacks)
        avg_pump = sum(f.pump for f in week_feedbacks) / n
        avg_soreness = sum(f.soreness for f in week_feedbacks) / n
        avg_performance = sum(f.performance for f in week_feedbacks) / n

        muscles: list[Muscle] = []
        for day_index in sorted(day_muscle_map):
            for muscle in day_muscle_map[day_index]:
                muscle = Muscle(muscle)
                if muscle not in muscles:
                    muscles.append(muscle)

        rule = next(
            (r for r in self._config.rules if r.matches(avg_pump, avg_soreness, avg_performance)),
            None,
        )
        if rule is None:
            logger.debug(
                f"No volume change: pump={avg_pump:.2f} soreness={avg_soreness:.2f} "
                f"performance={avg_performance:.2f}"
            )
            return []

        delta = max(-self._config.max_delta, min(self._config.max_delta, rule.delta))
        if delta == 0:
            return []

        if any(f.joint_pain for f in week_feedbacks):
            logger.info("Joint pain reported this week; consider swapping the affected exercises")

        logger.info(f"Feedback rule {rule.reason}: {delta:+d} sets for {len(muscles)} muscles")
        return [
            VolumeAdjustment(muscle=muscle, delta_sets=delta, reason=rule.reason, message=rule.message)
            for muscle in muscles
        ]


def get_feedback_adaptation_service() -> FeedbackAdaptationService:
    """Get FeedbackAdaptationService instance backed by the shared config."""
    return FeedbackAdaptationService()


def compute_feedback_adjustments(
    week_feedbacks: list[SessionFeedback],
    day_muscle_map: Mapping[int, Iterable[Muscle | str]],
) -> list[VolumeAdjustment]:
    return get_feedback_adaptation_service().compute_adjustments(week_feedbacks, day_muscle_map)
