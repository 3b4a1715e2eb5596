"""
Deload Detection

Flags muscles whose weekly effective volume has stayed above MRV for several
consecutive calendar weeks, counting back from the current week.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable

from mesoplan.config.engine_config_loader import DeloadConfig, get_engine_config
from mesoplan.models.enums import DeloadSeverity, VolumeZone
from mesoplan.schemas.adaptation import DeloadMuscle, DeloadStatus, MrvOverflow
from mesoplan.schemas.session import WorkoutSession
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog
from mesoplan.services.volume_landmarks import VOLUME_LANDMARKS, get_volume_zone
from mesoplan.services.weekly_volume import get_sets_for_week


logger = logging.getLogger(__name__)


class DeloadDetector:
    """Sustained above-MRV streak detector."""

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        config: DeloadConfig | None = None,
    ):
        self._catalog = catalog or get_exercise_catalog()
        self._config = config or get_engine_config().deload

    def check_deload_status(
        self, history: Iterable[WorkoutSession], now: datetime | None = None
    ) -> DeloadStatus:
        """
        Check whether recent training calls for a deload.

        Walks back week by week from the current week and counts, per
        muscle, how many consecutive weeks sat above MRV. Muscles whose
        streak reaches the threshold are reported, longest streak first.
        """
        history = list(history)
        weekly = [
            get_sets_for_week(history, -offset, now, self._catalog)
            for offset in range(self._config.weeks_to_check)
        ]

        flagged: list[DeloadMuscle] = []
        for muscle, landmarks in VOLUME_LANDMARKS.items():
            streak = 0
            for week in weekly:
                if get_volume_zone(week.get(muscle, 0), landmarks) != VolumeZone.ABOVE_MRV:
                    break
                streak += 1
            if streak >= self._config.streak_threshold:
                flagged.append(
                    DeloadMuscle(
                        muscle=muscle,
                        weeks_above_mrv=streak,
                        current_sets=weekly[0].get(muscle, 0),
                        mrv=landmarks.mrv,
                    )
                )

        if not flagged:
            return DeloadStatus()

        flagged.sort(key=lambda m: m.weeks_above_mrv, reverse=True)
        max_streak = flagged[0].weeks_above_mrv
        urgent = max_streak >= self._config.urgent_streak
        template = self._config.urgent_message if urgent else self._config.warning_message
        message = template.format(
            muscles=", ".join(m.muscle.label for m in flagged),
            weeks=max_streak,
        )

        logger.info(
            f"Deload flagged for {[m.muscle.value for m in flagged]} "
            f"(max streak {max_streak}, {'urgent' if urgent else 'warning'})"
        )
        return DeloadStatus(
            needs_deload=True,
            muscles=flagged,
            severity=DeloadSeverity.URGENT if urgent else DeloadSeverity.WARNING,
            message=message,
        )

    def get_muscles_above_mrv(
        self,
        history: Iterable[WorkoutSession],
        week_offset: int = 0,
        now: datetime | None = None,
    ) -> list[MrvOverflow]:
        """Muscles above MRV in one week, largest overflow first."""
        sets = get_sets_for_week(history, week_offset, now, self._catalog)
        overflows = [
            MrvOverflow(
                muscle=muscle,
                sets=sets[muscle],
                mrv=landmarks.mrv,
                overflow=sets[muscle] - landmarks.mrv,
            )
            for muscle, landmarks in VOLUME_LANDMARKS.items()
            if sets.get(muscle, 0) > landmarks.mrv
        ]
        overflows.sort(key=lambda o: o.overflow, reverse=True)
        return overflows


def get_deload_detector() -> DeloadDetector:
    """Get DeloadDetector instance backed by the shared catalog and config."""
    return DeloadDetector()


def check_deload_status(
    history: Iterable[WorkoutSession],
    now: datetime | None = None,
    catalog: ExerciseCatalog | None = None,
) -> DeloadStatus:
    return DeloadDetector(catalog=catalog).check_deload_status(history, now)


def get_muscles_above_mrv(
    history: Iterable[WorkoutSession],
    week_offset: int = 0,
    now: datetime | None = None,
    catalog: ExerciseCatalog | None = None,
) -> list[MrvOverflow]:
    return DeloadDetector(catalog=catalog).get_muscles_above_mrv(history, week_offset, now)
