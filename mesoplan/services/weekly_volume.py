"""Calendar-week bucketing of effective sets per muscle."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable

from mesoplan.models.enums import Muscle
from mesoplan.schemas.session import WorkoutSession
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog


def week_bounds(week_offset: int = 0, now: datetime | None = None) -> tuple[datetime, datetime]:
    """Monday 00:00 through Sunday 23:59:59.999999 of the week at ``week_offset``.

    Offset 0 is the week containing ``now``, -1 the week before, and so on.
    """
    now = now or datetime.now()
    monday = (now - timedelta(days=now.weekday())).replace(hour=0, minute=0, second=0, microsecond=0)
    start = monday + timedelta(weeks=week_offset)
    end = start + timedelta(days=7) - timedelta(microseconds=1)
    return start, end


def _align(moment: datetime, reference: datetime) -> datetime:
    """Express ``moment`` with the same tz-awareness as ``reference``."""
    if reference.tzinfo is None:
        if moment.tzinfo is None:
            return moment
        return moment.astimezone().replace(tzinfo=None)
    if moment.tzinfo is None:
        return moment.replace(tzinfo=reference.tzinfo)
    return moment.astimezone(reference.tzinfo)


def get_sets_for_week(
    history: Iterable[WorkoutSession],
    week_offset: int = 0,
    now: datetime | None = None,
    catalog: ExerciseCatalog | None = None,
) -> dict[Muscle, int]:
    """Count effective sets per muscle for closed sessions started in a week.

    Sessions are bucketed by ``start_time`` regardless of history order.
    Exercises missing from the catalog or whose target maps to no muscle
    are skipped.
    """
    catalog = catalog or get_exercise_catalog()
    start, end = week_bounds(week_offset, now)
    totals: dict[Muscle, int] = {}

    for session in history:
        if not session.is_closed:
            continue
        started = _align(session.start_time, start)
        if started < start or started > end:
            continue
        for completed in session.completed_exercises:
            muscle = catalog.muscle_for(completed.exercise_id)
            if muscle is None:
                continue
            effective = sum(1 for s in completed.sets if s.is_effective)
            totals[muscle] = totals.get(muscle, 0) + effective

    return totals
