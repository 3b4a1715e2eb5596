"""
Progressive Overload

Double-progression suggestions for a program day based on the most recent
logged sessions, and a session duration estimate.
"""

from __future__ import annotations

import logging
from typing import Iterable

from mesoplan.core.numeric import round_half_away
from mesoplan.models.enums import OverloadAction
from mesoplan.schemas.adaptation import OverloadSuggestion
from mesoplan.schemas.program import ProgramDay, ProgramExercise
from mesoplan.schemas.session import CompletedExercise, WorkoutSession
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog
from mesoplan.services.weight_estimation import overload_step


logger = logging.getLogger(__name__)

COMPOUND_SET_SECONDS = 50
ISOLATION_SET_SECONDS = 35
SESSIONS_TO_COMPARE = 2


def _recent_entries(history: Iterable[WorkoutSession], exercise_id: str) -> list[CompletedExercise]:
    """Most recent logged entries for an exercise (history is newest-first)."""
    entries = []
    for session in history:
        if not session.is_closed:
            continue
        for completed in session.completed_exercises:
            if completed.exercise_id == exercise_id:
                entries.append(completed)
                if len(entries) == SESSIONS_TO_COMPARE:
                    return entries
    return entries


def _suggest(
    prescribed: ProgramExercise,
    entries: list[CompletedExercise],
    step: float,
) -> OverloadSuggestion | None:
    min_reps, max_reps = prescribed.min_reps, prescribed.max_reps
    completed = [s for s in entries[0].sets if s.completed]
    if not completed:
        return None
    last_weight = completed[0].weight or 0

    below_min = sum(1 for s in completed if s.reps < min_reps)
    if below_min > len(completed) * 0.5 and last_weight > 0:
        suggested = max(0, last_weight - step)
        return OverloadSuggestion(
            exercise_id=prescribed.exercise_id,
            action=OverloadAction.DECREASE_WEIGHT,
            current_weight=last_weight,
            suggested_weight=suggested,
            target_reps=min_reps,
            message=f"Drop to {suggested:g} kg",
        )

    if len(entries) >= SESSIONS_TO_COMPARE and last_weight > 0:
        all_at_max = all(
            s.reps >= max_reps for entry in entries for s in entry.sets if s.completed
        )
        if all_at_max:
            suggested = last_weight + step
            return OverloadSuggestion(
                exercise_id=prescribed.exercise_id,
                action=OverloadAction.INCREASE_WEIGHT,
                current_weight=last_weight,
                suggested_weight=suggested,
                target_reps=min_reps,
                message=f"{suggested:g} kg (back to {min_reps} reps)",
            )

    if all(min_reps <= s.reps < max_reps for s in completed):
        best_reps = max(s.reps for s in completed)
        return OverloadSuggestion(
            exercise_id=prescribed.exercise_id,
            action=OverloadAction.ADD_REP,
            current_weight=last_weight,
            suggested_weight=last_weight,
            target_reps=min(max_reps, best_reps + 1),
            message=f"+1 rep (aim for {max_reps})",
        )
    return None


def get_overload_suggestions(
    history: list[WorkoutSession],
    day: ProgramDay,
    catalog: ExerciseCatalog | None = None,
) -> list[OverloadSuggestion]:
    """
    Suggest the next step for each exercise of a day.

    Args:
        history: Logged sessions, newest first.
        day: Program day whose exercises are evaluated.
        catalog: Exercise catalog (defaults to the shared one).

    Returns:
        Suggestions in day order; exercises without a decision are omitted.
    """
    catalog = catalog or get_exercise_catalog()
    suggestions = []
    for prescribed in day.exercises:
        exercise = catalog.get(prescribed.exercise_id)
        if exercise is None:
            continue
        entries = _recent_entries(history, prescribed.exercise_id)
        if not entries:
            continue
        suggestion = _suggest(prescribed, entries, overload_step(exercise.equipment))
        if suggestion is not None:
            suggestions.append(suggestion)
    logger.debug(f"{len(suggestions)} overload suggestions for {day.label}")
    return suggestions


def estimate_duration(day: ProgramDay, catalog: ExerciseCatalog | None = None) -> int:
    """Estimated session length in minutes (work sets plus rest)."""
    catalog = catalog or get_exercise_catalog()
    total_seconds = 0
    for exercise in day.exercises:
        set_time = COMPOUND_SET_SECONDS if catalog.is_compound(exercise.exercise_id) else ISOLATION_SET_SECONDS
        total_seconds += exercise.sets * (set_time + exercise.rest_time)
    return round_half_away(total_seconds / 60)
