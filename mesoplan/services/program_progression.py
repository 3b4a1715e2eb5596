"""
Program Progression

Active-program state transitions: starting a program, completing and
advancing days, saving feedback and readiness, folding week feedback into the
next week, and per-exercise overrides, swaps and resets.

Every operation returns new objects and leaves its inputs untouched.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from mesoplan.core.exceptions import NotFoundError, ValidationError
from mesoplan.core.logging import get_logger
from mesoplan.schemas.adaptation import VolumeAdjustment
from mesoplan.schemas.program import (
    ORIGINAL_FIELDS,
    ActiveProgramState,
    ProgramDay,
    ProgramExercise,
    ProgramWeek,
    SessionFeedback,
    TrainingProgram,
    day_key,
)
from mesoplan.schemas.session import ReadinessCheck
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog
from mesoplan.services.feedback_adaptation import FeedbackAdaptationService
from mesoplan.services.program_generator import ProgramGenerator


logger = get_logger(__name__)

OVERRIDABLE_FIELDS = frozenset(
    {"sets", "reps", "min_reps", "max_reps", "target_rir", "rest_time", "suggested_weight", "notes"}
)


def _now() -> datetime:
    return datetime.now(timezone.utc)


def _find_week(program: TrainingProgram, week: int) -> ProgramWeek:
    for candidate in program.weeks:
        if candidate.week_number == week:
            return candidate
    raise NotFoundError("Week", f"Week {week} not found in program {program.id}", {"week": week})


def _find_day(program: TrainingProgram, week: int, day_index: int) -> ProgramDay:
    days = _find_week(program, week).days
    if not 0 <= day_index < len(days):
        raise NotFoundError(
            "Day", f"Day {day_index} not found in week {week}", {"week": week, "day_index": day_index}
        )
    return days[day_index]


def _find_exercise(
    program: TrainingProgram, week: int, day_index: int, exercise_index: int
) -> ProgramExercise:
    exercises = _find_day(program, week, day_index).exercises
    if not 0 <= exercise_index < len(exercises):
        raise NotFoundError(
            "Exercise",
            f"Exercise {exercise_index} not found on week {week} day {day_index}",
            {"week": week, "day_index": day_index, "exercise_index": exercise_index},
        )
    return exercises[exercise_index]


class ProgramProgressionService:
    """Pure transitions over a program and its active state."""

    def __init__(
        self,
        feedback_service: FeedbackAdaptationService | None = None,
        catalog: ExerciseCatalog | None = None,
    ):
        self._feedback = feedback_service or FeedbackAdaptationService()
        self._catalog = catalog

    @property
    def catalog(self) -> ExerciseCatalog:
        if self._catalog is None:
            self._catalog = get_exercise_catalog()
        return self._catalog

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start_program(
        self, program: TrainingProgram, started_at: datetime | None = None
    ) -> tuple[TrainingProgram, ActiveProgramState]:
        started_at = started_at or _now()
        state = ActiveProgramState(program_id=program.id, start_date=started_at)
        logger.info("program_started", program_id=program.id)
        return program.model_copy(update={"started_at": started_at}), state

    def mark_day_completed(
        self,
        program: TrainingProgram,
        state: ActiveProgramState,
        week: int,
        day_index: int,
        completed_at: datetime | None = None,
    ) -> tuple[TrainingProgram, ActiveProgramState]:
        """Record a day as completed (once) and advance to the next day."""
        _find_day(program, week, day_index)
        key = day_key(week, day_index)
        if key in state.completed_days:
            return program, state

        state = state.model_copy(
            update={
                "completed_days": [*state.completed_days, key],
                "last_completed_at": completed_at or _now(),
            }
        )
        logger.info("day_completed", program_id=program.id, week=week, day_index=day_index)
        return self.advance_day(program, state)

    def advance_day(
        self, program: TrainingProgram, state: ActiveProgramState
    ) -> tuple[TrainingProgram, ActiveProgramState]:
        """Move to the next day; crossing a week boundary applies feedback first."""
        current_week = _find_week(program, state.current_week)
        next_day = state.current_day_index + 1
        if next_day < len(current_week.days):
            return program, state.model_copy(update={"current_day_index": next_day})

        if state.current_week >= program.total_weeks:
            # Last day of the last week: the program is complete.
            return program, state

        program, state, _ = self.apply_feedback_to_next_week(program, state)
        return program, state.model_copy(
            update={"current_week": state.current_week + 1, "current_day_index": 0}
        )

    def is_day_completed(self, state: ActiveProgramState, week: int, day_index: int) -> bool:
        return day_key(week, day_index) in state.completed_days

    def completed_days_in_week(self, state: ActiveProgramState, week: int) -> int:
        prefix = f"{week}-"
        return sum(1 for key in state.completed_days if key.startswith(prefix))

    def is_program_complete(self, program: TrainingProgram, state: ActiveProgramState) -> bool:
        total_days = sum(len(week.days) for week in program.weeks)
        return len(state.completed_days) >= total_days

    # ------------------------------------------------------------------
    # Feedback and readiness
    # ------------------------------------------------------------------

    def save_session_feedback(
        self,
        state: ActiveProgramState,
        week: int,
        day_index: int,
        feedback: SessionFeedback,
    ) -> ActiveProgramState:
        return state.model_copy(
            update={"session_feedback": {**state.session_feedback, day_key(week, day_index): feedback}}
        )

    def save_readiness(self, state: ActiveProgramState, check: ReadinessCheck) -> ActiveProgramState:
        return state.model_copy(update={"last_readiness": check})

    def apply_feedback_to_next_week(
        self, program: TrainingProgram, state: ActiveProgramState
    ) -> tuple[TrainingProgram, ActiveProgramState, list[VolumeAdjustment]]:
        """
        Fold the current week's feedback into the next week.

        Requires feedback for enough of the week's days, skips a deload next
        week, and applies at most once per week. Each muscle's delta updates
        the next week's volume target and the first exercise for that muscle
        on each day, computed from the exercise's baseline sets.

        Returns:
            The (possibly) updated program and state, and the adjustments
            that were applied.
        """
        week_number = state.current_week
        if week_number in state.feedback_applied_weeks:
            return program, state, []

        current_week = _find_week(program, week_number)
        next_week = next((w for w in program.weeks if w.week_number == week_number + 1), None)
        if next_week is None or next_week.is_deload:
            return program, state, []

        feedbacks: list[SessionFeedback] = []
        day_muscle_map = {}
        for day in current_week.days:
            feedback = state.session_feedback.get(day_key(week_number, day.day_index))
            if feedback is not None:
                feedbacks.append(feedback)
                day_muscle_map[day.day_index] = day.muscle_targets

        if len(feedbacks) < len(current_week.days) * self._feedback.config.min_feedback_coverage:
            logger.info(
                "feedback_skipped",
                week=week_number,
                feedback_days=len(feedbacks),
                week_days=len(current_week.days),
            )
            return program, state, []

        adjustments = self._feedback.compute_adjustments(feedbacks, day_muscle_map)
        state = state.model_copy(
            update={"feedback_applied_weeks": [*state.feedback_applied_weeks, week_number]}
        )
        if not adjustments:
            return program, state, []

        deltas = {adjustment.muscle: adjustment.delta_sets for adjustment in adjustments}
        updated = program.model_copy(deep=True)
        target_week = _find_week(updated, week_number + 1)

        for muscle, delta in deltas.items():
            if muscle in target_week.volume_targets:
                target_week.volume_targets[muscle] = max(0, target_week.volume_targets[muscle] + delta)

        for day in target_week.days:
            for muscle in day.muscle_targets:
                delta = deltas.get(muscle)
                if not delta:
                    continue
                exercise = next((e for e in day.exercises if e.muscle == muscle), None)
                if exercise is not None:
                    exercise.sets = max(1, exercise.original_sets + delta)

        logger.info(
            "feedback_applied",
            program_id=program.id,
            week=week_number + 1,
            deltas={m.value: d for m, d in deltas.items()},
        )
        return updated, state, adjustments

    # ------------------------------------------------------------------
    # Overrides
    # ------------------------------------------------------------------

    def override_exercise(
        self,
        program: TrainingProgram,
        week: int,
        day_index: int,
        exercise_index: int,
        overrides: dict[str, Any],
    ) -> TrainingProgram:
        """Override prescription fields of one exercise; baselines stay intact."""
        unknown = set(overrides) - OVERRIDABLE_FIELDS
        if unknown:
            raise ValidationError(
                "overrides", f"fields cannot be overridden: {sorted(unknown)}", {"fields": sorted(unknown)}
            )
        return self._replace_exercise(program, week, day_index, exercise_index, overrides)

    def swap_exercise(
        self,
        program: TrainingProgram,
        week: int,
        day_index: int,
        exercise_index: int,
        new_exercise_id: str,
    ) -> TrainingProgram:
        """Replace one exercise and re-prescribe it for the new movement.

        Reps, rest and load come from the new exercise's tier and estimate and
        become its baseline. Sets, target RIR and notes carry over from the
        exercise being replaced.
        """
        if new_exercise_id not in self.catalog:
            raise NotFoundError(
                "Exercise", f"Exercise {new_exercise_id} not found", {"exercise_id": new_exercise_id}
            )
        current = _find_exercise(program, week, day_index, exercise_index)
        target_week = _find_week(program, week)
        baseline = ProgramGenerator(catalog=self.catalog).prescribe(
            new_exercise_id,
            current.muscle,
            current.original_sets,
            current.original_target_rir,
            week - 1,
            target_week.is_deload,
            program.user_profile,
        )
        replaced = baseline.model_copy(
            update={"sets": current.sets, "target_rir": current.target_rir, "notes": current.notes}
        )

        updated = program.model_copy(deep=True)
        _find_day(updated, week, day_index).exercises[exercise_index] = replaced
        logger.info(
            "exercise_swapped",
            program_id=program.id,
            week=week,
            day_index=day_index,
            from_exercise=current.exercise_id,
            to_exercise=new_exercise_id,
        )
        return updated

    def reset_exercise_overrides(
        self, program: TrainingProgram, week: int, day_index: int, exercise_index: int
    ) -> TrainingProgram:
        """Restore every prescription field of one exercise to its baseline."""
        exercise = _find_exercise(program, week, day_index, exercise_index)
        baseline = {current: getattr(exercise, original) for current, original in ORIGINAL_FIELDS.items()}
        return self._replace_exercise(program, week, day_index, exercise_index, baseline)

    def _replace_exercise(
        self,
        program: TrainingProgram,
        week: int,
        day_index: int,
        exercise_index: int,
        update: dict[str, Any],
    ) -> TrainingProgram:
        exercise = _find_exercise(program, week, day_index, exercise_index)
        try:
            replaced = ProgramExercise.model_validate({**exercise.model_dump(), **update})
        except PydanticValidationError as e:
            raise ValidationError("overrides", str(e), {"fields": sorted(update)}) from e
        updated = program.model_copy(deep=True)
        _find_day(updated, week, day_index).exercises[exercise_index] = replaced
        return updated


def get_program_progression_service() -> ProgramProgressionService:
    """Get ProgramProgressionService instance."""
    return ProgramProgressionService()
