"""Tests for weekly set counting and deload detection."""
from datetime import datetime, timedelta, timezone

from mesoplan.models.enums import DeloadSeverity, Muscle
from mesoplan.schemas.session import CompletedExercise, CompletedSet
from mesoplan.services.deload_detection import DeloadDetector
from mesoplan.services.weekly_volume import get_sets_for_week, week_bounds

MONDAY = datetime(2026, 10, 12, 10, 0)


class TestWeekBounds:
    def test_current_week(self, now):
        start, end = week_bounds(0, now)
        assert start == datetime(2026, 10, 12)
        assert end == datetime(2026, 10, 18, 23, 59, 59, 999999)

    def test_previous_week(self, now):
        start, _ = week_bounds(-1, now)
        assert start == datetime(2026, 10, 5)


class TestSetsForWeek:
    """Effective set counting per muscle."""

    def test_counts_effective_sets_by_muscle(self, catalog, now, make_session):
        history = [
            make_session(MONDAY, {"ex_023": 3, "ex_034": 2}),
            make_session(MONDAY + timedelta(days=2), {"ex_026": 4}),
        ]
        sets = get_sets_for_week(history, 0, now, catalog)
        assert sets == {Muscle.CHEST: 7, Muscle.BICEPS: 2}

    def test_high_rir_and_incomplete_sets_do_not_count(self, catalog, now, make_session):
        session = make_session(MONDAY, {"ex_023": 3}, rir=4)
        easy = get_sets_for_week([session], 0, now, catalog)
        assert easy == {Muscle.CHEST: 0}

        skipped = make_session(MONDAY, {})
        skipped.completed_exercises.append(
            CompletedExercise(
                exercise_id="ex_023",
                sets=[CompletedSet(reps=10, weight=60, completed=False)],
            )
        )
        assert get_sets_for_week([skipped], 0, now, catalog) == {Muscle.CHEST: 0}

    def test_open_sessions_are_ignored(self, catalog, now, make_session):
        history = [make_session(MONDAY, {"ex_023": 3}, closed=False)]
        assert get_sets_for_week(history, 0, now, catalog) == {}

    def test_unknown_exercises_are_skipped(self, catalog, now, make_session):
        history = [make_session(MONDAY, {"ex_999": 3, "ex_034": 1})]
        assert get_sets_for_week(history, 0, now, catalog) == {Muscle.BICEPS: 1}

    def test_sessions_bucket_by_start_time(self, catalog, now, make_session):
        history = [
            make_session(MONDAY - timedelta(days=7), {"ex_023": 5}),
            make_session(MONDAY, {"ex_023": 2}),
        ]
        assert get_sets_for_week(history, 0, now, catalog) == {Muscle.CHEST: 2}
        assert get_sets_for_week(history, -1, now, catalog) == {Muscle.CHEST: 5}

    def test_aware_timestamps_against_aware_now(self, catalog, make_session):
        aware_now = datetime(2026, 10, 14, 12, 0, tzinfo=timezone.utc)
        history = [make_session(datetime(2026, 10, 12, 10, 0, tzinfo=timezone.utc), {"ex_023": 3})]
        assert get_sets_for_week(history, 0, aware_now, catalog) == {Muscle.CHEST: 3}


class TestDeloadDetection:
    """Above-MRV streaks over the last four weeks."""

    def _weeks_above_mrv(self, make_session, weeks, sets=23):
        return [
            make_session(MONDAY - timedelta(weeks=offset), {"ex_023": sets})
            for offset in range(weeks)
        ]

    def test_no_history_needs_no_deload(self, catalog, now):
        status = DeloadDetector(catalog=catalog).check_deload_status([], now)
        assert status.needs_deload is False
        assert status.severity == DeloadSeverity.NONE
        assert status.muscles == []

    def test_three_week_streak_is_a_warning(self, catalog, now, make_session):
        history = self._weeks_above_mrv(make_session, 3)
        status = DeloadDetector(catalog=catalog).check_deload_status(history, now)

        assert status.needs_deload is True
        assert status.severity == DeloadSeverity.WARNING
        assert [m.muscle for m in status.muscles] == [Muscle.CHEST]
        chest = status.muscles[0]
        assert (chest.weeks_above_mrv, chest.current_sets, chest.mrv) == (3, 23, 22)
        assert status.message.startswith("Chest above MRV for 3 consecutive weeks.")

    def test_four_week_streak_is_urgent(self, catalog, now, make_session):
        history = self._weeks_above_mrv(make_session, 4)
        status = DeloadDetector(catalog=catalog).check_deload_status(history, now)
        assert status.severity == DeloadSeverity.URGENT
        assert "Chest" in status.message
        assert "4 weeks" in status.message

    def test_two_week_streak_is_not_flagged(self, catalog, now, make_session):
        history = self._weeks_above_mrv(make_session, 2)
        assert DeloadDetector(catalog=catalog).check_deload_status(history, now).needs_deload is False

    def test_streak_must_include_current_week(self, catalog, now, make_session):
        # Weeks -1..-3 above MRV but the current week is not.
        history = [
            make_session(MONDAY - timedelta(weeks=offset), {"ex_023": 23})
            for offset in (1, 2, 3)
        ]
        assert DeloadDetector(catalog=catalog).check_deload_status(history, now).needs_deload is False

    def test_streak_stops_at_first_week_within_mrv(self, catalog, now, make_session):
        # Most recent first: 25, 24, 23, 10 chest sets against an MRV of 22.
        history = [
            make_session(MONDAY - timedelta(weeks=offset), {"ex_023": sets})
            for offset, sets in enumerate((25, 24, 23, 10))
        ]
        status = DeloadDetector(catalog=catalog).check_deload_status(history, now)

        assert status.severity == DeloadSeverity.WARNING
        chest = status.muscles[0]
        assert (chest.weeks_above_mrv, chest.current_sets, chest.mrv) == (3, 25, 22)

    def test_muscles_above_mrv_sorted_by_overflow(self, catalog, now, make_session):
        history = [make_session(MONDAY, {"ex_023": 25, "ex_034": 21, "ex_039": 10})]
        overflows = DeloadDetector(catalog=catalog).get_muscles_above_mrv(history, 0, now)
        assert [(o.muscle, o.overflow) for o in overflows] == [(Muscle.CHEST, 3), (Muscle.BICEPS, 1)]
