"""Shared fixtures for the engine and API tests."""
from datetime import datetime, timedelta

import pytest

from mesoplan.models.enums import EquipmentSetup, ExperienceLevel, Goal, Sex
from mesoplan.schemas.profile import UserProfile
from mesoplan.schemas.session import CompletedExercise, CompletedSet, WorkoutSession
from mesoplan.services.exercise_catalog import get_exercise_catalog
from mesoplan.services.program_generator import ProgramGenerator

# Wednesday; the calendar week runs Monday 2026-10-12 to Sunday 2026-10-18.
NOW = datetime(2026, 10, 14, 12, 0)


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def catalog():
    return get_exercise_catalog()


@pytest.fixture
def profile():
    """Intermediate male lifter, 4 days/week in a full gym."""
    return UserProfile(
        goal=Goal.HYPERTROPHY,
        experience=ExperienceLevel.INTERMEDIATE,
        days_per_week=4,
        sex=Sex.MALE,
        weight_kg=80,
        equipment=EquipmentSetup.FULL_GYM,
        updated_at=datetime(2026, 10, 1, 9, 0),
    )


@pytest.fixture
def program(profile, catalog):
    return ProgramGenerator(catalog=catalog).generate(profile)


@pytest.fixture
def make_session():
    """Factory for closed sessions logging one or more exercises.

    ``exercises`` maps exercise id to a list of (reps, weight) tuples, or to
    an int meaning that many effective sets of 10 reps.
    """
    counter = {"n": 0}

    def _make(start_time, exercises, rir=2, closed=True):
        counter["n"] += 1
        completed = []
        for exercise_id, sets in exercises.items():
            if isinstance(sets, int):
                sets = [(10, 0)] * sets
            completed.append(
                CompletedExercise(
                    exercise_id=exercise_id,
                    sets=[
                        CompletedSet(reps=reps, weight=weight, completed=True, rir=rir)
                        for reps, weight in sets
                    ],
                )
            )
        return WorkoutSession(
            id=f"session-{counter['n']}",
            start_time=start_time,
            end_time=start_time + timedelta(hours=1) if closed else None,
            completed_exercises=completed,
        )

    return _make
