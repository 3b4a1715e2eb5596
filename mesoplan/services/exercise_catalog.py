"""
Exercise Catalog

Read-only catalog of exercises shipped as package data
(``mesoplan/data/exercises.yaml``), plus the mapping from catalog target
strings to canonical muscles.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Any, Iterable, Iterator

import yaml
from pydantic import ValidationError as PydanticValidationError

from mesoplan.models.enums import Equipment, Muscle
from mesoplan.schemas.catalog import Exercise


logger = logging.getLogger(__name__)


class CatalogLoadError(Exception):
    """Raised when the exercise catalog cannot be loaded."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


TARGET_TO_MUSCLE: dict[str, Muscle] = {
    "pecs": Muscle.CHEST,
    "upper chest": Muscle.CHEST,
    "lower chest": Muscle.CHEST,
    "chest": Muscle.CHEST,
    "lats": Muscle.LATS,
    "upper back": Muscle.UPPER_BACK,
    "middle back": Muscle.UPPER_BACK,
    "lower back": Muscle.LOWER_BACK,
    "rear delts": Muscle.SHOULDERS,
    "delts": Muscle.SHOULDERS,
    "front delts": Muscle.SHOULDERS,
    "lateral delts": Muscle.SHOULDERS,
    "traps": Muscle.SHOULDERS,
    "shoulders": Muscle.SHOULDERS,
    "biceps": Muscle.BICEPS,
    "brachialis": Muscle.BICEPS,
    "triceps": Muscle.TRICEPS,
    "forearms": Muscle.FOREARMS,
    "forearm flexors": Muscle.FOREARMS,
    "forearm extensors": Muscle.FOREARMS,
    "brachioradialis": Muscle.FOREARMS,
    "grip": Muscle.FOREARMS,
    "quads": Muscle.QUADS,
    "hamstrings": Muscle.HAMSTRINGS,
    "glutes": Muscle.GLUTES,
    "calves": Muscle.CALVES,
    "gastrocnemius": Muscle.CALVES,
    "soleus": Muscle.CALVES,
    "abs": Muscle.ABS,
    "lower abs": Muscle.ABS,
    "core stability": Muscle.ABS,
    "obliques": Muscle.OBLIQUES,
}


def muscle_for_target(target: str) -> Muscle | None:
    """Map a catalog target string to its canonical muscle, if any."""
    return TARGET_TO_MUSCLE.get(target)


class ExerciseCatalog:
    """In-memory, id-indexed exercise catalog."""

    def __init__(self, exercises: Iterable[Exercise]):
        self._by_id: dict[str, Exercise] = {}
        for exercise in exercises:
            if exercise.id in self._by_id:
                raise CatalogLoadError(
                    f"Duplicate exercise id in catalog: {exercise.id}",
                    details={"exercise_id": exercise.id},
                )
            self._by_id[exercise.id] = exercise

    @classmethod
    def from_yaml(cls, path: Path) -> "ExerciseCatalog":
        """Load a catalog from a YAML document with an ``exercises`` list."""
        try:
            with open(path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise CatalogLoadError(f"Exercise catalog not found: {path}")
        except yaml.YAMLError as e:
            raise CatalogLoadError(
                f"Failed to parse exercise catalog: {e}",
                details={"file_path": str(path)},
            )

        try:
            exercises = [Exercise.model_validate(row) for row in data.get("exercises", [])]
        except PydanticValidationError as e:
            raise CatalogLoadError(
                f"Invalid exercise catalog entry: {e}",
                details={"file_path": str(path)},
            )
        logger.info("Loaded %d exercises from %s", len(exercises), path)
        return cls(exercises)

    def get(self, exercise_id: str) -> Exercise | None:
        return self._by_id.get(exercise_id)

    def muscle_for(self, exercise_id: str) -> Muscle | None:
        """Canonical muscle an exercise's target maps to."""
        exercise = self._by_id.get(exercise_id)
        if exercise is None:
            return None
        return muscle_for_target(exercise.target)

    def is_compound(self, exercise_id: str) -> bool:
        exercise = self._by_id.get(exercise_id)
        return exercise is not None and exercise.compound

    def filter_by_equipment(
        self, exercise_ids: Iterable[str], allowed: Iterable[Equipment]
    ) -> list[str]:
        """Keep known ids whose equipment is allowed, preserving order."""
        allowed_set = set(allowed)
        return [
            exercise_id
            for exercise_id in exercise_ids
            if (exercise := self._by_id.get(exercise_id)) is not None
            and exercise.equipment in allowed_set
        ]

    def __contains__(self, exercise_id: object) -> bool:
        return exercise_id in self._by_id

    def __iter__(self) -> Iterator[Exercise]:
        return iter(self._by_id.values())

    def __len__(self) -> int:
        return len(self._by_id)


@lru_cache
def get_exercise_catalog() -> ExerciseCatalog:
    """Get the cached catalog loaded from the configured path."""
    from mesoplan.config.settings import get_settings

    return ExerciseCatalog.from_yaml(get_settings().exercise_catalog_path)
