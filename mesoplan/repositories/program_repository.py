"""
Program store repository.

Persists the user profile, generated program and active state as a single
JSON document. Documents written by older releases are migrated on load.
"""
from __future__ import annotations

import copy
import json
import os
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from mesoplan.core.exceptions import StorageError
from mesoplan.core.logging import get_logger
from mesoplan.schemas.store import CURRENT_STORE_VERSION, ProgramStoreRecord
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog

logger = get_logger(__name__)

DEFAULT_REPS = 10
DEFAULT_TARGET_RIR = 2


def _iter_exercises(document: dict[str, Any]):
    program = document.get("program") or {}
    for week in program.get("weeks") or []:
        for day in week.get("days") or []:
            yield from day.get("exercises") or []


def migrate_store_document(
    document: dict[str, Any], version: int, catalog: ExerciseCatalog | None = None
) -> dict[str, Any]:
    """Upgrade a raw store document from ``version`` to the current layout.

    Version 1 stored a single ``reps`` target per exercise and no muscle; it
    gains a ``min_reps``/``max_reps`` range, a default target RIR and the
    muscle the catalog maps the exercise to. Version 2 only gained optional
    fields. Missing ``original_*`` baselines are backfilled when the program
    is validated.
    """
    document = copy.deepcopy(document)
    if version < 2:
        catalog = catalog or get_exercise_catalog()
        for exercise in _iter_exercises(document):
            if not exercise.get("muscle"):
                muscle = catalog.muscle_for(exercise.get("exercise_id", ""))
                if muscle is not None:
                    exercise["muscle"] = muscle.value
            reps = exercise.get("reps") or DEFAULT_REPS
            exercise.setdefault("reps", reps)
            if not exercise.get("min_reps"):
                exercise["min_reps"] = reps
            if not exercise.get("max_reps"):
                exercise["max_reps"] = reps
            if exercise.get("target_rir") is None:
                exercise["target_rir"] = DEFAULT_TARGET_RIR
            if exercise.get("original_reps") is not None:
                exercise.setdefault("original_min_reps", exercise["original_reps"])
                exercise.setdefault("original_max_reps", exercise["original_reps"])
    document["version"] = CURRENT_STORE_VERSION
    return document


class JsonProgramRepository:
    """File-backed repository for the program store record."""

    def __init__(self, path: Path | str, catalog: ExerciseCatalog | None = None):
        self._path = Path(path)
        self._catalog = catalog

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> ProgramStoreRecord:
        """Load the stored record, or an empty record when nothing is stored."""
        if not self._path.exists():
            return ProgramStoreRecord()

        try:
            document = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise StorageError(
                f"Program store is not valid JSON: {e}", details={"path": str(self._path)}
            ) from e
        if not isinstance(document, dict):
            raise StorageError("Program store must be a JSON object", details={"path": str(self._path)})

        version = document.get("version", 1)
        if version > CURRENT_STORE_VERSION:
            raise StorageError(
                f"Program store version {version} is newer than supported version {CURRENT_STORE_VERSION}",
                details={"path": str(self._path), "version": version},
            )
        if version < CURRENT_STORE_VERSION:
            document = migrate_store_document(document, version, self._catalog)
            logger.info("program_store_migrated", from_version=version, to_version=CURRENT_STORE_VERSION)

        try:
            return ProgramStoreRecord.model_validate(document)
        except PydanticValidationError as e:
            raise StorageError(
                f"Program store failed validation: {e.error_count()} errors",
                details={"path": str(self._path)},
            ) from e

    def save(self, record: ProgramStoreRecord) -> ProgramStoreRecord:
        """Write the record atomically and return it."""
        record = record.model_copy(update={"version": CURRENT_STORE_VERSION})
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        tmp_path.write_text(record.model_dump_json(indent=2), encoding="utf-8")
        os.replace(tmp_path, self._path)
        logger.debug("program_store_saved", path=str(self._path))
        return record

    def clear(self) -> None:
        """Remove the stored record."""
        self._path.unlink(missing_ok=True)
