"""Tests for the exercise catalog."""
import pytest

from mesoplan.config.program_templates import EXERCISE_POOLS
from mesoplan.models.enums import BodyPart, Equipment, Muscle
from mesoplan.schemas.catalog import Exercise
from mesoplan.services.exercise_catalog import CatalogLoadError, ExerciseCatalog


def _exercise(exercise_id, equipment=Equipment.DUMBBELL):
    return Exercise(
        id=exercise_id,
        name=exercise_id,
        equipment=equipment,
        target="biceps",
        body_part=BodyPart.UPPER_ARMS,
        compound=False,
        is_unilateral=False,
    )


class TestShippedCatalog:
    def test_every_pool_exercise_is_in_catalog(self, catalog):
        missing = [ex for pool in EXERCISE_POOLS.values() for ex in pool if ex not in catalog]
        assert missing == []

    def test_every_target_maps_to_a_muscle(self, catalog):
        assert all(catalog.muscle_for(exercise.id) is not None for exercise in catalog)

    def test_lookup(self, catalog):
        assert catalog.get("ex_023").name == "Bench Press"
        assert catalog.muscle_for("ex_006") == Muscle.UPPER_BACK
        assert catalog.is_compound("ex_023")
        assert not catalog.is_compound("ex_999")
        assert catalog.get("ex_999") is None


class TestCatalog:
    def test_duplicate_ids_rejected(self):
        with pytest.raises(CatalogLoadError):
            ExerciseCatalog([_exercise("ex_1"), _exercise("ex_1")])

    def test_filter_by_equipment_preserves_order(self):
        catalog = ExerciseCatalog(
            [_exercise("a"), _exercise("b", Equipment.CABLE), _exercise("c")]
        )
        assert catalog.filter_by_equipment(["c", "b", "a", "zz"], {Equipment.DUMBBELL}) == ["c", "a"]

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "exercises:\n"
            "  - {id: ex_1, name: Curl, equipment: dumbbell, target: biceps,"
            " body_part: upper arms, compound: false, is_unilateral: false}\n",
            encoding="utf-8",
        )
        catalog = ExerciseCatalog.from_yaml(path)
        assert len(catalog) == 1
        assert catalog.get("ex_1").equipment == Equipment.DUMBBELL

    def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogLoadError):
            ExerciseCatalog.from_yaml(tmp_path / "missing.yaml")

    def test_invalid_entry(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text("exercises:\n  - {id: ex_1, equipment: spaceship}\n", encoding="utf-8")
        with pytest.raises(CatalogLoadError):
            ExerciseCatalog.from_yaml(path)
