"""
Program Generator

Builds an N-week periodized mesocycle from a user profile:

- Split selection by training days per week
- Per-muscle weekly volume ramped between experience-dependent landmarks
- Exercise selection from equipment-filtered pools with day variants and a
  mid-mesocycle rotation of secondary exercises
- Rep/rest prescription by goal and exercise tier, target RIR by week,
  bodyweight-based suggested loads with weekly progression
- A final deload week at maintenance volume

Generation is deterministic: the same profile always yields the same program.
"""

from __future__ import annotations

import hashlib
import logging
import math
from collections import Counter
from dataclasses import dataclass
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError

from mesoplan.config.engine_config_loader import GeneratorConfig, get_engine_config
from mesoplan.config.program_templates import (
    EQUIPMENT_BY_SETUP,
    EXERCISE_POOLS,
    GOAL_CATEGORY_CONFIG,
    MUSCLE_SORT_ORDER,
    SPLIT_NAMES,
    SPLIT_TEMPLATES,
    SplitDayTemplate,
)
from mesoplan.core.numeric import round_half_away
from mesoplan.models.enums import Equipment, ExperienceLevel, Muscle
from mesoplan.schemas.profile import UserProfile
from mesoplan.schemas.program import ProgramDay, ProgramExercise, ProgramWeek, TrainingProgram
from mesoplan.services.exercise_catalog import ExerciseCatalog, get_exercise_catalog
from mesoplan.services.exercise_classification import classify_exercise, get_target_rir
from mesoplan.services.volume_landmarks import get_landmarks
from mesoplan.services.weight_estimation import estimate_weight, round_to_increment


logger = logging.getLogger(__name__)

UNSORTED_MUSCLE_ORDER = 99


@dataclass(frozen=True)
class VolumeRange:
    """Weekly set ramp for one muscle across a mesocycle."""
    start: int
    end: int
    deload: int


class ProgramGenerator:
    """Deterministic mesocycle generator."""

    def __init__(
        self,
        catalog: ExerciseCatalog | None = None,
        config: GeneratorConfig | None = None,
    ):
        self._catalog = catalog or get_exercise_catalog()
        self._config = config or get_engine_config().generator

    def generate(self, profile: UserProfile | Mapping[str, Any] | None) -> TrainingProgram | None:
        """
        Generate a training program for a profile.

        Args:
            profile: A validated profile, or a mapping to validate.

        Returns:
            The generated program, or None when the profile is missing or
            fails validation.
        """
        if profile is None:
            logger.warning("Program generation skipped: no profile")
            return None
        if not isinstance(profile, UserProfile):
            try:
                profile = UserProfile.model_validate(profile)
            except PydanticValidationError as e:
                logger.warning(f"Program generation skipped: invalid profile ({e.error_count()} errors)")
                return None

        split_type, templates = SPLIT_TEMPLATES[profile.days_per_week]
        total_weeks = self._config.meso_length[ExperienceLevel(profile.experience)]
        allowed_equipment = EQUIPMENT_BY_SETUP[profile.equipment]

        frequency: Counter[Muscle] = Counter(
            muscle for template in templates for muscle in template.muscles
        )
        volume_ranges = {
            muscle: self._volume_range(muscle, profile)
            for muscle in frequency
            if get_landmarks(muscle) is not None
        }

        weeks = [
            self._build_week(
                week_index,
                total_weeks,
                templates,
                frequency,
                volume_ranges,
                allowed_equipment,
                profile,
            )
            for week_index in range(total_weeks)
        ]

        program = TrainingProgram(
            id=program_id_for(profile),
            name=f"{SPLIT_NAMES[split_type]} - {total_weeks} weeks",
            split_type=split_type,
            total_weeks=total_weeks,
            weeks=weeks,
            user_profile=profile,
            created_at=profile.updated_at,
        )
        logger.info(
            f"Generated program {program.id}: {split_type.value}, "
            f"{total_weeks} weeks, {len(templates)} days/week"
        )
        return program

    def _volume_range(self, muscle: Muscle, profile: UserProfile) -> VolumeRange:
        landmarks = get_landmarks(muscle)
        experience = ExperienceLevel(profile.experience)

        if experience == ExperienceLevel.BEGINNER:
            start, end = landmarks.mev, landmarks.mav_low
        elif experience == ExperienceLevel.INTERMEDIATE:
            start = round_half_away((landmarks.mev + landmarks.mav_low) / 2)
            end = round_half_away((landmarks.mav_low + landmarks.mav_high) / 2)
        else:
            start, end = landmarks.mav_low, landmarks.mav_high

        bonus = self._config.priority_bonus_sets if muscle in profile.priority_muscles else 0
        return VolumeRange(
            start=min(start + bonus, landmarks.mrv),
            end=min(end + bonus, landmarks.mrv),
            deload=landmarks.mv,
        )

    @staticmethod
    def _week_volume(volume: VolumeRange, week_index: int, total_weeks: int, is_deload: bool) -> int:
        if is_deload:
            return volume.deload
        training_weeks = total_weeks - 1
        if training_weeks <= 1:
            return volume.start
        t = week_index / (training_weeks - 1)
        return round_half_away(volume.start + t * (volume.end - volume.start))

    def _build_week(
        self,
        week_index: int,
        total_weeks: int,
        templates: tuple[SplitDayTemplate, ...],
        frequency: Counter[Muscle],
        volume_ranges: dict[Muscle, VolumeRange],
        allowed_equipment: frozenset[Equipment],
        profile: UserProfile,
    ) -> ProgramWeek:
        is_deload = week_index == total_weeks - 1
        training_weeks = total_weeks - 1
        # Secondary exercises rotate one pool slot in the second half.
        week_phase = 1 if week_index >= math.ceil(training_weeks / 2) and not is_deload else 0
        target_rir = get_target_rir(week_index, total_weeks, is_deload)

        volume_targets = {
            muscle: self._week_volume(volume, week_index, total_weeks, is_deload)
            for muscle, volume in volume_ranges.items()
        }

        days = []
        for day_index, template in enumerate(templates):
            used: set[str] = set()
            exercises: list[ProgramExercise] = []
            for muscle in template.muscles:
                if muscle not in volume_targets:
                    continue
                sets_today = max(round_half_away(volume_targets[muscle] / frequency[muscle]), 0)
                for exercise_id, sets in self._pick_exercises(
                    muscle, sets_today, _day_variant(template.label), week_phase, allowed_equipment, used
                ):
                    exercises.append(
                        self.prescribe(exercise_id, muscle, sets, target_rir, week_index, is_deload, profile)
                    )
            exercises.sort(key=self._sort_key)
            days.append(
                ProgramDay(
                    day_index=day_index,
                    label=template.label,
                    focus=template.focus,
                    muscle_targets=list(template.muscles),
                    exercises=exercises,
                )
            )

        return ProgramWeek(
            week_number=week_index + 1,
            is_deload=is_deload,
            days=days,
            volume_targets=volume_targets,
        )

    def _pick_exercises(
        self,
        muscle: Muscle,
        sets_for_muscle: int,
        day_variant: int,
        week_phase: int,
        allowed_equipment: frozenset[Equipment],
        used: set[str],
    ) -> list[tuple[str, int]]:
        """Pick one or two exercises for a muscle and split its sets between them."""
        if sets_for_muscle <= 0:
            return []
        available = self._catalog.filter_by_equipment(EXERCISE_POOLS.get(muscle, ()), allowed_equipment)
        if not available:
            return []

        count = 2 if sets_for_muscle > self._config.two_exercise_threshold else 1
        base_offset = day_variant * 2
        picks = []
        for i in range(count):
            offset = base_offset + i + (week_phase if i > 0 else 0)
            picked = None
            for j in range(len(available)):
                candidate = available[(offset + j) % len(available)]
                if candidate not in used:
                    picked = candidate
                    used.add(candidate)
                    break
            if picked is None:
                picked = available[offset % len(available)]

            if count == 1:
                sets = sets_for_muscle
            elif i == 0:
                sets = math.ceil(sets_for_muscle / 2)
            else:
                sets = sets_for_muscle // 2
            picks.append((picked, max(sets, 1)))
        return picks

    def prescribe(
        self,
        exercise_id: str,
        muscle: Muscle,
        sets: int,
        target_rir: int,
        week_index: int,
        is_deload: bool,
        profile: UserProfile,
    ) -> ProgramExercise:
        """Tier reps and rest plus an estimated load for one exercise in a week."""
        exercise = self._catalog.get(exercise_id)
        tier = GOAL_CATEGORY_CONFIG[profile.goal][classify_exercise(exercise)]

        base_weight = estimate_weight(
            exercise_id,
            exercise.equipment,
            exercise.target,
            profile.weight_kg,
            profile.sex,
            profile.experience,
        )
        weight = base_weight
        if base_weight > 0 and not is_deload and week_index > 0:
            progression = (
                self._config.compound_weekly_progression
                if exercise.compound
                else self._config.isolation_weekly_progression
            )
            weight = round_to_increment(base_weight * (1 + progression * week_index), exercise.equipment)

        return ProgramExercise(
            exercise_id=exercise_id,
            muscle=muscle,
            sets=sets,
            reps=tier.max_reps,
            min_reps=tier.min_reps,
            max_reps=tier.max_reps,
            target_rir=target_rir,
            rest_time=tier.rest_time,
            suggested_weight=weight,
        )

    def _sort_key(self, exercise: ProgramExercise) -> tuple[int, int]:
        """Compounds first, then big muscles before small ones."""
        muscle = self._catalog.muscle_for(exercise.exercise_id)
        order = MUSCLE_SORT_ORDER.get(muscle, UNSORTED_MUSCLE_ORDER) if muscle else UNSORTED_MUSCLE_ORDER
        return (0 if self._catalog.is_compound(exercise.exercise_id) else 1, order)


def _day_variant(label: str) -> int:
    """A/B/C day variant from the template label suffix."""
    if label.endswith("B"):
        return 1
    if label.endswith("C"):
        return 2
    return 0


def program_id_for(profile: UserProfile) -> str:
    """Stable program id derived from the profile contents."""
    digest = hashlib.sha256(profile.model_dump_json().encode("utf-8")).hexdigest()
    return f"prog_{digest[:12]}"


def get_program_generator() -> ProgramGenerator:
    """Get ProgramGenerator instance backed by the shared catalog and config."""
    return ProgramGenerator()


def generate_program(
    profile: UserProfile | Mapping[str, Any] | None,
    catalog: ExerciseCatalog | None = None,
) -> TrainingProgram | None:
    """Generate a program with the shared configuration."""
    return ProgramGenerator(catalog=catalog).generate(profile)
