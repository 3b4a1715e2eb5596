"""
Engine Configuration Loader

Centralized, type-safe loader for the periodization engine thresholds:
readiness levels and adjustment bundles, deload streak rules, the feedback
rule table and program generator constants.

Configuration is loaded from engine_config.yaml into frozen dataclasses that
validate themselves on construction. The loader keeps the parsed config behind
a lock and supports explicit reloads with callbacks.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock
from typing import Any, Callable

import yaml

from mesoplan.models.enums import ExperienceLevel, ReadinessLevel


logger = logging.getLogger(__name__)


class EngineConfigLoadError(Exception):
    """Raised when configuration cannot be loaded or is invalid."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.details = details or {}


class EngineConfigValidationError(EngineConfigLoadError):
    """Raised when configuration fails validation."""


@dataclass(frozen=True)
class ReadinessAdjustmentConfig:
    """Session multipliers applied at one readiness level."""

    volume_multiplier: float = 1.0
    weight_multiplier: float = 1.0
    rest_multiplier: float = 1.0
    rir_delta: int = 0

    def __post_init__(self):
        for field_name, value in [
            ("volume_multiplier", self.volume_multiplier),
            ("weight_multiplier", self.weight_multiplier),
        ]:
            if not 0 < value <= 1:
                raise EngineConfigValidationError(
                    f"{field_name} must be in (0, 1], got {value}"
                )
        if self.rest_multiplier < 1:
            raise EngineConfigValidationError(
                f"rest_multiplier must be >= 1, got {self.rest_multiplier}"
            )
        if self.rir_delta < 0:
            raise EngineConfigValidationError(
                f"rir_delta must be >= 0, got {self.rir_delta}"
            )


@dataclass(frozen=True)
class ReadinessConfig:
    """Readiness scoring and level mapping."""

    score_divisor: int
    max_score: int
    default_target_rir: int
    max_rir: int
    level_thresholds: dict[ReadinessLevel, int]
    adjustments: dict[ReadinessLevel, ReadinessAdjustmentConfig]

    def __post_init__(self):
        if self.score_divisor <= 0:
            raise EngineConfigValidationError(
                f"score_divisor must be > 0, got {self.score_divisor}"
            )
        missing = [level.value for level in ReadinessLevel if level not in self.adjustments]
        if missing:
            raise EngineConfigValidationError(
                f"readiness adjustments missing levels: {missing}"
            )
        ordered = [
            self.level_thresholds.get(level)
            for level in (ReadinessLevel.PEAK, ReadinessLevel.GOOD, ReadinessLevel.MODERATE)
        ]
        if None in ordered:
            raise EngineConfigValidationError(
                "level_thresholds must define peak, good and moderate"
            )
        if not ordered[0] > ordered[1] > ordered[2] >= 0:
            raise EngineConfigValidationError(
                f"level_thresholds must be strictly descending, got {ordered}"
            )
        if not 0 <= self.default_target_rir <= self.max_rir:
            raise EngineConfigValidationError(
                f"default_target_rir ({self.default_target_rir}) must be within [0, {self.max_rir}]"
            )


@dataclass(frozen=True)
class DeloadConfig:
    """Above-MRV streak detection settings."""

    weeks_to_check: int = 4
    streak_threshold: int = 3
    urgent_streak: int = 4
    warning_message: str = "{muscles} above MRV for {weeks} consecutive weeks."
    urgent_message: str = "{muscles} above MRV for {weeks} weeks or more."

    def __post_init__(self):
        if not 1 <= self.streak_threshold <= self.weeks_to_check:
            raise EngineConfigValidationError(
                f"streak_threshold ({self.streak_threshold}) must be between 1 and weeks_to_check ({self.weeks_to_check})"
            )
        if self.urgent_streak < self.streak_threshold:
            raise EngineConfigValidationError(
                f"urgent_streak ({self.urgent_streak}) must be >= streak_threshold ({self.streak_threshold})"
            )


@dataclass(frozen=True)
class FeedbackRuleConfig:
    """One row of the feedback rule table; unset bounds always match."""

    reason: str
    delta: int
    message: str = ""
    min_pump: float | None = None
    max_pump: float | None = None
    min_soreness: float | None = None
    max_soreness: float | None = None
    min_performance: float | None = None
    max_performance: float | None = None

    def matches(self, avg_pump: float, avg_soreness: float, avg_performance: float) -> bool:
        checks = [
            (avg_pump, self.min_pump, self.max_pump),
            (avg_soreness, self.min_soreness, self.max_soreness),
            (avg_performance, self.min_performance, self.max_performance),
        ]
        for value, low, high in checks:
            if low is not None and value < low:
                return False
            if high is not None and value > high:
                return False
        return True


@dataclass(frozen=True)
class FeedbackConfig:
    """Post-week feedback adaptation settings."""

    max_delta: int = 2
    min_feedback_coverage: float = 0.5
    rules: tuple[FeedbackRuleConfig, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if self.max_delta < 0:
            raise EngineConfigValidationError(
                f"max_delta must be >= 0, got {self.max_delta}"
            )
        if not 0 <= self.min_feedback_coverage <= 1:
            raise EngineConfigValidationError(
                f"min_feedback_coverage ({self.min_feedback_coverage}) must be between 0 and 1"
            )


@dataclass(frozen=True)
class GeneratorConfig:
    """Program generator constants."""

    meso_length: dict[ExperienceLevel, int]
    priority_bonus_sets: int = 2
    two_exercise_threshold: int = 4
    compound_weekly_progression: float = 0.025
    isolation_weekly_progression: float = 0.01

    def __post_init__(self):
        missing = [level.value for level in ExperienceLevel if level not in self.meso_length]
        if missing:
            raise EngineConfigValidationError(
                f"meso_length missing experience levels: {missing}"
            )
        for level, weeks in self.meso_length.items():
            if weeks < 2:
                raise EngineConfigValidationError(
                    f"meso_length for {level.value} must be >= 2 (training + deload), got {weeks}"
                )
        if self.priority_bonus_sets < 0:
            raise EngineConfigValidationError(
                f"priority_bonus_sets must be >= 0, got {self.priority_bonus_sets}"
            )


@dataclass(frozen=True)
class EngineConfig:
    """Unified engine configuration."""

    version: str
    last_updated: str
    readiness: ReadinessConfig
    deload: DeloadConfig
    feedback: FeedbackConfig
    generator: GeneratorConfig


_DEFAULT_ADJUSTMENTS: dict[str, dict[str, float]] = {
    "peak": {"volume_multiplier": 1.0, "weight_multiplier": 1.0, "rest_multiplier": 1.0, "rir_delta": 0},
    "good": {"volume_multiplier": 1.0, "weight_multiplier": 1.0, "rest_multiplier": 1.0, "rir_delta": 0},
    "moderate": {"volume_multiplier": 0.85, "weight_multiplier": 0.95, "rest_multiplier": 1.2, "rir_delta": 1},
    "low": {"volume_multiplier": 0.70, "weight_multiplier": 0.90, "rest_multiplier": 1.3, "rir_delta": 2},
}


def parse_engine_config(data: dict[str, Any]) -> EngineConfig:
    """Parse raw YAML data into EngineConfig.

    Args:
        data: Raw YAML data as dictionary.

    Returns:
        Parsed EngineConfig.

    Raises:
        EngineConfigValidationError: If validation fails.
    """
    readiness_data = data.get("readiness", {})
    thresholds_data = readiness_data.get("level_thresholds", {"peak": 86, "good": 66, "moderate": 42})
    adjustments_data = readiness_data.get("adjustments", _DEFAULT_ADJUSTMENTS)
    readiness_config = ReadinessConfig(
        score_divisor=readiness_data.get("score_divisor", 12),
        max_score=readiness_data.get("max_score", 100),
        default_target_rir=readiness_data.get("default_target_rir", 2),
        max_rir=readiness_data.get("max_rir", 4),
        level_thresholds={ReadinessLevel(k): int(v) for k, v in thresholds_data.items()},
        adjustments={
            ReadinessLevel(k): ReadinessAdjustmentConfig(**v)
            for k, v in adjustments_data.items()
        },
    )

    deload_config = DeloadConfig(**data.get("deload", {}))

    feedback_data = data.get("feedback", {})
    feedback_config = FeedbackConfig(
        max_delta=feedback_data.get("max_delta", 2),
        min_feedback_coverage=feedback_data.get("min_feedback_coverage", 0.5),
        rules=tuple(FeedbackRuleConfig(**rule) for rule in feedback_data.get("rules", [])),
    )

    generator_data = dict(data.get("generator", {}))
    meso_data = generator_data.pop("meso_length", {"beginner": 4, "intermediate": 5, "advanced": 6})
    generator_config = GeneratorConfig(
        meso_length={ExperienceLevel(k): int(v) for k, v in meso_data.items()},
        **generator_data,
    )

    return EngineConfig(
        version=str(data.get("version", "1.0.0")),
        last_updated=str(data.get("last_updated", "")),
        readiness=readiness_config,
        deload=deload_config,
        feedback=feedback_config,
        generator=generator_config,
    )


class EngineConfigLoader:
    """Loader for the engine configuration with reload support."""

    def __init__(self, config_path: Path | None = None):
        self._lock = RLock()
        self._config: EngineConfig | None = None
        self._config_path = config_path or self._default_config_path()
        self._reload_callbacks: list[Callable[[EngineConfig], None]] = []
        self._reload_count = 0

        self._load_config()

    @staticmethod
    def _default_config_path() -> Path:
        """Get default configuration file path."""
        from mesoplan.config.settings import get_settings

        return get_settings().engine_config_path

    def _load_config(self) -> None:
        """Load configuration from YAML file."""
        try:
            with open(self._config_path, "r") as f:
                data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise EngineConfigLoadError(
                f"Configuration file not found: {self._config_path}"
            )
        except yaml.YAMLError as e:
            raise EngineConfigLoadError(
                f"Failed to parse YAML configuration: {e}",
                details={"file_path": str(self._config_path)},
            )

        try:
            self._config = parse_engine_config(data)
        except EngineConfigValidationError:
            raise
        except (TypeError, ValueError) as e:
            raise EngineConfigLoadError(
                f"Failed to parse configuration: {e}",
                details={"file_path": str(self._config_path)},
            )
        self._reload_count += 1
        logger.info(
            "Loaded engine config version=%s from %s", self._config.version, self._config_path
        )
        self._notify_callbacks()

    @property
    def config(self) -> EngineConfig:
        """Get current configuration (thread-safe)."""
        with self._lock:
            if self._config is None:
                self._load_config()
            return self._config

    def reload(self) -> None:
        """Force reload configuration from file."""
        with self._lock:
            self._load_config()

    def register_reload_callback(
        self, callback: Callable[[EngineConfig], None]
    ) -> None:
        """Register a callback to be called with the new config on reload."""
        self._reload_callbacks.append(callback)

    def _notify_callbacks(self) -> None:
        if self._config is None:
            return
        for callback in self._reload_callbacks:
            try:
                callback(self._config)
            except Exception:
                logger.exception("Engine config reload callback failed")

    @property
    def reload_count(self) -> int:
        """Get number of times configuration has been loaded."""
        return self._reload_count


_loader_instance: EngineConfigLoader | None = None
_instance_lock = RLock()


def get_engine_config_loader(config_path: Path | None = None) -> EngineConfigLoader:
    """Get or create the singleton EngineConfigLoader instance.

    Example:
        >>> loader = get_engine_config_loader()
        >>> loader.config.deload.streak_threshold
        3
    """
    global _loader_instance
    with _instance_lock:
        if _loader_instance is None:
            _loader_instance = EngineConfigLoader(config_path)
        return _loader_instance


def get_engine_config() -> EngineConfig:
    """Get current engine configuration."""
    return get_engine_config_loader().config


def reload_engine_config() -> None:
    """Force reload engine configuration from file."""
    get_engine_config_loader().reload()
