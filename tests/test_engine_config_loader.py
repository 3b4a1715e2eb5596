"""Tests for the engine configuration loader."""
import pytest
import yaml

from mesoplan.config.engine_config_loader import (
    EngineConfigLoader,
    EngineConfigLoadError,
    EngineConfigValidationError,
    ReadinessAdjustmentConfig,
    get_engine_config,
    parse_engine_config,
)
from mesoplan.models.enums import ExperienceLevel, ReadinessLevel


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "engine_config.yaml"
    path.write_text(yaml.safe_dump({"version": "2.0.0"}), encoding="utf-8")
    return path


class TestShippedConfig:
    def test_readiness_thresholds(self):
        thresholds = get_engine_config().readiness.level_thresholds
        assert thresholds[ReadinessLevel.PEAK] == 86
        assert thresholds[ReadinessLevel.GOOD] == 66
        assert thresholds[ReadinessLevel.MODERATE] == 42

    def test_feedback_rules_in_order(self):
        reasons = [rule.reason for rule in get_engine_config().feedback.rules]
        assert reasons == ["over_reached", "persistent_soreness", "under_stimulated"]

    def test_meso_lengths(self):
        assert get_engine_config().generator.meso_length == {
            ExperienceLevel.BEGINNER: 4,
            ExperienceLevel.INTERMEDIATE: 5,
            ExperienceLevel.ADVANCED: 6,
        }


class TestParsing:
    def test_empty_document_uses_defaults(self):
        config = parse_engine_config({})
        assert config.readiness.score_divisor == 12
        assert config.deload.streak_threshold == 3
        assert config.feedback.rules == ()
        assert config.generator.meso_length[ExperienceLevel.BEGINNER] == 4

    def test_thresholds_must_descend(self):
        with pytest.raises(EngineConfigValidationError):
            parse_engine_config(
                {"readiness": {"level_thresholds": {"peak": 50, "good": 60, "moderate": 40}}}
            )

    def test_adjustment_multipliers_validated(self):
        with pytest.raises(EngineConfigValidationError):
            ReadinessAdjustmentConfig(volume_multiplier=1.5)
        with pytest.raises(EngineConfigValidationError):
            ReadinessAdjustmentConfig(rest_multiplier=0.5)

    def test_deload_streak_validated(self):
        with pytest.raises(EngineConfigValidationError):
            parse_engine_config({"deload": {"weeks_to_check": 2, "streak_threshold": 3}})

    def test_meso_length_needs_every_level(self):
        with pytest.raises(EngineConfigValidationError):
            parse_engine_config({"generator": {"meso_length": {"beginner": 4}}})


class TestLoader:
    def test_load_and_reload(self, config_file):
        loader = EngineConfigLoader(config_file)
        assert loader.config.version == "2.0.0"
        assert loader.reload_count == 1

        seen = []
        loader.register_reload_callback(lambda config: seen.append(config.version))
        config_file.write_text(yaml.safe_dump({"version": "2.1.0"}), encoding="utf-8")
        loader.reload()

        assert loader.config.version == "2.1.0"
        assert loader.reload_count == 2
        assert seen == ["2.1.0"]

    def test_failing_callback_does_not_block_reload(self, config_file):
        loader = EngineConfigLoader(config_file)

        def broken(config):
            raise RuntimeError("boom")

        loader.register_reload_callback(broken)
        loader.reload()
        assert loader.reload_count == 2

    def test_missing_file(self, tmp_path):
        with pytest.raises(EngineConfigLoadError):
            EngineConfigLoader(tmp_path / "missing.yaml")

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "engine_config.yaml"
        path.write_text("readiness: [unclosed", encoding="utf-8")
        with pytest.raises(EngineConfigLoadError):
            EngineConfigLoader(path)

    def test_unknown_key_is_a_load_error(self, tmp_path):
        path = tmp_path / "engine_config.yaml"
        path.write_text(yaml.safe_dump({"deload": {"window": 4}}), encoding="utf-8")
        with pytest.raises(EngineConfigLoadError):
            EngineConfigLoader(path)
