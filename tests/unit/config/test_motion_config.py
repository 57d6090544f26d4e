"""Tests for motion configuration models and loading."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from phimotion.core.accessibility import StaticMotionPreference
from phimotion.core.config import (
    MotionConfig,
    detect_format,
    load_config,
    load_motion_config,
)
from phimotion.core.stagger import Direction
from phimotion.core.timing import DurationKeyword, EasingName


class TestMotionConfigModel:
    def test_defaults(self) -> None:
        config = MotionConfig()
        assert config.animations_enabled is True
        assert config.default_duration == DurationKeyword.NORMAL
        assert config.default_easing == EasingName.STANDARD
        assert config.stagger.base_delay == 0.1
        assert config.parallax.speed == -0.5
        assert config.logging.level == "INFO"

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MotionConfig.model_validate({"animation": True})

    def test_invalid_log_level(self) -> None:
        with pytest.raises(ValidationError):
            MotionConfig.model_validate({"logging": {"level": "LOUD"}})

    def test_sequence_options_from_stagger_defaults(self) -> None:
        config = MotionConfig.model_validate(
            {"stagger": {"base_delay": 0.2, "direction": "reverse", "loop": True}}
        )
        options = config.sequence_options(6)
        assert options.total_steps == 6
        assert options.base_delay == 0.2
        assert options.direction == Direction.REVERSE
        assert options.loop is True

    def test_sequence_options_overrides(self) -> None:
        options = MotionConfig().sequence_options(3, use_fibonacci=False, base_delay=0.05)
        assert options.use_fibonacci is False
        assert options.base_delay == 0.05

    def test_sequence_options_validated(self) -> None:
        with pytest.raises(ValidationError):
            MotionConfig().sequence_options(0)

    def test_build_gate_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        config = MotionConfig(reduced_motion_env_var="TEST_CALM")
        monkeypatch.setenv("TEST_CALM", "reduce")
        assert config.build_gate().is_reduced_motion_preferred() is True

        monkeypatch.delenv("TEST_CALM")
        assert config.build_gate().is_reduced_motion_preferred() is False

    def test_build_gate_with_preference(self) -> None:
        gate = MotionConfig(animations_enabled=False).build_gate(StaticMotionPreference(False))
        assert gate.should_animate() is False


class TestDetectFormat:
    @pytest.mark.parametrize(
        ("name", "fmt"),
        [("motion.json", "json"), ("motion.yaml", "yaml"), ("MOTION.YML", "yaml")],
    )
    def test_known_extensions(self, name: str, fmt: str) -> None:
        assert detect_format(name) == fmt

    def test_unknown_extension(self) -> None:
        with pytest.raises(ValueError, match="Unsupported config format"):
            detect_format("motion.toml")


class TestLoadConfig:
    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "motion.json"
        path.write_text(json.dumps({"default_easing": "entrance"}), encoding="utf-8")
        assert load_motion_config(path).default_easing == EasingName.ENTRANCE

    def test_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "motion.yaml"
        path.write_text(
            "default_duration: slow\n"
            "stagger:\n"
            "  use_fibonacci: false\n"
            "parallax:\n"
            "  range_pixels: 55\n",
            encoding="utf-8",
        )
        config = load_motion_config(path)
        assert config.default_duration == DurationKeyword.SLOW
        assert config.stagger.use_fibonacci is False
        assert config.parallax.range_pixels == 55

    def test_empty_yaml_is_defaults(self, tmp_path: Path) -> None:
        path = tmp_path / "motion.yml"
        path.write_text("", encoding="utf-8")
        assert load_config(path) == {}
        assert load_motion_config(path) == MotionConfig()

    def test_none_path_is_defaults(self) -> None:
        assert load_motion_config(None) == MotionConfig()

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "absent.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "motion.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON"):
            load_config(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        path = tmp_path / "motion.yaml"
        path.write_text("stagger: [unclosed", encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid YAML"):
            load_config(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        path = tmp_path / "motion.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")
        with pytest.raises(ValueError, match="mapping"):
            load_config(path)

    def test_invalid_values(self, tmp_path: Path) -> None:
        path = tmp_path / "motion.json"
        path.write_text(json.dumps({"stagger": {"base_delay": -1}}), encoding="utf-8")
        with pytest.raises(ValidationError):
            load_motion_config(path)
