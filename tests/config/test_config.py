"""Unit tests for configuration management."""

import pytest
from pathlib import Path

from snipkit.config import ConfigLoader, ConfigValidator, get_default_config, load_config
from snipkit.errors import ConfigurationError


class TestDefaultConfig:
    """Test suite for default configuration."""

    def test_default_config_creation(self) -> None:
        config = get_default_config()
        assert config.ratings.min_rating == 4
        assert config.deferred.delay_seconds == 1.0


class TestConfigLoader:
    """Test suite for configuration loader."""

    def test_config_loader_creation(self, tmp_path: Path) -> None:
        loader = ConfigLoader.create(tmp_path)
        assert loader.config_dir == tmp_path

    def test_default_config_dir(self) -> None:
        loader = ConfigLoader.create()
        assert isinstance(loader.config_dir, Path)
        assert loader.config_dir.name == "config"

    def test_merge_config_defaults_only(self, tmp_path: Path) -> None:
        config = ConfigLoader.create(tmp_path).merge_config()
        assert config == {
            "ratings": {"min_rating": 4.0},
            "deferred": {"delay_seconds": 1.0},
        }

    def test_settings_file_overrides_defaults(self, tmp_path: Path) -> None:
        (tmp_path / "settings.yaml").write_text("deferred:\n  delay_seconds: 0.25\n")
        config = load_config(tmp_path)
        assert config.deferred.delay_seconds == 0.25
        assert config.ratings.min_rating == 4.0

    def test_overrides_beat_settings_file(self, tmp_path: Path) -> None:
        (tmp_path / "settings.yaml").write_text("ratings:\n  min_rating: 3\n")
        config = load_config(tmp_path, {"ratings": {"min_rating": 4.5}})
        assert config.ratings.min_rating == 4.5

    def test_empty_settings_file(self, tmp_path: Path) -> None:
        (tmp_path / "settings.yaml").write_text("")
        assert load_config(tmp_path) == get_default_config()

    def test_non_mapping_settings_file(self, tmp_path: Path) -> None:
        (tmp_path / "settings.yaml").write_text("- 1\n- 2\n")
        with pytest.raises(ConfigurationError):
            load_config(tmp_path)

    @pytest.mark.parametrize("body", ["ratings:\n", "ratings: 5\n", "deferred: [1]\n"])
    def test_non_mapping_section(self, tmp_path: Path, body: str) -> None:
        """A section that is not a mapping should fail validation, not crash."""
        (tmp_path / "settings.yaml").write_text(body)
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path)
        assert exc_info.value.errors[0].message == "Must be a mapping"

    @pytest.mark.parametrize("overrides", [
        {"deferred": {"delay_seconds": float("inf")}},
        {"deferred": {"delay_seconds": float("nan")}},
        {"ratings": {"min_rating": float("nan")}},
        {"ratings": {"min_rating": float("inf")}},
    ])
    def test_non_finite_values_raise(self, tmp_path: Path, overrides) -> None:
        with pytest.raises(ConfigurationError):
            load_config(tmp_path, overrides)

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        config = load_config(tmp_path, {"ratings": {"min_rating": 2, "colour": "red"}})
        assert config.ratings.min_rating == 2

    def test_invalid_values_raise(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            load_config(tmp_path, {"deferred": {"delay_seconds": -1}})
        assert [e.field for e in exc_info.value.errors] == ["delay_seconds"]


class TestConfigValidator:
    """Test suite for configuration validation."""

    def test_valid_params(self) -> None:
        assert ConfigValidator.validate_rating_params({"min_rating": 4}) == []
        assert ConfigValidator.validate_deferred_params({"delay_seconds": 0}) == []

    def test_invalid_min_rating(self) -> None:
        errors = ConfigValidator.validate_rating_params({"min_rating": -1})
        assert len(errors) == 1
        assert errors[0].field == "min_rating"
        assert "non-negative" in errors[0].message

    def test_boolean_is_not_a_number(self) -> None:
        errors = ConfigValidator.validate_deferred_params({"delay_seconds": True})
        assert len(errors) == 1

    def test_validate_config_collects_all_sections(self) -> None:
        errors = ConfigValidator.validate_config({
            "ratings": {"min_rating": "high"},
            "deferred": {"delay_seconds": "soon"},
        })
        assert {e.field for e in errors} == {"min_rating", "delay_seconds"}
