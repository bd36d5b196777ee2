"""Configuration loader with 2-tier parameter precedence."""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..logging import get_logger
from .defaults import DefaultConfig, DeferredParams, RatingParams, get_default_config
from .validation import ConfigValidator

logger = get_logger(__name__)

SETTINGS_FILENAME = "settings.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 2-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader instance."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_settings_file(self) -> dict[str, Any]:
        """Load settings overrides from the YAML settings file, if present."""
        settings_file = self.config_dir / SETTINGS_FILENAME

        if not settings_file.exists():
            return {}

        with open(settings_file) as f:
            settings = yaml.safe_load(f)

        if settings is None:
            return {}
        if not isinstance(settings, dict):
            raise ConfigurationError(
                f"{SETTINGS_FILENAME} must contain a mapping",
                context={"path": str(settings_file)},
            )

        logger.debug("Loaded settings file", path=str(settings_file), sections=sorted(settings))
        return settings

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 2-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. Settings file overrides
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_settings_file())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def load(self, overrides: Optional[dict[str, Any]] = None) -> DefaultConfig:
        """Merge, validate and build a typed configuration."""
        config = self.merge_config(overrides)

        errors = ConfigValidator.validate_config(config)
        if errors:
            logger.error(
                "Configuration validation failed",
                errors=[f"{e.field}: {e.message}" for e in errors],
            )
            raise ConfigurationError("Invalid configuration", errors=errors)

        return DefaultConfig(
            ratings=self._build(RatingParams, config.get("ratings", {})),
            deferred=self._build(DeferredParams, config.get("deferred", {})),
        )

    @staticmethod
    def _build(params_cls: type, section: dict[str, Any]) -> Any:
        """Instantiate a parameters dataclass, ignoring unknown keys."""
        if not isinstance(section, dict):
            section = {}
        known = {f.name for f in fields(params_cls)}
        return params_cls(**{k: v for k, v in section.items() if k in known})

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


def load_config(
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None
) -> DefaultConfig:
    """Load the validated configuration in one call."""
    return ConfigLoader.create(config_dir).load(overrides)
