"""Configuration validation utilities."""

import math
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_finite_number(value: Any) -> bool:
    return (isinstance(value, (int, float)) and not isinstance(value, bool)
            and math.isfinite(value))


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_rating_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate rating filter parameters."""
        errors = []

        if "min_rating" in params:
            value = params["min_rating"]
            if not _is_finite_number(value) or value < 0:
                errors.append(ValidationError(
                    field="min_rating",
                    message="Must be a finite non-negative number",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_deferred_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate deferred computation parameters."""
        errors = []

        if "delay_seconds" in params:
            value = params["delay_seconds"]
            if not _is_finite_number(value) or value < 0:
                errors.append(ValidationError(
                    field="delay_seconds",
                    message="Must be a finite non-negative number",
                    value=value
                ))

        return errors

    @classmethod
    def validate_config(cls, config: dict[str, Any]) -> list[ValidationError]:
        """Validate a full merged configuration dictionary."""
        errors = []

        sections = (
            ("ratings", cls.validate_rating_params),
            ("deferred", cls.validate_deferred_params),
        )
        for name, validate in sections:
            params = config.get(name, {})
            if not isinstance(params, dict):
                errors.append(ValidationError(
                    field=name,
                    message="Must be a mapping",
                    value=params
                ))
                continue
            errors.extend(validate(params))

        return errors
