"""Default configuration parameters for snipkit utilities."""

from dataclasses import dataclass


@dataclass(frozen=True)
class RatingParams:
    """Rating filter parameters."""
    min_rating: float = 4.0          # Inclusive lower bound kept by the filter


@dataclass(frozen=True)
class DeferredParams:
    """Deferred computation parameters."""
    delay_seconds: float = 1.0       # Timer delay before the future settles


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    ratings: RatingParams
    deferred: DeferredParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        ratings=RatingParams(),
        deferred=DeferredParams(),
    )
