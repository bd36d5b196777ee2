"""Configuration management for snipkit."""

from .defaults import DefaultConfig, DeferredParams, RatingParams, get_default_config
from .loader import ConfigLoader, load_config
from .validation import ConfigValidator, ValidationError

__all__ = [
    "DefaultConfig",
    "DeferredParams",
    "RatingParams",
    "get_default_config",
    "ConfigLoader",
    "load_config",
    "ConfigValidator",
    "ValidationError",
]
