"""
Logging configuration and utilities for snipkit.
"""
from .config import configure_logging, get_deferred_logger, get_logger, log_settlement

__all__ = ["configure_logging", "get_logger", "get_deferred_logger", "log_settlement"]
