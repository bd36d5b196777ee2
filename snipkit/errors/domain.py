"""
Domain rule and configuration errors.

Domain errors are deterministic: repeating the same call with the same
input fails the same way, so they are never marked recoverable.
"""

from typing import Any, Optional

from .base import SnipkitError


class DomainError(SnipkitError):
    """An input violates a rule of the operation it was passed to."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, **kwargs)
        self.recoverable = False


class NegativeNumberError(DomainError):
    """A negative number was supplied where only non-negative ones are allowed."""

    def __init__(self, message: str = "Negative number not allowed",
                 value: Optional[float] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.value = value


class ConfigurationError(SnipkitError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list[Any]] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.recoverable = False
