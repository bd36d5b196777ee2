"""
Error classification for snipkit.

Structured exception hierarchy separating malformed input data, domain
rule violations and configuration problems.
"""

from .base import SnipkitError
from .data_quality import DataQualityError, MalformedDataError
from .domain import ConfigurationError, DomainError, NegativeNumberError

__all__ = [
    "SnipkitError",
    # Data Quality Errors
    "DataQualityError",
    "MalformedDataError",
    # Domain Errors
    "DomainError",
    "NegativeNumberError",
    # Configuration
    "ConfigurationError",
]
