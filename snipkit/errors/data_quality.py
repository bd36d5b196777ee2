"""
Data quality error classifications for record ingestion.

These exceptions describe caller-supplied payloads that cannot be turned
into the library's record types.
"""

from typing import Optional

from .base import SnipkitError


class DataQualityError(SnipkitError):
    """Base class for input data issues."""


class MalformedDataError(DataQualityError):
    """Data exists but is in incorrect format."""

    def __init__(self, message: str, raw_data: Optional[str] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_data = raw_data
        self.expected_format = expected_format
