"""Text helpers."""

from .formatting import format_string

__all__ = ["format_string"]
