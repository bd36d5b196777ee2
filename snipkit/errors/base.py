"""Root of the snipkit exception hierarchy."""

from typing import Any, Dict, Optional


class SnipkitError(Exception):
    """Base class for every error raised by snipkit."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True
