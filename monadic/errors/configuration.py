"""Configuration loading errors."""

from typing import Any, Optional


class ConfigurationError(ValueError):
    """Configuration file is unreadable or holds invalid values."""

    def __init__(self, message: str, source: Optional[str] = None,
                 errors: Optional[list[Any]] = None):
        super().__init__(message)
        self.source = source
        self.errors = errors or []
        self.recoverable = False
