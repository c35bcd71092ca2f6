"""Construction-time configuration errors."""

from __future__ import annotations


class BuildConfigError(RuntimeError):
    """Base class for malformed build configuration."""


class PatternSyntaxError(BuildConfigError):
    """Raised when an include or exclude glob cannot be compiled."""

    def __init__(self, message: str, *, pattern: str) -> None:
        super().__init__(message)
        self.pattern = pattern


class InvalidConfigurationError(BuildConfigError):
    """Raised when a build action or plan is assembled from invalid values."""
