"""Exception types raised by rotlog configuration calls."""

from __future__ import annotations


class RotlogError(Exception):
    """Base class for all rotlog errors."""


class ConfigurationError(RotlogError, ValueError):
    """Invalid level, size limit, settings object, or unopenable log file."""


class SinkNotAttachedError(RotlogError):
    """Raised when closing a file sink on a logger that has none."""


class SinkClosedError(RotlogError):
    """Raised when writing to a file sink that is not in the open state."""


__all__ = ["RotlogError", "ConfigurationError", "SinkNotAttachedError", "SinkClosedError"]
