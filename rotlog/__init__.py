"""Minimal leveled logger with an optional size-rotated log file."""

from importlib.metadata import version

from .config import FileSinkConfig, LoggerConfig
from .core.callsite import CallSite, FixedCallSiteProvider, FrameCallSiteProvider
from .core.errors import ConfigurationError, RotlogError, SinkClosedError, SinkNotAttachedError
from .core.levels import Level, parse_level
from .core.logger import Logger, create
from .utils.diagnostics import disable_diagnostics

disable_diagnostics()

TRACE = Level.TRACE
DEBUG = Level.DEBUG
INFO = Level.INFO
WARNING = Level.WARNING
ERROR = Level.ERROR
FATAL = Level.FATAL

__all__ = [
    "__version__",
    "CallSite",
    "ConfigurationError",
    "FileSinkConfig",
    "FixedCallSiteProvider",
    "FrameCallSiteProvider",
    "Level",
    "Logger",
    "LoggerConfig",
    "RotlogError",
    "SinkClosedError",
    "SinkNotAttachedError",
    "create",
    "parse_level",
    "TRACE",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "FATAL",
]


def __getattr__(name: str) -> str:
    if name == "__version__":
        try:
            return version("rotlog")
        except Exception:  # pragma: no cover - fallback when pkg metadata missing
            return "0.1.0"
    raise AttributeError(name)
