"""Side channel for rotlog's own runtime errors, built on top of :mod:`loguru`."""

from __future__ import annotations

import sys
from typing import Any, Optional

from loguru import logger


def setup_diagnostics(level: str = "WARNING", sink: Optional[Any] = None) -> int:
    """Configure where rotlog reports degraded sinks and rotations.

    rotlog starts with its diagnostics disabled; calling this enables them.
    They go to stderr by default so they never interleave with the
    log lines rotlog writes to stdout.

    Args:
        level: Minimum diagnostics level (string understood by loguru).
        sink: Any loguru sink. Defaults to ``sys.stderr``.
    Returns:
        The loguru handler id of the new sink.
    """

    logger.remove()
    logger.enable("rotlog")
    return logger.add(sink if sink is not None else sys.stderr, level=level)


def disable_diagnostics() -> None:
    logger.disable("rotlog")


def enable_diagnostics() -> None:
    logger.enable("rotlog")


__all__ = ["setup_diagnostics", "disable_diagnostics", "enable_diagnostics", "logger"]
