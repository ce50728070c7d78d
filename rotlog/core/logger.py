"""Leveled logger writing to stdout and an optional rotating file."""

from __future__ import annotations

import sys
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Optional, Union

from ..config import DEFAULT_MAX_SIZE_BYTES, DEFAULT_PERMISSION, LoggerConfig, build_file_config
from ..utils.diagnostics import logger as diagnostics
from .callsite import CallSiteProvider, FrameCallSiteProvider
from .errors import ConfigurationError, SinkNotAttachedError
from .formatting import format_line
from .levels import Level, LevelLike, parse_level
from .sink import FileSink

# Frames between the call-site provider and user code: provider <- _emit <- public method.
_CALLER_DEPTH = 3


class Logger:
    """Filter, format and emit log lines.

    Every accepted line goes to stdout. When a file sink is attached the line
    is also appended to it, rotating the file first if it reached its size
    limit. Emission methods never raise: file errors detach the sink and are
    reported through the diagnostics channel.

    Not thread-safe. Callers sharing one instance across threads must
    serialize access themselves.
    """

    def __init__(
        self,
        threshold: LevelLike = Level.INFO,
        *,
        callsite: Optional[CallSiteProvider] = None,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self._threshold = parse_level(threshold)
        self._callsite: CallSiteProvider = callsite if callsite is not None else FrameCallSiteProvider()
        self._clock = clock
        self._sink: Optional[FileSink] = None

    @classmethod
    def from_config(cls, config: LoggerConfig, **kwargs: Any) -> "Logger":
        log = cls(config.level, **kwargs)
        if config.file is not None:
            log.attach_file(config.file.path, config.file.permission, config.file.max_size_bytes)
        return log

    @property
    def threshold(self) -> Level:
        return self._threshold

    @threshold.setter
    def threshold(self, value: LevelLike) -> None:
        self._threshold = parse_level(value)

    @property
    def file_attached(self) -> bool:
        return self._sink is not None

    @property
    def file_path(self) -> Optional[Path]:
        return self._sink.path if self._sink is not None else None

    def attach_file(
        self,
        path: Union[str, Path],
        permission: int = DEFAULT_PERMISSION,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
    ) -> None:
        """Open ``path`` in append mode and mirror accepted lines into it.

        Args:
            path: Log file location; relative paths are made absolute.
            permission: Mode bits used when the file is created, e.g. ``0o644``.
            max_size_bytes: Size at which the file is rotated. Must be > 0.
        Raises:
            ConfigurationError: on invalid settings or if the file cannot be opened.
        """

        settings = build_file_config(path, permission, max_size_bytes)
        sink = FileSink(settings.path, settings.permission, settings.max_size_bytes, clock=self._clock)
        try:
            sink.open()
        except OSError as exc:
            raise ConfigurationError(f"cannot open log file {settings.path}: {exc}") from exc
        if self._sink is not None:
            self._release_sink()
        self._sink = sink

    def close_file(self) -> None:
        """Close and detach the file sink.

        Raises:
            SinkNotAttachedError: if no file sink is attached.
            OSError: if closing the handle fails; the sink is detached regardless.
        """

        if self._sink is None:
            raise SinkNotAttachedError("no log file attached, nothing to close")
        sink, self._sink = self._sink, None
        sink.close()

    def trace(self, message: str) -> None:
        self._emit(Level.TRACE, message)

    def debug(self, message: str) -> None:
        self._emit(Level.DEBUG, message)

    def info(self, message: str) -> None:
        self._emit(Level.INFO, message)

    def warning(self, message: str) -> None:
        self._emit(Level.WARNING, message)

    def error(self, message: str) -> None:
        self._emit(Level.ERROR, message)

    def fatal(self, message: str) -> None:
        """Emit at FATAL. The process keeps running."""

        self._emit(Level.FATAL, message)

    def log(self, level: LevelLike, message: str) -> None:
        """Emit at ``level``.

        Raises:
            ConfigurationError: if ``level`` is not a defined level. I/O problems never raise.
        """

        self._emit(parse_level(level), message)

    def _emit(self, level: Level, message: str) -> None:
        if level < self._threshold:
            return
        site = self._callsite(_CALLER_DEPTH)
        if site is None:
            return
        line = format_line(self._clock(), level, site, str(message))

        try:
            sys.stdout.write(line)
            sys.stdout.flush()
        except (OSError, ValueError) as exc:
            diagnostics.warning("Cannot write log line to stdout: {exc}", exc=exc)

        if self._sink is None:
            return
        if not self._sink.ensure_writable():
            diagnostics.warning("Log file {path} unusable after rotation check, detaching", path=str(self._sink.path))
            self._release_sink()
            return
        try:
            self._sink.write(line)
        except (OSError, ValueError) as exc:
            diagnostics.error("Write to log file {path} failed, detaching: {exc}", path=str(self._sink.path), exc=exc)
            self._release_sink()

    def _release_sink(self) -> None:
        sink, self._sink = self._sink, None
        if sink is None:
            return
        try:
            sink.close()
        except OSError as exc:
            diagnostics.warning("Error closing log file {path}: {exc}", path=str(sink.path), exc=exc)

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._sink is not None:
            self.close_file()


def create(threshold: LevelLike) -> Logger:
    """Return a stdout-only :class:`Logger` that drops messages below ``threshold``."""

    return Logger(threshold)


__all__ = ["Logger", "create"]
