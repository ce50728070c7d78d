"""Append-only log file with size-triggered rotation."""

from __future__ import annotations

import os
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import IO, Callable, Optional

from ..utils.diagnostics import logger
from .errors import SinkClosedError
from .formatting import backup_path

OPEN_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_APPEND


class SinkState(str, Enum):
    OPEN = "open"
    ROTATING = "rotating"
    CLOSED = "closed"


class FileSink:
    """Exclusively owned handle to a log file.

    Rotation is an explicit ``OPEN -> ROTATING -> OPEN`` transition. A
    failed rotation leaves the sink ``CLOSED`` and no handle is held. Writes
    are only accepted in the ``OPEN`` state.
    """

    def __init__(
        self,
        path: Path,
        permission: int,
        max_size_bytes: int,
        clock: Callable[[], datetime] = datetime.now,
    ):
        self.path = Path(path)
        self.permission = permission
        self.max_size_bytes = max_size_bytes
        self.clock = clock
        self.state = SinkState.CLOSED
        self._handle: Optional[IO[str]] = None

    @property
    def is_open(self) -> bool:
        return self.state is SinkState.OPEN and self._handle is not None

    def open(self) -> None:
        """Open (creating if needed) the file in append mode. Raises ``OSError``."""

        fd = os.open(self.path, OPEN_FLAGS, self.permission)
        try:
            self._handle = os.fdopen(fd, "a", encoding="utf-8", errors="backslashreplace", newline="")
        except Exception:
            os.close(fd)
            raise
        self.state = SinkState.OPEN
        logger.debug("Opened log file {path}", path=str(self.path))

    def close(self) -> None:
        handle, self._handle = self._handle, None
        self.state = SinkState.CLOSED
        if handle is not None:
            handle.close()

    def size(self) -> int:
        if self._handle is None:
            raise SinkClosedError(f"log file {self.path} is not open")
        return os.fstat(self._handle.fileno()).st_size

    def ensure_writable(self) -> bool:
        """Rotate the file if it reached ``max_size_bytes``.

        Returns:
            ``True`` when the sink holds an open handle afterwards.
        """

        if not self.is_open:
            return False
        try:
            current = self.size()
        except OSError as exc:
            logger.error("Cannot stat log file {path}: {exc}", path=str(self.path), exc=exc)
            self._abandon()
            return False
        if current < self.max_size_bytes:
            return True
        return self.rotate()

    def rotate(self) -> bool:
        """Rename the current file aside and reopen a fresh one at ``path``."""

        self.state = SinkState.ROTATING
        handle, self._handle = self._handle, None
        if handle is not None:
            try:
                handle.close()
            except OSError as exc:
                logger.warning("Error closing log file {path} before rotation: {exc}", path=str(self.path), exc=exc)

        target = backup_path(self.path, self.clock())
        try:
            os.rename(self.path, target)
        except OSError as exc:
            logger.error("Log rotation failed renaming {src} to {dst}: {exc}", src=str(self.path), dst=str(target), exc=exc)
            self.state = SinkState.CLOSED
            return False

        try:
            self.open()
        except OSError as exc:
            logger.error("Log rotation failed reopening {path}: {exc}", path=str(self.path), exc=exc)
            self.state = SinkState.CLOSED
            return False
        logger.debug("Rotated log file {src} to {dst}", src=str(self.path), dst=str(target))
        return True

    def write(self, line: str) -> None:
        if not self.is_open or self._handle is None:
            raise SinkClosedError(f"log file {self.path} is {self.state.value}")
        self._handle.write(line)
        self._handle.flush()

    def _abandon(self) -> None:
        try:
            self.close()
        except OSError as exc:
            logger.warning("Error closing log file {path}: {exc}", path=str(self.path), exc=exc)


__all__ = ["FileSink", "SinkState", "OPEN_FLAGS"]
