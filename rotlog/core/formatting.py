"""Line formatting and backup-file naming."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from .callsite import CallSite
from .levels import Level, level_name

LINE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"
BACKUP_TIME_FORMAT = "%Y%m%d%H%M%S"


def format_line(when: datetime, level: Level, site: CallSite, message: str) -> str:
    """Render ``[YYYY-MM-DD HH:MM:SS LEVEL] file.py:N: message`` with a trailing newline."""

    stamp = when.strftime(LINE_TIME_FORMAT)
    return f"[{stamp} {level_name(level)}] {site.filename}:{site.lineno}: {message}\n"


def backup_name(filename: str, when: datetime) -> str:
    """Insert ``_<YYYYMMDDHHMMSS>`` before the extension of ``filename``.

    The name is split on its last dot. A name without a dot keeps no
    extension and gets the timestamp appended.
    """

    stamp = when.strftime(BACKUP_TIME_FORMAT)
    index = filename.rfind(".")
    if index < 0:
        return f"{filename}_{stamp}"
    return f"{filename[:index]}_{stamp}{filename[index:]}"


def backup_path(path: Path, when: datetime) -> Path:
    return path.with_name(backup_name(path.name, when))


__all__ = ["LINE_TIME_FORMAT", "BACKUP_TIME_FORMAT", "format_line", "backup_name", "backup_path"]
