"""Severity levels and their printable names."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

from .errors import ConfigurationError


class Level(IntEnum):
    """Ordered log severities. Comparison follows the integer value."""

    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARNING = 3
    ERROR = 4
    FATAL = 5

    @property
    def label(self) -> str:
        return self.name


LevelLike = Union[Level, int, str]


def level_name(level: Level) -> str:
    return Level(level).label


def parse_level(value: LevelLike) -> Level:
    """Coerce ``value`` into a :class:`Level`.

    Args:
        value: A ``Level``, an integer in ``TRACE..FATAL`` or a level name
            (case-insensitive).
    Returns:
        The matching level.
    Raises:
        ConfigurationError: if ``value`` does not name a defined level.
    """

    if isinstance(value, Level):
        return value
    if isinstance(value, bool):
        raise ConfigurationError(f"invalid log level: {value!r}")
    if isinstance(value, int):
        if Level.TRACE <= value <= Level.FATAL:
            return Level(value)
        raise ConfigurationError(
            f"log level out of range: {value}, required {int(Level.TRACE)} - {int(Level.FATAL)}"
        )
    if isinstance(value, str):
        try:
            return Level[value.strip().upper()]
        except KeyError:
            raise ConfigurationError(f"unknown log level name: {value!r}") from None
    raise ConfigurationError(f"invalid log level: {value!r}")


__all__ = ["Level", "LevelLike", "level_name", "parse_level"]
