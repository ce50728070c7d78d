"""Pydantic models validating logger and file-sink settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from .core.errors import ConfigurationError
from .core.levels import Level, parse_level

DEFAULT_PERMISSION = 0o644
DEFAULT_MAX_SIZE_BYTES = 10 * 1024 * 1024


class FileSinkConfig(BaseModel):
    """Target file, creation mode and rotation threshold of a file sink."""

    path: Path
    permission: int = Field(default=DEFAULT_PERMISSION, ge=0, le=0o7777)
    max_size_bytes: int = Field(default=DEFAULT_MAX_SIZE_BYTES, gt=0)

    @field_validator("path", mode="before")
    @classmethod
    def _non_empty(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            raise ValueError("path must not be empty")
        return value

    @field_validator("path")
    @classmethod
    def _absolute(cls, value: Path) -> Path:
        return value.expanduser().absolute()


class LoggerConfig(BaseModel):
    level: Level = Level.INFO
    file: Optional[FileSinkConfig] = None

    @field_validator("level", mode="before")
    @classmethod
    def _level(cls, value: Any) -> Level:
        try:
            return parse_level(value)
        except ConfigurationError as exc:
            raise ValueError(str(exc)) from exc


def build_file_config(path: Any, permission: int, max_size_bytes: int) -> FileSinkConfig:
    """Validate sink settings, mapping pydantic errors onto :class:`ConfigurationError`."""

    try:
        return FileSinkConfig(path=path, permission=permission, max_size_bytes=max_size_bytes)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid file sink settings: {exc}") from exc


def build_logger_config(**kwargs: Any) -> LoggerConfig:
    try:
        return LoggerConfig(**kwargs)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid logger settings: {exc}") from exc


__all__ = [
    "DEFAULT_PERMISSION",
    "DEFAULT_MAX_SIZE_BYTES",
    "FileSinkConfig",
    "LoggerConfig",
    "build_file_config",
    "build_logger_config",
]
