"""Pydantic models for configuration errors."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ConfigError(BaseModel):
    """Base configuration error."""

    model_config = ConfigDict(extra="forbid")

    message: str


class ConfigKeyNotFoundError(ConfigError):
    """Key is absent from the document."""

    key: str


class ConfigDecodeError(ConfigError):
    """Malformed JSON or a value that does not decode into the requested type.

    ``key`` is None when the whole document failed to parse. ``field`` is the
    dotted path inside the value when a composite decode failed. A JSON ``null``
    is a type mismatch for every accessor type rather than a zero value.
    """

    key: str | None = None
    field: str | None = None
    line: int | None = None
    column: int | None = None


class ConfigShapeError(ConfigError):
    """Well-formed JSON whose root is not an object."""

    key: str | None = None
    found: str


class ConfigIOError(ConfigError):
    """Configuration file could not be read or watched."""

    path: Path


class ConfigLifecycleError(ConfigError):
    """Watch operation called in the wrong state."""

    path: Path | None = None


class ConfigAlreadyWatchedError(ConfigLifecycleError):
    """``watch()`` called while a watch is already active."""


class ConfigNotWatchedError(ConfigLifecycleError):
    """``stop_watching()`` called while no watch is active."""


class ConfigNotWatchableError(ConfigLifecycleError):
    """``watch()`` called on a handle that has no backing file."""


class ConfigAccessError(Exception):
    """Raised by the ``must_get_*`` accessors; ``error`` holds the original error model."""

    def __init__(self, error: ConfigError) -> None:
        super().__init__(error.message)
        self.error = error
