"""Configuration access protocol."""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import Protocol, Self, TypeVar

from result import Result

from hotconf.document import ConfigError

T = TypeVar("T")


class Config(Protocol):
    """Typed access to one JSON object, implemented by root and section handles alike.

    ``get_*`` return the default on any error, ``must_get_*`` raise
    ``ConfigAccessError`` and ``decode_*`` return the error for inspection.
    """

    def section(self, key: str) -> Result[Self, ConfigError]: ...

    def section_as_text(self, key: str) -> Result[str, ConfigError]: ...

    def unmarshal_section(self, key: str, target: type[T]) -> Result[T, ConfigError]: ...

    def decode_string(self, key: str) -> Result[str, ConfigError]: ...

    def get_string(self, key: str, default: str) -> str: ...

    def must_get_string(self, key: str) -> str: ...

    def decode_int(self, key: str) -> Result[int, ConfigError]: ...

    def get_int(self, key: str, default: int) -> int: ...

    def must_get_int(self, key: str) -> int: ...

    def decode_uint(self, key: str) -> Result[int, ConfigError]: ...

    def get_uint(self, key: str, default: int) -> int: ...

    def must_get_uint(self, key: str) -> int: ...

    def decode_bool(self, key: str) -> Result[bool, ConfigError]: ...

    def get_bool(self, key: str, default: bool) -> bool: ...

    def must_get_bool(self, key: str) -> bool: ...

    def decode_time(self, key: str) -> Result[datetime, ConfigError]: ...

    def get_time(self, key: str, default: datetime) -> datetime: ...

    def must_get_time(self, key: str) -> datetime: ...

    def decode_duration(self, key: str) -> Result[timedelta, ConfigError]: ...

    def get_duration(self, key: str, default: timedelta) -> timedelta: ...

    def must_get_duration(self, key: str) -> timedelta: ...

    def decode_string_list(self, key: str) -> Result[list[str], ConfigError]: ...

    def get_string_list(self, key: str, default: list[str]) -> list[str]: ...

    def must_get_string_list(self, key: str) -> list[str]: ...
