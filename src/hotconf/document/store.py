"""Immutable JSON documents with decode-on-read access."""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping
from datetime import datetime, timedelta
from typing import TypeVar

from pydantic import TypeAdapter
from result import Err, Ok, Result

from . import types
from .codec import decode_raw, split_members
from .literals import parse_date, parse_duration
from .models import ConfigAccessError, ConfigDecodeError, ConfigError, ConfigKeyNotFoundError

T = TypeVar("T")


class Document(Mapping[str, str]):
    """Top-level members of one JSON object, kept as undecoded text.

    Values are decoded again on every access. A document is never edited in
    place; a reload builds a new one.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Mapping[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(values or {})

    def __getitem__(self, key: str) -> str:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Document({self._values!r})"

    def section_as_text(self, key: str) -> Result[str, ConfigError]:
        if key not in self._values:
            return Err(_not_found(key, "Section"))
        return Ok(self._values[key])

    def section(self, key: str) -> Result[Document, ConfigError]:
        return self.section_as_text(key).and_then(lambda raw: split_members(raw, key=key)).map(Document)

    def decode(self, key: str, adapter: TypeAdapter[T]) -> Result[T, ConfigError]:
        if key not in self._values:
            return Err(_not_found(key, "Key"))
        return decode_raw(self._values[key], adapter, key)


def parse_document(data: bytes | str) -> Result[Document, ConfigError]:
    """Parse JSON text whose root must be an object."""
    return split_members(data).map(Document)


def decode_string(document: Document, key: str) -> Result[str, ConfigError]:
    return document.decode(key, types.STRING)


def decode_int(document: Document, key: str) -> Result[int, ConfigError]:
    return document.decode(key, types.INT)


def decode_uint(document: Document, key: str) -> Result[int, ConfigError]:
    return document.decode(key, types.UINT)


def decode_bool(document: Document, key: str) -> Result[bool, ConfigError]:
    return document.decode(key, types.BOOL)


def decode_string_list(document: Document, key: str) -> Result[list[str], ConfigError]:
    return document.decode(key, types.STRING_LIST)


def decode_time(document: Document, key: str) -> Result[datetime, ConfigError]:
    """Decode a ``D.M.YYYY`` string value."""
    return decode_string(document, key).and_then(lambda text: _parse_literal(key, text, parse_date))


def decode_duration(document: Document, key: str) -> Result[timedelta, ConfigError]:
    """Decode a duration string value such as ``"30m"``."""
    return decode_string(document, key).and_then(lambda text: _parse_literal(key, text, parse_duration))


def get_or_default(result: Result[T, ConfigError], default: T) -> T:
    return result.unwrap_or(default)


def must_get(result: Result[T, ConfigError]) -> T:
    """Return the decoded value or raise ``ConfigAccessError`` carrying the error."""
    return result.unwrap_or_raise(ConfigAccessError)


def _parse_literal(key: str, text: str, parser: Callable[[str], T]) -> Result[T, ConfigError]:
    try:
        return Ok(parser(text))
    except ValueError as exc:
        return Err(ConfigDecodeError(key=key, message=f"Cannot decode key '{key}': {exc}"))


def _not_found(key: str, kind: str) -> ConfigKeyNotFoundError:
    return ConfigKeyNotFoundError(key=key, message=f"{kind} '{key}' was not found in the config")
