"""JSON helpers that keep top-level members as raw text spans."""

from __future__ import annotations

import json
import re
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError
from result import Err, Ok, Result

from .models import ConfigDecodeError, ConfigError, ConfigShapeError

T = TypeVar("T")

_WHITESPACE = re.compile(r"[ \t\n\r]*")
_DECODER = json.JSONDecoder()

_JSON_TYPE_NAMES: dict[type, str] = {
    list: "array",
    str: "string",
    int: "number",
    float: "number",
    bool: "boolean",
    type(None): "null",
}


def split_members(data: bytes | str, key: str | None = None) -> Result[dict[str, str], ConfigError]:
    """Validate ``data`` as a JSON object and return each member's raw text.

    ``key`` names the enclosing value when a nested section is being split, so
    errors can point at it.
    """
    if isinstance(data, bytes):
        try:
            text = data.decode("utf-8")
        except UnicodeDecodeError as exc:
            return Err(ConfigDecodeError(key=key, message=f"Configuration is not valid UTF-8: {exc}"))
    else:
        text = data

    try:
        root = json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        return Err(ConfigDecodeError(key=key, line=exc.lineno, column=exc.colno, message=exc.msg))
    except ValueError as exc:
        return Err(ConfigDecodeError(key=key, message=str(exc)))
    except RecursionError as exc:
        return Err(ConfigDecodeError(key=key, message=f"Configuration is nested too deeply: {exc}"))

    if not isinstance(root, dict):
        found = _JSON_TYPE_NAMES.get(type(root), type(root).__name__)
        return Err(
            ConfigShapeError(
                key=key,
                found=found,
                message=f"not a valid configuration root: expected an object, found {found}",
            )
        )

    return Ok(_scan_members(text))


def decode_raw(raw: str, adapter: TypeAdapter[T], key: str) -> Result[T, ConfigError]:
    """Strictly decode one raw JSON value with a pydantic adapter."""
    try:
        return Ok(adapter.validate_json(raw, strict=True))
    except ValidationError as exc:
        return Err(_decode_error(key, exc))


def _scan_members(text: str) -> dict[str, str]:
    # Only called on text already validated as a JSON object.
    members: dict[str, str] = {}
    pos = _skip_whitespace(text, _skip_whitespace(text, 0) + 1)
    if text[pos] == "}":
        return members

    while True:
        name, pos = _DECODER.raw_decode(text, pos)
        pos = _skip_whitespace(text, pos)
        start = _skip_whitespace(text, pos + 1)  # past ':'
        _, end = _DECODER.raw_decode(text, start)
        members[name] = text[start:end]

        pos = _skip_whitespace(text, end)
        if text[pos] == "}":
            return members
        pos = _skip_whitespace(text, pos + 1)  # past ','


def _skip_whitespace(text: str, pos: int) -> int:
    return _WHITESPACE.match(text, pos).end()


def _reject_constant(name: str) -> float:
    raise ValueError(f"{name} is not a valid JSON value")


def _decode_error(key: str, error: ValidationError) -> ConfigDecodeError:
    details = error.errors()
    field = None
    message = str(error)
    if details:
        first = details[0]
        loc = first.get("loc") or ()
        field = ".".join(str(part) for part in loc) or None
        message = first.get("msg", message)
    return ConfigDecodeError(key=key, field=field, message=f"Cannot decode key '{key}': {message}")
