"""JSON document store: raw members, sections and typed decoding."""

from .models import (
    ConfigAccessError,
    ConfigAlreadyWatchedError,
    ConfigDecodeError,
    ConfigError,
    ConfigIOError,
    ConfigKeyNotFoundError,
    ConfigLifecycleError,
    ConfigNotWatchableError,
    ConfigNotWatchedError,
    ConfigShapeError,
)
from .store import (
    Document,
    decode_bool,
    decode_duration,
    decode_int,
    decode_string,
    decode_string_list,
    decode_time,
    decode_uint,
    get_or_default,
    must_get,
    parse_document,
)

__all__ = [
    "ConfigAccessError",
    "ConfigAlreadyWatchedError",
    "ConfigDecodeError",
    "ConfigError",
    "ConfigIOError",
    "ConfigKeyNotFoundError",
    "ConfigLifecycleError",
    "ConfigNotWatchableError",
    "ConfigNotWatchedError",
    "ConfigShapeError",
    "Document",
    "decode_bool",
    "decode_duration",
    "decode_int",
    "decode_string",
    "decode_string_list",
    "decode_time",
    "decode_uint",
    "get_or_default",
    "must_get",
    "parse_document",
]
