"""hotconf - typed access to JSON configuration with live reload.

By default, hotconf's internal logging is disabled when used as a library.
Call hotconf.enable_logging() to see load and reload diagnostics.
"""

from hotconf.common import disable_library_logging, enable_library_logging
from hotconf.config import Config, JsonConfig, load, loads
from hotconf.document import (
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
    Document,
    parse_document,
)
from hotconf.watch import ReloadEvent, ReloadNotifications, WatchState

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "Config",
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
    "JsonConfig",
    "ReloadEvent",
    "ReloadNotifications",
    "WatchState",
    "enable_logging",
    "load",
    "loads",
    "parse_document",
]
