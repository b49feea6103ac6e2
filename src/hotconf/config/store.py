"""JSON-backed configuration handle."""

from __future__ import annotations

import threading
from datetime import datetime, timedelta
from pathlib import Path
from typing import TypeVar

from pydantic import TypeAdapter
from result import Err, Result

from hotconf.common import create_logger
from hotconf.document import (
    ConfigError,
    ConfigNotWatchableError,
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
)
from hotconf.settings import WatchSettings
from hotconf.watch import FileWatcher, ReloadNotifications, WatchController, WatchState

from .protocol import Config

T = TypeVar("T")

logger = create_logger("config")


class JsonConfig(Config):
    """Configuration handle over one JSON object.

    Readers take a snapshot of the current document under the lock and decode
    outside it; a reload replaces the whole document under the same lock.
    Handles created with a ``path`` can watch that file for changes.
    """

    def __init__(
        self,
        document: Document,
        path: Path | None = None,
        *,
        watcher: FileWatcher | None = None,
        settings: WatchSettings | None = None,
    ) -> None:
        self.path = path
        self._lock = threading.Lock()
        self._document = document
        self._controller = (
            WatchController(path, self._replace_document, watcher=watcher, settings=settings)
            if path is not None
            else None
        )

    @property
    def document(self) -> Document:
        with self._lock:
            return self._document

    @property
    def watch_state(self) -> WatchState:
        return self._controller.state if self._controller else WatchState.IDLE

    def keys(self) -> list[str]:
        return list(self.document)

    def __contains__(self, key: object) -> bool:
        return key in self.document

    def __repr__(self) -> str:
        return f"JsonConfig(path={self.path!r}, keys={self.keys()!r})"

    def watch(self) -> Result[ReloadNotifications, ConfigError]:
        """Reload the document whenever the backing file is written.

        Returns the channel that receives one event per successful reload.
        """
        if self._controller is None:
            return Err(ConfigNotWatchableError(message="Config has no backing file to watch"))
        return self._controller.start()

    def stop_watching(self) -> Result[None, ConfigError]:
        if self._controller is None:
            return Err(ConfigNotWatchableError(message="Config has no backing file to watch"))
        return self._controller.stop()

    def section(self, key: str) -> Result[JsonConfig, ConfigError]:
        return self.document.section(key).map(JsonConfig)

    def section_as_text(self, key: str) -> Result[str, ConfigError]:
        return self.document.section_as_text(key)

    def unmarshal_section(self, key: str, target: type[T]) -> Result[T, ConfigError]:
        """Decode the value at ``key`` straight into ``target``.

        ``target`` is anything pydantic can validate: a model, a dataclass,
        a TypedDict or a plain container type.
        """
        return self.document.decode(key, TypeAdapter(target))

    def decode_string(self, key: str) -> Result[str, ConfigError]:
        return decode_string(self.document, key)

    def get_string(self, key: str, default: str) -> str:
        return get_or_default(self.decode_string(key), default)

    def must_get_string(self, key: str) -> str:
        return must_get(self.decode_string(key))

    def decode_int(self, key: str) -> Result[int, ConfigError]:
        return decode_int(self.document, key)

    def get_int(self, key: str, default: int) -> int:
        return get_or_default(self.decode_int(key), default)

    def must_get_int(self, key: str) -> int:
        return must_get(self.decode_int(key))

    def decode_uint(self, key: str) -> Result[int, ConfigError]:
        return decode_uint(self.document, key)

    def get_uint(self, key: str, default: int) -> int:
        return get_or_default(self.decode_uint(key), default)

    def must_get_uint(self, key: str) -> int:
        return must_get(self.decode_uint(key))

    def decode_bool(self, key: str) -> Result[bool, ConfigError]:
        return decode_bool(self.document, key)

    def get_bool(self, key: str, default: bool) -> bool:
        return get_or_default(self.decode_bool(key), default)

    def must_get_bool(self, key: str) -> bool:
        return must_get(self.decode_bool(key))

    def decode_time(self, key: str) -> Result[datetime, ConfigError]:
        return decode_time(self.document, key)

    def get_time(self, key: str, default: datetime) -> datetime:
        return get_or_default(self.decode_time(key), default)

    def must_get_time(self, key: str) -> datetime:
        return must_get(self.decode_time(key))

    def decode_duration(self, key: str) -> Result[timedelta, ConfigError]:
        return decode_duration(self.document, key)

    def get_duration(self, key: str, default: timedelta) -> timedelta:
        return get_or_default(self.decode_duration(key), default)

    def must_get_duration(self, key: str) -> timedelta:
        return must_get(self.decode_duration(key))

    def decode_string_list(self, key: str) -> Result[list[str], ConfigError]:
        return decode_string_list(self.document, key)

    def get_string_list(self, key: str, default: list[str]) -> list[str]:
        return get_or_default(self.decode_string_list(key), default)

    def must_get_string_list(self, key: str) -> list[str]:
        return must_get(self.decode_string_list(key))

    def _replace_document(self, document: Document) -> None:
        with self._lock:
            self._document = document
        logger.debug("Config document replaced", path=str(self.path), keys=len(document))
