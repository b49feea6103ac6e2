"""Watch state and reload notification models."""

from __future__ import annotations

import queue
import threading
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from pathlib import Path


class WatchState(str, Enum):
    IDLE = "idle"
    WATCHING = "watching"


@dataclass(frozen=True)
class ReloadEvent:
    """Emitted after the configuration file was reloaded successfully."""

    path: Path
    reloaded_at: datetime


_CLOSED = object()


class ReloadNotifications:
    """Receive side of the reload notification channel.

    ``get()`` returns None and iteration stops once the watch has been
    stopped. Events published after closing are dropped.
    """

    def __init__(self) -> None:
        self._queue: queue.SimpleQueue[ReloadEvent | object] = queue.SimpleQueue()
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def get(self, timeout: float | None = None) -> ReloadEvent | None:
        """Wait for the next reload.

        Raises:
            queue.Empty: no reload arrived within ``timeout`` seconds.
        """
        item = self._queue.get(timeout=timeout)
        if item is _CLOSED:
            # Leave the marker in place for other consumers.
            self._queue.put(_CLOSED)
            return None
        return item

    def __iter__(self) -> Iterator[ReloadEvent]:
        while (event := self.get()) is not None:
            yield event

    def publish(self, event: ReloadEvent) -> bool:
        with self._lock:
            if self._closed:
                return False
            self._queue.put(event)
            return True

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSED)
