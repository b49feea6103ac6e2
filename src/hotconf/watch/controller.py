"""Reload a document when its backing file changes."""

from __future__ import annotations

import threading
from collections.abc import Callable
from datetime import UTC, datetime
from pathlib import Path

from result import Err, Ok, Result, is_err

from hotconf.common import create_logger
from hotconf.document import (
    ConfigAlreadyWatchedError,
    ConfigError,
    ConfigIOError,
    ConfigNotWatchedError,
    Document,
    parse_document,
)
from hotconf.settings import WatchSettings, get_settings

from .models import ReloadEvent, ReloadNotifications, WatchState
from .observer import WatchdogFileWatcher
from .protocol import ChangeKind, FileChange, FileSubscription, FileWatcher

logger = create_logger("watch")


class WatchController:
    """Start/stop state machine around one file subscription.

    ``on_reload`` receives every successfully parsed document; it is expected
    to swap it in under the owner's lock.
    """

    def __init__(
        self,
        path: Path,
        on_reload: Callable[[Document], None],
        *,
        watcher: FileWatcher | None = None,
        settings: WatchSettings | None = None,
    ) -> None:
        self.path = path
        self._on_reload = on_reload
        self._watcher = watcher or WatchdogFileWatcher()
        self._settings = settings
        self._lock = threading.Lock()
        self._state = WatchState.IDLE
        self._subscription: FileSubscription | None = None
        self._listener: _ReloadListener | None = None
        self._notifications: ReloadNotifications | None = None

    @property
    def state(self) -> WatchState:
        return self._state

    @property
    def stop_timeout(self) -> float:
        settings = self._settings or get_settings().watch
        return settings.stop_timeout

    def start(self) -> Result[ReloadNotifications, ConfigError]:
        with self._lock:
            if self._state is WatchState.WATCHING:
                return Err(
                    ConfigAlreadyWatchedError(
                        path=self.path,
                        message=f"Config '{self.path}' is already being watched",
                    )
                )

            notifications = ReloadNotifications()
            listener = _ReloadListener(self.path, self.reload, notifications)
            try:
                subscription = self._watcher.subscribe(self.path, listener)
            except OSError as exc:
                logger.error("Cannot watch config file", path=str(self.path), error=str(exc))
                return Err(ConfigIOError(path=self.path, message=f"Cannot watch config file: {exc}"))

            self._subscription = subscription
            self._listener = listener
            self._notifications = notifications
            self._state = WatchState.WATCHING

        logger.info("Watching config file", path=str(self.path))
        return Ok(notifications)

    def stop(self) -> Result[None, ConfigError]:
        with self._lock:
            if self._state is WatchState.IDLE:
                return Err(
                    ConfigNotWatchedError(
                        path=self.path,
                        message=f"Config '{self.path}' is not being watched",
                    )
                )

            timeout = self.stop_timeout
            self._subscription.close(timeout)
            if not self._listener.deactivate(timeout):
                logger.warning("Reload still in flight while stopping", path=str(self.path), timeout=timeout)
            self._notifications.close()

            self._subscription = None
            self._listener = None
            self._notifications = None
            self._state = WatchState.IDLE

        logger.info("Stopped watching config file", path=str(self.path))
        return Ok(None)

    def reload(self) -> bool:
        """Re-read and parse the file, handing the new document to ``on_reload``.

        Failures are logged and leave the current document in place. This runs
        on the watcher's thread, so nothing raised while parsing may escape.
        """
        try:
            data = self.path.read_bytes()
        except OSError as exc:
            logger.warning("Error reading config file, keeping previous version", path=str(self.path), error=str(exc))
            return False

        try:
            result = parse_document(data)
        except Exception:
            logger.exception("Unexpected error parsing config file, keeping previous version", path=str(self.path))
            return False

        if is_err(result):
            error = result.unwrap_err()
            logger.warning(
                "Error parsing config file, keeping previous version",
                path=str(self.path),
                line=getattr(error, "line", None),
                error=error.message,
            )
            return False

        self._on_reload(result.unwrap())
        logger.info("Config file reloaded", path=str(self.path))
        return True


class _ReloadListener:
    """Handles change events for one watch period."""

    def __init__(self, path: Path, reload: Callable[[], bool], notifications: ReloadNotifications) -> None:
        self._path = path
        self._reload = reload
        self._notifications = notifications
        self._lock = threading.Lock()
        self._active = True

    def on_change(self, change: FileChange) -> None:
        if change.kind is not ChangeKind.WRITE:
            return

        with self._lock:
            if not self._active:
                return
            if self._reload():
                self._notifications.publish(ReloadEvent(path=self._path, reloaded_at=datetime.now(UTC)))

    def on_error(self, error: Exception) -> None:
        logger.warning("File watch error", path=str(self._path), error=str(error))

    def deactivate(self, timeout: float) -> bool:
        """Stop handling events; waits for an in-flight reload to finish.

        Returns False when the in-flight reload outlived ``timeout``.
        """
        acquired = self._lock.acquire(timeout=timeout)
        self._active = False
        if acquired:
            self._lock.release()
        return acquired
