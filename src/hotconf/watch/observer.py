"""watchdog-backed file watcher."""

from __future__ import annotations

import os
import threading
from pathlib import Path

from watchdog.events import (
    EVENT_TYPE_CREATED,
    EVENT_TYPE_DELETED,
    EVENT_TYPE_MODIFIED,
    EVENT_TYPE_MOVED,
    FileSystemEvent,
    FileSystemEventHandler,
)
from watchdog.observers import Observer

from hotconf.common import create_logger

from .protocol import ChangeKind, FileChange, FileChangeListener

logger = create_logger("watch")


class WatchdogFileWatcher:
    """Watch a file by observing its parent directory with watchdog."""

    def subscribe(self, path: Path, listener: FileChangeListener) -> _WatchdogSubscription:
        path = path.absolute()
        observer = Observer()
        observer.daemon = True
        observer.schedule(_FileEventHandler(path, listener), str(path.parent), recursive=False)

        try:
            observer.start()
        except OSError:
            observer.stop()
            raise

        logger.debug("Observer started", path=str(path))
        return _WatchdogSubscription(observer, path)


class _WatchdogSubscription:
    def __init__(self, observer: Observer, path: Path) -> None:
        self._observer = observer
        self._path = path
        self._lock = threading.Lock()
        self._closed = False

    def close(self, timeout: float | None = None) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True

        self._observer.stop()
        # Events are dispatched on the observer thread; it cannot join itself.
        if threading.current_thread() is not self._observer:
            self._observer.join(timeout)

        if self._observer.is_alive():
            logger.warning("Observer did not stop in time", path=str(self._path), timeout=timeout)
        else:
            logger.debug("Observer stopped", path=str(self._path))


class _FileEventHandler(FileSystemEventHandler):
    def __init__(self, path: Path, listener: FileChangeListener) -> None:
        super().__init__()
        self._path = path
        self._listener = listener

    def on_any_event(self, event: FileSystemEvent) -> None:
        src = Path(os.fsdecode(event.src_path))

        if event.is_directory:
            if event.event_type in (EVENT_TYPE_DELETED, EVENT_TYPE_MOVED) and src == self._path.parent:
                self._listener.on_error(FileNotFoundError(f"Watched directory {src} is gone"))
            return

        kind = self._classify(event, src)
        if kind is not None:
            self._listener.on_change(FileChange(path=self._path, kind=kind))

    def _classify(self, event: FileSystemEvent, src: Path) -> ChangeKind | None:
        if event.event_type == EVENT_TYPE_MOVED:
            dest = Path(os.fsdecode(event.dest_path))
            if dest == self._path:
                return ChangeKind.WRITE
            return ChangeKind.OTHER if src == self._path else None

        if src != self._path:
            return None
        if event.event_type in (EVENT_TYPE_MODIFIED, EVENT_TYPE_CREATED):
            return ChangeKind.WRITE
        return ChangeKind.OTHER
