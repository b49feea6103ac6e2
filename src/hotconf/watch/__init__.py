"""Live reload of configuration files."""

from .controller import WatchController
from .models import ReloadEvent, ReloadNotifications, WatchState
from .observer import WatchdogFileWatcher
from .protocol import ChangeKind, FileChange, FileChangeListener, FileSubscription, FileWatcher

__all__ = [
    "ChangeKind",
    "FileChange",
    "FileChangeListener",
    "FileSubscription",
    "FileWatcher",
    "ReloadEvent",
    "ReloadNotifications",
    "WatchController",
    "WatchState",
    "WatchdogFileWatcher",
]
