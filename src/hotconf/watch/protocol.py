"""File-change subscription protocol."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Protocol


class ChangeKind(str, Enum):
    """Kinds of change reported for a watched file."""

    WRITE = "write"
    OTHER = "other"


@dataclass(frozen=True)
class FileChange:
    path: Path
    kind: ChangeKind


class FileChangeListener(Protocol):
    """Receives change events for one subscription."""

    def on_change(self, change: FileChange) -> None: ...

    def on_error(self, error: Exception) -> None: ...


class FileSubscription(Protocol):
    def close(self, timeout: float | None = None) -> None:
        """Stop delivering events.

        Returns once no further callbacks can reach the listener, or when
        ``timeout`` elapses. Calling it again is a no-op.
        """
        ...


class FileWatcher(Protocol):
    """Protocol for subscribing to changes of a single file."""

    def subscribe(self, path: Path, listener: FileChangeListener) -> FileSubscription:
        """Start delivering changes of ``path`` to ``listener``.

        Raises:
            OSError: the file's directory cannot be watched.
        """
        ...
