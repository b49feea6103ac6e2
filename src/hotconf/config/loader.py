"""Build configuration handles from JSON text or files."""

from __future__ import annotations

from pathlib import Path

from result import Err, Result

from hotconf.common import create_logger
from hotconf.document import ConfigError, ConfigIOError, parse_document
from hotconf.settings import WatchSettings
from hotconf.watch import FileWatcher

from .store import JsonConfig

logger = create_logger("config")


def loads(data: str | bytes) -> Result[JsonConfig, ConfigError]:
    """Parse JSON text into a handle that has no backing file."""
    return parse_document(data).map(JsonConfig)


def load(
    path: Path | str,
    *,
    watcher: FileWatcher | None = None,
    settings: WatchSettings | None = None,
) -> Result[JsonConfig, ConfigError]:
    """Read and parse a JSON file; the handle can later watch it for changes."""
    path = Path(path)
    logger.debug("Loading config file", path=str(path))

    try:
        data = path.read_bytes()
    except OSError as exc:
        logger.error("Config file read error", path=str(path), error=str(exc))
        return Err(ConfigIOError(path=path, message=f"Cannot read config file: {exc}"))

    return (
        parse_document(data)
        .map(lambda document: JsonConfig(document, path, watcher=watcher, settings=settings))
        .inspect_err(lambda error: logger.error("Config file parse error", path=str(path), error=error.message))
    )
