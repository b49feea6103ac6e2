from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest
from loguru import logger

import hotconf
from hotconf.config import load
from hotconf.settings import Settings, WatchSettings, get_settings, reset_settings
from hotconf.watch import WatchController


@pytest.fixture(autouse=True)
def fresh_settings() -> Iterator[None]:
    reset_settings()
    yield
    reset_settings()


def test_settings_defaults() -> None:
    settings = Settings()

    assert settings.watch.stop_timeout == 0.5
    assert settings.logging.level == "INFO"


def test_settings_read_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOTCONF_WATCH__STOP_TIMEOUT", "1.5")
    monkeypatch.setenv("HOTCONF_LOGGING__LEVEL", "DEBUG")

    settings = get_settings()

    assert settings.watch.stop_timeout == 1.5
    assert settings.logging.level == "DEBUG"
    assert get_settings() is settings


def test_controller_uses_global_settings_unless_overridden(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("HOTCONF_WATCH__STOP_TIMEOUT", "2")
    path = tmp_path / "config.json"

    assert WatchController(path, lambda document: None).stop_timeout == 2
    assert WatchController(path, lambda document: None, settings=WatchSettings(stop_timeout=0.1)).stop_timeout == 0.1


def test_enable_logging_emits_library_records(tmp_path: Path) -> None:
    messages: list[str] = []
    path = tmp_path / "missing.json"

    handler_id = hotconf.enable_logging("DEBUG")
    sink_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    try:
        load(path)
    finally:
        logger.remove(sink_id)
        logger.remove(handler_id)
        hotconf.common.disable_library_logging()

    assert any("Config file read error" in message for message in messages)


def test_library_logging_is_disabled_by_default(tmp_path: Path) -> None:
    messages: list[str] = []

    sink_id = logger.add(lambda message: messages.append(str(message)), level="DEBUG")
    try:
        load(tmp_path / "missing.json")
    finally:
        logger.remove(sink_id)

    assert messages == []
