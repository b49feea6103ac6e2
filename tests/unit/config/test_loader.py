from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err, is_ok

from hotconf.config import load
from hotconf.document import ConfigDecodeError, ConfigIOError, ConfigShapeError
from hotconf.watch import WatchState


def write_json(path: Path, content: str) -> None:
    path.write_text(content, encoding="utf-8")


def test_load_reads_file_and_remembers_path(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    write_json(config_file, '{"name": "qwerty", "id": 1}')

    result = load(config_file)

    assert is_ok(result)
    config = result.unwrap()
    assert config.path == config_file
    assert config.get_string("name", "") == "qwerty"
    assert config.watch_state is WatchState.IDLE


def test_load_accepts_string_paths(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    write_json(config_file, '{"id": 1}')

    assert load(str(config_file)).unwrap().get_int("id", 0) == 1


def test_load_returns_io_error_for_missing_file(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"

    result = load(missing)

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ConfigIOError)
    assert error.path == missing


def test_load_returns_io_error_when_read_fails(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "config.json"
    write_json(config_file, "{}")

    def fake_read_bytes(self: Path) -> bytes:
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "read_bytes", fake_read_bytes, raising=False)

    error = load(config_file).unwrap_err()

    assert isinstance(error, ConfigIOError)
    assert "denied" in error.message


def test_load_returns_decode_error_for_invalid_json(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    write_json(config_file, "{\n  qwe: 1\n}")

    error = load(config_file).unwrap_err()

    assert isinstance(error, ConfigDecodeError)
    assert error.line == 2


def test_load_returns_shape_error_for_array_root(tmp_path: Path) -> None:
    config_file = tmp_path / "config.json"
    write_json(config_file, "[]")

    assert isinstance(load(config_file).unwrap_err(), ConfigShapeError)
