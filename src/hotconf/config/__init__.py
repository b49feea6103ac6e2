"""Public configuration API for hotconf."""

from __future__ import annotations

from .loader import load, loads
from .protocol import Config
from .store import JsonConfig

__all__ = [
    "Config",
    "JsonConfig",
    "load",
    "loads",
]
