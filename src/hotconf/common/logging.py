"""Logging utilities for hotconf using Loguru.

hotconf is a library, so its logging is disabled by default. Applications
that want to see reload and watch diagnostics call ``hotconf.enable_logging()``.
"""

import sys
from typing import Literal

import loguru
from loguru import logger
from pydantic import BaseModel, ConfigDict, Field

from hotconf.constants import APP_NAME

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class LoggingConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: LogLevel = Field(default="INFO")


def disable_library_logging() -> None:
    logger.disable(APP_NAME)


def enable_library_logging(level: LogLevel | None = None) -> int:
    """Enable hotconf logs on stderr and return the loguru handler id."""
    if level is None:
        from hotconf.settings import get_settings

        level = get_settings().logging.level

    logger.enable(APP_NAME)
    logger.remove()

    handler_id = logger.add(
        sys.stderr,
        level=level,
        format=_get_text_format(),
        colorize=False,
    )

    return handler_id


def create_logger(scope: str) -> "loguru.Logger":
    return logger.bind(scope=scope)


def _get_text_format() -> str:
    return "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message} | {extra}\n{exception}"
