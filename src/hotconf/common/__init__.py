"""Common helpers used across hotconf modules."""

from .logging import LoggingConfig, LogLevel, create_logger, disable_library_logging, enable_library_logging

__all__ = [
    "LogLevel",
    "LoggingConfig",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
]
