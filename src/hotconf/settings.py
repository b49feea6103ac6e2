from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from hotconf.common import LoggingConfig
from hotconf.constants import ENV_PREFIX


class WatchSettings(BaseModel):
    stop_timeout: float = Field(default=0.5, gt=0)


class Settings(BaseSettings):
    watch: WatchSettings = WatchSettings()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        env_nested_delimiter="__",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reset_settings() -> None:
    """Drop the cached settings so the next access re-reads the environment."""
    global _settings
    _settings = None


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "Settings",
    "WatchSettings",
    "get_settings",
    "reset_settings",
]
