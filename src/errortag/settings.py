from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from errortag.common import AppInfo


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    config_files: list[Path] = Field(default_factory=lambda: [Path("errortag.yaml")])

    model_config = SettingsConfigDict(
        env_prefix="ERRORTAG_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
        extra="ignore",
    )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None

# Convenience access - pre-initialized singleton
settings = get_settings()


__all__ = [
    "AppInfo",
    "Settings",
    "get_settings",
    "settings",
]
