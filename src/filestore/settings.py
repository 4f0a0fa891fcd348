from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel
from pydantic_settings import BaseSettings, SettingsConfigDict

from filestore.common import AppInfo, LoggingConfig
from filestore.constants import APP_NAME
from filestore.location import BaseDirectories, BaseDirectory


class DirectorySettings(BaseModel):
    app_name: str = APP_NAME
    app_author: str | None = None
    overrides: dict[BaseDirectory, Path] = {}


class Settings(BaseSettings):
    app: AppInfo = AppInfo()
    directories: DirectorySettings = DirectorySettings()
    logging: LoggingConfig = LoggingConfig()

    model_config = SettingsConfigDict(
        env_prefix="FILESTORE_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        nested_model_default_partial_update=True,
    )

    def to_base_directories(self) -> BaseDirectories:
        return BaseDirectories(
            app_name=self.directories.app_name,
            app_author=self.directories.app_author,
            overrides=dict(self.directories.overrides),
        )


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


# Private singleton instance
_settings: Settings | None = None


__all__ = [
    "AppInfo",
    "DirectorySettings",
    "Settings",
    "get_settings",
]
