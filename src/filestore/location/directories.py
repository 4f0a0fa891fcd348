"""Lookup of base directory categories for the current user."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

import platformdirs

from filestore.constants import APP_NAME

from .models import BaseDirectory

_SHARED_LOOKUPS: dict[BaseDirectory, Callable[[], Path]] = {
    BaseDirectory.DOCUMENTS: platformdirs.user_documents_path,
    BaseDirectory.DESKTOP: platformdirs.user_desktop_path,
    BaseDirectory.DOWNLOADS: platformdirs.user_downloads_path,
    BaseDirectory.PICTURES: platformdirs.user_pictures_path,
    BaseDirectory.MUSIC: platformdirs.user_music_path,
    BaseDirectory.VIDEOS: platformdirs.user_videos_path,
    BaseDirectory.HOME: Path.home,
}

_APP_LOOKUPS: dict[BaseDirectory, Callable[..., Path]] = {
    BaseDirectory.DATA: platformdirs.user_data_path,
    BaseDirectory.CONFIG: platformdirs.user_config_path,
    BaseDirectory.CACHE: platformdirs.user_cache_path,
    BaseDirectory.STATE: platformdirs.user_state_path,
}


@dataclass(frozen=True)
class BaseDirectories:
    """Maps base directory categories to absolute paths.

    Shared user folders (documents, desktop, ...) resolve to the platform
    location as is. Application folders (data, config, cache, state) are
    namespaced by ``app_name``, e.g. ``~/.local/share/{app_name}`` on Linux.

    Attributes:
        app_name: Name used to namespace application folders
        app_author: Vendor folder used on Windows, if any
        overrides: Fixed paths that replace the platform lookup per category
    """

    app_name: str = APP_NAME
    app_author: str | None = None
    overrides: Mapping[BaseDirectory, Path] = field(default_factory=dict)

    def lookup(self, category: BaseDirectory) -> Path:
        override = self.overrides.get(category)
        if override is not None:
            base = Path(override)
        elif category in _APP_LOOKUPS:
            base = _APP_LOOKUPS[category](self.app_name, self.app_author)
        else:
            base = _SHARED_LOOKUPS[category]()
        return base.expanduser().absolute()

    def lookup_all(self) -> dict[BaseDirectory, Path]:
        return {category: self.lookup(category) for category in BaseDirectory}
