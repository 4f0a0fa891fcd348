"""Location descriptor and path resolution models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict

from filestore.common import FileExtension, FileOperationError, PathSegment


class BaseDirectory(str, Enum):
    """Well-known per-user directories a file can be stored under."""

    DOCUMENTS = "documents"
    DESKTOP = "desktop"
    DOWNLOADS = "downloads"
    PICTURES = "pictures"
    MUSIC = "music"
    VIDEOS = "videos"
    HOME = "home"
    DATA = "data"
    CONFIG = "config"
    CACHE = "cache"
    STATE = "state"


class LocationDescriptor(BaseModel):
    """Where a file lives, relative to a base directory.

    Attributes:
        file_name: Name of the file, without extension
        file_extension: Optional extension without the leading dot (e.g. "json")
        subdirectory_name: Optional directory under the base directory, created on write
        base_directory: Base directory category resolved for the current user
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    file_name: PathSegment
    file_extension: FileExtension | None = None
    subdirectory_name: PathSegment | None = None
    base_directory: BaseDirectory

    @property
    def file_component(self) -> str:
        if self.file_extension is None:
            return self.file_name
        return f"{self.file_name}.{self.file_extension}"


class DirectoryCreationFailed(FileOperationError):
    """The directory holding a file could not be created."""

    summary = "Unable to create directory"
