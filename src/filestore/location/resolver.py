"""Resolution of location descriptors to filesystem paths."""

from __future__ import annotations

from pathlib import Path

from result import Err, Ok, Result

from filestore.common import create_logger, describe_os_error

from .directories import BaseDirectories
from .models import DirectoryCreationFailed, LocationDescriptor

logger = create_logger("location")


class PathResolver:
    """Turns location descriptors into absolute file paths."""

    def __init__(self, directories: BaseDirectories) -> None:
        self._directories = directories

    @property
    def directories(self) -> BaseDirectories:
        return self._directories

    def resolve(self, descriptor: LocationDescriptor) -> Result[Path, DirectoryCreationFailed]:
        """Resolve the file path, creating its directory if missing.

        Returns:
            The absolute file path. Its parent directory exists on success.
        """
        directory = self._directory_for(descriptor)
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except (OSError, ValueError) as e:
            logger.error("Directory creation failed", path=str(directory), error=str(e))
            return Err(DirectoryCreationFailed(path=directory, reason=describe_os_error(e)))

        return Ok(directory / descriptor.file_component)

    def locate(self, descriptor: LocationDescriptor) -> Path:
        """Compute the file path without touching the filesystem."""
        return self._directory_for(descriptor) / descriptor.file_component

    def _directory_for(self, descriptor: LocationDescriptor) -> Path:
        directory = self._directories.lookup(descriptor.base_directory)
        if descriptor.subdirectory_name is not None:
            directory = directory / descriptor.subdirectory_name
        return directory
