"""Local filesystem FileStore implementation."""

from __future__ import annotations

import os
from collections.abc import Callable
from pathlib import Path

from result import Err, Ok, Result, is_err

from filestore.common import create_logger, describe_os_error
from filestore.location import DirectoryCreationFailed, LocationDescriptor, PathResolver

from .models import DecodeFailed, DeleteFailed, ReadFailed, WriteFailed

logger = create_logger("store")


class LocalFileStore:
    """File-based implementation of FileStore protocol.

    Every call resolves its path independently; the store keeps no state
    besides its resolver. Writes overwrite the target in place and are not
    atomic. Only ``write`` creates directories, lookups leave the disk as is.
    """

    def __init__(self, resolver: PathResolver) -> None:
        self._resolver = resolver

    def write(self, data: bytes, to: LocationDescriptor) -> Result[Path, DirectoryCreationFailed | WriteFailed]:
        resolved = self._resolver.resolve(to)
        if is_err(resolved):
            return resolved

        path = resolved.unwrap()
        logger.debug("Writing file", path=str(path), size=len(data))
        try:
            path.write_bytes(data)
        except (OSError, ValueError) as e:
            logger.error("File write failed", path=str(path), error=str(e))
            return Err(WriteFailed(path=path, reason=describe_os_error(e)))

        return Ok(path)

    def read(self, location: LocationDescriptor) -> Result[bytes, ReadFailed]:
        path = self._resolver.locate(location)
        logger.debug("Reading file", path=str(path))
        try:
            return Ok(path.read_bytes())
        except FileNotFoundError as e:
            logger.warning("File not found", path=str(path))
            return Err(ReadFailed(path=path, reason=describe_os_error(e)))
        except (OSError, ValueError) as e:
            logger.error("File read failed", path=str(path), error=str(e))
            return Err(ReadFailed(path=path, reason=describe_os_error(e)))

    def read_as[T](
        self, location: LocationDescriptor, decode: Callable[[bytes], T]
    ) -> Result[T, ReadFailed | DecodeFailed]:
        data = self.read(location)
        if is_err(data):
            return data

        try:
            return Ok(decode(data.unwrap()))
        except (TypeError, ValueError) as e:
            path = self._resolver.locate(location)
            logger.error("File decode failed", path=str(path), error=str(e))
            return Err(DecodeFailed(path=path, reason=str(e)))

    def exists(self, location: LocationDescriptor) -> bool:
        """Whether any entry, including a dangling symlink, is at the location."""
        return os.path.lexists(self._resolver.locate(location))

    def delete(self, location: LocationDescriptor) -> Result[bool, DeleteFailed]:
        path = self._resolver.locate(location)
        try:
            path.lstat()
        except (FileNotFoundError, NotADirectoryError):
            logger.debug("Nothing to delete", path=str(path))
            return Ok(False)
        except (OSError, ValueError) as e:
            logger.error("File delete failed", path=str(path), error=str(e))
            return Err(DeleteFailed(path=path, reason=describe_os_error(e)))

        try:
            path.unlink()
        except OSError as e:
            logger.error("File delete failed", path=str(path), error=str(e))
            return Err(DeleteFailed(path=path, reason=describe_os_error(e)))

        logger.debug("File deleted", path=str(path))
        return Ok(True)
