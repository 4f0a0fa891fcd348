"""FileStore protocol."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Protocol

from result import Result

from filestore.location import DirectoryCreationFailed, LocationDescriptor

from .models import DecodeFailed, DeleteFailed, ReadFailed, WriteFailed


class FileStore(Protocol):
    """Protocol for byte-level file operations addressed by location descriptors."""

    def write(self, data: bytes, to: LocationDescriptor) -> Result[Path, DirectoryCreationFailed | WriteFailed]: ...

    def read(self, location: LocationDescriptor) -> Result[bytes, ReadFailed]: ...

    def read_as[T](
        self, location: LocationDescriptor, decode: Callable[[bytes], T]
    ) -> Result[T, ReadFailed | DecodeFailed]: ...

    def exists(self, location: LocationDescriptor) -> bool: ...

    def delete(self, location: LocationDescriptor) -> Result[bool, DeleteFailed]: ...
