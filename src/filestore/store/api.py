"""Module-level file operations backed by the process settings."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from result import Result

from filestore.location import DirectoryCreationFailed, LocationDescriptor, PathResolver
from filestore.settings import get_settings

from .file import LocalFileStore
from .models import DecodeFailed, DeleteFailed, ReadFailed, WriteFailed


def get_default_store() -> LocalFileStore:
    return LocalFileStore(PathResolver(get_settings().to_base_directories()))


def write(data: bytes, to: LocationDescriptor) -> Result[Path, DirectoryCreationFailed | WriteFailed]:
    return get_default_store().write(data, to)


def read(location: LocationDescriptor) -> Result[bytes, ReadFailed]:
    return get_default_store().read(location)


def read_as[T](location: LocationDescriptor, decode: Callable[[bytes], T]) -> Result[T, ReadFailed | DecodeFailed]:
    return get_default_store().read_as(location, decode)


def exists(location: LocationDescriptor) -> bool:
    return get_default_store().exists(location)


def delete(location: LocationDescriptor) -> Result[bool, DeleteFailed]:
    return get_default_store().delete(location)
