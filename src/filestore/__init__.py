"""filestore - Read, write and delete files addressed by location descriptors.

By default, filestore's internal logging is disabled when used as a library.
Library users can enable logging by calling filestore.enable_logging().
"""

from filestore.common import disable_library_logging, enable_library_logging
from filestore.location import BaseDirectories, BaseDirectory, DirectoryCreationFailed, LocationDescriptor, PathResolver
from filestore.serialization import Codec, FileableModel, JsonModelCodec
from filestore.store import (
    DecodeFailed,
    DeleteFailed,
    FileStore,
    FileStoreError,
    LocalFileStore,
    ReadFailed,
    WriteFailed,
    delete,
    exists,
    read,
    read_as,
    write,
)

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "BaseDirectories",
    "BaseDirectory",
    "Codec",
    "DecodeFailed",
    "DeleteFailed",
    "DirectoryCreationFailed",
    "FileStore",
    "FileStoreError",
    "FileableModel",
    "JsonModelCodec",
    "LocalFileStore",
    "LocationDescriptor",
    "PathResolver",
    "ReadFailed",
    "WriteFailed",
    "delete",
    "enable_logging",
    "exists",
    "read",
    "read_as",
    "write",
]
