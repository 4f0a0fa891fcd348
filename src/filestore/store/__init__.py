"""Byte-level file store."""

from .api import delete, exists, get_default_store, read, read_as, write
from .file import LocalFileStore
from .models import DecodeFailed, DeleteFailed, FileStoreError, ReadFailed, WriteFailed
from .protocol import FileStore

__all__ = [
    "DecodeFailed",
    "DeleteFailed",
    "FileStore",
    "FileStoreError",
    "LocalFileStore",
    "ReadFailed",
    "WriteFailed",
    "delete",
    "exists",
    "get_default_store",
    "read",
    "read_as",
    "write",
]
