"""FileStore error models."""

from __future__ import annotations

from filestore.common import FileOperationError
from filestore.location import DirectoryCreationFailed


class WriteFailed(FileOperationError):
    """Error writing a file."""

    summary = "Unable to write file"


class ReadFailed(FileOperationError):
    """Error reading a file."""

    summary = "Unable to read file"


class DeleteFailed(FileOperationError):
    """Error removing an existing file."""

    summary = "Unable to delete file"


class DecodeFailed(FileOperationError):
    """File contents rejected by the decoder."""

    summary = "Unable to decode file"


type FileStoreError = DirectoryCreationFailed | WriteFailed | ReadFailed | DeleteFailed | DecodeFailed
