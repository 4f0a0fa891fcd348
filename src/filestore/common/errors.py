"""Base error model shared by path resolution and file operations."""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class FileOperationError(BaseModel):
    """A failed filesystem call, with the path it was attempted on."""

    model_config = ConfigDict(extra="forbid")

    summary: ClassVar[str] = "File operation failed"

    path: Path
    reason: str

    @property
    def message(self) -> str:
        return f"{self.summary}: {self.path} ({self.reason})"


def describe_os_error(error: OSError | ValueError) -> str:
    return getattr(error, "strerror", None) or str(error)
