"""Composition of the file store with object encoding.

The store only handles bytes. Objects that want to persist themselves pair
it with a codec; ``FileableModel`` does that for Pydantic models using JSON.
"""

from __future__ import annotations

from pathlib import Path
from typing import Protocol, Self

from pydantic import BaseModel
from result import Result

from filestore.location import DirectoryCreationFailed, LocationDescriptor
from filestore.store import DecodeFailed, DeleteFailed, FileStore, ReadFailed, WriteFailed, get_default_store


class Codec[T](Protocol):
    def encode(self, value: T) -> bytes: ...

    def decode(self, data: bytes) -> T: ...


class JsonModelCodec[M: BaseModel]:
    """Encodes Pydantic models as UTF-8 JSON."""

    def __init__(self, model_type: type[M]) -> None:
        self._model_type = model_type

    def encode(self, value: M) -> bytes:
        return value.model_dump_json().encode("utf-8")

    def decode(self, data: bytes) -> M:
        return self._model_type.model_validate_json(data)


class FileableModel(BaseModel):
    """Pydantic model that can write itself to, and read itself from, a file."""

    @classmethod
    def codec(cls) -> Codec[Self]:
        """Codec used for the file contents. Override to change the encoding."""
        return JsonModelCodec(cls)

    def write_to(
        self, location: LocationDescriptor, store: FileStore | None = None
    ) -> Result[Path, DirectoryCreationFailed | WriteFailed]:
        store = store or get_default_store()
        return store.write(self.codec().encode(self), to=location)

    @classmethod
    def read_from(
        cls, location: LocationDescriptor, store: FileStore | None = None
    ) -> Result[Self, ReadFailed | DecodeFailed]:
        store = store or get_default_store()
        return store.read_as(location, cls.codec().decode)

    @classmethod
    def delete_file(cls, location: LocationDescriptor, store: FileStore | None = None) -> Result[bool, DeleteFailed]:
        store = store or get_default_store()
        return store.delete(location)
