"""Reusable Pydantic field annotations."""

from __future__ import annotations

from typing import Annotated

from pydantic import AfterValidator, Field, StrictStr

_RESERVED_SEGMENTS = frozenset({".", ".."})


def _check_path_segment(value: str) -> str:
    if "\x00" in value:
        raise ValueError("Path segment must not contain a null byte")
    if "/" in value or "\\" in value:
        raise ValueError(f"'{value}' must be a single path segment")
    if value in _RESERVED_SEGMENTS:
        raise ValueError(f"'{value}' is not a valid path segment")
    return value


def _check_extension(value: str) -> str:
    if value.startswith("."):
        raise ValueError(f"Extension '{value}' must not start with a dot")
    return value


# A single file or directory name, never a path
PathSegment = Annotated[StrictStr, Field(min_length=1), AfterValidator(_check_path_segment)]

FileExtension = Annotated[PathSegment, AfterValidator(_check_extension)]
