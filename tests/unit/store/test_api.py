from __future__ import annotations

from pathlib import Path

import pytest
from result import is_err

import filestore
import filestore.settings as settings_module
from filestore.location import BaseDirectory, LocationDescriptor
from filestore.settings import DirectorySettings, Settings
from filestore.store import ReadFailed


@pytest.fixture
def documents_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    documents = tmp_path / "Documents"
    settings = Settings(directories=DirectorySettings(overrides={BaseDirectory.DOCUMENTS: documents}))
    monkeypatch.setattr(settings_module, "_settings", settings)
    return documents


def test_module_functions_use_configured_directories(documents_dir: Path) -> None:
    location = LocationDescriptor(file_name="sample", file_extension="json", base_directory="documents")

    path = filestore.write(b"payload", to=location).unwrap()

    assert path == documents_dir / "sample.json"
    assert filestore.exists(location) is True
    assert filestore.read(location).unwrap() == b"payload"
    assert filestore.read_as(location, bytes.decode).unwrap() == "payload"
    assert filestore.delete(location).unwrap() is True
    assert filestore.exists(location) is False


def test_module_read_reports_missing_file(documents_dir: Path) -> None:
    result = filestore.read(LocationDescriptor(file_name="absent", base_directory="documents"))

    assert is_err(result)
    error = result.unwrap_err()
    assert isinstance(error, ReadFailed)
    assert error.path == documents_dir / "absent"
