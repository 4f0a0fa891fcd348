from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from filestore.common import (
    AppInfo,
    LoggingConfig,
    create_logger,
    disable_library_logging,
    get_default_log_file_path,
    setup_cli_logging,
)


@pytest.fixture
def restore_logging():
    yield
    logger.remove()
    disable_library_logging()


def test_default_log_file_lives_under_data_dir(tmp_path: Path) -> None:
    assert get_default_log_file_path(tmp_path) == tmp_path / "logs" / "filestore.log"


def test_setup_cli_logging_writes_text_log(tmp_path: Path, restore_logging: None) -> None:
    setup_cli_logging(AppInfo(environment="test"), LoggingConfig(log_level="DEBUG"), data_dir=tmp_path)

    create_logger("store").info("Writing file", path="/tmp/sample.json")

    contents = get_default_log_file_path(tmp_path).read_text()
    assert "CLI logging initialized" in contents
    assert "Writing file" in contents


def test_setup_cli_logging_honours_explicit_log_file(tmp_path: Path, restore_logging: None) -> None:
    log_file = tmp_path / "custom" / "app.log"
    config = LoggingConfig(log_level="DEBUG", log_file=str(log_file), format="json")

    setup_cli_logging(AppInfo(environment="test"), config, data_dir=tmp_path / "unused")

    assert log_file.is_file()
    assert '"CLI logging initialized"' in log_file.read_text()
    assert not (tmp_path / "unused").exists()


def test_logging_config_rejects_unknown_fields() -> None:
    with pytest.raises(ValueError):
        LoggingConfig.model_validate({"verbose": True})
