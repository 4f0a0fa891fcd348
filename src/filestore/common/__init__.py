"""Common models and types used across filestore modules."""

from .errors import FileOperationError, describe_os_error
from .fields import FileExtension, PathSegment
from .logging import (
    LoggingConfig,
    create_logger,
    disable_library_logging,
    enable_library_logging,
    get_default_log_file_path,
    setup_cli_logging,
)
from .models import AppInfo

__all__ = [
    "AppInfo",
    "FileExtension",
    "FileOperationError",
    "LoggingConfig",
    "PathSegment",
    "create_logger",
    "describe_os_error",
    "disable_library_logging",
    "enable_library_logging",
    "get_default_log_file_path",
    "setup_cli_logging",
]
