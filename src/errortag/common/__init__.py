"""Common models and types used across errortag modules."""

from .fields import CssClass, FieldName, JsonDict, JsonValue, NonEmptyString
from .logging import LoggingConfig, create_logger, disable_library_logging, enable_library_logging, setup_cli_logging
from .models import AppInfo
from .paths import get_data_directory

__all__ = [
    "AppInfo",
    "CssClass",
    "FieldName",
    "JsonDict",
    "JsonValue",
    "LoggingConfig",
    "NonEmptyString",
    "create_logger",
    "disable_library_logging",
    "enable_library_logging",
    "get_data_directory",
    "setup_cli_logging",
]
