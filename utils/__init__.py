"""
Utility modules.

This package contains shared utility functions and configurations:
- Directory listing and output naming (utils.file_operations)
- Logging configuration
- Shared constants
"""

from .logging_config import setup_logging, get_logger
from .constants import (
    FFMPEG_BINARY,
    MERGED_SUFFIX,
    DEFAULT_LOG_FORMAT,
    DEFAULT_LOG_DATE_FORMAT,
    APP_LOGGER_NAME,
    APP_NAME,
    APP_VERSION,
    APP_DESCRIPTION,
)

__all__ = [
    'setup_logging',
    'get_logger',
    'FFMPEG_BINARY',
    'MERGED_SUFFIX',
    'DEFAULT_LOG_FORMAT',
    'DEFAULT_LOG_DATE_FORMAT',
    'APP_LOGGER_NAME',
    'APP_NAME',
    'APP_VERSION',
    'APP_DESCRIPTION',
]
