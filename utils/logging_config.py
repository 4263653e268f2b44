"""
Logging configuration for the subtitle muxer.

All module loggers hang below the ``submux`` logger, which writes to stdout
and optionally to a log file. Level names are colored on a terminal.
"""

import logging
import sys
from pathlib import Path
from typing import Optional
from .constants import APP_LOGGER_NAME, DEFAULT_LOG_FORMAT, DEFAULT_LOG_DATE_FORMAT

LEVEL_COLORS = {
    'DEBUG': '\033[36m',
    'INFO': '\033[32m',
    'WARNING': '\033[33m',
    'ERROR': '\033[31m',
    'CRITICAL': '\033[35m',
}
RESET = '\033[0m'


class ColoredFormatter(logging.Formatter):
    """Formatter that wraps the level name in an ANSI color."""

    def format(self, record: logging.LogRecord) -> str:
        # Copy, so the file handler still sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        color = LEVEL_COLORS.get(record.levelname)
        if color:
            record.levelname = f"{color}{record.levelname}{RESET}"
        return super().format(record)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    use_colors: bool = True,
    logger_name: str = APP_LOGGER_NAME
) -> logging.Logger:
    """
    Configure the application logger.

    Calling it again replaces the handlers of the previous call.

    Args:
        level: Logging level (e.g., logging.DEBUG, logging.INFO)
        log_file: Optional path of a UTF-8 log file, parent directories are created
        use_colors: Color level names when stdout is a terminal
        logger_name: Name of the logger to configure

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(logger_name)
    logger.setLevel(level)
    logger.propagate = False

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    plain = logging.Formatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    if use_colors and sys.stdout.isatty():
        console_handler.setFormatter(ColoredFormatter(DEFAULT_LOG_FORMAT, datefmt=DEFAULT_LOG_DATE_FORMAT))
    else:
        console_handler.setFormatter(plain)
    logger.addHandler(console_handler)

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setFormatter(plain)
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = APP_LOGGER_NAME) -> logging.Logger:
    """Get a logger below the application logger, usually for ``__name__``."""
    if name == APP_LOGGER_NAME or name.startswith(APP_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{APP_LOGGER_NAME}.{name}")
