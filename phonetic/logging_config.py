"""
Logging configuration for applications using the encoders.

The library itself only creates module loggers; call setup_logging() once from
the application (or the benchmark) to see them.

Usage:
    from phonetic.logging_config import setup_logging
    setup_logging()
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from . import config

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logging_initialized = False


def setup_logging(
    log_level: Union[int, str, None] = None,
    log_file: Optional[str] = None,
    force: bool = False,
) -> logging.Logger:
    """
    Configure the ``phonetic`` logger.

    Args:
        log_level: Minimum level for console output (default PHONETIC_LOG_LEVEL)
        log_file: Path to a log file that receives DEBUG and above (optional)
        force: Replace the handlers of an earlier call instead of keeping them
    """
    global _logging_initialized

    package_logger = logging.getLogger("phonetic")
    if _logging_initialized and not force:
        return package_logger

    # Clear existing handlers to avoid duplicates
    for handler in list(package_logger.handlers):
        handler.close()
        package_logger.removeHandler(handler)

    if log_level is None:
        log_level = config.LOG_LEVEL
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)

    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(console_handler)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        package_logger.addHandler(file_handler)

    package_logger.debug("Logging initialized (level=%s, file=%s)", log_level, log_file)
    _logging_initialized = True
    return package_logger


def is_initialized() -> bool:
    return _logging_initialized


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (typically ``__name__``)."""
    return logging.getLogger(name)
