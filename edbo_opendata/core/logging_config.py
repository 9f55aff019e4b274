"""
Logging Configuration Module.

This module provides opt-in logging configuration for applications using the
edbo-opendata client. The library itself only emits records through module
loggers; nothing is configured until `setup_logging()` is called.

Features:
- Configurable log levels per module
- Console and file logging
- Simple, detailed and JSON-like formats
- Request/retry logging for registry calls
"""

import logging
from pathlib import Path
from typing import Optional

from edbo_opendata.core.config import settings

LOG_FILE_NAME = "edbo_opendata.log"

# Define log formats
SIMPLE_FORMAT = "%(levelname)s - %(name)s - %(message)s"

DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(funcName)s() - %(message)s"

JSON_FORMAT = (
    '{"timestamp": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", '
    '"module": "%(filename)s", "function": "%(funcName)s", "line": %(lineno)d, '
    '"message": "%(message)s"}'
)


# Module-specific log levels
MODULE_LOG_LEVELS = {
    "edbo_opendata": "DEBUG",
    "edbo_opendata.client": "DEBUG",
    "edbo_opendata.core": "INFO",
    # Third-party libraries (reduce noise)
    "httpx": "WARNING",
    "httpcore": "WARNING",
    "asyncio": "WARNING",
}


def _format_for(name: str) -> str:
    if name == "json":
        return JSON_FORMAT
    if name == "simple":
        return SIMPLE_FORMAT
    return DETAILED_FORMAT


def setup_logging(
    log_level: Optional[str] = None,
    log_format: Optional[str] = None,
    enable_file: Optional[bool] = None,
    log_file_dir: Optional[str] = None,
) -> None:
    """
    Configure logging for an application using the client.

    Args:
        log_level: Override the configured console level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Override the configured format (simple, detailed, json)
        enable_file: Whether to also log to a file; defaults to ``EDBO_ENABLE_FILE_LOGGING``
        log_file_dir: Directory for the log file; defaults to ``EDBO_LOG_FILE_DIR``
    """
    level = (log_level or settings.log_level).upper()
    fmt = log_format or settings.log_format
    file_enabled = settings.enable_file_logging if enable_file is None else enable_file
    file_dir = log_file_dir or settings.log_file_dir

    formatter = logging.Formatter(_format_for(fmt), datefmt="%Y-%m-%d %H:%M:%S")

    # Capture all levels, filter at handler level
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if file_enabled:
        Path(file_dir).mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(Path(file_dir) / LOG_FILE_NAME)
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    for module_name, module_level in MODULE_LOG_LEVELS.items():
        logging.getLogger(module_name).setLevel(module_level)

    root_logger.info(f"Logging configured: level={level}, format={fmt}, file_logging={file_enabled}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for a module.

    Args:
        name: The module name (typically __name__)

    Returns:
        A logger instance
    """
    return logging.getLogger(name)
