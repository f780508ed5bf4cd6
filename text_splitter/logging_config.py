"""
Logging Configuration Module

All modules log through children of the "text_splitter" logger. The CLI and
the runner script call setup_logging once; library users who never call it
get the host application's logging configuration instead.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, Union

PACKAGE_LOGGER = "text_splitter"
DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def resolve_level(level: Union[int, str]) -> int:
    """Turn a level name such as "debug" or "WARNING" into its number."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(level.upper())
    if not isinstance(value, int):
        raise ValueError(f"Unknown log level: {level}")
    return value


def setup_logging(
    level: Union[int, str] = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> logging.Logger:
    """
    Configure the package logger.

    Args:
        level: Logging level, as a number or a name (default: INFO)
        log_file: Optional path to a log file, which also gets every record
        format_string: Optional custom format string

    Returns:
        The "text_splitter" logger
    """
    level = resolve_level(level)
    formatter = logging.Formatter(
        format_string or DEFAULT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
    )

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    # Records are written by these handlers only, not again by the root logger
    logger.propagate = False

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
