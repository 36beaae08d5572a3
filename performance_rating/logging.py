"""Logging configuration for performance-rating.

Import the ``logger`` instance from this module throughout the codebase.

The library itself only installs a :class:`logging.NullHandler`, so scoring
stays free of output unless the host application opts in.  Call
:func:`configure_stream_logging` to echo records to stderr and
:func:`configure_file_logging` to add a timestamped file handler.
"""

from __future__ import annotations

import logging
import sys
from datetime import datetime
from pathlib import Path

logger = logging.getLogger("performance-rating")
logger.addHandler(logging.NullHandler())

# Shared between stderr and file handlers
_LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

DEFAULT_LOG_DIR = "data/logs"


def _formatter() -> logging.Formatter:
    return logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT)


def configure_stream_logging(level: int = logging.INFO) -> logging.StreamHandler:
    """Attach a stderr handler at *level* and return it."""
    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_formatter())
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler


def configure_file_logging(
    log_dir: str = DEFAULT_LOG_DIR,
    *,
    level: int = logging.INFO,
) -> logging.FileHandler:
    """Add a timestamped file handler to the logger.

    Creates ``log_dir`` if it does not exist.  Returns the handler so
    callers (or tests) can remove it later.

    Args:
        log_dir: Directory for log files.  Created automatically.
        level: Logging level for the file handler (default: INFO).

    Returns:
        The :class:`logging.FileHandler` that was added.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%dT%H-%M-%S")
    filename = log_path / f"performance-rating_{timestamp}.log"

    file_handler = logging.FileHandler(str(filename), encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(_formatter())

    # Ensure the logger captures messages at the lowest requested level
    if logger.level == logging.NOTSET or level < logger.level:
        logger.setLevel(level)

    logger.addHandler(file_handler)
    return file_handler


__all__ = ["configure_file_logging", "configure_stream_logging", "logger"]
