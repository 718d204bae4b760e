"""
Logging utilities for the run statistics tool.
Provides a consistent format with timestamps and PIDs across all modules.
"""

import logging
import sys
from typing import Optional

LOG_FORMAT = '%(asctime)s [PID:%(process)d] [%(name)s] [%(levelname)s] - %(message)s'
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
ROOT_LOGGER_NAME = "spire_win_rate"


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger with consistent formatting.

    Args:
        name: Logger name (usually module name)
        level: Log level string (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        Configured logger instance
    """
    log = logging.getLogger(name)

    if level is not None:
        log.setLevel(getattr(logging, level.upper(), logging.INFO))

    # Already configured: only the level may change
    if log.handlers:
        return log

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)
    log.addHandler(handler)
    # Do not propagate to root, the root would log again with its default format
    log.propagate = False

    return log


def setup_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger. Module loggers are children of it.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        The package logger
    """
    return get_logger(ROOT_LOGGER_NAME, level=level)
