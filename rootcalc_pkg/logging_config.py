"""Structured logging configuration for Rootcalc."""

import logging
import sys
from datetime import datetime
from typing import Optional

from .config import LOG_FILE, LOG_LEVEL


class StructuredFormatter(logging.Formatter):
    """Formatter that outputs structured log entries with timestamp, module, level, and message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat()
        return f"{timestamp} [{record.levelname}] {record.name}: {record.getMessage()}"


def setup_logging(
    level: Optional[str] = None, log_file: Optional[str] = None
) -> logging.Logger:
    """Set up structured logging for the application.

    Unset arguments fall back to ROOTCALC_LOG_LEVEL and ROOTCALC_LOG_FILE.
    An unknown level name configures WARNING.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional file path to also write logs to (stderr always gets them)

    Returns:
        Configured logger instance
    """
    if level is None:
        level = LOG_LEVEL
    if log_file is None:
        log_file = LOG_FILE

    logger = logging.getLogger("rootcalc")
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    logger.setLevel(numeric_level)

    # Close and remove handlers from an earlier call
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(StructuredFormatter())
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(StructuredFormatter())
        logger.addHandler(file_handler)

    return logger


def get_logger(name: str = "rootcalc") -> logging.Logger:
    """Get a logger instance for a module.

    Args:
        name: Logger name (typically module name); "rootcalc" is the package logger

    Returns:
        Logger instance under the "rootcalc" namespace
    """
    if name == "rootcalc":
        return logging.getLogger("rootcalc")
    return logging.getLogger(f"rootcalc.{name}")
