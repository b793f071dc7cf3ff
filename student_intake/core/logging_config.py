"""Logging configuration for the student intake service."""

import logging
import sys
from typing import Optional

LOGGER_NAMESPACE = "student_intake"


def get_logger(name: str, level: Optional[int | str] = None) -> logging.Logger:
    """Get a configured logger instance."""
    logger = logging.getLogger(name)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            logging.Formatter(
                "%(asctime)s | %(name)s | %(levelname)s | %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(handler)
    if level is not None:
        logger.setLevel(level)
    return logger


def configure_logging(level: int | str = "INFO") -> logging.Logger:
    """Attach the stdout handler to the package root logger and set its level.

    Module loggers (``student_intake.*``) propagate to it, so they only need
    ``logging.getLogger(__name__)``.
    """
    if isinstance(level, str):
        level = level.upper()
    return get_logger(LOGGER_NAMESPACE, level)
