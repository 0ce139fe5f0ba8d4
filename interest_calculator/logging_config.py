"""
Logging configuration for the calculator service.
"""

from __future__ import annotations

import logging

LOGGER_NAME = "interest_calculator"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def setup_logging(level: str = "INFO", logger_name: str = LOGGER_NAME) -> logging.Logger:
    """
    Attach a single stream handler to the package logger.

    Args:
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        logger_name: Name of the logger to configure

    Returns:
        The configured logger
    """
    logger = logging.getLogger(logger_name)

    # Remove existing handlers so repeated app creation does not duplicate output
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))
    logger.propagate = False

    return logger
