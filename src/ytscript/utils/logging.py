import logging
import os
from typing import Dict, Optional

import colorlog

# Define log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL
}

DEFAULT_LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

LOG_COLORS = {
    'DEBUG': 'cyan',
    'INFO': 'green',
    'WARNING': 'yellow',
    'ERROR': 'red',
    'CRITICAL': 'red,bg_white',
}

# Keep track of configured loggers
CONFIGURED_LOGGERS: Dict[str, logging.Logger] = {}


def setup_logger(name: str, log_level: str = "INFO") -> logging.Logger:
    """
    Set up a logger with colorful console output.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    log_level = log_level.upper()

    logger = logging.getLogger(name)

    if log_level in LOG_LEVELS:
        logger.setLevel(LOG_LEVELS[log_level])
    else:
        logger.setLevel(logging.INFO)
        logger.warning(f"Invalid log level: {log_level}. Using INFO instead.")

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    # Diagnostics go to stderr so they never mix with transcript output on stdout
    console_handler = logging.StreamHandler()
    console_handler.setLevel(LOG_LEVELS.get(log_level, logging.INFO))

    formatter = colorlog.ColoredFormatter(
        "%(log_color)s" + os.environ.get("LOG_FORMAT", DEFAULT_LOG_FORMAT),
        datefmt=os.environ.get("LOG_DATE_FORMAT", DEFAULT_DATE_FORMAT),
        log_colors=LOG_COLORS
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)
    logger.propagate = False

    CONFIGURED_LOGGERS[name] = logger
    return logger


def get_log_level() -> str:
    """Get the log level from environment variable or use default."""
    return os.environ.get("LOG_LEVEL", "WARNING").upper()


def get_logger(name: str, log_level: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the specified name and log level.

    Names are namespaced under the ``ytscript`` package logger.

    Args:
        name: The name of the logger
        log_level: The log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)

    Returns:
        A configured logger instance
    """
    if log_level is None:
        log_level = get_log_level()

    if not name.startswith("ytscript"):
        name = f"ytscript.{name}"

    return setup_logger(name, log_level)


def set_log_level(log_level: str) -> None:
    """Change the level of every logger configured through this module."""
    for name in list(CONFIGURED_LOGGERS):
        setup_logger(name, log_level)
