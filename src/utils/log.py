"""Logger configuration for the utility library."""

import logging
import os
import sys

from src.config.settings import VALID_LOG_LEVELS

__all__ = ["LOGGER_NAME", "HANDLER_NAME", "setup_logger", "get_logger"]

LOGGER_NAME = "src"

# Name of the stdout handler attached by setup_logger
HANDLER_NAME = "src-stdout"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logger(
    name: str = LOGGER_NAME,
    level: str | None = None,
    format_string: str | None = None,
) -> logging.Logger:
    """
    Configure and return the project logger.

    The stdout handler is attached only once, so repeated calls are safe. A
    later call with an explicit `level` still updates the level. Other
    handlers on the logger (test capture, application handlers) are left alone.

    Args:
        name: Logger name (the root package name by default).
        level: Log level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
               Falls back to UTILS_LOG_LEVEL, then INFO.
        format_string: Custom format string.

    Returns:
        Configured logger instance.

    Raises:
        ValueError: If the level name is not a standard logging level. Nothing
                    is attached to the logger in that case.
    """
    explicit_level = level is not None
    level = level or os.getenv("UTILS_LOG_LEVEL", "INFO")
    format_string = format_string or DEFAULT_FORMAT
    level_number = _resolve_level(level)

    logger = logging.getLogger(name)

    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        logger.setLevel(level_number)
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        formatter = logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    elif explicit_level:
        logger.setLevel(level_number)

    return logger


def _resolve_level(level: str) -> int:
    if level.upper() not in VALID_LOG_LEVELS:
        raise ValueError(
            f"Log level must be one of {list(VALID_LOG_LEVELS)}, got: {level!r}. "
            "Check UTILS_LOG_LEVEL in your .env file or environment variables."
        )
    return getattr(logging, level.upper())


def get_logger(module_name: str) -> logging.Logger:
    """
    Return a child of the project logger for a module.

    Usage:
        logger = get_logger(__name__)
    """
    setup_logger()
    if module_name == LOGGER_NAME or module_name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(module_name)
    return logging.getLogger(f"{LOGGER_NAME}.{module_name}")
