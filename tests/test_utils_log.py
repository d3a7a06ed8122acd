"""
Tests for src/utils/log.py

Assertions look only at the handler setup_logger attaches (HANDLER_NAME);
pytest may add its own capture handlers to the same logger.
"""

import logging

import pytest

from src.utils.log import HANDLER_NAME, LOGGER_NAME, get_logger, setup_logger


def _project_handlers(logger):
    return [h for h in logger.handlers if h.get_name() == HANDLER_NAME]


def test_setup_logger_is_idempotent():
    """Repeated setup does not stack the project handler."""
    logger = setup_logger()
    total_before = len(logger.handlers)

    again = setup_logger()

    assert again is logger
    assert len(_project_handlers(again)) == 1
    assert len(again.handlers) == total_before
    assert logger.propagate is False


def test_setup_logger_explicit_level_updates_existing_logger():
    """An explicit level is applied even after the first configuration."""
    logger = setup_logger()
    original = logger.level
    try:
        setup_logger(level="DEBUG")
        assert logger.level == logging.DEBUG
    finally:
        logger.setLevel(original)


def test_setup_logger_rejects_unknown_level_from_environment(monkeypatch):
    """An invalid UTILS_LOG_LEVEL is a ValueError and leaves no handler behind."""
    logger = logging.getLogger(LOGGER_NAME)
    removed = _project_handlers(logger)
    original_level = logger.level
    for handler in removed:
        logger.removeHandler(handler)
    monkeypatch.setenv("UTILS_LOG_LEVEL", "LOUD")
    try:
        with pytest.raises(ValueError, match="UTILS_LOG_LEVEL"):
            setup_logger()
        assert _project_handlers(logger) == []

        # A valid level afterwards configures the logger normally
        monkeypatch.setenv("UTILS_LOG_LEVEL", "WARNING")
        setup_logger()
        assert len(_project_handlers(logger)) == 1
        assert logger.level == logging.WARNING
    finally:
        for handler in _project_handlers(logger):
            logger.removeHandler(handler)
        for handler in removed:
            logger.addHandler(handler)
        logger.setLevel(original_level)


def test_setup_logger_rejects_unknown_explicit_level():
    """Explicit level names are checked the same way."""
    with pytest.raises(ValueError, match="Log level must be one of"):
        setup_logger(level="chatty")


def test_get_logger_returns_child_of_project_logger():
    """Module loggers hang under the project logger."""
    assert get_logger("src.orchestration.deferred").name == "src.orchestration.deferred"
    assert get_logger("scratch").name == f"{LOGGER_NAME}.scratch"
    assert get_logger(LOGGER_NAME) is logging.getLogger(LOGGER_NAME)
