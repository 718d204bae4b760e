"""Tests for logging utilities."""

import logging

from spire_win_rate.logging_utils import LOG_FORMAT, ROOT_LOGGER_NAME, get_logger, setup_logging


def test_setup_logging_installs_one_handler():
    logger = setup_logging("INFO")
    again = setup_logging("DEBUG")

    assert logger is again
    assert logger.name == ROOT_LOGGER_NAME
    assert len(logger.handlers) == 1
    assert logger.handlers[0].formatter._fmt == LOG_FORMAT
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_get_logger_keeps_level_when_not_given():
    logger = get_logger("spire_win_rate.test_level", level="ERROR")

    assert get_logger("spire_win_rate.test_level").level == logging.ERROR

    logger.handlers.clear()
    logger.propagate = True
