"""Test the centralized logging functionality."""

import logging
from io import StringIO

import pytest

from routeplanner.logging import (
    ROOT_LOGGER_NAME,
    get_logger,
    reset_logging,
    set_global_log_level,
    setup_root_logger,
)


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    reset_logging()
    setup_root_logger()


def test_centralized_logging():
    logger = get_logger("routeplanner.test")

    log_capture = StringIO()
    handler = logging.StreamHandler(log_capture)
    handler.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.addHandler(handler)

    set_global_log_level(logging.INFO)
    logger.info("Test info message")
    assert "Test info message" in log_capture.getvalue()

    log_capture.seek(0)
    log_capture.truncate(0)
    logger.debug("Test debug message")
    assert "Test debug message" not in log_capture.getvalue()

    set_global_log_level(logging.DEBUG)
    logger.debug("Test debug message after enable")
    assert "Test debug message after enable" in log_capture.getvalue()

    set_global_log_level(logging.INFO)
    logger.handlers.clear()


def test_logger_naming():
    logger = get_logger("routeplanner.algorithms.test")
    assert logger.name == "routeplanner.algorithms.test"
    assert logger.level == logging.NOTSET


def test_children_inherit_global_level():
    logger1 = get_logger("routeplanner.module1")
    logger2 = get_logger("routeplanner.module2")
    assert logger1 is not logger2

    set_global_log_level(logging.WARNING)
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    assert root_logger.level == logging.WARNING
    assert logger1.getEffectiveLevel() == logging.WARNING
    assert logger2.getEffectiveLevel() == logging.WARNING


def test_single_handler_after_repeated_setup():
    setup_root_logger()
    setup_root_logger()
    assert len(logging.getLogger(ROOT_LOGGER_NAME).handlers) == 1


def test_reset_allows_custom_handler():
    reset_logging()
    capture = StringIO()
    setup_root_logger(
        level=logging.DEBUG,
        format_string="%(levelname)s:%(message)s",
        handler=logging.StreamHandler(capture),
    )
    get_logger("routeplanner.custom").debug("hello")
    assert "DEBUG:hello" in capture.getvalue()
