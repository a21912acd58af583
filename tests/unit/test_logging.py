"""Tests for the logging helpers."""

import logging

import pytest

from utils.logging import get_logger, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    root.setLevel(level)


def test_setup_logging_applies_level_on_every_call(root_logger):
    setup_logging("DEBUG")
    handler_count = len(root_logger.handlers)

    setup_logging("warning")

    assert root_logger.level == logging.WARNING
    assert len(root_logger.handlers) == handler_count


def test_setup_logging_quiets_scheduler_and_http_loggers(root_logger):
    setup_logging("DEBUG")

    assert logging.getLogger("apscheduler").level == logging.WARNING
    assert logging.getLogger("urllib3").level == logging.WARNING


def test_unknown_level_falls_back_to_info(root_logger):
    setup_logging("chatty")

    assert root_logger.level == logging.INFO


def test_get_logger_returns_named_logger(root_logger):
    logger = get_logger("monitor.test")

    assert logger.name == "monitor.test"
    assert root_logger.handlers
