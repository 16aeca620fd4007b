"""Tests for logging setup."""

import logging
from pathlib import Path

import pytest

from taskboard.logging import setup_logging


@pytest.fixture
def taskboard_logger():
    """Restore the taskboard logger after each test."""
    logger = logging.getLogger("taskboard")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers = handlers
    logger.setLevel(level)


class TestSetupLogging:
    def test_no_logging_requested(self, taskboard_logger):
        before = list(taskboard_logger.handlers)

        setup_logging(0, None)

        assert taskboard_logger.handlers == before

    def test_file_logging(self, taskboard_logger, tmp_path: Path):
        log_file = tmp_path / "logs" / "taskboard.log"

        setup_logging(0, log_file)
        logging.getLogger("taskboard.repositories.filesystem").info("Saved board")

        assert taskboard_logger.level == logging.INFO
        for handler in taskboard_logger.handlers:
            handler.flush()
        content = log_file.read_text()
        assert "taskboard.repositories.filesystem - INFO - Saved board" in content

    def test_debug_level(self, taskboard_logger, tmp_path: Path):
        setup_logging(2, tmp_path / "debug.log")

        assert taskboard_logger.level == logging.DEBUG
