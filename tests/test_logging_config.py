"""
Tests for logging configuration.
"""

import logging

from chilean_run.core.check_digit import check_digit
from chilean_run.logging_config import (
    DEFAULT_FORMAT,
    LOGGER_NAME,
    LogContext,
    get_logger,
    setup_logging,
)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_sets_level(self):
        logger = setup_logging(level="WARNING")
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.WARNING
        assert logger.propagate is False

    def test_unknown_level_falls_back_to_info(self):
        logger = setup_logging(level="nonsense")
        assert logger.level == logging.INFO

    def test_repeated_setup_replaces_handlers(self):
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1

    def test_verbose_uses_detailed_format(self):
        logger = setup_logging(verbose=True)
        assert logger.handlers[0].formatter._fmt == DEFAULT_FORMAT

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "debug.log"
        setup_logging(level="DEBUG", log_file=log_file)
        check_digit("12x")
        assert "Non-digit 'x'" in log_file.read_text()


class TestGetLogger:
    """Tests for get_logger."""

    def test_main_logger(self):
        assert get_logger().name == "chilean_run"

    def test_child_logger(self):
        assert get_logger("generator").name == "chilean_run.generator"


class TestLogContext:
    """Tests for LogContext."""

    def test_restores_level(self):
        logger = get_logger("context")
        logger.setLevel(logging.INFO)
        with LogContext(logger, logging.DEBUG):
            assert logger.level == logging.DEBUG
        assert logger.level == logging.INFO
