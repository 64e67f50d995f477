"""Tests for logging setup."""

import logging

import pytest
from rich.logging import RichHandler

from complexity_insight.logging_config import get_logger, setup_logging


class TestSetupLogging:
    """Levels and handlers."""

    @pytest.mark.parametrize("verbosity, level", [
        ("verbose", logging.DEBUG),
        ("normal", logging.WARNING),
        ("quiet", logging.ERROR),
    ])
    def test_levels(self, verbosity, level):
        """Each verbosity maps to one level."""
        assert setup_logging(verbosity).level == level

    def test_unknown_verbosity(self):
        """Unknown verbosity names are rejected."""
        with pytest.raises(ValueError):
            setup_logging("chatty")

    def test_single_rich_handler(self):
        """Repeated setup replaces handlers instead of stacking them."""
        setup_logging()
        logger = setup_logging()
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0], RichHandler)
        assert logger.propagate is False

    def test_log_file(self, tmp_path):
        """A log file receives records from child loggers."""
        log_file = tmp_path / "run.log"
        logger = setup_logging("verbose", log_file=str(log_file))
        get_logger("calculators").debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()
        # closes the file handler
        setup_logging()


class TestGetLogger:
    """Logger naming."""

    def test_names_are_namespaced(self):
        """Short names are nested under the package logger."""
        assert get_logger("api").name == "complexity_insight.api"
        assert get_logger("complexity_insight.models").name == "complexity_insight.models"
        assert get_logger().name == "complexity_insight"
        assert get_logger("complexity_insightful").name == "complexity_insight.complexity_insightful"
