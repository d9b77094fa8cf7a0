import logging

import pytest
import structlog

from weather_lookup.utils.logging_config import get_renderer, setup_logging


@pytest.fixture
def restore_logging():
    root_logger = logging.getLogger()
    handlers, level = list(root_logger.handlers), root_logger.level
    yield root_logger
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    structlog.reset_defaults()


class TestLoggingConfig:
    """Test cases for logging setup."""

    def test_setup_logging_console_only(self, restore_logging):
        """Test that structlog output is routed through a single stdout handler."""
        setup_logging(log_to_file=False)

        assert len(restore_logging.handlers) == 1
        handler = restore_logging.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter)

    def test_renderer_follows_log_format(self, monkeypatch):
        """Test that the json log format selects the JSON renderer."""
        monkeypatch.setattr("weather_lookup.utils.logging_config.config.log_format", "json")
        assert isinstance(get_renderer(), structlog.processors.JSONRenderer)

        monkeypatch.setattr("weather_lookup.utils.logging_config.config.log_format", "text")
        assert isinstance(get_renderer(), structlog.dev.ConsoleRenderer)
