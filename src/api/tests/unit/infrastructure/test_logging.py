"""Unit tests for structlog configuration."""

import logging

import pytest
import structlog

from infrastructure.logging import configure_logging
from infrastructure.settings import Settings


@pytest.fixture(autouse=True)
def reset_structlog():
    """Restore structlog defaults after each test."""
    yield
    structlog.contextvars.clear_contextvars()
    structlog.reset_defaults()


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_output_without_tty(self, monkeypatch):
        """Non-TTY output renders JSON."""
        monkeypatch.delenv("FORCE_COLOR", raising=False)
        monkeypatch.setattr("sys.stdout.isatty", lambda: False)

        configure_logging(Settings())

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_force_color_uses_console_renderer(self, monkeypatch):
        """FORCE_COLOR selects the colored console renderer."""
        monkeypatch.setenv("FORCE_COLOR", "1")

        configure_logging(Settings())

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    @pytest.mark.parametrize("debug,level", [(True, logging.DEBUG), (False, logging.INFO)])
    def test_filtering_level(self, debug, level):
        """Debug mode lets debug events through."""
        configure_logging(Settings(debug=debug))

        wrapper = structlog.get_config()["wrapper_class"]
        assert wrapper is structlog.make_filtering_bound_logger(level)

    def test_binds_application_name(self):
        """Every event carries the application name."""
        configure_logging(Settings(app_name="stockroom-test"))

        assert structlog.contextvars.get_contextvars() == {"app": "stockroom-test"}
