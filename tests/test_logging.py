"""Tests for structured logging configuration."""

from __future__ import annotations

import structlog

from core.config import LoggingSettings
from core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    configure_logging_from_settings,
    get_logger,
    render_failures,
)


class TestConfigureLogging:
    """Tests for configure_logging function."""

    def test_configure_logging_default(self) -> None:
        """configure_logging should work with defaults."""
        configure_logging()

        assert structlog.is_configured() is True

    def test_configure_logging_json_format(self) -> None:
        """configure_logging should end the chain with the JSON renderer."""
        configure_logging(json_format=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_configure_logging_console_format(self) -> None:
        """configure_logging should end the chain with the console renderer by default."""
        configure_logging(json_format=False)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_failures_are_rendered(self) -> None:
        """The failure renderer should be part of the processor chain."""
        configure_logging()

        assert render_failures in structlog.get_config()["processors"]

    def test_configure_logging_lowercase_level(self) -> None:
        """configure_logging should accept lowercase log levels."""
        configure_logging(log_level="debug")

        assert structlog.is_configured() is True

    def test_configure_logging_from_settings(self) -> None:
        """configure_logging_from_settings should use the LOG_* section."""
        configure_logging_from_settings(LoggingSettings(level="WARNING", json_format=True))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)


class TestRenderFailures:
    """Tests for render_failures processor."""

    def test_exception_field_is_summarized(self) -> None:
        """Exception values should be replaced with "Kind: message"."""
        event_dict = {"event": "Lookup failed", "error": KeyError("user")}

        rendered = render_failures(None, "info", event_dict)

        assert rendered["error"] == "KeyError: 'user'"
        assert rendered["event"] == "Lookup failed"

    def test_unprintable_exception_field(self) -> None:
        """An exception whose __str__ raises should still render."""

        class UnprintableError(Exception):
            def __str__(self) -> str:
                return self.args[0]

        rendered = render_failures(None, "debug", {"event": "Captured", "failure": UnprintableError()})

        assert rendered["failure"] == "UnprintableError: <unprintable UnprintableError>"

    def test_exc_info_is_left_alone(self) -> None:
        """exc_info should be left for the traceback processors."""
        error = ValueError("bad")
        event_dict = {"event": "Parse failed", "exc_info": error}

        rendered = render_failures(None, "error", event_dict)

        assert rendered["exc_info"] is error

    def test_other_fields_untouched(self) -> None:
        """Non-exception values should not change."""
        event_dict = {"event": "Done", "count": 3, "name": "job"}

        rendered = render_failures(None, "info", dict(event_dict))

        assert rendered == event_dict


class TestGetLogger:
    """Tests for get_logger function."""

    def test_get_logger_returns_logger(self) -> None:
        """get_logger should return a structlog logger."""
        configure_logging()

        logger = get_logger()

        assert logger is not None

    def test_logger_can_log_failure(self) -> None:
        """Logger should accept exceptions as field values."""
        configure_logging()
        logger = get_logger("test")

        # Should not raise
        logger.warning("Operation failed", error=RuntimeError("boom"))


class TestContextFunctions:
    """Tests for context binding functions."""

    def test_bind_context(self) -> None:
        """bind_context should add context variables."""
        clear_context()

        bind_context(request_id="123", operation="convert")

        assert structlog.contextvars.get_contextvars() == {"request_id": "123", "operation": "convert"}
        clear_context()

    def test_clear_context(self) -> None:
        """clear_context should clear context variables."""
        bind_context(request_id="123")

        clear_context()

        assert structlog.contextvars.get_contextvars() == {}
