"""Tests for logging configuration and settings."""

import json
import logging

from recetapp.config import Settings
from recetapp.logging_config import (
    ContextualFormatter,
    LoggingContext,
    StructuredJsonFormatter,
    get_logger,
    request_id_ctx,
)


def _record(message: str = "hello") -> logging.LogRecord:
    return logging.LogRecord(
        name="recetapp.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )


class TestLoggingContext:
    """Tests for logging context variables."""

    def test_context_manager_resets(self):
        """Test that the context manager restores previous values."""
        assert request_id_ctx.get() is None
        with LoggingContext(request_id="req-1"):
            assert request_id_ctx.get() == "req-1"
        assert request_id_ctx.get() is None

    def test_no_request_id_sets_nothing(self):
        """Test that an empty context leaves the request id untouched."""
        with LoggingContext():
            assert request_id_ctx.get() is None
        assert request_id_ctx.get() is None

    def test_adapter_adds_context(self, caplog):
        """Test that the adapter attaches context to records."""
        logger = get_logger("recetapp.test")
        with caplog.at_level(logging.INFO, logger="recetapp.test"):
            with LoggingContext(request_id="req-3"):
                logger.info("inside")
        assert caplog.records[-1].request_id == "req-3"


class TestFormatters:
    """Tests for log formatters."""

    def test_json_formatter(self):
        """Test that the JSON formatter emits context and location."""
        with LoggingContext(request_id="req-4"):
            output = json.loads(StructuredJsonFormatter().format(_record()))

        assert output["message"] == "hello"
        assert output["level"] == "INFO"
        assert output["request_id"] == "req-4"
        assert output["location"]["line"] == 10
        assert output["timestamp"].endswith("Z")

    def test_contextual_formatter(self):
        """Test the human-readable formatter."""
        with LoggingContext(request_id="abcdefghijk"):
            output = ContextualFormatter().format(_record())

        assert "| INFO     | recetapp.test [req=abcdefgh] | hello" in output


class TestSettings:
    """Tests for application settings."""

    def test_cors_origins(self):
        """Test splitting the allowed origins setting."""
        settings = Settings(allowed_origins="http://a.test, http://b.test,")
        assert settings.cors_origins == ["http://a.test", "http://b.test"]

    def test_is_development(self):
        """Test environment detection."""
        assert Settings(environment="Development").is_development
        assert not Settings(environment="production").is_development
