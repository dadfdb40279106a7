"""Tests for logging configuration."""

import json
import logging
import sys
from unittest.mock import patch

import pytest

from royale.core.config import Settings
from royale.core.logging import (
    ContextFilter,
    JSONFormatter,
    get_log_context,
    get_logger,
    get_logging_config,
    setup_logging,
)


def make_record(msg="Test message", level=logging.INFO, exc_info=None):
    return logging.LogRecord(
        name="royale.gateway.client",
        level=level,
        pathname="client.py",
        lineno=42,
        msg=msg,
        args=(),
        exc_info=exc_info,
    )


class TestJSONFormatter:
    """Test JSON formatter for structured logging."""

    def test_basic_json_format(self):
        output = JSONFormatter().format(make_record())
        data = json.loads(output)

        assert data["level"] == "INFO"
        assert data["logger"] == "royale.gateway.client"
        assert data["message"] == "Test message"
        assert "timestamp" in data
        assert data["source"]["file"] == "client.py"
        assert data["source"]["line"] == 42

    def test_json_format_with_context(self):
        record = make_record("GET /player/2PP")
        record.method = "GET"
        record.path = "/player/2PP"
        record.status_code = 200
        record.duration_ms = 12.5
        record.remaining = 4

        data = json.loads(JSONFormatter().format(record))

        assert data["method"] == "GET"
        assert data["path"] == "/player/2PP"
        assert data["status_code"] == 200
        assert data["duration_ms"] == 12.5
        assert data["remaining"] == 4
        assert "extra" not in data

    def test_none_context_fields_are_omitted(self):
        record = make_record()
        ContextFilter().filter(record)

        data = json.loads(JSONFormatter().format(record))

        assert "retry_after" not in data
        assert "path" not in data

    def test_unknown_fields_go_to_extra(self):
        record = make_record()
        record.tag = "2PP"

        data = json.loads(JSONFormatter().format(record))

        assert data["extra"] == {"tag": "2PP"}

    def test_exception_is_formatted(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record("failed", level=logging.ERROR, exc_info=sys.exc_info())

        data = json.loads(JSONFormatter().format(record))

        assert data["level"] == "ERROR"
        assert any("ValueError: boom" in line for line in data["exception"])

    def test_non_serializable_values_use_str(self):
        record = make_record()
        record.path = object()

        data = json.loads(JSONFormatter().format(record))

        assert data["path"].startswith("<object object")


class TestContextFilter:
    """Test context filter defaults."""

    def test_adds_missing_fields(self):
        record = make_record()

        assert ContextFilter().filter(record) is True
        for field in ContextFilter.CONTEXT_DEFAULTS:
            assert getattr(record, field) is None

    def test_keeps_existing_fields(self):
        record = make_record()
        record.status_code = 404

        ContextFilter().filter(record)

        assert record.status_code == 404


class TestLoggingConfig:
    """Test dictConfig generation from settings."""

    @pytest.mark.parametrize("log_format", ["text", "json"])
    def test_formatter_follows_settings(self, log_format):
        with patch("royale.core.logging.settings", Settings(log_format=log_format)):
            config = get_logging_config()

        assert config["handlers"]["console"]["formatter"] == log_format
        assert config["handlers"]["error_console"]["formatter"] == log_format

    def test_only_text_and_json_formatters(self):
        with patch("royale.core.logging.settings", Settings()):
            config = get_logging_config()

        assert set(config["formatters"]) == {"text", "json"}

    def test_level_applies_to_royale_logger(self):
        with patch("royale.core.logging.settings", Settings(log_level="debug")):
            config = get_logging_config()

        assert config["loggers"]["royale"]["level"] == "DEBUG"
        assert config["handlers"]["console"]["level"] == "DEBUG"
        assert config["loggers"]["httpx"]["level"] == "WARNING"

    def test_root_logger_untouched(self):
        with patch("royale.core.logging.settings", Settings()):
            config = get_logging_config()

        assert "root" not in config
        assert config["disable_existing_loggers"] is False

    def test_setup_logging_configures_royale_logger(self):
        with patch("royale.core.logging.settings", Settings(log_level="WARNING")):
            setup_logging()

        logger = logging.getLogger("royale")
        assert logger.level == logging.WARNING
        assert logger.propagate is False
        assert len(logger.handlers) == 2

        # Leave the hierarchy as it was for other tests
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        logger.propagate = True


class TestHelpers:
    """Test logger and context helpers."""

    def test_get_logger_default_name(self):
        assert get_logger().name == "royale"

    def test_get_logger_custom_name(self):
        assert get_logger("royale.client").name == "royale.client"

    def test_get_log_context_drops_none(self):
        assert get_log_context(method="GET", path="/version") == {
            "method": "GET",
            "path": "/version",
        }

    def test_get_log_context_with_extra(self):
        context = get_log_context(status_code=429, remaining=0, retry_after=None)

        assert context == {"status_code": 429, "remaining": 0}
