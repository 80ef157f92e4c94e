"""Unit tests for observability logging helpers."""
from __future__ import annotations

import logging
from typing import Any

import structlog
from structlog.testing import capture_logs

from airship_push.observability.logging import (
    RedactSensitiveFields,
    configure_logging,
    get_logger,
)


class TestGetLogger:
    def test_emits_structured_event(self) -> None:
        with capture_logs() as logs:
            get_logger("airship_push.test").info("push.sent", status_code="202")
        assert logs == [{"event": "push.sent", "status_code": "202", "log_level": "info"}]

    def test_initial_values_are_bound(self) -> None:
        with capture_logs() as logs:
            get_logger("airship_push.test", app="demo").info("hello")
        assert logs[0]["app"] == "demo"


class TestRedactSensitiveFields:
    def test_redacts_top_level_and_nested(self) -> None:
        processor = RedactSensitiveFields()
        event: dict[str, Any] = {
            "event": "x",
            "secret": "s",
            "headers": {"Authorization": "Basic abc", "accept": "json"},
        }
        result = processor(None, "info", event)
        assert result["secret"] == "[REDACTED]"
        assert result["headers"]["Authorization"] == "[REDACTED]"
        assert result["headers"]["accept"] == "json"
        assert result["event"] == "x"

    def test_custom_fields(self) -> None:
        processor = RedactSensitiveFields(frozenset({"push_ids"}))
        assert processor(None, "info", {"push_ids": ["p"], "secret": "s"}) == {
            "push_ids": "[REDACTED]",
            "secret": "s",
        }


class TestConfigureLogging:
    def teardown_method(self) -> None:
        structlog.reset_defaults()
        logging.getLogger().handlers.clear()

    def test_json_output(self) -> None:
        configure_logging(level=logging.WARNING)
        assert logging.getLogger().level == logging.WARNING
        assert len(logging.getLogger().handlers) == 1

    def test_console_output(self) -> None:
        configure_logging(level=logging.DEBUG, json=False, sensitive_fields=frozenset({"key"}))
        assert logging.getLogger().level == logging.DEBUG
