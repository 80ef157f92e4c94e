"""Unit tests for the Push entity."""

from __future__ import annotations

import json

import pytest
from structlog.testing import capture_logs

from airship_push.common import PUSH_URL
from airship_push.errors import AirshipFailure, ForbiddenError, UnauthorizedError
from airship_push.push import Push, PushResponse, audience, payload
from airship_push.testing import FakeTransport


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport()


# ---------------------------------------------------------------------------
# payload()
# ---------------------------------------------------------------------------


class TestPushPayload:
    def test_empty_push_has_empty_payload(self, transport: FakeTransport) -> None:
        assert Push(transport).payload() == {}

    def test_only_set_fields_are_present(self, transport: FakeTransport) -> None:
        push = Push(transport)
        push.audience = audience.all_()
        push.notification = payload.notification(alert="Hello")
        push.device_types = payload.all_()
        assert push.payload() == {
            "audience": "all",
            "notification": {"alert": "Hello"},
            "device_types": "all",
        }

    def test_all_seven_fields(self, transport: FakeTransport) -> None:
        push = Push(transport)
        push.audience = audience.tag("vip")
        push.notification = payload.notification(alert="a")
        push.campaigns = payload.campaigns(categories=["c"])
        push.options = payload.options(expiry=60)
        push.device_types = payload.device_types(["ios"])
        push.message = payload.message(title="t", body="b")
        push.in_app = payload.in_app(alert="x", display_type="banner")
        assert list(push.payload()) == [
            "audience",
            "notification",
            "campaigns",
            "options",
            "device_types",
            "message",
            "in_app",
        ]

    def test_payload_is_recomputed(self, transport: FakeTransport) -> None:
        push = Push(transport)
        push.audience = "all"
        first = push.payload()
        push.audience = None
        push.device_types = "all"
        assert first == {"audience": "all"}
        assert push.payload() == {"device_types": "all"}


# ---------------------------------------------------------------------------
# send_push()
# ---------------------------------------------------------------------------


class TestSendPush:
    def _push(self, transport: FakeTransport) -> Push:
        push = Push(transport)
        push.audience = "all"
        push.notification = payload.notification(alert="Hello")
        push.device_types = "all"
        return push

    def test_posts_json_payload(self, transport: FakeTransport) -> None:
        push = self._push(transport)
        push.send_push()
        request = transport.last()
        assert request is not None
        assert request.method == "POST"
        assert request.url == PUSH_URL
        assert request.content_type == "application/json"
        assert json.loads(request.body) == push.payload()

    def test_returns_push_response(self, transport: FakeTransport) -> None:
        transport.respond({"ok": True, "push_ids": ["p1"], "operation_id": "op"}, 202)
        pr = self._push(transport).send_push()
        assert isinstance(pr, PushResponse)
        assert pr.ok is True
        assert pr.push_ids == ["p1"]
        assert pr.operation_id == "op"
        assert pr.status_code == "202"

    def test_logs_summary(self, transport: FakeTransport) -> None:
        transport.respond({"ok": True, "push_ids": ["p1"]}, 202)
        with capture_logs() as logs:
            pr = self._push(transport).send_push()
        events = [e for e in logs if e["event"] == "push.sent"]
        assert len(events) == 1
        assert events[0]["log_level"] == "info"
        assert events[0]["status_code"] == "202"
        assert events[0]["push_ids"] == ["p1"]
        assert events[0]["summary"] == pr.format()

    def test_injected_logger_is_used(self, transport: FakeTransport) -> None:
        calls: list[tuple[str, dict]] = []

        class StubLogger:
            def info(self, event: str, **kw) -> None:
                calls.append((event, kw))

        push = Push(transport, logger=StubLogger())  # type: ignore[arg-type]
        push.audience = "all"
        push.send_push()
        assert calls[0][0] == "push.sent"

    @pytest.mark.parametrize(
        "exc",
        [
            UnauthorizedError("bad key", status_code=401),
            ForbiddenError("no entitlement", status_code=403),
            AirshipFailure("boom", status_code=500),
        ],
    )
    def test_transport_errors_propagate_unchanged(self, transport: FakeTransport, exc: Exception) -> None:
        transport.fail(exc)
        with pytest.raises(type(exc)) as exc_info:
            self._push(transport).send_push()
        assert exc_info.value is exc
