"""Unit tests for FieldMap helpers and the transport port."""

from __future__ import annotations

from airship_push.common import Transport, compact, first_or_none
from airship_push.testing import FakeTransport


class TestCompact:
    def test_drops_none(self) -> None:
        assert compact({"a": 1, "b": None, "c": "x"}) == {"a": 1, "c": "x"}

    def test_keeps_falsy_values(self) -> None:
        assert compact({"a": 0, "b": False, "c": "", "d": {}, "e": []}) == {
            "a": 0,
            "b": False,
            "c": "",
            "d": {},
            "e": [],
        }

    def test_preserves_order(self) -> None:
        assert list(compact({"z": 1, "a": None, "m": 2})) == ["z", "m"]

    def test_returns_new_dict(self) -> None:
        source = {"a": 1}
        result = compact(source)
        assert result == source
        assert result is not source


class TestFirstOrNone:
    def test_first(self) -> None:
        assert first_or_none(["a", "b"]) == "a"

    def test_empty_and_none(self) -> None:
        assert first_or_none([]) is None
        assert first_or_none(None) is None


class TestTransportProtocol:
    def test_fake_transport_satisfies_protocol(self) -> None:
        assert isinstance(FakeTransport(), Transport)

    def test_fake_transport_defaults_and_reset(self) -> None:
        transport = FakeTransport()
        assert transport.send_request("GET", "/x") == {"body": {}, "code": 200}
        assert transport.last().url == "/x"
        transport.reset()
        assert transport.count == 0
        assert transport.last() is None
