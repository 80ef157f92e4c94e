"""Unit tests for PageIterator."""

from __future__ import annotations

from airship_push.pagination import PageIterator
from airship_push.testing import FakeTransport


class TestPageIterator:
    def test_follows_next_page_until_absent(self) -> None:
        transport = FakeTransport()
        transport.respond({"items": [1, 2], "next_page": "/p2"})
        transport.respond({"items": [3], "next_page": "/p3"})
        transport.respond({"items": []})
        it = PageIterator(transport, next_page="/p1", data_attribute="items")
        assert list(it) == [1, 2, 3]
        assert it.count == 3
        assert it.pages == 3
        assert it.next_page is None
        assert [r.url for r in transport.requests] == ["/p1", "/p2", "/p3"]
        assert all(r.method == "GET" for r in transport.requests)

    def test_is_lazy(self) -> None:
        transport = FakeTransport()
        transport.respond({"items": [1], "next_page": "/p2"})
        transport.respond({"items": [2]})
        it = iter(PageIterator(transport, next_page="/p1", data_attribute="items"))
        assert next(it) == 1
        assert transport.count == 1

    def test_single_pass(self) -> None:
        transport = FakeTransport()
        transport.respond({"items": ["a"]})
        it = PageIterator(transport, next_page="/p1", data_attribute="items")
        assert list(it) == ["a"]
        assert list(it) == []
        assert transport.count == 1

    def test_missing_attribute_yields_nothing_for_page(self) -> None:
        transport = FakeTransport()
        transport.respond({"other": [1], "next_page": "/p2"})
        transport.respond({"items": [2]})
        it = PageIterator(transport, next_page="/p1", data_attribute="items")
        assert list(it) == [2]

    def test_non_mapping_body_stops(self) -> None:
        transport = FakeTransport()
        transport.respond("<html>", 200)
        it = PageIterator(transport, next_page="/p1", data_attribute="items")
        assert list(it) == []
        assert it.pages == 1

    def test_no_seed_makes_no_request(self) -> None:
        transport = FakeTransport()
        assert list(PageIterator(transport, data_attribute="items")) == []
        assert transport.count == 0
