"""Pagination – PageIterator over ``next_page``-linked listings."""
from __future__ import annotations

from typing import Any, Iterator, Mapping

from airship_push.common.transport import Transport
from airship_push.observability.logging import Logger, get_logger


class PageIterator:
    """Iterate the items of a paged listing endpoint.

    Starting at :attr:`next_page`, each page is fetched with ``GET`` and the
    list stored under :attr:`data_attribute` is yielded item by item. The
    ``next_page`` member of every page body is followed until it is absent.

    The iterator is single-pass: once exhausted :attr:`next_page` is ``None``.
    Subclasses set :attr:`next_page` and :attr:`data_attribute` in
    ``__init__``.
    """

    def __init__(
        self,
        transport: Transport,
        *,
        next_page: str | None = None,
        data_attribute: str | None = None,
        logger: Logger | None = None,
    ) -> None:
        self._transport = transport
        self._logger = logger or get_logger(__name__)
        self.next_page = next_page
        self.data_attribute = data_attribute
        self.count = 0
        self.pages = 0

    def __iter__(self) -> Iterator[Any]:
        while self.next_page:
            yield from self._load_page()

    def _load_page(self) -> list[Any]:
        url = self.next_page
        response = self._transport.send_request(method="GET", url=url)  # type: ignore[arg-type]
        self.pages += 1
        body = response.get("body")
        if not isinstance(body, Mapping):
            body = {}
        self.next_page = body.get("next_page")
        items = list(body.get(self.data_attribute or "") or [])
        self.count += len(items)
        self._logger.debug(
            "pagination.page_loaded",
            url=url,
            items=len(items),
            has_next=self.next_page is not None,
        )
        return items


__all__ = ["PageIterator"]
