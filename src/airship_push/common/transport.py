"""Common – Transport port.

Entities never build their own HTTP client: they receive any object with a
matching ``send_request`` and delegate every exchange to it.
"""
from __future__ import annotations

from typing import Any, Protocol, TypedDict, runtime_checkable


class TransportResponse(TypedDict):
    """Result of one HTTP exchange.

    ``body`` is the parsed JSON document, or the raw text when the response
    was not JSON. ``code`` is the HTTP status.
    """

    body: Any
    code: int | str


@runtime_checkable
class Transport(Protocol):
    """Port: perform one request against the push service.

    Implementations raise :class:`~airship_push.errors.UnauthorizedError`,
    :class:`~airship_push.errors.ForbiddenError` or
    :class:`~airship_push.errors.AirshipFailure` on failure.
    """

    def send_request(
        self,
        method: str,
        url: str,
        body: str | None = None,
        content_type: str | None = None,
    ) -> TransportResponse: ...


__all__ = ["Transport", "TransportResponse"]
