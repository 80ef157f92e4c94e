"""Testing fakes – FakeTransport."""
from __future__ import annotations

import dataclasses
import json
from collections import deque
from typing import Any

from airship_push.common.transport import TransportResponse


@dataclasses.dataclass(frozen=True)
class RecordedRequest:
    method: str
    url: str
    body: str | None
    content_type: str | None

    def json(self) -> Any:
        return json.loads(self.body) if self.body is not None else None


class FakeTransport:
    """In-memory Transport that records requests and replays queued responses.

    Queue responses with :meth:`respond` or exceptions with :meth:`fail`;
    when the queue is empty ``{"body": {}, "code": 200}`` is returned.
    """

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self._outcomes: deque[TransportResponse | BaseException] = deque()

    def respond(self, body: Any = None, code: int | str = 200) -> "FakeTransport":
        self._outcomes.append({"body": body if body is not None else {}, "code": code})
        return self

    def fail(self, exc: BaseException) -> "FakeTransport":
        self._outcomes.append(exc)
        return self

    def send_request(
        self,
        method: str,
        url: str,
        body: str | None = None,
        content_type: str | None = None,
    ) -> TransportResponse:
        self.requests.append(RecordedRequest(method, url, body, content_type))
        if not self._outcomes:
            return {"body": {}, "code": 200}
        outcome = self._outcomes.popleft()
        if isinstance(outcome, BaseException):
            raise outcome
        return outcome

    @property
    def count(self) -> int:
        return len(self.requests)

    def last(self) -> RecordedRequest | None:
        return self.requests[-1] if self.requests else None

    def reset(self) -> None:
        self.requests.clear()
        self._outcomes.clear()


__all__ = ["FakeTransport", "RecordedRequest"]
