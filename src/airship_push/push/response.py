"""PushResponse – normalized result of a push or schedule request."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping

from airship_push.common.compact import first_or_none
from airship_push.common.transport import TransportResponse


@dataclasses.dataclass(frozen=True)
class PushResponse:
    """Typed view over one HTTP response from the push service.

    Build it with :meth:`from_http` (body + status) or :meth:`from_transport`
    (the dict returned by ``Transport.send_request``). A body that is
    ``None``, empty or not a mapping yields an empty :attr:`payload`.
    """

    payload: dict[str, Any]
    status_code: str
    ok: bool | None = None
    push_ids: list[str] | None = None
    schedule_url: str | None = None
    operation_id: str | None = None

    @classmethod
    def from_http(cls, body: Any = None, code: Any = None) -> "PushResponse":
        payload = dict(body) if isinstance(body, Mapping) and body else {}
        return cls(
            payload=payload,
            status_code=str(code),
            ok=payload.get("ok"),
            push_ids=payload.get("push_ids"),
            schedule_url=first_or_none(payload.get("schedule_urls")),
            operation_id=payload.get("operation_id"),
        )

    @classmethod
    def from_transport(cls, response: TransportResponse) -> "PushResponse":
        return cls.from_http(response.get("body"), response.get("code"))

    def format(self) -> str:
        """Multi-line diagnostic: status header, then one ``key:\\tvalue`` line per body key."""
        lines = [f"Received [{self.status_code}] response code. \nHeaders: \tBody:\n"]
        for key, value in self.payload.items():
            lines.append(f"{key}:\t{'None' if value is None else value}\n")
        return "".join(lines)


__all__ = ["PushResponse"]
