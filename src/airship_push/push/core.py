"""Push entities – Push, ScheduledPush and ScheduledPushList."""
from __future__ import annotations

import json
from typing import Any, Mapping

from airship_push.common.compact import FieldMap, compact
from airship_push.common.endpoints import JSON_CONTENT_TYPE, PUSH_URL, SCHEDULES_URL
from airship_push.common.transport import Transport, TransportResponse
from airship_push.errors import ArgumentError, MissingUrlError
from airship_push.observability.logging import Logger, get_logger
from airship_push.pagination import PageIterator
from airship_push.push.response import PushResponse


class Push:
    """A push notification.

    Assign the payload sections as attributes, then call :meth:`send_push`.
    Nothing is validated on assignment.
    """

    def __init__(self, transport: Transport, *, logger: Logger | None = None) -> None:
        self._transport = transport
        self._logger = logger or get_logger(__name__)
        self.audience: Any = None
        self.notification: FieldMap | None = None
        self.campaigns: FieldMap | None = None
        self.options: FieldMap | None = None
        self.device_types: Any = None
        self.message: FieldMap | None = None
        self.in_app: FieldMap | None = None

    def payload(self) -> FieldMap:
        return compact({
            "audience": self.audience,
            "notification": self.notification,
            "campaigns": self.campaigns,
            "options": self.options,
            "device_types": self.device_types,
            "message": self.message,
            "in_app": self.in_app,
        })

    def send_push(self) -> PushResponse:
        """Send the push.

        Raises
        ------
        UnauthorizedError
            Authentication failed.
        ForbiddenError
            The app lacks the entitlement.
        AirshipFailure
            Any other failure.
        """
        response = self._transport.send_request(
            method="POST",
            body=json.dumps(self.payload()),
            url=PUSH_URL,
            content_type=JSON_CONTENT_TYPE,
        )
        pr = PushResponse.from_transport(response)
        self._logger.info(
            "push.sent",
            status_code=pr.status_code,
            push_ids=pr.push_ids,
            operation_id=pr.operation_id,
            summary=pr.format(),
        )
        return pr


class ScheduledPush:
    """A push delivered later according to :attr:`schedule`.

    :attr:`url` is ``None`` until :meth:`send_push` stores the URL assigned
    by the service, or until the instance is rebuilt with :meth:`from_url`.
    :meth:`cancel` and :meth:`update` need it.
    """

    def __init__(self, transport: Transport, *, logger: Logger | None = None) -> None:
        self._transport = transport
        self._logger = logger or get_logger(__name__)
        self.schedule: FieldMap | None = None
        self.name: str | None = None
        self.push: Push | None = None
        self.url: str | None = None

    def payload(self) -> FieldMap:
        return compact({
            "name": self.name,
            "schedule": self.schedule,
            "push": self.push.payload() if self.push is not None else None,
        })

    def send_push(self) -> PushResponse:
        """Create the schedule and remember its URL."""
        response = self._transport.send_request(
            method="POST",
            body=json.dumps(self.payload()),
            url=SCHEDULES_URL,
            content_type=JSON_CONTENT_TYPE,
        )
        pr = PushResponse.from_transport(response)
        self.url = pr.schedule_url
        self._logger.info(
            "scheduled_push.created",
            status_code=pr.status_code,
            url=self.url,
            summary=pr.format(),
        )
        return pr

    @classmethod
    def from_url(
        cls,
        transport: Transport,
        url: str,
        *,
        logger: Logger | None = None,
    ) -> "ScheduledPush":
        """Rebuild a scheduled push from its existing URL.

        Raises ``KeyError`` when the response lacks ``push`` or it is null.
        """
        response = transport.send_request(method="GET", body=None, url=url)
        body = response["body"]
        push_body = body["push"]
        if not isinstance(push_body, Mapping):
            raise KeyError("push")

        push = Push(transport, logger=logger)
        push.audience = push_body.get("audience")
        push.notification = push_body.get("notification")
        push.campaigns = push_body.get("campaigns")
        push.device_types = push_body.get("device_types")
        push.message = push_body.get("message")
        push.options = push_body.get("options")
        push.in_app = push_body.get("in_app")

        scheduled = cls(transport, logger=logger)
        scheduled.name = body.get("name")
        scheduled.schedule = body.get("schedule")
        scheduled.push = push
        scheduled.url = url
        return scheduled

    def cancel(self) -> PushResponse:
        if self.url is None:
            raise MissingUrlError("cancel")
        response = self._transport.send_request(
            method="DELETE",
            body=None,
            url=self.url,
            content_type=JSON_CONTENT_TYPE,
        )
        pr = PushResponse.from_transport(response)
        self._logger.info("scheduled_push.cancelled", url=self.url, status_code=pr.status_code)
        return pr

    def update(self) -> PushResponse:
        """Replace the server-side schedule with the current :meth:`payload`."""
        if self.url is None:
            raise MissingUrlError("update")
        response = self._transport.send_request(
            method="PUT",
            body=json.dumps(self.payload()),
            url=self.url,
            content_type=JSON_CONTENT_TYPE,
        )
        pr = PushResponse.from_transport(response)
        self._logger.info(
            "scheduled_push.updated",
            url=self.url,
            status_code=pr.status_code,
            summary=pr.format(),
        )
        return pr

    def list(self, schedule_id: str) -> TransportResponse:
        """Look up one schedule by id.

        Returns the raw transport response, not a :class:`PushResponse`.
        """
        if not isinstance(schedule_id, str) or not schedule_id:
            raise ArgumentError("schedule_id must be a non-empty string")
        response = self._transport.send_request(method="GET", url=SCHEDULES_URL + schedule_id)
        self._logger.info("scheduled_push.retrieved", schedule_id=schedule_id)
        return response


class ScheduledPushList(PageIterator):
    """Iterate every scheduled push of the application."""

    def __init__(self, transport: Transport, *, logger: Logger | None = None) -> None:
        super().__init__(
            transport,
            next_page=SCHEDULES_URL,
            data_attribute="schedules",
            logger=logger,
        )


__all__ = ["Push", "ScheduledPush", "ScheduledPushList"]
