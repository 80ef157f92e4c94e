"""Schedule builders for :attr:`ScheduledPush.schedule`."""
from __future__ import annotations

from datetime import UTC, datetime

from airship_push.common.compact import FieldMap
from airship_push.errors import ValidationError

TIME_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _format(name: str, when: datetime) -> str:
    if not isinstance(when, datetime):
        raise ValidationError(f"{name} requires a datetime, got {type(when).__name__}", field=name)
    return when.strftime(TIME_FORMAT)


def scheduled_time(when: datetime) -> FieldMap:
    """Deliver at *when*; aware datetimes are converted to UTC first."""
    if isinstance(when, datetime) and when.tzinfo is not None:
        when = when.astimezone(UTC)
    return {"scheduled_time": _format("scheduled_time", when)}


def local_scheduled_time(when: datetime) -> FieldMap:
    """Deliver at *when* in each device's local time zone."""
    return {"local_scheduled_time": _format("local_scheduled_time", when)}


__all__ = ["TIME_FORMAT", "local_scheduled_time", "scheduled_time"]
