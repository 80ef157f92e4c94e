"""Audience selectors for :attr:`Push.audience`.

Selectors compose::

    audience.or_(audience.tag("vip"), audience.and_(audience.tag("beta"), audience.segment("s1")))
"""
from __future__ import annotations

import uuid
from typing import Any

from airship_push.common.compact import FieldMap, compact
from airship_push.errors import ValidationError

ALL = "all"


def _channel_id(kind: str, value: str) -> str:
    try:
        uuid.UUID(str(value))
    except ValueError as exc:
        raise ValidationError(f"Invalid {kind} channel id: {value!r}", field=kind, cause=exc) from exc
    return str(value)


def all_() -> str:
    return ALL


def ios_channel(uuid_: str) -> FieldMap:
    return {"ios_channel": _channel_id("ios_channel", uuid_)}


def android_channel(uuid_: str) -> FieldMap:
    return {"android_channel": _channel_id("android_channel", uuid_)}


def amazon_channel(uuid_: str) -> FieldMap:
    return {"amazon_channel": _channel_id("amazon_channel", uuid_)}


def channel(uuid_: str) -> FieldMap:
    """Any-platform channel id."""
    return {"channel": _channel_id("channel", uuid_)}


def named_user(name: str) -> FieldMap:
    return {"named_user": name}


def tag(value: str, *, group: str | None = None) -> FieldMap:
    return compact({"tag": value, "group": group})


def alias(value: str) -> FieldMap:
    return {"alias": value}


def segment(segment_id: str) -> FieldMap:
    return {"segment": segment_id}


def _compound(operator: str, children: tuple[Any, ...]) -> FieldMap:
    if not children:
        raise ValidationError(f"{operator} needs at least one selector", field=operator)
    return {operator: list(children)}


def and_(*children: FieldMap) -> FieldMap:
    return _compound("and", children)


def or_(*children: FieldMap) -> FieldMap:
    return _compound("or", children)


def not_(child: FieldMap) -> FieldMap:
    return {"not": child}


__all__ = [
    "ALL",
    "alias",
    "all_",
    "amazon_channel",
    "and_",
    "android_channel",
    "channel",
    "ios_channel",
    "named_user",
    "not_",
    "or_",
    "segment",
    "tag",
]
