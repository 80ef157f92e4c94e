"""Push payload builders.

Every builder takes keyword arguments and returns a FieldMap holding only the
arguments that were not ``None``. Outbound keys equal the parameter names
except where noted (``content_available`` -> ``"content-available"``,
``open_`` -> ``"open"``).

Usage::

    from airship_push.push import payload

    push.notification = payload.notification(
        alert="Hello",
        ios=payload.ios(badge="+1", content_available=True),
        android=payload.android(collapse_key="greeting"),
    )
    push.device_types = payload.device_types(["ios", "android"])
"""
from __future__ import annotations

from typing import Any

from airship_push.common.compact import FieldMap, compact
from airship_push.errors import EmptyPayloadError, RequiredParameterError, ValidationError

ALL = "all"

WNS_MESSAGE_TYPES = ("alert", "toast", "tile", "badge")


def _require(name: str, value: Any) -> None:
    if value is None:
        raise RequiredParameterError(name)


def notification(
    *,
    alert: Any = None,
    ios: FieldMap | None = None,
    android: FieldMap | None = None,
    amazon: FieldMap | None = None,
    wns: FieldMap | None = None,
    actions: FieldMap | None = None,
    interactive: FieldMap | None = None,
    title: str | None = None,
) -> FieldMap:
    """Top-level notification object; at least one field must be given."""
    payload = compact({
        "alert": alert,
        "actions": actions,
        "ios": ios,
        "android": android,
        "amazon": amazon,
        "wns": wns,
        "interactive": interactive,
        "title": title,
    })
    if not payload:
        raise EmptyPayloadError("Notification body is empty")
    return payload


def ios(
    *,
    alert: Any = None,
    badge: int | str | None = None,
    sound: str | None = None,
    extra: dict[str, Any] | None = None,
    expiry: int | str | None = None,
    category: str | None = None,
    interactive: FieldMap | None = None,
    content_available: bool | None = None,
    priority: int | None = None,
    title: str | None = None,
) -> FieldMap:
    return compact({
        "alert": alert,
        "badge": badge,
        "sound": sound,
        "extra": extra,
        "expiry": expiry,
        "category": category,
        "interactive": interactive,
        "content-available": content_available,
        "priority": priority,
        "title": title,
    })


def amazon(
    *,
    alert: str | None = None,
    consolidation_key: str | None = None,
    expires_after: int | str | None = None,
    extra: dict[str, Any] | None = None,
    title: str | None = None,
    summary: str | None = None,
    interactive: FieldMap | None = None,
) -> FieldMap:
    return compact({
        "alert": alert,
        "consolidation_key": consolidation_key,
        "expires_after": expires_after,
        "extra": extra,
        "title": title,
        "summary": summary,
        "interactive": interactive,
    })


def android(
    *,
    alert: str | None = None,
    collapse_key: str | None = None,
    time_to_live: int | str | None = None,
    extra: dict[str, Any] | None = None,
    delay_while_idle: bool | None = None,
    interactive: FieldMap | None = None,
    title: str | None = None,
) -> FieldMap:
    return compact({
        "alert": alert,
        "collapse_key": collapse_key,
        "time_to_live": time_to_live,
        "extra": extra,
        "delay_while_idle": delay_while_idle,
        "interactive": interactive,
        "title": title,
    })


def wns_payload(
    *,
    alert: str | None = None,
    toast: Any = None,
    tile: Any = None,
    badge: Any = None,
) -> FieldMap:
    """Windows override; exactly one of alert, toast, tile or badge."""
    payload = compact({
        "alert": alert,
        "toast": toast,
        "tile": tile,
        "badge": badge,
    })
    if len(payload) != 1:
        raise ValidationError(
            f"Must specify one message type, got {len(payload)} of {', '.join(WNS_MESSAGE_TYPES)}"
        )
    return payload


def message(
    *,
    title: str,
    body: str,
    content_type: str | None = None,
    content_encoding: str | None = None,
    extra: dict[str, Any] | None = None,
    expiry: int | str | None = None,
    icons: dict[str, Any] | None = None,
    options: dict[str, Any] | None = None,
) -> FieldMap:
    """Rich message center payload. ``title`` and ``body`` are required."""
    _require("title", title)
    _require("body", body)
    return compact({
        "title": title,
        "body": body,
        "content_type": content_type,
        "content_encoding": content_encoding,
        "extra": extra,
        "expiry": expiry,
        "icons": icons,
        "options": options,
    })


def in_app(
    *,
    alert: str | None = None,
    display_type: str | None = None,
    display: dict[str, Any] | None = None,
    expiry: int | str | None = None,
    actions: FieldMap | None = None,
    interactive: FieldMap | None = None,
    extra: dict[str, Any] | None = None,
) -> FieldMap:
    return compact({
        "alert": alert,
        "display_type": display_type,
        "display": display,
        "expiry": expiry,
        "actions": actions,
        "interactive": interactive,
        "extra": extra,
    })


def interactive(*, type: str, button_actions: dict[str, Any] | None = None) -> FieldMap:  # noqa: A002
    """Interactive notification; ``type`` names a predefined or custom category."""
    _require("type", type)
    return compact({"type": type, "button_actions": button_actions})


def all_() -> str:
    """The ``"all"`` device-type selector."""
    return ALL


def device_types(types: Any) -> Any:
    """Device types to target: ``"all"`` or a list such as ``["ios", "android"]``."""
    return types


def options(*, expiry: int | str) -> FieldMap:
    """Push options. ``expiry`` is seconds from now or an ISO timestamp."""
    _require("expiry", expiry)
    return {"expiry": expiry}


def actions(
    *,
    add_tag: Any = None,
    remove_tag: Any = None,
    open_: FieldMap | None = None,
    share: str | None = None,
    app_defined: dict[str, Any] | None = None,
) -> FieldMap:
    return compact({
        "add_tag": add_tag,
        "remove_tag": remove_tag,
        "open": open_,
        "share": share,
        "app_defined": app_defined,
    })


def campaigns(*, categories: list[str] | str | None = None) -> FieldMap:
    # Reporting categories attached to the push.
    return compact({"categories": categories})


__all__ = [
    "ALL",
    "actions",
    "all_",
    "amazon",
    "android",
    "campaigns",
    "device_types",
    "in_app",
    "interactive",
    "ios",
    "message",
    "notification",
    "options",
    "wns_payload",
]
