"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog

DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"authorization", "secret", "master_secret", "password", "token"}
)


class RedactSensitiveFields:
    """structlog processor replacing values of sensitive keys with ``[REDACTED]``.

    Nested dicts are redacted recursively.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = sensitive_fields or DEFAULT_SENSITIVE_FIELDS

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        return self.redact_deep(event_dict)

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "RedactSensitiveFields", "get_logger"]
