"""Observability – structured logging helpers."""
from airship_push.observability.logging.factory import configure_logging
from airship_push.observability.logging.processors import (
    DEFAULT_SENSITIVE_FIELDS,
    RedactSensitiveFields,
    get_logger,
)
from airship_push.observability.logging.protocol import Logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "Logger",
    "RedactSensitiveFields",
    "configure_logging",
    "get_logger",
]
