"""Common – FieldMap helpers, endpoints and the transport port."""
from airship_push.common.compact import FieldMap, compact, first_or_none
from airship_push.common.endpoints import (
    ACCEPT_HEADER,
    DEFAULT_BASE_URL,
    JSON_CONTENT_TYPE,
    PUSH_URL,
    SCHEDULES_URL,
)
from airship_push.common.transport import Transport, TransportResponse

__all__ = [
    "ACCEPT_HEADER",
    "DEFAULT_BASE_URL",
    "FieldMap",
    "JSON_CONTENT_TYPE",
    "PUSH_URL",
    "SCHEDULES_URL",
    "Transport",
    "TransportResponse",
    "compact",
    "first_or_none",
]
