"""Common – service endpoints, relative to the transport's base URL."""
from __future__ import annotations

DEFAULT_BASE_URL = "https://go.urbanairship.com"
ACCEPT_HEADER = "application/vnd.urbanairship+json; version=3"
JSON_CONTENT_TYPE = "application/json"

PUSH_URL = "/api/push/"
SCHEDULES_URL = "/api/schedules/"

__all__ = [
    "ACCEPT_HEADER",
    "DEFAULT_BASE_URL",
    "JSON_CONTENT_TYPE",
    "PUSH_URL",
    "SCHEDULES_URL",
]
