"""Push – payload builders, entities and responses."""
from airship_push.push import audience, payload, schedule
from airship_push.push.core import Push, ScheduledPush, ScheduledPushList
from airship_push.push.response import PushResponse

__all__ = [
    "Push",
    "PushResponse",
    "ScheduledPush",
    "ScheduledPushList",
    "audience",
    "payload",
    "schedule",
]
