"""
airship_push – client SDK for the push notification service.

Import path convention::

    from airship_push.http import AirshipClient
    from airship_push.push import Push, ScheduledPush, payload, audience, schedule
    from airship_push.errors import AirshipFailure, ValidationError
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
