"""Error hierarchy – public re-export surface.

Hierarchy::

    AirshipError
    ├── ClientError              (client.py)
    │   ├── ValidationError
    │   │   ├── RequiredParameterError
    │   │   └── EmptyPayloadError
    │   └── ArgumentError
    │       └── MissingUrlError
    ├── TransportError           (transport.py)
    │   ├── UnauthorizedError
    │   ├── ForbiddenError
    │   └── AirshipFailure
    └── ConfigError              (airship_push.config.errors)
"""

from airship_push.errors.base import AirshipError
from airship_push.errors.client import (
    ArgumentError,
    ClientError,
    EmptyPayloadError,
    MissingUrlError,
    RequiredParameterError,
    ValidationError,
)
from airship_push.errors.transport import (
    AirshipFailure,
    ForbiddenError,
    TransportError,
    UnauthorizedError,
)

__all__ = [
    "AirshipError",
    "AirshipFailure",
    "ArgumentError",
    "ClientError",
    "EmptyPayloadError",
    "ForbiddenError",
    "MissingUrlError",
    "RequiredParameterError",
    "TransportError",
    "UnauthorizedError",
    "ValidationError",
]
