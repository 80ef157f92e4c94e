"""Transport errors – failures reported by the HTTP layer or the service."""

from __future__ import annotations

from typing import Any

from airship_push.errors.base import AirshipError


class TransportError(AirshipError):
    """A request could not be completed successfully."""

    default_code = "transport_error"

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.status_code = status_code


class UnauthorizedError(TransportError):
    """Authentication failed (HTTP 401)."""

    default_code = "unauthorized"


class ForbiddenError(TransportError):
    """The application lacks the entitlement for this request (HTTP 403)."""

    default_code = "forbidden"


class AirshipFailure(TransportError):
    """Any other unsuccessful response, timeout or connection failure.

    When the service returned a JSON error document its ``error``,
    ``error_code`` and ``details`` members are exposed as attributes.
    """

    default_code = "airship_failure"

    def __init__(
        self,
        message: str,
        *,
        error: str | None = None,
        error_code: int | None = None,
        details: Any = None,
        response_body: Any = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.error = error
        self.error_code = error_code
        self.details = details
        self.response_body = response_body

    @property
    def is_retryable(self) -> bool:
        """Connection failures and 5xx responses may succeed on a later attempt."""
        return self.status_code is None or self.status_code >= 500

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        base["status_code"] = self.status_code
        if self.error_code is not None:
            base["error_code"] = self.error_code
        return base


__all__ = [
    "AirshipFailure",
    "ForbiddenError",
    "TransportError",
    "UnauthorizedError",
]
