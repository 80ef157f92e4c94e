"""Client-side errors – raised before any request leaves the process."""

from __future__ import annotations

from typing import Any

from airship_push.errors.base import AirshipError


class ClientError(AirshipError):
    """Invalid input detected locally."""

    default_code = "client_error"


class ValidationError(ClientError, ValueError):
    """A payload builder invariant was violated.

    ``field`` names the offending parameter when there is a single one.
    """

    default_code = "validation_error"

    def __init__(self, message: str, *, field: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.field = field

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.field is not None:
            base["field"] = self.field
        return base


class RequiredParameterError(ValidationError):
    """A required builder parameter was passed as ``None``."""

    default_code = "required_parameter"

    def __init__(self, field: str, **kwargs: Any) -> None:
        super().__init__(f"{field} must not be None", field=field, **kwargs)


class EmptyPayloadError(ValidationError):
    """A builder that needs at least one field received none."""

    default_code = "empty_payload"


class ArgumentError(ClientError, ValueError):
    """An entity operation was called in a state or with an argument it rejects."""

    default_code = "argument_error"


class MissingUrlError(ArgumentError):
    """A scheduled push operation needs a server-assigned URL."""

    default_code = "missing_url"

    def __init__(self, operation: str, **kwargs: Any) -> None:
        super().__init__(f"Cannot {operation} a ScheduledPush without a url.", **kwargs)
        self.operation = operation


__all__ = [
    "ArgumentError",
    "ClientError",
    "EmptyPayloadError",
    "MissingUrlError",
    "RequiredParameterError",
    "ValidationError",
]
