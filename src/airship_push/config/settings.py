"""Config settings – Settings base class and ClientSettings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from airship_push.common.endpoints import DEFAULT_BASE_URL
from airship_push.config.errors import InvalidSettingValueError, MissingRequiredSettingError


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class ClientSettings(Settings):
    """Credentials and connection options for :class:`~airship_push.http.AirshipClient`.

    Loaded from ``AIRSHIP_*`` variables by
    :class:`~airship_push.config.EnvSettingsLoader`.
    """

    _prefix: ClassVar[str] = "AIRSHIP"

    key: str
    secret: str = dataclasses.field(repr=False)
    base_url: str = DEFAULT_BASE_URL
    timeout: float = 60.0
    max_retries: int = 0

    def _validate(self) -> None:
        if not self.key:
            raise MissingRequiredSettingError(f"{self._prefix}_KEY")
        if not self.secret:
            raise MissingRequiredSettingError(f"{self._prefix}_SECRET")
        if not self.base_url:
            raise InvalidSettingValueError("base_url", self.base_url, "must not be empty")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")
        if self.max_retries < 0:
            raise InvalidSettingValueError("max_retries", self.max_retries, "must be >= 0")


__all__ = ["ClientSettings", "Settings"]
