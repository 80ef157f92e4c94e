"""Config errors raised while building :class:`~airship_push.config.ClientSettings`."""
from airship_push.errors import AirshipError


class ConfigError(AirshipError):
    """Client settings could not be loaded or are inconsistent."""
    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A credential such as ``AIRSHIP_KEY`` or ``AIRSHIP_SECRET`` is absent or empty."""
    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"Required setting '{setting_name}' is missing")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    """A connection option (``timeout``, ``max_retries``, ``base_url``) is out of range."""
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"Setting '{setting_name}' has invalid value {value!r}: {reason}"
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
