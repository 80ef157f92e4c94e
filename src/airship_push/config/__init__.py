"""Config – client settings and environment loading."""
from airship_push.config.errors import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from airship_push.config.loaders import EnvSettingsLoader, SettingsLoader
from airship_push.config.settings import ClientSettings, Settings

__all__ = [
    "ClientSettings",
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
