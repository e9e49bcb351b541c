"""Config – 12-factor settings for the logging bridge."""

from logbridge.config.settings import EnvSettingsLoader, LogBridgeSettings, Settings, SettingsLoader
from logbridge.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LogBridgeSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
]
