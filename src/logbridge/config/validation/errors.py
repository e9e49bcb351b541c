"""Config validation – errors raised while loading bridge settings."""
from __future__ import annotations

from logbridge.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """Settings could not be built from their source."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """A settings field without a default has no environment variable."""

    default_code = "missing_required_setting"

    def __init__(self, env_key: str) -> None:
        super().__init__(
            f"Environment variable {env_key} is required",
            detail={"env_key": env_key},
        )
        self.setting_name = env_key


class InvalidSettingValueError(ConfigError):
    """A setting is present but cannot be used, e.g. an unknown level name."""

    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(
            f"{setting_name}={value!r} rejected: {reason}",
            detail={"setting": setting_name, "value": value, "reason": reason},
        )
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
