"""Config settings – 12-factor env-based configuration."""
from logbridge.config.settings.base import Settings
from logbridge.config.settings.bridge import LogBridgeSettings
from logbridge.config.settings.loaders import EnvSettingsLoader, SettingsLoader

__all__ = ["EnvSettingsLoader", "LogBridgeSettings", "Settings", "SettingsLoader"]
