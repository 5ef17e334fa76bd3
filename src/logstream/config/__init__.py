"""Config – settings dataclasses and loaders."""

from logstream.config.settings import (
    EnvSettingsLoader,
    LogClientSettings,
    Settings,
    SettingsLoader,
    StreamSettings,
)
from logstream.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "LogClientSettings",
    "MissingRequiredSettingError",
    "Settings",
    "SettingsLoader",
    "StreamSettings",
]
