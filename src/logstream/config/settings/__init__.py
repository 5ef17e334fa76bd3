"""Config settings – env-based configuration."""
from logstream.config.settings.base import Settings
from logstream.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from logstream.config.settings.stream import LogClientSettings, StreamSettings

__all__ = ["EnvSettingsLoader", "LogClientSettings", "Settings", "SettingsLoader", "StreamSettings"]
