"""Unit tests for config settings & validation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import pytest

from logstream.config import (
    ConfigError,
    EnvSettingsLoader,
    InvalidSettingValueError,
    LogClientSettings,
    MissingRequiredSettingError,
    Settings,
    StreamSettings,
)


@dataclass
class FlagSettings(Settings):
    _prefix: ClassVar[str] = "APP"

    debug: bool = False
    ratio: float = 1.0


# ---------------------------------------------------------------------------
# StreamSettings
# ---------------------------------------------------------------------------


class TestStreamSettings:
    def test_defaults(self) -> None:
        settings = StreamSettings()
        assert settings.read_size == 4096
        assert settings.max_record_size == 0

    def test_rejects_non_positive_read_size(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            StreamSettings(read_size=0)
        assert exc_info.value.setting_name == "read_size"

    def test_rejects_negative_max_record_size(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            StreamSettings(max_record_size=-1)

    def test_loads_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOGSTREAM_READ_SIZE", "512")
        monkeypatch.setenv("LOGSTREAM_MAX_RECORD_SIZE", "65536")
        settings = EnvSettingsLoader().load(StreamSettings)
        assert settings.read_size == 512
        assert settings.max_record_size == 65536

    def test_env_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("LOGSTREAM_READ_SIZE", raising=False)
        monkeypatch.delenv("LOGSTREAM_MAX_RECORD_SIZE", raising=False)
        assert EnvSettingsLoader().load(StreamSettings) == StreamSettings()

    def test_non_integer_env_value(self) -> None:
        loader = EnvSettingsLoader({"LOGSTREAM_READ_SIZE": "lots"})
        with pytest.raises(InvalidSettingValueError) as exc_info:
            loader.load(StreamSettings)
        assert exc_info.value.setting_name == "LOGSTREAM_READ_SIZE"

    def test_invalid_env_value_keeps_validation_error(self) -> None:
        loader = EnvSettingsLoader({"LOGSTREAM_READ_SIZE": "-4"})
        with pytest.raises(InvalidSettingValueError) as exc_info:
            loader.load(StreamSettings)
        assert exc_info.value.setting_name == "read_size"


# ---------------------------------------------------------------------------
# LogClientSettings
# ---------------------------------------------------------------------------


class TestLogClientSettings:
    def test_defaults(self) -> None:
        settings = LogClientSettings(base_url="https://kes:7373")
        assert settings.timeout == 10.0
        assert settings.error_log_path == "/v1/log/error"
        assert settings.audit_log_path == "/v1/log/audit"

    def test_base_url_required_in_env(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(LogClientSettings)
        assert exc_info.value.setting_name == "LOGSTREAM_HTTP_BASE_URL"

    def test_loads_from_mapping(self) -> None:
        settings = EnvSettingsLoader(
            {"LOGSTREAM_HTTP_BASE_URL": "https://kes:7373", "LOGSTREAM_HTTP_TIMEOUT": "2.5"}
        ).load(LogClientSettings)
        assert settings.base_url == "https://kes:7373"
        assert settings.timeout == 2.5

    def test_rejects_empty_base_url(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            LogClientSettings(base_url="")

    def test_rejects_non_positive_timeout(self) -> None:
        with pytest.raises(ConfigError):
            LogClientSettings(base_url="http://kes", timeout=0)


class TestEnvSettingsLoader:
    @pytest.mark.parametrize("truthy", ["true", "True", "1", "yes", "on"])
    def test_bool_true(self, truthy: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": truthy}).load(FlagSettings).debug is True

    @pytest.mark.parametrize("falsy", ["false", "0", "no", "off"])
    def test_bool_false(self, falsy: str) -> None:
        assert EnvSettingsLoader({"APP_DEBUG": falsy}).load(FlagSettings).debug is False

    def test_float(self) -> None:
        assert EnvSettingsLoader({"APP_RATIO": "0.25"}).load(FlagSettings).ratio == 0.25

    def test_config_errors_are_application_errors(self) -> None:
        from logstream.kernel.errors import ApplicationError

        assert issubclass(ConfigError, ApplicationError)
        assert MissingRequiredSettingError("X").code == "missing_required_setting"
