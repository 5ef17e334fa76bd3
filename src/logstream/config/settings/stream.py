"""Config settings – event stream and log client settings."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from logstream.config.settings.base import Settings
from logstream.config.validation import InvalidSettingValueError


@dataclasses.dataclass
class StreamSettings(Settings):
    """Tuning knobs for :class:`~logstream.stream.EventStream`.

    ``read_size`` is the number of bytes requested from the source per read.
    ``max_record_size`` caps the bytes of one record, ``0`` meaning no cap.
    """

    _prefix: ClassVar[str] = "LOGSTREAM"

    read_size: int = 4096
    max_record_size: int = 0

    def _validate(self) -> None:
        if self.read_size <= 0:
            raise InvalidSettingValueError("read_size", self.read_size, "must be positive")
        if self.max_record_size < 0:
            raise InvalidSettingValueError("max_record_size", self.max_record_size, "must not be negative")


@dataclasses.dataclass
class LogClientSettings(Settings):
    """Where and how :class:`~logstream.adapters.http.LogClient` connects."""

    _prefix: ClassVar[str] = "LOGSTREAM_HTTP"

    base_url: str
    timeout: float = 10.0
    error_log_path: str = "/v1/log/error"
    audit_log_path: str = "/v1/log/audit"

    def _validate(self) -> None:
        if not self.base_url:
            raise InvalidSettingValueError("base_url", self.base_url, "must not be empty")
        if self.timeout <= 0:
            raise InvalidSettingValueError("timeout", self.timeout, "must be positive")


__all__ = ["LogClientSettings", "StreamSettings"]
