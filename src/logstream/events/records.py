"""Raw records – the wire shape of one log line.

``from_wire`` accepts the object produced by the JSON decoder and raises
:class:`ValueError` when a field has the wrong type or an unparsable literal.
Absent and ``null`` fields take their zero value and unknown fields are
ignored. ``to_wire`` produces the object the relay encodes.
"""
from __future__ import annotations

import dataclasses
import ipaddress
from datetime import datetime, timedelta
from ipaddress import IPv4Address, IPv6Address
from typing import Any

from logstream.events.models import AuditEvent, ErrorEvent
from logstream.kernel.time import (
    format_duration,
    format_rfc3339,
    from_nanoseconds,
    parse_duration,
    parse_rfc3339,
)
from logstream.kernel.types import Identity

_JSON_TYPE_NAMES = {
    dict: "object",
    list: "array",
    str: "string",
    bool: "bool",
    int: "number",
    float: "number",
}

# Integer fields are signed 64-bit on the wire.
_MIN_INT = -(1 << 63)
_MAX_INT = (1 << 63) - 1


def _type_name(value: Any) -> str:
    return _JSON_TYPE_NAMES.get(type(value), type(value).__name__)


def _object(value: Any, field: str) -> dict[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{field}: cannot decode {_type_name(value)} into object")
    return value


def _string(obj: dict[str, Any], key: str, field: str) -> str:
    value = obj.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"{field}: cannot decode {_type_name(value)} into string")
    return value


def _integer(obj: dict[str, Any], key: str, field: str) -> int:
    value = obj.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{field}: cannot decode {_type_name(value)} into integer")
    if not _MIN_INT <= value <= _MAX_INT:
        raise ValueError(f"{field}: number {value} overflows integer")
    return value


def _timestamp(obj: dict[str, Any], key: str, field: str) -> datetime | None:
    value = obj.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field}: cannot decode {_type_name(value)} into timestamp")
    try:
        return parse_rfc3339(value)
    except ValueError as exc:
        raise ValueError(f"{field}: {exc}") from exc


def _duration(obj: dict[str, Any], key: str, field: str) -> timedelta:
    value = obj.get(key)
    if value is None:
        return timedelta(0)
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise ValueError(f"{field}: cannot decode {_type_name(value)} into duration")
    try:
        if isinstance(value, int):
            return from_nanoseconds(value)
        return parse_duration(value)
    except ValueError as exc:
        raise ValueError(f"{field}: {exc}") from exc


def _ip(obj: dict[str, Any], key: str, field: str) -> IPv4Address | IPv6Address | None:
    value = _string(obj, key, field)
    if not value:
        return None
    try:
        return ipaddress.ip_address(value)
    except ValueError as exc:
        raise ValueError(f"{field}: invalid IP address {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class ErrorRecord:
    message: str = ""

    @classmethod
    def from_wire(cls, obj: dict[str, Any]) -> "ErrorRecord":
        return cls(message=_string(obj, "message", "message"))

    def to_wire(self) -> dict[str, Any]:
        return {"message": self.message}

    def to_event(self) -> ErrorEvent:
        return ErrorEvent(message=self.message)


@dataclasses.dataclass(frozen=True)
class AuditRequest:
    ip: IPv4Address | IPv6Address | None = None
    path: str = ""
    identity: Identity = dataclasses.field(default_factory=Identity)


@dataclasses.dataclass(frozen=True)
class AuditResponse:
    code: int = 0
    time: timedelta = dataclasses.field(default_factory=timedelta)


@dataclasses.dataclass(frozen=True)
class AuditRecord:
    time: datetime | None = None
    request: AuditRequest = dataclasses.field(default_factory=AuditRequest)
    response: AuditResponse = dataclasses.field(default_factory=AuditResponse)

    @classmethod
    def from_wire(cls, obj: dict[str, Any]) -> "AuditRecord":
        request = _object(obj.get("request"), "request")
        response = _object(obj.get("response"), "response")
        return cls(
            time=_timestamp(obj, "time", "time"),
            request=AuditRequest(
                ip=_ip(request, "ip", "request.ip"),
                path=_string(request, "path", "request.path"),
                identity=Identity(_string(request, "identity", "request.identity")),
            ),
            response=AuditResponse(
                code=_integer(response, "code", "response.code"),
                time=_duration(response, "time", "response.time"),
            ),
        )

    def to_wire(self) -> dict[str, Any]:
        return {
            "time": format_rfc3339(self.time) if self.time is not None else None,
            "request": {
                "ip": str(self.request.ip) if self.request.ip is not None else "",
                "path": self.request.path,
                "identity": self.request.identity.value,
            },
            "response": {
                "code": self.response.code,
                "time": format_duration(self.response.time),
            },
        }

    def to_event(self) -> AuditEvent:
        return AuditEvent(
            timestamp=self.time,
            api_path=self.request.path,
            client_ip=self.request.ip,
            client_identity=self.request.identity,
            status_code=self.response.code,
            response_time=self.response.time,
        )


__all__ = ["AuditRecord", "AuditRequest", "AuditResponse", "ErrorRecord"]
