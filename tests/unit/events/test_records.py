"""Unit tests for raw records and their mapping to domain events."""

from __future__ import annotations

import dataclasses
from datetime import UTC, datetime, timedelta
from ipaddress import IPv4Address, IPv6Address

import pytest

from logstream.events import (
    AUDIT_EVENTS,
    ERROR_EVENTS,
    AuditEvent,
    AuditRecord,
    AuditRequest,
    AuditResponse,
    ErrorEvent,
    ErrorRecord,
)
from logstream.kernel.time import from_nanoseconds
from logstream.kernel.types import Identity

AUDIT_WIRE = {
    "time": "2024-01-01T00:00:00Z",
    "request": {"ip": "10.0.0.1", "path": "/v1/key/create", "identity": "abc123"},
    "response": {"code": 200, "time": "15ms"},
}


# ---------------------------------------------------------------------------
# ErrorRecord
# ---------------------------------------------------------------------------


class TestErrorRecord:
    def test_from_wire(self) -> None:
        assert ErrorRecord.from_wire({"message": "disk full"}) == ErrorRecord("disk full")

    def test_missing_and_null_message_are_empty(self) -> None:
        assert ErrorRecord.from_wire({}).message == ""
        assert ErrorRecord.from_wire({"message": None}).message == ""

    def test_unknown_fields_ignored(self) -> None:
        assert ErrorRecord.from_wire({"message": "a", "level": "warn"}) == ErrorRecord("a")

    def test_wrong_type(self) -> None:
        with pytest.raises(ValueError, match="message: cannot decode number into string"):
            ErrorRecord.from_wire({"message": 5})

    def test_to_event(self) -> None:
        assert ErrorRecord("a").to_event() == ErrorEvent(message="a")

    def test_to_wire(self) -> None:
        assert ErrorRecord("a").to_wire() == {"message": "a"}


# ---------------------------------------------------------------------------
# AuditRecord
# ---------------------------------------------------------------------------


class TestAuditRecord:
    def test_maps_to_event(self) -> None:
        event = AuditRecord.from_wire(AUDIT_WIRE).to_event()
        assert event == AuditEvent(
            timestamp=datetime(2024, 1, 1, tzinfo=UTC),
            api_path="/v1/key/create",
            client_ip=IPv4Address("10.0.0.1"),
            client_identity=Identity("abc123"),
            status_code=200,
            response_time=timedelta(milliseconds=15),
        )

    def test_ipv6(self) -> None:
        wire = {"request": {"ip": "::1"}}
        assert AuditRecord.from_wire(wire).request.ip == IPv6Address("::1")

    def test_missing_fields_are_zero(self) -> None:
        record = AuditRecord.from_wire({})
        assert record == AuditRecord()
        event = record.to_event()
        assert event.timestamp is None
        assert event.client_ip is None
        assert event.client_identity.is_unknown
        assert event.status_code == 0
        assert event.response_time == timedelta(0)

    def test_null_sections_are_zero(self) -> None:
        assert AuditRecord.from_wire({"time": None, "request": None, "response": None}) == AuditRecord()

    def test_integer_duration_is_nanoseconds(self) -> None:
        record = AuditRecord.from_wire({"response": {"time": 15_000_000}})
        assert record.response.time == timedelta(milliseconds=15)

    @pytest.mark.parametrize(
        ("wire", "match"),
        [
            ({"time": "01/01/2024"}, "time"),
            ({"time": 1704067200}, "time: cannot decode number"),
            ({"request": {"ip": "10.0.0.300"}}, "request.ip"),
            ({"request": {"ip": 10}}, "request.ip"),
            ({"request": {"path": ["/v1"]}}, "request.path: cannot decode array"),
            ({"request": "10.0.0.1"}, "request: cannot decode string into object"),
            ({"response": {"code": "200"}}, "response.code"),
            ({"response": {"code": 200.5}}, "response.code"),
            ({"response": {"code": True}}, "response.code: cannot decode bool"),
            ({"response": {"time": "15 parsecs"}}, "response.time"),
            ({"response": {"time": {}}}, "response.time"),
        ],
    )
    def test_malformed_fields(self, wire: dict, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            AuditRecord.from_wire(wire)

    @pytest.mark.parametrize("nanoseconds", [(1 << 63) - 1, -(1 << 63)])
    def test_integer_duration_at_int64_bounds(self, nanoseconds: int) -> None:
        record = AuditRecord.from_wire({"response": {"time": nanoseconds}})
        assert record.response.time == from_nanoseconds(nanoseconds)

    @pytest.mark.parametrize("nanoseconds", [1 << 63, -(1 << 63) - 1, 10**26])
    def test_integer_duration_beyond_int64(self, nanoseconds: int) -> None:
        with pytest.raises(ValueError, match="response.time: duration .* out of range"):
            AuditRecord.from_wire({"response": {"time": nanoseconds}})

    @pytest.mark.parametrize("code", [(1 << 63) - 1, -(1 << 63)])
    def test_code_at_int64_bounds(self, code: int) -> None:
        assert AuditRecord.from_wire({"response": {"code": code}}).response.code == code

    @pytest.mark.parametrize("code", [1 << 63, -(1 << 63) - 1])
    def test_code_beyond_int64(self, code: int) -> None:
        with pytest.raises(ValueError, match="response.code: number .* overflows integer"):
            AuditRecord.from_wire({"response": {"code": code}})

    def test_to_wire_is_schema_preserving(self) -> None:
        record = AuditRecord.from_wire(AUDIT_WIRE)
        assert record.to_wire() == AUDIT_WIRE
        assert AuditRecord.from_wire(record.to_wire()) == record

    def test_to_wire_of_zero_record(self) -> None:
        assert AuditRecord().to_wire() == {
            "time": None,
            "request": {"ip": "", "path": "", "identity": ""},
            "response": {"code": 0, "time": "0s"},
        }

    def test_records_are_frozen(self) -> None:
        record = AuditRecord(response=AuditResponse(code=200), request=AuditRequest(path="/"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            record.time = None  # type: ignore[misc]


# ---------------------------------------------------------------------------
# Event kinds
# ---------------------------------------------------------------------------


class TestEventKinds:
    def test_empty_events(self) -> None:
        assert ERROR_EVENTS.empty == ErrorEvent()
        assert AUDIT_EVENTS.empty == AuditEvent()

    def test_error_kind_pipeline(self) -> None:
        raw = ERROR_EVENTS.parse({"message": "x"})
        assert ERROR_EVENTS.to_event(raw) == ErrorEvent("x")
        assert ERROR_EVENTS.encode(raw) == {"message": "x"}

    def test_audit_kind_pipeline(self) -> None:
        raw = AUDIT_EVENTS.parse(AUDIT_WIRE)
        assert AUDIT_EVENTS.to_event(raw).status_code == 200
        assert AUDIT_EVENTS.encode(raw) == AUDIT_WIRE


class TestIdentity:
    def test_str(self) -> None:
        assert str(Identity("abc")) == "abc"

    def test_unknown(self) -> None:
        assert Identity().is_unknown
        assert not Identity("abc").is_unknown

    def test_rejects_non_string(self) -> None:
        with pytest.raises(TypeError):
            Identity(123)  # type: ignore[arg-type]
