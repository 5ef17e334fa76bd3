"""Event kinds – what a generic stream needs to know about one record type."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Generic, TypeVar

from logstream.events.models import AuditEvent, ErrorEvent
from logstream.events.records import AuditRecord, ErrorRecord

R = TypeVar("R")
E = TypeVar("E")


@dataclasses.dataclass(frozen=True)
class EventKind(Generic[R, E]):
    """Binds a raw record type to the domain event it maps to.

    ``parse`` turns a decoded JSON object into a raw record, ``encode`` turns
    a raw record back into a JSON object, ``to_event`` maps a raw record to
    its event and ``empty`` is the event reported before the first record.
    """

    name: str
    parse: Callable[[dict[str, Any]], R]
    encode: Callable[[R], dict[str, Any]]
    to_event: Callable[[R], E]
    empty: E


ERROR_EVENTS: EventKind[ErrorRecord, ErrorEvent] = EventKind(
    name="error",
    parse=ErrorRecord.from_wire,
    encode=ErrorRecord.to_wire,
    to_event=ErrorRecord.to_event,
    empty=ErrorEvent(),
)

AUDIT_EVENTS: EventKind[AuditRecord, AuditEvent] = EventKind(
    name="audit",
    parse=AuditRecord.from_wire,
    encode=AuditRecord.to_wire,
    to_event=AuditRecord.to_event,
    empty=AuditEvent(),
)


__all__ = ["AUDIT_EVENTS", "ERROR_EVENTS", "EventKind"]
