"""Events – domain events, raw wire records and the kinds binding them."""
from logstream.events.kinds import AUDIT_EVENTS, ERROR_EVENTS, EventKind
from logstream.events.models import AuditEvent, ErrorEvent
from logstream.events.records import AuditRecord, AuditRequest, AuditResponse, ErrorRecord

__all__ = [
    "AUDIT_EVENTS",
    "AuditEvent",
    "AuditRecord",
    "AuditRequest",
    "AuditResponse",
    "ERROR_EVENTS",
    "ErrorEvent",
    "ErrorRecord",
    "EventKind",
]
