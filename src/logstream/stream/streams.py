"""Error and audit log streams."""
from __future__ import annotations

from logstream.config.settings import StreamSettings
from logstream.events import AUDIT_EVENTS, ERROR_EVENTS, AuditEvent, AuditRecord, ErrorEvent, ErrorRecord
from logstream.kernel.io import ByteSource
from logstream.stream.event_stream import EventStream


class ErrorStream(EventStream[ErrorRecord, ErrorEvent]):
    """Iterates over the errors a server logged."""

    def __init__(self, source: ByteSource, *, settings: StreamSettings | None = None) -> None:
        super().__init__(source, ERROR_EVENTS, settings=settings)

    @property
    def message(self) -> str:
        """Shorthand for ``event.message``."""
        return self.event.message


class AuditStream(EventStream[AuditRecord, AuditEvent]):
    """Iterates over the requests a server answered."""

    def __init__(self, source: ByteSource, *, settings: StreamSettings | None = None) -> None:
        super().__init__(source, AUDIT_EVENTS, settings=settings)


__all__ = ["AuditStream", "ErrorStream"]
