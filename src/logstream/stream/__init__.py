"""Stream – event streams over open byte sources."""
from logstream.stream.event_stream import EventStream
from logstream.stream.state import StreamState
from logstream.stream.streams import AuditStream, ErrorStream

__all__ = ["AuditStream", "ErrorStream", "EventStream", "StreamState"]
