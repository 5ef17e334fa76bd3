"""
logstream – pull-based streams of server error and audit log events.

Import path convention::

    from logstream import ErrorStream, AuditStream
    from logstream.kernel.errors import DecodeError
    from logstream.adapters.http import LogClient
"""

from logstream.events import AuditEvent, ErrorEvent
from logstream.kernel.errors import DecodeError, EncodeError, StreamError, UnderlyingIOError
from logstream.stream import AuditStream, ErrorStream, EventStream, StreamState

__version__ = "0.1.0"
__all__ = [
    "AuditEvent",
    "AuditStream",
    "DecodeError",
    "EncodeError",
    "ErrorEvent",
    "ErrorStream",
    "EventStream",
    "StreamError",
    "StreamState",
    "UnderlyingIOError",
    "__version__",
]
