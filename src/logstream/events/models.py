"""Domain events produced by an event stream."""
from __future__ import annotations

import dataclasses
from datetime import datetime, timedelta
from ipaddress import IPv4Address, IPv6Address

from logstream.kernel.types import Identity


@dataclasses.dataclass(frozen=True)
class ErrorEvent:
    """An error the server encountered and logged."""

    message: str = ""


@dataclasses.dataclass(frozen=True)
class AuditEvent:
    """The server's record of one request it answered.

    ``timestamp`` is when the request was received, ``api_path`` the API that
    was called (it may embed arguments) and ``response_time`` how long the
    server took to process the request.
    """

    timestamp: datetime | None = None
    api_path: str = ""
    client_ip: IPv4Address | IPv6Address | None = None
    client_identity: Identity = dataclasses.field(default_factory=Identity)
    status_code: int = 0
    response_time: timedelta = dataclasses.field(default_factory=timedelta)


__all__ = ["AuditEvent", "ErrorEvent"]
