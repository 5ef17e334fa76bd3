"""Stream lifecycle states."""
from __future__ import annotations

from enum import Enum


class StreamState(str, Enum):
    """Where an event stream is in its lifecycle.

    ``CLOSED`` and ``ERRORED`` are terminal.
    """

    OPEN = "open"
    CLOSED = "closed"
    ERRORED = "errored"


__all__ = ["StreamState"]
