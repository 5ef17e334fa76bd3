"""Kernel I/O – CountingWriter."""
from __future__ import annotations

from logstream.kernel.io.ports import Sink


class CountingWriter:
    """Forward writes to *sink* and keep a running total of accepted bytes.

    Partial writes count: a short return value adds only what the sink took,
    and a :class:`BlockingIOError` adds its ``characters_written`` before it
    propagates.
    """

    def __init__(self, sink: Sink) -> None:
        self._sink = sink
        self.count = 0

    def write(self, data: bytes) -> int:
        try:
            n = self._sink.write(data)
        except BlockingIOError as exc:
            self.count += getattr(exc, "characters_written", 0)
            raise
        if n is None:
            n = len(data)
        self.count += n
        return n


__all__ = ["CountingWriter"]
