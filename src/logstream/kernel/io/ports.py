"""Kernel I/O – byte source, sink and closer ports."""
from __future__ import annotations

from typing import Protocol, runtime_checkable


class ByteSource(Protocol):
    """Port: an already-open, forward-only byte input.

    ``read(size)`` returns at most *size* bytes and ``b""`` at end of input.
    It may block until bytes arrive.
    """

    def read(self, size: int = -1, /) -> bytes: ...


@runtime_checkable
class Closer(Protocol):
    """Capability: a resource that can be released."""

    def close(self) -> None: ...


class Sink(Protocol):
    """Port: a byte output.

    ``write`` returns the number of bytes accepted, or ``None`` when the
    implementation always accepts the whole buffer.
    """

    def write(self, data: bytes, /) -> int | None: ...


def closer_of(resource: object) -> Closer | None:
    """Return *resource* if it can be closed, else ``None``."""
    if isinstance(resource, Closer):
        return resource
    return None


__all__ = ["ByteSource", "Closer", "Sink", "closer_of"]
