"""Event stream errors.

Every failure an :class:`~logstream.stream.EventStream` can observe is a
:class:`StreamError`. The stream stores the first one it sees and reports it
from then on.
"""

from __future__ import annotations

from typing import Any

from logstream.kernel.errors.infrastructure import InfrastructureError


class StreamError(InfrastructureError):
    """Base class of all errors stored by an event stream."""

    default_code = "stream_error"


class DecodeError(StreamError):
    """A record's bytes do not have the expected structure.

    ``offset`` is the byte offset of the record within the stream, when known.
    """

    default_code = "decode_error"

    def __init__(
        self,
        message: str,
        *,
        offset: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.offset = offset
        if offset is not None:
            self.detail.setdefault("offset", offset)


class UnderlyingIOError(StreamError):
    """The byte source failed to deliver bytes or failed to close."""

    default_code = "underlying_io_error"


class EncodeError(StreamError):
    """The relay sink rejected a re-encoded record."""

    default_code = "encode_error"


__all__ = ["DecodeError", "EncodeError", "StreamError", "UnderlyingIOError"]
