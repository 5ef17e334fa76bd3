"""EventStream – pull-based iteration over a stream of log records.

Usage::

    with ErrorStream(response_body) as stream:
        while stream.next():
            print(stream.event.message)
        if stream.err() is not None:
            raise stream.err()

A stream has a single owner: it performs no locking and must not be used from
more than one thread at a time.
"""
from __future__ import annotations

from types import TracebackType
from typing import Generic, Iterator, TypeVar

from logstream.codec import RecordDecoder, RecordEncoder
from logstream.config.settings import StreamSettings
from logstream.events.kinds import EventKind
from logstream.kernel.errors import DecodeError, EncodeError, StreamError, UnderlyingIOError
from logstream.kernel.io import ByteSource, CountingWriter, Sink, closer_of
from logstream.observability.logging import get_logger
from logstream.stream.state import StreamState

R = TypeVar("R")
E = TypeVar("E")


class EventStream(Generic[R, E]):
    """Decode records from *source* one at a time and map them to events.

    The stream starts out open. It closes itself (releasing *source* when it
    has a ``close`` method) once the input ends cleanly, and stops without
    closing on the first decode or read error. That first error is kept and
    reported by :meth:`err` from then on.

    Args:
        source: Already-open byte source, e.g. a streaming HTTP body.
        kind: How raw records are parsed, re-encoded and mapped to events.
        settings: Read size and record size limit.
    """

    def __init__(
        self,
        source: ByteSource,
        kind: EventKind[R, E],
        *,
        settings: StreamSettings | None = None,
    ) -> None:
        settings = settings or StreamSettings()
        self._kind = kind
        self._decoder = RecordDecoder(
            source,
            read_size=settings.read_size,
            max_record_size=settings.max_record_size,
        )
        self._closer = closer_of(source)
        self._event: E = kind.empty
        self._err: StreamError | None = None
        self._failed = False
        self._closed = False
        self._log = get_logger(__name__, stream_kind=kind.name)

    @property
    def kind(self) -> EventKind[R, E]:
        return self._kind

    @property
    def event(self) -> E:
        """The event produced by the last successful :meth:`next` call."""
        return self._event

    @property
    def state(self) -> StreamState:
        if self._failed:
            return StreamState.ERRORED
        if self._closed:
            return StreamState.CLOSED
        return StreamState.OPEN

    def err(self) -> StreamError | None:
        """The first error the stream encountered, if any."""
        return self._err

    def next(self) -> bool:
        """Advance to the next event.

        Returns ``False`` when the input has ended, the stream has been
        closed or an error occurred; check :meth:`err` to tell them apart.
        """
        if self._closed or self._err is not None:
            return False
        try:
            record = self._read_record()
        except EOFError:
            self.close()
            return False
        except StreamError as exc:
            self._fail(exc)
            return False
        self._event = self._kind.to_event(record)
        return True

    def write_to(self, sink: Sink) -> tuple[int, StreamError | None]:
        """Relay every remaining record into *sink*, re-encoded as JSON lines.

        Returns the number of bytes written to *sink* and the first error
        encountered, if any. The stream ends up in the same state as after
        iterating with :meth:`next` until it returns ``False``.
        """
        if self._closed or self._err is not None:
            return 0, self._err

        writer = CountingWriter(sink)
        encoder = RecordEncoder(writer)
        records = 0
        while True:
            try:
                record = self._read_record()
            except EOFError:
                self.close()
                break
            except StreamError as exc:
                self._fail(exc)
                break
            try:
                encoder.encode(self._kind.encode(record))
            except EncodeError as exc:
                exc.detail.setdefault("bytes_written", writer.count)
                self._fail(exc)
                break
            records += 1

        self._log.debug("event_stream.relay_done", records=records, bytes_written=writer.count)
        return writer.count, self._err

    def close(self) -> StreamError | None:
        """Close the stream and release the source.

        Safe to call more than once; only the first call touches the source.
        Returns the stream's error, which is the close failure when nothing
        went wrong before.
        """
        if self._closed:
            return self._err
        self._closed = True
        if self._closer is None:
            self._log.debug("event_stream.closed")
            return self._err

        try:
            self._closer.close()
        except StreamError as exc:
            self._record_close_failure(exc)
        except (OSError, ValueError) as exc:
            self._record_close_failure(
                UnderlyingIOError(f"closing source failed: {exc}", cause=exc)
            )
        else:
            self._log.debug("event_stream.closed")
        return self._err

    def __iter__(self) -> Iterator[E]:
        """Yield events until the stream ends; re-raise its error, if any."""
        while self.next():
            yield self._event
        if self._err is not None:
            raise self._err

    def __enter__(self) -> "EventStream[R, E]":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self._kind.name!r}, state={self.state.value!r})"

    def _read_record(self) -> R:
        obj = self._decoder.decode()
        try:
            return self._kind.parse(obj)
        except ValueError as exc:
            raise DecodeError(str(exc), offset=self._decoder.record_offset, cause=exc) from exc

    def _fail(self, exc: StreamError) -> None:
        self._err = exc
        self._failed = True
        self._log.warning("event_stream.failed", error=exc)

    def _record_close_failure(self, exc: StreamError) -> None:
        self._log.warning("event_stream.close_failed", error=exc)
        if self._err is None:
            self._err = exc


__all__ = ["EventStream"]
