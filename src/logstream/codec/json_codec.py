"""Codec – streaming JSON record decoder and encoder.

The decoder pulls bytes from a source in fixed-size reads and hands back one
top-level JSON object per call. Only the bytes of the record being decoded
(plus whatever the last read brought in after it) are buffered, so an
endless stream can be consumed in constant memory.

Records may be separated by any JSON whitespace or simply concatenated.
"""
from __future__ import annotations

import json
import re
from typing import Any

from logstream.kernel.errors import DecodeError, EncodeError, StreamError, UnderlyingIOError
from logstream.kernel.io import ByteSource, Sink

_WHITESPACE = b" \t\r\n"
_MAX_DEPTH = 10_000
_STRUCTURAL = re.compile(rb'["{}\[\]]')
_STRING_SPECIAL = re.compile(rb'["\\]')


class RecordDecoder:
    """Decode one JSON object at a time from *source*.

    Args:
        source: Byte source to read from.
        read_size: Bytes requested per ``read`` call.
        max_record_size: Upper bound on the bytes of a single record;
            ``0`` disables the check.
    """

    def __init__(self, source: ByteSource, *, read_size: int = 4096, max_record_size: int = 0) -> None:
        self._source = source
        self._read_size = read_size
        self._max_record_size = max_record_size
        self._buf = bytearray()
        self._offset = 0
        self._record_offset = 0
        self._eof = False
        self._reset_scan()

    @property
    def offset(self) -> int:
        """Stream offset of the first byte not yet consumed."""
        return self._offset

    @property
    def record_offset(self) -> int:
        """Stream offset of the most recent record returned or rejected."""
        return self._record_offset

    def decode(self) -> dict[str, Any]:
        """Return the next record.

        Raises:
            EOFError: The input ended cleanly between records.
            DecodeError: The next record is malformed, truncated or too large.
            UnderlyingIOError: The source failed.
        """
        self._skip_whitespace()
        if not self._buf:
            raise EOFError
        start = self._record_offset = self._offset

        first = self._buf[0]
        if first != ord("{"):
            raise DecodeError(
                f"invalid character {chr(first)!r} looking for beginning of object",
                offset=start,
            )

        end = self._scan(start)
        chunk = bytes(self._buf[:end])
        del self._buf[:end]
        self._offset += end

        try:
            value = json.loads(chunk)
        except (ValueError, RecursionError) as exc:
            raise DecodeError(f"invalid JSON record: {exc}", offset=start, cause=exc) from exc
        if not isinstance(value, dict):
            raise DecodeError("record is not a JSON object", offset=start)
        return value

    def _skip_whitespace(self) -> None:
        while True:
            stripped = self._buf.lstrip(_WHITESPACE)
            self._offset += len(self._buf) - len(stripped)
            self._buf = stripped
            if self._buf or not self._fill():
                return

    def _scan(self, start: int) -> int:
        """Return the buffer index just past the object starting at index 0."""
        while True:
            end = self._scan_buffer(start)
            if end is not None:
                self._reset_scan()
                return end
            if self._max_record_size and len(self._buf) > self._max_record_size:
                raise DecodeError(
                    f"record exceeds maximum size of {self._max_record_size} bytes",
                    offset=start,
                )
            if not self._fill():
                raise DecodeError("unexpected end of input inside record", offset=start)

    def _scan_buffer(self, start: int) -> int | None:
        buf = self._buf
        n = len(buf)
        i = self._scan_pos
        while i < n:
            if self._in_string:
                if self._escaped:
                    self._escaped = False
                    i += 1
                    continue
                match = _STRING_SPECIAL.search(buf, i)
                if match is None:
                    i = n
                    break
                i = match.end()
                if match.group() == b"\\":
                    self._escaped = True
                else:
                    self._in_string = False
                continue

            match = _STRUCTURAL.search(buf, i)
            if match is None:
                i = n
                break
            i = match.end()
            char = match.group()
            if char == b'"':
                self._in_string = True
            elif char in (b"{", b"["):
                self._depth += 1
                if self._depth > _MAX_DEPTH:
                    raise DecodeError(f"exceeded max nesting depth of {_MAX_DEPTH}", offset=start)
            else:
                self._depth -= 1
                if self._depth == 0:
                    return i
        self._scan_pos = i
        return None

    def _reset_scan(self) -> None:
        self._scan_pos = 0
        self._depth = 0
        self._in_string = False
        self._escaped = False

    def _fill(self) -> bool:
        if self._eof:
            return False
        try:
            data = self._source.read(self._read_size)
        except StreamError:
            raise
        except (OSError, ValueError) as exc:
            raise UnderlyingIOError(f"reading from source failed: {exc}", cause=exc) from exc
        if not data:
            self._eof = True
            return False
        self._buf.extend(data)
        return True


class RecordEncoder:
    """Encode records as compact JSON, one per line, into *sink*."""

    def __init__(self, sink: Sink) -> None:
        self._sink = sink

    def encode(self, record: dict[str, Any]) -> int:
        """Write *record* and return the number of bytes written."""
        data = (json.dumps(record, ensure_ascii=False, separators=(",", ":")) + "\n").encode("utf-8")
        total = len(data)
        while data:
            try:
                n = self._sink.write(data)
            except (OSError, ValueError) as exc:
                raise EncodeError(f"writing record failed: {exc}", cause=exc) from exc
            if n is None:
                break
            if n <= 0:
                raise EncodeError("short write: sink accepted no bytes")
            data = data[n:]
        return total


__all__ = ["RecordDecoder", "RecordEncoder"]
