"""Kernel time – wire codecs for timestamps and durations."""
from logstream.kernel.time.duration import (
    format_duration,
    from_nanoseconds,
    parse_duration,
    to_nanoseconds,
)
from logstream.kernel.time.rfc3339 import format_rfc3339, parse_rfc3339

__all__ = [
    "format_duration",
    "format_rfc3339",
    "from_nanoseconds",
    "parse_duration",
    "parse_rfc3339",
    "to_nanoseconds",
]
