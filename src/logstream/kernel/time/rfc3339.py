"""Kernel time – RFC 3339 timestamps."""
from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta, timezone

_RFC3339 = re.compile(
    r"(\d{4})-(\d{2})-(\d{2})[Tt](\d{2}):(\d{2}):(\d{2})(?:\.(\d+))?"
    r"(?:([Zz])|([+-])(\d{2}):(\d{2}))"
)


def parse_rfc3339(value: str) -> datetime:
    """Parse an RFC 3339 timestamp into an aware :class:`datetime`.

    Fractional seconds beyond microseconds are truncated. Raises
    :class:`ValueError` on malformed input.
    """
    match = _RFC3339.fullmatch(value)
    if match is None:
        raise ValueError(f"invalid RFC 3339 timestamp {value!r}")
    year, month, day, hour, minute, second, frac, zulu, sign, off_h, off_m = match.groups()

    if zulu:
        tz: timezone = UTC
    else:
        offset = timedelta(hours=int(off_h), minutes=int(off_m))
        if offset >= timedelta(hours=24):
            raise ValueError(f"invalid time zone offset in {value!r}")
        tz = timezone(-offset if sign == "-" else offset)

    micros = int((frac or "")[:6].ljust(6, "0"))
    return datetime(
        int(year), int(month), int(day),
        int(hour), int(minute), int(second),
        micros,
        tzinfo=tz,
    )


def format_rfc3339(value: datetime) -> str:
    """Render *value* as RFC 3339; naive datetimes are taken to be UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=UTC)
    # strftime("%Y") does not zero-pad years below 1000 on every platform
    text = (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
    )
    if value.microsecond:
        text += "." + f"{value.microsecond:06d}".rstrip("0")

    offset = value.utcoffset() or timedelta(0)
    if not offset:
        return text + "Z"
    sign = "-" if offset < timedelta(0) else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{text}{sign}{minutes // 60:02d}:{minutes % 60:02d}"


__all__ = ["format_rfc3339", "parse_rfc3339"]
