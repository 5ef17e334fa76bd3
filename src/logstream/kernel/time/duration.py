"""Kernel time – duration literals.

Log servers report durations as strings such as ``"15ms"``, ``"1m30s"`` or
``"1.5µs"``: an optional sign followed by one or more ``<number><unit>``
pairs. Values are held as :class:`~datetime.timedelta`, which stores
microseconds, so sub-microsecond parts are truncated toward zero.
"""
from __future__ import annotations

import re
from datetime import timedelta

_UNITS: dict[str, int] = {
    "ns": 1,
    "us": 1_000,
    "µs": 1_000,  # micro sign
    "μs": 1_000,  # greek mu
    "ms": 1_000_000,
    "s": 1_000_000_000,
    "m": 60 * 1_000_000_000,
    "h": 3600 * 1_000_000_000,
}

_COMPONENT = re.compile(r"(\d+(?:\.\d*)?|\.\d+)([^\d.]*)")
_MIN_NANOSECONDS = -(1 << 63)
_MAX_NANOSECONDS = (1 << 63) - 1


def parse_duration(literal: str) -> timedelta:
    """Parse a duration literal such as ``"1h2m3.5s"``.

    Raises :class:`ValueError` on malformed input.
    """
    s = literal
    negative = False
    if s[:1] in ("-", "+"):
        negative = s[0] == "-"
        s = s[1:]
    if s == "0":
        return timedelta(0)
    if not s:
        raise ValueError(f"invalid duration {literal!r}")

    total = 0
    pos = 0
    while pos < len(s):
        match = _COMPONENT.match(s, pos)
        if match is None:
            raise ValueError(f"invalid duration {literal!r}")
        number, unit = match.groups()
        if not unit:
            raise ValueError(f"missing unit in duration {literal!r}")
        scale = _UNITS.get(unit)
        if scale is None:
            raise ValueError(f"unknown unit {unit!r} in duration {literal!r}")
        whole, _, frac = number.partition(".")
        total += int(whole or "0") * scale
        if frac:
            total += int(frac) * scale // 10 ** len(frac)
        if total > _MAX_NANOSECONDS:
            raise ValueError(f"duration {literal!r} out of range")
        pos = match.end()

    return from_nanoseconds(-total if negative else total)


def from_nanoseconds(ns: int) -> timedelta:
    """Convert integer nanoseconds, truncating toward zero.

    Raises :class:`ValueError` when *ns* does not fit a signed 64-bit count.
    """
    if not _MIN_NANOSECONDS <= ns <= _MAX_NANOSECONDS:
        raise ValueError(f"duration {ns} ns out of range")
    micros = abs(ns) // 1_000
    return timedelta(microseconds=-micros if ns < 0 else micros)


def to_nanoseconds(d: timedelta) -> int:
    return ((d.days * 86_400 + d.seconds) * 1_000_000 + d.microseconds) * 1_000


def format_duration(d: timedelta) -> str:
    """Render *d* in its canonical form (``"15ms"``, ``"1m0s"``, ``"0s"``)."""
    ns = to_nanoseconds(d)
    if ns == 0:
        return "0s"
    sign = "-" if ns < 0 else ""
    u = abs(ns)

    if u < 1_000_000_000:
        if u < 1_000:
            return f"{sign}{u}ns"
        if u < 1_000_000:
            return f"{sign}{_decimal(u, 3)}µs"
        return f"{sign}{_decimal(u, 6)}ms"

    text = f"{_decimal(u % 60_000_000_000, 9)}s"
    minutes = u // 60_000_000_000
    if minutes:
        text = f"{minutes % 60}m{text}"
        hours = minutes // 60
        if hours:
            text = f"{hours}h{text}"
    return sign + text


def _decimal(value: int, precision: int) -> str:
    """``value / 10**precision`` without trailing fractional zeros."""
    whole, frac = divmod(value, 10**precision)
    digits = f"{frac:0{precision}d}".rstrip("0")
    return f"{whole}.{digits}" if digits else str(whole)


__all__ = ["format_duration", "from_nanoseconds", "parse_duration", "to_nanoseconds"]
