"""Parsers for the string literals used by date and duration values."""

from __future__ import annotations

import re
from datetime import UTC, datetime, timedelta

from .types import INT64_MAX

_DATE = re.compile(r"([0-9]{1,2})\.([0-9]{1,2})\.([0-9]{4})")

# One magnitude-unit pair: integer and/or fractional digits, then a unit.
_TERM = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")

_NANOSECOND = 1
_MICROSECOND = 1_000 * _NANOSECOND
_MILLISECOND = 1_000 * _MICROSECOND
_SECOND = 1_000 * _MILLISECOND
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE

_UNITS = {
    "ns": _NANOSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,  # micro sign
    "μs": _MICROSECOND,  # greek mu
    "ms": _MILLISECOND,
    "s": _SECOND,
    "m": _MINUTE,
    "h": _HOUR,
}


def parse_date(text: str) -> datetime:
    """Parse a ``D.M.YYYY`` date into a UTC midnight timestamp.

    Day and month take one or two digits, the year exactly four. Year ``0000``
    is rejected because ``datetime`` has no year zero.

    Raises:
        ValueError: the text does not follow the layout or names an impossible date.
    """
    match = _DATE.fullmatch(text)
    if match is None:
        raise ValueError(f'date "{text}" does not match layout D.M.YYYY')

    day, month, year = (int(part) for part in match.groups())
    try:
        return datetime(year, month, day, tzinfo=UTC)
    except ValueError as exc:
        raise ValueError(f'date "{text}" is out of range: {exc}') from exc


def parse_duration(text: str) -> timedelta:
    """Parse a duration expression such as ``30m``, ``1h15m`` or ``-1.5s``.

    A duration is an optional sign followed by one or more decimal numbers,
    each with a unit suffix out of ``ns``, ``us`` (or ``µs``), ``ms``, ``s``,
    ``m`` and ``h``. The bare literal ``0`` needs no unit. The total must fit a
    signed 64-bit count of nanoseconds; the nanosecond remainder below one
    microsecond is truncated.

    Raises:
        ValueError: the expression is malformed, uses an unknown unit or overflows.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f'invalid duration "{text}"')

    limit = INT64_MAX + 1 if negative else INT64_MAX
    total = 0
    pos = 0
    while pos < len(rest):
        match = _TERM.match(rest, pos)
        whole, fraction, unit = match.group(1), match.group(2), match.group(3)
        if not whole and not fraction:
            raise ValueError(f'invalid duration "{text}"')
        if not unit:
            raise ValueError(f'missing unit in duration "{text}"')
        if unit not in _UNITS:
            raise ValueError(f'unknown unit "{unit}" in duration "{text}"')

        scale = _UNITS[unit]
        total += int(whole or 0) * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > limit:
            raise ValueError(f'invalid duration "{text}": overflows 64-bit nanoseconds')

        pos = match.end()

    micros = total // _MICROSECOND
    return timedelta(microseconds=-micros if negative else micros)
