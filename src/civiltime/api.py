"""Public operation surface.

Every fallible operation returns a :data:`~civiltime.kernel.types.Result`
instead of raising, so callers can branch on ``is_ok()`` / ``is_err()``::

    from civiltime import api

    result = api.parse_utc("2007-12-03T10:15:30.00Z")
    if result.is_ok():
        print(api.format_utc(result.unwrap()))

Infallible operations return their value directly. Argument-type mistakes
(passing a ``str`` where a :class:`Utc` is expected) still raise.
"""

from __future__ import annotations

import functools
from decimal import Decimal

from civiltime.config.settings import load_settings
from civiltime.kernel.errors import FormatError, InvalidDateError
from civiltime.kernel.time import calendar, civil, rfc3339
from civiltime.kernel.time.calendar import Date, DayOfWeek
from civiltime.kernel.time.civil import Civil
from civiltime.kernel.time.clock import ClockSource
from civiltime.kernel.time.fixed_point import SecondsLike
from civiltime.kernel.time.utc import Utc
from civiltime.kernel.types import Result, capture


@functools.lru_cache(maxsize=1)
def default_clock_source() -> ClockSource:
    """Process-wide :class:`ClockSource` built from the environment settings."""
    return ClockSource(precision=load_settings().clock_precision)


def now(precision: int | None = None) -> Utc:
    """Current instant; *precision* fraction digits (``0`` = whole seconds)."""
    return default_clock_source().now(precision)


def monotonic_now() -> float:
    """Seconds from a fixed, process-local origin; never decreases."""
    return default_clock_source().monotonic_now()


def format_utc(utc: Utc) -> str:
    return rfc3339.format_utc(utc)


def add_seconds(utc: Utc, delta: SecondsLike) -> Utc:
    return utc.add_seconds(delta)


def diff_seconds(a: Utc, b: Utc) -> Decimal:
    """``a - b`` in exact seconds; positive when *a* is later."""
    return a.diff_seconds(b)


def utc_to_civil(utc: Utc) -> Civil:
    return civil.utc_to_civil(utc)


_parse_utc = capture(rfc3339.parse_utc, FormatError)
_parse_civil = capture(rfc3339.parse_civil, FormatError)
_format_civil = capture(rfc3339.format_civil, FormatError)
_civil_to_utc = capture(civil.civil_to_utc, FormatError)
_validate_date = capture(calendar.validate_date, InvalidDateError)
_day_of_week = capture(calendar.day_of_week, InvalidDateError)


def parse_utc(text: str) -> Result[Utc, FormatError]:
    return _parse_utc(text)


def parse_civil(text: str) -> Result[Civil, FormatError]:
    return _parse_civil(text)


def format_civil(value: Civil) -> Result[str, FormatError]:
    """Fails when ``utc_offset`` is missing or a field is out of range."""
    return _format_civil(value)


def civil_to_utc(value: Civil) -> Result[Utc, FormatError]:
    """Fails when ``utc_offset`` is missing or a field is out of range."""
    return _civil_to_utc(value)


def validate_date(date: Date) -> Result[None, InvalidDateError]:
    return _validate_date(date)


def day_of_week(date: Date) -> Result[DayOfWeek, InvalidDateError]:
    """Weekday of *date*, or ``Err(InvalidDateError)`` for a date that does
    not exist."""
    return _day_of_week(date)


__all__ = [
    "add_seconds",
    "civil_to_utc",
    "day_of_week",
    "default_clock_source",
    "diff_seconds",
    "format_civil",
    "format_utc",
    "monotonic_now",
    "now",
    "parse_civil",
    "parse_utc",
    "utc_to_civil",
    "validate_date",
]
