"""RFC3339Codec — strict RFC 3339 parsing and formatting.

Accepted grammar::

    YYYY-MM-DD ("T" | "t") hh:mm:ss [.fraction]
        ("Z" | "z" | ("+" | "-") hh:mm [:ss[.fraction]])
        ["[" zone-name "]"]

Fraction digits are unbounded and kept exactly. The bracketed zone name is
recognised but never resolved: the numeric offset in front of it is what
gets attached to the parsed :class:`Civil`. Leap seconds (``:60``) are
rejected since every day is exactly 86 400 seconds long.
"""

from __future__ import annotations

import re
from decimal import Decimal
from typing import Final, NoReturn

from civiltime.kernel.errors import FormatError, InvalidDateError
from civiltime.kernel.time import fixed_point as fp
from civiltime.kernel.time.calendar import Date, validate_date
from civiltime.kernel.time.civil import (
    MISSING_OFFSET_MESSAGE,
    Civil,
    civil_to_utc,
    utc_to_civil,
    validate_civil,
)
from civiltime.kernel.time.constants import (
    MAX_OFFSET_HOURS,
    MAX_RFC3339_YEAR,
    MIN_RFC3339_YEAR,
)
from civiltime.kernel.time.utc import Utc
from civiltime.kernel.time.zone import UTC_OFFSET, ZoneOffset
from civiltime.observability.logging import get_logger

logger = get_logger(__name__)

_TIMESTAMP: Final = re.compile(
    r"""
    (?P<year>\d{4}) - (?P<month>\d{2}) - (?P<day>\d{2})
    [Tt]
    (?P<hour>\d{2}) : (?P<minute>\d{2}) : (?P<second>\d{2})
    (?P<fraction>\.\d+)?
    (?:
        (?P<zulu>[Zz])
      | (?P<sign>[+-]) (?P<off_hour>\d{2}) : (?P<off_minute>\d{2})
        (?: : (?P<off_second>\d{2}(?:\.\d+)?) )?
    )
    (?: \[ (?P<zone>[^\[\]\s]+) \] )?
    """,
    re.VERBOSE | re.ASCII,
)


def _fail(
    message: str,
    text: str,
    cause: BaseException | None = None,
    *,
    field: str | None = None,
    value: object = None,
) -> NoReturn:
    logger.debug("rfc3339.parse_failed", text=text, reason=message)
    errors = [{"field": field, "value": value}] if field else None
    if isinstance(cause, InvalidDateError):
        errors = cause.errors
    raise FormatError(message, text=text, errors=errors, cause=cause)


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


def parse_civil(text: str) -> Civil:
    """Parse *text* into a :class:`Civil` that keeps the written offset.

    Raises:
        FormatError: *text* deviates from the grammar or a field is out of
            range.
    """
    match = _TIMESTAMP.fullmatch(text)
    if match is None:
        _fail(f"Not an RFC 3339 timestamp: {text!r}", text)

    year = int(match["year"])
    month = int(match["month"])
    day = int(match["day"])
    try:
        validate_date(Date(year, month, day))
    except InvalidDateError as exc:
        _fail(f"{exc.message} in {text!r}", text, exc)

    hour = int(match["hour"])
    minute = int(match["minute"])
    whole_second = int(match["second"])
    if hour > 23:
        _fail(f"Hour out of range in {text!r}", text, field="hour", value=hour)
    if minute > 59:
        _fail(f"Minute out of range in {text!r}", text, field="minute", value=minute)
    if whole_second > 59:
        _fail(f"Second out of range in {text!r}", text, field="second", value=whole_second)
    second = Decimal(match["second"] + (match["fraction"] or ""))

    return Civil(
        year=year,
        month=month,
        day=day,
        hour=hour,
        minute=minute,
        second=second,
        utc_offset=_parse_offset(match, text),
        zone_name=match["zone"],
    )


def _parse_offset(match: re.Match[str], text: str) -> ZoneOffset:
    if match["zulu"]:
        return UTC_OFFSET
    hours = int(match["off_hour"])
    minutes = int(match["off_minute"])
    seconds = Decimal(match["off_second"] or 0)
    if hours > MAX_OFFSET_HOURS:
        _fail(
            f"Offset hours out of range in {text!r}", text, field="offset_hours", value=hours
        )
    if minutes > 59:
        _fail(
            f"Offset minutes out of range in {text!r}",
            text,
            field="offset_minutes",
            value=minutes,
        )
    if seconds >= 60:
        _fail(
            f"Offset seconds out of range in {text!r}",
            text,
            field="offset_seconds",
            value=seconds,
        )
    if match["sign"] == "-":
        return ZoneOffset(-hours, -minutes, fp.negate(seconds))
    return ZoneOffset(hours, minutes, seconds)


def parse_utc(text: str) -> Utc:
    """Parse *text* and normalise it to an instant in UTC.

    Raises:
        FormatError: *text* is not a valid RFC 3339 timestamp.
    """
    return civil_to_utc(parse_civil(text))


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def format_utc(utc: Utc) -> str:
    """Render *utc* as ``YYYY-MM-DDThh:mm:ss[.fraction]Z``.

    The fraction appears only when non-zero, with as many digits as the
    value carries.

    Raises:
        FormatError: the instant lies outside years 0000..9999.
    """
    return _format_fields(utc_to_civil(utc)) + "Z"


def format_civil(civil: Civil) -> str:
    """Render *civil* with its signed numeric offset (``+00:00``, never ``Z``).

    The zone name, if any, is not written back.

    Raises:
        FormatError: ``utc_offset`` is missing, a field is out of range, or
            the year has no four-digit form.
    """
    if civil.utc_offset is None:
        raise FormatError(MISSING_OFFSET_MESSAGE)
    validate_civil(civil)
    return _format_fields(civil) + format_offset(civil.utc_offset)


def format_offset(offset: ZoneOffset) -> str:
    """``±hh:mm`` with ``:ss[.fraction]`` appended only when non-zero."""
    sign = "-" if offset.total_seconds < 0 else "+"
    rendered = f"{sign}{abs(offset.hours):02d}:{abs(offset.minutes):02d}"
    if offset.seconds:
        rendered += ":" + _format_second(offset.seconds.copy_abs())
    return rendered


def _format_fields(civil: Civil) -> str:
    if not MIN_RFC3339_YEAR <= civil.year <= MAX_RFC3339_YEAR:
        raise FormatError(
            f"Year {civil.year} cannot be written as an RFC 3339 timestamp"
        )
    return (
        f"{civil.year:04d}-{civil.month:02d}-{civil.day:02d}"
        f"T{civil.hour:02d}:{civil.minute:02d}:{_format_second(civil.second)}"
    )


def _format_second(value: Decimal) -> str:
    whole = fp.floor_to_int(value)
    fraction = fp.fractional_part(value)
    if not fraction:
        return f"{whole:02d}"
    # format "f" never switches to exponent notation: 1E-10 -> 0.0000000001
    return f"{whole:02d}" + format(fraction, "f")[1:]


__all__ = [
    "format_civil",
    "format_offset",
    "format_utc",
    "parse_civil",
    "parse_utc",
]
