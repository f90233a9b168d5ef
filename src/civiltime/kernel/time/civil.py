"""Civil — broken-down calendar time and its conversion to/from :class:`Utc`."""

from __future__ import annotations

import dataclasses
from decimal import Decimal

from civiltime.kernel.errors import FormatError, InvalidDateError, InvariantViolationError
from civiltime.kernel.time import fixed_point as fp
from civiltime.kernel.time.calendar import (
    Date,
    civil_to_epoch_day,
    epoch_day_to_civil,
    validate_date,
)
from civiltime.kernel.time.constants import (
    SECONDS_PER_DAY,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from civiltime.kernel.time.utc import Utc
from civiltime.kernel.time.zone import UTC_OFFSET, ZoneOffset

MISSING_OFFSET_MESSAGE = "civilTime.utcOffset must not be null"


@dataclasses.dataclass(frozen=True, slots=True)
class Civil:
    """Calendar date and wall-clock time, optionally tied to a UTC offset.

    ``second`` is exact and may carry any number of fraction digits.
    ``zone_name`` records a bracketed suffix such as ``[Asia/Colombo]`` seen
    while parsing; it is informational only and never resolved.

    Fields are not range-checked on construction; :meth:`validate` does that
    and every conversion calls it.
    """

    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: Decimal = fp.ZERO
    utc_offset: ZoneOffset | None = None
    zone_name: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "second", fp.to_fixed_point(self.second))

    @property
    def date(self) -> Date:
        return Date(self.year, self.month, self.day)

    @property
    def time_of_day_seconds(self) -> Decimal:
        """Seconds elapsed since local midnight."""
        whole = self.hour * SECONDS_PER_HOUR + self.minute * SECONDS_PER_MINUTE
        return fp.add(Decimal(whole), self.second)

    def validate(self) -> None:
        """Check every field.

        Raises:
            InvalidDateError: the date part does not exist.
            FormatError: hour, minute or second is out of range.
        """
        validate_date(self.date)
        if not 0 <= self.hour <= 23:
            raise FormatError(
                f"Hour must be in 0..23, got {self.hour}",
                errors=[{"field": "hour", "value": self.hour}],
            )
        if not 0 <= self.minute <= 59:
            raise FormatError(
                f"Minute must be in 0..59, got {self.minute}",
                errors=[{"field": "minute", "value": self.minute}],
            )
        if not fp.ZERO <= self.second < SECONDS_PER_MINUTE:
            raise FormatError(
                f"Second must be in [0, 60), got {self.second}",
                errors=[{"field": "second", "value": self.second}],
            )

    def to_utc(self) -> Utc:
        return civil_to_utc(self)

    def with_offset(self, offset: ZoneOffset) -> "Civil":
        """The same instant expressed as wall time at *offset*."""
        return utc_to_civil(civil_to_utc(self), offset)

    @classmethod
    def from_utc(cls, utc: Utc) -> "Civil":
        return utc_to_civil(utc)

    @classmethod
    def from_string(cls, text: str) -> "Civil":
        from civiltime.kernel.time.rfc3339 import parse_civil

        return parse_civil(text)

    def to_string(self) -> str:
        from civiltime.kernel.time.rfc3339 import format_civil

        return format_civil(self)


def utc_to_civil(utc: Utc, offset: ZoneOffset = UTC_OFFSET) -> Civil:
    """Break *utc* down into calendar fields.

    With the default offset the result is plain UTC (``+00:00``); any other
    offset yields the local wall time at that offset.
    """
    local = utc.add_seconds(offset.total_seconds) if not offset.is_utc else utc
    epoch_day, second_of_day = divmod(local.seconds, SECONDS_PER_DAY)
    hour, rest = divmod(second_of_day, SECONDS_PER_HOUR)
    minute, second = divmod(rest, SECONDS_PER_MINUTE)
    date = epoch_day_to_civil(epoch_day)
    return Civil(
        year=date.year,
        month=date.month,
        day=date.day,
        hour=hour,
        minute=minute,
        second=fp.add(Decimal(second), local.fraction),
        utc_offset=offset,
    )


def validate_civil(civil: Civil) -> None:
    """Like :meth:`Civil.validate`, reporting calendar failures as
    :class:`FormatError` with the :class:`InvalidDateError` as cause."""
    try:
        civil.validate()
    except InvalidDateError as exc:
        raise FormatError(exc.message, errors=exc.errors, cause=exc) from exc


def civil_to_utc(civil: Civil) -> Utc:
    """Instant denoted by *civil*.

    Raises:
        FormatError: ``utc_offset`` is missing, a field is out of range, or
            the instant does not fit in 64-bit seconds.
    """
    if civil.utc_offset is None:
        raise FormatError(MISSING_OFFSET_MESSAGE)
    validate_civil(civil)
    day_seconds = Decimal(civil_to_epoch_day(civil.date) * SECONDS_PER_DAY)
    local = fp.add(day_seconds, civil.time_of_day_seconds)
    try:
        return Utc.from_decimal(fp.subtract(local, civil.utc_offset.total_seconds))
    except InvariantViolationError as exc:
        raise FormatError(
            f"{civil.date} is outside the representable range of instants",
            cause=exc,
        ) from exc


__all__ = [
    "MISSING_OFFSET_MESSAGE",
    "Civil",
    "civil_to_utc",
    "utc_to_civil",
    "validate_civil",
]
