"""CalendarMath — proleptic Gregorian calendar algorithms.

All functions are pure. Day counting uses the era-based algorithm (400-year
cycles of 146 097 days, years starting on 1 March) so that the conversion
between civil dates and epoch days is exact for negative years as well.
"""

from __future__ import annotations

import dataclasses
from enum import Enum

from civiltime.kernel.errors import InvalidDateError
from civiltime.kernel.time.constants import (
    DAYS_BEFORE_MONTH,
    DAYS_IN_MONTH,
    DAYS_PER_ERA,
    EPOCH_DAY_SHIFT,
    EPOCH_WEEKDAY_INDEX,
    YEARS_PER_ERA,
)


class DayOfWeek(str, Enum):
    """Closed enumeration of weekdays, Sunday first."""

    SUNDAY = "sunday"
    MONDAY = "monday"
    TUESDAY = "tuesday"
    WEDNESDAY = "wednesday"
    THURSDAY = "thursday"
    FRIDAY = "friday"
    SATURDAY = "saturday"

    @classmethod
    def from_index(cls, index: int) -> "DayOfWeek":
        """Weekday for *index* in ``0..6`` with ``0`` meaning Sunday."""
        if not 0 <= index <= 6:
            raise ValueError(f"Weekday index must be in 0..6, got {index}")
        return _WEEK[index]

    @property
    def ordinal(self) -> int:
        return _WEEK.index(self)


_WEEK: tuple[DayOfWeek, ...] = tuple(DayOfWeek)


@dataclasses.dataclass(frozen=True, slots=True)
class Date:
    """Calendar date. Not validated on construction; see :func:`validate_date`."""

    year: int
    month: int
    day: int

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"


def is_leap_year(year: int) -> bool:
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Length of *month* in *year*, February adjusted for leap years.

    Raises:
        InvalidDateError: *month* is outside ``1..12``; the error reports
            day ``1`` since no day is involved.
    """
    _check_month(year, month, 1)
    return _month_length(year, month)


def _month_length(year: int, month: int) -> int:
    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def _check_month(year: int, month: int, day: int) -> None:
    if not 1 <= month <= 12:
        raise InvalidDateError(
            year,
            month,
            day,
            f"Month must be in 1..12, got {month}",
            errors=[{"field": "month", "value": month}],
        )


def validate_date(date: Date) -> None:
    """Raise :class:`InvalidDateError` unless *date* exists in the calendar.

    ``errors`` on the raised exception names the offending field.
    """
    _check_month(date.year, date.month, date.day)
    length = _month_length(date.year, date.month)
    if not 1 <= date.day <= length:
        raise InvalidDateError(
            date.year,
            date.month,
            date.day,
            f"Day must be in 1..{length} for {date.year:04d}-{date.month:02d}, "
            f"got {date.day}",
            errors=[{"field": "day", "value": date.day}],
        )


def is_valid_date(date: Date) -> bool:
    try:
        validate_date(date)
    except InvalidDateError:
        return False
    return True


def civil_to_epoch_day(date: Date) -> int:
    """Days from 1970-01-01 to *date* (negative before the epoch)."""
    year = date.year - (1 if date.month <= 2 else 0)
    era = year // YEARS_PER_ERA
    year_of_era = year - era * YEARS_PER_ERA
    shifted_month = date.month - 3 if date.month > 2 else date.month + 9
    day_of_year = (153 * shifted_month + 2) // 5 + date.day - 1
    day_of_era = (
        year_of_era * 365 + year_of_era // 4 - year_of_era // 100 + day_of_year
    )
    return era * DAYS_PER_ERA + day_of_era - EPOCH_DAY_SHIFT


def epoch_day_to_civil(epoch_day: int) -> Date:
    """Inverse of :func:`civil_to_epoch_day`."""
    shifted = epoch_day + EPOCH_DAY_SHIFT
    era = shifted // DAYS_PER_ERA
    day_of_era = shifted - era * DAYS_PER_ERA
    year_of_era = (
        day_of_era
        - day_of_era // 1460
        + day_of_era // 36524
        - day_of_era // 146096
    ) // 365
    day_of_year = day_of_era - (
        365 * year_of_era + year_of_era // 4 - year_of_era // 100
    )
    shifted_month = (5 * day_of_year + 2) // 153
    day = day_of_year - (153 * shifted_month + 2) // 5 + 1
    month = shifted_month + 3 if shifted_month < 10 else shifted_month - 9
    year = year_of_era + era * YEARS_PER_ERA + (1 if month <= 2 else 0)
    return Date(year, month, day)


def day_of_week(date: Date) -> DayOfWeek:
    """Weekday of *date*.

    The date is validated first: an invalid date has no weekday and raises
    :class:`InvalidDateError`.
    """
    validate_date(date)
    return _WEEK[(civil_to_epoch_day(date) + EPOCH_WEEKDAY_INDEX) % 7]


def day_of_year(date: Date) -> int:
    """Ordinal day within the year, ``1..366``."""
    validate_date(date)
    leap_shift = 1 if date.month > 2 and is_leap_year(date.year) else 0
    return DAYS_BEFORE_MONTH[date.month] + date.day + leap_shift


__all__ = [
    "Date",
    "DayOfWeek",
    "civil_to_epoch_day",
    "day_of_week",
    "day_of_year",
    "days_in_month",
    "epoch_day_to_civil",
    "is_leap_year",
    "is_valid_date",
    "validate_date",
]
