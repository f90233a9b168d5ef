"""Kernel time – calendar math, exact seconds, instants, civil time and clocks."""
from civiltime.kernel.time.calendar import (
    Date,
    DayOfWeek,
    civil_to_epoch_day,
    day_of_week,
    day_of_year,
    days_in_month,
    epoch_day_to_civil,
    is_leap_year,
    is_valid_date,
    validate_date,
)
from civiltime.kernel.time.civil import Civil, civil_to_utc, utc_to_civil
from civiltime.kernel.time.clock import Clock, ClockSource, FrozenClock, SystemClock, utc_now
from civiltime.kernel.time.fixed_point import FixedPointSeconds, to_fixed_point
from civiltime.kernel.time.rfc3339 import (
    format_civil,
    format_offset,
    format_utc,
    parse_civil,
    parse_utc,
)
from civiltime.kernel.time.utc import EPOCH, Utc
from civiltime.kernel.time.zone import UTC_OFFSET, ZoneOffset

__all__ = [
    "EPOCH",
    "UTC_OFFSET",
    "Civil",
    "Clock",
    "ClockSource",
    "Date",
    "DayOfWeek",
    "FixedPointSeconds",
    "FrozenClock",
    "SystemClock",
    "Utc",
    "ZoneOffset",
    "civil_to_epoch_day",
    "civil_to_utc",
    "day_of_week",
    "day_of_year",
    "days_in_month",
    "epoch_day_to_civil",
    "format_civil",
    "format_offset",
    "format_utc",
    "is_leap_year",
    "is_valid_date",
    "parse_civil",
    "parse_utc",
    "to_fixed_point",
    "utc_now",
    "validate_date",
]
