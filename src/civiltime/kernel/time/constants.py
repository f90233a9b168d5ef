"""Internal constants for the time kernel.

Unit conversions, calendar tables and the limits shared by the value
types. Not part of the public API.
"""

from __future__ import annotations

from typing import Final

NANOS_PER_SECOND: Final = 1_000_000_000
NANOS_DIGITS: Final = 9

SECONDS_PER_MINUTE: Final = 60
SECONDS_PER_HOUR: Final = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: Final = 24 * SECONDS_PER_HOUR  # 86_400

# Days in each month of a common year, 1-indexed.
DAYS_IN_MONTH: Final[tuple[int, ...]] = (
    0,
    31, 28, 31, 30, 31, 30,
    31, 31, 30, 31, 30, 31,
)

# Cumulative days before the first of each month of a common year, 1-indexed.
DAYS_BEFORE_MONTH: Final[tuple[int, ...]] = (
    0,
    0, 31, 59, 90, 120, 151,
    181, 212, 243, 273, 304, 334,
)

# Proleptic Gregorian 400-year cycle.
DAYS_PER_ERA: Final = 146_097
YEARS_PER_ERA: Final = 400

# Days from 0000-03-01 to 1970-01-01.
EPOCH_DAY_SHIFT: Final = 719_468

# 1970-01-01 was a Thursday; index 4 with Sunday = 0.
EPOCH_WEEKDAY_INDEX: Final = 4

# RFC 3339 only has room for four-digit years.
MIN_RFC3339_YEAR: Final = 0
MAX_RFC3339_YEAR: Final = 9999

MAX_OFFSET_HOURS: Final = 23

INT64_MIN: Final = -(2**63)
INT64_MAX: Final = 2**63 - 1


__all__ = [
    "DAYS_BEFORE_MONTH",
    "DAYS_IN_MONTH",
    "DAYS_PER_ERA",
    "EPOCH_DAY_SHIFT",
    "EPOCH_WEEKDAY_INDEX",
    "INT64_MAX",
    "INT64_MIN",
    "MAX_OFFSET_HOURS",
    "MAX_RFC3339_YEAR",
    "MIN_RFC3339_YEAR",
    "NANOS_DIGITS",
    "NANOS_PER_SECOND",
    "SECONDS_PER_DAY",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_MINUTE",
    "YEARS_PER_ERA",
]
