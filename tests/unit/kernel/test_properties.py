"""Property-based tests for the time engine."""

from __future__ import annotations

from decimal import Decimal

from hypothesis import given
from hypothesis import strategies as st

from civiltime.kernel.time.calendar import (
    Date,
    civil_to_epoch_day,
    day_of_week,
    epoch_day_to_civil,
    validate_date,
)
from civiltime.kernel.time.civil import Civil, civil_to_utc, utc_to_civil
from civiltime.kernel.time.rfc3339 import format_civil, format_utc, parse_civil, parse_utc
from civiltime.kernel.time.utc import Utc
from civiltime.kernel.time.zone import UTC_OFFSET
from civiltime.testing.generators import (
    civil_strategy,
    date_strategy,
    seconds_strategy,
    utc_strategy,
)


@given(utc_strategy())
def test_parse_of_format_is_identity(utc: Utc) -> None:
    assert parse_utc(format_utc(utc)) == utc


@given(utc_strategy(), seconds_strategy())
def test_add_then_diff_returns_delta(utc: Utc, delta: Decimal) -> None:
    assert utc.add_seconds(delta).diff_seconds(utc) == delta


@given(utc_strategy(), seconds_strategy())
def test_add_keeps_fraction_in_unit_interval(utc: Utc, delta: Decimal) -> None:
    result = utc.add_seconds(delta)
    assert 0 <= result.fraction < 1


@given(civil_strategy())
def test_civil_round_trip_denotes_same_instant(civil: Civil) -> None:
    back = utc_to_civil(civil_to_utc(civil))
    assert back.utc_offset == UTC_OFFSET
    assert civil_to_utc(back) == civil_to_utc(civil)


@given(civil_strategy())
def test_format_then_parse_civil(civil: Civil) -> None:
    assert parse_civil(format_civil(civil)) == civil


@given(date_strategy(min_year=-4000, max_year=4000))
def test_epoch_day_inverse(date: Date) -> None:
    assert epoch_day_to_civil(civil_to_epoch_day(date)) == date


@given(st.integers(-10**7, 10**7))
def test_epoch_day_to_civil_is_valid(epoch_day: int) -> None:
    validate_date(epoch_day_to_civil(epoch_day))


@given(date_strategy())
def test_next_day_is_next_weekday(date: Date) -> None:
    tomorrow = epoch_day_to_civil(civil_to_epoch_day(date) + 1)
    assert (day_of_week(tomorrow).ordinal - day_of_week(date).ordinal) % 7 == 1
