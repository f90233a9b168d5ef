"""Unit tests for Gregorian calendar math."""

from __future__ import annotations

import pytest

from civiltime.kernel.errors import InvalidDateError, ValidationError
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


# ---------------------------------------------------------------------------
# Leap years and month lengths
# ---------------------------------------------------------------------------


class TestLeapYear:
    @pytest.mark.parametrize("year", [2020, 2000, 1600, 2400, 0, -4])
    def test_leap(self, year: int) -> None:
        assert is_leap_year(year)

    @pytest.mark.parametrize("year", [2021, 1900, 2100, 1800, -1])
    def test_common(self, year: int) -> None:
        assert not is_leap_year(year)


class TestDaysInMonth:
    def test_february_leap(self) -> None:
        assert days_in_month(2020, 2) == 29

    def test_february_common(self) -> None:
        assert days_in_month(2021, 2) == 28

    def test_thirty_day_months(self) -> None:
        assert [days_in_month(2021, m) for m in (4, 6, 9, 11)] == [30, 30, 30, 30]

    def test_thirty_one_day_months(self) -> None:
        assert {days_in_month(2021, m) for m in (1, 3, 5, 7, 8, 10, 12)} == {31}

    def test_bad_month_raises(self) -> None:
        with pytest.raises(InvalidDateError):
            days_in_month(2021, 13)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class TestValidateDate:
    def test_feb_29_on_common_year_fails(self) -> None:
        with pytest.raises(InvalidDateError) as info:
            validate_date(Date(2021, 2, 29))
        assert info.value.detail == {"year": 2021, "month": 2, "day": 29}

    def test_feb_29_on_leap_year_ok(self) -> None:
        validate_date(Date(2020, 2, 29))

    @pytest.mark.parametrize(
        "date",
        [Date(2021, 0, 1), Date(2021, 13, 1), Date(2021, 4, 31), Date(2021, 1, 0)],
    )
    def test_out_of_range(self, date: Date) -> None:
        with pytest.raises(InvalidDateError):
            validate_date(date)

    def test_invalid_date_is_validation_error(self) -> None:
        with pytest.raises(ValidationError):
            validate_date(Date(2021, 2, 30))

    def test_is_valid_date(self) -> None:
        assert is_valid_date(Date(2024, 12, 31))
        assert not is_valid_date(Date(2024, 12, 32))


# ---------------------------------------------------------------------------
# Day of week / day of year
# ---------------------------------------------------------------------------


class TestDayOfWeek:
    @pytest.mark.parametrize(
        ("date", "expected"),
        [
            (Date(1994, 11, 7), DayOfWeek.MONDAY),
            (Date(1970, 1, 1), DayOfWeek.THURSDAY),
            (Date(2000, 1, 1), DayOfWeek.SATURDAY),
            (Date(2024, 2, 29), DayOfWeek.THURSDAY),
            (Date(1969, 12, 31), DayOfWeek.WEDNESDAY),
            (Date(1, 1, 1), DayOfWeek.MONDAY),
        ],
    )
    def test_known_dates(self, date: Date, expected: DayOfWeek) -> None:
        assert day_of_week(date) is expected

    def test_invalid_date_raises_recoverable_error(self) -> None:
        with pytest.raises(InvalidDateError):
            day_of_week(Date(2021, 2, 29))

    def test_enum_is_closed_and_sunday_first(self) -> None:
        assert [d.value for d in DayOfWeek] == [
            "sunday", "monday", "tuesday", "wednesday", "thursday", "friday", "saturday",
        ]
        assert DayOfWeek.from_index(0) is DayOfWeek.SUNDAY
        assert DayOfWeek.SATURDAY.ordinal == 6

    def test_from_index_out_of_range(self) -> None:
        with pytest.raises(ValueError):
            DayOfWeek.from_index(7)


class TestDayOfYear:
    def test_first_and_last(self) -> None:
        assert day_of_year(Date(2021, 1, 1)) == 1
        assert day_of_year(Date(2021, 12, 31)) == 365
        assert day_of_year(Date(2020, 12, 31)) == 366

    def test_after_leap_day(self) -> None:
        assert day_of_year(Date(2020, 3, 1)) == 61
        assert day_of_year(Date(2021, 3, 1)) == 60


# ---------------------------------------------------------------------------
# Epoch-day conversion
# ---------------------------------------------------------------------------


class TestEpochDay:
    @pytest.mark.parametrize(
        ("date", "epoch_day"),
        [
            (Date(1970, 1, 1), 0),
            (Date(1970, 1, 2), 1),
            (Date(1969, 12, 31), -1),
            (Date(2000, 3, 1), 11017),
            (Date(2026, 1, 1), 20454),
            (Date(1, 1, 1), -719162),
        ],
    )
    def test_known_values(self, date: Date, epoch_day: int) -> None:
        assert civil_to_epoch_day(date) == epoch_day
        assert epoch_day_to_civil(epoch_day) == date

    def test_inverse_over_several_leap_cycles(self) -> None:
        for day in range(-200_000, 200_000, 997):
            assert civil_to_epoch_day(epoch_day_to_civil(day)) == day

    def test_consecutive_days_are_consecutive_dates(self) -> None:
        previous = epoch_day_to_civil(-800)
        for day in range(-799, 800):
            current = epoch_day_to_civil(day)
            validate_date(current)
            assert civil_to_epoch_day(current) - civil_to_epoch_day(previous) == 1
            previous = current

    def test_negative_years(self) -> None:
        date = Date(-1, 3, 1)
        assert epoch_day_to_civil(civil_to_epoch_day(date)) == date

    def test_date_str(self) -> None:
        assert str(Date(7, 3, 9)) == "0007-03-09"


class TestFieldErrors:
    def test_bad_month_names_month(self) -> None:
        with pytest.raises(InvalidDateError) as info:
            validate_date(Date(2021, 13, 5))
        assert info.value.errors == [{"field": "month", "value": 13}]
        assert info.value.day == 5

    def test_bad_day_names_day(self) -> None:
        with pytest.raises(InvalidDateError) as info:
            validate_date(Date(2021, 4, 31))
        assert info.value.errors == [{"field": "day", "value": 31}]
        assert info.value.to_dict()["errors"] == [{"field": "day", "value": 31}]

    def test_days_in_month_names_month(self) -> None:
        with pytest.raises(InvalidDateError) as info:
            days_in_month(2021, 0)
        assert info.value.errors == [{"field": "month", "value": 0}]
