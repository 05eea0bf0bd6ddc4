"""Tests for the billing holiday calendar."""

from datetime import date, timedelta

import pytest

from tool_rental.holidays import (
    independence_day,
    is_holiday,
    is_weekend,
    labor_day,
    observed_holidays,
)


class TestIndependenceDay:
    """Observed Independence Day shifts off weekends."""

    def test_weekday_is_observed_on_july_4(self):
        # July 4, 2023 is a Tuesday
        assert independence_day(2023) == date(2023, 7, 4)

    def test_saturday_shifts_to_friday(self):
        # July 4, 2020 is a Saturday
        assert independence_day(2020) == date(2020, 7, 3)
        assert independence_day(2020).weekday() == 4

    def test_sunday_shifts_to_monday(self):
        # July 4, 2021 is a Sunday
        assert independence_day(2021) == date(2021, 7, 5)
        assert independence_day(2021).weekday() == 0

    def test_2015_shifts_to_friday(self):
        assert independence_day(2015) == date(2015, 7, 3)

    @pytest.mark.parametrize("year", range(1990, 2051))
    def test_never_on_weekend(self, year):
        assert independence_day(year).weekday() < 5


class TestLaborDay:
    """Labor Day is the first Monday of September."""

    @pytest.mark.parametrize("year,expected", [
        (2015, date(2015, 9, 7)),
        (2020, date(2020, 9, 7)),
        (2021, date(2021, 9, 6)),
        (2022, date(2022, 9, 5)),
        (2025, date(2025, 9, 1)),
    ])
    def test_known_years(self, year, expected):
        assert labor_day(year) == expected

    @pytest.mark.parametrize("year", range(1990, 2051))
    def test_first_monday_of_september(self, year):
        day = labor_day(year)
        assert day.month == 9
        assert day.weekday() == 0
        assert day.day <= 7


class TestIsHoliday:
    """is_holiday() checks against the observed dates for the date's own year."""

    def test_observed_independence_day(self):
        assert is_holiday(date(2020, 7, 3)) is True

    def test_nominal_date_not_holiday_when_shifted(self):
        assert is_holiday(date(2020, 7, 4)) is False
        assert is_holiday(date(2021, 7, 4)) is False

    def test_labor_day(self):
        assert is_holiday(date(2015, 9, 7)) is True

    def test_ordinary_day(self):
        assert is_holiday(date(2015, 9, 8)) is False

    def test_only_two_holidays_per_year(self):
        start = date(2024, 1, 1)
        holidays = [
            start + timedelta(days=n)
            for n in range(366)
            if is_holiday(start + timedelta(days=n))
        ]
        assert holidays == [date(2024, 7, 4), date(2024, 9, 2)]

    def test_observed_holidays_is_cached(self):
        assert observed_holidays(2020) is observed_holidays(2020)
        assert observed_holidays(2020) == frozenset({date(2020, 7, 3), date(2020, 9, 7)})


class TestIsWeekend:
    """Saturday and Sunday are weekend days."""

    def test_saturday_and_sunday(self):
        assert is_weekend(date(2020, 7, 4)) is True
        assert is_weekend(date(2020, 7, 5)) is True

    def test_weekdays(self):
        for day in range(6, 11):  # Mon Jul 6 .. Fri Jul 10, 2020
            assert is_weekend(date(2020, 7, day)) is False
