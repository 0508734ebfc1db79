"""
Tests for calendar primitives.
"""

from datetime import date, datetime, timezone

import pytest

from spark_budget.utils.dates import (
    add_days,
    add_months,
    add_years,
    day_of_month,
    day_of_week,
    days_between,
    ordinal_day,
    start_of_day,
    to_local_date,
    with_day,
)


class TestDayCounting:
    """Tests for day-granularity arithmetic."""

    def test_days_between_ignores_time_of_day(self):
        """One minute across midnight is one whole day."""
        assert days_between(
            datetime(2024, 1, 1, 23, 59),
            datetime(2024, 1, 2, 0, 1),
        ) == 1

    def test_days_between_same_day_is_zero(self):
        assert days_between(datetime(2024, 1, 1, 0, 0), datetime(2024, 1, 1, 23, 59)) == 0

    def test_days_between_negative(self):
        assert days_between(date(2024, 1, 10), date(2024, 1, 5)) == -5

    def test_days_between_across_year(self):
        assert days_between(date(2023, 12, 25), date(2024, 1, 8)) == 14

    def test_start_of_day(self):
        assert start_of_day(datetime(2024, 3, 5, 15, 30)) == datetime(2024, 3, 5)
        assert start_of_day(date(2024, 3, 5)) == datetime(2024, 3, 5)

    def test_aware_datetime_uses_local_calendar(self):
        """Aware datetimes are converted to the process-local zone."""
        moment = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert to_local_date(moment) == moment.astimezone().date()

    def test_rejects_non_dates(self):
        with pytest.raises(TypeError):
            to_local_date("2024-01-01")


class TestDayComponents:
    """Tests for weekday and day-of-month extraction."""

    def test_day_of_week_starts_on_sunday(self):
        assert day_of_week(date(2024, 1, 7)) == 1   # Sunday
        assert day_of_week(date(2024, 1, 8)) == 2   # Monday
        assert day_of_week(date(2024, 1, 5)) == 6   # Friday
        assert day_of_week(date(2024, 1, 6)) == 7   # Saturday

    def test_day_of_month(self):
        assert day_of_month(datetime(2024, 2, 29, 8, 0)) == 29


class TestMonthArithmetic:
    """Tests for clamped month/year arithmetic."""

    def test_add_days(self):
        assert add_days(date(2024, 2, 28), 1) == date(2024, 2, 29)

    def test_add_months_clamps_to_leap_february(self):
        assert add_months(date(2024, 1, 31), 1) == date(2024, 2, 29)

    def test_add_months_clamps_to_february(self):
        assert add_months(date(2023, 1, 31), 1) == date(2023, 2, 28)

    def test_add_months_keeps_day_when_possible(self):
        assert add_months(date(2024, 1, 15), 3) == date(2024, 4, 15)

    def test_add_years_from_leap_day(self):
        assert add_years(date(2024, 2, 29), 1) == date(2025, 2, 28)

    def test_with_day_clamps(self):
        assert with_day(date(2024, 4, 10), 31) == date(2024, 4, 30)
        assert with_day(date(2024, 4, 10), 12) == date(2024, 4, 12)


class TestOrdinalDay:
    """Tests for ordinal suffixes."""

    @pytest.mark.parametrize("day,expected", [
        (1, "1st"), (2, "2nd"), (3, "3rd"), (4, "4th"),
        (11, "11th"), (12, "12th"), (13, "13th"),
        (21, "21st"), (22, "22nd"), (23, "23rd"), (31, "31st"),
    ])
    def test_ordinal_day(self, day, expected):
        assert ordinal_day(day) == expected
