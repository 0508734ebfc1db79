"""
Calendar Primitives

Day-granularity helpers shared by the payday and bill engines.

TIMEZONE POLICY: Every "day" is a day of the process-local calendar.
- A `date` is taken as-is.
- A naive `datetime` is read as local wall time.
- An aware `datetime` is converted to the local zone before its date is taken.

Month and year arithmetic clamps to the last valid day of the target month
(Jan 31 + 1 month = Feb 28/29). It never rolls over into the next month.
"""

import calendar
from datetime import date, datetime, time, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta


DateLike = Union[date, datetime]

# 1 = Sunday ... 7 = Saturday
WEEKDAY_NAMES = (
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
)


def to_local_date(value: DateLike) -> date:
    """
    Normalize a date or datetime to a calendar date in the local zone.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone()
        return value.date()
    if isinstance(value, date):
        return value
    raise TypeError(f"Unsupported type for date: {type(value)}")


def start_of_day(value: DateLike) -> datetime:
    """Midnight (naive, local) of the day containing `value`."""
    return datetime.combine(to_local_date(value), time.min)


def days_between(start: DateLike, end: DateLike) -> int:
    """
    Whole calendar days from `start` to `end`.

    Both sides are truncated to their day first, so time of day never
    produces a fractional or off-by-one result. Negative when `end`
    is before `start`.
    """
    return (to_local_date(end) - to_local_date(start)).days


def day_of_week(value: DateLike) -> int:
    """Day of week, 1 = Sunday through 7 = Saturday."""
    return to_local_date(value).isoweekday() % 7 + 1


def day_of_month(value: DateLike) -> int:
    return to_local_date(value).day


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def with_day(value: DateLike, day: int) -> date:
    """
    Same month as `value`, on `day`, clamped to the month's last day.
    """
    base = to_local_date(value)
    return base.replace(day=min(day, days_in_month(base.year, base.month)))


def add_days(value: DateLike, days: int) -> date:
    return to_local_date(value) + timedelta(days=days)


def add_months(value: DateLike, months: int) -> date:
    return to_local_date(value) + relativedelta(months=months)


def add_years(value: DateLike, years: int) -> date:
    return to_local_date(value) + relativedelta(years=years)


def ordinal_day(day: int) -> str:
    """
    Day of month with its English suffix: 1st, 2nd, 3rd, 4th ... 11th, 21st.
    """
    if 11 <= day % 100 <= 13:
        return f"{day}th"
    suffix = {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")
    return f"{day}{suffix}"
