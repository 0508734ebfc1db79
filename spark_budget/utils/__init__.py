"""Shared utilities."""

from spark_budget.utils.dates import (
    WEEKDAY_NAMES,
    DateLike,
    add_days,
    add_months,
    add_years,
    day_of_month,
    day_of_week,
    days_between,
    days_in_month,
    ordinal_day,
    start_of_day,
    to_local_date,
    with_day,
)

__all__ = [
    "WEEKDAY_NAMES",
    "DateLike",
    "add_days",
    "add_months",
    "add_years",
    "day_of_month",
    "day_of_week",
    "days_between",
    "days_in_month",
    "ordinal_day",
    "start_of_day",
    "to_local_date",
    "with_day",
]
