"""
Payday Resolution

Pure functions over a PaydaySchedule and an explicit reference date:
- next_payday: the first payday strictly after a date
- is_payday: whether a given day is a payday
- days_until_payday / daily_budget: the dashboard figures

"NEXT" POLICY: next_payday is strictly-after for every frequency. When
`from_date` is itself a payday, the following one is returned.

MONTHLY ANCHOR: Once `from_date` reaches the payday's day of month, the
result is the reference date plus one month. It advances from the anchor,
not from `from_date`, so a stale anchor keeps producing the same date.
Callers that want a moving anchor must store the returned payday back as
the new reference date.
"""

from datetime import date
from decimal import Decimal
from typing import Union

from spark_budget.models.schedule import (
    BiweeklySchedule,
    IntervalSchedule,
    MonthlySchedule,
    PaydayFrequency,
    PaydaySchedule,
    SemiMonthlySchedule,
    WeeklySchedule,
)
from spark_budget.utils.dates import (
    WEEKDAY_NAMES,
    DateLike,
    add_days,
    add_months,
    day_of_month,
    day_of_week,
    days_between,
    days_in_month,
    ordinal_day,
    to_local_date,
    with_day,
)


BIWEEKLY_CYCLE_DAYS = 14

# Nominal pay-cycle length per frequency, used for progress display only
NOMINAL_CYCLE_DAYS = {
    PaydayFrequency.WEEKLY: 7,
    PaydayFrequency.BIWEEKLY: 14,
    PaydayFrequency.SEMI_MONTHLY: 15,
    PaydayFrequency.MONTHLY: 30,
}


def _on_biweekly_cycle(schedule: BiweeklySchedule, day: date) -> bool:
    return abs(days_between(schedule.reference_date, day)) % BIWEEKLY_CYCLE_DAYS == 0


def _next_weekly(schedule: WeeklySchedule, from_date: date) -> date:
    for offset in range(1, 8):
        candidate = add_days(from_date, offset)
        if day_of_week(candidate) == schedule.weekday:
            return candidate
    raise AssertionError("unreachable: every weekday occurs within 7 days")


def _next_biweekly(schedule: BiweeklySchedule, from_date: date) -> date:
    for offset in range(1, BIWEEKLY_CYCLE_DAYS + 1):
        candidate = add_days(from_date, offset)
        if day_of_week(candidate) == schedule.weekday and _on_biweekly_cycle(schedule, candidate):
            return candidate
    # BiweeklySchedule guarantees the reference date is on the weekday,
    # so one of any 14 consecutive days is on the cycle.
    raise AssertionError("unreachable: a biweekly cycle repeats every 14 days")


def _next_semi_monthly(schedule: SemiMonthlySchedule, from_date: date) -> date:
    current_day = from_date.day
    if current_day < schedule.first_day:
        return with_day(from_date, schedule.first_day)
    if current_day < schedule.second_day:
        return with_day(from_date, schedule.second_day)
    return with_day(add_months(from_date.replace(day=1), 1), schedule.first_day)


def _next_monthly(schedule: MonthlySchedule, from_date: date) -> date:
    payday_day = schedule.reference_date.day
    if from_date.day < payday_day:
        candidate = with_day(from_date, payday_day)
        # Clamping can pull the candidate back onto from_date at month end
        if candidate > from_date:
            return candidate
    return add_months(schedule.reference_date, 1)


def next_payday(schedule: PaydaySchedule, from_date: DateLike) -> date:
    """
    The first payday strictly after `from_date`.

    Args:
        schedule: Resolved payday schedule
        from_date: Reference day (date or datetime, local calendar)

    Returns:
        The date of the next payday
    """
    start = to_local_date(from_date)

    if isinstance(schedule, WeeklySchedule):
        return _next_weekly(schedule, start)
    if isinstance(schedule, BiweeklySchedule):
        return _next_biweekly(schedule, start)
    if isinstance(schedule, SemiMonthlySchedule):
        return _next_semi_monthly(schedule, start)
    if isinstance(schedule, MonthlySchedule):
        return _next_monthly(schedule, start)
    if isinstance(schedule, IntervalSchedule):
        return add_days(start, schedule.interval_days)

    raise TypeError(f"Unsupported schedule type: {type(schedule).__name__}")


def is_payday(schedule: PaydaySchedule, day: DateLike) -> bool:
    """
    Whether `day` is a payday under `schedule`.

    Monthly paydays on the 29th-31st fall on the last day of shorter
    months, matching what next_payday produces.
    """
    target = to_local_date(day)

    if isinstance(schedule, WeeklySchedule):
        return day_of_week(target) == schedule.weekday
    if isinstance(schedule, BiweeklySchedule):
        return day_of_week(target) == schedule.weekday and _on_biweekly_cycle(schedule, target)
    if isinstance(schedule, SemiMonthlySchedule):
        return target.day in (schedule.first_day, schedule.second_day)
    if isinstance(schedule, MonthlySchedule):
        payday_day = min(
            day_of_month(schedule.reference_date),
            days_in_month(target.year, target.month),
        )
        return target.day == payday_day
    if isinstance(schedule, IntervalSchedule):
        # No weekday configured, so no day can be named a payday
        return False

    raise TypeError(f"Unsupported schedule type: {type(schedule).__name__}")


def days_until_payday(schedule: PaydaySchedule, today: DateLike) -> int:
    """
    Whole days from `today` to the next payday, never less than 1.

    The floor keeps daily_budget well-defined.
    """
    return max(days_between(today, next_payday(schedule, today)), 1)


def daily_budget(balance: Union[Decimal, int, str], days: int) -> Decimal:
    """
    Spendable amount per day: balance split evenly over `days`.

    Exact Decimal arithmetic, no float conversion. Zero when `days`
    is not positive.
    """
    if not isinstance(balance, Decimal):
        balance = Decimal(str(balance))
    if days <= 0:
        return Decimal("0")
    return balance / Decimal(days)


def paydays_between(schedule: PaydaySchedule, start: DateLike, end: DateLike) -> list[date]:
    """
    Every payday in the inclusive range [start, end], in order.

    Used to mark paydays on a month grid.
    """
    first = to_local_date(start)
    span = days_between(first, end)
    return [
        add_days(first, offset)
        for offset in range(span + 1)
        if is_payday(schedule, add_days(first, offset))
    ]


def nominal_cycle_days(frequency: PaydayFrequency) -> int:
    return NOMINAL_CYCLE_DAYS[frequency]


def pay_cycle_progress(schedule: PaydaySchedule, today: DateLike) -> float:
    """
    Fraction of the current pay cycle already elapsed, in [0, 1].

    Based on the nominal cycle length, so it is approximate for
    semi-monthly and monthly pay.
    """
    total = nominal_cycle_days(schedule.frequency)
    progress = 1.0 - days_until_payday(schedule, today) / total
    return min(max(progress, 0.0), 1.0)


def describe_schedule(schedule: PaydaySchedule) -> str:
    """Human-readable sentence for the settings screen."""
    if isinstance(schedule, WeeklySchedule):
        return f"You'll be paid every {WEEKDAY_NAMES[schedule.weekday - 1]}"
    if isinstance(schedule, BiweeklySchedule):
        return (
            f"You'll be paid every other {WEEKDAY_NAMES[schedule.weekday - 1]} "
            f"starting from {schedule.reference_date.isoformat()}"
        )
    if isinstance(schedule, SemiMonthlySchedule):
        return (
            f"You'll be paid on the {ordinal_day(schedule.first_day)} and "
            f"{ordinal_day(schedule.second_day)} of each month"
        )
    if isinstance(schedule, MonthlySchedule):
        return f"You'll be paid on the {ordinal_day(schedule.reference_date.day)} of each month"
    if isinstance(schedule, IntervalSchedule):
        return f"You'll be paid every {schedule.interval_days} days"

    raise TypeError(f"Unsupported schedule type: {type(schedule).__name__}")
