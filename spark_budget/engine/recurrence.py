"""
Bill Recurrence Resolution

Advances a bill's due date by one recurrence period. Month-based
periods clamp to the end of shorter months (Jan 31 -> Feb 28/29), and
the clamped day carries into later cycles because each rollover starts
from the previous due date.
"""

from datetime import date
from typing import Optional

from dateutil.relativedelta import relativedelta

from spark_budget.models.bill import BillRecurrence, BillRollover
from spark_budget.utils.dates import DateLike, to_local_date


RECURRENCE_PERIODS = {
    BillRecurrence.WEEKLY: relativedelta(days=7),
    BillRecurrence.BIWEEKLY: relativedelta(days=14),
    BillRecurrence.MONTHLY: relativedelta(months=1),
    BillRecurrence.QUARTERLY: relativedelta(months=3),
    BillRecurrence.YEARLY: relativedelta(years=1),
}


def recurrence_period(recurrence: BillRecurrence) -> Optional[relativedelta]:
    """One period of `recurrence`, or None for one-time bills."""
    return RECURRENCE_PERIODS.get(recurrence)


def next_occurrence(recurrence: BillRecurrence, from_date: DateLike) -> date:
    """
    The due date one period after `from_date`.

    One-time bills are terminal: `from_date` comes back unchanged.
    """
    start = to_local_date(from_date)
    period = recurrence_period(recurrence)
    if period is None:
        return start
    return start + period


def roll_forward(recurrence: BillRecurrence, due_date: DateLike) -> BillRollover:
    """
    State of a bill right after its current cycle is paid.

    Recurring bills move to the next due date and start unpaid.
    One-time bills keep their due date and stay paid.
    """
    current = to_local_date(due_date)
    if recurrence == BillRecurrence.ONE_TIME:
        return BillRollover(due_date=current, is_paid=True, rolled_forward=False)
    return BillRollover(
        due_date=next_occurrence(recurrence, current),
        is_paid=False,
        rolled_forward=True,
    )
