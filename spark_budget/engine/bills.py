"""
Bill Due-Date Classification

Turns a due date and a reference day into the figures the bill list and
calendar show: days until due, Paid / Overdue / DueSoon / Upcoming, and
whether a bill's cycle lands on a given calendar cell.

days_until_due is signed and never clamped. A negative value IS the
overdue signal.
"""

from datetime import date
from typing import Iterable

from spark_budget.engine.recurrence import next_occurrence
from spark_budget.models.bill import Bill, BillRecurrence, BillStatus
from spark_budget.utils.dates import DateLike, days_between, to_local_date


DEFAULT_DUE_SOON_DAYS = 7


def days_until_due(due_date: DateLike, today: DateLike) -> int:
    """Whole days from `today` to `due_date`; negative once overdue."""
    return days_between(today, due_date)


def classify_bill_status(
    is_paid: bool,
    days_until: int,
    due_soon_days: int = DEFAULT_DUE_SOON_DAYS,
) -> BillStatus:
    """
    Exactly one status for every (is_paid, days_until) pair.
    """
    if is_paid:
        return BillStatus.PAID
    if days_until < 0:
        return BillStatus.OVERDUE
    if days_until <= due_soon_days:
        return BillStatus.DUE_SOON
    return BillStatus.UPCOMING


def bill_status(
    bill: Bill,
    today: DateLike,
    due_soon_days: int = DEFAULT_DUE_SOON_DAYS,
) -> BillStatus:
    return classify_bill_status(
        bill.is_paid,
        days_until_due(bill.due_date, today),
        due_soon_days,
    )


def is_overdue(bill: Bill, today: DateLike) -> bool:
    return bill_status(bill, today) == BillStatus.OVERDUE


def is_due_soon(
    bill: Bill,
    today: DateLike,
    due_soon_days: int = DEFAULT_DUE_SOON_DAYS,
) -> bool:
    return bill_status(bill, today, due_soon_days) == BillStatus.DUE_SOON


def is_bill_due_on(due_date: DateLike, recurrence: BillRecurrence, day: DateLike) -> bool:
    """
    Whether a bill falls due on `day`.

    The cycle is walked forward from `due_date` with the same rollover the
    payment workflow applies, so clamped month-end days match what the bill
    will actually show once paid. Days before `due_date` never match.
    """
    current = to_local_date(due_date)
    target = to_local_date(day)

    if recurrence == BillRecurrence.ONE_TIME:
        return current == target

    while current < target:
        current = next_occurrence(recurrence, current)
    return current == target


def bills_due_on(bills: Iterable[Bill], day: DateLike) -> list[Bill]:
    """Bills whose cycle lands on `day`, in input order."""
    target = to_local_date(day)
    return [
        bill for bill in bills
        if is_bill_due_on(bill.due_date, bill.recurrence, target)
    ]


def sort_by_due_date(bills: Iterable[Bill]) -> list[Bill]:
    return sorted(bills, key=lambda bill: bill.due_date)


def due_within(bill: Bill, start: date, end: date) -> bool:
    """Current due date inside the inclusive range [start, end]."""
    return start <= bill.due_date <= end
