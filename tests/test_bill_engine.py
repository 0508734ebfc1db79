"""
Tests for bill recurrence and due-date classification.
"""

from datetime import date, timedelta
from decimal import Decimal

import pytest
from pydantic import ValidationError

from spark_budget.engine.bills import (
    bill_status,
    bills_due_on,
    classify_bill_status,
    days_until_due,
    due_within,
    is_bill_due_on,
    is_due_soon,
    is_overdue,
    sort_by_due_date,
)
from spark_budget.engine.recurrence import (
    next_occurrence,
    recurrence_period,
    roll_forward,
)
from spark_budget.models.bill import Bill, BillRecurrence, BillRollover, BillStatus


TODAY = date(2024, 6, 15)


def make_bill(**overrides) -> Bill:
    fields = {
        "title": "Electricity",
        "category": "Utilities",
        "amount": Decimal("120.00"),
        "due_date": TODAY,
        "recurrence": BillRecurrence.MONTHLY,
    }
    fields.update(overrides)
    return Bill(**fields)


class TestNextOccurrence:
    """Tests for advancing a due date by one period."""

    def test_one_time_is_terminal(self):
        assert next_occurrence(BillRecurrence.ONE_TIME, date(2024, 3, 1)) == date(2024, 3, 1)

    def test_weekly(self):
        assert next_occurrence(BillRecurrence.WEEKLY, date(2024, 12, 28)) == date(2025, 1, 4)

    def test_biweekly(self):
        assert next_occurrence(BillRecurrence.BIWEEKLY, date(2024, 2, 20)) == date(2024, 3, 5)

    def test_monthly_preserves_day(self):
        assert next_occurrence(BillRecurrence.MONTHLY, date(2024, 3, 15)) == date(2024, 4, 15)

    def test_monthly_clamps_to_february(self):
        assert next_occurrence(BillRecurrence.MONTHLY, date(2023, 1, 31)) == date(2023, 2, 28)
        assert next_occurrence(BillRecurrence.MONTHLY, date(2024, 1, 31)) == date(2024, 2, 29)

    def test_quarterly_clamps(self):
        assert next_occurrence(BillRecurrence.QUARTERLY, date(2024, 11, 30)) == date(2025, 2, 28)

    def test_yearly_from_leap_day(self):
        assert next_occurrence(BillRecurrence.YEARLY, date(2024, 2, 29)) == date(2025, 2, 28)

    def test_round_trip_adds_one_period(self):
        """Applying the recurrence twice equals once plus one period."""
        samples = [date(2024, 1, 31), date(2024, 2, 29), date(2023, 8, 31), date(2024, 6, 15)]
        for recurrence in BillRecurrence:
            if recurrence == BillRecurrence.ONE_TIME:
                assert recurrence_period(recurrence) is None
                continue
            period = recurrence_period(recurrence)
            for day in samples:
                once = next_occurrence(recurrence, day)
                assert next_occurrence(recurrence, once) == once + period


class TestRollForward:
    """Tests for the state of a bill after payment."""

    def test_monthly_rolls_and_resets(self):
        rollover = roll_forward(BillRecurrence.MONTHLY, date(2023, 1, 31))
        assert rollover.due_date == date(2023, 2, 28)
        assert rollover.is_paid is False
        assert rollover.rolled_forward is True

    def test_one_time_stays_paid(self):
        rollover = roll_forward(BillRecurrence.ONE_TIME, date(2024, 5, 1))
        assert rollover.due_date == date(2024, 5, 1)
        assert rollover.is_paid is True
        assert rollover.rolled_forward is False

    def test_rolled_forward_cannot_be_paid(self):
        with pytest.raises(ValidationError):
            BillRollover(due_date=date(2024, 5, 1), is_paid=True, rolled_forward=True)


class TestBillStatus:
    """Tests for Paid / Overdue / DueSoon / Upcoming classification."""

    def test_overdue_five_days(self):
        bill = make_bill(due_date=TODAY - timedelta(days=5))
        assert days_until_due(bill.due_date, TODAY) == -5
        assert bill_status(bill, TODAY) == BillStatus.OVERDUE
        assert is_overdue(bill, TODAY) is True

    def test_due_soon_three_days(self):
        bill = make_bill(due_date=TODAY + timedelta(days=3))
        assert bill_status(bill, TODAY) == BillStatus.DUE_SOON
        assert is_due_soon(bill, TODAY) is True

    def test_window_edges(self):
        assert classify_bill_status(False, 0) == BillStatus.DUE_SOON
        assert classify_bill_status(False, 7) == BillStatus.DUE_SOON
        assert classify_bill_status(False, 8) == BillStatus.UPCOMING
        assert classify_bill_status(False, -1) == BillStatus.OVERDUE

    def test_custom_window(self):
        assert classify_bill_status(False, 10, due_soon_days=14) == BillStatus.DUE_SOON

    def test_paid_wins(self):
        assert classify_bill_status(True, -30) == BillStatus.PAID
        bill = make_bill(due_date=TODAY - timedelta(days=2), is_paid=True)
        assert is_overdue(bill, TODAY) is False

    def test_days_until_due_is_not_clamped(self):
        assert days_until_due(date(2024, 1, 1), TODAY) < 0

    def test_statuses_are_exclusive_and_exhaustive(self):
        for is_paid in (True, False):
            for days in range(-40, 41):
                checks = {
                    BillStatus.OVERDUE: not is_paid and days < 0,
                    BillStatus.DUE_SOON: not is_paid and 0 <= days <= 7,
                    BillStatus.UPCOMING: not is_paid and days > 7,
                    BillStatus.PAID: is_paid,
                }
                holding = [status for status, holds in checks.items() if holds]
                assert len(holding) == 1
                assert classify_bill_status(is_paid, days) == holding[0]


class TestDueOn:
    """Tests for placing bills on calendar days."""

    def test_one_time_only_on_due_date(self):
        assert is_bill_due_on(date(2024, 5, 1), BillRecurrence.ONE_TIME, date(2024, 5, 1))
        assert not is_bill_due_on(date(2024, 5, 1), BillRecurrence.ONE_TIME, date(2024, 6, 1))

    def test_monthly_follows_clamped_rollover(self):
        due = date(2023, 1, 31)
        assert is_bill_due_on(due, BillRecurrence.MONTHLY, date(2023, 2, 28))
        assert is_bill_due_on(due, BillRecurrence.MONTHLY, date(2023, 3, 28))
        assert not is_bill_due_on(due, BillRecurrence.MONTHLY, date(2023, 3, 31))

    def test_never_before_due_date(self):
        assert not is_bill_due_on(date(2023, 1, 31), BillRecurrence.MONTHLY, date(2022, 12, 31))

    def test_weekly(self):
        due = date(2024, 1, 5)
        assert is_bill_due_on(due, BillRecurrence.WEEKLY, date(2024, 1, 19))
        assert not is_bill_due_on(due, BillRecurrence.WEEKLY, date(2024, 1, 18))

    def test_yearly_leap_day(self):
        assert is_bill_due_on(date(2024, 2, 29), BillRecurrence.YEARLY, date(2025, 2, 28))

    def test_bills_due_on(self):
        rent = make_bill(title="Rent", due_date=date(2024, 6, 1))
        phone = make_bill(title="Phone", due_date=date(2024, 6, 10))
        gym = make_bill(title="Gym", due_date=date(2024, 5, 4), recurrence=BillRecurrence.WEEKLY)
        due = bills_due_on([rent, phone, gym], date(2024, 7, 1))
        assert [bill.title for bill in due] == ["Rent"]
        due = bills_due_on([rent, phone, gym], date(2024, 6, 29))
        assert [bill.title for bill in due] == ["Gym"]

    def test_sort_by_due_date(self):
        late = make_bill(title="Late", due_date=date(2024, 7, 1))
        early = make_bill(title="Early", due_date=date(2024, 6, 1))
        assert [bill.title for bill in sort_by_due_date([late, early])] == ["Early", "Late"]

    def test_due_within_is_inclusive(self):
        bill = make_bill(due_date=date(2024, 6, 22))
        assert due_within(bill, TODAY, date(2024, 6, 22))
        assert not due_within(bill, TODAY, date(2024, 6, 21))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
