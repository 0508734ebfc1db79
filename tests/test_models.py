"""
Tests for Spark Budget

Test strategy:
1. Unit tests for the pure engine (dates, paydays, bills)
2. Model tests for validation rules
3. Service tests against in-memory storage (no real persistence)
"""

import pytest
from datetime import date
from decimal import Decimal
from uuid import uuid4

from spark_budget.models.account import Account, AccountType, Transaction, TransactionType
from spark_budget.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from spark_budget.models.bill import Bill, BillRecurrence, BillStatus
from spark_budget.models.budget import DailyBudgetSummary


class TestBillModels:
    """Tests for bill-related Pydantic models."""

    def test_bill_creation(self):
        """Test Bill model creation with defaults."""
        bill = Bill(
            title="Internet",
            category="Utilities",
            amount=Decimal("59.99"),
            due_date=date(2024, 6, 1),
        )
        assert bill.recurrence == BillRecurrence.MONTHLY
        assert bill.is_paid is False
        assert bill.last_paid_date is None
        assert bill.is_recurring is True

    def test_bill_strips_whitespace(self):
        bill = Bill(
            title="  Rent  ",
            category="Housing",
            amount=Decimal("1200"),
            due_date=date(2024, 6, 1),
        )
        assert bill.title == "Rent"

    def test_bill_rejects_negative_amount(self):
        with pytest.raises(ValueError):
            Bill(
                title="Test",
                category="Other",
                amount=Decimal("-100"),
                due_date=date(2024, 6, 1),
            )

    def test_bill_rejects_empty_title(self):
        with pytest.raises(ValueError):
            Bill(
                title="   ",
                category="Other",
                amount=Decimal("10"),
                due_date=date(2024, 6, 1),
            )

    def test_one_time_bill_is_not_recurring(self):
        bill = Bill(
            title="Car repair",
            category="Auto",
            amount=Decimal("400"),
            due_date=date(2024, 6, 1),
            recurrence=BillRecurrence.ONE_TIME,
        )
        assert bill.is_recurring is False

    def test_recurrence_values(self):
        assert BillRecurrence("one_time") == BillRecurrence.ONE_TIME
        assert BillRecurrence.QUARTERLY.value == "quarterly"

    def test_status_values(self):
        assert {status.value for status in BillStatus} == {
            "paid", "overdue", "due_soon", "upcoming",
        }


class TestAccountModels:
    """Tests for account and transaction models."""

    def test_account_defaults(self):
        account = Account(name="Checking")
        assert account.account_type == AccountType.CHECKING
        assert account.balance == Decimal("0")
        assert account.is_primary is False

    def test_account_balance_may_be_negative(self):
        account = Account(name="Card", account_type=AccountType.CREDIT_CARD, balance=Decimal("-250"))
        assert account.balance == Decimal("-250")

    def test_transaction_creation(self):
        transaction = Transaction(
            amount=Decimal("42.00"),
            transaction_date=date(2024, 6, 1),
            description="Groceries",
            category="Food",
            account_id=uuid4(),
        )
        assert transaction.type == TransactionType.EXPENSE


class TestAuditModels:
    """Tests for audit-related models."""

    def test_audit_event_creation(self):
        event = AuditEvent(
            event_type=AuditEventType.BILL_CREATED,
            description="Bill created",
        )
        assert event.event_type == AuditEventType.BILL_CREATED
        assert event.severity == AuditSeverity.INFO

    def test_audit_event_to_log_dict(self):
        event = AuditEvent(
            event_type=AuditEventType.BILL_PAID,
            description="Bill paid",
            details={"amount": "120.00"},
        )
        log_dict = event.to_log_dict()
        assert "event_id" in log_dict
        assert log_dict["event_type"] == "bill_paid"
        assert log_dict["details"]["amount"] == "120.00"
        assert log_dict["entity_id"] is None

    def test_builder_bill_paid(self):
        bill_id = uuid4()
        correlation_id = uuid4()
        transaction_id = uuid4()

        event = AuditEventBuilder.bill_paid(
            bill_id=bill_id,
            title="Rent",
            amount="1200.00",
            paid_on=date(2024, 6, 1),
            correlation_id=correlation_id,
            transaction_id=transaction_id,
        )

        assert event.event_type == AuditEventType.BILL_PAID
        assert event.entity_id == bill_id
        assert event.correlation_id == correlation_id
        assert event.details["paid_on"] == "2024-06-01"
        assert event.details["transaction_id"] == str(transaction_id)

    def test_builder_bill_rolled_forward(self):
        event = AuditEventBuilder.bill_rolled_forward(
            bill_id=uuid4(),
            previous_due_date=date(2024, 1, 31),
            new_due_date=date(2024, 2, 29),
            recurrence="monthly",
        )
        assert event.event_type == AuditEventType.BILL_ROLLED_FORWARD
        assert event.details["new_due_date"] == "2024-02-29"

    def test_builder_schedule_rejected_is_warning(self):
        event = AuditEventBuilder.schedule_rejected(
            frequency="semi_monthly",
            issues=[{"field": "semi_monthly_first_day"}],
        )
        assert event.severity == AuditSeverity.WARNING
        assert event.entity_type == "settings"


class TestDailyBudgetSummary:
    """Tests for the summary model."""

    def test_days_until_payday_floor(self):
        with pytest.raises(ValueError):
            DailyBudgetSummary(is_configured=True, days_until_payday=0)

    def test_unconfigured(self):
        summary = DailyBudgetSummary(is_configured=False, setup_message="Set up payday")
        assert summary.daily_budget is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
