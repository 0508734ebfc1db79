"""
Tests for the daily budget summary.
"""

from datetime import date
from decimal import Decimal

import pytest

from spark_budget.engine.budget import (
    SETUP_PROMPT,
    primary_account,
    rounded_daily_budget,
    summarize_daily_budget,
)
from spark_budget.models.account import Account
from spark_budget.models.schedule import PaydayFrequency, PaydaySettings


WEEKLY_FRIDAY = PaydaySettings(
    payday=date(2024, 1, 5),
    frequency=PaydayFrequency.WEEKLY,
    weekday=6,
)


class TestSummarizeDailyBudget:
    """Tests for combining balance and payday schedule."""

    def test_configured_summary(self):
        accounts = [
            Account(name="Savings", balance=Decimal("5000")),
            Account(name="Checking", balance=Decimal("300"), is_primary=True),
        ]
        summary = summarize_daily_budget(accounts, WEEKLY_FRIDAY, date(2024, 1, 2))

        assert summary.is_configured is True
        assert summary.account_name == "Checking"
        assert summary.next_payday == date(2024, 1, 5)
        assert summary.days_until_payday == 3
        assert summary.daily_budget == Decimal("100")
        assert summary.cycle_progress == pytest.approx(4 / 7)

    def test_no_primary_account(self):
        summary = summarize_daily_budget(
            [Account(name="Checking", balance=Decimal("300"))],
            WEEKLY_FRIDAY,
            date(2024, 1, 2),
        )
        assert summary.is_configured is False
        assert summary.setup_message == SETUP_PROMPT

    def test_no_settings(self):
        summary = summarize_daily_budget(
            [Account(name="Checking", is_primary=True)],
            None,
            date(2024, 1, 2),
        )
        assert summary.is_configured is False

    def test_invalid_settings(self):
        settings = PaydaySettings(
            payday=date(2024, 1, 5),
            frequency=PaydayFrequency.SEMI_MONTHLY,
            semi_monthly_first_day=15,
            semi_monthly_second_day=1,
        )
        summary = summarize_daily_budget(
            [Account(name="Checking", is_primary=True)],
            settings,
            date(2024, 1, 2),
        )
        assert summary.is_configured is False
        assert "must come before" in summary.setup_message
        assert summary.account_name == "Checking"

    def test_rounded_daily_budget(self):
        summary = summarize_daily_budget(
            [Account(name="Checking", balance=Decimal("100"), is_primary=True)],
            WEEKLY_FRIDAY,
            date(2024, 1, 2),
        )
        assert rounded_daily_budget(summary) == Decimal("33.33")

    def test_primary_account_picks_first_flagged(self):
        first = Account(name="A", is_primary=True)
        second = Account(name="B", is_primary=True)
        assert primary_account([first, second]) is first
        assert primary_account([]) is None


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
