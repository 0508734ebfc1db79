"""
Daily Budget Summary

Combines the primary account balance with the payday schedule into the
dashboard card: next payday, days left, per-day budget and cycle progress.
"""

from decimal import Decimal
from typing import Iterable, Optional

from spark_budget.engine.payday import (
    daily_budget,
    days_until_payday,
    next_payday,
    pay_cycle_progress,
)
from spark_budget.models.account import Account
from spark_budget.models.budget import DailyBudgetSummary
from spark_budget.models.schedule import PaydaySettings
from spark_budget.utils.dates import DateLike
from spark_budget.validation import ScheduleValidator


SETUP_PROMPT = (
    "Mark an account as primary and configure your payday settings "
    "to track your daily budget."
)


def primary_account(accounts: Iterable[Account]) -> Optional[Account]:
    """The first account flagged primary, if any."""
    return next((account for account in accounts if account.is_primary), None)


def summarize_daily_budget(
    accounts: Iterable[Account],
    payday_settings: Optional[PaydaySettings],
    today: DateLike,
) -> DailyBudgetSummary:
    """
    Build the daily budget summary for `today`.

    Never raises for missing or unusable configuration; the summary comes
    back with is_configured=False and a message instead.
    """
    account = primary_account(accounts)
    if account is None or payday_settings is None:
        return DailyBudgetSummary(is_configured=False, setup_message=SETUP_PROMPT)

    result = ScheduleValidator().validate(payday_settings)
    if result.schedule is None:
        return DailyBudgetSummary(
            is_configured=False,
            setup_message="; ".join(result.error_messages),
            account_id=account.id,
            account_name=account.name,
            balance=account.balance,
        )

    schedule = result.schedule
    days = days_until_payday(schedule, today)

    return DailyBudgetSummary(
        is_configured=True,
        account_id=account.id,
        account_name=account.name,
        balance=account.balance,
        next_payday=next_payday(schedule, today),
        days_until_payday=days,
        daily_budget=daily_budget(account.balance, days),
        cycle_progress=pay_cycle_progress(schedule, today),
    )


def rounded_daily_budget(summary: DailyBudgetSummary) -> Optional[Decimal]:
    """Daily budget rounded to cents for display."""
    if summary.daily_budget is None:
        return None
    return summary.daily_budget.quantize(Decimal("0.01"))
