"""
Calendar Engine Package

Pure date arithmetic for paydays and bills. Every function takes its
reference date explicitly and never reads the system clock, so results
are deterministic and safe to compute concurrently.
"""

from spark_budget.engine.bills import (
    DEFAULT_DUE_SOON_DAYS,
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
from spark_budget.engine.budget import (
    primary_account,
    rounded_daily_budget,
    summarize_daily_budget,
)
from spark_budget.engine.payday import (
    daily_budget,
    days_until_payday,
    describe_schedule,
    is_payday,
    next_payday,
    nominal_cycle_days,
    pay_cycle_progress,
    paydays_between,
)
from spark_budget.engine.recurrence import (
    next_occurrence,
    recurrence_period,
    roll_forward,
)

__all__ = [
    # Bills
    "DEFAULT_DUE_SOON_DAYS",
    "bill_status",
    "bills_due_on",
    "classify_bill_status",
    "days_until_due",
    "due_within",
    "is_bill_due_on",
    "is_due_soon",
    "is_overdue",
    "sort_by_due_date",
    # Budget
    "primary_account",
    "rounded_daily_budget",
    "summarize_daily_budget",
    # Payday
    "daily_budget",
    "days_until_payday",
    "describe_schedule",
    "is_payday",
    "next_payday",
    "nominal_cycle_days",
    "pay_cycle_progress",
    "paydays_between",
    # Recurrence
    "next_occurrence",
    "recurrence_period",
    "roll_forward",
]
