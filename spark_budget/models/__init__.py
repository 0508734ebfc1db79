"""
Data Models Package

Pydantic models for schedules, bills, accounts, budget summaries and
audit events. Models hold data and validate it; date arithmetic lives
in spark_budget.engine.
"""

from spark_budget.models.account import (
    Account,
    AccountType,
    Transaction,
    TransactionType,
)
from spark_budget.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)
from spark_budget.models.bill import (
    Bill,
    BillRecurrence,
    BillRollover,
    BillStatus,
)
from spark_budget.models.budget import DailyBudgetSummary
from spark_budget.models.schedule import (
    BiweeklySchedule,
    IntervalSchedule,
    MonthlySchedule,
    PaydayFrequency,
    PaydaySchedule,
    PaydaySettings,
    ScheduleValidationResult,
    SemiMonthlySchedule,
    ValidationIssue,
    WeeklySchedule,
)

__all__ = [
    # Account models
    "Account",
    "AccountType",
    "Transaction",
    "TransactionType",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
    # Bill models
    "Bill",
    "BillRecurrence",
    "BillRollover",
    "BillStatus",
    # Budget
    "DailyBudgetSummary",
    # Schedule models
    "BiweeklySchedule",
    "IntervalSchedule",
    "MonthlySchedule",
    "PaydayFrequency",
    "PaydaySchedule",
    "PaydaySettings",
    "ScheduleValidationResult",
    "SemiMonthlySchedule",
    "ValidationIssue",
    "WeeklySchedule",
]
