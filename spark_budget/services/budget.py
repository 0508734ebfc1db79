"""
Budget Service

Loads accounts from storage and builds the daily budget summary. Payday
settings that cannot be turned into a schedule are recorded in the audit
trail before the unconfigured summary is returned.
"""

from typing import Optional

from spark_budget.audit import AuditLogger
from spark_budget.config import get_settings
from spark_budget.engine import summarize_daily_budget
from spark_budget.models.budget import DailyBudgetSummary
from spark_budget.models.schedule import PaydaySettings
from spark_budget.services.storage import AccountStorageInterface
from spark_budget.utils.dates import DateLike
from spark_budget.validation import ScheduleValidator


class BudgetService:
    """Daily budget lookups over account storage."""

    def __init__(
        self,
        accounts: AccountStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._accounts = accounts
        self._audit = audit_logger or AuditLogger()
        self._validator = ScheduleValidator()
        self._settings = get_settings().app

    async def daily_budget_summary(
        self,
        payday_settings: Optional[PaydaySettings],
        today: DateLike,
    ) -> DailyBudgetSummary:
        """
        Summary for the dashboard card on `today`.

        A SCHEDULE_REJECTED event is logged when `payday_settings` are
        present but invalid.
        """
        if payday_settings is not None:
            result = self._validator.validate(payday_settings)
            if result.schedule is None:
                await self._audit.log_schedule_rejected(
                    frequency=payday_settings.frequency.value,
                    issues=[issue.model_dump() for issue in result.issues],
                )

        accounts = await self._accounts.list_accounts()
        summary = summarize_daily_budget(accounts, payday_settings, today)
        return summary.model_copy(update={"currency_code": self._settings.currency_code})
