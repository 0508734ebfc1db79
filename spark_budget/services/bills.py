"""
Bill Service

Bookkeeping around bills: creating them, paying them, rolling recurring
bills forward, and the lookups the dashboard needs (overdue, due soon,
upcoming totals).

Every operation takes its reference date explicitly. Date logic is
delegated to spark_budget.engine; this module only fetches, mutates and
saves records.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional
from uuid import UUID

import structlog

from spark_budget.audit import AuditLogger, create_correlation_id
from spark_budget.config import get_settings
from spark_budget.engine import days_until_due, roll_forward
from spark_budget.models.account import Transaction, TransactionType
from spark_budget.models.audit import AuditEventBuilder
from spark_budget.models.bill import Bill, BillRecurrence
from spark_budget.services.storage import (
    AccountStorageInterface,
    BillStorageInterface,
    StorageError,
    TransactionStorageInterface,
)
from spark_budget.utils.dates import add_days


logger = structlog.get_logger(__name__)


class BillServiceError(Exception):
    """Base error for bill operations."""
    pass


class BillNotFoundError(BillServiceError):
    """The specified bill could not be found."""
    pass


class AccountNotFoundError(BillServiceError):
    """The specified account could not be found."""
    pass


class BillService:
    """
    Bill operations over the storage interfaces.
    """

    def __init__(
        self,
        bills: BillStorageInterface,
        accounts: AccountStorageInterface,
        transactions: TransactionStorageInterface,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._bills = bills
        self._accounts = accounts
        self._transactions = transactions
        self._audit = audit_logger or AuditLogger()
        self._settings = get_settings().app

    async def _get_bill(self, bill_id: UUID) -> Bill:
        bill = await self._bills.get_bill_by_id(bill_id)
        if bill is None:
            raise BillNotFoundError(f"Bill {bill_id} could not be found")
        return bill

    # -------------------------------------------------------------------------
    # Bill operations
    # -------------------------------------------------------------------------

    async def create_bill(
        self,
        title: str,
        category: str,
        amount: Decimal,
        due_date: date,
        recurrence: BillRecurrence,
        account_id: UUID,
        notes: Optional[str] = None,
    ) -> Bill:
        """
        Create a bill paid from an existing account.

        Raises:
            AccountNotFoundError: If the account does not exist
        """
        account = await self._accounts.get_account_by_id(account_id)
        if account is None:
            raise AccountNotFoundError(f"Account {account_id} could not be found")

        bill = Bill(
            title=title,
            category=category,
            amount=amount,
            due_date=due_date,
            recurrence=recurrence,
            notes=notes,
            account_id=account.id,
        )
        await self._bills.save_bill(bill)

        await self._audit.log(AuditEventBuilder.bill_created(
            bill_id=bill.id,
            title=bill.title,
            amount=self._format_amount(bill.amount),
            due_date=bill.due_date,
            recurrence=bill.recurrence.value,
        ))
        return bill

    async def pay_bill(
        self,
        bill_id: UUID,
        payment_date: date,
        create_transaction: bool = True,
    ) -> Optional[Transaction]:
        """
        Record a payment on a bill.

        Marks the bill paid on `payment_date`. Recurring bills roll forward
        to their next due date and start the new cycle unpaid. When
        `create_transaction` is set and the bill has an account, an expense
        transaction is recorded and the account is debited.

        The bill is written first. If recording the payment then fails,
        the bill is restored, so a retry never debits twice.

        Returns:
            The expense transaction, if one was created

        Raises:
            BillNotFoundError: If the bill does not exist
            StorageError: If a write fails (logged as a SYSTEM_ERROR event)
        """
        correlation_id = create_correlation_id()
        bill = await self._get_bill(bill_id)
        original = bill.model_copy(deep=True)

        previous_due = bill.due_date
        rollover = roll_forward(bill.recurrence, bill.due_date)
        bill.last_paid_date = payment_date
        bill.due_date = rollover.due_date
        bill.is_paid = rollover.is_paid
        bill.modified_at = datetime.utcnow()

        try:
            await self._bills.update_bill(bill)
        except StorageError as e:
            await self._log_storage_failure("update_bill", e, bill.id, correlation_id)
            raise

        transaction = None
        if create_transaction and bill.account_id is not None:
            try:
                transaction = await self._debit_account(bill, payment_date)
            except StorageError as e:
                await self._bills.update_bill(original)
                await self._log_storage_failure("record_payment", e, bill.id, correlation_id)
                raise

        await self._audit.log(AuditEventBuilder.bill_paid(
            bill_id=bill.id,
            title=bill.title,
            amount=self._format_amount(bill.amount),
            paid_on=payment_date,
            correlation_id=correlation_id,
            transaction_id=transaction.id if transaction else None,
        ))

        if rollover.rolled_forward:
            await self._audit.log(AuditEventBuilder.bill_rolled_forward(
                bill_id=bill.id,
                previous_due_date=previous_due,
                new_due_date=bill.due_date,
                recurrence=bill.recurrence.value,
                correlation_id=correlation_id,
            ))

        return transaction

    async def _debit_account(self, bill: Bill, payment_date: date) -> Optional[Transaction]:
        account = await self._accounts.get_account_by_id(bill.account_id)
        if account is None:
            logger.warning(
                "bill_account_missing",
                bill_id=str(bill.id),
                account_id=str(bill.account_id),
            )
            return None

        original_balance = account.balance
        account.balance -= bill.amount
        account.modified_at = datetime.utcnow()
        await self._accounts.update_account(account)

        transaction = Transaction(
            amount=bill.amount,
            transaction_date=payment_date,
            description=bill.title,
            category=bill.category,
            type=TransactionType.EXPENSE,
            notes=f"Bill payment: {bill.title}",
            account_id=account.id,
        )
        try:
            await self._transactions.save_transaction(transaction)
        except StorageError:
            account.balance = original_balance
            await self._accounts.update_account(account)
            raise
        return transaction

    async def _log_storage_failure(
        self,
        operation: str,
        error: StorageError,
        bill_id: UUID,
        correlation_id: UUID,
    ) -> None:
        await self._audit.log_error(
            error_type=type(error).__name__,
            error_message=str(error),
            details={"operation": operation, "bill_id": str(bill_id)},
            correlation_id=correlation_id,
        )

    def _format_amount(self, amount: Decimal) -> str:
        return f"{amount:.2f} {self._settings.currency_code}"

    # -------------------------------------------------------------------------
    # Recurring bill processing
    # -------------------------------------------------------------------------

    async def process_recurring_bills(self, today: date) -> int:
        """
        Roll forward paid recurring bills whose due date has passed.

        Each qualifying bill advances one period and is reset to unpaid.

        Returns:
            Number of bills rolled forward
        """
        correlation_id = create_correlation_id()
        paid_bills = await self._bills.list_bills(is_paid=True)

        processed = 0
        for bill in paid_bills:
            if not bill.is_recurring or days_until_due(bill.due_date, today) >= 0:
                continue

            previous_due = bill.due_date
            rollover = roll_forward(bill.recurrence, bill.due_date)
            bill.due_date = rollover.due_date
            bill.is_paid = rollover.is_paid
            bill.modified_at = datetime.utcnow()
            await self._bills.update_bill(bill)
            processed += 1

            await self._audit.log(AuditEventBuilder.bill_rolled_forward(
                bill_id=bill.id,
                previous_due_date=previous_due,
                new_due_date=bill.due_date,
                recurrence=bill.recurrence.value,
                correlation_id=correlation_id,
            ))

        await self._audit.log(AuditEventBuilder.recurring_bills_processed(
            processed_count=processed,
            as_of=today,
            correlation_id=correlation_id,
        ))
        return processed

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    async def upcoming_bills_total(self, today: date, days: Optional[int] = None) -> Decimal:
        """
        Sum of unpaid bills due on or before `today + days`.

        Overdue bills are included. `days` defaults to the configured
        upcoming window.
        """
        if days is None:
            days = self._settings.upcoming_window_days
        bills = await self._bills.list_bills(
            is_paid=False,
            due_to=add_days(today, days),
        )
        return sum((bill.amount for bill in bills), Decimal("0"))

    async def overdue_bills(self, today: date) -> list[Bill]:
        """Unpaid bills due before `today`, oldest first."""
        bills = await self._bills.list_bills(is_paid=False)
        return [bill for bill in bills if days_until_due(bill.due_date, today) < 0]

    async def due_soon_bills(self, today: date, days: Optional[int] = None) -> list[Bill]:
        """
        Unpaid bills due between `today` and `today + days`, soonest first.

        `days` defaults to the configured due-soon window.
        """
        if days is None:
            days = self._settings.due_soon_window_days
        return await self._bills.list_bills(
            is_paid=False,
            due_from=today,
            due_to=add_days(today, days),
        )

    async def monthly_recurring_total(self) -> Decimal:
        """Sum of all monthly bills, paid or not."""
        bills = await self._bills.list_bills(recurrence=BillRecurrence.MONTHLY)
        return sum((bill.amount for bill in bills), Decimal("0"))

    # -------------------------------------------------------------------------
    # Bulk operations
    # -------------------------------------------------------------------------

    async def delete_old_paid_bills(self, today: date, older_than_days: int) -> int:
        """
        Delete paid one-time bills last paid before `today - older_than_days`.

        Returns:
            Number of bills deleted
        """
        correlation_id = create_correlation_id()
        cutoff = add_days(today, -older_than_days)
        paid_bills = await self._bills.list_bills(
            is_paid=True,
            recurrence=BillRecurrence.ONE_TIME,
        )

        deleted = 0
        for bill in paid_bills:
            if bill.last_paid_date is not None and bill.last_paid_date < cutoff:
                if await self._bills.delete_bill(bill.id):
                    deleted += 1

        await self._audit.log(AuditEventBuilder.paid_bills_purged(
            deleted_count=deleted,
            cutoff=cutoff,
            correlation_id=correlation_id,
        ))
        return deleted
