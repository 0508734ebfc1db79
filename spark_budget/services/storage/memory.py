"""
In-Memory Storage

Dictionary-backed implementations of the storage interfaces. Records are
copied on the way in and out so callers never share mutable state with
the store.
"""

from datetime import date
from typing import Optional
from uuid import UUID

from spark_budget.models.account import Account, Transaction
from spark_budget.models.audit import AuditEvent
from spark_budget.models.bill import Bill, BillRecurrence
from spark_budget.services.storage.interface import (
    AccountStorageInterface,
    AuditStorageInterface,
    BillStorageInterface,
    DuplicateError,
    NotFoundError,
    TransactionStorageInterface,
)


class InMemoryBillStorage(BillStorageInterface):
    """Bill storage held in a dict keyed by bill ID."""

    def __init__(self):
        self._bills: dict[UUID, Bill] = {}

    async def save_bill(self, bill: Bill) -> bool:
        if bill.id in self._bills:
            raise DuplicateError(f"Bill {bill.id} already exists")
        self._bills[bill.id] = bill.model_copy(deep=True)
        return True

    async def get_bill_by_id(self, bill_id: UUID) -> Optional[Bill]:
        bill = self._bills.get(bill_id)
        return bill.model_copy(deep=True) if bill else None

    async def update_bill(self, bill: Bill) -> bool:
        if bill.id not in self._bills:
            raise NotFoundError(f"Bill {bill.id} not found")
        self._bills[bill.id] = bill.model_copy(deep=True)
        return True

    async def delete_bill(self, bill_id: UUID) -> bool:
        return self._bills.pop(bill_id, None) is not None

    async def list_bills(
        self,
        is_paid: Optional[bool] = None,
        recurrence: Optional[BillRecurrence] = None,
        due_from: Optional[date] = None,
        due_to: Optional[date] = None,
        account_id: Optional[UUID] = None,
    ) -> list[Bill]:
        results = []
        for bill in self._bills.values():
            if is_paid is not None and bill.is_paid != is_paid:
                continue
            if recurrence is not None and bill.recurrence != recurrence:
                continue
            if due_from is not None and bill.due_date < due_from:
                continue
            if due_to is not None and bill.due_date > due_to:
                continue
            if account_id is not None and bill.account_id != account_id:
                continue
            results.append(bill.model_copy(deep=True))

        results.sort(key=lambda b: b.due_date)
        return results


class InMemoryAccountStorage(AccountStorageInterface):
    """Account storage held in a dict keyed by account ID."""

    def __init__(self):
        self._accounts: dict[UUID, Account] = {}

    async def save_account(self, account: Account) -> bool:
        if account.id in self._accounts:
            raise DuplicateError(f"Account {account.id} already exists")
        self._accounts[account.id] = account.model_copy(deep=True)
        return True

    async def get_account_by_id(self, account_id: UUID) -> Optional[Account]:
        account = self._accounts.get(account_id)
        return account.model_copy(deep=True) if account else None

    async def update_account(self, account: Account) -> bool:
        if account.id not in self._accounts:
            raise NotFoundError(f"Account {account.id} not found")
        self._accounts[account.id] = account.model_copy(deep=True)
        return True

    async def list_accounts(self) -> list[Account]:
        return [account.model_copy(deep=True) for account in self._accounts.values()]


class InMemoryTransactionStorage(TransactionStorageInterface):
    """Append-only transaction list."""

    def __init__(self):
        self._transactions: list[Transaction] = []

    async def save_transaction(self, transaction: Transaction) -> bool:
        self._transactions.append(transaction.model_copy(deep=True))
        return True

    async def list_transactions(
        self,
        account_id: Optional[UUID] = None,
    ) -> list[Transaction]:
        results = [
            t.model_copy(deep=True)
            for t in self._transactions
            if account_id is None or t.account_id == account_id
        ]
        results.sort(key=lambda t: t.transaction_date)
        return results


class InMemoryAuditStorage(AuditStorageInterface):
    """Append-only audit event list."""

    def __init__(self):
        self._events: list[AuditEvent] = []

    async def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    async def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: UUID,
    ) -> list[AuditEvent]:
        return [
            event for event in self._events
            if event.entity_type == entity_type and event.entity_id == entity_id
        ]

    async def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        return list(reversed(self._events))[:limit]
