"""
Abstract Storage Interface

DESIGN DECISION: The bill workflow talks to storage only through these
interfaces. This allows us to:
1. Keep the workflow independent of the app's persistence layer
2. Use in-memory storage for testing
3. Swap in a real database without touching business logic

The interface is intentionally simple - we're not building a full ORM.
Just the operations the bill workflow needs.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from uuid import UUID

from spark_budget.models.account import Account, Transaction
from spark_budget.models.audit import AuditEvent
from spark_budget.models.bill import Bill, BillRecurrence


class BillStorageInterface(ABC):
    """
    Abstract interface for bill storage operations.
    """

    @abstractmethod
    async def save_bill(self, bill: Bill) -> bool:
        """
        Save a new bill.

        Raises:
            DuplicateError: If a bill with the same ID exists
        """
        pass

    @abstractmethod
    async def get_bill_by_id(self, bill_id: UUID) -> Optional[Bill]:
        """Retrieve a bill by its ID, or None."""
        pass

    @abstractmethod
    async def update_bill(self, bill: Bill) -> bool:
        """
        Replace a stored bill.

        Raises:
            NotFoundError: If bill doesn't exist
        """
        pass

    @abstractmethod
    async def delete_bill(self, bill_id: UUID) -> bool:
        """Delete a bill by ID. Returns False if it did not exist."""
        pass

    @abstractmethod
    async def list_bills(
        self,
        is_paid: Optional[bool] = None,
        recurrence: Optional[BillRecurrence] = None,
        due_from: Optional[date] = None,
        due_to: Optional[date] = None,
        account_id: Optional[UUID] = None,
    ) -> list[Bill]:
        """
        List bills with optional filters.

        Args:
            is_paid: Filter by paid flag
            recurrence: Filter by recurrence
            due_from: Due on or after this date
            due_to: Due on or before this date
            account_id: Filter by paying account

        Returns:
            Matching bills ordered by due date
        """
        pass


class AccountStorageInterface(ABC):
    """Abstract interface for account storage operations."""

    @abstractmethod
    async def save_account(self, account: Account) -> bool:
        pass

    @abstractmethod
    async def get_account_by_id(self, account_id: UUID) -> Optional[Account]:
        pass

    @abstractmethod
    async def update_account(self, account: Account) -> bool:
        """
        Raises:
            NotFoundError: If account doesn't exist
        """
        pass

    @abstractmethod
    async def list_accounts(self) -> list[Account]:
        pass


class TransactionStorageInterface(ABC):
    """Abstract interface for transaction storage operations."""

    @abstractmethod
    async def save_transaction(self, transaction: Transaction) -> bool:
        pass

    @abstractmethod
    async def list_transactions(
        self,
        account_id: Optional[UUID] = None,
    ) -> list[Transaction]:
        """Transactions ordered by date, optionally for one account."""
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    async def append_event(self, event: AuditEvent) -> bool:
        pass

    @abstractmethod
    async def get_events_by_entity(
        self,
        entity_type: str,
        entity_id: UUID,
    ) -> list[AuditEvent]:
        """Events for one entity in chronological order."""
        pass

    @abstractmethod
    async def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        """Most recent events, newest first."""
        pass


class StorageError(Exception):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""
    pass


class DuplicateError(StorageError):
    """Attempted to insert a duplicate entity."""
    pass
