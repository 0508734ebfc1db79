"""
Storage Services Package

Abstract interfaces for data storage plus an in-memory implementation.
The app's own persistence layer plugs in by implementing the interfaces.
"""

from spark_budget.services.storage.interface import (
    AccountStorageInterface,
    AuditStorageInterface,
    BillStorageInterface,
    DuplicateError,
    NotFoundError,
    StorageError,
    TransactionStorageInterface,
)
from spark_budget.services.storage.memory import (
    InMemoryAccountStorage,
    InMemoryAuditStorage,
    InMemoryBillStorage,
    InMemoryTransactionStorage,
)

__all__ = [
    # Interfaces
    "AccountStorageInterface",
    "AuditStorageInterface",
    "BillStorageInterface",
    "TransactionStorageInterface",
    # Exceptions
    "DuplicateError",
    "NotFoundError",
    "StorageError",
    # In-memory implementation
    "InMemoryAccountStorage",
    "InMemoryAuditStorage",
    "InMemoryBillStorage",
    "InMemoryTransactionStorage",
]
