"""Services package."""

from spark_budget.services.storage import (
    AccountStorageInterface,
    AuditStorageInterface,
    BillStorageInterface,
    DuplicateError,
    InMemoryAccountStorage,
    InMemoryAuditStorage,
    InMemoryBillStorage,
    InMemoryTransactionStorage,
    NotFoundError,
    StorageError,
    TransactionStorageInterface,
)

__all__ = [
    # Storage services
    "AccountStorageInterface",
    "AuditStorageInterface",
    "BillStorageInterface",
    "DuplicateError",
    "InMemoryAccountStorage",
    "InMemoryAuditStorage",
    "InMemoryBillStorage",
    "InMemoryTransactionStorage",
    "NotFoundError",
    "StorageError",
    "TransactionStorageInterface",
]
