"""Services package."""

from expense_tracker.services.storage import (
    AuditStorageInterface,
    ExpenseStorageInterface,
    ExpenseStore,
    InMemoryAuditStorage,
    NotFoundError,
    StorageError,
)

__all__ = [
    # Storage services
    "AuditStorageInterface",
    "ExpenseStorageInterface",
    "ExpenseStore",
    "InMemoryAuditStorage",
    "NotFoundError",
    "StorageError",
]
