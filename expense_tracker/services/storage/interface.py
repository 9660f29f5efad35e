"""
Abstract Storage Interface

DESIGN DECISION: We define an abstract interface for storage operations.
This allows us to:
1. Keep the tracker and CLI decoupled from how records are held
2. Swap the in-memory store for a persistent one later without touching callers
3. Substitute failing or recording fakes in tests

The interface is intentionally small. All operations are synchronous:
the tracker is single-threaded and nothing here waits on I/O.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from expense_tracker.exceptions import ErrorKind, ExpenseError
from expense_tracker.models.audit import AuditEvent
from expense_tracker.models.expense import (
    CategoryListing,
    Expense,
    ExpenseCategory,
    ExpenseSummary,
)


class ExpenseStorageInterface(ABC):
    """
    Abstract interface for expense storage operations.

    Implementations own the record sequence and the id counter.
    """

    @abstractmethod
    def add(
        self,
        amount: object,
        category: Union[str, ExpenseCategory],
        description: str = "",
    ) -> int:
        """
        Validate and append a new expense.

        Args:
            amount: Positive number
            category: Category label (any case) or enum member
            description: Free text, trimmed before storing

        Returns:
            The id assigned to the new expense

        Raises:
            InvalidAmountError: If amount is not a positive number
            InvalidCategoryError: If category is not supported
        """
        pass

    @abstractmethod
    def remove(self, expense_id: int) -> None:
        """
        Delete the expense with the given id.

        Raises:
            NotFoundError: If no expense has that id
        """
        pass

    @abstractmethod
    def get(self, expense_id: int) -> Optional[Expense]:
        """Return the expense with the given id, or None."""
        pass

    @abstractmethod
    def list_all(self) -> list[Expense]:
        """Return all expenses in insertion order."""
        pass

    @abstractmethod
    def list_by_category(
        self,
        category: Union[str, ExpenseCategory],
    ) -> CategoryListing:
        """
        Return the expenses of one category in insertion order,
        with their subtotal. An unknown category yields an empty listing.
        """
        pass

    @abstractmethod
    def total(
        self,
        category: Optional[Union[str, ExpenseCategory]] = None,
    ) -> Decimal:
        """
        Sum of amounts, optionally restricted to one category.

        A blank category means no filter. An unmatched category sums
        to zero.
        """
        pass

    @abstractmethod
    def summarize(self) -> ExpenseSummary:
        """Group all expenses by category with grand total and average."""
        pass


class AuditStorageInterface(ABC):
    """
    Abstract interface for audit log storage.

    Audit logs are append-only - we never delete or modify them.
    """

    @abstractmethod
    def append_event(self, event: AuditEvent) -> bool:
        """
        Append an audit event to the log.

        Returns:
            True if logged successfully
        """
        pass

    @abstractmethod
    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        """All events of one session, in chronological order."""
        pass

    @abstractmethod
    def get_events_by_expense(
        self,
        expense_id: int,
    ) -> list[AuditEvent]:
        """All events about one expense, in chronological order."""
        pass

    @abstractmethod
    def get_recent_events(
        self,
        limit: Optional[int] = None,
    ) -> list[AuditEvent]:
        """The most recent events, newest first."""
        pass


class StorageError(ExpenseError):
    """Base exception for storage operations."""
    pass


class NotFoundError(StorageError):
    """Entity not found in storage."""

    kind = ErrorKind.NOT_FOUND
