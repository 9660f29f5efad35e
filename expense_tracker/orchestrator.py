"""
Main Orchestrator for the Expense Tracker

This module ties the store and the audit trail together behind one
object, `ExpenseTracker`, which is all the CLI talks to.

DESIGN DECISION: The orchestrator enforces the boundaries:
- Every mutation goes through the store's validation
- Every mutation, successful or not, is audited
- Store errors reach the caller unchanged
"""

from decimal import Decimal
from typing import Optional, Union
from uuid import UUID

from expense_tracker.audit import AuditLogger, create_correlation_id
from expense_tracker.config import get_settings
from expense_tracker.exceptions import ExpenseError
from expense_tracker.models.expense import (
    CategoryListing,
    Expense,
    ExpenseCategory,
    ExpenseSummary,
)
from expense_tracker.services.storage import (
    ExpenseStorageInterface,
    ExpenseStore,
    InMemoryAuditStorage,
    NotFoundError,
)


class ExpenseTracker:
    """
    Orchestrates one session over one expense store.

    Flow:
    1. start_session → new correlation id, audited
    2. add / remove / list / total / report → delegated to the store
    3. end_session → audited with the final record count
    """

    def __init__(
        self,
        store: Optional[ExpenseStorageInterface] = None,
        audit_logger: Optional[AuditLogger] = None,
        correlation_id: Optional[UUID] = None,
    ):
        self._store = store if store is not None else ExpenseStore()
        self._audit_logger = audit_logger
        self._correlation_id = correlation_id or create_correlation_id()

    @property
    def store(self) -> ExpenseStorageInterface:
        return self._store

    @property
    def audit_logger(self) -> Optional[AuditLogger]:
        return self._audit_logger

    @property
    def correlation_id(self) -> UUID:
        return self._correlation_id

    def start_session(self) -> UUID:
        """Begin a new session and return its correlation id."""
        self._correlation_id = create_correlation_id()
        if self._audit_logger:
            self._audit_logger.log_session_started(self._correlation_id)
        return self._correlation_id

    def end_session(self) -> None:
        if self._audit_logger:
            self._audit_logger.log_session_ended(
                self._correlation_id,
                expense_count=len(self._store.list_all()),
            )

    def add_expense(
        self,
        amount: object,
        category: Union[str, ExpenseCategory],
        description: str = "",
    ) -> Expense:
        """
        Add an expense and return the stored record.

        Raises:
            InvalidAmountError, InvalidCategoryError: propagated from the store
        """
        try:
            expense_id = self._store.add(amount, category, description)
        except ExpenseError as e:
            if self._audit_logger:
                self._audit_logger.log_expense_rejected(
                    error_code=e.kind.value,
                    error_message=e.message,
                    details={
                        "amount": str(amount),
                        "category": str(category),
                    },
                    correlation_id=self._correlation_id,
                )
            raise

        expense = self._store.get(expense_id)
        if self._audit_logger:
            self._audit_logger.log_expense_added(
                expense_id=expense.id,
                category=expense.category.value,
                amount=expense.amount,
                correlation_id=self._correlation_id,
            )
        return expense

    def remove_expense(self, expense_id: int) -> None:
        """
        Remove an expense by id.

        Raises:
            NotFoundError: propagated from the store
        """
        try:
            self._store.remove(expense_id)
        except NotFoundError as e:
            if self._audit_logger:
                self._audit_logger.log_expense_not_found(
                    expense_id=expense_id,
                    error_message=e.message,
                    correlation_id=self._correlation_id,
                )
            raise

        if self._audit_logger:
            self._audit_logger.log_expense_removed(
                expense_id=expense_id,
                correlation_id=self._correlation_id,
            )

    def list_expenses(self) -> list[Expense]:
        return self._store.list_all()

    def list_by_category(
        self,
        category: Union[str, ExpenseCategory],
    ) -> CategoryListing:
        listing = self._store.list_by_category(category)
        if self._audit_logger:
            self._audit_logger.log_category_listed(
                category=listing.category,
                result_count=listing.count,
                correlation_id=self._correlation_id,
            )
        return listing

    def total(
        self,
        category: Optional[Union[str, ExpenseCategory]] = None,
    ) -> Decimal:
        return self._store.total(category)

    def generate_report(self) -> ExpenseSummary:
        summary = self._store.summarize()
        if self._audit_logger:
            self._audit_logger.log_report_generated(
                expense_count=summary.expense_count,
                grand_total=summary.grand_total,
                correlation_id=self._correlation_id,
            )
        return summary


def create_tracker(
    store: Optional[ExpenseStorageInterface] = None,
) -> ExpenseTracker:
    """
    Factory function to create the application components.

    Args:
        store: Expense store to use. A fresh in-memory store if None.

    Returns:
        A tracker with an audit logger wired per the settings.
    """
    settings = get_settings().app

    if settings.audit_enabled:
        audit_logger = AuditLogger(
            InMemoryAuditStorage(default_limit=settings.recent_events_limit)
        )
    else:
        audit_logger = AuditLogger()  # Local-only logging

    return ExpenseTracker(
        store=store if store is not None else ExpenseStore(),
        audit_logger=audit_logger,
    )
