"""
Data Models Package

This package contains all Pydantic models used in the Expense Tracker.
All data held by the store and its reports conforms to these schemas.
"""

from expense_tracker.models.expense import (
    CategoryListing,
    CategorySummary,
    Expense,
    ExpenseCategory,
    ExpenseSummary,
)
from expense_tracker.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "CategoryListing",
    "CategorySummary",
    "Expense",
    "ExpenseCategory",
    "ExpenseSummary",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
