"""
Core Data Models for the Expense Tracker

These models define the strict schemas for the records held by the store
and for the read-only views computed from them.

DESIGN DECISION: Records are frozen Pydantic models. Once a record is in
the store it can only be removed, never edited.
"""

from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class ExpenseCategory(str, Enum):
    """
    Supported expense categories.

    Values are the normalized (upper-case) labels stored on each record.
    Lookups from user text are case-insensitive.
    """
    FOOD = "FOOD"
    TRANSPORT = "TRANSPORT"
    ENTERTAINMENT = "ENTERTAINMENT"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, text: str) -> Optional["ExpenseCategory"]:
        """Map free text to a category, or None if it is not one."""
        try:
            return cls(text.strip().upper())
        except ValueError:
            return None

    @property
    def label(self) -> str:
        """Lower-case label as shown in prompts."""
        return self.value.lower()


# =============================================================================
# CORE EXPENSE MODEL
# =============================================================================

class Expense(BaseModel):
    """
    A single recorded expense.

    Only the store creates these. `id` is assigned by the store and
    `expense_date` is stamped at insertion time.
    """
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    id: int = Field(
        ...,
        ge=1,
        description="Sequential identifier, never reused"
    )
    amount: Decimal = Field(
        ...,
        gt=0,
        description="Amount in whatever unit the caller uses"
    )
    category: ExpenseCategory = Field(
        ...,
        description="Expense category"
    )
    description: str = Field(
        default="",
        description="Free text, may be empty"
    )
    expense_date: date = Field(
        ...,
        description="Date the expense was recorded"
    )


# =============================================================================
# READ MODELS (computed by the store, never stored)
# =============================================================================

class CategoryListing(BaseModel):
    """Records of one category in insertion order, with their subtotal."""

    category: str = Field(
        ...,
        description="Requested category label, upper-cased"
    )
    expenses: list[Expense] = Field(default_factory=list)
    subtotal: Decimal = Decimal("0")

    @property
    def count(self) -> int:
        return len(self.expenses)

    @property
    def is_empty(self) -> bool:
        return not self.expenses


class CategorySummary(BaseModel):
    """Subtotal and record count for one category present in the data."""

    category: ExpenseCategory
    subtotal: Decimal
    count: int = Field(ge=1)


class ExpenseSummary(BaseModel):
    """
    Grouped summary report.

    `categories` is ordered by first occurrence while scanning records
    in insertion order. Categories without records are omitted.
    """

    categories: list[CategorySummary] = Field(default_factory=list)
    grand_total: Decimal = Decimal("0")
    expense_count: int = Field(default=0, ge=0)
    average: Decimal = Decimal("0")

    @property
    def by_category(self) -> dict[ExpenseCategory, tuple[Decimal, int]]:
        """Mapping of category to (subtotal, count), in display order."""
        return {
            item.category: (item.subtotal, item.count)
            for item in self.categories
        }
