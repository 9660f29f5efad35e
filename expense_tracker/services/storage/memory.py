"""
In-Memory Storage Implementation

DESIGN DECISION: All state lives in process memory for one run.
Nothing is written to disk and nothing survives the process.

TRADEOFFS:
- Records are lost on exit (intended: there is no persistence)
- Lookups are linear scans (fine for a personal list of expenses)
- No locking (one store, one caller, one operation at a time)

The implementation follows the abstract interface, so a persistent
backend can replace it without changing the tracker or the CLI.
"""

from datetime import date
from decimal import Decimal
from typing import Callable, Optional, Union
from uuid import UUID

from expense_tracker.models.audit import AuditEvent
from expense_tracker.models.expense import (
    CategoryListing,
    CategorySummary,
    Expense,
    ExpenseCategory,
    ExpenseSummary,
)
from expense_tracker.services.storage.interface import (
    AuditStorageInterface,
    ExpenseStorageInterface,
    NotFoundError,
)
from expense_tracker.validation import validate_amount, validate_category


ZERO = Decimal("0")


class ExpenseStore(ExpenseStorageInterface):
    """
    Ordered in-memory collection of expenses plus the id counter.

    GUARANTEES:
    - Ids start at 1, strictly increase and are never reused
    - Every held record has a positive amount and a supported category
    - A failed operation leaves records and counter untouched
    """

    def __init__(self, clock: Callable[[], date] = date.today):
        """
        Initialize an empty store.

        Args:
            clock: Returns the date stamped on new expenses.
                   Called once per successful add.
        """
        self._expenses: list[Expense] = []
        self._next_id = 1
        self._clock = clock

    def __len__(self) -> int:
        return len(self._expenses)

    @property
    def next_id(self) -> int:
        """The id the next successful add will receive."""
        return self._next_id

    def add(
        self,
        amount: object,
        category: Union[str, ExpenseCategory],
        description: str = "",
    ) -> int:
        checked_amount = validate_amount(amount)
        checked_category = validate_category(category)

        expense = Expense(
            id=self._next_id,
            amount=checked_amount,
            category=checked_category,
            description=(description or "").strip(),
            expense_date=self._clock(),
        )

        self._expenses.append(expense)
        self._next_id += 1
        return expense.id

    def remove(self, expense_id: int) -> None:
        for index, expense in enumerate(self._expenses):
            if expense.id == expense_id:
                del self._expenses[index]
                return
        raise NotFoundError(f"Expense with ID {expense_id} not found.")

    def get(self, expense_id: int) -> Optional[Expense]:
        for expense in self._expenses:
            if expense.id == expense_id:
                return expense
        return None

    def list_all(self) -> list[Expense]:
        return list(self._expenses)

    def list_by_category(
        self,
        category: Union[str, ExpenseCategory],
    ) -> CategoryListing:
        resolved = self._resolve_filter(category)
        label = resolved.value if resolved else str(category).strip().upper()

        matches = [e for e in self._expenses if e.category is resolved]
        return CategoryListing(
            category=label,
            expenses=matches,
            subtotal=sum((e.amount for e in matches), ZERO),
        )

    def total(
        self,
        category: Optional[Union[str, ExpenseCategory]] = None,
    ) -> Decimal:
        if category is None or not str(category).strip():
            return sum((e.amount for e in self._expenses), ZERO)

        resolved = self._resolve_filter(category)
        return sum(
            (e.amount for e in self._expenses if e.category is resolved),
            ZERO,
        )

    def summarize(self) -> ExpenseSummary:
        # dicts keep insertion order, which gives first-occurrence order
        groups: dict[ExpenseCategory, list[Decimal]] = {}
        for expense in self._expenses:
            groups.setdefault(expense.category, []).append(expense.amount)

        categories = [
            CategorySummary(
                category=category,
                subtotal=sum(amounts, ZERO),
                count=len(amounts),
            )
            for category, amounts in groups.items()
        ]

        grand_total = sum((item.subtotal for item in categories), ZERO)
        count = len(self._expenses)
        average = grand_total / count if count else ZERO

        return ExpenseSummary(
            categories=categories,
            grand_total=grand_total,
            expense_count=count,
            average=average,
        )

    def _resolve_filter(
        self,
        category: Union[str, ExpenseCategory],
    ) -> Optional[ExpenseCategory]:
        """Filters never raise: an unknown label just matches nothing."""
        if isinstance(category, ExpenseCategory):
            return category
        return ExpenseCategory.parse(str(category))


class InMemoryAuditStorage(AuditStorageInterface):
    """
    Append-only audit log held in a list.

    Events are kept in arrival order, which is chronological.
    """

    def __init__(self, default_limit: int = 100):
        """
        Args:
            default_limit: How many events get_recent_events returns
                when no limit is given.
        """
        self._events: list[AuditEvent] = []
        self._default_limit = default_limit

    def __len__(self) -> int:
        return len(self._events)

    def append_event(self, event: AuditEvent) -> bool:
        self._events.append(event)
        return True

    def get_events_by_correlation_id(
        self,
        correlation_id: UUID,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.correlation_id == correlation_id]

    def get_events_by_expense(
        self,
        expense_id: int,
    ) -> list[AuditEvent]:
        return [e for e in self._events if e.expense_id == expense_id]

    def get_recent_events(
        self,
        limit: Optional[int] = None,
    ) -> list[AuditEvent]:
        if limit is None:
            limit = self._default_limit
        return list(reversed(self._events[-limit:])) if limit > 0 else []
