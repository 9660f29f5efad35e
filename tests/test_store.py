"""
Tests for the in-memory expense store
"""

import pytest
from datetime import date
from decimal import Decimal

from expense_tracker.exceptions import ErrorKind, InvalidAmountError, InvalidCategoryError
from expense_tracker.models.expense import ExpenseCategory
from expense_tracker.services.storage import ExpenseStore, NotFoundError


TODAY = date(2024, 12, 15)


@pytest.fixture
def store():
    return ExpenseStore(clock=lambda: TODAY)


class TestAdd:
    """Tests for ExpenseStore.add."""

    def test_add_returns_sequential_ids(self, store):
        """Test ids start at 1 and increase by one."""
        assert store.add(25.50, "food", "lunch") == 1
        assert store.add(15, "transport") == 2
        assert store.next_id == 3

    def test_add_normalizes_record(self, store):
        """Test category is upper-cased, description trimmed, date stamped."""
        store.add(25.50, "Food", "  lunch  ")
        expense = store.get(1)
        assert expense.category is ExpenseCategory.FOOD
        assert expense.category.value == "FOOD"
        assert expense.description == "lunch"
        assert expense.amount == Decimal("25.5")
        assert expense.expense_date == TODAY

    def test_description_defaults_to_empty(self, store):
        """Test description is optional."""
        store.add(3, "other")
        assert store.get(1).description == ""

    def test_clock_read_once_per_successful_add(self):
        """Test the clock is only consulted after validation passes."""
        calls = []

        def clock():
            calls.append(1)
            return TODAY

        store = ExpenseStore(clock=clock)
        store.add(1, "food")
        with pytest.raises(InvalidAmountError):
            store.add(0, "food")
        with pytest.raises(InvalidCategoryError):
            store.add(1, "rent")
        assert len(calls) == 1

    @pytest.mark.parametrize("amount", [0, -10, "12", None, float("nan")])
    def test_invalid_amount_leaves_store_unchanged(self, store, amount):
        """Test InvalidAmount never mutates records or counter."""
        store.add(5, "food")
        with pytest.raises(InvalidAmountError) as exc_info:
            store.add(amount, "food")
        assert exc_info.value.kind == ErrorKind.INVALID_AMOUNT
        assert len(store) == 1
        assert store.next_id == 2

    def test_invalid_category_leaves_store_unchanged(self, store):
        """Test InvalidCategory never mutates records or counter."""
        with pytest.raises(InvalidCategoryError):
            store.add(5, "groceries")
        assert store.list_all() == []
        assert store.next_id == 1

    def test_amount_checked_before_category(self, store):
        """Test a doubly invalid add reports the amount."""
        with pytest.raises(InvalidAmountError):
            store.add(-1, "groceries")


class TestRemove:
    """Tests for ExpenseStore.remove."""

    def test_remove_keeps_order_and_ids(self, store):
        """Test removal deletes in place without renumbering."""
        store.add(1, "food")
        store.add(2, "transport")
        store.add(3, "other")

        store.remove(2)

        assert [e.id for e in store.list_all()] == [1, 3]

    def test_remove_missing_raises_not_found(self, store):
        """Test NotFound leaves records and counter unchanged."""
        store.add(1, "food")
        with pytest.raises(NotFoundError) as exc_info:
            store.remove(42)
        assert exc_info.value.kind == ErrorKind.NOT_FOUND
        assert len(store) == 1
        assert store.next_id == 2

    def test_removed_id_is_never_reused(self, store):
        """Test ids keep increasing after removals."""
        store.add(1, "food")
        store.add(2, "food")
        store.remove(2)
        store.remove(1)
        assert store.add(3, "food") == 3

    def test_get_after_remove(self, store):
        """Test get returns None for a removed id."""
        store.add(1, "food")
        store.remove(1)
        assert store.get(1) is None


class TestQueries:
    """Tests for totals, listings and the summary."""

    def test_reference_example(self, store):
        """Test the add/total/remove walkthrough."""
        assert store.add(25.50, "food", "lunch") == 1
        assert store.get(1).category.value == "FOOD"
        assert store.add(15, "transport") == 2
        assert store.total() == Decimal("40.50")
        assert store.total("food") == Decimal("25.50")

        store.remove(1)
        assert store.total() == Decimal("15")

        with pytest.raises(NotFoundError):
            store.remove(1)

    def test_total_empty_is_zero(self, store):
        """Test an empty store totals zero."""
        assert store.total() == Decimal("0")

    def test_total_filter_is_case_insensitive(self, store):
        """Test category filters ignore case."""
        store.add(10, "FOOD")
        store.add(5, "food")
        assert store.total("Food") == Decimal("15")
        assert store.total(ExpenseCategory.FOOD) == Decimal("15")

    def test_total_unmatched_filter_is_zero(self, store):
        """Test unmatched and unknown filters sum to zero without raising."""
        store.add(10, "food")
        assert store.total("transport") == Decimal("0")
        assert store.total("nonsense") == Decimal("0")

    def test_total_blank_filter_means_all(self, store):
        """Test an empty or whitespace filter totals every expense."""
        store.add(10, "food")
        store.add(5, "other")
        assert store.total("") == Decimal("15")
        assert store.total("   ") == store.total()

    def test_list_all_returns_copy(self, store):
        """Test callers cannot mutate the store through list_all."""
        store.add(10, "food")
        listed = store.list_all()
        listed.clear()
        assert len(store) == 1

    def test_list_by_category(self, store):
        """Test listing filters in insertion order with subtotal."""
        store.add(10, "food", "a")
        store.add(20, "transport", "b")
        store.add(5, "Food", "c")

        listing = store.list_by_category("FOOD")

        assert listing.category == "FOOD"
        assert [e.description for e in listing.expenses] == ["a", "c"]
        assert listing.subtotal == Decimal("15")

    def test_list_by_category_empty_is_valid(self, store):
        """Test an empty category is a valid result."""
        store.add(10, "food")
        listing = store.list_by_category("entertainment")
        assert listing.is_empty
        assert listing.category == "ENTERTAINMENT"
        assert listing.subtotal == Decimal("0")

    def test_list_by_unknown_category(self, store):
        """Test unknown labels produce an empty listing."""
        listing = store.list_by_category("rent")
        assert listing.is_empty
        assert listing.category == "RENT"

    def test_summarize_groups_in_first_occurrence_order(self, store):
        """Test summary order follows the first record of each category."""
        store.add(15, "transport")
        store.add(10, "food")
        store.add(20, "transport")
        store.add(5, "other")

        summary = store.summarize()

        assert [c.category for c in summary.categories] == [
            ExpenseCategory.TRANSPORT,
            ExpenseCategory.FOOD,
            ExpenseCategory.OTHER,
        ]
        assert summary.by_category[ExpenseCategory.TRANSPORT] == (Decimal("35"), 2)
        assert ExpenseCategory.ENTERTAINMENT not in summary.by_category
        assert summary.grand_total == store.total() == Decimal("50")
        assert summary.expense_count == 4
        assert summary.average == Decimal("12.5")

    def test_summarize_empty(self, store):
        """Test the empty store summary."""
        summary = store.summarize()
        assert summary.categories == []
        assert summary.by_category == {}
        assert summary.grand_total == Decimal("0")
        assert summary.average == Decimal("0")

    def test_summarize_after_remove(self, store):
        """Test removed records drop out of the summary."""
        store.add(10, "food")
        store.add(30, "transport")
        store.remove(1)
        summary = store.summarize()
        assert list(summary.by_category) == [ExpenseCategory.TRANSPORT]
        assert summary.average == summary.grand_total / summary.expense_count


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
