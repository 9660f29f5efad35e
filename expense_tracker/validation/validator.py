"""
Input Validation

DESIGN DECISION: The store accepts exactly two kinds of checked input:

AMOUNT:
- Must be a real number (int, float or Decimal; never bool or text)
- Must be finite and strictly positive

CATEGORY:
- Must name one of the supported categories, in any letter case

Nothing else is validated. Descriptions are free text and are only trimmed.

IMPORTANT: Validation NEVER silently fixes issues. A bad value is rejected
with a typed error and the caller decides whether to re-prompt.
"""

from decimal import Decimal, InvalidOperation

from expense_tracker.exceptions import InvalidAmountError, InvalidCategoryError
from expense_tracker.models.expense import ExpenseCategory


def validate_amount(value: object) -> Decimal:
    """
    Check an amount and convert it to Decimal.

    Floats go through str() so 25.50 is held as Decimal("25.5")
    rather than its binary expansion.

    Raises:
        InvalidAmountError: value is not a finite number greater than zero
    """
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise InvalidAmountError("Amount must be a positive number.")

    try:
        amount = value if isinstance(value, Decimal) else Decimal(str(value))
    except InvalidOperation:
        raise InvalidAmountError("Amount must be a positive number.")

    if not amount.is_finite() or amount <= 0:
        raise InvalidAmountError("Amount must be a positive number.")

    return amount


def validate_category(value: object) -> ExpenseCategory:
    """
    Resolve a category from an enum member or case-insensitive text.

    Raises:
        InvalidCategoryError: value does not name a supported category
    """
    if isinstance(value, ExpenseCategory):
        return value

    category = ExpenseCategory.parse(value) if isinstance(value, str) else None
    if category is None:
        allowed = ", ".join(c.label for c in ExpenseCategory)
        raise InvalidCategoryError(
            f"Invalid category. Please choose from {allowed}."
        )
    return category
