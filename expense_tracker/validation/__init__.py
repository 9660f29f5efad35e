"""Input validation package."""

from expense_tracker.validation.validator import validate_amount, validate_category

__all__ = ["validate_amount", "validate_category"]
