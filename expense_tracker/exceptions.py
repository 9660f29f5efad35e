"""
Domain exceptions for the expense tracker.

Every failure the store can report is one of a small closed set of kinds.
The kind travels with the exception so the driver can surface it without
having to inspect the exception class.
"""

from enum import Enum


class ErrorKind(str, Enum):
    """The closed set of recoverable failures."""
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_CATEGORY = "InvalidCategory"
    NOT_FOUND = "NotFound"


class ExpenseError(Exception):
    """Base exception for all expense tracker failures."""

    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidAmountError(ExpenseError):
    """Amount is not a number or is not strictly positive."""

    kind = ErrorKind.INVALID_AMOUNT


class InvalidCategoryError(ExpenseError):
    """Category is not one of the supported labels."""

    kind = ErrorKind.INVALID_CATEGORY
