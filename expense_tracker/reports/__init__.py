"""Report rendering package."""

from expense_tracker.reports.formatter import (
    format_amount,
    render_category_listing,
    render_expense,
    render_expense_list,
    render_summary,
)

__all__ = [
    "format_amount",
    "render_category_listing",
    "render_expense",
    "render_expense_list",
    "render_summary",
]
