"""
Report Rendering

Turns store read models into the plain text lines the menu prints.
Rendering is pure: functions take models and return lines, and the
caller decides where the lines go.
"""

from decimal import ROUND_HALF_UP, Decimal, localcontext

from expense_tracker.models.expense import CategoryListing, Expense, ExpenseSummary


SEPARATOR = "=" * 32
CENTS = Decimal("0.01")


def format_amount(amount: Decimal, symbol: str = "$") -> str:
    """Format an amount with two decimals, e.g. $25.50."""
    with localcontext() as ctx:
        # quantize needs room for every integer digit plus the cents
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        ctx.Emax = max(ctx.Emax, amount.adjusted() + 1)
        value = amount.quantize(CENTS, rounding=ROUND_HALF_UP)
    return f"{symbol}{value}"


def render_expense(
    expense: Expense,
    symbol: str = "$",
    date_format: str = "%x",
    include_category: bool = True,
) -> str:
    """One record as a single `ID: n | amount | ...` line."""
    parts = [f"ID: {expense.id}", format_amount(expense.amount, symbol)]
    if include_category:
        parts.append(expense.category.value)
    parts.append(expense.description)
    parts.append(expense.expense_date.strftime(date_format))
    return " | ".join(parts)


def render_expense_list(
    expenses: list[Expense],
    total: Decimal,
    symbol: str = "$",
    date_format: str = "%x",
) -> list[str]:
    """All records followed by their total."""
    if not expenses:
        return ["No expenses added yet."]

    lines = ["All Expenses:"]
    lines.extend(render_expense(e, symbol, date_format) for e in expenses)
    lines.append(f"Total: {format_amount(total, symbol)}")
    return lines


def render_category_listing(
    listing: CategoryListing,
    symbol: str = "$",
    date_format: str = "%x",
) -> list[str]:
    """Records of one category followed by the category subtotal."""
    if listing.is_empty:
        return [f"No expenses found for category: {listing.category}"]

    lines = [f"{listing.category} Expenses:"]
    lines.extend(
        render_expense(e, symbol, date_format, include_category=False)
        for e in listing.expenses
    )
    lines.append(f"Category Total: {format_amount(listing.subtotal, symbol)}")
    return lines


def render_summary(summary: ExpenseSummary, symbol: str = "$") -> list[str]:
    """The grouped expense report."""
    lines = ["", "EXPENSE REPORT", SEPARATOR]

    for item in summary.categories:
        lines.append(
            f"{item.category.value}: {format_amount(item.subtotal, symbol)} "
            f"({item.count} expenses)"
        )

    lines.append(SEPARATOR)
    lines.append(
        f"TOTAL: {format_amount(summary.grand_total, symbol)} "
        f"({summary.expense_count} expenses)"
    )
    lines.append(f"AVERAGE: {format_amount(summary.average, symbol)} per expense")
    return lines
