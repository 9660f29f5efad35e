#!/usr/bin/env python3
"""
Interactive Menu for the Expense Tracker

The menu is an explicit state machine:

    MENU → READ_AMOUNT → READ_CATEGORY → READ_DESCRIPTION → COMMIT_EXPENSE → MENU
    MENU → READ_VIEW_CATEGORY → MENU
    MENU → READ_REMOVE_ID → MENU
    MENU → EXIT

Each state handler reads at most one line, acts, and returns the next state.
Bad input prints an error and goes back to MENU.
"""

import locale
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Callable, Optional

import click
import structlog

from expense_tracker import __version__
from expense_tracker.audit import configure_logging
from expense_tracker.config import AppSettings, get_settings
from expense_tracker.exceptions import ExpenseError
from expense_tracker.models.expense import ExpenseCategory
from expense_tracker.orchestrator import ExpenseTracker, create_tracker
from expense_tracker.reports import (
    format_amount,
    render_category_listing,
    render_expense_list,
    render_summary,
)


MENU_LINES = [
    "",
    "=== EXPENSE TRACKER ===",
    "1. Add Expense",
    "2. View All Expenses",
    "3. View by Category",
    "4. Calculate Total",
    "5. Remove Expense",
    "6. Generate Report",
    "7. Exit",
]


class MenuState(Enum):
    MENU = "menu"
    READ_AMOUNT = "read_amount"
    READ_CATEGORY = "read_category"
    READ_DESCRIPTION = "read_description"
    COMMIT_EXPENSE = "commit_expense"
    READ_VIEW_CATEGORY = "read_view_category"
    READ_REMOVE_ID = "read_remove_id"
    EXIT = "exit"


@dataclass
class ExpenseDraft:
    """Fields collected so far for the expense being added."""
    amount: Optional[Decimal] = None
    category: Optional[ExpenseCategory] = None
    description: str = ""


class MenuSession:
    """Runs the menu loop against one tracker until the user exits."""

    def __init__(self, tracker: ExpenseTracker, settings: AppSettings):
        self._tracker = tracker
        self._settings = settings
        self._draft = ExpenseDraft()
        self._handlers: dict[MenuState, Callable[[], MenuState]] = {
            MenuState.MENU: self._menu,
            MenuState.READ_AMOUNT: self._read_amount,
            MenuState.READ_CATEGORY: self._read_category,
            MenuState.READ_DESCRIPTION: self._read_description,
            MenuState.COMMIT_EXPENSE: self._commit_expense,
            MenuState.READ_VIEW_CATEGORY: self._read_view_category,
            MenuState.READ_REMOVE_ID: self._read_remove_id,
        }

    def run(self) -> None:
        click.echo(f"Welcome to {self._settings.app_name}!")
        self._tracker.start_session()

        state = MenuState.MENU
        try:
            while state is not MenuState.EXIT:
                state = self._handlers[state]()
        except click.Abort:
            # end of input closes the session like option 7
            click.echo()

        click.echo("Exiting...")
        self._tracker.end_session()

    def _ask(self, text: str) -> str:
        return click.prompt(text, default="", show_default=False, prompt_suffix=" ")

    def _error(self, message: str) -> MenuState:
        click.echo(f"Error: {message}", err=True)
        return MenuState.MENU

    def _echo_lines(self, lines: list[str]) -> None:
        for line in lines:
            click.echo(line)

    def _menu(self) -> MenuState:
        self._echo_lines(MENU_LINES)
        choice = self._ask("Choose option (1-7):").strip()

        if choice == "1":
            self._draft = ExpenseDraft()
            return MenuState.READ_AMOUNT
        if choice == "2":
            self._echo_lines(render_expense_list(
                self._tracker.list_expenses(),
                self._tracker.total(),
                self._settings.currency_symbol,
                self._settings.date_format,
            ))
            return MenuState.MENU
        if choice == "3":
            return MenuState.READ_VIEW_CATEGORY
        if choice == "4":
            total = format_amount(self._tracker.total(), self._settings.currency_symbol)
            click.echo(f"Total expenses: {total}")
            return MenuState.MENU
        if choice == "5":
            return MenuState.READ_REMOVE_ID
        if choice == "6":
            self._echo_lines(render_summary(
                self._tracker.generate_report(),
                self._settings.currency_symbol,
            ))
            return MenuState.MENU
        if choice == "7":
            return MenuState.EXIT

        click.echo("Invalid option. Please choose again.")
        return MenuState.MENU

    def _read_amount(self) -> MenuState:
        text = self._ask("Enter amount:").strip()
        try:
            amount = Decimal(text)
        except InvalidOperation:
            return self._error("Invalid amount. Please enter a positive number.")

        if not amount.is_finite() or amount <= 0:
            return self._error("Invalid amount. Please enter a positive number.")

        self._draft.amount = amount
        return MenuState.READ_CATEGORY

    def _read_category(self) -> MenuState:
        category = ExpenseCategory.parse(self._ask("Enter category:"))
        if category is None:
            allowed = ", ".join(c.label for c in ExpenseCategory)
            return self._error(f"Invalid category. Please choose from {allowed}.")

        self._draft.category = category
        return MenuState.READ_DESCRIPTION

    def _read_description(self) -> MenuState:
        self._draft.description = self._ask("Enter description:")
        return MenuState.COMMIT_EXPENSE

    def _commit_expense(self) -> MenuState:
        draft = self._draft
        self._draft = ExpenseDraft()
        try:
            expense = self._tracker.add_expense(
                draft.amount, draft.category, draft.description
            )
        except ExpenseError as e:
            return self._error(e.message)

        click.echo(f"Expense added successfully! ID: {expense.id}")
        return MenuState.MENU

    def _read_view_category(self) -> MenuState:
        listing = self._tracker.list_by_category(self._ask("Enter category to view:"))
        self._echo_lines(render_category_listing(
            listing,
            self._settings.currency_symbol,
            self._settings.date_format,
        ))
        return MenuState.MENU

    def _read_remove_id(self) -> MenuState:
        text = self._ask("Enter ID to remove:").strip()
        try:
            expense_id = int(text)
        except ValueError:
            return self._error("Invalid ID. Please enter a valid number.")

        try:
            self._tracker.remove_expense(expense_id)
        except ExpenseError as e:
            return self._error(e.message)

        click.echo(f"Expense with ID {expense_id} removed successfully.")
        return MenuState.MENU


@click.command()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="expense-tracker")
def main(debug: bool) -> None:
    """
    Expense Tracker - record, list, total and summarize expenses.

    Everything is kept in memory and discarded on exit.
    """
    settings = get_settings().app
    configure_logging(
        level="DEBUG" if debug else settings.log_level,
        json_logs=settings.json_logs,
    )

    # dates render with the host locale's short form
    try:
        locale.setlocale(locale.LC_TIME, "")
    except locale.Error as e:
        structlog.get_logger(__name__).warning("locale_unavailable", error=str(e))

    MenuSession(create_tracker(), settings).run()


if __name__ == "__main__":
    main()
