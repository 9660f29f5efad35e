"""Command-line interface package."""

from expense_tracker.cli.main import MenuSession, MenuState, main

__all__ = ["MenuSession", "MenuState", "main"]
