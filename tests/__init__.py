"""Tests for the Expense Tracker."""
