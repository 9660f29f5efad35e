"""
Expense Tracker - Source Package

A small single-user expense recorder driven by a text menu.

DESIGN PRINCIPLES:
1. Validate first, then mutate
2. Fail visibly with a typed error
3. Every change is audited
4. State lives in memory only, owned by one explicit store
"""

__version__ = "1.0.0"
__author__ = "Expense Tracker Team"
