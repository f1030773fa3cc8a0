"""
Budget Package

Recurring monthly expenses and revenues, and the monthly household summary.

Key Components:
- models: LedgerEntry, Ledger and the category lists
- datastore: JSON persistence of the ledger
- summary: Salaries, ledger totals and net income for one month
"""

from .datastore import LedgerStore
from .models import (
    CATEGORIES,
    DEFAULT_CATEGORY,
    ENTRY_KINDS,
    EXPENSE,
    EXPENSE_CATEGORIES,
    REVENUE,
    REVENUE_CATEGORIES,
    Ledger,
    LedgerEntry,
)
from .summary import MonthlySummary, expenses_by_category, monthly_summary

__all__ = [
    # Models
    "CATEGORIES",
    "DEFAULT_CATEGORY",
    "ENTRY_KINDS",
    "EXPENSE",
    "EXPENSE_CATEGORIES",
    "REVENUE",
    "REVENUE_CATEGORIES",
    "Ledger",
    "LedgerEntry",
    # Summary
    "MonthlySummary",
    "expenses_by_category",
    "monthly_summary",
    # Storage
    "LedgerStore",
]
