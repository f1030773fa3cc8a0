"""
Household Finances - Personal and Household Finance Tracking

Tracks household revenue and investments from the command line.

Key Features:
- Recurring salary model for two earners with a history of raises
- Pay schedule projection for any calendar year
- Investment portfolio sync from a published spreadsheet (CSV export)
- Portfolio history with per-category breakdowns
- Recurring expense and revenue ledger with a monthly net income summary

Domain Packages:
- core: Dates, money, currency parsing, configuration
- compensation: Salary history resolution and pay schedules
- investments: Snapshot parsing, sync, and portfolio analysis
- budget: Expense and revenue ledger, monthly summary
- cli: Command-line interface

Example Usage:
    from household.compensation import generate_schedule, resolve_amount
    from household.investments import parse_snapshot
"""

__version__ = "0.1.0"
__author__ = "Household Finances Contributors"

from .core.config import Environment, get_config
from .core.currency import format_cents, safe_currency_to_cents
from .core.exceptions import HouseholdError, NetworkError, SourceFormatError

__all__ = [
    # Configuration
    "get_config",
    "Environment",

    # Currency
    "format_cents",
    "safe_currency_to_cents",

    # Errors
    "HouseholdError",
    "NetworkError",
    "SourceFormatError",
]
