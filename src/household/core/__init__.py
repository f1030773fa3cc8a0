"""
Core Utilities Package

Shared primitives and utilities used across the compensation and investment domains.

This package provides:
- Calendar-day date arithmetic (FinancialDate)
- Currency handling with integer arithmetic for precision
- Configuration management for environment-specific settings
- Exception types reported to the operator
"""

from .config import (
    Config,
    Environment,
    get_config,
    reload_config,
)
from .currency import (
    cents_to_dollars_str,
    format_cents,
    parse_dollars_to_cents,
    safe_currency_to_cents,
)
from .dates import FinancialDate, coerce_date, is_iso_date
from .exceptions import (
    HouseholdError,
    LastSalaryChangeError,
    NetworkError,
    SourceFormatError,
)
from .money import Money

__all__ = [
    # Configuration
    "Config",
    "Environment",
    "get_config",
    "reload_config",
    # Primitives
    "FinancialDate",
    "Money",
    "coerce_date",
    "is_iso_date",
    # Currency utilities
    "cents_to_dollars_str",
    "format_cents",
    "parse_dollars_to_cents",
    "safe_currency_to_cents",
    # Errors
    "HouseholdError",
    "LastSalaryChangeError",
    "NetworkError",
    "SourceFormatError",
]
