"""
Compensation Package

Recurring salary model for the two earners of the household.

Key Components:
- models: SalaryChange, CompensationProfile, SalaryConfig
- history: Point-in-time salary resolution
- schedule: Pay dates of a calendar year
- income: Monthly and annual salary totals
- datastore: YAML persistence of the salary configuration
"""

from .datastore import SalaryConfigStore
from .history import SalaryHistory, resolve_amount
from .income import (
    MonthlyIncome,
    annual_income,
    available_years,
    household_annual_income,
    household_monthly_income,
    income_by_month,
    monthly_income,
    profile_schedule,
)
from .models import PERSONS, CompensationProfile, SalaryChange, SalaryConfig
from .schedule import PaySchedule, generate_schedule

__all__ = [
    # Models
    "CompensationProfile",
    "PERSONS",
    "SalaryChange",
    "SalaryConfig",
    # Resolution and scheduling
    "PaySchedule",
    "SalaryHistory",
    "generate_schedule",
    "resolve_amount",
    # Totals
    "MonthlyIncome",
    "annual_income",
    "available_years",
    "household_annual_income",
    "household_monthly_income",
    "income_by_month",
    "monthly_income",
    "profile_schedule",
    # Storage
    "SalaryConfigStore",
]
