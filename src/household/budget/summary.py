#!/usr/bin/env python3
"""
Monthly Summary

Household-level view of one month: salaries from the pay schedules, other
revenues and expenses from the ledger, and the resulting net income.
Ledger entries are monthly amounts and count in every month.
"""

from collections.abc import Sequence
from dataclasses import dataclass

from ..compensation import PERSONS, SalaryConfig, monthly_income, profile_schedule
from ..core.money import Money
from ..investments import InvestmentHolding
from .models import EXPENSE, EXPENSE_CATEGORIES, REVENUE, Ledger


@dataclass(frozen=True)
class MonthlySummary:
    """
    Revenues, expenses and net income of one month.

    Attributes:
        salaries: Salary income per earner for the month
        other_revenues: Sum of the ledger's revenues
        expenses: Sum of the ledger's expenses
        expenses_by_category: Known categories with a positive total, in
            the fixed category order
        investments_total: Current value of the synced holdings
    """

    year: int
    month_index: int
    salaries: dict[str, Money]
    other_revenues: Money
    expenses: Money
    expenses_by_category: dict[str, Money]
    investments_total: Money

    @property
    def total_salaries(self) -> Money:
        return sum(self.salaries.values(), Money.zero())

    @property
    def total_revenues(self) -> Money:
        return self.total_salaries + self.other_revenues

    @property
    def net_income(self) -> Money:
        return self.total_revenues - self.expenses


def expenses_by_category(ledger: Ledger) -> dict[str, Money]:
    """Expense totals for each known category, skipping empty ones."""
    totals = {}
    for category in EXPENSE_CATEGORIES:
        total = sum((entry.amount for entry in ledger.expenses if entry.category == category), Money.zero())
        if total.cents > 0:
            totals[category] = total
    return totals


def monthly_summary(
    salary_config: SalaryConfig,
    ledger: Ledger,
    year: int,
    month_index: int,
    holdings: Sequence[InvestmentHolding] = (),
) -> MonthlySummary:
    """Combine salary income, ledger totals and holdings for one month."""
    salaries = {
        person: monthly_income(
            salary_config.profile(person), profile_schedule(salary_config.profile(person), year), month_index
        )
        for person in PERSONS
    }
    return MonthlySummary(
        year=year,
        month_index=month_index,
        salaries=salaries,
        other_revenues=ledger.total(REVENUE),
        expenses=ledger.total(EXPENSE),
        expenses_by_category=expenses_by_category(ledger),
        investments_total=sum((holding.amount for holding in holdings), Money.zero()),
    )
