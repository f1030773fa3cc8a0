#!/usr/bin/env python3
"""Tests for the monthly household summary."""

import pytest

from household.budget import EXPENSE, REVENUE, Ledger, expenses_by_category, monthly_summary
from household.compensation import household_monthly_income
from household.core.money import Money
from household.investments import parse_snapshot


@pytest.fixture
def ledger() -> Ledger:
    return (
        Ledger()
        .add(EXPENSE, "Loyer", Money.from_dollars(1200), "Logement")
        .add(EXPENSE, "Épicerie", Money.from_dollars(500), "Nourriture")
        .add(EXPENSE, "Bus", Money.from_dollars(100), "Transport")
        .add(EXPENSE, "Hypothèque chalet", Money.from_dollars(300), "Logement")
        .add(REVENUE, "Dividendes", Money.from_dollars(50), "Dividendes")
    )


@pytest.mark.budget
class TestMonthlySummary:
    """March 2024: three user pays of 1000 and one partner pay of 3000."""

    def test_salaries_match_household_income(self, salary_config, ledger):
        summary = monthly_summary(salary_config, ledger, 2024, 2)

        assert summary.salaries == {"user": Money.from_dollars(3000), "partner": Money.from_dollars(3000)}
        assert summary.total_salaries == household_monthly_income(salary_config, 2024, 2)

    def test_net_income(self, salary_config, ledger):
        summary = monthly_summary(salary_config, ledger, 2024, 2)

        assert summary.other_revenues == Money.from_dollars(50)
        assert summary.total_revenues == Money.from_dollars(6050)
        assert summary.expenses == Money.from_dollars(2100)
        assert summary.net_income == Money.from_dollars(3950)

    def test_net_income_can_be_negative(self, salary_config):
        ledger = Ledger().add(EXPENSE, "Toiture", Money.from_dollars(10000), "Logement")

        summary = monthly_summary(salary_config, ledger, 2024, 2)

        assert summary.net_income == Money.from_dollars(-4000)

    def test_investments_total(self, salary_config, sample_sheet_csv):
        holdings = parse_snapshot(sample_sheet_csv).holdings

        summary = monthly_summary(salary_config, Ledger(), 2024, 2, holdings)

        assert summary.investments_total == sum((holding.amount for holding in holdings), Money.zero())
        assert monthly_summary(salary_config, Ledger(), 2024, 2).investments_total == Money.zero()

    def test_expenses_by_category_in_fixed_order(self, ledger):
        totals = expenses_by_category(ledger)

        assert list(totals) == ["Logement", "Nourriture", "Transport"]
        assert totals["Logement"] == Money.from_dollars(1500)

    def test_zero_categories_skipped(self):
        ledger = Ledger().add(EXPENSE, "Gratuit", Money.zero(), "Loisirs")
        assert expenses_by_category(ledger) == {}
