#!/usr/bin/env python3
"""Tests for the budget and summary CLI commands."""

import pytest
from click.testing import CliRunner

from household.budget import EXPENSE, LedgerStore
from household.cli.main import main
from household.core.config import get_config


def invoke(*args: str):
    return CliRunner().invoke(main, list(args))


def expense_ids() -> list[str]:
    return [entry.id for entry in LedgerStore(get_config().budget.data_dir).load().entries(EXPENSE)]


@pytest.fixture
def rent():
    """A 1200 rent expense in the Logement category."""
    assert invoke("budget", "add", "expense", "Loyer", "1200", "--category", "Logement").exit_code == 0
    return expense_ids()[0]


@pytest.mark.budget
class TestBudgetCLI:
    """Test budget commands against the test data directory."""

    def test_add_and_list(self, rent):
        result = invoke("budget", "list", "expense")

        assert result.exit_code == 0
        assert "Loyer" in result.output
        assert "Logement" in result.output
        assert "$1,200.00" in result.output
        assert rent in result.output

    def test_list_empty_ledger(self):
        result = invoke("budget", "list")

        assert result.exit_code == 0
        assert "Expenses:" in result.output
        assert "Revenues:" in result.output
        assert "(none)" in result.output

    def test_category_matched_case_insensitively(self):
        result = invoke("budget", "add", "expense", "Médecin", "80", "--category", "santé")

        assert result.exit_code == 0
        assert "(Santé)" in result.output

    def test_category_defaults_to_other(self):
        result = invoke("budget", "add", "revenue", "Remboursement", "25")

        assert result.exit_code == 0
        assert "(Autre)" in result.output

    def test_unknown_category(self):
        result = invoke("budget", "add", "revenue", "Loyer", "1200", "--category", "Logement")

        assert result.exit_code == 1
        assert "Unknown revenue category" in result.output

    def test_invalid_amount(self):
        result = invoke("budget", "add", "expense", "Loyer", "lots")

        assert result.exit_code == 1
        assert "Invalid amount" in result.output

    def test_negative_amount(self):
        result = invoke("budget", "add", "expense", "--", "Loyer", "-5")

        assert result.exit_code == 1
        assert "non-negative" in result.output

    def test_update(self, rent):
        result = invoke("budget", "update", "expense", rent, "--amount", "1250.50")

        assert result.exit_code == 0
        assert "$1,250.50" in invoke("budget", "list", "expense").output

    def test_update_requires_an_option(self, rent):
        assert invoke("budget", "update", "expense", rent).exit_code == 2

    def test_remove(self, rent):
        result = invoke("budget", "remove", "expense", rent)

        assert result.exit_code == 0
        assert expense_ids() == []

    def test_unknown_id(self):
        result = invoke("budget", "remove", "expense", "nope")

        assert result.exit_code == 1
        assert "No expense with id nope" in result.output

    def test_unknown_kind(self):
        assert invoke("budget", "list", "transfer").exit_code == 2


@pytest.mark.budget
class TestSummaryCLI:
    """Test the monthly summary command."""

    def test_summary_combines_salaries_and_ledger(self, rent):
        assert invoke("salary", "add-change", "user", "1000", "2024-01-01").exit_code == 0
        assert invoke("budget", "add", "revenue", "Dividendes", "50", "--category", "Dividendes").exit_code == 0

        result = invoke("summary", "--year", "2024", "--month", "3")

        assert result.exit_code == 0
        assert "Summary for March 2024" in result.output
        assert "Other revenues" in result.output
        assert "$50.00" in result.output
        assert "Expenses" in result.output
        assert "$1,200.00" in result.output
        assert "Logement" in result.output
        assert "Investments: (not synced)" in result.output

    def test_summary_with_empty_data(self):
        result = invoke("summary", "--year", "2024", "--month", "1")

        assert result.exit_code == 0
        assert "Net income" in result.output

    def test_invalid_month(self):
        assert invoke("summary", "--month", "13").exit_code == 2
