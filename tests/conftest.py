"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from household.compensation import CompensationProfile, SalaryChange, SalaryConfig
from household.core.dates import FinancialDate
from household.core.money import Money
from tests.fixtures.sheets import HTML_PAGE, SAMPLE_SHEET_CSV


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def sample_sheet_csv() -> str:
    """Published balance sheet export with subtotal rows and blank future cells."""
    return SAMPLE_SHEET_CSV


@pytest.fixture
def html_page() -> str:
    """What a sheet's edit link returns instead of CSV."""
    return HTML_PAGE


@pytest.fixture
def raise_history() -> tuple[SalaryChange, ...]:
    """Salary of 1000 from January 2024, raised to 1200 in June."""
    return (
        SalaryChange(id="start", amount=Money.from_dollars(1000), effective_date=FinancialDate.from_string("2024-01-01")),
        SalaryChange(id="raise", amount=Money.from_dollars(1200), effective_date=FinancialDate.from_string("2024-06-01")),
    )


@pytest.fixture
def biweekly_profile(raise_history) -> CompensationProfile:
    """Paid every two weeks from 2024-01-05."""
    return CompensationProfile(
        pay_frequency_weeks=2,
        first_pay_date=FinancialDate.from_string("2024-01-05"),
        history=raise_history,
    )


@pytest.fixture
def salary_config(biweekly_profile) -> SalaryConfig:
    """User paid biweekly with a raise; partner paid every 4 weeks at a flat 3000."""
    partner = CompensationProfile(
        pay_frequency_weeks=4,
        first_pay_date=FinancialDate.from_string("2023-12-29"),
        history=(
            SalaryChange(
                id="partner-start", amount=Money.from_dollars(3000), effective_date=FinancialDate.from_string("2023-01-01")
            ),
        ),
    )
    return SalaryConfig(user=biweekly_profile, partner=partner)


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a per-test data directory."""
    monkeypatch.setenv("HOUSEHOLD_ENV", "test")
    monkeypatch.setenv("HOUSEHOLD_DATA_DIR", str(tmp_path / "household_data"))
    monkeypatch.delenv("HOUSEHOLD_SHEET_URL", raising=False)
    monkeypatch.delenv("HOUSEHOLD_HTTP_TIMEOUT", raising=False)

    # Drop any configuration cached by a previous test
    monkeypatch.setattr("household.core.config._config", None)
