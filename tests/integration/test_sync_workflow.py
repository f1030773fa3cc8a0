#!/usr/bin/env python3
"""
End-to-end portfolio and salary workflows against a real data directory.

Only the HTTP layer is replaced; parsing, persistence and reporting run as
in production.
"""

from unittest.mock import MagicMock, patch

import pytest

from household.compensation import SalaryConfigStore, household_annual_income
from household.core.config import get_config
from household.core.dates import FinancialDate
from household.core.json_utils import read_json
from household.core.money import Money
from household.investments import PortfolioStore, holdings_by_type, parse_snapshot, sync_portfolio

URL = "https://docs.google.com/spreadsheets/d/e/abc/pub?output=csv"


@pytest.mark.integration
class TestPortfolioWorkflow:
    """Sync, persist, reload and analyze a portfolio."""

    def test_sync_then_reload(self, sample_sheet_csv):
        store = PortfolioStore(get_config().investments.data_dir)
        response = MagicMock(status_code=200, ok=True, text=sample_sheet_csv)

        with patch("household.investments.fetcher.requests.get", return_value=response):
            synced = sync_portfolio(URL, store)

        reloaded = store.load()
        assert reloaded == synced
        assert reloaded.total == Money.from_dollars("7410.25")
        assert holdings_by_type(reloaded.holdings)["CELI"] == pytest.approx(6060.00)

        raw_history = read_json(store.base_path / "history.json")
        assert raw_history[0]["date"] == "2024-01-01"

    def test_resync_replaces_data(self, sample_sheet_csv):
        store = PortfolioStore(get_config().investments.data_dir)
        smaller = "Account,Type,2024-05-01\nBroker A,REER,$10.00\n"

        sync_portfolio(URL, store, fetcher=lambda url, timeout: sample_sheet_csv)
        sync_portfolio(URL, store, fetcher=lambda url, timeout: smaller)

        reloaded = store.load()
        assert reloaded == parse_snapshot(smaller)
        assert len(reloaded.holdings) == 1


@pytest.mark.integration
class TestSalaryWorkflow:
    """Persist a salary configuration and recompute household totals."""

    def test_save_reload_totals(self, salary_config):
        store = SalaryConfigStore(get_config().compensation.data_dir)
        store.save(salary_config)

        reloaded = store.load(today=FinancialDate.from_string("2024-01-01"))

        assert reloaded == salary_config
        assert household_annual_income(reloaded, 2024) == Money.from_dollars(29000 + 13 * 3000)
