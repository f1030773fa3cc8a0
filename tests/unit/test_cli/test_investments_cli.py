#!/usr/bin/env python3
"""Tests for the investments CLI commands."""

from unittest.mock import MagicMock, patch

import pytest
from click.testing import CliRunner

from household.cli.main import main

URL = "https://docs.google.com/spreadsheets/d/e/abc/pub?output=csv"
GET = "household.investments.fetcher.requests.get"


def fake_response(status_code: int, text: str = "") -> MagicMock:
    response = MagicMock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 400
    response.text = text
    return response


def invoke(*args: str):
    return CliRunner().invoke(main, ["investments", *args])


@pytest.fixture
def synced(sample_sheet_csv):
    with patch(GET, return_value=fake_response(200, sample_sheet_csv)):
        result = invoke("sync", "--url", URL)
    assert result.exit_code == 0


@pytest.mark.investments
class TestSyncCommand:
    """Test 'investments sync'."""

    def test_requires_url(self):
        result = invoke("sync")

        assert result.exit_code == 1
        assert "No sheet URL configured" in result.output

    def test_sync_with_url(self, sample_sheet_csv):
        with patch(GET, return_value=fake_response(200, sample_sheet_csv)) as get:
            result = invoke("sync", "--url", URL)

        assert result.exit_code == 0
        assert "Sync complete!" in result.output
        assert "Holdings: 3" in result.output
        assert "History points: 3" in result.output
        assert "Current total: $7,410.25" in result.output
        get.assert_called_once_with(URL, timeout=30)

    def test_remembers_url(self, synced, sample_sheet_csv):
        with patch(GET, return_value=fake_response(200, sample_sheet_csv)) as get:
            result = invoke("sync")

        assert result.exit_code == 0
        assert get.call_args.args[0] == URL

    def test_url_from_environment(self, monkeypatch, sample_sheet_csv):
        monkeypatch.setenv("HOUSEHOLD_SHEET_URL", URL)
        monkeypatch.setenv("HOUSEHOLD_HTTP_TIMEOUT", "5")

        with patch(GET, return_value=fake_response(200, sample_sheet_csv)) as get:
            result = invoke("sync")

        assert result.exit_code == 0
        get.assert_called_once_with(URL, timeout=5)

    def test_access_denied(self):
        with patch(GET, return_value=fake_response(403)):
            result = invoke("sync", "--url", URL)

        assert result.exit_code == 1
        assert "Access denied (403)" in result.output

    def test_html_page(self, html_page):
        with patch(GET, return_value=fake_response(200, html_page)):
            result = invoke("sync", "--url", URL)

        assert result.exit_code == 1
        assert "web page instead of a CSV file" in result.output

    def test_failed_sync_keeps_previous_data(self, synced, html_page):
        with patch(GET, return_value=fake_response(200, html_page)):
            assert invoke("sync").exit_code == 1

        result = invoke("show")
        assert "$7,410.25" in result.output


@pytest.mark.investments
class TestShowCommand:
    """Test 'investments show'."""

    def test_before_sync(self):
        result = invoke("show")

        assert result.exit_code == 1
        assert "No portfolio synced yet" in result.output

    def test_holdings_and_categories(self, synced):
        result = invoke("show")

        assert result.exit_code == 0
        assert "Broker A - CELI" in result.output
        assert "Closed Account" not in result.output
        assert result.output.index("Broker A - CELI") < result.output.index("Bank B - CELI")
        assert "$6,060.00" in result.output
        assert "$7,410.25" in result.output


@pytest.mark.investments
class TestHistoryCommand:
    """Test 'investments history'."""

    def test_before_sync(self):
        assert invoke("history").exit_code == 1

    def test_variation(self, synced):
        result = invoke("history")

        assert result.exit_code == 0
        assert "2024-01-01" in result.output
        assert "2024-04-01" not in result.output
        assert "$7,300.50" in result.output
        assert "-$90.50" in result.output
        assert "-1.2%" in result.output


@pytest.mark.investments
class TestStatusCommand:
    """Test 'investments status'."""

    def test_before_sync(self):
        result = invoke("status")

        assert result.exit_code == 0
        assert "No portfolio synced yet" in result.output
        assert "Source: (not set)" in result.output

    def test_after_sync(self, synced):
        result = invoke("status")

        assert result.exit_code == 0
        assert "3 holdings, 3 history points, total $7,410.25" in result.output
        assert "Last synced:" in result.output
        assert f"Source: {URL}" in result.output
