#!/usr/bin/env python3
"""Tests for FinancialDate primitive type."""

from datetime import date, datetime

import pytest

from household.core.dates import FinancialDate, coerce_date, is_iso_date


class TestFinancialDateConstruction:
    """Test FinancialDate construction."""

    @pytest.mark.parametrize(
        "constructor,expected_date",
        [
            (lambda: FinancialDate(date=date(2024, 1, 15)), date(2024, 1, 15)),
            (lambda: FinancialDate.from_string("2024-01-15"), date(2024, 1, 15)),
            (lambda: FinancialDate.from_string(" 2024-01-15 "), date(2024, 1, 15)),
            (lambda: FinancialDate.from_string("01/15/2024", date_format="%m/%d/%Y"), date(2024, 1, 15)),
        ],
        ids=["from_date", "from_string", "from_string_padded", "from_string_custom_format"],
    )
    def test_financial_date_construction(self, constructor, expected_date):
        fd = constructor()
        assert fd.date == expected_date

    def test_today(self):
        assert FinancialDate.today().date == date.today()

    def test_invalid_string_raises(self):
        with pytest.raises(ValueError):
            FinancialDate.from_string("2024-02-30")

    @pytest.mark.parametrize(
        "value",
        [FinancialDate(date=date(2024, 3, 1)), date(2024, 3, 1), datetime(2024, 3, 1, 23, 59), "2024-03-01"],
        ids=["financial_date", "date", "datetime", "string"],
    )
    def test_coerce_date(self, value):
        assert coerce_date(value) == FinancialDate(date=date(2024, 3, 1))


class TestIsoDateDetection:
    """Test strict YYYY-MM-DD detection used for sheet headers."""

    @pytest.mark.parametrize("text", ["2024-01-01", "1999-12-31", "2024-02-29"])
    def test_valid(self, text):
        assert is_iso_date(text)

    @pytest.mark.parametrize(
        "text",
        ["", "Type de compte", "2024-1-01", "2024/01/01", "01-01-2024", "2023-02-29", "2024-13-01", "2024-01-01T00:00"],
    )
    def test_invalid(self, text):
        assert not is_iso_date(text)


class TestFinancialDateCalculations:
    """Test calendar-day arithmetic."""

    def test_add_days_crosses_month_and_year(self):
        fd = FinancialDate.from_string("2024-12-27")
        assert fd.add_days(14) == FinancialDate.from_string("2025-01-10")
        assert fd.add_days(-14 * 26) == FinancialDate.from_string("2023-12-29")

    def test_add_days_across_dst_change(self):
        # US and EU daylight-saving transitions fall in March
        assert FinancialDate.from_string("2024-03-08").add_days(14).to_iso_string() == "2024-03-22"

    def test_year_and_month_index(self):
        fd = FinancialDate.from_string("2024-01-31")
        assert fd.year == 2024
        assert fd.month == 1
        assert fd.month_index == 0
        assert FinancialDate.from_string("2024-12-01").month_index == 11

    def test_days_until(self):
        old = FinancialDate(date=date(2024, 1, 1))
        new = FinancialDate(date=date(2024, 1, 11))
        assert old.days_until(new) == 10
        assert new.days_until(old) == -10


class TestFinancialDateComparison:
    """Test ordering and hashing."""

    def test_ordering(self):
        earlier = FinancialDate.from_string("2024-01-01")
        later = FinancialDate.from_string("2024-06-01")
        assert earlier < later
        assert earlier <= later
        assert later > earlier
        assert later >= earlier
        assert earlier == FinancialDate.from_string("2024-01-01")
        assert sorted([later, earlier]) == [earlier, later]

    def test_hashable(self):
        dates = {FinancialDate.from_string("2024-01-01"), FinancialDate.from_string("2024-01-01")}
        assert len(dates) == 1

    def test_str_is_iso(self):
        assert str(FinancialDate(date=date(2024, 1, 5))) == "2024-01-05"
