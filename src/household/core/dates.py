#!/usr/bin/env python3
"""
Calendar Dates

FinancialDate is the one date type used for pay dates, salary effective
dates and snapshot columns. It holds a calendar day and nothing finer, so
stepping by whole weeks can never drift across a daylight-saving change.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta

ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def is_iso_date(text: str) -> bool:
    """True for a real calendar day written as YYYY-MM-DD (surrounding blanks allowed)."""
    candidate = (text or "").strip()
    if not ISO_DATE_PATTERN.match(candidate):
        return False
    try:
        datetime.strptime(candidate, "%Y-%m-%d")
    except ValueError:
        return False
    return True


@dataclass(frozen=True, order=True)
class FinancialDate:
    """A calendar day. Ordered, hashable, printed as YYYY-MM-DD."""

    date: date

    @classmethod
    def from_string(cls, date_str: str, date_format: str = "%Y-%m-%d") -> "FinancialDate":
        """
        Parse text such as "2024-03-15".

        Raises:
            ValueError: If the text does not match date_format
        """
        return cls(datetime.strptime(date_str.strip(), date_format).date())

    @classmethod
    def today(cls) -> "FinancialDate":
        return cls(date.today())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def month_index(self) -> int:
        """Zero-based month (January is 0)."""
        return self.date.month - 1

    def add_days(self, days: int) -> "FinancialDate":
        """Shift by whole calendar days; negative values step back."""
        return FinancialDate(self.date + timedelta(days=days))

    def days_until(self, other: "FinancialDate") -> int:
        """Calendar days from this date to other (negative if other is earlier)."""
        return (other.date - self.date).days

    def to_iso_string(self) -> str:
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.date.isoformat()

    def __repr__(self) -> str:
        return f"FinancialDate({self.date.isoformat()!r})"


def coerce_date(value: "FinancialDate | date | str") -> FinancialDate:
    """Accept a FinancialDate, a datetime.date (YAML loads those), or an ISO string."""
    if isinstance(value, FinancialDate):
        return value
    if isinstance(value, datetime):
        return FinancialDate(value.date())
    if isinstance(value, date):
        return FinancialDate(value)
    return FinancialDate.from_string(value)
