#!/usr/bin/env python3
"""
Investment Data Models

Current holdings and dated portfolio totals produced by the snapshot parser.
"""

import re
from dataclasses import dataclass, field
from typing import Any

from ..core.dates import FinancialDate
from ..core.money import Money

_WHITESPACE_RUN = re.compile(r"\s+")


def holding_id(account: str, account_type: str) -> str:
    """
    Stable identifier for an account/type pair.

    Example:
        holding_id("Account A", "REER") -> "account-a-reer"
    """
    return _WHITESPACE_RUN.sub("-", f"{account}-{account_type}").lower()


@dataclass(frozen=True)
class InvestmentHolding:
    """Most recent observed value of one account."""

    id: str
    name: str
    type: str
    amount: Money

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "InvestmentHolding":
        return cls(
            id=data["id"],
            name=data["name"],
            type=data["type"],
            amount=Money.from_dollars(str(data["amount"])),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "amount": str(self.amount.to_decimal()),
        }


@dataclass(frozen=True)
class PortfolioHistoryPoint:
    """
    Portfolio value on one snapshot date.

    ``total`` always equals the sum of ``breakdown`` (category -> subtotal).
    """

    date: FinancialDate
    total: Money
    breakdown: dict[str, Money] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PortfolioHistoryPoint":
        return cls(
            date=FinancialDate.from_string(data["date"]),
            total=Money.from_dollars(str(data["total"])),
            breakdown={
                category: Money.from_dollars(str(amount)) for category, amount in data.get("breakdown", {}).items()
            },
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "date": self.date.to_iso_string(),
            "total": str(self.total.to_decimal()),
            "breakdown": {category: str(amount.to_decimal()) for category, amount in self.breakdown.items()},
        }


@dataclass(frozen=True)
class ParsedSnapshot:
    """Result of parsing one spreadsheet export."""

    holdings: list[InvestmentHolding]
    history: list[PortfolioHistoryPoint]

    @property
    def total(self) -> Money:
        """Sum of the current holdings."""
        return sum((holding.amount for holding in self.holdings), Money.zero())
