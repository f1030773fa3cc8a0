#!/usr/bin/env python3
"""
Portfolio Analysis

Tabular views of the synced portfolio: history as a DataFrame, period over
period variation, and current holdings grouped by category.
"""

from collections.abc import Sequence

import pandas as pd

from .models import InvestmentHolding, PortfolioHistoryPoint


def history_to_dataframe(history: Sequence[PortfolioHistoryPoint]) -> pd.DataFrame:
    """
    One row per snapshot date, indexed by date.

    Columns: ``total`` followed by one column per category, in dollars.
    Categories absent on a date are 0.
    """
    categories = sorted({category for point in history for category in point.breakdown})
    records = []
    for point in history:
        record = {"date": pd.Timestamp(point.date.date), "total": float(point.total.to_decimal())}
        for category in categories:
            amount = point.breakdown.get(category)
            record[category] = float(amount.to_decimal()) if amount is not None else 0.0
        records.append(record)

    df = pd.DataFrame(records, columns=["date", "total", *categories])
    return df.set_index("date").sort_index()


def portfolio_variation(history: Sequence[PortfolioHistoryPoint]) -> pd.DataFrame:
    """
    Change of the portfolio total between consecutive snapshots.

    Returns:
        DataFrame indexed by date with ``total``, ``change`` (dollars) and
        ``change_pct`` (percent). The first row has NaN changes.
    """
    df = history_to_dataframe(history)[["total"]].copy()
    df["change"] = df["total"].diff()
    df["change_pct"] = df["total"].pct_change(fill_method=None) * 100
    return df


def holdings_by_type(holdings: Sequence[InvestmentHolding]) -> pd.Series:
    """Sum of current holdings per category, largest first."""
    if not holdings:
        return pd.Series(dtype=float, name="amount")
    df = pd.DataFrame(
        [{"type": holding.type, "amount": float(holding.amount.to_decimal())} for holding in holdings]
    )
    return df.groupby("type")["amount"].sum().sort_values(ascending=False)
