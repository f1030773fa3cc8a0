"""
Investments Package

Portfolio sync from a published balance spreadsheet.

Key Components:
- parser: CSV snapshot parsing into holdings and history
- fetcher: Snapshot download
- sync: Fetch, parse, then store
- datastore: JSON persistence of the synced portfolio
- analysis: pandas views of history and holdings
"""

from .analysis import history_to_dataframe, holdings_by_type, portfolio_variation
from .datastore import PortfolioStore
from .fetcher import fetch_snapshot_text
from .models import InvestmentHolding, ParsedSnapshot, PortfolioHistoryPoint, holding_id
from .parser import parse_snapshot
from .sync import sync_portfolio

__all__ = [
    "InvestmentHolding",
    "ParsedSnapshot",
    "PortfolioHistoryPoint",
    "PortfolioStore",
    "fetch_snapshot_text",
    "history_to_dataframe",
    "holding_id",
    "holdings_by_type",
    "parse_snapshot",
    "portfolio_variation",
    "sync_portfolio",
]
