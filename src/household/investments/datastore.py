#!/usr/bin/env python3
"""
Portfolio DataStore

Persists the most recently synced holdings and portfolio history, plus the
snapshot source URL, as JSON files.
"""

import logging
from datetime import datetime
from pathlib import Path

from ..core.json_utils import read_json, write_json
from .models import InvestmentHolding, ParsedSnapshot, PortfolioHistoryPoint

logger = logging.getLogger(__name__)


class PortfolioStore:
    """
    JSON-backed store for the synced portfolio.

    Storage:
    - <base_path>/holdings.json
    - <base_path>/history.json
    - <base_path>/source.json
    """

    def __init__(self, base_path: Path):
        self.base_path = base_path
        self.holdings_file = base_path / "holdings.json"
        self.history_file = base_path / "history.json"
        self.source_file = base_path / "source.json"

    def exists(self) -> bool:
        return self.holdings_file.exists() and self.history_file.exists()

    def last_modified(self) -> datetime | None:
        if not self.exists():
            return None
        return datetime.fromtimestamp(max(self.holdings_file.stat().st_mtime, self.history_file.stat().st_mtime))

    def load(self) -> ParsedSnapshot:
        """
        Load the last synced portfolio.

        Raises:
            FileNotFoundError: If no sync has completed yet
        """
        if not self.exists():
            raise FileNotFoundError(f"No synced portfolio in {self.base_path}")

        holdings = [InvestmentHolding.from_dict(entry) for entry in read_json(self.holdings_file)]
        history = [PortfolioHistoryPoint.from_dict(entry) for entry in read_json(self.history_file)]
        return ParsedSnapshot(holdings=holdings, history=history)

    def save(self, snapshot: ParsedSnapshot) -> None:
        write_json(self.holdings_file, [holding.to_dict() for holding in snapshot.holdings])
        write_json(self.history_file, [point.to_dict() for point in snapshot.history])
        logger.info(f"Saved {len(snapshot.holdings)} holding(s) and {len(snapshot.history)} history point(s)")

    def load_source_url(self) -> str | None:
        if not self.source_file.exists():
            return None
        return read_json(self.source_file).get("url") or None

    def save_source_url(self, url: str) -> None:
        write_json(self.source_file, {"url": url})

    def summary_text(self) -> str:
        if not self.exists():
            return "No portfolio synced yet"
        snapshot = self.load()
        return f"{len(snapshot.holdings)} holdings, {len(snapshot.history)} history points, total {snapshot.total}"
