#!/usr/bin/env python3
"""
Budget Ledger DataStore

Persists the recurring expenses and revenues as one JSON document.
"""

import logging
from pathlib import Path

from ..core.json_utils import read_json, write_json
from .models import Ledger

logger = logging.getLogger(__name__)


class LedgerStore:
    """
    JSON-backed store for the budget Ledger.

    Storage: <base_path>/ledger.json
    """

    def __init__(self, base_path: Path):
        self.base_path = base_path
        self.ledger_file = base_path / "ledger.json"

    def exists(self) -> bool:
        return self.ledger_file.exists()

    def load(self) -> Ledger:
        """Load the ledger; an empty ledger when nothing was saved yet."""
        if not self.exists():
            return Ledger()
        return Ledger.from_dict(read_json(self.ledger_file) or {})

    def save(self, ledger: Ledger) -> None:
        write_json(self.ledger_file, ledger.to_dict())
        logger.info(
            f"Saved ledger: {len(ledger.expenses)} expense(s), {len(ledger.revenues)} revenue(s) to {self.ledger_file}"
        )
