#!/usr/bin/env python3
"""
Budget Ledger Models

Recurring monthly expenses and revenues other than salaries. Each entry is
a named amount with a category; the ledger holds both lists and, like
compensation profiles, is never edited in place.
"""

import logging
import uuid
from dataclasses import dataclass, field, replace
from typing import Any

from ..core.money import Money

logger = logging.getLogger(__name__)

EXPENSE = "expense"
REVENUE = "revenue"
ENTRY_KINDS = (EXPENSE, REVENUE)

EXPENSE_CATEGORIES = (
    "Logement",
    "Nourriture",
    "Transport",
    "Loisirs",
    "Abonnements",
    "Santé",
    "Éducation",
    "Autre",
)
REVENUE_CATEGORIES = ("Dividendes", "Intérêts", "Bonus", "Cadeaux", "Autre")
DEFAULT_CATEGORY = "Autre"

CATEGORIES = {EXPENSE: EXPENSE_CATEGORIES, REVENUE: REVENUE_CATEGORIES}


@dataclass(frozen=True)
class LedgerEntry:
    """A monthly expense or revenue line."""

    id: str
    name: str
    amount: Money
    category: str = DEFAULT_CATEGORY

    def __post_init__(self):
        if not self.name.strip():
            raise ValueError("Entry name must not be empty")
        if self.amount.cents < 0:
            raise ValueError(f"Entry amount must be non-negative: {self.amount}")

    @classmethod
    def create(cls, name: str, amount: Money, category: str = DEFAULT_CATEGORY) -> "LedgerEntry":
        return cls(id=str(uuid.uuid4()), name=name.strip(), amount=amount, category=category)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LedgerEntry":
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            amount=Money.from_dollars(str(data.get("amount", 0))),
            category=str(data.get("category") or DEFAULT_CATEGORY),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "amount": str(self.amount.to_decimal()),
            "category": self.category,
        }


@dataclass(frozen=True)
class Ledger:
    """
    All recurring expenses and revenues of the household.

    Editing operations take the entry kind ("expense" or "revenue") and
    return a new ledger.
    """

    expenses: tuple[LedgerEntry, ...] = field(default_factory=tuple)
    revenues: tuple[LedgerEntry, ...] = field(default_factory=tuple)

    def entries(self, kind: str) -> tuple[LedgerEntry, ...]:
        if kind == EXPENSE:
            return self.expenses
        if kind == REVENUE:
            return self.revenues
        raise KeyError(f"Unknown entry kind: {kind}")

    def _with_entries(self, kind: str, entries: tuple[LedgerEntry, ...]) -> "Ledger":
        self.entries(kind)
        return replace(self, **{f"{kind}s": entries})

    def find(self, kind: str, entry_id: str) -> LedgerEntry:
        for entry in self.entries(kind):
            if entry.id == entry_id:
                return entry
        raise KeyError(f"Unknown {kind}: {entry_id}")

    def add(self, kind: str, name: str, amount: Money, category: str = DEFAULT_CATEGORY) -> "Ledger":
        entry = LedgerEntry.create(name, amount, category)
        logger.debug(f"Adding {kind} {entry.id}: {entry.name} {entry.amount} ({entry.category})")
        return self._with_entries(kind, self.entries(kind) + (entry,))

    def update(
        self,
        kind: str,
        entry_id: str,
        name: str | None = None,
        amount: Money | None = None,
        category: str | None = None,
    ) -> "Ledger":
        """
        Replace some fields of one entry; omitted fields keep their value.

        Raises:
            KeyError: If no entry of this kind has the id
        """
        current = self.find(kind, entry_id)
        updated = replace(
            current,
            name=current.name if name is None else name.strip(),
            amount=current.amount if amount is None else amount,
            category=current.category if category is None else category,
        )
        return self._with_entries(
            kind, tuple(updated if entry.id == entry_id else entry for entry in self.entries(kind))
        )

    def remove(self, kind: str, entry_id: str) -> "Ledger":
        """
        Raises:
            KeyError: If no entry of this kind has the id
        """
        self.find(kind, entry_id)
        return self._with_entries(kind, tuple(entry for entry in self.entries(kind) if entry.id != entry_id))

    def total(self, kind: str) -> Money:
        return sum((entry.amount for entry in self.entries(kind)), Money.zero())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Ledger":
        return cls(
            expenses=tuple(LedgerEntry.from_dict(entry) for entry in data.get("expenses") or []),
            revenues=tuple(LedgerEntry.from_dict(entry) for entry in data.get("revenues") or []),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "expenses": [entry.to_dict() for entry in self.expenses],
            "revenues": [entry.to_dict() for entry in self.revenues],
        }
