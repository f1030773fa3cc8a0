#!/usr/bin/env python3
"""
Salary History Resolution

Point-in-time lookup of the salary amount in effect on a given date.
"""

from bisect import bisect_right
from collections.abc import Iterable
from datetime import date

from ..core.dates import FinancialDate, coerce_date
from ..core.money import Money
from .models import SalaryChange


def resolve_amount(history: Iterable[SalaryChange], as_of: "FinancialDate | date | str") -> Money:
    """
    Return the salary amount in effect on a date.

    The most recent change whose effective date is on or before ``as_of``
    wins. When several changes share that effective date, the one listed
    first in ``history`` wins.

    Args:
        history: Salary changes, in any order
        as_of: Date to resolve the amount for

    Returns:
        The effective amount, or zero if ``as_of`` precedes every change
    """
    as_of = coerce_date(as_of)
    # sorted() stays stable with reverse=True, so input order breaks ties
    newest_first = sorted(history, key=lambda change: change.effective_date, reverse=True)
    for change in newest_first:
        if change.effective_date <= as_of:
            return change.amount
    return Money.zero()


class SalaryHistory:
    """
    Presorted salary history for repeated lookups.

    Resolving every pay date of a year with resolve_amount() re-sorts the
    history each time. This index sorts once and answers with a binary
    search, returning exactly what resolve_amount() would.
    """

    def __init__(self, history: Iterable[SalaryChange]):
        indexed = list(enumerate(history))
        # Among equal dates, earlier input entries sort last so bisect lands on them
        indexed.sort(key=lambda item: (item[1].effective_date, -item[0]))
        self._changes = [change for _, change in indexed]
        self._dates = [change.effective_date for change in self._changes]

    def __len__(self) -> int:
        return len(self._changes)

    def amount_on(self, as_of: "FinancialDate | date | str") -> Money:
        """Amount in effect on ``as_of`` (zero before the first change)."""
        position = bisect_right(self._dates, coerce_date(as_of))
        if position == 0:
            return Money.zero()
        return self._changes[position - 1].amount

    def latest(self) -> SalaryChange | None:
        """The change with the latest effective date."""
        return self._changes[-1] if self._changes else None
