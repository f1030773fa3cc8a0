#!/usr/bin/env python3
"""
Spreadsheet Snapshot Parser

Parses the CSV export of a balance spreadsheet laid out as an
(account x date) matrix:

    Account,Type,2024-01-01,2024-02-01,...
    Account A,REER,"$1,200.50","$1,300.00",...
    Total,,"$5,000.00",...

Row 0 is the header. Columns 0 and 1 hold the account name and its
category; every later header cell that is a YYYY-MM-DD date marks a
snapshot column. Subtotal rows ("Total...", "Variation...") and rows
without an account name are ignored.
"""

import io
import logging
from collections import defaultdict
from dataclasses import dataclass

import pandas as pd
from pandas.errors import EmptyDataError

from ..core.currency import safe_currency_to_cents
from ..core.dates import FinancialDate, is_iso_date
from ..core.exceptions import SourceFormatError
from ..core.money import Money
from .models import InvestmentHolding, ParsedSnapshot, PortfolioHistoryPoint, holding_id

logger = logging.getLogger(__name__)

HTML_MARKERS = ("<!doctype html", "<html")
SUMMARY_ROW_PREFIXES = ("total", "variation")
FIRST_DATE_COLUMN = 2


@dataclass(frozen=True)
class DateColumn:
    """A header column holding the snapshot of one date."""

    index: int
    date: FinancialDate


def read_rows(csv_text: str) -> list[list[str]]:
    """
    Split CSV text into rows of string cells.

    Blank lines and rows whose cells are all blank are dropped. Every row is
    padded with empty cells to the width of the longest row, so ragged
    exports (trailing empty months trimmed) read the same as padded ones.
    """
    width = _table_width(csv_text)
    if width == 0:
        return []

    df = pd.read_csv(
        io.StringIO(csv_text),
        header=None,
        names=list(range(width)),
        index_col=False,
        dtype=str,
        keep_default_na=False,
        skip_blank_lines=True,
        engine="python",
    )
    rows = df.fillna("").values.tolist()
    return [row for row in rows if any(cell.strip() for cell in row)]


def _table_width(csv_text: str) -> int:
    """Number of cells in the longest row (0 for an empty table)."""
    longer_rows: list[int] = []
    try:
        df = pd.read_csv(
            io.StringIO(csv_text),
            header=None,
            dtype=str,
            keep_default_na=False,
            skip_blank_lines=True,
            engine="python",
            # Rows wider than the first one are only measured here
            on_bad_lines=lambda cells: longer_rows.append(len(cells)),
        )
    except EmptyDataError:
        return 0
    return max([df.shape[1], *longer_rows])


def find_date_columns(header: list[str]) -> list[DateColumn]:
    """Header columns (from index 2 on) whose label is a YYYY-MM-DD date, oldest first."""
    columns = [
        DateColumn(index=index, date=FinancialDate.from_string(cell))
        for index, cell in enumerate(header)
        if index >= FIRST_DATE_COLUMN and is_iso_date(cell)
    ]
    columns.sort(key=lambda column: column.date)
    return columns


def is_summary_row(account: str) -> bool:
    """Rows without an account name or labelled Total/Variation are spreadsheet subtotals."""
    if not account:
        return True
    return account.lower().startswith(SUMMARY_ROW_PREFIXES)


def _cell(row: list[str], index: int) -> str:
    return row[index] if index < len(row) else ""


def parse_snapshot(csv_text: str) -> ParsedSnapshot:
    """
    Parse a spreadsheet export into current holdings and portfolio history.

    Args:
        csv_text: Raw CSV text of the published sheet

    Returns:
        ParsedSnapshot with:
        - holdings: one entry per account whose most recent non-empty cell
          is strictly positive, in sheet order
        - history: one point per snapshot date with a positive total,
          oldest first, with per-category subtotals

    Raises:
        SourceFormatError: If the text is an HTML page, or has no data rows
    """
    if csv_text.strip().lower().startswith(HTML_MARKERS):
        logger.error("Snapshot source returned an HTML page instead of CSV")
        raise SourceFormatError(
            "The source returned a web page instead of a CSV file. "
            "Publish the sheet to the web as 'Comma-separated values (.csv)' and use that link."
        )

    rows = read_rows(csv_text)
    if len(rows) < 2:
        logger.error(f"Snapshot has {len(rows)} row(s); a header and at least one data row are required")
        raise SourceFormatError(
            "The CSV file looks empty or malformed. It must contain a header row and at least one data row."
        )

    date_columns = find_date_columns(rows[0])
    logger.debug(f"Found {len(date_columns)} date column(s) in snapshot header")

    # Columns sharing a date feed the same history point
    totals: dict[FinancialDate, int] = {column.date: 0 for column in date_columns}
    breakdowns: dict[FinancialDate, dict[str, int]] = {column.date: defaultdict(int) for column in date_columns}

    holdings: list[InvestmentHolding] = []
    skipped = 0

    for row in rows[1:]:
        account = _cell(row, 0).strip()
        account_type = _cell(row, 1).strip()

        if is_summary_row(account):
            skipped += 1
            continue

        latest_cents = 0
        has_value = False

        for column in date_columns:
            cell_value = _cell(row, column.index)
            cents = safe_currency_to_cents(cell_value)

            totals[column.date] += cents
            breakdowns[column.date][account_type] += cents

            # Columns run oldest to newest, so the last non-empty cell is the current value
            if cell_value.strip():
                latest_cents = cents
                has_value = True

        if has_value and latest_cents > 0:
            holdings.append(
                InvestmentHolding(
                    id=holding_id(account, account_type),
                    name=f"{account} - {account_type}",
                    type=account_type,
                    amount=Money.from_cents(latest_cents),
                )
            )

    history = [
        PortfolioHistoryPoint(
            date=snapshot_date,
            total=Money.from_cents(total),
            breakdown={category: Money.from_cents(cents) for category, cents in breakdowns[snapshot_date].items()},
        )
        for snapshot_date, total in sorted(totals.items())
        if total > 0
    ]

    logger.debug(f"Parsed {len(holdings)} holding(s), {len(history)} history point(s), skipped {skipped} summary row(s)")
    return ParsedSnapshot(holdings=holdings, history=history)
