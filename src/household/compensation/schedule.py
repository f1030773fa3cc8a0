#!/usr/bin/env python3
"""
Pay Schedule Generator

Projects a periodic pay cadence onto a single calendar year.

Given a pay frequency in weeks and an anchor pay date, every pay date is
``anchor + k * frequency_weeks * 7`` days for some integer ``k`` (negative
values reach into the past). The schedule for a year is the subset of those
dates falling inside it, grouped by month.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import MAXYEAR, MINYEAR, date

from ..core.dates import FinancialDate, coerce_date

logger = logging.getLogger(__name__)

MONTHS_PER_YEAR = 12


@dataclass(frozen=True)
class PaySchedule:
    """
    Pay dates of one calendar year keyed by zero-based month index.

    A derived view: recompute it from a profile instead of editing it.
    """

    year: int
    months: tuple[tuple[FinancialDate, ...], ...]

    @classmethod
    def empty(cls, year: int) -> "PaySchedule":
        return cls(year=year, months=tuple(() for _ in range(MONTHS_PER_YEAR)))

    def __getitem__(self, month_index: int) -> tuple[FinancialDate, ...]:
        if not 0 <= month_index < MONTHS_PER_YEAR:
            raise IndexError(f"Month index out of range: {month_index}")
        return self.months[month_index]

    def __iter__(self) -> Iterator[FinancialDate]:
        for month_dates in self.months:
            yield from month_dates

    def __len__(self) -> int:
        return sum(len(month_dates) for month_dates in self.months)

    def pay_count(self, month_index: int) -> int:
        return len(self[month_index])

    def to_dict(self) -> dict[int, list[str]]:
        return {
            month_index: [pay_date.to_iso_string() for pay_date in month_dates]
            for month_index, month_dates in enumerate(self.months)
        }


def first_pay_date_in_year(step_days: int, anchor: FinancialDate, year: int) -> FinancialDate:
    """
    Earliest ``anchor + k * step_days`` falling on or after January 1st of ``year``.

    Computed directly from the day offset between the anchor and January 1st,
    which gives the same result whether the anchor lies before, inside, or
    after the target year.
    """
    offset = anchor.days_until(FinancialDate(date(year, 1, 1)))
    periods = -(-offset // step_days)  # ceiling division
    return anchor.add_days(periods * step_days)


def generate_schedule(
    frequency_weeks: int,
    anchor_date: "FinancialDate | date | str | None",
    target_year: int,
) -> PaySchedule:
    """
    Generate every pay date of ``target_year``.

    Args:
        frequency_weeks: Weeks between pay dates
        anchor_date: Any known pay date
        target_year: Calendar year to project onto

    Returns:
        PaySchedule with all 12 months present. A non-positive frequency or a
        missing anchor gives an empty schedule rather than an error, so a
        partially filled configuration still renders.
    """
    if not anchor_date or frequency_weeks is None or frequency_weeks <= 0:
        logger.debug(f"Empty pay schedule for {target_year}: frequency={frequency_weeks}, anchor={anchor_date}")
        return PaySchedule.empty(target_year)

    try:
        anchor = coerce_date(anchor_date)
    except ValueError:
        logger.debug(f"Empty pay schedule for {target_year}: unreadable anchor {anchor_date!r}")
        return PaySchedule.empty(target_year)

    if not MINYEAR <= target_year <= MAXYEAR:
        return PaySchedule.empty(target_year)

    step_days = int(frequency_weeks) * 7
    months: list[list[FinancialDate]] = [[] for _ in range(MONTHS_PER_YEAR)]
    try:
        current = first_pay_date_in_year(step_days, anchor, target_year)
    except OverflowError:
        return PaySchedule.empty(target_year)
    while current.year == target_year:
        months[current.month_index].append(current)
        try:
            current = current.add_days(step_days)
        except OverflowError:
            # Stepped past 9999-12-31
            break

    return PaySchedule(year=target_year, months=tuple(tuple(month_dates) for month_dates in months))
