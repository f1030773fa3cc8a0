#!/usr/bin/env python3
"""
Salary Income Totals

Combines pay schedules with salary histories into monthly and annual
income for each earner and for the household.
"""

from dataclasses import dataclass

from ..core.money import Money
from .history import SalaryHistory
from .models import PERSONS, CompensationProfile, SalaryConfig
from .schedule import MONTHS_PER_YEAR, PaySchedule, generate_schedule


def profile_schedule(profile: CompensationProfile, year: int) -> PaySchedule:
    """Pay schedule of one earner for a calendar year."""
    return generate_schedule(profile.pay_frequency_weeks, profile.first_pay_date, year)


def monthly_income(profile: CompensationProfile, schedule: PaySchedule, month_index: int) -> Money:
    """Sum of the salary in effect on each pay date of a month."""
    history = SalaryHistory(profile.history)
    return sum((history.amount_on(pay_date) for pay_date in schedule[month_index]), Money.zero())


def annual_income(profile: CompensationProfile, schedule: PaySchedule) -> Money:
    """Sum of the salary in effect on every pay date of the schedule's year."""
    history = SalaryHistory(profile.history)
    return sum((history.amount_on(pay_date) for pay_date in schedule), Money.zero())


@dataclass(frozen=True)
class MonthlyIncome:
    """Pay count and income of one earner for one month."""

    person: str
    month_index: int
    pay_count: int
    amount: Money


def income_by_month(profile: CompensationProfile, person: str, year: int) -> list[MonthlyIncome]:
    """Monthly breakdown for one earner, January first."""
    schedule = profile_schedule(profile, year)
    history = SalaryHistory(profile.history)
    return [
        MonthlyIncome(
            person=person,
            month_index=month_index,
            pay_count=schedule.pay_count(month_index),
            amount=sum((history.amount_on(pay_date) for pay_date in schedule[month_index]), Money.zero()),
        )
        for month_index in range(MONTHS_PER_YEAR)
    ]


def household_monthly_income(config: SalaryConfig, year: int, month_index: int) -> Money:
    """Combined salary income of both earners for one month."""
    return sum(
        (
            monthly_income(config.profile(person), profile_schedule(config.profile(person), year), month_index)
            for person in PERSONS
        ),
        Money.zero(),
    )


def household_annual_income(config: SalaryConfig, year: int) -> Money:
    """Combined salary income of both earners for a calendar year."""
    return sum(
        (annual_income(config.profile(person), profile_schedule(config.profile(person), year)) for person in PERSONS),
        Money.zero(),
    )


def available_years(config: SalaryConfig, current_year: int) -> list[int]:
    """
    Years worth offering for schedule views.

    Covers the current year, the year of every salary change, and the year
    of each earner's anchor pay date.
    """
    years = {current_year}
    for person in PERSONS:
        profile = config.profile(person)
        years.update(change.effective_date.year for change in profile.history)
        if profile.first_pay_date:
            years.add(profile.first_pay_date.year)
    return sorted(years)
