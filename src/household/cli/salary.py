#!/usr/bin/env python3
"""
Salary CLI - Pay Schedules and Salary History

Command-line interface for the two-earner salary model.
"""

import calendar
from datetime import date

import click

from ..compensation import (
    PERSONS,
    SalaryConfigStore,
    SalaryHistory,
    available_years,
    household_annual_income,
    income_by_month,
    profile_schedule,
)
from ..core.config import get_config
from ..core.currency import format_cents
from ..core.dates import FinancialDate
from ..core.exceptions import HouseholdError
from ..core.money import Money

PERSON_ARG = click.Choice(list(PERSONS))


def _parse_date(value: str) -> FinancialDate:
    try:
        return FinancialDate.from_string(value)
    except ValueError:
        raise click.ClickException(f"Invalid date format: {value}. Use YYYY-MM-DD")


def _parse_amount(value: str) -> Money:
    try:
        amount = Money.from_dollars(value)
    except ValueError as e:
        raise click.ClickException(str(e))
    if amount.cents < 0:
        raise click.ClickException(f"Salary amount must be non-negative: {value}")
    return amount


def _store() -> SalaryConfigStore:
    return SalaryConfigStore(get_config().compensation.data_dir)


@click.group()
def salary() -> None:
    """Salary history and pay schedule commands."""
    pass


@salary.command()
@click.option("--year", type=int, help="Calendar year (default: current year)")
@click.option("--month", type=click.IntRange(1, 12), help="Only show one month (1-12)")
def show(year: int | None, month: int | None) -> None:
    """
    Show pay counts and salary income per month for both earners.

    Examples:
      household salary show
      household salary show --year 2024 --month 3
    """
    salary_config = _store().load()
    if year is None:
        year = date.today().year
        click.echo(f"Years with salary data: {', '.join(str(y) for y in available_years(salary_config, year))}")

    by_person = {person: income_by_month(salary_config.profile(person), person, year) for person in PERSONS}
    month_indexes = [month - 1] if month else range(12)

    click.echo(f"Salary income for {year}")
    click.echo("=" * 60)
    click.echo(f"{'Month':<6}" + "".join(f"{person.capitalize():>18}" for person in PERSONS) + f"{'Total':>16}")

    for month_index in month_indexes:
        cells = []
        month_total = Money.zero()
        for person in PERSONS:
            entry = by_person[person][month_index]
            cells.append(f"{entry.pay_count}x {format_cents(entry.amount.cents):>14}")
            month_total = month_total + entry.amount
        click.echo(
            f"{calendar.month_abbr[month_index + 1]:<6}"
            + "".join(f"{cell:>18}" for cell in cells)
            + f"{format_cents(month_total.cents):>16}"
        )

    click.echo("-" * 60)
    for person in PERSONS:
        person_total = sum((entry.amount for entry in by_person[person]), Money.zero())
        click.echo(f"{person.capitalize()} annual: {format_cents(person_total.cents)}")
    click.echo(f"Household annual: {format_cents(household_annual_income(salary_config, year).cents)}")


@salary.command()
@click.argument("person", type=PERSON_ARG)
@click.option("--year", type=int, help="Calendar year (default: current year)")
def schedule(person: str, year: int | None) -> None:
    """
    List the pay dates of one earner, grouped by month.

    Example:
      household salary schedule user --year 2024
    """
    year = year or date.today().year
    profile = _store().load().profile(person)
    pay_schedule = profile_schedule(profile, year)
    history = SalaryHistory(profile.history)

    if len(pay_schedule) == 0:
        click.echo(f"No pay dates for {person} in {year} (check frequency and first pay date).")
        return

    click.echo(f"Pay dates for {person} in {year} (every {profile.pay_frequency_weeks} week(s))")
    for month_index in range(12):
        for pay_date in pay_schedule[month_index]:
            amount = history.amount_on(pay_date)
            click.echo(f"  {calendar.month_abbr[month_index + 1]}  {pay_date}  {format_cents(amount.cents)}")
    click.echo(f"Total: {len(pay_schedule)} pay date(s)")


@salary.command()
@click.argument("person", type=PERSON_ARG)
@click.option("--date", "date_str", help="Date to resolve (YYYY-MM-DD, default: today)")
def amount(person: str, date_str: str | None) -> None:
    """Show the salary amount in effect on a date."""
    as_of = _parse_date(date_str) if date_str else FinancialDate.today()
    profile = _store().load().profile(person)
    click.echo(f"{person.capitalize()} salary on {as_of}: {format_cents(profile.current_amount(as_of).cents)}")


@salary.command()
@click.argument("person", type=PERSON_ARG)
def history(person: str) -> None:
    """List the salary history of one earner, oldest first."""
    profile = _store().load().profile(person)
    for change in sorted(profile.history, key=lambda entry: entry.effective_date):
        click.echo(f"  {change.effective_date}  {format_cents(change.amount.cents):>14}  [{change.id}]")


@salary.command(name="set")
@click.argument("person", type=PERSON_ARG)
@click.option("--frequency", type=click.IntRange(min=1), help="Weeks between pay dates")
@click.option("--first-pay-date", "first_pay_date", help="Any known pay date (YYYY-MM-DD)")
def set_schedule(person: str, frequency: int | None, first_pay_date: str | None) -> None:
    """Change the pay frequency and/or anchor pay date of one earner."""
    if frequency is None and first_pay_date is None:
        raise click.UsageError("Provide --frequency and/or --first-pay-date")

    store = _store()
    salary_config = store.load()
    anchor = _parse_date(first_pay_date) if first_pay_date else None
    profile = salary_config.profile(person).with_schedule(frequency, anchor)
    store.save(salary_config.with_profile(person, profile))

    click.echo(f"{person.capitalize()}: every {profile.pay_frequency_weeks} week(s) from {profile.first_pay_date}")


@salary.command(name="add-change")
@click.argument("person", type=PERSON_ARG)
@click.argument("amount_str", metavar="AMOUNT")
@click.argument("effective_date", metavar="DATE")
def add_change(person: str, amount_str: str, effective_date: str) -> None:
    """Record a salary change effective from DATE."""
    store = _store()
    salary_config = store.load()
    profile = salary_config.profile(person).add_change(_parse_amount(amount_str), _parse_date(effective_date))
    store.save(salary_config.with_profile(person, profile))

    added = profile.history[-1]
    click.echo(f"Added {format_cents(added.amount.cents)} effective {added.effective_date} [{added.id}]")


@salary.command(name="update-change")
@click.argument("person", type=PERSON_ARG)
@click.argument("change_id", metavar="ID")
@click.argument("amount_str", metavar="AMOUNT")
@click.argument("effective_date", metavar="DATE")
def update_change(person: str, change_id: str, amount_str: str, effective_date: str) -> None:
    """Replace the amount and date of an existing salary change."""
    store = _store()
    salary_config = store.load()
    try:
        profile = salary_config.profile(person).update_change(
            change_id, _parse_amount(amount_str), _parse_date(effective_date)
        )
    except KeyError:
        raise click.ClickException(f"No salary change with id {change_id}")
    store.save(salary_config.with_profile(person, profile))
    click.echo(f"Updated salary change {change_id}")


@salary.command(name="remove-change")
@click.argument("person", type=PERSON_ARG)
@click.argument("change_id", metavar="ID")
def remove_change(person: str, change_id: str) -> None:
    """Delete a salary change (the last remaining entry cannot be removed)."""
    store = _store()
    salary_config = store.load()
    try:
        profile = salary_config.profile(person).remove_change(change_id)
    except KeyError:
        raise click.ClickException(f"No salary change with id {change_id}")
    except HouseholdError as e:
        raise click.ClickException(str(e))
    store.save(salary_config.with_profile(person, profile))
    click.echo(f"Removed salary change {change_id}")
