#!/usr/bin/env python3
"""
Summary CLI - Monthly Household Overview

Salaries, other revenues, expenses and net income for one month.
"""

import calendar
from datetime import date

import click

from ..budget import LedgerStore, monthly_summary
from ..compensation import PERSONS, SalaryConfigStore
from ..core.config import get_config
from ..core.currency import format_cents
from ..investments import PortfolioStore


def _line(label: str, cents: int) -> str:
    return f"  {label:<30} {format_cents(cents):>16}"


@click.command()
@click.option("--year", type=int, help="Calendar year (default: current year)")
@click.option("--month", type=click.IntRange(1, 12), help="Month 1-12 (default: current month)")
def summary(year: int | None, month: int | None) -> None:
    """
    Show the household's revenues, expenses and net income for one month.

    Examples:
      household summary
      household summary --year 2024 --month 3
    """
    today = date.today()
    year = year or today.year
    month = month or today.month

    config = get_config()
    portfolio = PortfolioStore(config.investments.data_dir)
    holdings = portfolio.load().holdings if portfolio.exists() else []

    result = monthly_summary(
        SalaryConfigStore(config.compensation.data_dir).load(),
        LedgerStore(config.budget.data_dir).load(),
        year,
        month - 1,
        holdings,
    )

    click.echo(f"Summary for {calendar.month_name[month]} {year}")
    click.echo("=" * 50)
    for person in PERSONS:
        click.echo(_line(f"{person.capitalize()} salary", result.salaries[person].cents))
    click.echo(_line("Other revenues", result.other_revenues.cents))
    click.echo(_line("Total revenues", result.total_revenues.cents))
    click.echo(_line("Expenses", result.expenses.cents))
    click.echo("-" * 50)
    click.echo(_line("Net income", result.net_income.cents))

    if result.expenses_by_category:
        click.echo("\nExpenses by category:")
        for category, amount in result.expenses_by_category.items():
            click.echo(_line(category, amount.cents))

    if holdings:
        click.echo(f"\nInvestments: {format_cents(result.investments_total.cents)}")
    else:
        click.echo("\nInvestments: (not synced)")
