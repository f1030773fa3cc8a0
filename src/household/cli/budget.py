#!/usr/bin/env python3
"""
Budget CLI - Recurring Expenses and Revenues

Command-line interface for the monthly expense and revenue ledger.
"""

import click

from ..budget import CATEGORIES, DEFAULT_CATEGORY, ENTRY_KINDS, EXPENSE, REVENUE, LedgerStore
from ..core.config import get_config
from ..core.currency import format_cents
from ..core.money import Money

KIND_ARG = click.Choice(list(ENTRY_KINDS))


def _store() -> LedgerStore:
    return LedgerStore(get_config().budget.data_dir)


def _parse_amount(value: str) -> Money:
    try:
        amount = Money.from_dollars(value)
    except ValueError as e:
        raise click.ClickException(str(e))
    if amount.cents < 0:
        raise click.ClickException(f"Amount must be non-negative: {value}")
    return amount


def _parse_category(kind: str, value: str) -> str:
    """Match a category case-insensitively against the list for this kind."""
    for category in CATEGORIES[kind]:
        if category.casefold() == value.strip().casefold():
            return category
    raise click.ClickException(f"Unknown {kind} category '{value}'. Choose from: {', '.join(CATEGORIES[kind])}")


@click.group()
def budget() -> None:
    """Recurring monthly expenses and revenues."""
    pass


@budget.command(name="list")
@click.argument("kind", type=KIND_ARG, required=False)
def list_entries(kind: str | None) -> None:
    """
    List ledger entries with their monthly totals.

    Examples:
      household budget list
      household budget list expense
    """
    ledger = _store().load()

    for entry_kind in [kind] if kind else [EXPENSE, REVENUE]:
        entries = ledger.entries(entry_kind)
        click.echo(f"{entry_kind.capitalize()}s:")
        if not entries:
            click.echo("  (none)")
        for entry in entries:
            click.echo(f"  {entry.name:<30} {entry.category:<14} {format_cents(entry.amount.cents):>14}  [{entry.id}]")
        click.echo(f"  {'Total':<45} {format_cents(ledger.total(entry_kind).cents):>14}")


@budget.command()
@click.argument("kind", type=KIND_ARG)
@click.argument("name")
@click.argument("amount_str", metavar="AMOUNT")
@click.option("--category", default=DEFAULT_CATEGORY, show_default=True, help="Entry category")
def add(kind: str, name: str, amount_str: str, category: str) -> None:
    """
    Add a monthly expense or revenue.

    Example:
      household budget add expense "Loyer" 1200 --category Logement
    """
    store = _store()
    amount = _parse_amount(amount_str)
    try:
        ledger = store.load().add(kind, name, amount, _parse_category(kind, category))
    except ValueError as e:
        raise click.ClickException(str(e))
    store.save(ledger)

    added = ledger.entries(kind)[-1]
    click.echo(f"Added {kind} {added.name}: {format_cents(added.amount.cents)} ({added.category}) [{added.id}]")


@budget.command()
@click.argument("kind", type=KIND_ARG)
@click.argument("entry_id", metavar="ID")
@click.option("--name", help="New name")
@click.option("--amount", "amount_str", help="New monthly amount")
@click.option("--category", help="New category")
def update(kind: str, entry_id: str, name: str | None, amount_str: str | None, category: str | None) -> None:
    """Change the name, amount and/or category of an entry."""
    if name is None and amount_str is None and category is None:
        raise click.UsageError("Provide --name, --amount and/or --category")

    store = _store()
    amount = _parse_amount(amount_str) if amount_str is not None else None
    new_category = _parse_category(kind, category) if category is not None else None
    try:
        ledger = store.load().update(kind, entry_id, name=name, amount=amount, category=new_category)
    except KeyError:
        raise click.ClickException(f"No {kind} with id {entry_id}")
    except ValueError as e:
        raise click.ClickException(str(e))
    store.save(ledger)
    click.echo(f"Updated {kind} {entry_id}")


@budget.command()
@click.argument("kind", type=KIND_ARG)
@click.argument("entry_id", metavar="ID")
def remove(kind: str, entry_id: str) -> None:
    """Delete an entry."""
    store = _store()
    try:
        ledger = store.load().remove(kind, entry_id)
    except KeyError:
        raise click.ClickException(f"No {kind} with id {entry_id}")
    store.save(ledger)
    click.echo(f"Removed {kind} {entry_id}")
