#!/usr/bin/env python3
"""
Investments CLI - Portfolio Sync and Reports

Command-line interface for syncing the balance spreadsheet and reviewing
the resulting holdings and history.
"""

import math

import click

from ..core.config import get_config
from ..core.currency import format_cents
from ..core.exceptions import HouseholdError
from ..investments import PortfolioStore, holdings_by_type, portfolio_variation, sync_portfolio


def _dollars(value: float) -> str:
    return format_cents(int(round(value * 100)))


def _store() -> PortfolioStore:
    return PortfolioStore(get_config().investments.data_dir)


def _load_or_exit(store: PortfolioStore):
    try:
        return store.load()
    except FileNotFoundError:
        raise click.ClickException("No portfolio synced yet. Run 'household investments sync' first.")


@click.group()
def investments() -> None:
    """Investment portfolio commands."""
    pass


@investments.command()
@click.option("--url", help="Published CSV link of the balance sheet (remembered for next syncs)")
@click.pass_context
def sync(ctx: click.Context, url: str | None) -> None:
    """
    Fetch the balance sheet and replace the stored holdings and history.

    The URL comes from --url, then the last URL used, then HOUSEHOLD_SHEET_URL.

    Examples:
      household investments sync --url "https://docs.google.com/.../pub?output=csv"
      household investments sync
    """
    config = get_config()
    store = _store()
    source_url = url or store.load_source_url() or config.investments.sheet_url

    if not source_url:
        raise click.ClickException("No sheet URL configured. Pass --url or set HOUSEHOLD_SHEET_URL.")

    if (ctx.obj or {}).get("verbose", False):
        click.echo(f"Syncing from {source_url}")

    try:
        snapshot = sync_portfolio(source_url, store, timeout=config.investments.http_timeout)
    except HouseholdError as e:
        raise click.ClickException(str(e))

    if url:
        store.save_source_url(url)

    click.echo("Sync complete!")
    click.echo(f"  Holdings: {len(snapshot.holdings)}")
    click.echo(f"  History points: {len(snapshot.history)}")
    click.echo(f"  Current total: {snapshot.total}")


@investments.command()
def show() -> None:
    """Show current holdings and subtotals by category."""
    snapshot = _load_or_exit(_store())

    if not snapshot.holdings:
        click.echo("No holdings with a positive balance.")
        return

    click.echo("Holdings:")
    click.echo("=" * 60)
    for holding in sorted(snapshot.holdings, key=lambda h: h.amount, reverse=True):
        click.echo(f"  {holding.name:<40} {format_cents(holding.amount.cents):>16}")

    click.echo("\nBy category:")
    for category, amount in holdings_by_type(snapshot.holdings).items():
        click.echo(f"  {category or '(none)':<40} {_dollars(amount):>16}")

    click.echo("-" * 60)
    click.echo(f"  {'Total':<40} {format_cents(snapshot.total.cents):>16}")


@investments.command()
def history() -> None:
    """Show portfolio totals per snapshot date with period-over-period change."""
    snapshot = _load_or_exit(_store())

    if not snapshot.history:
        click.echo("No portfolio history.")
        return

    variation = portfolio_variation(snapshot.history)
    click.echo(f"{'Date':<12}{'Total':>16}{'Change':>16}{'Change %':>10}")
    for when, row in variation.iterrows():
        change = "" if math.isnan(row["change"]) else _dollars(row["change"])
        change_pct = "" if math.isnan(row["change_pct"]) else f"{row['change_pct']:.1f}%"
        click.echo(f"{when.date().isoformat():<12}{_dollars(row['total']):>16}{change:>16}{change_pct:>10}")


@investments.command()
def status() -> None:
    """Show when the portfolio was last synced and from where."""
    store = _store()
    click.echo(store.summary_text())

    synced_at = store.last_modified()
    if synced_at:
        click.echo(f"Last synced: {synced_at:%Y-%m-%d %H:%M}")
    click.echo(f"Source: {store.load_source_url() or get_config().investments.sheet_url or '(not set)'}")
