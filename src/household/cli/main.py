#!/usr/bin/env python3
"""
Household CLI Entry Point

The ``household`` command groups the salary, budget and investments tools.
"""

import logging
import os

import click

from ..core.config import get_config
from ..core.json_utils import format_json


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Run against another environment's settings",
)
@click.option("--verbose", "-v", is_flag=True, help="Print the environment and data directory first")
@click.option("--debug", is_flag=True, help="Log at DEBUG level")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Household finances: salary schedules, budget ledger and investment portfolio tracking.
    """
    ctx.ensure_object(dict)

    # Both must be in place before the configuration is first read
    if config_env:
        os.environ["HOUSEHOLD_ENV"] = config_env
    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    try:
        config = get_config()
    except ValueError as e:
        raise click.ClickException(str(e))

    ctx.obj.update(config=config, verbose=verbose, debug=debug)

    if debug:
        logging.getLogger("household").setLevel(logging.DEBUG)
        click.echo("Debug logging enabled")

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")


@main.command()
def version() -> None:
    """Print the installed version."""
    from household import __author__, __version__

    click.echo(f"Household Finances v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the settings as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Print the resolved settings."""
    settings = ctx.obj["config"]

    if as_json:
        click.echo(format_json(settings.to_dict(), sort_keys=True))
        return

    click.echo("Settings:")
    click.echo(f"  Environment: {settings.environment.value}")
    click.echo(f"  Data directory: {settings.data_dir}")
    click.echo(f"  Sheet URL: {settings.investments.sheet_url or '(not set)'}")
    click.echo(f"  HTTP timeout: {settings.investments.http_timeout}s")
    click.echo(f"  Log level: {settings.log_level}{' (debug)' if settings.debug else ''}")


from .budget import budget  # noqa: E402
from .investments import investments  # noqa: E402
from .salary import salary  # noqa: E402
from .summary import summary  # noqa: E402

main.add_command(salary)
main.add_command(budget)
main.add_command(investments)
main.add_command(summary)


if __name__ == "__main__":
    main()
