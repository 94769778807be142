"""Main CLI entry point."""

import logging
import sys

import click
from aoiro.config import load_settings
from aoiro.database.factories import create_sqlite_database

# Import and register all commands at module level
from aoiro.cli.commands import (
    account,
    asset,
    entry,
    init_accounts,
    loss,
    rent,
    report,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logging(level: str) -> None:
    """Send log records at or above level to stderr."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides AOIRO_DB_PATH environment variable)",
    envvar="AOIRO_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (overrides AOIRO_LOG_LEVEL environment variable)",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str | None):
    """aoiro - Blue-form bookkeeping for sole proprietors.

    Keep a double-entry journal and produce the trial balance, profit and
    loss, balance sheet and the annual blue-form final statement.
    """
    ctx.ensure_object(dict)

    try:
        settings = load_settings()
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    configure_logging(log_level or settings.log_level)
    ctx.obj["settings"] = settings

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path or settings.database_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
init_accounts.register_commands(cli)
account.register_commands(cli)
entry.register_commands(cli)
report.register_commands(cli)
asset.register_commands(cli)
rent.register_commands(cli)
loss.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
