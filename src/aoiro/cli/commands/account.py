"""Account management commands."""

import click
from aoiro.cli.error_handling import handle_domain_error
from aoiro.domain.account import AccountService


@click.group()
def account_group():
    """Manage the chart of accounts."""
    pass


@account_group.command("create")
@click.argument("code", type=int)
@click.argument("name", metavar="ACCOUNT_NAME")
@click.argument("classification")
@click.pass_context
def create_account(ctx, code: int, name: str, classification: str):
    """Create a new account.

    CLASSIFICATION is one of asset, liability, equity, revenue, expense
    (or 資産, 負債, 純資産, 収益, 費用).

    Examples:
        aoiro account create 5700 水道光熱費 expense
        aoiro account create 2140 借入金 負債
    """
    db = ctx.obj["db"]
    service = AccountService(db)

    try:
        account_id = service.create_account(code=code, name=name, classification=classification)
        click.echo(f"Created account {code} '{name}' (ID: {account_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@account_group.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts ordered by code."""
    db = ctx.obj["db"]
    service = AccountService(db)

    accounts = service.list_accounts()
    if not accounts:
        click.echo("No accounts found. Run 'aoiro init-accounts' to create the defaults.")
        return

    click.echo("\nAccounts:")
    click.echo("-" * 50)
    for acc in accounts:
        click.echo(f"{acc.code:6d} | {acc.name:12s} | {acc.classification.label}")


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(account_group, name="account")
