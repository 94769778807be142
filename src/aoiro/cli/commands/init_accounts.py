"""Initialize the default chart of accounts."""

import click
from aoiro.cli.error_handling import handle_domain_error
from aoiro.domain.account import AccountService
from aoiro.domain.entities import Classification


# Chart of accounts for a sole proprietor filing the blue form
DEFAULT_ACCOUNTS = [
    # Assets
    (1111, "現金", Classification.ASSET),
    (1112, "普通預金", Classification.ASSET),
    (1131, "売掛金", Classification.ASSET),
    (1140, "棚卸資産", Classification.ASSET),
    (1210, "工具器具備品", Classification.ASSET),
    (1220, "減価償却累計額", Classification.ASSET),
    (1300, "事業主貸", Classification.ASSET),
    # Liabilities
    (2110, "買掛金", Classification.LIABILITY),
    (2120, "未払金", Classification.LIABILITY),
    (2130, "預り金", Classification.LIABILITY),
    # Equity
    (3100, "元入金", Classification.EQUITY),
    (3300, "事業主借", Classification.EQUITY),
    # Revenue
    (4100, "売上高", Classification.REVENUE),
    (4200, "雑収入", Classification.REVENUE),
    # Expenses
    (5100, "仕入高", Classification.EXPENSE),
    (5200, "減価償却費", Classification.EXPENSE),
    (5300, "地代家賃", Classification.EXPENSE),
    (5400, "通信費", Classification.EXPENSE),
    (5500, "旅費交通費", Classification.EXPENSE),
    (5600, "消耗品費", Classification.EXPENSE),
    (5700, "水道光熱費", Classification.EXPENSE),
    (5800, "支払手数料", Classification.EXPENSE),
    (5900, "雑費", Classification.EXPENSE),
]


@click.command("init-accounts")
@click.option("--force", is_flag=True, help="Add missing default accounts even if accounts exist")
@click.pass_context
def init_accounts(ctx, force: bool):
    """Initialize database with the default chart of accounts."""
    db = ctx.obj["db"]
    service = AccountService(db)

    existing = service.list_accounts()
    if existing and not force:
        click.echo("Accounts already exist. Use --force to add missing defaults.")
        return

    click.echo("Creating default chart of accounts...")

    existing_codes = {acc.code for acc in existing}
    created = 0
    for code, name, classification in DEFAULT_ACCOUNTS:
        if code in existing_codes:
            continue
        try:
            service.create_account(code=code, name=name, classification=classification)
        except ValueError as e:
            handle_domain_error(ctx, e)
        created += 1

    click.echo(f"Successfully created {created} accounts.")


def register_commands(cli):
    """Register init-accounts command with main CLI."""
    cli.add_command(init_accounts)
