"""Journal entry commands."""

import io

import click
from aoiro.cli.error_handling import handle_domain_error
from aoiro.cli.formatting import format_yen
from aoiro.domain.account import AccountService
from aoiro.domain.csv_export import export_journal_csv
from aoiro.domain.journal import JournalService
from aoiro.utils.account_resolver import resolve_account
from aoiro.utils.amount_parser import parse_yen


# Common transactions: name -> (debit account code, credit account code)
ENTRY_TEMPLATES = {
    "売上入金": (1112, 4100),
    "売上(現金)": (1111, 4100),
    "売上(売掛)": (1131, 4100),
    "売掛回収": (1112, 1131),
    "家賃": (5300, 1112),
    "交通費": (5500, 1111),
    "消耗品": (5600, 1111),
    "通信費": (5400, 1112),
    "立替(事業主借)": (5600, 3300),
}


@click.group()
def entry_group():
    """Manage journal entries."""
    pass


def _resolve_side(ctx, account_service: AccountService, account: str | int, side: str) -> int:
    try:
        return resolve_account(account_service, account)
    except ValueError as e:
        handle_domain_error(ctx, f"{side} account: {e}")


def _parse_amount_or_exit(ctx, amount: str) -> int:
    try:
        return parse_yen(amount)
    except ValueError as e:
        handle_domain_error(ctx, f"Invalid amount format: {e}")


@entry_group.command("add")
@click.option("--date", "entry_date", default="today", show_default=True, help="Entry date (YYYY-MM-DD or 'today', 'yesterday')")
@click.option("--debit", help="Debit account code or name")
@click.option("--credit", help="Credit account code or name")
@click.option("--amount", required=True, help="Amount in yen (e.g. 12000 or ¥12,000)")
@click.option("--description", default="", help="Description (摘要)")
@click.option("--template", help="Template name; see 'aoiro entry templates'")
@click.pass_context
def add_entry(
    ctx,
    entry_date: str,
    debit: str | None,
    credit: str | None,
    amount: str,
    description: str,
    template: str | None,
):
    """Record a journal entry.

    Accounts can be given by code or name. A template fills in the debit and
    credit accounts; --debit or --credit still override it.

    Examples:
        aoiro entry add --date 2024-05-10 --debit 1112 --credit 4100 --amount 50000
        aoiro entry add --template 家賃 --amount 80000 --description "5月分"
    """
    db = ctx.obj["db"]
    journal_service = JournalService(db)
    account_service = AccountService(db)

    if template is not None:
        if template not in ENTRY_TEMPLATES:
            handle_domain_error(ctx, f"Unknown template '{template}'")
        template_debit, template_credit = ENTRY_TEMPLATES[template]
        debit = debit if debit is not None else template_debit
        credit = credit if credit is not None else template_credit
        if not description:
            description = template

    if debit is None or credit is None:
        handle_domain_error(ctx, "Both --debit and --credit are required unless --template is given")

    debit_id = _resolve_side(ctx, account_service, debit, "Debit")
    credit_id = _resolve_side(ctx, account_service, credit, "Credit")
    yen = _parse_amount_or_exit(ctx, amount)

    try:
        entry_id = journal_service.create_entry(
            date=entry_date,
            debit_account_id=debit_id,
            debit_amount=yen,
            credit_account_id=credit_id,
            credit_amount=yen,
            description=description,
        )
        click.echo(f"Created journal entry {entry_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@entry_group.command("update")
@click.argument("entry_id", type=int)
@click.option("--date", "entry_date", help="Entry date")
@click.option("--debit", help="Debit account code or name")
@click.option("--credit", help="Credit account code or name")
@click.option("--amount", help="Amount in yen")
@click.option("--description", help="Description (摘要)")
@click.pass_context
def update_entry(
    ctx,
    entry_id: int,
    entry_date: str | None,
    debit: str | None,
    credit: str | None,
    amount: str | None,
    description: str | None,
) -> None:
    """Update a journal entry.

    Options that are not given keep their current value.

    Examples:
        aoiro entry update 3 --amount 55000
        aoiro entry update 3 --credit 売掛金 --description "請求書 #12"
    """
    db = ctx.obj["db"]
    journal_service = JournalService(db)
    account_service = AccountService(db)

    current = journal_service.get_entry(entry_id)
    if current is None:
        handle_domain_error(ctx, f"Journal entry {entry_id} not found")

    debit_id = current.debit_account_id if debit is None else _resolve_side(ctx, account_service, debit, "Debit")
    credit_id = current.credit_account_id if credit is None else _resolve_side(ctx, account_service, credit, "Credit")

    debit_amount = current.debit_amount
    credit_amount = current.credit_amount
    if amount is not None:
        debit_amount = credit_amount = _parse_amount_or_exit(ctx, amount)

    try:
        journal_service.update_entry(
            entry_id=entry_id,
            date=entry_date if entry_date is not None else current.date,
            debit_account_id=debit_id,
            debit_amount=debit_amount,
            credit_account_id=credit_id,
            credit_amount=credit_amount,
            description=description if description is not None else current.description,
        )
        click.echo(f"Updated journal entry {entry_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@entry_group.command("delete")
@click.argument("entry_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_entry(ctx, entry_id: int, yes: bool) -> None:
    """Delete a journal entry.

    Examples:
        aoiro entry delete 3
        aoiro entry delete 3 --yes
    """
    db = ctx.obj["db"]
    journal_service = JournalService(db)

    entry = journal_service.get_entry(entry_id)
    if entry is None:
        handle_domain_error(ctx, f"Journal entry {entry_id} not found")

    if not yes and not click.confirm(f"Are you sure you want to delete journal entry {entry_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        journal_service.delete_entry(entry_id)
        click.echo(f"Deleted journal entry {entry_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@entry_group.command("list")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.option("--month", type=int, help="Month (1-12)")
@click.pass_context
def list_entries(ctx, year: int, month: int | None):
    """List journal entries of a year or month."""
    db = ctx.obj["db"]
    journal_service = JournalService(db)

    try:
        entries = list(journal_service.list_entries(year, month))
    except ValueError as e:
        handle_domain_error(ctx, e)

    if not entries:
        click.echo("No journal entries found.")
        return

    click.echo(f"\n{'ID':>5s}  {'Date':10s}  {'Debit':12s}  {'Credit':12s}  {'Amount':>12s}  Description")
    click.echo("-" * 80)
    for e in entries:
        click.echo(
            f"{e.id:5d}  {e.date.isoformat():10s}  {e.debit_account_name or '':12s}  "
            f"{e.credit_account_name or '':12s}  {format_yen(e.debit_amount):>12s}  {e.description}"
        )
    click.echo("-" * 80)
    click.echo(f"{len(entries)} entries, total {format_yen(sum(e.debit_amount for e in entries))}")


@entry_group.command("export")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.option("--month", type=int, help="Month (1-12)")
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="CSV file to write (default: stdout)")
@click.pass_context
def export_entries(ctx, year: int, month: int | None, output: str | None):
    """Export journal entries as CSV.

    Files are written as UTF-8 with a byte order mark so spreadsheet
    software detects the encoding.
    """
    db = ctx.obj["db"]
    journal_service = JournalService(db)

    try:
        entries = journal_service.list_entries(year, month)
        if output is None:
            buffer = io.StringIO()
            export_journal_csv(entries, buffer)
            click.echo(buffer.getvalue(), nl=False)
            return
        with open(output, "w", encoding="utf-8-sig", newline="") as f:
            count = export_journal_csv(entries, f)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Exported {count} entries to {output}")


@entry_group.command("templates")
def list_templates():
    """List entry templates."""
    for name, (debit_code, credit_code) in ENTRY_TEMPLATES.items():
        click.echo(f"{name}: debit {debit_code} / credit {credit_code}")


def register_commands(cli):
    """Register entry commands with main CLI."""
    cli.add_command(entry_group, name="entry")
