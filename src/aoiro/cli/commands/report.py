"""Financial statement commands."""

import click
from aoiro.cli.error_handling import handle_domain_error
from aoiro.cli.formatting import format_rate, format_yen
from aoiro.domain.entities import BalanceSheet, ProfitLoss
from aoiro.domain.final_statement import FinalStatementService
from aoiro.domain.reports import ReportService


@click.group()
def report_group():
    """Produce financial statements."""
    pass


def _echo_rows(rows, width: int = 12) -> None:
    for row in rows:
        click.echo(f"  {row.account_code:6d} {row.account_name:{width}s} {format_yen(row.amount):>14s}")


def _echo_profit_loss(profit_loss: ProfitLoss) -> None:
    click.echo("収益 (Revenue)")
    _echo_rows(profit_loss.revenue_rows)
    click.echo(f"  {'収益合計':19s} {format_yen(profit_loss.total_revenue):>14s}")
    click.echo("費用 (Expenses)")
    _echo_rows(profit_loss.expense_rows)
    click.echo(f"  {'費用合計':19s} {format_yen(profit_loss.total_expense):>14s}")
    click.echo("-" * 40)
    click.echo(f"  {'所得金額':19s} {format_yen(profit_loss.net_income):>14s}")


def _echo_balance_sheet(balance_sheet: BalanceSheet) -> None:
    click.echo("資産の部 (Assets)")
    _echo_rows(balance_sheet.asset_rows)
    click.echo(f"  {'資産合計':19s} {format_yen(balance_sheet.total_assets):>14s}")
    click.echo("負債の部 (Liabilities)")
    _echo_rows(balance_sheet.liability_rows)
    click.echo(f"  {'負債合計':19s} {format_yen(balance_sheet.total_liabilities):>14s}")
    click.echo("純資産の部 (Equity)")
    _echo_rows(balance_sheet.equity_rows)
    click.echo(f"  {'青色申告特別控除前の所得':12s} {format_yen(balance_sheet.net_income):>14s}")
    click.echo(f"  {'純資産合計':19s} {format_yen(balance_sheet.total_equity + balance_sheet.net_income):>14s}")
    if not balance_sheet.is_balanced:
        click.echo(f"Warning: balance sheet is off by {format_yen(balance_sheet.imbalance)}", err=True)


@report_group.command("trial-balance")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.option("--month", type=int, help="Month (1-12)")
@click.pass_context
def trial_balance(ctx, year: int, month: int | None):
    """Show the trial balance (試算表)."""
    service = ReportService(ctx.obj["db"])
    try:
        tb = service.trial_balance(year, month)
    except ValueError as e:
        handle_domain_error(ctx, e)

    period = f"{year}" if month is None else f"{year}-{month:02d}"
    click.echo(f"\n試算表 {period}")
    click.echo("-" * 64)
    click.echo(f"  {'Code':>6s} {'Account':12s} {'Debit':>14s} {'Credit':>14s} {'Balance':>14s}")
    for row in tb.rows:
        click.echo(
            f"  {row.account_code:6d} {row.account_name:12s} {format_yen(row.debit_total):>14s} "
            f"{format_yen(row.credit_total):>14s} {format_yen(row.balance):>14s}"
        )
    click.echo("-" * 64)
    click.echo(
        f"  {'合計':19s} {format_yen(tb.debit_grand_total):>14s} {format_yen(tb.credit_grand_total):>14s}"
    )
    if not tb.is_balanced:
        click.echo("Warning: debit and credit totals differ", err=True)


@report_group.command("profit-loss")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.pass_context
def profit_loss(ctx, year: int):
    """Show the profit and loss statement (損益計算書)."""
    service = ReportService(ctx.obj["db"])
    try:
        pl = service.profit_loss(year)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n損益計算書 {year}")
    click.echo("-" * 40)
    _echo_profit_loss(pl)


@report_group.command("balance-sheet")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.pass_context
def balance_sheet(ctx, year: int):
    """Show the balance sheet (貸借対照表) as of December 31."""
    service = ReportService(ctx.obj["db"])
    try:
        bs = service.balance_sheet(year)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n貸借対照表 {year}-12-31")
    click.echo("-" * 40)
    _echo_balance_sheet(bs)


@report_group.command("final-statement")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.pass_context
def final_statement(ctx, year: int):
    """Show the blue-form final statement (青色申告決算書)."""
    settings = ctx.obj["settings"]
    service = FinalStatementService(
        ctx.obj["db"],
        sales_account_code=settings.sales_account_code,
        purchases_account_code=settings.purchases_account_code,
    )
    try:
        fs = service.compose(year)
    except ValueError as e:
        handle_domain_error(ctx, e)

    click.echo(f"\n青色申告決算書 {year}")
    click.echo("=" * 40)
    click.echo("1. 損益計算書")
    _echo_profit_loss(fs.profit_loss)
    click.echo(f"  {'仕入金額':19s} {format_yen(fs.purchases_amount):>14s}")
    click.echo(f"  {'差引金額':19s} {format_yen(fs.gross_profit):>14s}")

    click.echo("\n2. 月別売上(収入)金額及び仕入金額")
    for m in fs.monthly:
        click.echo(f"  {m.month:2d}月 {format_yen(m.sales):>14s} {format_yen(m.purchases):>14s}")
    click.echo(f"  合計 {format_yen(fs.annual_sales_total):>14s} {format_yen(fs.annual_purchases_total):>14s}")

    click.echo("\n3. 減価償却費の計算")
    for row in fs.depreciation.rows:
        click.echo(
            f"  {row.asset_name:12s} {row.acquisition_date.isoformat()} {format_yen(row.acquisition_cost):>12s} "
            f"{row.depreciation_method.label} {format_rate(row.depreciation_rate)} {row.months_used:2d}/12 "
            f"{format_yen(row.current_year_dep):>12s} {format_yen(row.book_value_end):>12s}"
        )
    click.echo(f"  {'減価償却費合計':19s} {format_yen(fs.depreciation_total):>14s}")

    click.echo("\n地代家賃の内訳")
    for row in fs.rent.rows:
        rent = row.rent_detail
        click.echo(
            f"  {rent.payee_name:12s} {rent.rent_type:8s} {format_yen(rent.annual_total):>12s} "
            f"{rent.business_ratio:3d}% {format_yen(row.deductible):>12s}"
        )
    click.echo(f"  {'必要経費算入額合計':19s} {format_yen(fs.rent_total):>14s}")

    click.echo("\n4. 貸借対照表")
    _echo_balance_sheet(fs.balance_sheet)

    click.echo("\n純損失の繰越控除")
    losses = fs.loss_carryforward
    for row in losses.rows:
        click.echo(
            f"  {row.loss_year} {format_yen(row.original_loss):>12s} "
            f"{format_yen(row.applied_this_year):>12s} {format_yen(row.remaining):>12s}"
        )
    click.echo(f"  {'控除額':19s} {format_yen(losses.total_applied):>14s}")
    click.echo(f"  {'控除後所得':19s} {format_yen(losses.income_after):>14s}")


def register_commands(cli):
    """Register report commands with main CLI."""
    cli.add_command(report_group, name="report")
