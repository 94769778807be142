"""Loss carryforward commands."""

import click
from aoiro.cli.error_handling import handle_domain_error
from aoiro.cli.formatting import format_yen
from aoiro.domain.entities import LossCarryforwardSummary
from aoiro.domain.loss_carryforward import LossCarryforwardService
from aoiro.utils.amount_parser import parse_yen


@click.group()
def loss_group():
    """Manage net loss carryforwards (純損失の繰越控除)."""
    pass


def _echo_summary(summary: LossCarryforwardSummary) -> None:
    click.echo(f"Income {summary.year}: {format_yen(summary.income_before)}")
    for row in summary.rows:
        click.echo(
            f"  {row.loss_year} (year {row.slot}) | loss {format_yen(row.original_loss):>12s} | "
            f"used {format_yen(row.already_used):>12s} | applied {format_yen(row.applied_this_year):>12s} | "
            f"remaining {format_yen(row.remaining):>12s}"
        )
    click.echo(f"Applied: {format_yen(summary.total_applied)}")
    click.echo(f"Income after deduction: {format_yen(summary.income_after)}")


@loss_group.command("add")
@click.argument("loss_year", type=int)
@click.argument("amount")
@click.option("--memo", default="", help="Memo")
@click.pass_context
def add_loss(ctx, loss_year: int, amount: str, memo: str):
    """Record the net loss of LOSS_YEAR.

    Examples:
        aoiro loss add 2022 300000
    """
    service = LossCarryforwardService(ctx.obj["db"])
    try:
        loss_id = service.add_loss_carryforward(loss_year=loss_year, loss_amount=parse_yen(amount), memo=memo)
        click.echo(f"Created loss carryforward for {loss_year} (ID: {loss_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@loss_group.command("list")
@click.pass_context
def list_losses(ctx):
    """List loss carryforward records."""
    service = LossCarryforwardService(ctx.obj["db"])
    records = service.list_loss_carryforwards()
    if not records:
        click.echo("No loss carryforwards found.")
        return

    for r in records:
        click.echo(
            f"ID: {r.id:3d} | {r.loss_year} | loss {format_yen(r.loss_amount):>12s} | "
            f"used {format_yen(r.used_year_1)} / {format_yen(r.used_year_2)} / {format_yen(r.used_year_3)}"
        )


@loss_group.command("delete")
@click.argument("loss_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_loss(ctx, loss_id: int, yes: bool):
    """Delete a loss carryforward record."""
    service = LossCarryforwardService(ctx.obj["db"])
    if not yes and not click.confirm(f"Are you sure you want to delete loss carryforward {loss_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_loss_carryforward(loss_id)
        click.echo(f"Deleted loss carryforward {loss_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@loss_group.command("summarize")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.pass_context
def summarize(ctx, year: int):
    """Show the deduction for a year without storing it."""
    service = LossCarryforwardService(ctx.obj["db"])
    try:
        summary = service.summarize(year)
    except ValueError as e:
        handle_domain_error(ctx, e)
    _echo_summary(summary)


@loss_group.command("commit")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.pass_context
def commit(ctx, year: int):
    """Store the deduction for a year on each loss record."""
    service = LossCarryforwardService(ctx.obj["db"])
    try:
        summary = service.commit(year)
    except ValueError as e:
        handle_domain_error(ctx, e)
    _echo_summary(summary)
    click.echo(f"Committed loss carryforward usage for {year}")


@loss_group.command("set-usage")
@click.argument("loss_id", type=int)
@click.argument("used_year_1")
@click.argument("used_year_2")
@click.argument("used_year_3")
@click.pass_context
def set_usage(ctx, loss_id: int, used_year_1: str, used_year_2: str, used_year_3: str):
    """Overwrite the amounts used in the three years after the loss."""
    service = LossCarryforwardService(ctx.obj["db"])
    try:
        service.set_usage(loss_id, parse_yen(used_year_1), parse_yen(used_year_2), parse_yen(used_year_3))
        click.echo(f"Updated loss carryforward {loss_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register loss carryforward commands with main CLI."""
    cli.add_command(loss_group, name="loss")
