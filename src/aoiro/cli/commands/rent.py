"""Rent breakdown commands."""

import click
from aoiro.cli.error_handling import handle_domain_error
from aoiro.cli.formatting import format_yen
from aoiro.domain.rent import RentService
from aoiro.utils.amount_parser import parse_yen


@click.group()
def rent_group():
    """Manage the rent breakdown (地代家賃の内訳)."""
    pass


@rent_group.command("add")
@click.option("--payee", "payee_name", required=True, help="Landlord name")
@click.option("--address", "payee_address", default="", help="Landlord address")
@click.option("--type", "rent_type", default="", help="What is rented (e.g. 事務所)")
@click.option("--monthly", required=True, help="Monthly rent in yen")
@click.option("--annual", help="Rent paid this year (default: 12 x monthly)")
@click.option("--ratio", "business_ratio", type=int, required=True, help="Business use percentage (1-100)")
@click.option("--memo", default="", help="Memo")
@click.pass_context
def add_rent(
    ctx,
    payee_name: str,
    payee_address: str,
    rent_type: str,
    monthly: str,
    annual: str | None,
    business_ratio: int,
    memo: str,
):
    """Register a rent contract.

    Examples:
        aoiro rent add --payee "山田不動産" --type 事務所 --monthly 100000 --ratio 60
    """
    service = RentService(ctx.obj["db"])
    try:
        rent_id = service.add_rent_detail(
            payee_name=payee_name,
            payee_address=payee_address,
            rent_type=rent_type,
            monthly_rent=parse_yen(monthly),
            annual_total=parse_yen(annual) if annual is not None else None,
            business_ratio=business_ratio,
            memo=memo,
        )
        click.echo(f"Created rent detail for '{payee_name}' (ID: {rent_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@rent_group.command("list")
@click.pass_context
def list_rents(ctx):
    """List rent details with their deductible amounts."""
    service = RentService(ctx.obj["db"])
    allocation = service.allocate()
    if not allocation.rows:
        click.echo("No rent details found.")
        return

    for row in allocation.rows:
        rent = row.rent_detail
        click.echo(
            f"ID: {rent.id:3d} | {rent.payee_name:12s} | {rent.rent_type:8s} | "
            f"{format_yen(rent.annual_total):>12s} x {rent.business_ratio}% = {format_yen(row.deductible)}"
        )
    click.echo(f"Total deductible: {format_yen(allocation.total)}")


@rent_group.command("delete")
@click.argument("rent_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_rent(ctx, rent_id: int, yes: bool):
    """Delete a rent detail."""
    service = RentService(ctx.obj["db"])
    if not yes and not click.confirm(f"Are you sure you want to delete rent detail {rent_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_rent_detail(rent_id)
        click.echo(f"Deleted rent detail {rent_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


def register_commands(cli):
    """Register rent commands with main CLI."""
    cli.add_command(rent_group, name="rent")
