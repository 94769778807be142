"""Fixed asset commands."""

import click
from aoiro.cli.error_handling import handle_domain_error
from aoiro.cli.formatting import format_rate, format_yen
from aoiro.domain.depreciation import DepreciationService
from aoiro.utils.amount_parser import parse_yen


@click.group()
def asset_group():
    """Manage fixed assets and depreciation."""
    pass


@asset_group.command("add")
@click.argument("name")
@click.option("--date", "acquisition_date", required=True, help="Acquisition date (YYYY-MM-DD)")
@click.option("--cost", required=True, help="Acquisition cost in yen")
@click.option("--life", "useful_life", type=int, required=True, help="Useful life in years")
@click.option("--rate", type=int, required=True, help="Depreciation rate x 10000 (0.200 = 2000)")
@click.option("--accumulated", default="0", help="Depreciation accumulated before this year")
@click.option("--memo", default="", help="Memo")
@click.option("--inactive", is_flag=True, help="Register as inactive (left out of schedules)")
@click.pass_context
def add_asset(
    ctx,
    name: str,
    acquisition_date: str,
    cost: str,
    useful_life: int,
    rate: int,
    accumulated: str,
    memo: str,
    inactive: bool,
):
    """Register a fixed asset (straight-line depreciation).

    Examples:
        aoiro asset add "ノートPC" --date 2024-07-01 --cost 1200000 --life 5 --rate 2000
    """
    service = DepreciationService(ctx.obj["db"])
    try:
        asset_id = service.add_fixed_asset(
            name=name,
            acquisition_date=acquisition_date,
            acquisition_cost=parse_yen(cost),
            useful_life=useful_life,
            depreciation_rate=rate,
            accumulated_dep=parse_yen(accumulated),
            memo=memo,
            is_active=not inactive,
        )
        click.echo(f"Created fixed asset '{name}' (ID: {asset_id})")
    except ValueError as e:
        handle_domain_error(ctx, e)


@asset_group.command("list")
@click.pass_context
def list_assets(ctx):
    """List fixed assets ordered by acquisition date."""
    service = DepreciationService(ctx.obj["db"])
    assets = service.list_fixed_assets()
    if not assets:
        click.echo("No fixed assets found.")
        return

    for asset in assets:
        status = "" if asset.is_active else " (inactive)"
        click.echo(
            f"ID: {asset.id:3d} | {asset.name:12s} | {asset.acquisition_date.isoformat()} | "
            f"{format_yen(asset.acquisition_cost):>12s} | {asset.useful_life}y {format_rate(asset.depreciation_rate)}"
            f"{status}"
        )


@asset_group.command("delete")
@click.argument("asset_id", type=int)
@click.option("--yes", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_asset(ctx, asset_id: int, yes: bool):
    """Delete a fixed asset."""
    service = DepreciationService(ctx.obj["db"])
    if not yes and not click.confirm(f"Are you sure you want to delete fixed asset {asset_id}?"):
        click.echo("Deletion cancelled.")
        return

    try:
        service.delete_fixed_asset(asset_id)
        click.echo(f"Deleted fixed asset {asset_id}")
    except ValueError as e:
        handle_domain_error(ctx, e)


@asset_group.command("schedule")
@click.option("--year", type=int, required=True, help="Fiscal year")
@click.pass_context
def show_schedule(ctx, year: int):
    """Show the depreciation schedule for a year."""
    service = DepreciationService(ctx.obj["db"])
    schedule = service.schedule(year)
    if not schedule.rows:
        click.echo(f"No depreciable assets in {year}.")
        return

    for row in schedule.rows:
        click.echo(
            f"{row.asset_name:12s} | {row.months_used:2d}/12 | prev {format_yen(row.accumulated_dep_prev):>12s} | "
            f"this year {format_yen(row.current_year_dep):>12s} | book value {format_yen(row.book_value_end):>12s}"
        )
    click.echo(f"Total depreciation: {format_yen(schedule.total)}")


def register_commands(cli):
    """Register asset commands with main CLI."""
    cli.add_command(asset_group, name="asset")
