"""CLI commands for read-only reports."""

from __future__ import annotations

from pathlib import Path

import click

from almox.application.reports import ReportsHandler, movement_csv
from almox.domain.exceptions import DomainException
from almox.infrastructure.bootstrap import item_repository, movement_repository

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _day(value):
    return value.date() if value is not None else None


def _write_csv(path: str, text: str) -> None:
    Path(path).write_text(text, encoding="utf-8")
    click.echo(f"Report written to {path}")


def _handler() -> ReportsHandler:
    return ReportsHandler(item_repository(), movement_repository())


@click.command("low-stock")
@click.option("--category", default=None)
@click.option("--csv", "csv_path", default=None, type=click.Path(dir_okay=False),
              help="Write the report as CSV instead of printing it.")
def report_low_stock(category, csv_path) -> None:
    """Items at or below their minimum stock."""
    handler = _handler()
    if csv_path:
        _write_csv(csv_path, handler.low_stock_csv(category))
        return

    items = handler.low_stock(category)
    if not items:
        click.echo("No items below minimum stock.")
        return
    click.echo(f"{'Code':<10} {'Description':<30} {'Qty':>10} {'Min':>10}  Location")
    click.echo("-" * 72)
    for item in items:
        click.echo(
            f"{item.code:<10} {item.description[:30]:<30} {item.quantity:>10} "
            f"{item.min_quantity:>10}  {item.location}"
        )


@click.command("movements")
@click.option("--start", type=_DATE, default=None, help="First day (YYYY-MM-DD); default start of month.")
@click.option("--end", type=_DATE, default=None, help="Last day (YYYY-MM-DD); default today.")
@click.option("--category", default=None)
@click.option("--csv", "csv_path", default=None, type=click.Path(dir_okay=False))
def report_movements(start, end, category, csv_path) -> None:
    """Entries and exits in a period, newest first."""
    handler = _handler()
    try:
        lines = handler.movements(_day(start), _day(end), category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if csv_path:
        _write_csv(csv_path, movement_csv(lines))
        return
    if not lines:
        click.echo("No movements in the period.")
        return
    click.echo(f"{'Date':<12} {'Code':<16} {'Type':<6} {'Quantity':>10}  Description")
    click.echo("-" * 72)
    for m in lines:
        click.echo(f"{m.date:<12} {m.item_code:<16} {m.type:<6} {m.quantity:>10}  {m.item_description}")


@click.command("value-by-location")
@click.option("--category", default=None)
@click.option("--csv", "csv_path", default=None, type=click.Path(dir_okay=False))
def report_value_by_location(category, csv_path) -> None:
    """Stock value per storage location."""
    handler = _handler()
    if csv_path:
        _write_csv(csv_path, handler.value_by_location_csv(category))
        return

    values = handler.value_by_location(category)
    if not values:
        click.echo("No items.")
        return
    for location, value in values.items():
        click.echo(f"{location:<12} {value:>16}")


@click.command("dashboard")
@click.option("--start", type=_DATE, default=None)
@click.option("--end", type=_DATE, default=None)
@click.option("--category", default=None)
def report_dashboard(start, end, category) -> None:
    """Headline figures for a period."""
    try:
        summary = _handler().dashboard(_day(start), _day(end), category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Total stock value:  {summary.total_value}")
    click.echo(f"Low-stock items:    {summary.low_stock_count}")
    click.echo(f"Units in stock:     {summary.total_units}")
    click.echo(f"Entries in period:  {summary.entries}")
    click.echo(f"Exits in period:    {summary.exits}")
    if summary.units_by_category:
        click.echo()
        click.echo("Units by category:")
        for category_name, units in summary.units_by_category.items():
            click.echo(f"  {category_name:<20} {units:>10}")
