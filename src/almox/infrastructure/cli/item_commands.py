"""CLI commands for the item catalog."""

from __future__ import annotations

from pathlib import Path

import click

from almox.application.manage_items import AddItemHandler, DeleteItemHandler, UpdateItemHandler
from almox.application.pagination import page_numbers
from almox.application.reports import item_history_csv
from almox.application.stock_queries import STATUS_LOW, STATUS_OK, ItemHistoryHandler, StockListHandler
from almox.domain.exceptions import DomainException
from almox.domain.model.item import ItemChanges, ItemDraft
from almox.infrastructure.bootstrap import (
    audit_repository,
    current_actor,
    item_repository,
    movement_repository,
)
from almox.infrastructure.config import settings


def _format_pages(current: int, total: int) -> str:
    return " ".join(
        f"[{n}]" if n == current else str(n) for n in page_numbers(current, total)
    )


@click.command("list")
@click.option("--category", default=None, help="Only items in this category.")
@click.option("--location", default=None, help="Only items stored at this location.")
@click.option("--status", type=click.Choice([STATUS_LOW, STATUS_OK]), default=None,
              help="low = at or below minimum.")
@click.option("--search", default=None, help="Match code or description.")
@click.option("--page", default=1, type=int, help="Page number.")
def item_list(category, location, status, search, page: int) -> None:
    """List items with stock and valuation."""
    handler = StockListHandler(item_repo=item_repository())
    try:
        result = handler.handle(category, location, status, search, page, settings.PAGE_SIZE)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not result.page.items:
        click.echo("No items found.")
        return

    click.echo(
        f"{'Code':<10} {'Description':<30} {'Qty':>10} {'Unit':<5} {'Min':>8} "
        f"{'Unit value':>12} {'Total':>14}"
    )
    click.echo("-" * 95)
    for line in result.page.items:
        flag = "  LOW" if line.is_low_stock else ""
        click.echo(
            f"{line.code:<10} {line.description[:30]:<30} {line.quantity:>10} {line.unit:<5} "
            f"{line.min_quantity:>8} {line.unit_value:>12} {line.total_value:>14}{flag}"
        )
    click.echo("-" * 95)
    click.echo(f"Total value of listed items: {result.total_value}")
    if result.page.total_pages > 1:
        click.echo(f"Page: {_format_pages(result.page.page, result.page.total_pages)}")
    if result.low_stock_count:
        click.echo(f"Warning: {result.low_stock_count} item(s) at or below minimum stock.")


@click.command("show")
@click.argument("code")
def item_show(code: str) -> None:
    """Show an item and its movement history."""
    handler = ItemHistoryHandler(item_repository(), movement_repository())
    try:
        item, history = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{item.code} - {item.description}")
    click.echo(f"Category: {item.category}   Location: {item.location}   Unit: {item.unit}")
    click.echo(f"Stock:    {item.quantity} (minimum {item.min_quantity})"
               + ("  LOW STOCK" if item.is_low_stock else ""))
    click.echo(f"Value:    {item.unit_value} each, {item.total_value} total")
    click.echo()
    if not history:
        click.echo("No movements recorded.")
        return
    click.echo(f"  {'Date':<12} {'Type':<6} {'Quantity':>10}")
    click.echo(f"  {'-'*30}")
    for line in history:
        click.echo(f"  {line.date:<12} {line.type:<6} {line.quantity:>10}")


@click.command("history")
@click.argument("code")
@click.option("--csv", "csv_path", required=True, type=click.Path(dir_okay=False),
              help="File to write the CSV export to.")
def item_history(code: str, csv_path: str) -> None:
    """Export an item's movement history as CSV."""
    handler = ItemHistoryHandler(item_repository(), movement_repository())
    try:
        item, history = handler.handle(code)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not history:
        raise click.ClickException(f"No movements recorded for {item.code}")
    Path(csv_path).write_text(item_history_csv(history), encoding="utf-8")
    click.echo(f"{len(history)} movement(s) of {item.code} written to {csv_path}")


@click.command("add")
@click.option("--code", required=True, help="Unique item code, e.g. PAR-001.")
@click.option("--description", required=True)
@click.option("--category", required=True)
@click.option("--location", required=True)
@click.option("--unit", required=True, help="Unit of measure, e.g. UN, KG, M.")
@click.option("--quantity", required=True, help="Initial quantity in stock.")
@click.option("--min", "min_quantity", default=None, help="Minimum stock threshold.")
@click.option("--unit-value", default=None, help="Average unit value (e.g. 0.75).")
@click.option("--lead-time", default=None, type=int, help="Supplier lead time in days.")
@click.option("--supplier", default=None, help="Preferred supplier ID.")
def item_add(code, description, category, location, unit, quantity,
             min_quantity, unit_value, lead_time, supplier) -> None:
    """Register a new item in the catalog."""
    draft = ItemDraft(
        code=code,
        description=description,
        category=category,
        location=location,
        unit=unit,
        stock_quantity=quantity,
        min_quantity=min_quantity,
        avg_unit_value=unit_value,
        lead_time_days=lead_time,
        preferred_supplier_id=supplier,
    )
    handler = AddItemHandler(item_repository(), audit_repository())
    try:
        item = handler.handle(draft, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item.code} created (id={item.id}, stock {item.quantity} {item.unit}).")


@click.command("update")
@click.argument("code")
@click.option("--description", default=None)
@click.option("--category", default=None)
@click.option("--location", default=None)
@click.option("--unit", default=None)
@click.option("--min", "min_quantity", default=None, help="Minimum stock threshold.")
@click.option("--unit-value", default=None, help="Average unit value.")
@click.option("--lead-time", default=None, type=int)
@click.option("--supplier", default=None, help="Preferred supplier ID ('' clears it).")
def item_update(code, description, category, location, unit,
                min_quantity, unit_value, lead_time, supplier) -> None:
    """Edit an item.  Quantities change only through entries, exits and counts."""
    changes = ItemChanges(
        description=description,
        category=category,
        location=location,
        unit=unit,
        min_quantity=min_quantity,
        avg_unit_value=unit_value,
        lead_time_days=lead_time,
        preferred_supplier_id=supplier,
    )
    handler = UpdateItemHandler(item_repository(), audit_repository())
    try:
        item = handler.handle(code, changes, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item.code} updated (total value {item.total_value}).")


@click.command("delete")
@click.argument("code")
@click.confirmation_option(prompt="Delete this item? Its movement history is kept.")
def item_delete(code: str) -> None:
    """Remove an item from the catalog."""
    handler = DeleteItemHandler(item_repository(), audit_repository())
    try:
        item = handler.handle(code, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Item {item.code} deleted.")
