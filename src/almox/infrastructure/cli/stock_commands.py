"""CLI commands for stock entries and exits."""

from __future__ import annotations

import click

from almox.application.record_movement import RecordEntryHandler, RecordExitHandler
from almox.domain.exceptions import DomainException
from almox.infrastructure.bootstrap import (
    audit_repository,
    current_actor,
    item_repository,
    movement_repository,
    supplier_repository,
)


def _handler_args() -> dict:
    return {
        "item_repo": item_repository(),
        "movement_repo": movement_repository(),
        "supplier_repo": supplier_repository(),
        "audit_repo": audit_repository(),
    }


@click.command("entry")
@click.option("--code", required=True, help="Exact item code.")
@click.option("--quantity", required=True, help="Quantity received (> 0).")
@click.option("--supplier", default=None, help="Supplier ID.")
@click.option("--invoice", default=None, help="Invoice number.")
@click.option("--notes", default=None)
def stock_entry(code: str, quantity: str, supplier, invoice, notes) -> None:
    """Register goods received into stock."""
    handler = RecordEntryHandler(**_handler_args())
    try:
        movement, item = handler.handle(
            code, quantity, supplier, invoice, notes, actor=current_actor()
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Entry {movement.id} registered on {movement.date}: "
               f"+{movement.quantity} {item.unit} of {item.code}.")
    click.echo(f"Stock now {item.quantity} {item.unit} ({item.total_value}).")


@click.command("exit")
@click.option("--item", "item_ref", required=True, help="Item code or ID.")
@click.option("--quantity", required=True, help="Quantity issued (> 0).")
@click.option("--requester", required=True, help="Who asked for the material.")
@click.option("--responsible", required=True, help="Who handed it out.")
def stock_exit(item_ref: str, quantity: str, requester: str, responsible: str) -> None:
    """Register material issued from stock."""
    handler = RecordExitHandler(**_handler_args())
    try:
        movement, item = handler.handle(
            item_ref, quantity, requester, responsible, actor=current_actor()
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Exit {movement.id} registered on {movement.date}: "
               f"-{movement.quantity} {item.unit} of {item.code}.")
    click.echo(f"Stock now {item.quantity} {item.unit} ({item.total_value}).")
    if item.is_low_stock:
        click.echo(f"Warning: {item.code} is at or below its minimum ({item.min_quantity}).")
