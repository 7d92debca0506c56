"""CLI commands for suppliers."""

from __future__ import annotations

import click

from almox.application.manage_suppliers import (
    AddSupplierHandler,
    DeleteSupplierHandler,
    UpdateSupplierHandler,
)
from almox.domain.exceptions import DomainException
from almox.infrastructure.bootstrap import audit_repository, current_actor, supplier_repository


@click.command("list")
def supplier_list() -> None:
    """List all suppliers."""
    suppliers = supplier_repository().list_all()
    if not suppliers:
        click.echo("No suppliers registered.")
        return
    click.echo(f"{'ID':<4} {'Name':<32} {'Contact':<18} {'E-mail':<28} Phone")
    click.echo("-" * 100)
    for s in suppliers:
        click.echo(f"{s.id:<4} {s.name:<32} {s.contact_person:<18} {s.email:<28} {s.phone}")


@click.command("add")
@click.option("--name", required=True)
@click.option("--contact", required=True, help="Contact person.")
@click.option("--email", required=True)
@click.option("--phone", required=True)
def supplier_add(name: str, contact: str, email: str, phone: str) -> None:
    """Register a supplier."""
    handler = AddSupplierHandler(supplier_repository(), audit_repository())
    try:
        supplier = handler.handle(name, contact, email, phone, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier.name} created (id={supplier.id}).")


@click.command("update")
@click.argument("supplier_id")
@click.option("--name", default=None)
@click.option("--contact", default=None)
@click.option("--email", default=None)
@click.option("--phone", default=None)
def supplier_update(supplier_id: str, name, contact, email, phone) -> None:
    """Edit a supplier."""
    handler = UpdateSupplierHandler(supplier_repository(), audit_repository())
    try:
        supplier = handler.handle(supplier_id, name, contact, email, phone, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier.name} updated.")


@click.command("delete")
@click.argument("supplier_id")
@click.confirmation_option(prompt="Delete this supplier?")
def supplier_delete(supplier_id: str) -> None:
    """Remove a supplier."""
    handler = DeleteSupplierHandler(supplier_repository(), audit_repository())
    try:
        supplier = handler.handle(supplier_id, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Supplier {supplier.name} deleted.")
