"""CLI commands for users."""

from __future__ import annotations

import click

from almox.application.manage_users import AddUserHandler, DeleteUserHandler, UpdateUserHandler
from almox.domain.exceptions import DomainException
from almox.infrastructure.bootstrap import audit_repository, current_actor, user_repository

_ROLES = click.Choice(["Admin", "Operator"], case_sensitive=False)


@click.command("list")
def user_list() -> None:
    """List all users."""
    users = user_repository().list_all()
    if not users:
        click.echo("No users registered.")
        return
    click.echo(f"{'ID':<4} {'Name':<24} {'E-mail':<30} Role")
    click.echo("-" * 70)
    for u in users:
        click.echo(f"{u.id:<4} {u.name:<24} {u.email:<30} {u.role.value}")


@click.command("add")
@click.option("--name", required=True)
@click.option("--email", required=True)
@click.option("--role", type=_ROLES, default="Operator", show_default=True)
def user_add(name: str, email: str, role: str) -> None:
    """Register a user."""
    handler = AddUserHandler(user_repository(), audit_repository())
    try:
        user = handler.handle(name, email, role, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.name} created (id={user.id}, {user.role.value}).")


@click.command("update")
@click.argument("user_id")
@click.option("--name", default=None)
@click.option("--email", default=None)
@click.option("--role", type=_ROLES, default=None)
def user_update(user_id: str, name, email, role) -> None:
    """Edit a user."""
    handler = UpdateUserHandler(user_repository(), audit_repository())
    try:
        user = handler.handle(user_id, name, email, role, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.name} updated.")


@click.command("delete")
@click.argument("user_id")
@click.confirmation_option(prompt="Delete this user?")
def user_delete(user_id: str) -> None:
    """Remove a user."""
    handler = DeleteUserHandler(user_repository(), audit_repository())
    try:
        user = handler.handle(user_id, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.name} deleted.")
