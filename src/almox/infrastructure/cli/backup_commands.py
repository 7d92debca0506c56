"""CLI commands for backup and restore."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import click

from almox.application.backup import BackupHandler, backup_filename, parse_snapshot
from almox.domain.exceptions import DomainException
from almox.infrastructure.bootstrap import (
    audit_repository,
    current_actor,
    item_repository,
    movement_repository,
    user_repository,
)


def _handler() -> BackupHandler:
    return BackupHandler(
        item_repo=item_repository(),
        movement_repo=movement_repository(),
        user_repo=user_repository(),
        audit_repo=audit_repository(),
    )


@click.command("create")
@click.option("--output", default=None, type=click.Path(),
              help="File or directory to write to; default alumasa_backup_<date>.json here.")
def backup_create(output) -> None:
    """Write items, users and movement history to a JSON file."""
    snapshot = _handler().create_snapshot(actor=current_actor())

    name = backup_filename(datetime.now(timezone.utc))
    target = Path(output) if output else Path(name)
    if target.is_dir():
        target = target / name
    target.write_text(json.dumps(snapshot, indent=2, ensure_ascii=False), encoding="utf-8")

    click.echo(
        f"Backup written to {target} ({len(snapshot['items'])} items, "
        f"{len(snapshot['users'])} users, {len(snapshot['history'])} movements)."
    )


@click.command("restore")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--yes", is_flag=True, default=False, help="Restore without asking.")
def backup_restore(path: str, yes: bool) -> None:
    """Replace all items, users and movement history with a backup."""
    if not yes and not click.confirm(
        "Restoring overwrites all current data. This cannot be undone. Continue?"
    ):
        click.echo("Restore cancelled.")
        return

    try:
        data = parse_snapshot(Path(path).read_text(encoding="utf-8-sig"))
        result = _handler().restore_snapshot(data, actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Restored {result.items} items, {result.users} users and "
        f"{result.history} movements (backup of {result.backup_date})."
    )
