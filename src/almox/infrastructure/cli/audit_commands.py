"""CLI commands for the audit log."""

from __future__ import annotations

import click

from almox.application.audit_log import AuditLogHandler
from almox.infrastructure.bootstrap import audit_repository

_DATE = click.DateTime(formats=["%Y-%m-%d"])


@click.command("list")
@click.option("--start", type=_DATE, default=None, help="First day (YYYY-MM-DD).")
@click.option("--end", type=_DATE, default=None, help="Last day, inclusive (YYYY-MM-DD).")
@click.option("--user", "user_id", default=None, help="Only actions by this user ID.")
@click.option("--search", default=None, help="Match action text or user name.")
@click.option("--page", default=1, type=int)
def audit_list(start, end, user_id, search, page: int) -> None:
    """Show recorded actions, newest first."""
    result = AuditLogHandler(audit_repository()).handle(
        start.date() if start else None,
        end.date() if end else None,
        user_id,
        search,
        page,
    )
    if not result.items:
        click.echo("No log entries found.")
        return
    for entry in result.items:
        stamp = entry.timestamp.strftime("%Y-%m-%d %H:%M:%S")
        click.echo(f"{stamp}  {entry.user_name:<16} {entry.action}")
    click.echo(f"Page {result.page} of {result.total_pages} ({result.total_items} entries)")
