"""CLI commands for physical inventory counts."""

from __future__ import annotations

import click

from almox.application.count_inventory import CountInventoryHandler
from almox.domain.exceptions import DomainException
from almox.infrastructure.bootstrap import audit_repository, current_actor, item_repository


def _parse_counts(raw: tuple[str, ...]) -> dict[str, str]:
    """Parse ('PAR-001=1480', 'CHP-010=400') into {code: text}."""
    counts: dict[str, str] = {}
    for pair in raw:
        if "=" not in pair:
            raise click.BadParameter(
                f"Invalid count '{pair}'. Expected 'CODE=QUANTITY'."
            )
        code, value = pair.split("=", 1)
        counts[code.strip()] = value
    return counts


@click.command("count")
@click.option("--count", "counts", multiple=True, required=True,
              help="Counted quantity as CODE=QUANTITY; repeat per item.")
@click.option("--category", default=None, help="Scope progress to a category.")
@click.option("--location", default=None, help="Scope progress to a location.")
@click.option("--search", default=None, help="Scope progress to matching items.")
@click.option("--yes", is_flag=True, default=False, help="Commit without asking.")
def inventory_count(counts, category, location, search, yes: bool) -> None:
    """Reconcile counted quantities against the system and adjust stock."""
    handler = CountInventoryHandler(item_repository(), audit_repository())

    try:
        preview = handler.prepare(_parse_counts(counts), category, location, search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Counted {preview.counted_items} of {preview.visible_items} item(s) "
        f"({preview.progress}%)."
    )
    if not preview.divergences:
        handler.cancel()
        click.echo("No divergences; nothing to adjust.")
        return

    click.echo(f"  {'Code':<10} {'System':>10} {'Counted':>10} {'Diff':>10} {'Impact':>12}")
    click.echo(f"  {'-'*56}")
    for d in preview.divergences:
        click.echo(
            f"  {d.code:<10} {d.system_quantity:>10} {d.counted_quantity:>10} "
            f"{d.difference:>10} {d.financial_impact:>12}"
        )
    click.echo(f"  {'-'*56}")
    click.echo(f"  {'Total adjustment':<43} {preview.total_adjustment_value:>12}")

    if not yes and not click.confirm(
        f"Adjust {len(preview.divergences)} item(s)? This cannot be undone."
    ):
        handler.cancel()
        click.echo("Inventory count cancelled; stock unchanged.")
        return

    try:
        updated = handler.confirm(actor=current_actor())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory updated: {len(updated)} item(s) adjusted.")
