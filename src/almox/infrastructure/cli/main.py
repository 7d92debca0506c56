import click

from almox.domain.exceptions import DomainException
from almox.infrastructure.bootstrap import (
    item_repository,
    movement_repository,
    supplier_repository,
    user_repository,
)
from almox.infrastructure.cli.audit_commands import audit_list
from almox.infrastructure.cli.backup_commands import backup_create, backup_restore
from almox.infrastructure.cli.inventory_commands import inventory_count
from almox.infrastructure.cli.item_commands import (
    item_add,
    item_delete,
    item_history,
    item_list,
    item_show,
    item_update,
)
from almox.infrastructure.cli.report_commands import (
    report_dashboard,
    report_low_stock,
    report_movements,
    report_value_by_location,
)
from almox.infrastructure.cli.stock_commands import stock_entry, stock_exit
from almox.infrastructure.cli.supplier_commands import (
    supplier_add,
    supplier_delete,
    supplier_list,
    supplier_update,
)
from almox.infrastructure.cli.user_commands import user_add, user_delete, user_list, user_update
from almox.infrastructure.logging_config import configure_logging
from almox.infrastructure.seed import seed as load_demo_data


@click.group()
@click.option("--log-level", default=None, help="Override ALMOX_LOG_LEVEL (e.g. INFO).")
def cli(log_level) -> None:
    """Alumasa — warehouse stock control"""
    configure_logging(log_level)


@cli.group()
def item() -> None:
    """Manage the item catalog."""


@cli.group()
def stock() -> None:
    """Register stock entries and exits."""


@cli.group()
def inventory() -> None:
    """Reconcile physical counts."""


@cli.group()
def report() -> None:
    """Reports and exports."""


@cli.group()
def supplier() -> None:
    """Manage suppliers."""


@cli.group()
def user() -> None:
    """Manage users."""


@cli.group()
def audit() -> None:
    """Browse the audit log."""


@cli.group()
def backup() -> None:
    """Back up and restore data."""


@cli.command("seed")
@click.option("--force", is_flag=True, default=False, help="Overwrite existing data.")
def seed(force: bool) -> None:
    """Load the demo catalog, suppliers, users and movements."""
    try:
        load_demo_data(
            item_repository(),
            movement_repository(),
            supplier_repository(),
            user_repository(),
            force=force,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))
    click.echo("Demo data loaded.")


# Register subcommands
item.add_command(item_add)
item.add_command(item_delete)
item.add_command(item_history)
item.add_command(item_list)
item.add_command(item_show)
item.add_command(item_update)
stock.add_command(stock_entry)
stock.add_command(stock_exit)
inventory.add_command(inventory_count)
report.add_command(report_dashboard)
report.add_command(report_low_stock)
report.add_command(report_movements)
report.add_command(report_value_by_location)
supplier.add_command(supplier_add)
supplier.add_command(supplier_delete)
supplier.add_command(supplier_list)
supplier.add_command(supplier_update)
user.add_command(user_add)
user.add_command(user_delete)
user.add_command(user_list)
user.add_command(user_update)
audit.add_command(audit_list)
backup.add_command(backup_create)
backup.add_command(backup_restore)
