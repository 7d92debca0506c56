"""Demo data for a fresh installation.

Five items, three suppliers, two users and twelve movements spread over
the current and the two previous months.
"""

from __future__ import annotations

import logging
from datetime import date
from decimal import Decimal

from almox.domain.exceptions import ValidationError
from almox.domain.model.item import Item
from almox.domain.model.movement import Direction, MovementRecord
from almox.domain.model.supplier import Supplier
from almox.domain.model.user import Role, User
from almox.domain.model.value_objects import Money
from almox.domain.repository.item_repository import ItemRepository
from almox.domain.repository.movement_repository import MovementRepository
from almox.domain.repository.supplier_repository import SupplierRepository
from almox.domain.repository.user_repository import UserRepository

logger = logging.getLogger(__name__)


def _item(id, code, description, category, location, unit, qty, min_qty, lead, value, supplier):
    return Item(
        id=id,
        code=code,
        description=description,
        category=category,
        location=location,
        unit=unit,
        stock_quantity=Decimal(qty),
        min_quantity=Decimal(min_qty),
        avg_unit_value=Money.of(value),
        lead_time_days=lead,
        preferred_supplier_id=supplier,
    )


def demo_items() -> list[Item]:
    return [
        _item("1", "PAR-001", "Parafuso Sextavado M8", "Fixadores", "A1-01", "UN", 1500, 500, 5, "0.75", "2"),
        _item("2", "CHP-010", 'Chapa de Aço 1/4"', "Matéria-prima", "B2-05", "KG", 450, 1000, 15, "8.50", "1"),
        _item("3", "TUB-304", 'Tubo Inox 2"', "Matéria-prima", "B2-06", "M", 120, 50, 10, "45.20", "1"),
        _item("4", "EPI-002", "Luva de Proteção", "EPI", "C3-12", "PAR", 80, 100, 7, "12.00", "3"),
        _item("5", "SOL-005", "Eletrodo para Solda", "Consumíveis", "A1-02", "KG", 25, 20, 3, "35.00", "3"),
    ]


def demo_suppliers() -> list[Supplier]:
    return [
        Supplier("1", "Fornecedor Aço Forte", "Carlos Silva", "contato@acoforte.com", "(11) 98765-4321"),
        Supplier("2", "Parafusos & Cia", "Ana Pereira", "vendas@parafusoscia.com.br", "(47) 3333-2222"),
        Supplier("3", "Global Suprimentos Industriais", "Mariana Costa", "global@suprimentos.com", "(21) 1234-5678"),
    ]


def demo_users() -> list[User]:
    return [
        User("1", "Admin", "admin@alumasa.com", Role.ADMIN),
        User("2", "Operador", "op@alumasa.com", Role.OPERATOR),
    ]


def _months_back(today: date, months: int, day: int) -> date:
    month_index = today.year * 12 + today.month - 1 - months
    year, month = divmod(month_index, 12)
    if months == 0:
        day = min(day, today.day)
    return date(year, month + 1, day)


def demo_history(today: date) -> list[MovementRecord]:
    entry, exit_ = Direction.ENTRY, Direction.EXIT
    rows = [
        ("h1", "1", entry, 1000, 2, 5, "2"),
        ("h2", "2", entry, 500, 2, 10, "1"),
        ("h3", "1", exit_, 200, 2, 15, None),
        ("h4", "4", exit_, 50, 2, 20, None),
        ("h5", "3", entry, 80, 1, 3, "1"),
        ("h6", "5", entry, 30, 1, 8, "3"),
        ("h7", "2", exit_, 150, 1, 18, None),
        ("h8", "1", exit_, 300, 1, 25, None),
        ("h9", "4", entry, 120, 0, 2, "3"),
        ("h10", "1", entry, 500, 0, 5, "2"),
        ("h11", "3", exit_, 40, 0, 8, None),
        ("h12", "5", exit_, 10, 0, 10, None),
    ]
    return [
        MovementRecord(
            id=record_id,
            item_id=item_id,
            direction=direction,
            quantity=Decimal(qty),
            date=_months_back(today, months, day),
            supplier_id=supplier,
        )
        for record_id, item_id, direction, qty, months, day, supplier in rows
    ]


def seed(
    item_repo: ItemRepository,
    movement_repo: MovementRepository,
    supplier_repo: SupplierRepository,
    user_repo: UserRepository,
    today: date | None = None,
    force: bool = False,
) -> None:
    """Load the demo data.  Refuses to overwrite a non-empty catalog unless *force*."""
    if item_repo.list_all() and not force:
        raise ValidationError("Catalog is not empty; use --force to overwrite it")

    item_repo.replace_all(demo_items())
    movement_repo.replace_all(demo_history(today or date.today()))
    user_repo.replace_all(demo_users())
    for supplier in supplier_repo.list_all():
        supplier_repo.delete(supplier.id)
    for supplier in demo_suppliers():
        supplier_repo.save(supplier)
    logger.info("Seeded demo data")
