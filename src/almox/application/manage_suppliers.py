"""Application services: supplier management use cases."""

from __future__ import annotations

from almox.domain.exceptions import NotFoundError
from almox.domain.model.supplier import Supplier
from almox.domain.model.user import User
from almox.domain.repository.audit_repository import AuditRepository
from almox.domain.repository.supplier_repository import SupplierRepository
from almox.domain.service.audit_trail import AuditTrail


class _SupplierHandler:

    def __init__(
        self,
        supplier_repo: SupplierRepository,
        audit_repo: AuditRepository | None = None,
    ) -> None:
        self._supplier_repo = supplier_repo
        self._audit = AuditTrail(audit_repo) if audit_repo is not None else None

    def _require(self, supplier_id: str) -> Supplier:
        supplier = self._supplier_repo.get_by_id(supplier_id)
        if supplier is None:
            raise NotFoundError(f"Supplier with ID '{supplier_id}' not found")
        return supplier

    def _record(self, action: str, actor: User | None) -> None:
        if self._audit is not None:
            self._audit.record(action, actor)


class AddSupplierHandler(_SupplierHandler):

    def handle(
        self,
        name: str,
        contact_person: str,
        email: str,
        phone: str,
        actor: User | None = None,
    ) -> Supplier:
        supplier = Supplier.create(
            self._supplier_repo.next_id(), name, contact_person, email, phone
        )
        self._supplier_repo.save(supplier)
        self._record(f"Created supplier {supplier.name}.", actor)
        return supplier


class UpdateSupplierHandler(_SupplierHandler):

    def handle(
        self,
        supplier_id: str,
        name: str | None = None,
        contact_person: str | None = None,
        email: str | None = None,
        phone: str | None = None,
        actor: User | None = None,
    ) -> Supplier:
        """Change the given fields; ``None`` leaves a field as is."""
        current = self._require(supplier_id)
        supplier = Supplier.create(
            current.id,
            name if name is not None else current.name,
            contact_person if contact_person is not None else current.contact_person,
            email if email is not None else current.email,
            phone if phone is not None else current.phone,
        )
        self._supplier_repo.save(supplier)
        self._record(f"Edited supplier {supplier.name}.", actor)
        return supplier


class DeleteSupplierHandler(_SupplierHandler):

    def handle(self, supplier_id: str, actor: User | None = None) -> Supplier:
        supplier = self._require(supplier_id)
        self._supplier_repo.delete(supplier.id)
        self._record(f"Deleted supplier {supplier.name}.", actor)
        return supplier
