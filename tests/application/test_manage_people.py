"""Tests for supplier and user management."""

import pytest

from almox.application.manage_suppliers import (
    AddSupplierHandler,
    DeleteSupplierHandler,
    UpdateSupplierHandler,
)
from almox.application.manage_users import (
    AddUserHandler,
    DeleteUserHandler,
    UpdateUserHandler,
    parse_role,
    resolve_actor,
)
from almox.domain.exceptions import NotFoundError, ValidationError
from almox.domain.model.user import Role, User
from tests.fakes import FakeAuditRepository, FakeSupplierRepository, FakeUserRepository

ADMIN = User("1", "Admin", "admin@alumasa.com", Role.ADMIN)


class TestSuppliers:

    def test_add(self):
        repo, audit_repo = FakeSupplierRepository(), FakeAuditRepository()
        supplier = AddSupplierHandler(repo, audit_repo).handle(
            " Aço Forte ", "Carlos", "c@af.com", "(11) 9999", actor=ADMIN
        )
        assert supplier.id == "1"
        assert supplier.name == "Aço Forte"
        assert audit_repo.list_all()[0].action == "Created supplier Aço Forte."

    def test_all_fields_required(self):
        with pytest.raises(ValidationError, match="Contact person, Phone"):
            AddSupplierHandler(FakeSupplierRepository()).handle("X", "", "x@x.com", " ")

    def test_update_keeps_unspecified_fields(self):
        repo = FakeSupplierRepository()
        AddSupplierHandler(repo).handle("Aço Forte", "Carlos", "c@af.com", "(11) 9999")
        supplier = UpdateSupplierHandler(repo).handle("1", phone="(11) 1111")
        assert supplier.phone == "(11) 1111"
        assert supplier.contact_person == "Carlos"

    def test_delete_unknown(self):
        with pytest.raises(NotFoundError):
            DeleteSupplierHandler(FakeSupplierRepository()).handle("9")


class TestUsers:

    def test_add_defaults_to_operator(self):
        user = AddUserHandler(FakeUserRepository()).handle("Maria", "m@alumasa.com")
        assert user.role is Role.OPERATOR

    def test_name_and_email_required(self):
        with pytest.raises(ValidationError, match="Name and e-mail are required"):
            AddUserHandler(FakeUserRepository()).handle("Maria", " ")

    def test_update_role(self):
        repo = FakeUserRepository([User("2", "Operador", "op@alumasa.com")])
        user = UpdateUserHandler(repo).handle("2", role="admin")
        assert user.is_admin

    def test_delete_audited(self):
        repo, audit_repo = FakeUserRepository([ADMIN, User("2", "Op", "o@x.com")]), FakeAuditRepository()
        DeleteUserHandler(repo, audit_repo).handle("2", actor=ADMIN)
        assert repo.get_by_id("2") is None
        assert audit_repo.list_all()[0].action == "Deleted user Op."

    def test_parse_role(self):
        assert parse_role(" ADMIN ") is Role.ADMIN
        assert parse_role(None) is Role.OPERATOR
        with pytest.raises(ValidationError, match="Unknown role"):
            parse_role("root")

    def test_resolve_actor_unknown(self, caplog):
        assert resolve_actor(FakeUserRepository(), "42") is None
        assert "not found" in caplog.text

    def test_resolve_actor(self):
        assert resolve_actor(FakeUserRepository([ADMIN]), "1") is ADMIN
