from __future__ import annotations

import pytest

from src.payslip_portal.payslip_portal.core.enums import Role
from src.payslip_portal.payslip_portal.core.exceptions import PersistenceError
from src.payslip_portal.payslip_portal.document.reconciler import PortalRepository
from src.payslip_portal.payslip_portal.employees.service import AuthService, EmployeeService
from src.payslip_portal.payslip_portal.stores.service import StoreService


@pytest.fixture
def second_portal(document_store) -> PortalRepository:
    repo = PortalRepository(document_store)
    repo.load()
    return repo


def test_sequential_writes_from_two_processes_are_all_kept(portal, second_portal, document_store):
    EmployeeService(portal).add_employee(
        current_role=Role.ADMIN, name="Eva", employee_id="9999", store_id="patteo", password="pw"
    )
    StoreService(second_portal).add_store(current_role=Role.ADMIN, name="Nova", code="nova")

    record = document_store.body["record"]
    assert "9999" in [e["id"] for e in record["employees"]]
    assert "nova" in [s["id"] for s in record["stores"]]
    assert {s["id"]: s["employeeCount"] for s in record["stores"]}["patteo"] == 2


def test_login_sees_employee_added_elsewhere(portal, second_portal):
    EmployeeService(portal).add_employee(
        current_role=Role.ADMIN, name="Eva", employee_id="9999", store_id="patteo", password="pw"
    )

    assert AuthService(second_portal).authenticate("9999", "pw").name == "Eva"


def test_mutation_while_store_unreachable_writes_nothing(portal, document_store):
    before = portal.snapshot
    document_store.fail_fetch = True

    with pytest.raises(PersistenceError):
        StoreService(portal).add_store(current_role=Role.ADMIN, name="Nova", code="nova")

    assert document_store.puts == []
    assert portal.snapshot == before


def test_login_while_store_unreachable_does_not_reset_document(portal, document_store):
    document_store.fail_fetch = True

    with pytest.raises(PersistenceError):
        AuthService(portal).authenticate("1001", "ana-pw")

    assert document_store.puts == []
