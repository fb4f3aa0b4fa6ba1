from __future__ import annotations

from datetime import datetime

import pytest

from src.payslip_portal.payslip_portal.core.enums import Role
from src.payslip_portal.payslip_portal.core.exceptions import AuthorizationError, PersistenceError, ValidationError
from src.payslip_portal.payslip_portal.payslips.service import PayslipService

LINK = "https://drive.google.com/file/d/xyz/view"


def test_add_payslip_formats_month(portal, document_store, fixed_now):
    payslip = PayslipService(portal).add_payslip(
        current_role=Role.ADMIN,
        store_id="riomar",
        employee_id="1002",
        month="2023-05",
        pdf_link=LINK,
        now=fixed_now,
    )

    assert payslip.month == "Maio/2023"
    assert payslip.store_id == "riomar"
    assert payslip.payslip_id == str(int(fixed_now.timestamp() * 1000))
    assert document_store.puts[-1]["payslips"][-1]["month"] == "Maio/2023"


def test_add_payslip_ids_stay_unique_within_same_millisecond(portal, fixed_now):
    svc = PayslipService(portal)
    kwargs = dict(current_role=Role.ADMIN, store_id="riomar", employee_id="1002", month="2024-01", pdf_link=LINK, now=fixed_now)

    first = svc.add_payslip(**kwargs)
    second = svc.add_payslip(**kwargs)

    assert first.payslip_id != second.payslip_id


def test_add_payslip_rejects_foreign_link(portal, document_store):
    with pytest.raises(ValidationError):
        PayslipService(portal).add_payslip(
            current_role=Role.ADMIN,
            store_id="riomar",
            employee_id="1002",
            month="2023-05",
            pdf_link="https://example.com/holerite.pdf",
        )
    assert document_store.puts == []


def test_approved_domain_is_configurable(portal):
    svc = PayslipService(portal, approved_domain="sharepoint.com")

    payslip = svc.add_payslip(
        current_role=Role.ADMIN,
        store_id="riomar",
        employee_id="1002",
        month="2023-12",
        pdf_link="https://corp.sharepoint.com/x.pdf",
        now=datetime(2024, 1, 1),
    )

    assert payslip.month == "Dezembro/2023"


@pytest.mark.parametrize("field", ["store_id", "employee_id", "month", "pdf_link"])
def test_add_payslip_requires_every_field(portal, field):
    kwargs = {"store_id": "riomar", "employee_id": "1002", "month": "2023-05", "pdf_link": LINK}
    kwargs[field] = ""

    with pytest.raises(ValidationError):
        PayslipService(portal).add_payslip(current_role=Role.ADMIN, **kwargs)


def test_add_payslip_for_unknown_employee_is_rejected(portal):
    with pytest.raises(ValidationError):
        PayslipService(portal).add_payslip(
            current_role=Role.ADMIN, store_id="riomar", employee_id="nope", month="2023-05", pdf_link=LINK
        )


def test_add_payslip_store_must_match_employee(portal):
    with pytest.raises(ValidationError):
        PayslipService(portal).add_payslip(
            current_role=Role.ADMIN, store_id="patteo", employee_id="1002", month="2023-05", pdf_link=LINK
        )


def test_delete_payslip_touches_nothing_else(portal):
    before = portal.snapshot

    PayslipService(portal).delete_payslip(current_role=Role.ADMIN, payslip_id="2")

    after = portal.snapshot
    assert [p.payslip_id for p in after.payslips] == ["1", "3"]
    assert after.employees == before.employees


def test_delete_payslip_requires_admin(portal):
    with pytest.raises(AuthorizationError):
        PayslipService(portal).delete_payslip(current_role=Role.EMPLOYEE, payslip_id="2")


def test_delete_payslip_failed_save_keeps_it(portal, document_store):
    document_store.fail_replace = True

    with pytest.raises(PersistenceError):
        PayslipService(portal).delete_payslip(current_role=Role.ADMIN, payslip_id="2")

    assert portal.snapshot.find_payslip("2") is not None


def test_admin_view_filters_by_store_and_resolves_names(portal):
    rows = PayslipService(portal).list_admin_view(store_id="patteo")

    assert rows == [
        {
            "id": "2",
            "employeeId": "2001",
            "employeeName": "Carla",
            "storeId": "patteo",
            "storeName": "Patteo",
            "month": "Janeiro/2024",
            "pdfLink": "https://drive.google.com/file/d/b",
        }
    ]


def test_employee_sees_only_own_payslips_with_month_filter(portal):
    svc = PayslipService(portal)

    assert [p["id"] for p in svc.list_for_employee(employee_id="1001")] == ["1", "3"]
    assert [p["id"] for p in svc.list_for_employee(employee_id="1001", month="Fevereiro/2024")] == ["3"]
    assert svc.months_for_employee(employee_id="1001") == ["Janeiro/2024", "Fevereiro/2024"]
    assert svc.list_for_employee(employee_id="1002") == []
