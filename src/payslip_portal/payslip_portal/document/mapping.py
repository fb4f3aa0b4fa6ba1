"""Conversion between domain entities and the camelCase wire document."""

from __future__ import annotations

from typing import Any, Iterable

from ..employees.model import Employee
from ..payslips.model import Payslip
from ..stores.model import Store
from .model import PortalSnapshot


def store_from_record(row: dict[str, Any]) -> Store:
    return Store(
        store_id=str(row["id"]),
        name=str(row["name"]),
        employee_count=int(row.get("employeeCount") or 0),
    )


def store_to_record(store: Store) -> dict[str, Any]:
    return {"id": store.store_id, "name": store.name, "employeeCount": store.employee_count}


def employee_from_record(row: dict[str, Any]) -> Employee:
    return Employee(
        employee_id=str(row["id"]),
        name=str(row["name"]),
        password=str(row.get("password") or ""),
        is_admin=bool(row.get("isAdmin", False)),
        store_id=str(row.get("storeId") or ""),
    )


def employee_to_record(employee: Employee) -> dict[str, Any]:
    return {
        "id": employee.employee_id,
        "name": employee.name,
        "password": employee.password,
        "isAdmin": employee.is_admin,
        "storeId": employee.store_id,
    }


def payslip_from_record(row: dict[str, Any]) -> Payslip:
    return Payslip(
        payslip_id=str(row["id"]),
        employee_id=str(row["employeeId"]),
        month=str(row["month"]),
        pdf_link=str(row["pdfLink"]),
        store_id=str(row.get("storeId") or ""),
    )


def payslip_to_record(payslip: Payslip) -> dict[str, Any]:
    return {
        "id": payslip.payslip_id,
        "employeeId": payslip.employee_id,
        "month": payslip.month,
        "pdfLink": payslip.pdf_link,
        "storeId": payslip.store_id,
    }


def has_minimum_shape(record: Any) -> bool:
    """A usable record carries at least ``stores`` and ``employees`` lists."""
    if not isinstance(record, dict):
        return False
    return isinstance(record.get("stores"), list) and isinstance(record.get("employees"), list)


def snapshot_from_record(record: dict[str, Any]) -> PortalSnapshot:
    """Build a snapshot from ``response["record"]``.

    Raises KeyError/TypeError/ValueError on malformed rows.
    """
    return PortalSnapshot(
        stores=tuple(store_from_record(r) for r in record["stores"]),
        employees=tuple(employee_from_record(r) for r in record["employees"]),
        payslips=tuple(payslip_from_record(r) for r in (record.get("payslips") or [])),
    )


def snapshot_to_document(
    stores: Iterable[Store],
    employees: Iterable[Employee],
    payslips: Iterable[Payslip],
) -> dict[str, Any]:
    return {
        "stores": [store_to_record(s) for s in stores],
        "employees": [employee_to_record(e) for e in employees],
        "payslips": [payslip_to_record(p) for p in payslips],
    }
