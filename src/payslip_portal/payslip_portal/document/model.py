from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.constants import UNKNOWN_EMPLOYEE_NAME, UNKNOWN_STORE_NAME
from ..employees.model import Employee
from ..payslips.model import Payslip
from ..stores.model import Store


@dataclass(frozen=True)
class PortalSnapshot:
    """The three collections of the shared document, as one immutable value."""

    stores: tuple[Store, ...] = ()
    employees: tuple[Employee, ...] = ()
    payslips: tuple[Payslip, ...] = ()

    def find_store(self, store_id: str) -> Optional[Store]:
        return next((s for s in self.stores if s.store_id == store_id), None)

    def find_employee(self, employee_id: str) -> Optional[Employee]:
        return next((e for e in self.employees if e.employee_id == employee_id), None)

    def find_payslip(self, payslip_id: str) -> Optional[Payslip]:
        return next((p for p in self.payslips if p.payslip_id == payslip_id), None)

    def store_name(self, store_id: str) -> str:
        store = self.find_store(store_id)
        return store.name if store else UNKNOWN_STORE_NAME

    def employee_name(self, employee_id: str) -> str:
        employee = self.find_employee(employee_id)
        return employee.name if employee else UNKNOWN_EMPLOYEE_NAME
