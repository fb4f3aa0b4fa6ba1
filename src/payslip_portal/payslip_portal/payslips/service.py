from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import epoch_millis, format_month_label, now_local
from ..common.validators import require_link_domain, require_non_empty
from ..core.constants import DEFAULT_APPROVED_LINK_DOMAIN
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..document.model import PortalSnapshot
from ..document.reconciler import PortalRepository, persist
from .model import Payslip


class PayslipService:
    """Use cases: file payslip links (admin) and list them (admin/employee)."""

    def __init__(self, portal: PortalRepository, *, approved_domain: str = DEFAULT_APPROVED_LINK_DOMAIN):
        self._portal = portal
        self._approved_domain = approved_domain

    @staticmethod
    def _view(snapshot: PortalSnapshot, p: Payslip) -> dict:
        return {
            "id": p.payslip_id,
            "employeeId": p.employee_id,
            "employeeName": snapshot.employee_name(p.employee_id),
            "storeId": p.store_id,
            "storeName": snapshot.store_name(p.store_id),
            "month": p.month,
            "pdfLink": p.pdf_link,
        }

    @staticmethod
    def _next_id(snapshot: PortalSnapshot, now: datetime) -> str:
        candidate = epoch_millis(now)
        taken = {p.payslip_id for p in snapshot.payslips}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def list_payslips(self, *, store_id: Optional[str] = None) -> list[Payslip]:
        return [p for p in self._portal.snapshot.payslips if not store_id or p.store_id == store_id]

    def list_admin_view(self, *, store_id: Optional[str] = None) -> list[dict]:
        snapshot = self._portal.snapshot
        return [self._view(snapshot, p) for p in self.list_payslips(store_id=store_id)]

    def list_for_employee(self, *, employee_id: str, month: Optional[str] = None) -> list[dict]:
        snapshot = self._portal.snapshot
        return [
            self._view(snapshot, p)
            for p in snapshot.payslips
            if p.employee_id == employee_id and (not month or p.month == month)
        ]

    def months_for_employee(self, *, employee_id: str) -> list[str]:
        """Distinct month labels of an employee's payslips, in first-seen order."""
        months: list[str] = []
        for p in self._portal.snapshot.payslips:
            if p.employee_id == employee_id and p.month not in months:
                months.append(p.month)
        return months

    def add_payslip(
        self,
        *,
        current_role: Role,
        store_id: str,
        employee_id: str,
        month: str,
        pdf_link: str,
        now: Optional[datetime] = None,
    ) -> Payslip:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Você não tem permissão")

        if not store_id or not employee_id or not month or not pdf_link:
            raise ValidationError("Preencha todos os campos")
        pdf_link = require_link_domain(require_non_empty(pdf_link, "Link"), self._approved_domain)
        label = format_month_label(month)

        snapshot = self._portal.load(self_heal=False)
        employee = snapshot.find_employee(employee_id)
        if not employee:
            raise ValidationError("Funcionário não encontrado")
        if not snapshot.find_store(store_id):
            raise ValidationError("Loja não encontrada")
        if employee.store_id != store_id:
            raise ValidationError("Funcionário não pertence à loja selecionada")

        payslip = Payslip(
            payslip_id=self._next_id(snapshot, now or now_local()),
            employee_id=employee_id,
            month=label,
            pdf_link=pdf_link,
            store_id=store_id,
        )
        persist(self._portal, replace(snapshot, payslips=snapshot.payslips + (payslip,)))
        return payslip

    def delete_payslip(self, *, current_role: Role, payslip_id: str) -> None:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Você não tem permissão")

        snapshot = self._portal.load(self_heal=False)
        if not snapshot.find_payslip(payslip_id):
            raise ValidationError("Holerite não encontrado")

        persist(
            self._portal,
            replace(snapshot, payslips=tuple(p for p in snapshot.payslips if p.payslip_id != payslip_id)),
        )
