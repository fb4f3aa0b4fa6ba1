from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Payslip:
    payslip_id: str
    employee_id: str
    month: str
    pdf_link: str
    store_id: str
