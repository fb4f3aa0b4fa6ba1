from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import Role


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Note: ``employee_id`` doubles as the login username. ``store_id`` is empty
    for the administrator.
    """

    employee_id: str
    name: str
    password: str
    is_admin: bool = False
    store_id: str = ""

    @property
    def role(self) -> Role:
        return Role.ADMIN if self.is_admin else Role.EMPLOYEE
