from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from ..common.validators import require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthenticationError, AuthorizationError, ValidationError
from ..document.reconciler import PortalRepository, persist
from .credentials import CredentialScheme, PlaintextCredentials
from .model import Employee


@dataclass(frozen=True)
class SessionEmployee:
    """What we store into the Flask session after login."""

    employee_id: str
    name: str
    role: Role
    store_id: str


class AuthService:
    """Use cases: login and self-service password change."""

    def __init__(self, portal: PortalRepository, credentials: Optional[CredentialScheme] = None):
        self._portal = portal
        self._credentials = credentials or PlaintextCredentials()

    def authenticate(self, employee_id: str, password: str) -> SessionEmployee:
        employee_id = (employee_id or "").strip()
        if not employee_id or not password:
            raise AuthenticationError("Preencha todos os campos")

        user = next(
            (
                e
                for e in self._portal.load(self_heal=False).employees
                if e.employee_id == employee_id and self._credentials.verify(e.password, password)
            ),
            None,
        )
        if not user:
            raise AuthenticationError("Usuário ou senha incorretos")

        return SessionEmployee(
            employee_id=user.employee_id,
            name=user.name,
            role=user.role,
            store_id=user.store_id,
        )

    def change_password(
        self,
        *,
        employee_id: str,
        current_password: str,
        new_password: str,
        confirm_password: str,
    ) -> None:
        if not current_password or not new_password or not confirm_password:
            raise ValidationError("Preencha todos os campos")

        snapshot = self._portal.load(self_heal=False)
        user = snapshot.find_employee(employee_id)
        if not user:
            raise ValidationError("Funcionário não encontrado")
        if not self._credentials.verify(user.password, current_password):
            raise ValidationError("Senha atual incorreta")
        if new_password != confirm_password:
            raise ValidationError("As novas senhas não coincidem")

        updated = replace(user, password=self._credentials.encode(new_password))
        persist(
            self._portal,
            replace(
                snapshot,
                employees=tuple(updated if e.employee_id == employee_id else e for e in snapshot.employees),
            ),
        )


class EmployeeService:
    """Use case: manage employees (admin)."""

    def __init__(self, portal: PortalRepository, credentials: Optional[CredentialScheme] = None):
        self._portal = portal
        self._credentials = credentials or PlaintextCredentials()

    def list_employees(self, *, store_id: Optional[str] = None) -> list[Employee]:
        """Non-admin employees, optionally restricted to one store."""
        return [
            e
            for e in self._portal.snapshot.employees
            if not e.is_admin and (not store_id or e.store_id == store_id)
        ]

    def list_admin_view(self, *, store_id: Optional[str] = None) -> list[dict]:
        snapshot = self._portal.snapshot
        return [
            {
                "id": e.employee_id,
                "name": e.name,
                "storeId": e.store_id,
                "storeName": snapshot.store_name(e.store_id),
            }
            for e in self.list_employees(store_id=store_id)
        ]

    def add_employee(
        self,
        *,
        current_role: Role,
        name: str,
        employee_id: str,
        store_id: str,
        password: str,
    ) -> Employee:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Você não tem permissão")

        name = require_non_empty(name, "Nome")
        employee_id = require_non_empty(employee_id, "ID/Matrícula")
        store_id = require_non_empty(store_id, "Loja")
        require_non_empty(password, "Senha")

        snapshot = self._portal.load(self_heal=False)
        if snapshot.find_employee(employee_id):
            raise ValidationError("ID/Matrícula já existe")
        if not snapshot.find_store(store_id):
            raise ValidationError("Loja não encontrada")

        employee = Employee(
            employee_id=employee_id,
            name=name,
            password=self._credentials.encode(password),
            is_admin=False,
            store_id=store_id,
        )
        persist(self._portal, replace(snapshot, employees=snapshot.employees + (employee,)))
        return employee

    def edit_employee(
        self,
        *,
        current_role: Role,
        employee_id: str,
        name: str,
        store_id: str,
        password: str = "",
    ) -> Employee:
        """Update name and store; a blank ``password`` keeps the current one."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Você não tem permissão")

        if not name or not name.strip() or not store_id or not store_id.strip():
            raise ValidationError("Nome e loja são obrigatórios")

        snapshot = self._portal.load(self_heal=False)
        current = snapshot.find_employee(employee_id)
        if not current:
            raise ValidationError("Funcionário não encontrado")
        if current.is_admin:
            raise ValidationError("Não é possível editar o administrador")
        if not snapshot.find_store(store_id.strip()):
            raise ValidationError("Loja não encontrada")

        updated = replace(
            current,
            name=name.strip(),
            store_id=store_id.strip(),
            password=self._credentials.encode(password) if password and password.strip() else current.password,
        )
        persist(
            self._portal,
            replace(
                snapshot,
                employees=tuple(updated if e.employee_id == employee_id else e for e in snapshot.employees),
            ),
        )
        return updated

    def delete_employee(self, *, current_role: Role, employee_id: str) -> None:
        """Delete an employee together with all of their payslips."""
        if current_role != Role.ADMIN:
            raise AuthorizationError("Você não tem permissão")

        snapshot = self._portal.load(self_heal=False)
        employee = snapshot.find_employee(employee_id)
        if not employee:
            raise ValidationError("Funcionário não encontrado")
        if employee.is_admin:
            raise ValidationError("Não é possível excluir o administrador")

        persist(
            self._portal,
            replace(
                snapshot,
                employees=tuple(e for e in snapshot.employees if e.employee_id != employee_id),
                payslips=tuple(p for p in snapshot.payslips if p.employee_id != employee_id),
            ),
        )
