from __future__ import annotations

from dataclasses import replace
from typing import Sequence

from ..common.validators import normalize_store_code, require_non_empty
from ..core.enums import Role
from ..core.exceptions import AuthorizationError, ValidationError
from ..document.reconciler import PortalRepository, persist
from .model import Store


class StoreService:
    """Use case: manage stores (admin)."""

    def __init__(self, portal: PortalRepository):
        self._portal = portal

    def list_stores(self) -> Sequence[Store]:
        return self._portal.snapshot.stores

    def add_store(self, *, current_role: Role, name: str, code: str) -> Store:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Você não tem permissão")

        name = require_non_empty(name, "Nome da loja")
        code = normalize_store_code(require_non_empty(code, "Código da loja"))

        snapshot = self._portal.load(self_heal=False)
        if any(s.store_id.lower() == code for s in snapshot.stores):
            raise ValidationError("Código de loja já existe")

        store = Store(store_id=code, name=name, employee_count=0)
        saved = persist(self._portal, replace(snapshot, stores=snapshot.stores + (store,)))
        return saved.find_store(code) or store

    def delete_store(self, *, current_role: Role, store_id: str) -> None:
        """Delete a store and every payslip filed under it.

        Rejected while any employee still belongs to the store.
        """
        if current_role != Role.ADMIN:
            raise AuthorizationError("Você não tem permissão")

        snapshot = self._portal.load(self_heal=False)
        if not snapshot.find_store(store_id):
            raise ValidationError("Loja não encontrada")
        if any(e.store_id == store_id for e in snapshot.employees):
            raise ValidationError("Remova os funcionários da loja antes de excluí-la")

        persist(
            self._portal,
            replace(
                snapshot,
                stores=tuple(s for s in snapshot.stores if s.store_id != store_id),
                payslips=tuple(p for p in snapshot.payslips if p.store_id != store_id),
            ),
        )
