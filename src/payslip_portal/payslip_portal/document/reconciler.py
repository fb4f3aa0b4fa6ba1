from __future__ import annotations

import logging
from typing import Iterable

from ..core.exceptions import DocumentStoreError, PersistenceError
from ..employees.model import Employee
from ..payslips.model import Payslip
from ..stores.model import Store
from .defaults import default_snapshot
from .mapping import has_minimum_shape, snapshot_from_record, snapshot_to_document
from .model import PortalSnapshot
from .repository import DocumentStore

logger = logging.getLogger(__name__)


def recompute_employee_counts(stores: Iterable[Store], employees: Iterable[Employee]) -> tuple[Store, ...]:
    """Return ``stores`` with ``employee_count`` derived from ``employees``.

    Only non-admin employees count toward their store.
    """
    counts: dict[str, int] = {}
    for e in employees:
        if not e.is_admin:
            counts[e.store_id] = counts.get(e.store_id, 0) + 1

    return tuple(
        Store(store_id=s.store_id, name=s.name, employee_count=counts.get(s.store_id, 0)) for s in stores
    )


class PortalRepository:
    """Owns the stores/employees/payslips collections of the shared document.

    ``load`` and ``save`` are the only methods that talk to the remote store.
    Every save replaces the whole document; there is no diffing, locking or
    revision check, so concurrent writers are last-write-wins.

    The in-memory snapshot only changes after a successful save (or a load),
    never when persistence fails.
    """

    def __init__(self, store: DocumentStore):
        self._store = store
        self._snapshot = PortalSnapshot()

    @property
    def snapshot(self) -> PortalSnapshot:
        return self._snapshot

    def load(self, *, self_heal: bool = True) -> PortalSnapshot:
        """Re-fetch the whole document.

        With ``self_heal`` (the default) an unreachable or unusable document is
        replaced by the default dataset. Use cases that are about to write pass
        ``self_heal=False`` and get a PersistenceError instead, so a transient
        failure never resets the remote data.
        """
        try:
            body = self._store.fetch()
        except DocumentStoreError as e:
            return self._fallback(self_heal, "Could not fetch portal document: %s", e)

        record = body.get("record")
        if not has_minimum_shape(record):
            return self._fallback(self_heal, "Portal document has no stores/employees")

        try:
            snapshot = snapshot_from_record(record)
        except (KeyError, TypeError, ValueError) as e:
            return self._fallback(self_heal, "Portal document is malformed (%r)", e)

        self._snapshot = snapshot
        logger.debug(
            "Loaded portal document: %d stores, %d employees, %d payslips",
            len(snapshot.stores),
            len(snapshot.employees),
            len(snapshot.payslips),
        )
        return snapshot

    def save(
        self,
        stores: Iterable[Store],
        employees: Iterable[Employee],
        payslips: Iterable[Payslip],
    ) -> bool:
        employees = tuple(employees)
        payslips = tuple(payslips)
        updated_stores = recompute_employee_counts(stores, employees)

        try:
            self._store.replace(snapshot_to_document(updated_stores, employees, payslips))
        except DocumentStoreError as e:
            logger.error("Could not save portal document: %s", e)
            return False

        self._snapshot = PortalSnapshot(stores=updated_stores, employees=employees, payslips=payslips)
        return True

    def _fallback(self, self_heal: bool, message: str, *args) -> PortalSnapshot:
        if not self_heal:
            logger.error(message, *args)
            raise PersistenceError("Erro ao carregar dados, tente novamente")

        logger.warning(message + ", writing defaults", *args)
        return self._reset_to_defaults()

    def _reset_to_defaults(self) -> PortalSnapshot:
        defaults = default_snapshot()
        if not self.save(defaults.stores, defaults.employees, defaults.payslips):
            # Still usable locally; the remote copy converges on the next successful save.
            self._snapshot = PortalSnapshot(
                stores=recompute_employee_counts(defaults.stores, defaults.employees),
                employees=defaults.employees,
                payslips=defaults.payslips,
            )
        return self._snapshot


def persist(repository: PortalRepository, snapshot: PortalSnapshot) -> PortalSnapshot:
    """Save a proposed next state, raising PersistenceError when it was not written."""
    if not repository.save(snapshot.stores, snapshot.employees, snapshot.payslips):
        raise PersistenceError("Erro ao salvar dados, tente novamente")
    return repository.snapshot
