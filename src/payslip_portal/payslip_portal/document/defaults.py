from __future__ import annotations

from ..employees.model import Employee
from ..stores.model import Store
from .model import PortalSnapshot

DEFAULT_STORES = (
    ("tacaruna", "Tacaruna"),
    ("riomar", "Riomar"),
    ("patteo", "Patteo"),
    ("northway", "North Way"),
    ("difusora", "Difusora"),
    ("caruaru", "Caruaru"),
)

DEFAULT_ADMIN_ID = "admin"
DEFAULT_ADMIN_NAME = "Administrador"
DEFAULT_ADMIN_PASSWORD = "admin123"


def default_snapshot() -> PortalSnapshot:
    """Dataset used whenever the remote document is missing or unusable."""
    return PortalSnapshot(
        stores=tuple(Store(store_id=code, name=name, employee_count=0) for code, name in DEFAULT_STORES),
        employees=(
            Employee(
                employee_id=DEFAULT_ADMIN_ID,
                name=DEFAULT_ADMIN_NAME,
                password=DEFAULT_ADMIN_PASSWORD,
                is_admin=True,
                store_id="",
            ),
        ),
        payslips=(),
    )
