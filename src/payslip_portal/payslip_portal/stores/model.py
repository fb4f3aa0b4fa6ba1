from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Store:
    """Domain entity: Store.

    ``employee_count`` is derived on every save; callers never set it.
    """

    store_id: str
    name: str
    employee_count: int = 0
