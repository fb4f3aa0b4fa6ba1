"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; business rules live in the services.
"""

import importlib

from config import get_settings_module

from src.payslip_portal.payslip_portal.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(document_store_config=settings.DOCUMENT_STORE)
    container.portal.load()
    for store in container.store_service.list_stores():
        print(f"{store.store_id:<12} {store.name:<20} {store.employee_count}")


if __name__ == "__main__":
    main()
