"""Overwrite the remote portal document with the default dataset.

Warning: this discards every store, employee and payslip currently stored.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payslip_portal.payslip_portal.container import build_container
from src.payslip_portal.payslip_portal.document.defaults import default_snapshot


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    store_config = dict(settings.DOCUMENT_STORE)
    container = build_container(document_store_config=store_config)

    defaults = default_snapshot()
    if not container.portal.save(defaults.stores, defaults.employees, defaults.payslips):
        raise SystemExit("Failed to write the default document (see log).")

    print(f"OK: Reset document -> {store_config.get('base_url')}/{store_config.get('bin_id')}")


if __name__ == "__main__":
    main()
