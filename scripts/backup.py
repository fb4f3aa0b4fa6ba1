"""Back up the remote portal document to a local JSON file."""

from __future__ import annotations

import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.payslip_portal.payslip_portal.container import build_container
from src.payslip_portal.payslip_portal.core.exceptions import DocumentStoreError


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(document_store_config=dict(settings.DOCUMENT_STORE))

    # Raw fetch: load() rewrites an unusable document with defaults.
    try:
        body = container.document_store.fetch()
    except DocumentStoreError as e:
        raise SystemExit(f"Backup failed: {e}")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"portal_{ts}.json"
    out_file.write_text(json.dumps(body.get("record", body), ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file}")


if __name__ == "__main__":
    main()
