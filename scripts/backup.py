"""Backup the ledger.

Note: Writes the chain exactly as stored (fingerprints included), whatever
the configured backend, so a backup can be audited later.
"""

from __future__ import annotations

import importlib
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_ledger.attendance_ledger.container import build_repository
from src.attendance_ledger.attendance_ledger.core.exceptions import LedgerCorruptError
from src.attendance_ledger.attendance_ledger.ledger.codec import dumps_chain


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    repository = build_repository(settings)

    try:
        records = repository.load()
    except LedgerCorruptError as e:
        raise SystemExit(f"Stored ledger is unreadable, nothing backed up: {e}")
    if not records:
        raise SystemExit("No ledger stored yet, nothing to back up.")

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"attendance_ledger_{ts}.json"
    out_file.write_text(dumps_chain(records), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(records)} records)")


if __name__ == "__main__":
    main()
