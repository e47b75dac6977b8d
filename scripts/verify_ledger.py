"""Audit the stored ledger and exit non-zero when it fails validation.

Read-only: the stored chain is never rebuilt or rewritten, even when it
cannot be decoded.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.attendance_ledger.attendance_ledger.container import build_repository
from src.attendance_ledger.attendance_ledger.core.exceptions import LedgerCorruptError
from src.attendance_ledger.attendance_ledger.ledger.chain import AttendanceChain
from src.attendance_ledger.attendance_ledger.ledger.fingerprint.factory import FingerprintFactory


def main(settings=None) -> int:
    if settings is None:
        settings = importlib.import_module(get_settings_module())
    repository = build_repository(settings)

    try:
        records = repository.load()
    except LedgerCorruptError as e:
        print(f"FAIL: stored ledger is unreadable: {e}")
        return 1
    if not records:
        print("FAIL: no ledger stored")
        return 1

    fingerprint = FingerprintFactory().for_name(getattr(settings, "FINGERPRINT_ALGORITHM", None))
    chain = AttendanceChain(records, repository=repository, fingerprint=fingerprint)

    report = chain.validate()
    print(f"records={len(chain)} checked={report.checked}")
    if report.valid:
        print("OK: ledger is valid")
        return 0

    print(f"FAIL: record #{report.first_invalid_index} ({report.reason.value})")
    tampered = chain.tampered_indexes()
    if tampered:
        print("Tampered records: " + ", ".join(str(i) for i in tampered))
    return 1


if __name__ == "__main__":
    sys.exit(main())
