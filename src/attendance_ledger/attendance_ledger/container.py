from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .common.datetime_utils import now_millis
from .core.constants import DEFAULT_ELIGIBILITY_THRESHOLD, DEFAULT_STORAGE_KEY
from .core.exceptions import ValidationError
from .database.connection import DatabaseConnection, DBConfig
from .ledger.chain import AttendanceChain, Clock
from .ledger.file_ledger_repository import JsonFileLedgerRepository
from .ledger.fingerprint.factory import FingerprintFactory
from .ledger.guard import DuplicateGuard
from .ledger.memory_ledger_repository import InMemoryLedgerRepository
from .ledger.mysql_ledger_repository import MySQLLedgerRepository
from .ledger.repository import LedgerRepository
from .ledger.service import LedgerService
from .summary.policy.threshold_policy import ThresholdEligibilityPolicy
from .summary.service import AttendanceSummaryService


@dataclass(frozen=True)
class Container:
    ledger_repo: LedgerRepository
    chain: AttendanceChain

    summary_service: AttendanceSummaryService
    ledger_service: LedgerService


def build_repository(settings: Any) -> LedgerRepository:
    backend = str(getattr(settings, "LEDGER_BACKEND", "file")).lower()
    storage_key = getattr(settings, "LEDGER_STORAGE_KEY", DEFAULT_STORAGE_KEY)

    if backend == "file":
        return JsonFileLedgerRepository(Path(getattr(settings, "LEDGER_PATH")))
    if backend == "mysql":
        conn = DatabaseConnection(DBConfig.from_dict(getattr(settings, "DB_CONFIG")))
        return MySQLLedgerRepository(conn, storage_key=storage_key)
    if backend == "memory":
        return InMemoryLedgerRepository()
    raise ValidationError(f"Unknown ledger backend: {backend!r}")


def build_container(settings: Any, *, repository: Optional[LedgerRepository] = None, clock: Clock = now_millis) -> Container:
    ledger_repo = repository or build_repository(settings)
    fingerprint = FingerprintFactory().for_name(getattr(settings, "FINGERPRINT_ALGORITHM", None))

    chain = AttendanceChain.initialize(
        ledger_repo,
        fingerprint,
        clock=clock,
        strict_load=bool(getattr(settings, "STRICT_LOAD", False)),
    )

    threshold = float(getattr(settings, "ELIGIBILITY_THRESHOLD", DEFAULT_ELIGIBILITY_THRESHOLD))
    summary_service = AttendanceSummaryService(policy=ThresholdEligibilityPolicy(threshold))
    ledger_service = LedgerService(chain, guard=DuplicateGuard(), summaries=summary_service)

    return Container(
        ledger_repo=ledger_repo,
        chain=chain,
        summary_service=summary_service,
        ledger_service=ledger_service,
    )
