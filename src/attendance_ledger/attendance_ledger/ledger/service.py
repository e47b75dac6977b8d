from __future__ import annotations

import csv
import io
import logging
from typing import Optional

from ..common.datetime_utils import millis_to_display, today_iso
from ..common.validators import require_iso_date, require_non_empty, require_status
from ..core.constants import FINGERPRINT_PREVIEW_CHARS
from ..core.enums import PresenceStatus
from ..summary.service import AttendanceSummary, AttendanceSummaryService
from .chain import AttendanceChain
from .guard import DuplicateGuard
from .model import AttendancePayload, LedgerRecord, ValidationReport

logger = logging.getLogger(__name__)

CSV_FIELDS = [
    "index",
    "created_at",
    "subject_id",
    "calendar_date",
    "status",
    "previous_fingerprint",
    "fingerprint",
]


class LedgerService:
    """Operations the outer layers call; nothing else touches the chain."""

    def __init__(
        self,
        chain: AttendanceChain,
        *,
        guard: Optional[DuplicateGuard] = None,
        summaries: Optional[AttendanceSummaryService] = None,
    ):
        self._chain = chain
        self._guard = guard or DuplicateGuard()
        self._summaries = summaries or AttendanceSummaryService()

    def record_attendance(
        self,
        subject_id: str,
        status: PresenceStatus | str,
        calendar_date: Optional[str] = None,
    ) -> LedgerRecord:
        """Append one attendance record.

        Raises ValidationError for bad input and DuplicateEntryError (whose
        `existing` is the record already on file) when the subject was
        already marked for that date. Neither case touches storage.
        """

        subject_id = require_non_empty(subject_id, "Subject ID")
        status = require_status(status)
        calendar_date = require_iso_date(calendar_date, "Date") if calendar_date else today_iso()

        self._guard.ensure_unique(self._chain, subject_id=subject_id, calendar_date=calendar_date)

        payload = AttendancePayload(subject_id=subject_id, status=status, calendar_date=calendar_date)
        return self._chain.append(payload)

    def get_chain(self) -> tuple[LedgerRecord, ...]:
        return self._chain.records

    def get_summary(self, subject_id: Optional[str] = None) -> AttendanceSummary:
        return self._summaries.summarize(self._chain, subject_id=subject_id)

    def get_subject_summaries(self) -> list[AttendanceSummary]:
        return self._summaries.summaries_by_subject(self._chain)

    def validation_report(self) -> ValidationReport:
        return self._chain.validate()

    def is_valid(self) -> bool:
        return self._chain.is_valid()

    def reset(self, *, confirmed: bool) -> bool:
        if not confirmed:
            logger.info("Ledger reset requested without confirmation; ignored")
            return False
        self._chain.reset()
        return True

    def get_history_ui(self) -> list[dict]:
        tampered = set(self._chain.tampered_indexes())
        return [self._to_ui(r, tampered=(pos in tampered)) for pos, r in enumerate(self._chain) if pos > 0]

    def _to_ui(self, r: LedgerRecord, *, tampered: bool) -> dict:
        status = r.payload.status
        label = {
            PresenceStatus.PRESENT: "PRESENT",
            PresenceStatus.ABSENT: "ABSENT",
        }.get(status, r.payload.status_value.upper())

        css = {
            PresenceStatus.PRESENT: "text-green-600",
            PresenceStatus.ABSENT: "text-red-600",
        }.get(status, "text-gray-800")

        return {
            "index": r.index,
            "subject_id": r.payload.subject_id or "N/A",
            "date": r.payload.calendar_date,
            "recorded_at": millis_to_display(r.created_at),
            "status": label,
            "css_class": css,
            "previous_fingerprint": r.previous_fingerprint[:FINGERPRINT_PREVIEW_CHARS] + "...",
            "fingerprint": r.fingerprint[:FINGERPRINT_PREVIEW_CHARS] + "...",
            "tampered": tampered,
        }

    def export_csv(self) -> str:
        out = io.StringIO()
        writer = csv.DictWriter(out, fieldnames=CSV_FIELDS)
        writer.writeheader()
        for r in self._chain.records[1:]:
            writer.writerow(
                {
                    "index": r.index,
                    "created_at": millis_to_display(r.created_at),
                    "subject_id": r.payload.subject_id,
                    "calendar_date": r.payload.calendar_date,
                    "status": r.payload.status_value,
                    "previous_fingerprint": r.previous_fingerprint,
                    "fingerprint": r.fingerprint,
                }
            )
        return out.getvalue()
