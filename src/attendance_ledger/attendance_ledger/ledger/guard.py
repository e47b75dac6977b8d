from __future__ import annotations

from typing import Iterable, Optional

from ..core.exceptions import DuplicateEntryError
from .model import LedgerRecord


class DuplicateGuard:
    """One record per (subject, calendar date).

    Linear scan over the in-memory chain; genesis is included but its sentinel
    payload never matches a real subject.
    """

    def find_existing(self, records: Iterable[LedgerRecord], *, subject_id: str, calendar_date: str) -> Optional[LedgerRecord]:
        for r in records:
            if r.payload.subject_id == subject_id and r.payload.calendar_date == calendar_date:
                return r
        return None

    def ensure_unique(self, records: Iterable[LedgerRecord], *, subject_id: str, calendar_date: str) -> None:
        existing = self.find_existing(records, subject_id=subject_id, calendar_date=calendar_date)
        if existing:
            raise DuplicateEntryError(
                f"Attendance for subject {subject_id} on {calendar_date} "
                f"has already been marked as {existing.payload.status_value}",
                existing,
            )
