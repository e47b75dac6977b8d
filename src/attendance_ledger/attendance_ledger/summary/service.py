from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..core.enums import Eligibility, PresenceStatus
from ..ledger.model import LedgerRecord
from .policy.base import EligibilityPolicy
from .policy.threshold_policy import ThresholdEligibilityPolicy


@dataclass(frozen=True)
class AttendanceSummary:
    total_days: int
    present_days: int
    absent_days: int
    attendance_percentage: float
    eligibility: Eligibility
    subject_id: Optional[str] = None

    @property
    def eligible(self) -> Optional[bool]:
        """True/False, or None when there is nothing to judge."""
        if self.eligibility == Eligibility.NOT_APPLICABLE:
            return None
        return self.eligibility == Eligibility.ELIGIBLE

    def as_dict(self) -> dict:
        return {
            "subject_id": self.subject_id,
            "total_days": self.total_days,
            "present_days": self.present_days,
            "absent_days": self.absent_days,
            "attendance_percentage": self.attendance_percentage,
            "attendance_percentage_label": f"{self.attendance_percentage:.2f}%",
            "eligible": self.eligible,
            "eligibility": self.eligibility.value,
        }


class AttendanceSummaryService:
    def __init__(self, *, policy: Optional[EligibilityPolicy] = None):
        self._policy = policy or ThresholdEligibilityPolicy()

    def summarize(self, records: Iterable[LedgerRecord], *, subject_id: Optional[str] = None) -> AttendanceSummary:
        entries = [r for r in records if not r.is_genesis]
        if subject_id is not None:
            entries = [r for r in entries if r.payload.subject_id == subject_id]

        total = len(entries)
        present = sum(1 for r in entries if r.payload.status == PresenceStatus.PRESENT)
        raw_percentage = present / total * 100 if total else 0.0

        return AttendanceSummary(
            total_days=total,
            present_days=present,
            absent_days=total - present,
            attendance_percentage=round(raw_percentage, 2),
            eligibility=self._policy.decide(total_days=total, attendance_percentage=raw_percentage),
            subject_id=subject_id,
        )

    def summaries_by_subject(self, records: Iterable[LedgerRecord]) -> list[AttendanceSummary]:
        records = list(records)
        subjects = sorted({r.payload.subject_id for r in records if not r.is_genesis})
        return [self.summarize(records, subject_id=s) for s in subjects]
