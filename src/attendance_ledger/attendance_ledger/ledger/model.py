from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.constants import GENESIS_DATE, GENESIS_STATUS, GENESIS_SUBJECT_ID
from ..core.enums import IntegrityFault, PresenceStatus


@dataclass(frozen=True)
class AttendancePayload:
    """What one ledger record attests: a subject's status on a calendar date."""

    subject_id: str
    status: Union[PresenceStatus, str]
    calendar_date: str

    @property
    def status_value(self) -> str:
        return self.status.value if isinstance(self.status, PresenceStatus) else str(self.status)

    def as_dict(self) -> dict:
        # Key order is part of the fingerprint input.
        return {
            "subjectId": self.subject_id,
            "presenceStatus": self.status_value,
            "calendarDate": self.calendar_date,
        }


GENESIS_PAYLOAD = AttendancePayload(
    subject_id=GENESIS_SUBJECT_ID,
    status=GENESIS_STATUS,
    calendar_date=GENESIS_DATE,
)


@dataclass(frozen=True)
class LedgerRecord:
    """One immutable ledger entry together with its stored fingerprint."""

    index: int
    created_at: int
    payload: AttendancePayload
    previous_fingerprint: str
    fingerprint: str

    @property
    def is_genesis(self) -> bool:
        return self.index == 0


@dataclass(frozen=True)
class ValidationReport:
    """Result of auditing a chain: valid, or where it first breaks."""

    valid: bool
    checked: int
    first_invalid_index: Optional[int] = None
    reason: Optional[IntegrityFault] = None

    def as_dict(self) -> dict:
        return {
            "valid": self.valid,
            "checked": self.checked,
            "first_invalid_index": self.first_invalid_index,
            "reason": self.reason.value if self.reason else None,
        }
