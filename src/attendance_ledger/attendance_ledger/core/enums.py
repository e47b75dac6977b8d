from __future__ import annotations

from enum import Enum


class PresenceStatus(str, Enum):
    """Attendance status stored in a ledger record."""

    PRESENT = "present"
    ABSENT = "absent"


class Eligibility(str, Enum):
    """Outcome of the eligibility rule; N/A when nothing has been recorded yet."""

    ELIGIBLE = "Eligible"
    NOT_ELIGIBLE = "Not Eligible"
    NOT_APPLICABLE = "N/A"


class IntegrityFault(str, Enum):
    FINGERPRINT_MISMATCH = "fingerprint_mismatch"
    BROKEN_LINK = "broken_link"
