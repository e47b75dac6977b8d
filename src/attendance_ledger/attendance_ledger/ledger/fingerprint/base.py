from __future__ import annotations

import json
from abc import ABC, abstractmethod

from ..model import AttendancePayload, LedgerRecord


def canonical_input(index: int, previous_fingerprint: str, created_at: int, payload: AttendancePayload) -> str:
    payload_json = json.dumps(payload.as_dict(), separators=(",", ":"), ensure_ascii=False)
    return f"{index}{previous_fingerprint}{created_at}{payload_json}"


class FingerprintFunction(ABC):
    """Strategy Pattern: digest of a record's fields as a fixed-length string."""

    name: str = ""

    @abstractmethod
    def compute(self, index: int, previous_fingerprint: str, created_at: int, payload: AttendancePayload) -> str:
        raise NotImplementedError

    def of_record(self, record: LedgerRecord) -> str:
        return self.compute(record.index, record.previous_fingerprint, record.created_at, record.payload)
