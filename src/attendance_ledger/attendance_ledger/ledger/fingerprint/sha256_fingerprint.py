from __future__ import annotations

import hashlib

from ..model import AttendancePayload
from .base import FingerprintFunction, canonical_input


class Sha256Fingerprint(FingerprintFunction):
    """SHA-256 hex digest over the same canonical input as the demo digest."""

    name = "sha256"

    def compute(self, index: int, previous_fingerprint: str, created_at: int, payload: AttendancePayload) -> str:
        data = canonical_input(index, previous_fingerprint, created_at, payload)
        return hashlib.sha256(data.encode("utf-8")).hexdigest()
