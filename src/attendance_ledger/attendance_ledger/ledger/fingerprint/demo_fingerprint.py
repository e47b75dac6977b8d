from __future__ import annotations

import base64

from ...core.constants import FINGERPRINT_LENGTH
from ..model import AttendancePayload
from .base import FingerprintFunction, canonical_input

# 48 raw bytes encode to exactly 64 Base64 characters.
_FOLD_WIDTH = FINGERPRINT_LENGTH * 3 // 4


class DemoFingerprint(FingerprintFunction):
    """Base64 digest folded to a fixed width.

    Not collision-resistant: anyone with write access to storage can forge a
    matching fingerprint. It only makes edits visible on recomputation.
    """

    name = "demo"

    def compute(self, index: int, previous_fingerprint: str, created_at: int, payload: AttendancePayload) -> str:
        raw = canonical_input(index, previous_fingerprint, created_at, payload).encode("utf-8")

        folded = bytearray(_FOLD_WIDTH)
        for pos, byte in enumerate(raw):
            col = pos % _FOLD_WIDTH
            folded[col] = ((folded[col] * 31) ^ byte ^ (pos // _FOLD_WIDTH)) & 0xFF
        # Length goes into the last column so inputs padded with zero bytes still differ.
        folded[-1] = (folded[-1] + len(raw)) & 0xFF

        return base64.b64encode(bytes(folded)).decode("ascii")[:FINGERPRINT_LENGTH]
