from __future__ import annotations

from dataclasses import dataclass

from ...core.constants import DEFAULT_FINGERPRINT_ALGORITHM
from ...core.exceptions import ValidationError
from .base import FingerprintFunction
from .demo_fingerprint import DemoFingerprint
from .sha256_fingerprint import Sha256Fingerprint


@dataclass
class FingerprintFactory:
    """Factory Pattern: choose the digest by its configured name."""

    def available(self) -> list[str]:
        return [DemoFingerprint.name, Sha256Fingerprint.name]

    def for_name(self, name: str | None) -> FingerprintFunction:
        key = (name or DEFAULT_FINGERPRINT_ALGORITHM).strip().lower()
        if key == DemoFingerprint.name:
            return DemoFingerprint()
        if key == Sha256Fingerprint.name:
            return Sha256Fingerprint()
        raise ValidationError(f"Unknown fingerprint algorithm: {name!r}")
