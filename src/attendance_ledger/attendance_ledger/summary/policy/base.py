from __future__ import annotations

from abc import ABC, abstractmethod

from ...core.enums import Eligibility


class EligibilityPolicy(ABC):
    """Policy interface (Strategy Pattern for eligibility)."""

    @abstractmethod
    def decide(self, *, total_days: int, attendance_percentage: float) -> Eligibility:
        raise NotImplementedError
