from __future__ import annotations

from ...core.constants import DEFAULT_ELIGIBILITY_THRESHOLD
from ...core.enums import Eligibility
from .base import EligibilityPolicy


class ThresholdEligibilityPolicy(EligibilityPolicy):
    """Standard rule: eligible at or above the threshold percentage, N/A with no records."""

    def __init__(self, threshold: float = DEFAULT_ELIGIBILITY_THRESHOLD):
        self.threshold = float(threshold)

    def decide(self, *, total_days: int, attendance_percentage: float) -> Eligibility:
        if total_days == 0:
            return Eligibility.NOT_APPLICABLE
        if attendance_percentage >= self.threshold:
            return Eligibility.ELIGIBLE
        return Eligibility.NOT_ELIGIBLE
