from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from ...core.enums import AttendanceStatus
from ...policy.model import CompanyPolicy
from .base import AttendanceStrategy, StatusDecision, minutes_after_start


class LateStrategy(AttendanceStrategy):
    """Late check-in; the minutes are counted from work start, not from the threshold."""

    def decide_checkin(self, *, check_in_at: datetime, policy: Optional[CompanyPolicy]) -> StatusDecision:
        if policy is None:
            return StatusDecision(status=AttendanceStatus.PRESENT)
        return StatusDecision(status=AttendanceStatus.LATE, late_minutes=minutes_after_start(check_in_at, policy))

    def decide_checkout(self, *, worked_hours: Decimal, current: StatusDecision) -> StatusDecision:
        return current
