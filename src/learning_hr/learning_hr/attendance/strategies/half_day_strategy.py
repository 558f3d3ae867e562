from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from ...core.enums import AttendanceStatus
from ...policy.model import CompanyPolicy
from .base import AttendanceStrategy, StatusDecision


class HalfDayStrategy(AttendanceStrategy):
    """Short day on checkout; replaces any check-in verdict, including late."""

    def decide_checkin(self, *, check_in_at: datetime, policy: Optional[CompanyPolicy]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY)

    def decide_checkout(self, *, worked_hours: Decimal, current: StatusDecision) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.HALF_DAY)
