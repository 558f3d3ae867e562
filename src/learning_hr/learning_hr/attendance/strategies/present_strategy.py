from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from ...core.enums import AttendanceStatus
from ...policy.model import CompanyPolicy
from .base import AttendanceStrategy, StatusDecision


class PresentStrategy(AttendanceStrategy):
    """On-time check-in, normal check-out."""

    def decide_checkin(self, *, check_in_at: datetime, policy: Optional[CompanyPolicy]) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.PRESENT)

    def decide_checkout(self, *, worked_hours: Decimal, current: StatusDecision) -> StatusDecision:
        return current
