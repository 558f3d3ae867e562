from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.constants import HALF_DAY_HOURS
from ..policy.model import CompanyPolicy
from .strategies.base import AttendanceStrategy, minutes_after_start
from .strategies.half_day_strategy import HalfDayStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    half_day_hours: Decimal = HALF_DAY_HOURS

    def for_checkin(self, *, check_in_at: datetime, policy: Optional[CompanyPolicy]) -> AttendanceStrategy:
        # No policy configured yet: nobody can be late.
        if not policy:
            return PresentStrategy()

        if minutes_after_start(check_in_at, policy) <= policy.late_threshold_minutes:
            return PresentStrategy()
        return LateStrategy()

    def for_checkout(self, *, worked_hours: Decimal) -> AttendanceStrategy:
        if worked_hours < self.half_day_hours:
            return HalfDayStrategy()
        return PresentStrategy()
