from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime, timedelta
from decimal import Decimal
from typing import Optional

from ...core.enums import AttendanceStatus
from ...policy.model import CompanyPolicy

_ONE_MINUTE = timedelta(minutes=1)


@dataclass(frozen=True)
class StatusDecision:
    status: AttendanceStatus
    late_minutes: int = 0


class AttendanceStrategy(ABC):
    """Strategy Pattern: encapsulate how we decide an attendance status."""

    @abstractmethod
    def decide_checkin(self, *, check_in_at: datetime, policy: Optional[CompanyPolicy]) -> StatusDecision:
        raise NotImplementedError

    @abstractmethod
    def decide_checkout(self, *, worked_hours: Decimal, current: StatusDecision) -> StatusDecision:
        raise NotImplementedError


def work_start_for(check_in_at: datetime, policy: CompanyPolicy) -> datetime:
    """Policy start time on the check-in's calendar date (same tzinfo)."""
    return datetime.combine(check_in_at.date(), policy.work_start_time, tzinfo=check_in_at.tzinfo)


def minutes_after_start(check_in_at: datetime, policy: CompanyPolicy) -> int:
    """Whole minutes after work start, floored (negative when early)."""
    return (check_in_at - work_start_for(check_in_at, policy)) // _ONE_MINUTE
