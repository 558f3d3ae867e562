"""Pure attendance rules: check-in classification and worked-hours evaluation."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.enums import AttendanceStatus
from ..core.exceptions import PreconditionViolation
from ..policy.model import CompanyPolicy
from .factory import AttendanceStrategyFactory
from .strategies.base import StatusDecision

_ONE_DECIMAL = Decimal("0.1")
_SECONDS_PER_HOUR = Decimal(3600)

_default_factory = AttendanceStrategyFactory()


@dataclass(frozen=True)
class WorkHoursDecision:
    worked_hours: Decimal
    status: AttendanceStatus
    late_minutes: int = 0


def classify_check_in(
    check_in_at: datetime,
    policy: Optional[CompanyPolicy],
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> StatusDecision:
    """Present when at most ``late_threshold_minutes`` after work start, else late."""
    factory = factory or _default_factory
    strategy = factory.for_checkin(check_in_at=check_in_at, policy=policy)
    return strategy.decide_checkin(check_in_at=check_in_at, policy=policy)


def worked_hours_between(check_in_at: datetime, check_out_at: datetime) -> Decimal:
    if check_out_at < check_in_at:
        raise PreconditionViolation("Giờ ra không thể nhỏ hơn giờ vào")
    seconds = Decimal(str((check_out_at - check_in_at).total_seconds()))
    return (seconds / _SECONDS_PER_HOUR).quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


def evaluate_work_hours(
    check_in_at: datetime,
    check_out_at: datetime,
    current: StatusDecision,
    *,
    factory: Optional[AttendanceStrategyFactory] = None,
) -> WorkHoursDecision:
    """Worked hours (1 decimal) and the final status after check-out.

    Fewer than four hours makes the day a half-day whatever the check-in
    verdict was; otherwise the check-in status stands.
    """
    factory = factory or _default_factory
    worked_hours = worked_hours_between(check_in_at, check_out_at)
    strategy = factory.for_checkout(worked_hours=worked_hours)
    decision = strategy.decide_checkout(worked_hours=worked_hours, current=current)
    late_minutes = decision.late_minutes if decision.status == AttendanceStatus.LATE else 0
    return WorkHoursDecision(worked_hours=worked_hours, status=decision.status, late_minutes=late_minutes)
