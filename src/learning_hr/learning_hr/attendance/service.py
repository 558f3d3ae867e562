from __future__ import annotations

import logging
from dataclasses import replace
from datetime import date, datetime, timedelta
from typing import Optional, Sequence

from ..common.datetime_utils import month_bounds, now_local
from ..core.constants import DEFAULT_HISTORY_DAYS
from ..core.enums import AttendanceStatus
from ..core.exceptions import PreconditionViolation
from ..integrations.blob_store import BlobStore
from ..policy.repository import PolicyRepository
from ..users.repository import UserRepository
from .access_gate import AccessGate, GateDecision
from .factory import AttendanceStrategyFactory
from .model import AttendanceRecord, MonthlyAttendanceStats
from .repository import AttendanceRepository
from .rules import classify_check_in, evaluate_work_hours
from .strategies.base import StatusDecision

logger = logging.getLogger(__name__)


def photo_path(employee_id: str, kind: str, at: datetime) -> str:
    millis = int(at.timestamp() * 1000)
    return f"attendance/{employee_id}/{at.date().isoformat()}_{kind}_{millis}.jpg"


class AttendanceService:
    """Use case: check-in/check-out with network gate and photo capture."""

    def __init__(
        self,
        attendance: AttendanceRepository,
        policies: PolicyRepository,
        users: UserRepository,
        gate: AccessGate,
        blobs: BlobStore,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
    ):
        self._attendance = attendance
        self._policies = policies
        self._users = users
        self._gate = gate
        self._blobs = blobs
        self._factory = strategy_factory or AttendanceStrategyFactory()

    def check_in(self, employee_id: str, *, photo: bytes, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        policy = self._policies.get()
        address = self._gate.require_allowed(policy)

        if self._attendance.get_for_employee_and_date(employee_id, today):
            raise PreconditionViolation("Bạn đã check-in hôm nay rồi")

        # Upload first: a failed upload must not leave a half-written record.
        photo_url = self._blobs.upload(photo_path(employee_id, "checkin", now), photo)

        decision = classify_check_in(now, policy, factory=self._factory)
        user = self._users.get_by_id(employee_id)
        record = AttendanceRecord(
            employee_id=employee_id,
            work_date=today,
            check_in_at=now,
            status=decision.status,
            employee_name=user.display_name if user else None,
            check_in_address=address,
            check_in_photo_url=photo_url,
            late_minutes=decision.late_minutes if decision.status == AttendanceStatus.LATE else None,
            created_at=now,
            updated_at=now,
        )
        self._attendance.save(record)
        logger.info("check-in %s at %s: %s", employee_id, now.isoformat(), decision.status.value)
        return record

    def check_out(self, employee_id: str, *, photo: bytes, now: datetime | None = None) -> AttendanceRecord:
        now = now or now_local()
        today = now.date()

        policy = self._policies.get()
        address = self._gate.require_allowed(policy)

        record = self._attendance.get_for_employee_and_date(employee_id, today)
        if not record:
            raise PreconditionViolation("Bạn chưa check-in hôm nay")
        if record.is_checked_out:
            raise PreconditionViolation("Bạn đã check-out hôm nay rồi")
        if now < record.check_in_at:
            raise PreconditionViolation("Giờ ra không thể nhỏ hơn giờ vào")

        photo_url = self._blobs.upload(photo_path(employee_id, "checkout", now), photo)

        current = StatusDecision(status=record.status, late_minutes=record.late_minutes or 0)
        decision = evaluate_work_hours(record.check_in_at, now, current, factory=self._factory)
        updated = replace(
            record,
            check_out_at=now,
            check_out_address=address,
            check_out_photo_url=photo_url,
            worked_hours=decision.worked_hours,
            status=decision.status,
            late_minutes=decision.late_minutes or None,
            updated_at=now,
        )
        self._attendance.save(updated)
        logger.info(
            "check-out %s at %s: %sh %s", employee_id, now.isoformat(), decision.worked_hours, decision.status.value
        )
        return updated

    def network_status(self) -> GateDecision:
        """Whether the caller is on the company network right now (for the UI badge)."""
        return self._gate.resolve(self._policies.get())

    def today_record(self, employee_id: str, today: date | None = None) -> Optional[AttendanceRecord]:
        return self._attendance.get_for_employee_and_date(employee_id, today or now_local().date())

    def history(
        self,
        employee_id: str,
        *,
        days: int = DEFAULT_HISTORY_DAYS,
        today: date | None = None,
    ) -> Sequence[AttendanceRecord]:
        """Records of the last ``days`` days (today included), newest first."""
        today = today or now_local().date()
        return self._attendance.list_for_employee(employee_id, start_date=today - timedelta(days=days - 1), end_date=today)

    def month_records(self, employee_id: str, month: str) -> Sequence[AttendanceRecord]:
        start, end = month_bounds(month)
        return self._attendance.list_for_employee(employee_id, start_date=start, end_date=end)

    def monthly_stats(self, employee_id: str, month: str) -> MonthlyAttendanceStats:
        records = self.month_records(employee_id, month)
        return summarize_month(employee_id, month, records)


def summarize_month(employee_id: str, month: str, records: Sequence[AttendanceRecord]) -> MonthlyAttendanceStats:
    def count(status: AttendanceStatus) -> int:
        return sum(1 for r in records if r.status == status)

    return MonthlyAttendanceStats(
        employee_id=employee_id,
        month=month,
        present_days=count(AttendanceStatus.PRESENT),
        late_days=count(AttendanceStatus.LATE),
        half_days=count(AttendanceStatus.HALF_DAY),
    )
