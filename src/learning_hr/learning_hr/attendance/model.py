from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import AttendanceStatus


def attendance_key(employee_id: str, work_date: date) -> str:
    return f"{employee_id}_{work_date.isoformat()}"


@dataclass(frozen=True)
class AttendanceRecord:
    """Thực thể miền (domain): Bản ghi chấm công, một bản ghi mỗi nhân viên mỗi ngày.

    ``status`` is always derived (check-in classification, then check-out
    evaluation); ``late_minutes`` is only set for late days and
    ``worked_hours`` only after check-out.
    """

    employee_id: str
    work_date: date
    check_in_at: datetime
    status: AttendanceStatus
    employee_name: Optional[str] = None
    check_in_address: Optional[str] = None
    check_in_photo_url: Optional[str] = None
    late_minutes: Optional[int] = None
    check_out_at: Optional[datetime] = None
    check_out_address: Optional[str] = None
    check_out_photo_url: Optional[str] = None
    worked_hours: Optional[Decimal] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def key(self) -> str:
        return attendance_key(self.employee_id, self.work_date)

    @property
    def is_checked_out(self) -> bool:
        return self.check_out_at is not None


@dataclass(frozen=True)
class MonthlyAttendanceStats:
    """Read-model: đếm số ngày theo trạng thái trong một tháng."""

    employee_id: str
    month: str
    present_days: int
    late_days: int
    half_days: int

    @property
    def attended_days(self) -> int:
        return self.present_days + self.late_days
