from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, time
from typing import Optional

from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES, DEFAULT_WORKING_DAYS, MAX_WORKING_DAYS
from ..core.exceptions import InvalidPolicy


@dataclass(frozen=True)
class CompanyPolicy:
    """Cấu hình công ty (singleton): giờ làm, ngưỡng đi muộn, ngày công, IP hợp lệ."""

    work_start_time: time = time(8, 0)
    work_end_time: time = time(17, 0)
    late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES
    working_days_per_month: int = DEFAULT_WORKING_DAYS
    allowed_network_addresses: frozenset[str] = field(default_factory=frozenset)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def validate(self) -> "CompanyPolicy":
        if self.late_threshold_minutes < 0:
            raise InvalidPolicy("Ngưỡng đi muộn không được âm")
        if not 1 <= self.working_days_per_month <= MAX_WORKING_DAYS:
            raise InvalidPolicy(f"Số ngày công phải trong khoảng 1-{MAX_WORKING_DAYS}")
        if self.work_end_time <= self.work_start_time:
            raise InvalidPolicy("Giờ kết thúc phải sau giờ bắt đầu")
        return self
