from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...core.constants import LATE_DAY_WEIGHT, MANUAL_WORKING_DAYS
from .base import daily_rate, require_base_salary, require_count, settle


@dataclass(frozen=True)
class ManualPayroll:
    daily_salary: Decimal
    deduction: Decimal
    final_salary: Decimal


class ManualPayrollCalculator:
    """Manual entry rule: admin types absent/late counts, no half-day term.

    Differs from ``AttendancePayrollCalculator``: half-days are not deducted
    and the month is 26 working days unless stated otherwise.
    """

    def compute_from_counts(
        self,
        base: Decimal,
        absent_days: int,
        late_days: int,
        working_days: int = MANUAL_WORKING_DAYS,
    ) -> ManualPayroll:
        base = require_base_salary(base)
        daily = daily_rate(base, working_days)
        absent_days = require_count(absent_days, "Số ngày nghỉ")
        late_days = require_count(late_days, "Số ngày đi muộn")

        deduction, final_salary = settle(base, daily * absent_days + daily * LATE_DAY_WEIGHT * late_days)
        return ManualPayroll(daily_salary=daily, deduction=deduction, final_salary=final_salary)
