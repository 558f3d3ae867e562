from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ...core.constants import HALF_DAY_WEIGHT, LATE_DAY_WEIGHT
from .base import daily_rate, require_base_salary, require_count, settle


@dataclass(frozen=True)
class MonthlyPayroll:
    absent_days: int
    daily_salary: Decimal
    total_deduction: Decimal
    final_salary: Decimal


class AttendancePayrollCalculator:
    """Monthly snapshot rule: absences are whatever attendance does not cover.

    A full day's pay is deducted per absent day and half a day's pay per late
    day and per half-day.
    """

    def compute_monthly(
        self,
        base: Decimal,
        working_days: int,
        present_days: int,
        late_days: int,
        half_days: int,
    ) -> MonthlyPayroll:
        base = require_base_salary(base)
        daily = daily_rate(base, working_days)
        present_days = require_count(present_days, "Số ngày đúng giờ")
        late_days = require_count(late_days, "Số ngày đi muộn")
        half_days = require_count(half_days, "Số ngày nửa công")

        absent_days = max(0, int(working_days) - present_days - late_days - half_days)
        deduction = (
            daily * absent_days
            + daily * LATE_DAY_WEIGHT * late_days
            + daily * HALF_DAY_WEIGHT * half_days
        )
        total_deduction, final_salary = settle(base, deduction)
        return MonthlyPayroll(
            absent_days=absent_days,
            daily_salary=daily,
            total_deduction=total_deduction,
            final_salary=final_salary,
        )
