from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional, Sequence

from ..attendance.repository import AttendanceRepository
from ..attendance.service import summarize_month
from ..common.datetime_utils import month_bounds, now_local, require_month
from ..core.constants import DEFAULT_WORKING_DAYS, MANUAL_WORKING_DAYS
from ..core.enums import PayrollMethod, Role
from ..core.exceptions import AuthorizationError, PreconditionViolation
from ..policy.repository import PolicyRepository
from ..users.model import UserProfile
from ..users.repository import UserRepository
from .calculator.attendance_calculator import AttendancePayrollCalculator
from .calculator.manual_calculator import ManualPayrollCalculator
from .model import SalaryRecord
from .repository import SalaryRepository

logger = logging.getLogger(__name__)


class PayrollService:
    """Use cases: monthly payroll from attendance (snapshot) and manual entry."""

    def __init__(
        self,
        salaries: SalaryRepository,
        attendance: AttendanceRepository,
        policies: PolicyRepository,
        users: UserRepository,
        *,
        monthly_calculator: Optional[AttendancePayrollCalculator] = None,
        manual_calculator: Optional[ManualPayrollCalculator] = None,
    ):
        self._salaries = salaries
        self._attendance = attendance
        self._policies = policies
        self._users = users
        self._monthly = monthly_calculator or AttendancePayrollCalculator()
        self._manual = manual_calculator or ManualPayrollCalculator()

    def _salaried_employee(self, employee_id: str) -> UserProfile:
        user = self._users.get_by_id(employee_id)
        if not user:
            raise PreconditionViolation("Nhân viên không tồn tại")
        if user.monthly_salary is None:
            raise PreconditionViolation("Người dùng chưa có lương cơ bản")
        return user

    def preview_monthly(self, employee_id: str, month: str, *, now: datetime | None = None) -> SalaryRecord:
        """Compute (without saving) the attendance-derived salary of a month."""
        now = now or now_local()
        month = require_month(month)
        user = self._salaried_employee(employee_id)

        policy = self._policies.get()
        working_days = policy.working_days_per_month if policy else DEFAULT_WORKING_DAYS

        start, end = month_bounds(month)
        records = self._attendance.list_for_employee(employee_id, start_date=start, end_date=end)
        stats = summarize_month(employee_id, month, records)

        result = self._monthly.compute_monthly(
            user.monthly_salary,
            working_days,
            stats.present_days,
            stats.late_days,
            stats.half_days,
        )
        existing = self._salaries.get(PayrollMethod.ATTENDANCE, employee_id, month)
        return SalaryRecord(
            employee_id=employee_id,
            month=month,
            method=PayrollMethod.ATTENDANCE,
            base_salary=user.monthly_salary,
            working_days=working_days,
            present_days=stats.present_days,
            absent_days=result.absent_days,
            late_days=stats.late_days,
            half_days=stats.half_days,
            total_deduction=result.total_deduction,
            final_salary=result.final_salary,
            employee_name=user.display_name,
            department_id=user.department_id,
            created_at=existing.created_at if existing and existing.created_at else now,
            updated_at=now,
        )

    def save_snapshot(
        self,
        *,
        current_role: Role,
        employee_id: str,
        month: str,
        now: datetime | None = None,
    ) -> SalaryRecord:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")

        record = self.preview_monthly(employee_id, month, now=now)
        self._salaries.save(record)
        logger.info("salary snapshot %s: final=%s", record.key, record.final_salary)
        return record

    def save_manual_entry(
        self,
        *,
        current_role: Role,
        employee_id: str,
        month: str,
        absent_days: int,
        late_days: int,
        note: str = "",
        now: datetime | None = None,
    ) -> SalaryRecord:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")

        now = now or now_local()
        month = require_month(month)
        user = self._salaried_employee(employee_id)

        result = self._manual.compute_from_counts(user.monthly_salary, absent_days, late_days)
        existing = self._salaries.get(PayrollMethod.MANUAL, employee_id, month)
        record = SalaryRecord(
            employee_id=employee_id,
            month=month,
            method=PayrollMethod.MANUAL,
            base_salary=user.monthly_salary,
            working_days=MANUAL_WORKING_DAYS,
            absent_days=int(absent_days),
            late_days=int(late_days),
            total_deduction=result.deduction,
            final_salary=result.final_salary,
            employee_name=user.display_name,
            department_id=user.department_id,
            note=(note or "").strip() or None,
            created_at=existing.created_at if existing and existing.created_at else now,
            updated_at=now,
        )
        self._salaries.save(record)
        logger.info("manual salary %s: final=%s", record.key, record.final_salary)
        return record

    def list_month(self, month: str, *, method: PayrollMethod = PayrollMethod.ATTENDANCE) -> Sequence[SalaryRecord]:
        return self._salaries.list_month(method, require_month(month))
