from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from ..core.enums import PayrollMethod


def salary_key(employee_id: str, month: str) -> str:
    return f"{employee_id}_{month}"


@dataclass(frozen=True)
class SalaryRecord:
    """Bảng lương tháng của một nhân viên (snapshot do admin lưu)."""

    employee_id: str
    month: str
    method: PayrollMethod
    base_salary: Decimal
    working_days: int
    absent_days: int
    late_days: int
    total_deduction: Decimal
    final_salary: Decimal
    present_days: int = 0
    half_days: int = 0
    employee_name: Optional[str] = None
    department_id: Optional[str] = None
    note: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def key(self) -> str:
        return salary_key(self.employee_id, self.month)
