from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PayrollMethod
from .model import SalaryRecord


class SalaryRepository(Protocol):
    def get(self, method: PayrollMethod, employee_id: str, month: str) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def save(self, record: SalaryRecord) -> None:
        """Upsert; a later save for the same employee/month replaces the snapshot."""

        raise NotImplementedError

    def list_month(self, method: PayrollMethod, month: str) -> Sequence[SalaryRecord]:
        raise NotImplementedError
