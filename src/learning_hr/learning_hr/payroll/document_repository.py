from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PayrollMethod
from ..database.documents import decode_datetime, decode_decimal, decode_int, encode_datetime, encode_decimal, require
from ..database.record_store import Document, RecordStore
from .model import SalaryRecord, salary_key
from .repository import SalaryRepository

COLLECTIONS = {
    PayrollMethod.ATTENDANCE: "monthlySalaries",
    PayrollMethod.MANUAL: "salaryRecords",
}


def salary_to_document(record: SalaryRecord) -> Document:
    return {
        "id": record.key,
        "userId": record.employee_id,
        "userName": record.employee_name,
        "departmentId": record.department_id,
        "month": record.month,
        "baseSalary": encode_decimal(record.base_salary),
        "workingDays": record.working_days,
        "presentDays": record.present_days,
        "absentDays": record.absent_days,
        "lateDays": record.late_days,
        "halfDays": record.half_days,
        "totalDeduction": encode_decimal(record.total_deduction),
        "finalSalary": encode_decimal(record.final_salary),
        "note": record.note,
        "createdAt": encode_datetime(record.created_at),
        "updatedAt": encode_datetime(record.updated_at),
    }


def salary_from_document(doc: Document, method: PayrollMethod) -> SalaryRecord:
    return SalaryRecord(
        employee_id=str(require(doc, "userId")),
        month=str(require(doc, "month")),
        method=method,
        base_salary=decode_decimal(require(doc, "baseSalary")),
        working_days=decode_int(require(doc, "workingDays"), "workingDays"),
        absent_days=decode_int(require(doc, "absentDays"), "absentDays"),
        late_days=decode_int(require(doc, "lateDays"), "lateDays"),
        total_deduction=decode_decimal(require(doc, "totalDeduction")),
        final_salary=decode_decimal(require(doc, "finalSalary")),
        present_days=decode_int(doc.get("presentDays") or 0, "presentDays"),
        half_days=decode_int(doc.get("halfDays") or 0, "halfDays"),
        employee_name=doc.get("userName"),
        department_id=doc.get("departmentId"),
        note=doc.get("note"),
        created_at=decode_datetime(doc.get("createdAt")),
        updated_at=decode_datetime(doc.get("updatedAt")),
    )


class DocumentSalaryRepository(SalaryRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get(self, method: PayrollMethod, employee_id: str, month: str) -> Optional[SalaryRecord]:
        doc = self._store.get(COLLECTIONS[method], salary_key(employee_id, month))
        return salary_from_document(doc, method) if doc else None

    def save(self, record: SalaryRecord) -> None:
        self._store.put(COLLECTIONS[record.method], record.key, salary_to_document(record))

    def list_month(self, method: PayrollMethod, month: str) -> Sequence[SalaryRecord]:
        docs = self._store.query(COLLECTIONS[method], {"month": month})
        records = [salary_from_document(d, method) for d in docs]
        records.sort(key=lambda r: r.employee_name or r.employee_id)
        return records
