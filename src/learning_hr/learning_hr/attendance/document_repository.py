from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..database.documents import (
    decode_date,
    decode_datetime,
    decode_decimal,
    decode_int,
    encode_date,
    encode_datetime,
    encode_decimal,
    require,
)
from ..database.record_store import Document, RecordStore
from .model import AttendanceRecord, attendance_key
from .repository import AttendanceRepository

COLLECTION = "attendanceRecords"


def record_to_document(record: AttendanceRecord) -> Document:
    doc: Document = {
        "id": record.key,
        "userId": record.employee_id,
        "userName": record.employee_name,
        "date": encode_date(record.work_date),
        "checkInTime": encode_datetime(record.check_in_at),
        "checkInIP": record.check_in_address,
        "checkInPhoto": record.check_in_photo_url,
        "status": record.status.value,
        "checkOutTime": encode_datetime(record.check_out_at),
        "checkOutIP": record.check_out_address,
        "checkOutPhoto": record.check_out_photo_url,
        "workHours": encode_decimal(record.worked_hours),
        "createdAt": encode_datetime(record.created_at),
        "updatedAt": encode_datetime(record.updated_at),
    }
    if record.late_minutes:
        doc["lateMinutes"] = record.late_minutes
    return doc


def record_from_document(doc: Document) -> AttendanceRecord:
    try:
        status = AttendanceStatus(require(doc, "status"))
    except ValueError:
        raise ValidationError(f"Trạng thái chấm công không hợp lệ: {doc.get('status')!r}")

    late = doc.get("lateMinutes")
    return AttendanceRecord(
        employee_id=str(require(doc, "userId")),
        work_date=decode_date(require(doc, "date")),
        check_in_at=decode_datetime(require(doc, "checkInTime")),
        status=status,
        employee_name=doc.get("userName"),
        check_in_address=doc.get("checkInIP"),
        check_in_photo_url=doc.get("checkInPhoto"),
        late_minutes=decode_int(late, "lateMinutes") if late is not None else None,
        check_out_at=decode_datetime(doc.get("checkOutTime")),
        check_out_address=doc.get("checkOutIP"),
        check_out_photo_url=doc.get("checkOutPhoto"),
        worked_hours=decode_decimal(doc.get("workHours")),
        created_at=decode_datetime(doc.get("createdAt")),
        updated_at=decode_datetime(doc.get("updatedAt")),
    )


class DocumentAttendanceRepository(AttendanceRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_for_employee_and_date(self, employee_id: str, work_date: date) -> Optional[AttendanceRecord]:
        doc = self._store.get(COLLECTION, attendance_key(employee_id, work_date))
        return record_from_document(doc) if doc else None

    def save(self, record: AttendanceRecord) -> None:
        self._store.put(COLLECTION, record.key, record_to_document(record))

    def list_for_employee(
        self,
        employee_id: str,
        *,
        start_date: date,
        end_date: date,
    ) -> Sequence[AttendanceRecord]:
        docs = self._store.query(COLLECTION, {"userId": employee_id})
        records = [record_from_document(d) for d in docs]
        records = [r for r in records if start_date <= r.work_date <= end_date]
        records.sort(key=lambda r: r.work_date, reverse=True)
        return records
