from datetime import date, datetime
from decimal import Decimal

import pytest

from src.learning_hr.learning_hr.attendance.document_repository import record_from_document, record_to_document
from src.learning_hr.learning_hr.attendance.model import AttendanceRecord
from src.learning_hr.learning_hr.core.enums import AttendanceStatus
from src.learning_hr.learning_hr.core.exceptions import ValidationError


def test_late_record_survives_document_form():
    record = AttendanceRecord(
        employee_id="e1",
        work_date=date(2024, 3, 4),
        check_in_at=datetime(2024, 3, 4, 8, 20),
        status=AttendanceStatus.LATE,
        employee_name="A",
        check_in_address="203.0.113.10",
        late_minutes=20,
        check_out_at=datetime(2024, 3, 4, 17, 0),
        worked_hours=Decimal("8.7"),
    )

    doc = record_to_document(record)
    assert doc["id"] == "e1_2024-03-04"
    assert doc["status"] == "late"
    assert doc["lateMinutes"] == 20
    assert record_from_document(doc) == record


def test_late_minutes_omitted_when_not_late():
    record = AttendanceRecord(
        employee_id="e1",
        work_date=date(2024, 3, 4),
        check_in_at=datetime(2024, 3, 4, 8, 0),
        status=AttendanceStatus.PRESENT,
    )
    assert "lateMinutes" not in record_to_document(record)


def test_unknown_status_rejected():
    doc = {"userId": "e1", "date": "2024-03-04", "checkInTime": "2024-03-04T08:00:00", "status": "sick"}
    with pytest.raises(ValidationError):
        record_from_document(doc)
