from datetime import date, datetime
from decimal import Decimal

import pytest

from src.learning_hr.learning_hr.attendance.model import AttendanceRecord
from src.learning_hr.learning_hr.core.enums import AttendanceStatus, PayrollMethod, Role
from src.learning_hr.learning_hr.core.exceptions import AuthorizationError, PreconditionViolation, StoreUnavailable


def _seed_month(container, statuses):
    for day, status in enumerate(statuses, start=1):
        container.attendance_repo.save(
            AttendanceRecord(
                employee_id="e1",
                work_date=date(2024, 3, day),
                check_in_at=datetime(2024, 3, day, 8, 0),
                status=status,
            )
        )


def test_preview_uses_policy_working_days(container):
    _seed_month(
        container,
        [AttendanceStatus.PRESENT] * 20 + [AttendanceStatus.LATE] * 2 + [AttendanceStatus.HALF_DAY],
    )

    record = container.payroll_service.preview_monthly("e1", "2024-03", now=datetime(2024, 4, 1))

    assert record.method == PayrollMethod.ATTENDANCE
    assert (record.present_days, record.late_days, record.half_days, record.absent_days) == (20, 2, 1, 3)
    assert record.final_salary == Decimal("8269230.77")
    assert container.salary_repo.get(PayrollMethod.ATTENDANCE, "e1", "2024-03") is None


def test_snapshot_is_admin_only(container):
    with pytest.raises(AuthorizationError):
        container.payroll_service.save_snapshot(current_role=Role.STAFF, employee_id="e1", month="2024-03")


def test_snapshot_requires_base_salary(container):
    from src.learning_hr.learning_hr.users.model import UserProfile

    container.users_repo.save(UserProfile(uid="e2", display_name="B", role=Role.STAFF))
    with pytest.raises(PreconditionViolation):
        container.payroll_service.save_snapshot(current_role=Role.ADMIN, employee_id="e2", month="2024-03")


def test_snapshot_overwrites_and_keeps_created_at(container):
    svc = container.payroll_service
    first = svc.save_snapshot(current_role=Role.ADMIN, employee_id="e1", month="2024-03", now=datetime(2024, 4, 1))
    _seed_month(container, [AttendanceStatus.PRESENT] * 26)
    second = svc.save_snapshot(current_role=Role.ADMIN, employee_id="e1", month="2024-03", now=datetime(2024, 4, 2))

    assert first.final_salary == Decimal("0.00")
    assert second.final_salary == Decimal("10000000.00")
    assert second.created_at == datetime(2024, 4, 1)
    assert [r.final_salary for r in svc.list_month("2024-03")] == [Decimal("10000000.00")]


def test_failed_snapshot_write_keeps_previous(container, monkeypatch):
    svc = container.payroll_service
    svc.save_snapshot(current_role=Role.ADMIN, employee_id="e1", month="2024-03", now=datetime(2024, 4, 1))
    _seed_month(container, [AttendanceStatus.PRESENT] * 26)

    def broken_put(collection, key, record):
        raise StoreUnavailable("Không thể ghi dữ liệu")

    monkeypatch.setattr(container.store, "put", broken_put)
    with pytest.raises(StoreUnavailable):
        svc.save_snapshot(current_role=Role.ADMIN, employee_id="e1", month="2024-03")

    kept = container.salary_repo.get(PayrollMethod.ATTENDANCE, "e1", "2024-03")
    assert kept.final_salary == Decimal("0.00")


def test_manual_entry_lands_in_its_own_collection(container):
    record = container.payroll_service.save_manual_entry(
        current_role=Role.ADMIN,
        employee_id="e1",
        month="2024-03",
        absent_days=2,
        late_days=3,
        note="  nghỉ ốm  ",
    )

    assert record.method == PayrollMethod.MANUAL
    assert record.note == "nghỉ ốm"
    assert record.final_salary == Decimal("8653846.15")
    assert container.salary_repo.get(PayrollMethod.ATTENDANCE, "e1", "2024-03") is None
    assert container.salary_repo.get(PayrollMethod.MANUAL, "e1", "2024-03") == record


def test_invalid_month_rejected(container):
    from src.learning_hr.learning_hr.core.exceptions import ValidationError

    with pytest.raises(ValidationError):
        container.payroll_service.preview_monthly("e1", "2024-13")
