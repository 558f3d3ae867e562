"""Ví dụ: dùng service layer (không qua Flask).

Controllers chỉ là lớp mỏng, nghiệp vụ nằm ở Services.
"""

from datetime import datetime
from decimal import Decimal

from src.learning_hr.learning_hr.container import wire
from src.learning_hr.learning_hr.core.enums import Role
from src.learning_hr.learning_hr.database.memory_store import InMemoryRecordStore
from src.learning_hr.learning_hr.integrations.blob_store import InMemoryBlobStore
from src.learning_hr.learning_hr.integrations.network_info import StaticNetworkInfo
from src.learning_hr.learning_hr.users.model import UserProfile


def main():
    container = wire(store=InMemoryRecordStore(), blobs=InMemoryBlobStore(), network=StaticNetworkInfo("10.0.0.5"))
    container.policy_service.update_policy(
        current_role=Role.ADMIN,
        work_start_time="08:00",
        work_end_time="17:00",
        late_threshold_minutes=15,
        working_days_per_month=26,
        allowed_network_addresses=["10.0.0.5"],
    )
    container.users_repo.save(
        UserProfile(uid="e1", display_name="Nguyễn Văn A", role=Role.STAFF, monthly_salary=Decimal("10000000"))
    )

    record = container.attendance_service.check_in("e1", photo=b"jpeg", now=datetime(2024, 3, 4, 8, 20))
    print(record.status.value, record.late_minutes)
    record = container.attendance_service.check_out("e1", photo=b"jpeg", now=datetime(2024, 3, 4, 11, 0))
    print(record.status.value, record.worked_hours)
    print(container.payroll_service.preview_monthly("e1", "2024-03"))


if __name__ == "__main__":
    main()
