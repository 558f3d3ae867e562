"""Seed chính sách mặc định và vài tài khoản demo vào record store hiện hành."""

from __future__ import annotations

import importlib
import sys
from decimal import Decimal
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.learning_hr.learning_hr.container import build_container
from src.learning_hr.learning_hr.core.enums import Role
from src.learning_hr.learning_hr.users.model import UserProfile

DEMO_USERS = (
    UserProfile(uid="admin", display_name="Admin Demo", role=Role.ADMIN, email="admin@example.com"),
    UserProfile(
        uid="nguyenvana",
        display_name="Nguyễn Văn A",
        role=Role.STAFF,
        email="a.nguyen@example.com",
        department_id="HR",
        monthly_salary=Decimal("10000000"),
    ),
    UserProfile(uid="hocvien01", display_name="Học viên 01", role=Role.STUDENT, email="hv01@example.com"),
)


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings)

    if container.policy_service.get_policy() is None:
        container.policy_service.update_policy(
            current_role=Role.ADMIN,
            work_start_time="08:00",
            work_end_time="17:00",
            late_threshold_minutes=15,
            working_days_per_month=26,
            allowed_network_addresses=[],
        )
    for user in DEMO_USERS:
        container.users_repo.save(user)
    print(f"OK: seeded policy + {len(DEMO_USERS)} users")


if __name__ == "__main__":
    main()
