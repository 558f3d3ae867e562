from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..core.enums import Role


@dataclass(frozen=True)
class UserProfile:
    """Thực thể miền (domain): hồ sơ người dùng.

    Lưu ý: Đây là đối tượng dữ liệu thuần (không chứa code truy cập DB).
    """

    uid: str
    display_name: str
    role: Role
    email: str = ""
    department_id: Optional[str] = None
    monthly_salary: Optional[Decimal] = None
