from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Vai trò người dùng dùng cho phân quyền."""

    ADMIN = "admin"
    STAFF = "staff"
    TEACHER = "teacher"
    STUDENT = "student"


class AttendanceStatus(str, Enum):
    """Trạng thái chấm công chuẩn hoá lưu trong CSDL."""

    PRESENT = "present"
    LATE = "late"
    HALF_DAY = "half-day"
    ABSENT = "absent"


class EnrollmentState(str, Enum):
    """Quan hệ giữa học viên và khoá học."""

    NONE = "NONE"
    PENDING = "PENDING"
    ENROLLED = "ENROLLED"


class EnrollmentAction(str, Enum):
    REQUEST = "request"
    CANCEL = "cancel"
    APPROVE = "approve"
    REJECT = "reject"
    UNENROLL = "unenroll"
    ADMIT = "admit"


class PayrollMethod(str, Enum):
    """Which deduction rule produced a salary record."""

    ATTENDANCE = "attendance"
    MANUAL = "manual"
