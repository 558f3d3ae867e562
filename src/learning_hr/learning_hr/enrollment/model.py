from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CourseMembership:
    """Thành viên khoá học: học viên chính thức và học viên chờ duyệt.

    A user is never in both tuples.
    """

    course_id: str
    students: tuple[str, ...] = ()
    pending_students: tuple[str, ...] = ()
    title: Optional[str] = None
    teacher_id: Optional[str] = None
