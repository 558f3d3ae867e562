from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from ..core.enums import EnrollmentAction, EnrollmentState, Role
from ..core.exceptions import AuthorizationError, ValidationError
from .model import CourseMembership
from .repository import CourseRepository
from .state_machine import apply, state_of

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PendingRequest:
    course_id: str
    course_title: str
    user_id: str


class EnrollmentService:
    """Use case: course membership (request, approve, reject, leave)."""

    def __init__(self, courses: CourseRepository):
        self._courses = courses

    def _course(self, course_id: str) -> CourseMembership:
        course = self._courses.get(course_id)
        if not course:
            raise ValidationError("Khoá học không tồn tại")
        return course

    def _act(self, course_id: str, user_id: str, action: EnrollmentAction) -> EnrollmentState:
        course = self._course(course_id)
        updated = apply(course, user_id, action)
        if updated != course:
            self._courses.save_membership(updated)
            logger.info("enrollment %s %s -> %s", action.value, user_id, course_id)
        return state_of(updated, user_id)

    def state_of(self, *, course_id: str, user_id: str) -> EnrollmentState:
        return state_of(self._course(course_id), user_id)

    def request(self, *, current_role: Role, course_id: str, user_id: str) -> EnrollmentState:
        if current_role != Role.STUDENT:
            raise AuthorizationError("Chỉ học viên mới được đăng ký khoá học")
        return self._act(course_id, user_id, EnrollmentAction.REQUEST)

    def cancel(self, *, current_role: Role, course_id: str, user_id: str) -> EnrollmentState:
        if current_role != Role.STUDENT:
            raise AuthorizationError("Bạn không có quyền")
        return self._act(course_id, user_id, EnrollmentAction.CANCEL)

    def approve(self, *, current_role: Role, course_id: str, user_id: str) -> EnrollmentState:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")
        return self._act(course_id, user_id, EnrollmentAction.APPROVE)

    def reject(self, *, current_role: Role, course_id: str, user_id: str) -> EnrollmentState:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")
        return self._act(course_id, user_id, EnrollmentAction.REJECT)

    def admit(self, *, current_role: Role, course_id: str, user_id: str) -> EnrollmentState:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")
        return self._act(course_id, user_id, EnrollmentAction.ADMIT)

    def unenroll(
        self,
        *,
        current_role: Role,
        current_user_id: str,
        course_id: str,
        user_id: str,
    ) -> EnrollmentState:
        if current_role != Role.ADMIN and current_user_id != user_id:
            raise AuthorizationError("Bạn không có quyền")
        return self._act(course_id, user_id, EnrollmentAction.UNENROLL)

    def pending_requests(self) -> Sequence[PendingRequest]:
        return [
            PendingRequest(course_id=c.course_id, course_title=c.title or c.course_id, user_id=uid)
            for c in self._courses.list_all()
            for uid in c.pending_students
        ]
