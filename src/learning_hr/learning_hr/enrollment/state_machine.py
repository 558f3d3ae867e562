from __future__ import annotations

from dataclasses import replace

from ..core.enums import EnrollmentAction, EnrollmentState
from ..core.exceptions import InvalidTransition
from .model import CourseMembership

NONE, PENDING, ENROLLED = EnrollmentState.NONE, EnrollmentState.PENDING, EnrollmentState.ENROLLED

TRANSITIONS: dict[tuple[EnrollmentState, EnrollmentAction], EnrollmentState] = {
    (NONE, EnrollmentAction.REQUEST): PENDING,
    (PENDING, EnrollmentAction.CANCEL): NONE,
    (PENDING, EnrollmentAction.APPROVE): ENROLLED,
    (PENDING, EnrollmentAction.REJECT): NONE,
    (ENROLLED, EnrollmentAction.UNENROLL): NONE,
    # Admin adds a student directly from the course screen.
    (NONE, EnrollmentAction.ADMIT): ENROLLED,
    (PENDING, EnrollmentAction.ADMIT): ENROLLED,
}

# Repeating an action whose effect already holds changes nothing.
NO_OPS: frozenset[tuple[EnrollmentState, EnrollmentAction]] = frozenset(
    {
        (PENDING, EnrollmentAction.REQUEST),
        (ENROLLED, EnrollmentAction.APPROVE),
        (ENROLLED, EnrollmentAction.ADMIT),
        (NONE, EnrollmentAction.CANCEL),
        (NONE, EnrollmentAction.REJECT),
        (NONE, EnrollmentAction.UNENROLL),
    }
)


def transition(state: EnrollmentState, action: EnrollmentAction) -> EnrollmentState:
    if (state, action) in NO_OPS:
        return state
    try:
        return TRANSITIONS[(state, action)]
    except KeyError:
        raise InvalidTransition(f"Không thể {action.value} khi trạng thái là {state.value}")


def state_of(course: CourseMembership, user_id: str) -> EnrollmentState:
    if user_id in course.students:
        return ENROLLED
    if user_id in course.pending_students:
        return PENDING
    return NONE


def apply(course: CourseMembership, user_id: str, action: EnrollmentAction) -> CourseMembership:
    """Return the membership after ``action``; the user ends up in at most one set."""
    current = state_of(course, user_id)
    target = transition(current, action)
    if target == current:
        return course

    students = tuple(s for s in course.students if s != user_id)
    pending = tuple(s for s in course.pending_students if s != user_id)
    if target == ENROLLED:
        students += (user_id,)
    elif target == PENDING:
        pending += (user_id,)
    return replace(course, students=students, pending_students=pending)
