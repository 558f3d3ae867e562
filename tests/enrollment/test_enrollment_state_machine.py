import pytest

from src.learning_hr.learning_hr.core.enums import EnrollmentAction, EnrollmentState
from src.learning_hr.learning_hr.core.exceptions import InvalidTransition
from src.learning_hr.learning_hr.enrollment.model import CourseMembership
from src.learning_hr.learning_hr.enrollment.state_machine import apply, state_of, transition


def test_happy_path():
    course = CourseMembership(course_id="c1")

    course = apply(course, "u1", EnrollmentAction.REQUEST)
    assert course.pending_students == ("u1",)
    course = apply(course, "u1", EnrollmentAction.APPROVE)
    assert course.students == ("u1",)
    assert course.pending_students == ()
    course = apply(course, "u1", EnrollmentAction.UNENROLL)
    assert state_of(course, "u1") == EnrollmentState.NONE


@pytest.mark.parametrize(
    "state, action",
    [
        (EnrollmentState.PENDING, EnrollmentAction.REQUEST),
        (EnrollmentState.ENROLLED, EnrollmentAction.APPROVE),
        (EnrollmentState.NONE, EnrollmentAction.CANCEL),
        (EnrollmentState.NONE, EnrollmentAction.REJECT),
        (EnrollmentState.NONE, EnrollmentAction.UNENROLL),
    ],
)
def test_repeated_actions_are_no_ops(state, action):
    assert transition(state, action) == state


@pytest.mark.parametrize(
    "state, action",
    [
        (EnrollmentState.NONE, EnrollmentAction.APPROVE),
        (EnrollmentState.ENROLLED, EnrollmentAction.REQUEST),
        (EnrollmentState.ENROLLED, EnrollmentAction.CANCEL),
        (EnrollmentState.PENDING, EnrollmentAction.UNENROLL),
    ],
)
def test_invalid_transitions_raise(state, action):
    with pytest.raises(InvalidTransition):
        transition(state, action)


def test_admit_moves_pending_student_straight_in():
    course = CourseMembership(course_id="c1", pending_students=("u1", "u2"))
    course = apply(course, "u1", EnrollmentAction.ADMIT)

    assert course.students == ("u1",)
    assert course.pending_students == ("u2",)


def test_repeated_approve_keeps_member_order():
    course = CourseMembership(course_id="c1", students=("u1", "u2"), pending_students=("u3",))

    assert apply(course, "u1", EnrollmentAction.APPROVE) is course
    assert apply(course, "u3", EnrollmentAction.REQUEST) is course
    assert apply(course, "u9", EnrollmentAction.CANCEL) is course
