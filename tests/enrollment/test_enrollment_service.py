import pytest

from src.learning_hr.learning_hr.core.enums import EnrollmentState, Role
from src.learning_hr.learning_hr.core.exceptions import AuthorizationError, InvalidTransition, ValidationError
from src.learning_hr.learning_hr.enrollment.document_repository import DocumentCourseRepository
from src.learning_hr.learning_hr.enrollment.service import EnrollmentService


@pytest.fixture
def svc(store):
    store.put("courses", "c1", {"id": "c1", "title": "Python cơ bản", "description": "...", "students": []})
    return EnrollmentService(DocumentCourseRepository(store))


def test_approve_moves_student_in_one_write(svc, store):
    svc.request(current_role=Role.STUDENT, course_id="c1", user_id="u1")
    state = svc.approve(current_role=Role.ADMIN, course_id="c1", user_id="u1")

    doc = store.get("courses", "c1")
    assert state == EnrollmentState.ENROLLED
    assert doc["students"] == ["u1"]
    assert doc["pendingStudents"] == []
    assert doc["description"] == "..."


def test_double_request_is_idempotent(svc, store):
    svc.request(current_role=Role.STUDENT, course_id="c1", user_id="u1")
    svc.request(current_role=Role.STUDENT, course_id="c1", user_id="u1")

    assert store.get("courses", "c1")["pendingStudents"] == ["u1"]


def test_pending_requests_listing(svc):
    svc.request(current_role=Role.STUDENT, course_id="c1", user_id="u1")
    svc.request(current_role=Role.STUDENT, course_id="c1", user_id="u2")

    pending = svc.pending_requests()
    assert [(p.course_title, p.user_id) for p in pending] == [("Python cơ bản", "u1"), ("Python cơ bản", "u2")]


def test_roles_are_enforced(svc):
    with pytest.raises(AuthorizationError):
        svc.request(current_role=Role.STAFF, course_id="c1", user_id="u1")
    with pytest.raises(AuthorizationError):
        svc.approve(current_role=Role.STUDENT, course_id="c1", user_id="u1")
    with pytest.raises(AuthorizationError):
        svc.unenroll(current_role=Role.STUDENT, current_user_id="u2", course_id="c1", user_id="u1")


def test_student_can_leave_course(svc):
    svc.admit(current_role=Role.ADMIN, course_id="c1", user_id="u1")
    state = svc.unenroll(current_role=Role.STUDENT, current_user_id="u1", course_id="c1", user_id="u1")

    assert state == EnrollmentState.NONE


def test_approve_without_request_rejected(svc):
    with pytest.raises(InvalidTransition):
        svc.approve(current_role=Role.ADMIN, course_id="c1", user_id="u1")


def test_unknown_course_rejected(svc):
    with pytest.raises(ValidationError):
        svc.state_of(course_id="nope", user_id="u1")


def test_repeated_approve_writes_nothing(store, monkeypatch):
    store.put("courses", "c2", {"id": "c2", "title": "SQL", "students": ["u1", "u2"], "pendingStudents": []})
    svc = EnrollmentService(DocumentCourseRepository(store))
    writes = []
    real_put = store.put
    monkeypatch.setattr(store, "put", lambda *args: writes.append(args) or real_put(*args))

    state = svc.approve(current_role=Role.ADMIN, course_id="c2", user_id="u1")

    assert state == EnrollmentState.ENROLLED
    assert writes == []
    assert store.get("courses", "c2")["students"] == ["u1", "u2"]
