from datetime import date

import pytest

from src.learning_hr.learning_hr.main import create_app


@pytest.fixture
def client(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container)
    return app.test_client()


def _login(client, user_id, role):
    with client.session_transaction() as sess:
        sess["user_id"] = user_id
        sess["role"] = role


def test_requires_login(client):
    response = client.get("/api/policy")
    assert response.status_code == 401


def test_staff_cannot_update_policy(client):
    _login(client, "e1", "staff")
    response = client.put("/api/policy", json={"working_days_per_month": 20})
    assert response.status_code == 403


def test_admin_updates_policy(client):
    _login(client, "admin", "admin")
    response = client.put(
        "/api/policy",
        json={
            "work_start_time": "08:00",
            "work_end_time": "17:00",
            "late_threshold_minutes": 5,
            "working_days_per_month": 24,
            "allowed_network_addresses": ["203.0.113.10"],
        },
    )
    assert response.status_code == 200
    assert response.get_json()["data"]["working_days_per_month"] == 24


def test_invalid_policy_is_bad_request(client):
    _login(client, "admin", "admin")
    response = client.put("/api/policy", json={"working_days_per_month": 0})
    assert response.status_code == 400
    assert response.get_json()["success"] is False


def test_admin_adds_current_network_address(client, network):
    network.address = "198.51.100.7"
    _login(client, "admin", "admin")

    response = client.post("/api/policy/network-addresses")

    assert response.status_code == 201
    assert response.get_json()["data"]["allowed_network_addresses"] == ["198.51.100.7", "203.0.113.10"]


def test_admin_adds_explicit_network_address(client):
    _login(client, "admin", "admin")

    response = client.post("/api/policy/network-addresses", json={"address": " 192.0.2.1 "})

    assert response.status_code == 201
    assert "192.0.2.1" in response.get_json()["data"]["allowed_network_addresses"]


def test_staff_cannot_add_network_address(client, container):
    _login(client, "e1", "staff")

    response = client.post("/api/policy/network-addresses", json={"address": "192.0.2.1"})

    assert response.status_code == 403
    assert container.policy_service.get_policy().allowed_network_addresses == frozenset({"203.0.113.10"})


def test_check_in_from_office_network(client, container):
    _login(client, "e1", "staff")
    response = client.post(
        "/api/attendance/check-in",
        json={"photo": "data:image/jpeg;base64,/9j/4AAQ"},
    )

    assert response.status_code == 201
    assert response.get_json()["data"]["employee_id"] == "e1"
    assert container.attendance_service.today_record("e1") is not None


def test_check_in_outside_office_is_forbidden(client, container, network):
    network.address = "198.51.100.7"
    _login(client, "e1", "staff")
    response = client.post("/api/attendance/check-in", json={"photo": "data:image/jpeg;base64,/9j/4AAQ"})

    assert response.status_code == 403
    assert container.attendance_repo.get_for_employee_and_date("e1", date.today()) is None


def test_quiz_submit_and_retry_flow(client, store):
    store.put("questions", "q1", {"id": "q1", "lessonId": "l1", "options": ["a", "b"], "correctAnswer": 1, "order": 1})
    _login(client, "u1", "student")

    response = client.post("/api/quizzes/l1/submit", json={"course_id": "c1", "answers": [1], "time_spent": 12})
    assert response.status_code == 201
    assert response.get_json()["passed"] is True

    response = client.post("/api/quizzes/l1/submit", json={"course_id": "c1", "answers": [0]})
    assert response.status_code == 400

    assert client.delete("/api/quizzes/l1/result").status_code == 200
    response = client.post("/api/quizzes/l1/submit", json={"course_id": "c1", "answers": [0]})
    assert response.get_json()["data"]["score"] == 0


def test_quiz_null_answer_is_accepted_and_string_rejected(client, store):
    store.put("questions", "q1", {"id": "q1", "lessonId": "l1", "options": ["a", "b"], "correctAnswer": 1, "order": 1})
    store.put("questions", "q2", {"id": "q2", "lessonId": "l1", "options": ["a", "b"], "correctAnswer": 0, "order": 2})
    _login(client, "u1", "student")

    response = client.post("/api/quizzes/l1/submit", json={"course_id": "c1", "answers": ["1", 0]})
    assert response.status_code == 400

    response = client.post("/api/quizzes/l1/submit", json={"course_id": "c1", "answers": [None, 0]})
    assert response.status_code == 201
    assert response.get_json()["data"]["answers"] == [-1, 0]
    assert response.get_json()["data"]["score"] == 50


def test_progress_tick_and_resume(client):
    _login(client, "u1", "student")
    response = client.post(
        "/api/progress/tick",
        json={"course_id": "c1", "lesson_id": "l1", "watched_seconds": 42.5, "total_seconds": 300},
    )
    assert response.get_json()["changed"] is True

    response = client.get("/api/progress/l1/resume")
    assert response.get_json()["data"]["position"] == 42


@pytest.mark.parametrize(
    "field, value",
    [("watched_seconds", "nan"), ("watched_seconds", "Infinity"), ("total_seconds", "inf")],
)
def test_progress_tick_rejects_non_finite_numbers(client, field, value):
    _login(client, "u1", "student")
    body = {"course_id": "c1", "lesson_id": "l1", "watched_seconds": 42.5, "total_seconds": 300}
    body[field] = value

    response = client.post("/api/progress/tick", json=body)

    assert response.status_code == 400
    assert client.get("/api/progress/l1/resume").get_json()["data"]["position"] == 0


def test_enrollment_request_and_approve(client, store):
    store.put("courses", "c1", {"id": "c1", "title": "Python"})

    _login(client, "u1", "student")
    assert client.post("/api/courses/c1/request").get_json()["data"]["state"] == "PENDING"

    _login(client, "admin", "admin")
    assert client.post("/api/courses/c1/students/u1/approve").get_json()["data"]["state"] == "ENROLLED"
    assert client.post("/api/courses/c1/students/u1/approve").status_code == 200
    assert client.post("/api/courses/c1/students/u1/bogus").status_code == 404


def test_payroll_preview_admin_only(client):
    _login(client, "e1", "staff")
    assert client.get("/api/payroll/2024-03/e1/preview").status_code == 403

    _login(client, "admin", "admin")
    response = client.get("/api/payroll/2024-03/e1/preview")
    assert response.status_code == 200
    assert response.get_json()["data"]["absent_days"] == 26


def test_course_progress_reports_percent(client):
    _login(client, "u1", "student")
    client.post(
        "/api/progress/tick",
        json={"course_id": "c1", "lesson_id": "l1", "watched_seconds": 150, "total_seconds": 600},
    )

    lesson = client.get("/api/progress/course/c1").get_json()["data"]["l1"]
    assert lesson["percent"] == 25.0
    assert lesson["completed"] is False
