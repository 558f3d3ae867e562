from decimal import Decimal

import pytest

from src.learning_hr.learning_hr.core.enums import Role
from src.learning_hr.learning_hr.core.exceptions import ValidationError
from src.learning_hr.learning_hr.users.document_repository import DocumentUserRepository, user_from_document


def test_display_name_falls_back_to_email():
    user = user_from_document({"uid": "u1", "role": "student", "email": "hv@example.com"})
    assert user.display_name == "hv@example.com"
    assert user.monthly_salary is None


def test_unknown_role_rejected():
    with pytest.raises(ValidationError):
        user_from_document({"uid": "u1", "role": "owner"})


def test_list_by_role(store):
    store.put("users", "a", {"uid": "a", "role": "staff", "displayName": "Bình", "monthlySalary": "9000000"})
    store.put("users", "b", {"uid": "b", "role": "staff", "displayName": "An"})
    store.put("users", "c", {"uid": "c", "role": "student", "displayName": "Cường"})

    staff = DocumentUserRepository(store).list_by_role(Role.STAFF)
    assert [u.uid for u in staff] == ["b", "a"]
    assert staff[1].monthly_salary == Decimal("9000000")
