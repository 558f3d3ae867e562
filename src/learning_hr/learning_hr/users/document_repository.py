from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..database.documents import decode_decimal, encode_decimal, require
from ..database.record_store import Document, RecordStore
from .model import UserProfile
from .repository import UserRepository

COLLECTION = "users"


def user_to_document(user: UserProfile) -> Document:
    return {
        "uid": user.uid,
        "displayName": user.display_name,
        "email": user.email,
        "role": user.role.value,
        "departmentId": user.department_id,
        "monthlySalary": encode_decimal(user.monthly_salary),
    }


def user_from_document(doc: Document) -> UserProfile:
    try:
        role = Role(require(doc, "role"))
    except ValueError:
        raise ValidationError(f"Vai trò không hợp lệ: {doc.get('role')!r}")
    uid = str(require(doc, "uid"))
    return UserProfile(
        uid=uid,
        display_name=doc.get("displayName") or doc.get("email") or uid,
        role=role,
        email=doc.get("email") or "",
        department_id=doc.get("departmentId"),
        monthly_salary=decode_decimal(doc.get("monthlySalary")),
    )


class DocumentUserRepository(UserRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get_by_id(self, uid: str) -> Optional[UserProfile]:
        doc = self._store.get(COLLECTION, uid)
        return user_from_document(doc) if doc else None

    def list_by_role(self, role: Role) -> Sequence[UserProfile]:
        users = [user_from_document(d) for d in self._store.query(COLLECTION, {"role": role.value})]
        users.sort(key=lambda u: u.display_name)
        return users

    def save(self, user: UserProfile) -> None:
        self._store.put(COLLECTION, user.uid, user_to_document(user))
