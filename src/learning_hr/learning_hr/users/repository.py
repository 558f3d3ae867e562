from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import Role
from .model import UserProfile


class UserRepository(Protocol):
    def get_by_id(self, uid: str) -> Optional[UserProfile]:
        raise NotImplementedError

    def list_by_role(self, role: Role) -> Sequence[UserProfile]:
        raise NotImplementedError

    def save(self, user: UserProfile) -> None:
        raise NotImplementedError
