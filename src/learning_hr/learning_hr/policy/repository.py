from __future__ import annotations

from typing import Optional, Protocol

from .model import CompanyPolicy


class PolicyRepository(Protocol):
    def get(self) -> Optional[CompanyPolicy]:
        raise NotImplementedError

    def save(self, policy: CompanyPolicy) -> None:
        raise NotImplementedError
