from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Iterable, Optional

from ..common.datetime_utils import now_local, parse_hhmm
from ..common.validators import normalize_address_list, require_non_negative_int
from ..core.constants import DEFAULT_LATE_THRESHOLD_MINUTES, DEFAULT_WORK_END, DEFAULT_WORK_START, DEFAULT_WORKING_DAYS
from ..core.enums import Role
from ..core.exceptions import AuthorizationError
from .model import CompanyPolicy
from .repository import PolicyRepository

logger = logging.getLogger(__name__)


class PolicyService:
    """Use case: read and (admin) update the company policy."""

    def __init__(self, policies: PolicyRepository):
        self._policies = policies

    def get_policy(self) -> Optional[CompanyPolicy]:
        return self._policies.get()

    def update_policy(
        self,
        *,
        current_role: Role,
        work_start_time: str = DEFAULT_WORK_START,
        work_end_time: str = DEFAULT_WORK_END,
        late_threshold_minutes: int = DEFAULT_LATE_THRESHOLD_MINUTES,
        working_days_per_month: int = DEFAULT_WORKING_DAYS,
        allowed_network_addresses: Iterable[str] = (),
        now: Optional[datetime] = None,
    ) -> CompanyPolicy:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")

        now = now or now_local()
        existing = self._policies.get()

        policy = CompanyPolicy(
            work_start_time=parse_hhmm(work_start_time),
            work_end_time=parse_hhmm(work_end_time),
            late_threshold_minutes=require_non_negative_int(late_threshold_minutes, "Ngưỡng đi muộn"),
            working_days_per_month=require_non_negative_int(working_days_per_month, "Số ngày công"),
            allowed_network_addresses=frozenset(normalize_address_list(allowed_network_addresses)),
            created_at=existing.created_at if existing and existing.created_at else now,
            updated_at=now,
        ).validate()

        self._policies.save(policy)
        logger.info(
            "policy updated: %s-%s threshold=%s days=%s ips=%d",
            work_start_time,
            work_end_time,
            policy.late_threshold_minutes,
            policy.working_days_per_month,
            len(policy.allowed_network_addresses),
        )
        return policy

    def add_network_address(self, *, current_role: Role, address: str) -> CompanyPolicy:
        if current_role != Role.ADMIN:
            raise AuthorizationError("Bạn không có quyền")

        policy = self._policies.get() or CompanyPolicy()
        addresses = normalize_address_list([*sorted(policy.allowed_network_addresses), address])
        now = now_local()
        updated = replace(
            policy,
            allowed_network_addresses=frozenset(addresses),
            created_at=policy.created_at or now,
            updated_at=now,
        )
        self._policies.save(updated)
        return updated
