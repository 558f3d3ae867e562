from __future__ import annotations

from datetime import datetime, time
from decimal import Decimal

import pytest

from src.learning_hr.learning_hr.container import Container, wire
from src.learning_hr.learning_hr.core.enums import Role
from src.learning_hr.learning_hr.database.memory_store import InMemoryRecordStore
from src.learning_hr.learning_hr.integrations.blob_store import InMemoryBlobStore
from src.learning_hr.learning_hr.integrations.network_info import StaticNetworkInfo
from src.learning_hr.learning_hr.policy.model import CompanyPolicy
from src.learning_hr.learning_hr.users.model import UserProfile

OFFICE_IP = "203.0.113.10"


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 4, 8, 0, 0)


@pytest.fixture
def policy() -> CompanyPolicy:
    return CompanyPolicy(
        work_start_time=time(8, 0),
        work_end_time=time(17, 0),
        late_threshold_minutes=15,
        working_days_per_month=26,
        allowed_network_addresses=frozenset({OFFICE_IP}),
    )


@pytest.fixture
def store() -> InMemoryRecordStore:
    return InMemoryRecordStore()


@pytest.fixture
def network() -> StaticNetworkInfo:
    return StaticNetworkInfo(OFFICE_IP)


@pytest.fixture
def blobs() -> InMemoryBlobStore:
    return InMemoryBlobStore()


@pytest.fixture
def container(store, blobs, network, policy) -> Container:
    c = wire(store=store, blobs=blobs, network=network)
    c.policy_repo.save(policy)
    c.users_repo.save(
        UserProfile(
            uid="e1",
            display_name="Nguyễn Văn A",
            role=Role.STAFF,
            department_id="HR",
            monthly_salary=Decimal("10000000"),
        )
    )
    return c
