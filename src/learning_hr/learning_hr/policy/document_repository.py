from __future__ import annotations

from typing import Optional

from ..core.constants import POLICY_KEY
from ..database.documents import decode_datetime, decode_int, decode_time, encode_datetime, encode_time, require
from ..database.record_store import Document, RecordStore
from .model import CompanyPolicy
from .repository import PolicyRepository

COLLECTION = "companySettings"


def policy_to_document(policy: CompanyPolicy) -> Document:
    return {
        "id": POLICY_KEY,
        "workStartTime": encode_time(policy.work_start_time),
        "workEndTime": encode_time(policy.work_end_time),
        "lateThresholdMinutes": policy.late_threshold_minutes,
        "workingDaysPerMonth": policy.working_days_per_month,
        "allowedIPs": sorted(policy.allowed_network_addresses),
        "createdAt": encode_datetime(policy.created_at),
        "updatedAt": encode_datetime(policy.updated_at),
    }


def policy_from_document(doc: Document) -> CompanyPolicy:
    return CompanyPolicy(
        work_start_time=decode_time(require(doc, "workStartTime")),
        work_end_time=decode_time(require(doc, "workEndTime")),
        late_threshold_minutes=decode_int(require(doc, "lateThresholdMinutes"), "lateThresholdMinutes"),
        working_days_per_month=decode_int(require(doc, "workingDaysPerMonth"), "workingDaysPerMonth"),
        allowed_network_addresses=frozenset(str(ip) for ip in doc.get("allowedIPs") or []),
        created_at=decode_datetime(doc.get("createdAt")),
        updated_at=decode_datetime(doc.get("updatedAt")),
    )


class DocumentPolicyRepository(PolicyRepository):
    def __init__(self, store: RecordStore):
        self._store = store

    def get(self) -> Optional[CompanyPolicy]:
        doc = self._store.get(COLLECTION, POLICY_KEY)
        return policy_from_document(doc) if doc else None

    def save(self, policy: CompanyPolicy) -> None:
        self._store.put(COLLECTION, POLICY_KEY, policy_to_document(policy))
