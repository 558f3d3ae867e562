from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .attendance.access_gate import AccessGate
from .attendance.document_repository import DocumentAttendanceRepository
from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .core.constants import UPLOAD_TIMEOUT_SECONDS
from .database.bootstrap import apply_schema
from .database.connection import DBConfig, DatabaseConnection
from .database.memory_store import InMemoryRecordStore
from .database.mysql_record_store import MySQLRecordStore
from .database.record_store import RecordStore
from .enrollment.document_repository import DocumentCourseRepository
from .enrollment.service import EnrollmentService
from .integrations.blob_store import BlobStore, BunnyBlobStore, InMemoryBlobStore
from .integrations.network_info import IPIFY_URL, IpifyNetworkInfo, NetworkInfo, RequestNetworkInfo
from .payroll.document_repository import DocumentSalaryRepository
from .payroll.service import PayrollService
from .policy.document_repository import DocumentPolicyRepository
from .policy.service import PolicyService
from .progress.document_repository import DocumentProgressRepository
from .progress.service import ProgressService
from .quizzes.document_repository import DocumentQuestionRepository, DocumentQuizResultRepository
from .quizzes.service import QuizAttemptPolicy
from .users.document_repository import DocumentUserRepository


@dataclass(frozen=True)
class Container:
    store: RecordStore
    blobs: BlobStore
    network: NetworkInfo

    users_repo: DocumentUserRepository
    policy_repo: DocumentPolicyRepository
    attendance_repo: DocumentAttendanceRepository
    salary_repo: DocumentSalaryRepository
    progress_repo: DocumentProgressRepository
    quiz_results_repo: DocumentQuizResultRepository
    questions_repo: DocumentQuestionRepository
    courses_repo: DocumentCourseRepository

    policy_service: PolicyService
    attendance_service: AttendanceService
    payroll_service: PayrollService
    progress_service: ProgressService
    quiz_policy: QuizAttemptPolicy
    enrollment_service: EnrollmentService


def wire(*, store: RecordStore, blobs: BlobStore, network: NetworkInfo) -> Container:
    users_repo = DocumentUserRepository(store)
    policy_repo = DocumentPolicyRepository(store)
    attendance_repo = DocumentAttendanceRepository(store)
    salary_repo = DocumentSalaryRepository(store)
    progress_repo = DocumentProgressRepository(store)
    quiz_results_repo = DocumentQuizResultRepository(store)
    questions_repo = DocumentQuestionRepository(store)
    courses_repo = DocumentCourseRepository(store)

    attendance_service = AttendanceService(
        attendance_repo,
        policy_repo,
        users_repo,
        AccessGate(network),
        blobs,
        strategy_factory=AttendanceStrategyFactory(),
    )

    return Container(
        store=store,
        blobs=blobs,
        network=network,
        users_repo=users_repo,
        policy_repo=policy_repo,
        attendance_repo=attendance_repo,
        salary_repo=salary_repo,
        progress_repo=progress_repo,
        quiz_results_repo=quiz_results_repo,
        questions_repo=questions_repo,
        courses_repo=courses_repo,
        policy_service=PolicyService(policy_repo),
        attendance_service=attendance_service,
        payroll_service=PayrollService(salary_repo, attendance_repo, policy_repo, users_repo),
        progress_service=ProgressService(progress_repo),
        quiz_policy=QuizAttemptPolicy(quiz_results_repo, questions_repo),
        enrollment_service=EnrollmentService(courses_repo),
    )


def _build_store(settings: Any) -> RecordStore:
    backend = str(getattr(settings, "RECORD_STORE", "mysql")).lower()
    if backend == "memory":
        return InMemoryRecordStore()

    config = DBConfig.from_dict(getattr(settings, "DB_CONFIG"))
    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(config)
    return MySQLRecordStore(DatabaseConnection.get_instance(config))


def _build_blobs(settings: Any) -> BlobStore:
    hostname = getattr(settings, "BUNNY_STORAGE_HOSTNAME", "")
    if not hostname:
        return InMemoryBlobStore()
    return BunnyBlobStore(
        hostname=hostname,
        zone=getattr(settings, "BUNNY_STORAGE_ZONE", ""),
        access_key=getattr(settings, "BUNNY_STORAGE_PASSWORD", ""),
        cdn_url=getattr(settings, "BUNNY_CDN_URL", ""),
        timeout=float(getattr(settings, "UPLOAD_TIMEOUT_SECONDS", UPLOAD_TIMEOUT_SECONDS)),
    )


def _build_network(settings: Any) -> NetworkInfo:
    source = str(getattr(settings, "NETWORK_SOURCE", "request")).lower()
    if source == "ipify":
        return IpifyNetworkInfo(getattr(settings, "IP_LOOKUP_URL", IPIFY_URL))
    return RequestNetworkInfo()


def build_container(settings: Any) -> Container:
    return wire(store=_build_store(settings), blobs=_build_blobs(settings), network=_build_network(settings))
