from datetime import datetime

import pytest

from src.learning_hr.learning_hr.progress.document_repository import DocumentProgressRepository
from src.learning_hr.learning_hr.progress.service import ProgressService


class CountingStore:
    def __init__(self, inner):
        self.inner = inner
        self.writes = 0

    def get(self, collection, key):
        return self.inner.get(collection, key)

    def put(self, collection, key, record):
        self.writes += 1
        self.inner.put(collection, key, record)

    def query(self, collection, filter):
        return self.inner.query(collection, filter)

    def delete(self, collection, key):
        self.inner.delete(collection, key)


def _tick(svc, watched, total=600, lesson="l1"):
    return svc.record_tick(
        user_id="u1",
        course_id="c1",
        lesson_id=lesson,
        watched_seconds=watched,
        total_seconds=total,
        now=datetime(2024, 3, 4, 10, 0),
    )


def test_unchanged_tick_is_not_written(store):
    counting = CountingStore(store)
    svc = ProgressService(DocumentProgressRepository(counting))

    _tick(svc, 100)
    _tick(svc, 100)
    _tick(svc, 50)

    assert counting.writes == 1


def test_two_devices_never_regress(store):
    # Each device reports from its own position; the stored value only grows.
    svc = ProgressService(DocumentProgressRepository(store))
    _tick(svc, 560)
    _tick(svc, 120)

    assert svc.resume_position(user_id="u1", lesson_id="l1") == 560
    progress = svc.course_progress(user_id="u1", course_id="c1")["l1"]
    assert progress.completed


def test_course_progress_groups_lessons(store):
    svc = ProgressService(DocumentProgressRepository(store))
    _tick(svc, 100, lesson="l1")
    _tick(svc, 200, lesson="l2")

    progress = svc.course_progress(user_id="u1", course_id="c1")
    assert sorted(progress) == ["l1", "l2"]
    assert progress["l2"].watched_seconds == 200


@pytest.mark.parametrize(
    "reports",
    [
        [10, 300, 20, 560, 0, 400],
        [599.9, 1, 1],
        [0.4, 0.9, 120.5, 119.2],
        [550, 540, 541, 30],
    ],
)
def test_stored_progress_is_monotonic(store, reports):
    svc = ProgressService(DocumentProgressRepository(store))
    watched, completed = 0, False

    for report in reports:
        _tick(svc, report)
        stored = svc.course_progress(user_id="u1", course_id="c1")["l1"]
        assert stored.watched_seconds >= watched
        assert stored.completed or not completed
        watched, completed = stored.watched_seconds, stored.completed

    assert watched == int(max(reports))
    assert completed == (max(reports) / 600 > 0.9)
