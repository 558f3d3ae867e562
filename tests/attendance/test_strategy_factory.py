from datetime import datetime
from decimal import Decimal

from src.learning_hr.learning_hr.attendance.factory import AttendanceStrategyFactory
from src.learning_hr.learning_hr.attendance.strategies.half_day_strategy import HalfDayStrategy
from src.learning_hr.learning_hr.attendance.strategies.late_strategy import LateStrategy
from src.learning_hr.learning_hr.attendance.strategies.present_strategy import PresentStrategy


def test_factory_checkin_within_threshold(policy):
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in_at=datetime(2024, 3, 4, 8, 15, 59), policy=policy)

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkin_after_threshold(policy):
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in_at=datetime(2024, 3, 4, 8, 16), policy=policy)

    assert isinstance(strategy, LateStrategy)


def test_factory_checkin_without_policy_is_present():
    factory = AttendanceStrategyFactory()
    strategy = factory.for_checkin(check_in_at=datetime(2024, 3, 4, 11, 0), policy=None)

    assert isinstance(strategy, PresentStrategy)


def test_factory_checkout_short_day_is_half_day():
    factory = AttendanceStrategyFactory()

    assert isinstance(factory.for_checkout(worked_hours=Decimal("3.9")), HalfDayStrategy)
    assert isinstance(factory.for_checkout(worked_hours=Decimal("4.0")), PresentStrategy)
