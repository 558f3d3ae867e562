"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

DEFAULT_WORK_START = "08:00"
DEFAULT_WORK_END = "17:00"
DEFAULT_LATE_THRESHOLD_MINUTES = 15
DEFAULT_WORKING_DAYS = 26
MAX_WORKING_DAYS = 31

# Manual payroll entry always divides by a fixed month.
MANUAL_WORKING_DAYS = 26

HALF_DAY_HOURS = Decimal("4")
LATE_DAY_WEIGHT = Decimal("0.5")
HALF_DAY_WEIGHT = Decimal("0.5")

COMPLETION_RATIO = 0.9
RESUME_MIN_SECONDS = 5

QUIZ_PASS_SCORE = 70

UPLOAD_TIMEOUT_SECONDS = 30
DEFAULT_HISTORY_DAYS = 7

POLICY_KEY = "default"
