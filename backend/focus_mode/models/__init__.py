"""SQLAlchemy models for the Focus Mode service."""

from .enums import StudentStatus, CheckinStatus, InterventionStatus
from .student import Student
from .daily_log import DailyLog
from .intervention import Intervention, DEFAULT_DESCRIPTION

__all__ = [
    "Student",
    "DailyLog",
    "Intervention",
    "StudentStatus",
    "CheckinStatus",
    "InterventionStatus",
    "DEFAULT_DESCRIPTION",
]
