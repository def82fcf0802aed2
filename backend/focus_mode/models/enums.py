"""Shared enums for models and schemas."""
import enum


class StudentStatus(enum.Enum):
    normal = "normal"
    locked = "locked"
    remedial = "remedial"


class CheckinStatus(enum.Enum):
    success = "success"
    failed = "failed"


class InterventionStatus(enum.Enum):
    assigned = "assigned"
    completed = "completed"
