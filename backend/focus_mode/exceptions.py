"""Domain errors raised by the Focus Mode services."""

from typing import Optional


class FocusModeError(Exception):
    """Base exception for Focus Mode errors."""
    pass


class StudentNotFoundError(FocusModeError):
    """Raised when a student id is unknown."""
    def __init__(self, student_id, message: str = ""):
        self.student_id = student_id
        self.message = message or f"Student {student_id} not found"
        super().__init__(self.message)


class NoLockedStudentError(FocusModeError):
    """Raised when an intervention is assigned while nobody is locked."""
    def __init__(self, message: str = "No locked student found"):
        self.message = message
        super().__init__(self.message)


class InvalidStateError(FocusModeError):
    """Raised when an operation is not allowed in the student's current status."""
    def __init__(self, message: str, student_id: Optional[int] = None):
        self.student_id = student_id
        self.message = message
        super().__init__(self.message)


class StoreFailureError(FocusModeError):
    """Raised when persisted data cannot be read or written consistently."""
    pass


class DanglingInterventionError(StoreFailureError):
    """Raised when a student references an intervention row that does not exist."""
    def __init__(self, student_id: int, intervention_id: int):
        self.student_id = student_id
        self.intervention_id = intervention_id
        self.message = (
            f"Student {student_id} references missing intervention {intervention_id}"
        )
        super().__init__(self.message)


class NotificationError(FocusModeError):
    """Raised when the dispatcher webhook call fails."""
    def __init__(self, url: str, message: str = ""):
        self.url = url
        self.message = message or f"Webhook call to {url} failed"
        super().__init__(self.message)
