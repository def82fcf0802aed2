"""Student state service: check-ins, locking and intervention lifecycle."""
import logging
from datetime import datetime, UTC
from typing import Any, Callable, Optional

from sqlalchemy.orm import Session

from ..dispatcher import DispatcherClient
from ..exceptions import (
    DanglingInterventionError, InvalidStateError, NoLockedStudentError, StudentNotFoundError,
)
from ..models import (
    Student, DailyLog, Intervention,
    StudentStatus, CheckinStatus, InterventionStatus, DEFAULT_DESCRIPTION,
)
from .schemas import InterventionState, StudentState

logger = logging.getLogger(__name__)

# Both thresholds are exclusive
QUIZ_SCORE_THRESHOLD = 7
FOCUS_MINUTES_THRESHOLD = 60


def evaluate_checkin(quiz_score: float, focus_minutes: float) -> bool:
    """Return True when a check-in passes."""
    return quiz_score > QUIZ_SCORE_THRESHOLD and focus_minutes > FOCUS_MINUTES_THRESHOLD


def _run_now(func: Callable[..., Any], *args: Any) -> None:
    func(*args)


class FocusService:
    """Reads and mutates a student's focus state.

    Every mutating operation runs in a single transaction and moves the
    student with a compare-and-set on the status it expects, so a
    concurrent write makes the operation fail instead of being lost.

    ``schedule`` receives the dispatcher notification and its arguments
    after commit. The HTTP layer passes ``BackgroundTasks.add_task``;
    without one the notification runs inline.
    """

    def __init__(
        self,
        db: Session,
        dispatcher: Optional[DispatcherClient] = None,
        schedule: Optional[Callable[..., Any]] = None,
    ):
        self.db = db
        self.dispatcher = dispatcher
        self.schedule = schedule or _run_now

    def _get_student(self, student_id: int) -> Student:
        student = self.db.get(Student, student_id)
        if student is None:
            raise StudentNotFoundError(student_id)
        return student

    def _compare_and_set(self, student_id: int, values: dict, *expected) -> None:
        """Update the student row only if it still matches ``expected``."""
        updated = (
            self.db.query(Student)
            .filter(Student.id == student_id, *expected)
            .update(values, synchronize_session=False)
        )
        if updated != 1:
            self.db.rollback()
            logger.warning(f"Student {student_id} changed concurrently; transaction rolled back")
            raise InvalidStateError(
                f"Student {student_id} was modified by another request", student_id
            )

    def get_state(self, student_id: int) -> StudentState:
        """Return the student's profile merged with the active intervention."""
        student = self._get_student(student_id)

        intervention = None
        if student.has_active_intervention:
            intervention = self.db.get(Intervention, student.current_intervention_id)
            if intervention is None:
                logger.error(
                    f"Student {student.id} references missing intervention "
                    f"{student.current_intervention_id}"
                )
                raise DanglingInterventionError(student.id, student.current_intervention_id)

        return StudentState(
            id=student.id,
            name=student.name,
            status=student.status,
            current_intervention_id=student.current_intervention_id,
            intervention=InterventionState.model_validate(intervention) if intervention else None,
        )

    def submit_daily_checkin(
        self, student_id: int, quiz_score: float, focus_minutes: float
    ) -> StudentState:
        """Log a check-in and lock the student if it fails."""
        student = self._get_student(student_id)
        if not student.is_normal:
            raise InvalidStateError(
                f"Check-ins are locked while student is {student.status.value}", student_id
            )

        passed = evaluate_checkin(quiz_score, focus_minutes)
        self.db.add(DailyLog(
            student_id=student.id,
            quiz_score=quiz_score,
            focus_minutes=focus_minutes,
            status=CheckinStatus.success if passed else CheckinStatus.failed,
        ))
        # The log must be written before the status change it explains
        self.db.flush()

        target = StudentStatus.normal if passed else StudentStatus.locked
        self._compare_and_set(
            student_id, {Student.status: target}, Student.status == StudentStatus.normal
        )
        self.db.commit()

        if passed:
            logger.info(f"Student {student_id} passed check-in ({quiz_score}, {focus_minutes})")
        else:
            logger.info(f"Student {student_id} failed check-in ({quiz_score}, {focus_minutes}); locked")
            if self.dispatcher is not None:
                self.schedule(
                    self.dispatcher.notify_failed_checkin, student_id, quiz_score, focus_minutes
                )

        return self.get_state(student_id)

    def assign_intervention(
        self, task_title: str, task_description: Optional[str] = None
    ) -> StudentState:
        """Attach a task to the most recently created locked student."""
        student = (
            self.db.query(Student)
            .filter(Student.status == StudentStatus.locked)
            .order_by(Student.id.desc())
            .with_for_update()
            .first()
        )
        if student is None:
            raise NoLockedStudentError()
        student_id = student.id

        intervention = Intervention(
            student_id=student_id,
            title=task_title,
            description=task_description or DEFAULT_DESCRIPTION,
            status=InterventionStatus.assigned,
        )
        self.db.add(intervention)
        # Row must exist before the student references it
        self.db.flush()

        self._compare_and_set(
            student_id,
            {
                Student.status: StudentStatus.remedial,
                Student.current_intervention_id: intervention.id,
            },
            Student.status == StudentStatus.locked,
        )
        self.db.commit()
        logger.info(f"Assigned intervention {intervention.id} to student {student_id}")

        return self.get_state(student_id)

    def complete_intervention(self, student_id: int) -> StudentState:
        """Mark the active intervention done and return the student to normal."""
        student = self.db.get(Student, student_id)
        if student is None or not student.has_active_intervention:
            raise InvalidStateError("No active intervention", student_id)

        intervention_id = student.current_intervention_id
        intervention = self.db.get(Intervention, intervention_id)
        if intervention is None:
            raise DanglingInterventionError(student_id, intervention_id)

        intervention.status = InterventionStatus.completed
        intervention.completed_at = datetime.now(UTC)
        self.db.flush()

        self._compare_and_set(
            student_id,
            {Student.status: StudentStatus.normal, Student.current_intervention_id: None},
            Student.status == StudentStatus.remedial,
            Student.current_intervention_id == intervention_id,
        )
        self.db.commit()
        logger.info(f"Student {student_id} completed intervention {intervention_id}")

        return self.get_state(student_id)
