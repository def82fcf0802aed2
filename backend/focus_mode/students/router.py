"""Router for student focus state, check-ins and interventions."""
import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, status
from sqlalchemy.orm import Session

from ..database import get_db
from ..dispatcher import DispatcherClient, get_dispatcher
from ..exceptions import InvalidStateError, NoLockedStudentError, StudentNotFoundError
from .schemas import (
    AssignInterventionRequest, CompleteInterventionRequest, DailyCheckinRequest, StudentState,
)
from .service import FocusService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Focus Mode"])


def get_focus_service(
    background_tasks: BackgroundTasks,
    db: Session = Depends(get_db),
    dispatcher: DispatcherClient = Depends(get_dispatcher),
) -> FocusService:
    """Dependency to get an instance of FocusService."""
    return FocusService(db, dispatcher=dispatcher, schedule=background_tasks.add_task)


@router.get("/student-state/{student_id}", response_model=StudentState)
async def get_student_state(
    student_id: int,
    service: FocusService = Depends(get_focus_service),
):
    """Get a student's status and active intervention."""
    try:
        return service.get_state(student_id)
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)


@router.post("/daily-checkin", response_model=StudentState)
async def daily_checkin(
    checkin: DailyCheckinRequest,
    service: FocusService = Depends(get_focus_service),
):
    """Submit a daily check-in; a failing one locks the student."""
    try:
        return service.submit_daily_checkin(
            checkin.student_id, checkin.quiz_score, checkin.focus_minutes
        )
    except StudentNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except InvalidStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)


@router.post("/assign-intervention", response_model=StudentState)
async def assign_intervention(
    assignment: AssignInterventionRequest,
    service: FocusService = Depends(get_focus_service),
):
    """Assign a remediation task to the latest locked student. Called by the dispatcher."""
    logger.info(f"Received intervention request: {assignment.task_title!r}")
    try:
        return service.assign_intervention(assignment.task_title, assignment.task_description)
    except NoLockedStudentError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)
    except InvalidStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)


@router.post("/complete-intervention", response_model=StudentState)
async def complete_intervention(
    completion: CompleteInterventionRequest,
    service: FocusService = Depends(get_focus_service),
):
    """Complete the active intervention and unlock the student."""
    try:
        return service.complete_intervention(completion.student_id)
    except InvalidStateError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=e.message)
