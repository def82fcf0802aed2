"""Request and response schemas for student focus tracking."""
from typing import Optional

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from ..models import StudentStatus, InterventionStatus

MAX_QUIZ_SCORE = 10


class DailyCheckinRequest(BaseModel):
    student_id: int = Field(..., validation_alias=AliasChoices("student_id", "studentId"))
    quiz_score: float = Field(
        ...,
        ge=0,
        le=MAX_QUIZ_SCORE,
        strict=True,
        allow_inf_nan=False,
        validation_alias=AliasChoices("quiz_score", "quizScore"),
    )
    focus_minutes: float = Field(
        ...,
        ge=0,
        strict=True,
        allow_inf_nan=False,
        validation_alias=AliasChoices("focus_minutes", "focusMinutes"),
    )


class AssignInterventionRequest(BaseModel):
    task_title: str = Field(
        ..., max_length=255, validation_alias=AliasChoices("task_title", "taskTitle")
    )
    task_description: Optional[str] = Field(
        None, validation_alias=AliasChoices("task_description", "taskDescription")
    )

    @field_validator('task_title')
    @classmethod
    def title_not_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError('Task title must not be blank')
        return v


class CompleteInterventionRequest(BaseModel):
    student_id: int = Field(..., validation_alias=AliasChoices("student_id", "studentId"))


class InterventionState(BaseModel):
    id: int
    title: str
    description: Optional[str]
    status: InterventionStatus

    model_config = ConfigDict(from_attributes=True)


class StudentState(BaseModel):
    """A student's profile merged with the active intervention, if any."""
    id: int
    name: str
    status: StudentStatus
    current_intervention_id: Optional[int] = None
    intervention: Optional[InterventionState] = None

    model_config = ConfigDict(from_attributes=True)
