"""Student model."""

from sqlalchemy import Column, String, DateTime, ForeignKey, Enum as SQLEnum, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base
from .enums import StudentStatus


class Student(Base):
    """A student tracked by daily focus check-ins."""
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    status = Column(
        SQLEnum(StudentStatus, name="student_status"),
        nullable=False,
        default=StudentStatus.normal,
    )
    # students <-> interventions reference each other
    current_intervention_id = Column(
        Integer,
        ForeignKey("interventions.id", use_alter=True, name="fk_students_current_intervention"),
        nullable=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    daily_logs = relationship(
        "DailyLog", back_populates="student", order_by="DailyLog.id"
    )
    interventions = relationship(
        "Intervention",
        back_populates="student",
        foreign_keys="Intervention.student_id",
        order_by="Intervention.id",
    )

    def __repr__(self):
        return f"<Student(id={self.id}, name='{self.name}', status={self.status})>"

    @property
    def is_normal(self) -> bool:
        return self.status == StudentStatus.normal

    @property
    def is_locked(self) -> bool:
        return self.status == StudentStatus.locked

    @property
    def is_remedial(self) -> bool:
        return self.status == StudentStatus.remedial

    @property
    def has_active_intervention(self) -> bool:
        return self.current_intervention_id is not None
