"""Intervention model."""

from sqlalchemy import Column, String, Text, DateTime, ForeignKey, Enum as SQLEnum, Integer
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base
from .enums import InterventionStatus

DEFAULT_DESCRIPTION = "Check email for details"


class Intervention(Base):
    """Remediation task assigned to a locked student."""
    __tablename__ = "interventions"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default=DEFAULT_DESCRIPTION)
    status = Column(
        SQLEnum(InterventionStatus, name="intervention_status"),
        nullable=False,
        default=InterventionStatus.assigned,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    completed_at = Column(DateTime(timezone=True), nullable=True)

    # Relationships
    student = relationship("Student", back_populates="interventions", foreign_keys=[student_id])

    def __repr__(self):
        return f"<Intervention(id={self.id}, title='{self.title}', status={self.status})>"
