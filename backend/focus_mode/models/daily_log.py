"""Daily check-in log model."""

from sqlalchemy import Column, DateTime, ForeignKey, Enum as SQLEnum, Integer, Float
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from ..database import Base
from .enums import CheckinStatus


class DailyLog(Base):
    """Append-only record of one submitted check-in."""
    __tablename__ = "daily_logs"

    id = Column(Integer, primary_key=True, index=True)
    student_id = Column(Integer, ForeignKey("students.id"), nullable=False, index=True)
    quiz_score = Column(Float, nullable=False)
    focus_minutes = Column(Float, nullable=False)
    status = Column(SQLEnum(CheckinStatus, name="checkin_status"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Relationships
    student = relationship("Student", back_populates="daily_logs")

    def __repr__(self):
        return f"<DailyLog(id={self.id}, student_id={self.student_id}, status={self.status})>"
