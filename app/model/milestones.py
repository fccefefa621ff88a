from enum import Enum as PyEnum

from sqlalchemy import Column, String, Text, Integer, Date, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.database.base_class import Base, utcnow, new_id


class MilestoneStatus(str, PyEnum):
    pending = "pending"
    in_progress = "in_progress"
    completed = "completed"


class Milestone(Base):
    __tablename__ = "milestones"

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    target_date = Column(Date, nullable=True)
    completed_at = Column(DateTime(timezone=True), nullable=True)
    status = Column(
        SAEnum(MilestoneStatus, name="milestone_status", validate_strings=True),
        nullable=False,
        default=MilestoneStatus.pending,
    )
    order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    goal = relationship("Goal", back_populates="milestones")
