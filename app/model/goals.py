from enum import Enum as PyEnum

from sqlalchemy import Column, String, Text, Boolean, Date, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.database.base_class import Base, utcnow, new_id


class GoalCategory(str, PyEnum):
    employment = "employment"
    skills = "skills"
    wellbeing = "wellbeing"
    childcare = "childcare"
    other = "other"


class GoalPriority(str, PyEnum):
    low = "low"
    medium = "medium"
    high = "high"


class GoalStatus(str, PyEnum):
    active = "active"
    completed = "completed"
    paused = "paused"
    cancelled = "cancelled"


class Goal(Base):
    __tablename__ = "goals"

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    category = Column(SAEnum(GoalCategory, name="goal_category", validate_strings=True), nullable=False)
    priority = Column(
        SAEnum(GoalPriority, name="goal_priority", validate_strings=True),
        nullable=False,
        default=GoalPriority.medium,
    )
    target_date = Column(Date, nullable=False)
    status = Column(
        SAEnum(GoalStatus, name="goal_status", validate_strings=True),
        nullable=False,
        default=GoalStatus.active,
        index=True,
    )
    # SMART breakdown filled in by the goal wizard
    is_smart_goal = Column(Boolean, default=False, nullable=False)
    specific = Column(Text, nullable=True)
    measurable = Column(Text, nullable=True)
    achievable = Column(Text, nullable=True)
    relevant = Column(Text, nullable=True)
    time_bound = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)

    user = relationship("User", back_populates="goals")
    milestones = relationship(
        "Milestone",
        back_populates="goal",
        cascade="all, delete-orphan",
        order_by="Milestone.order",
    )
    progress_updates = relationship(
        "ProgressUpdate",
        back_populates="goal",
        cascade="all, delete-orphan",
        order_by="ProgressUpdate.created_at.desc()",
    )
