from enum import Enum as PyEnum

from sqlalchemy import Column, String, Text, Integer, DateTime, ForeignKey, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.database.base_class import Base, utcnow, new_id


class UpdateType(str, PyEnum):
    milestone_completed = "milestone_completed"
    progress_note = "progress_note"
    evidence_added = "evidence_added"
    setback = "setback"


class EvidenceType(str, PyEnum):
    photo = "photo"
    document = "document"
    certificate = "certificate"
    link = "link"


class ProgressUpdate(Base):
    __tablename__ = "progress_updates"

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    goal_id = Column(String(36), ForeignKey("goals.id", ondelete="CASCADE"), nullable=False, index=True)
    milestone_id = Column(String(36), ForeignKey("milestones.id", ondelete="SET NULL"), nullable=True)
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    update_type = Column(SAEnum(UpdateType, name="update_type", validate_strings=True), nullable=False)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    evidence_url = Column(String(1024), nullable=True)
    evidence_type = Column(SAEnum(EvidenceType, name="evidence_type", validate_strings=True), nullable=True)
    progress_percentage = Column(Integer, nullable=True)
    mood = Column(Integer, nullable=True)  # 1 = frustrated, 5 = excellent
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False, index=True)

    goal = relationship("Goal", back_populates="progress_updates")
    user = relationship("User", back_populates="progress_updates")
