from enum import Enum as PyEnum

from sqlalchemy import Column, String, Text, DateTime, Enum as SAEnum
from app.database.base_class import Base, utcnow, new_id


class ContentType(str, PyEnum):
    quote = "quote"
    affirmation = "affirmation"
    tip = "tip"
    story = "story"


class MotivationalContent(Base):
    __tablename__ = "motivational_content"

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    type = Column(SAEnum(ContentType, name="content_type", validate_strings=True), nullable=False, index=True)
    title = Column(String(255), nullable=True)
    content = Column(Text, nullable=False)
    author = Column(String(255), nullable=True)
    category = Column(String(50), nullable=True)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
