from enum import Enum as PyEnum

from sqlalchemy import Column, String, Date, DateTime, Enum as SAEnum
from sqlalchemy.orm import relationship
from app.database.base_class import Base, utcnow, new_id


class EmploymentStatus(str, PyEnum):
    unemployed = "unemployed"
    employed = "employed"
    seeking = "seeking"
    student = "student"


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, index=True, default=new_id)
    email = Column(String(255), nullable=False, unique=True, index=True)
    hashed_password = Column(String(255), nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    profile_picture = Column(String(1024), nullable=True)
    date_of_birth = Column(Date, nullable=True)
    location = Column(String(255), nullable=True)
    employment_status = Column(
        SAEnum(EmploymentStatus, name="employment_status", validate_strings=True),
        nullable=False,
        default=EmploymentStatus.seeking,
    )
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    updated_at = Column(DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False)
    last_login_at = Column(DateTime(timezone=True), nullable=True)

    goals = relationship("Goal", back_populates="user", cascade="all, delete-orphan")
    progress_updates = relationship("ProgressUpdate", back_populates="user", cascade="all, delete-orphan")
