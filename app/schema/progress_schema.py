from datetime import datetime
from typing import Optional

from pydantic import Field

from app.model.progress_updates import EvidenceType, UpdateType
from app.schema.base_schema import CamelModel


class CreateProgressRequest(CamelModel):
    goal_id: str
    milestone_id: Optional[str] = None
    update_type: UpdateType
    title: str = Field(min_length=1)
    description: Optional[str] = None
    evidence_url: Optional[str] = None
    evidence_type: Optional[EvidenceType] = None
    progress_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    mood: Optional[int] = Field(default=None, ge=1, le=5)


class ProgressUpdateOut(CamelModel):
    id: str
    goal_id: str
    milestone_id: Optional[str] = None
    user_id: str
    update_type: UpdateType
    title: str
    description: Optional[str] = None
    evidence_url: Optional[str] = None
    evidence_type: Optional[EvidenceType] = None
    progress_percentage: Optional[int] = None
    mood: Optional[int] = None
    created_at: datetime
