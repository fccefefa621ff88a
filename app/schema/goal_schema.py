from datetime import date, datetime
from typing import List, Optional

from pydantic import Field, field_validator

from app.model.goals import GoalCategory, GoalPriority, GoalStatus
from app.model.milestones import MilestoneStatus
from app.schema.base_schema import CamelModel
from app.schema.progress_schema import ProgressUpdateOut


#################
### milestone ###
#################
class MilestoneCreate(CamelModel):
    title: str = Field(min_length=1)
    description: Optional[str] = None
    target_date: Optional[date] = None
    order: int = 0


class MilestoneUpdate(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    target_date: Optional[date] = None
    status: Optional[MilestoneStatus] = None


class MilestoneOut(CamelModel):
    id: str
    goal_id: str
    title: str
    description: Optional[str] = None
    target_date: Optional[date] = None
    completed_at: Optional[datetime] = None
    status: MilestoneStatus
    order: int
    created_at: datetime
    updated_at: datetime


############
### goal ###
############
class CreateGoalRequest(CamelModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    category: GoalCategory
    priority: GoalPriority = GoalPriority.medium
    target_date: date
    milestones: List[MilestoneCreate] = []


class UpdateGoalRequest(CamelModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None
    category: Optional[GoalCategory] = None
    priority: Optional[GoalPriority] = None
    target_date: Optional[date] = None
    status: Optional[GoalStatus] = None


class GoalOut(CamelModel):
    id: str
    user_id: str
    title: str
    description: str
    category: GoalCategory
    priority: GoalPriority
    target_date: date
    status: GoalStatus
    is_smart_goal: bool
    specific: str = ""
    measurable: str = ""
    achievable: str = ""
    relevant: str = ""
    time_bound: str = ""
    created_at: datetime
    updated_at: datetime
    milestones: List[MilestoneOut] = []

    @field_validator("specific", "measurable", "achievable", "relevant", "time_bound", mode="before")
    @classmethod
    def blank_if_missing(cls, value):
        return value or ""


class GoalDetailOut(GoalOut):
    progress_updates: List[ProgressUpdateOut] = []


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int


class GoalsPage(CamelModel):
    data: List[GoalOut]
    pagination: Pagination


class GoalStatsOut(CamelModel):
    total_goals: int
    active_goals: int
    completed_goals: int
    paused_goals: int
    cancelled_goals: int
    progress_percentage: int
    streak: int
