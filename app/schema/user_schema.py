from datetime import date, datetime
from typing import Optional

from pydantic import Field

from app.model.users import EmploymentStatus
from app.schema.base_schema import CamelModel


class UserOut(CamelModel):
    id: str
    email: str
    first_name: str
    last_name: str
    profile_picture: Optional[str] = None
    date_of_birth: Optional[date] = None
    location: Optional[str] = None
    employment_status: EmploymentStatus
    created_at: datetime
    updated_at: datetime


class UserProfileUpdate(CamelModel):
    first_name: Optional[str] = Field(default=None, min_length=1)
    last_name: Optional[str] = Field(default=None, min_length=1)
    date_of_birth: Optional[date] = None
    location: Optional[str] = None
    employment_status: Optional[EmploymentStatus] = None
    profile_picture: Optional[str] = None


##############
### streak ###
##############
class StreakOut(CamelModel):
    current_streak: int
    longest_streak: int
    last_activity: Optional[datetime] = None


#################
### dashboard ###
#################
class NextFocus(CamelModel):
    title: str
    target_date: Optional[date] = None


class DashboardOut(CamelModel):
    total_goals: int
    active_goals: int
    completed_goals: int
    progress_percentage: int
    streak: int
    next_focus: NextFocus
    recent_activity_count: int
