from app.repository.user_repository import UserRepository
from app.repository.goal_repository import GoalRepository
from app.repository.milestone_repository import MilestoneRepository
from app.repository.progress_repository import ProgressUpdateRepository
from app.repository.content_repository import MotivationalContentRepository

__all__ = [
    "UserRepository",
    "GoalRepository",
    "MilestoneRepository",
    "ProgressUpdateRepository",
    "MotivationalContentRepository",
]
