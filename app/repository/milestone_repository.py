from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from app.model.goals import Goal
from app.model.milestones import Milestone, MilestoneStatus


class MilestoneRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_for_goal(self, milestone_id: str, goal_id: str) -> Optional[Milestone]:
        return (
            self.db.query(Milestone)
            .filter(Milestone.id == milestone_id, Milestone.goal_id == goal_id)
            .first()
        )

    def next_pending_for_user(self, user_id: str) -> Optional[Milestone]:
        """Earliest pending milestone across all of the user's goals."""
        return (
            self.db.query(Milestone)
            .join(Goal, Goal.id == Milestone.goal_id)
            .filter(Goal.user_id == user_id, Milestone.status == MilestoneStatus.pending)
            .order_by(Milestone.target_date.is_(None), Milestone.target_date.asc())
            .first()
        )

    def update(self, milestone: Milestone, changes: Dict[str, Any]) -> Milestone:
        for key, value in changes.items():
            setattr(milestone, key, value)
        self.db.commit()
        self.db.refresh(milestone)
        return milestone
