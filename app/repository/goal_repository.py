from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import func
from sqlalchemy.orm import Session, selectinload

from app.model.goals import Goal, GoalCategory, GoalStatus
from app.model.milestones import Milestone


class GoalRepository:
    def __init__(self, db: Session):
        self.db = db

    def get_for_user(self, goal_id: str, user_id: str) -> Optional[Goal]:
        """Fetch a goal only if it belongs to the given user."""
        return (
            self.db.query(Goal)
            .options(selectinload(Goal.milestones), selectinload(Goal.progress_updates))
            .filter(Goal.id == goal_id, Goal.user_id == user_id)
            .first()
        )

    def list_for_user(
        self,
        user_id: str,
        skip: int = 0,
        limit: int = 10,
        status: Optional[GoalStatus] = None,
        category: Optional[GoalCategory] = None,
    ) -> Tuple[List[Goal], int]:
        """
        Page through a user's goals, newest first.

        Returns:
            Tuple[List[Goal], int]: The requested page and the total number of
            goals matching the filters.
        """
        query = self.db.query(Goal).filter(Goal.user_id == user_id)
        if status:
            query = query.filter(Goal.status == status)
        if category:
            query = query.filter(Goal.category == category)

        total = query.with_entities(func.count(Goal.id)).scalar() or 0
        goals = (
            query.options(selectinload(Goal.milestones))
            .order_by(Goal.created_at.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        return goals, total

    def statuses_for_user(self, user_id: str) -> List[GoalStatus]:
        rows = self.db.query(Goal.status).filter(Goal.user_id == user_id).all()
        return [r.status for r in rows]

    def active_categories_for_user(self, user_id: str) -> List[GoalCategory]:
        rows = (
            self.db.query(Goal.category)
            .filter(Goal.user_id == user_id, Goal.status == GoalStatus.active)
            .all()
        )
        return [r.category for r in rows]

    def create(self, user_id: str, milestones: List[Dict[str, Any]], **fields: Any) -> Goal:
        goal = Goal(user_id=user_id, **fields)
        goal.milestones = [Milestone(**m) for m in milestones]
        self.db.add(goal)
        self.db.commit()
        self.db.refresh(goal)
        return goal

    def update(self, goal: Goal, changes: Dict[str, Any]) -> Goal:
        for key, value in changes.items():
            setattr(goal, key, value)
        self.db.commit()
        self.db.refresh(goal)
        return goal

    def delete(self, goal: Goal) -> None:
        self.db.delete(goal)
        self.db.commit()
