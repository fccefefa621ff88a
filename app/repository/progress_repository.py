from datetime import datetime
from typing import Any, List

from sqlalchemy.orm import Session

from app.model.progress_updates import ProgressUpdate


class ProgressUpdateRepository:
    def __init__(self, db: Session):
        self.db = db

    def list_for_goal(self, goal_id: str) -> List[ProgressUpdate]:
        return (
            self.db.query(ProgressUpdate)
            .filter(ProgressUpdate.goal_id == goal_id)
            .order_by(ProgressUpdate.created_at.desc())
            .all()
        )

    def list_recent_for_user(self, user_id: str, limit: int) -> List[ProgressUpdate]:
        return (
            self.db.query(ProgressUpdate)
            .filter(ProgressUpdate.user_id == user_id)
            .order_by(ProgressUpdate.created_at.desc())
            .limit(limit)
            .all()
        )

    def list_since_for_user(self, user_id: str, since: datetime) -> List[ProgressUpdate]:
        return (
            self.db.query(ProgressUpdate)
            .filter(ProgressUpdate.user_id == user_id, ProgressUpdate.created_at >= since)
            .order_by(ProgressUpdate.created_at.desc())
            .all()
        )

    def list_all_for_user(self, user_id: str) -> List[ProgressUpdate]:
        return (
            self.db.query(ProgressUpdate)
            .filter(ProgressUpdate.user_id == user_id)
            .order_by(ProgressUpdate.created_at.desc())
            .all()
        )

    def create(self, **fields: Any) -> ProgressUpdate:
        update = ProgressUpdate(**fields)
        self.db.add(update)
        self.db.commit()
        self.db.refresh(update)
        return update
