from typing import List

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.log import get_logger
from app.model.users import User
from app.repository import MilestoneRepository, ProgressUpdateRepository
from app.router.api.logics.goal_logic import get_owned_goal
from app.schema.progress_schema import CreateProgressRequest, ProgressUpdateOut

log = get_logger(__name__)


def create_progress_logic(db: Session, request: CreateProgressRequest, user: User) -> ProgressUpdateOut:
    """
    Record a progress update against one of the user's goals.

    Raises:
        HTTPException: 404 when the goal is not the user's, or the milestone
        does not belong to that goal.
    """
    goal = get_owned_goal(db, request.goal_id, user)
    if request.milestone_id and not MilestoneRepository(db).get_for_goal(request.milestone_id, goal.id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Milestone not found")

    update = ProgressUpdateRepository(db).create(user_id=user.id, **request.model_dump())
    log.info("User %s logged %s on goal %s", user.id, update.update_type.value, goal.id)
    return ProgressUpdateOut.model_validate(update)


def list_goal_progress_logic(db: Session, goal_id: str, user: User) -> List[ProgressUpdateOut]:
    goal = get_owned_goal(db, goal_id, user)
    updates = ProgressUpdateRepository(db).list_for_goal(goal.id)
    return [ProgressUpdateOut.model_validate(u) for u in updates]
