import math
from collections import Counter
from datetime import datetime, timezone
from typing import Optional

from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from app.config import Settings
from app.log import get_logger
from app.model.goals import Goal, GoalCategory, GoalStatus
from app.model.milestones import MilestoneStatus
from app.model.users import User
from app.repository import GoalRepository, MilestoneRepository
from app.router.api.logics.streak_logic import current_streak_for_user
from app.schema.goal_schema import (
    CreateGoalRequest, UpdateGoalRequest, MilestoneUpdate,
    GoalOut, GoalDetailOut, GoalsPage, GoalStatsOut, MilestoneOut, Pagination,
)

log = get_logger(__name__)


def completion_percentage(completed: int, total: int) -> int:
    """Share of completed goals, rounded half up like the dashboard shows it."""
    if total <= 0:
        return 0
    return int(math.floor(completed * 100 / total + 0.5))


def get_owned_goal(db: Session, goal_id: str, user: User) -> Goal:
    goal = GoalRepository(db).get_for_user(goal_id, user.id)
    if not goal:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Goal not found")
    return goal


def list_goals_logic(
    db: Session,
    user: User,
    page: int,
    limit: int,
    goal_status: Optional[GoalStatus] = None,
    category: Optional[GoalCategory] = None,
) -> GoalsPage:
    goals, total = GoalRepository(db).list_for_user(
        user.id, skip=(page - 1) * limit, limit=limit, status=goal_status, category=category
    )
    return GoalsPage(
        data=[GoalOut.model_validate(g) for g in goals],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit) if total else 0,
        ),
    )


def get_goal_logic(db: Session, goal_id: str, user: User) -> GoalDetailOut:
    return GoalDetailOut.model_validate(get_owned_goal(db, goal_id, user))


def create_goal_logic(db: Session, request: CreateGoalRequest, user: User) -> GoalOut:
    fields = request.model_dump(exclude={"milestones"})
    milestones = [
        {**m.model_dump(), "status": MilestoneStatus.pending}
        for m in request.milestones
    ]
    goal = GoalRepository(db).create(user.id, milestones, **fields)
    log.info("User %s created goal %s with %d milestone(s)", user.id, goal.id, len(milestones))
    return GoalOut.model_validate(goal)


def update_goal_logic(db: Session, goal_id: str, request: UpdateGoalRequest, user: User) -> GoalOut:
    goal = get_owned_goal(db, goal_id, user)
    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    goal = GoalRepository(db).update(goal, changes)
    return GoalOut.model_validate(goal)


def delete_goal_logic(db: Session, goal_id: str, user: User) -> dict:
    goal = get_owned_goal(db, goal_id, user)
    GoalRepository(db).delete(goal)
    log.info("User %s deleted goal %s", user.id, goal_id)
    return {"message": "Goal deleted successfully"}


def update_milestone_logic(
    db: Session, goal_id: str, milestone_id: str, request: MilestoneUpdate, user: User
) -> MilestoneOut:
    goal = get_owned_goal(db, goal_id, user)
    milestones = MilestoneRepository(db)
    milestone = milestones.get_for_goal(milestone_id, goal.id)
    if not milestone:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Milestone not found")

    changes = request.model_dump(exclude_unset=True, exclude_none=True)
    new_status = changes.get("status")
    if new_status == MilestoneStatus.completed and milestone.status != MilestoneStatus.completed:
        changes["completed_at"] = datetime.now(timezone.utc)
    elif new_status is not None and new_status != MilestoneStatus.completed:
        changes["completed_at"] = None

    return MilestoneOut.model_validate(milestones.update(milestone, changes))


def goal_stats_logic(db: Session, user: User, settings: Settings) -> GoalStatsOut:
    counts = Counter(GoalRepository(db).statuses_for_user(user.id))
    total = sum(counts.values())
    completed = counts[GoalStatus.completed]
    return GoalStatsOut(
        total_goals=total,
        active_goals=counts[GoalStatus.active],
        completed_goals=completed,
        paused_goals=counts[GoalStatus.paused],
        cancelled_goals=counts[GoalStatus.cancelled],
        progress_percentage=completion_percentage(completed, total),
        streak=current_streak_for_user(db, user, settings),
    )
