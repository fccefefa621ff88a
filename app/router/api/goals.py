from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.model.goals import GoalCategory, GoalStatus
from app.model.users import User
from app.router.api.logics.goal_logic import (
    list_goals_logic, get_goal_logic, create_goal_logic, update_goal_logic,
    delete_goal_logic, update_milestone_logic, goal_stats_logic,
)
from app.router.dependencies import get_app_settings, get_current_user, get_pagination_params
from app.schema.base_schema import MessageOut
from app.schema.goal_schema import (
    CreateGoalRequest, UpdateGoalRequest, MilestoneUpdate,
    GoalOut, GoalDetailOut, GoalsPage, GoalStatsOut, MilestoneOut,
)

router = APIRouter()


# registered before /{goal_id} so "stats" is not read as an id
@router.get("/stats/overview", response_model=GoalStatsOut, status_code=status.HTTP_200_OK)
def get_goal_stats(db: Session = Depends(get_db),
                   user: User = Depends(get_current_user),
                   settings: Settings = Depends(get_app_settings)):
    """Goal counts by status, completion percentage and the current streak."""
    return goal_stats_logic(db, user, settings)


@router.get("", response_model=GoalsPage, status_code=status.HTTP_200_OK)
def list_goals(pagination: Tuple[int, int] = Depends(get_pagination_params),
               goal_status: Optional[GoalStatus] = Query(None, alias="status"),
               category: Optional[GoalCategory] = Query(None),
               db: Session = Depends(get_db),
               user: User = Depends(get_current_user)):
    """List the current user's goals, newest first

    Args:
        pagination (Tuple[int, int]): page and limit query parameters
        goal_status (GoalStatus, optional): only goals in this status
        category (GoalCategory, optional): only goals in this category

    Returns:
        GoalsPage: the page of goals with pagination info
    """
    page, limit = pagination
    return list_goals_logic(db, user, page, limit, goal_status, category)


@router.post("", response_model=GoalOut, status_code=status.HTTP_201_CREATED)
def create_goal(request: CreateGoalRequest,
                db: Session = Depends(get_db),
                user: User = Depends(get_current_user)):
    """Create a goal together with its optional milestones."""
    return create_goal_logic(db, request, user)


@router.get("/{goal_id}", response_model=GoalDetailOut, status_code=status.HTTP_200_OK)
def get_goal(goal_id: str,
             db: Session = Depends(get_db),
             user: User = Depends(get_current_user)):
    """Return one goal with its milestones and progress updates

    Raises:
        HTTPException: 404 if the goal does not exist or belongs to someone else
    """
    return get_goal_logic(db, goal_id, user)


@router.put("/{goal_id}", response_model=GoalOut, status_code=status.HTTP_200_OK)
def update_goal(goal_id: str,
                request: UpdateGoalRequest,
                db: Session = Depends(get_db),
                user: User = Depends(get_current_user)):
    return update_goal_logic(db, goal_id, request, user)


@router.delete("/{goal_id}", response_model=MessageOut, status_code=status.HTTP_200_OK)
def delete_goal(goal_id: str,
                db: Session = Depends(get_db),
                user: User = Depends(get_current_user)):
    """Delete a goal, its milestones and its progress updates."""
    return delete_goal_logic(db, goal_id, user)


@router.put("/{goal_id}/milestones/{milestone_id}", response_model=MilestoneOut, status_code=status.HTTP_200_OK)
def update_milestone(goal_id: str,
                     milestone_id: str,
                     request: MilestoneUpdate,
                     db: Session = Depends(get_db),
                     user: User = Depends(get_current_user)):
    """Update a milestone; completing it stamps completedAt."""
    return update_milestone_logic(db, goal_id, milestone_id, request, user)
