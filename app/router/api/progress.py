from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.model.users import User
from app.router.api.logics.progress_logic import create_progress_logic, list_goal_progress_logic
from app.router.dependencies import get_current_user
from app.schema.progress_schema import CreateProgressRequest, ProgressUpdateOut

router = APIRouter()


@router.post("", response_model=ProgressUpdateOut, status_code=status.HTTP_201_CREATED)
def create_progress_update(request: CreateProgressRequest,
                           db: Session = Depends(get_db),
                           user: User = Depends(get_current_user)):
    """Log a progress update against one of the current user's goals

    Args:
        request (CreateProgressRequest): goalId, updateType, title and optional details

    Raises:
        HTTPException: 404 if the goal or milestone is not the user's

    Returns:
        ProgressUpdateOut: the stored update
    """
    return create_progress_logic(db, request, user)


@router.get("/goal/{goal_id}", response_model=List[ProgressUpdateOut], status_code=status.HTTP_200_OK)
def get_goal_progress(goal_id: str,
                      db: Session = Depends(get_db),
                      user: User = Depends(get_current_user)):
    """All updates for a goal, newest first."""
    return list_goal_progress_logic(db, goal_id, user)
