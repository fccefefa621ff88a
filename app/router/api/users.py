from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.config import Settings
from app.database import get_db
from app.model.users import User
from app.router.api.logics.streak_logic import streak_summary_logic
from app.router.api.logics.user_logic import dashboard_logic, get_profile_logic, update_profile_logic
from app.router.dependencies import get_app_settings, get_current_user
from app.schema.user_schema import DashboardOut, StreakOut, UserOut, UserProfileUpdate

router = APIRouter()


@router.get("/profile", response_model=UserOut, status_code=status.HTTP_200_OK)
def get_profile(user: User = Depends(get_current_user)):
    return get_profile_logic(user)


@router.put("/profile", response_model=UserOut, status_code=status.HTTP_200_OK)
def update_profile(request: UserProfileUpdate,
                   db: Session = Depends(get_db),
                   user: User = Depends(get_current_user)):
    """Update the current user's profile fields."""
    return update_profile_logic(db, user, request)


@router.get("/dashboard", response_model=DashboardOut, status_code=status.HTTP_200_OK)
def get_dashboard(db: Session = Depends(get_db),
                  user: User = Depends(get_current_user),
                  settings: Settings = Depends(get_app_settings)):
    """Dashboard statistics for the current user

    Args:
        db (Session): Database session
        user (User): the authenticated user
        settings (Settings): streak zone, lookback window and recent activity limit

    Returns:
        DashboardOut: goal counters, streak, next focus and recent activity count
    """
    return dashboard_logic(db, user, settings)


@router.get("/streaks", response_model=StreakOut, status_code=status.HTTP_200_OK)
def get_streak(db: Session = Depends(get_db),
               user: User = Depends(get_current_user),
               settings: Settings = Depends(get_app_settings)):
    """get the current and longest streak of the current user"""
    return streak_summary_logic(db, user, settings)
