from collections import Counter

from sqlalchemy.orm import Session

from app.config import Settings
from app.model.goals import GoalStatus
from app.model.users import User
from app.repository import GoalRepository, MilestoneRepository, ProgressUpdateRepository, UserRepository
from app.router.api.logics.goal_logic import completion_percentage
from app.router.api.logics.streak_logic import current_streak_for_user
from app.schema.user_schema import DashboardOut, NextFocus, UserOut, UserProfileUpdate

NO_GOALS_FOCUS = "Set your first goal to get started!"


def get_profile_logic(user: User) -> UserOut:
    return UserOut.model_validate(user)


def update_profile_logic(db: Session, user: User, request: UserProfileUpdate) -> UserOut:
    changes = request.model_dump(exclude_unset=True)
    # required columns, ignore explicit nulls for them
    for required in ("first_name", "last_name", "employment_status"):
        if changes.get(required) is None:
            changes.pop(required, None)
    user = UserRepository(db).update(user, changes)
    return UserOut.model_validate(user)


def dashboard_logic(db: Session, user: User, settings: Settings) -> DashboardOut:
    """Goal counters, streak, next milestone and recent activity for the home screen."""
    counts = Counter(GoalRepository(db).statuses_for_user(user.id))
    total = sum(counts.values())
    completed = counts[GoalStatus.completed]

    recent = ProgressUpdateRepository(db).list_recent_for_user(user.id, settings.RECENT_ACTIVITY_LIMIT)

    milestone = MilestoneRepository(db).next_pending_for_user(user.id)
    if milestone:
        next_focus = NextFocus(title=milestone.title, target_date=milestone.target_date)
    else:
        next_focus = NextFocus(title=NO_GOALS_FOCUS, target_date=None)

    return DashboardOut(
        total_goals=total,
        active_goals=counts[GoalStatus.active],
        completed_goals=completed,
        progress_percentage=completion_percentage(completed, total),
        streak=current_streak_for_user(db, user, settings),
        next_focus=next_focus,
        recent_activity_count=len(recent),
    )
