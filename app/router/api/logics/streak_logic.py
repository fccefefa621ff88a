from datetime import datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.orm import Session

from app.config import Settings
from app.model.users import User
from app.repository import ProgressUpdateRepository
from app.schema.user_schema import StreakOut
from app.streak_util import calculate_longest_streak, calculate_streak


def current_streak_for_user(
    db: Session, user: User, settings: Settings, now: Optional[datetime] = None
) -> int:
    """
    Current streak over every update inside the lookback window.

    The window is measured in days rather than records so a busy history
    cannot push the start of a streak out of the input.
    """
    now = now or datetime.now(timezone.utc)
    since = now - timedelta(days=settings.STREAK_LOOKBACK_DAYS)
    updates = ProgressUpdateRepository(db).list_since_for_user(user.id, since)
    return calculate_streak(updates, now=now, tz=settings.STREAK_TIMEZONE)


def streak_summary_logic(db: Session, user: User, settings: Settings) -> StreakOut:
    """Current and longest streak plus the time of the latest update."""
    now = datetime.now(timezone.utc)
    updates = ProgressUpdateRepository(db).list_all_for_user(user.id)
    return StreakOut(
        current_streak=calculate_streak(updates, now=now, tz=settings.STREAK_TIMEZONE),
        longest_streak=calculate_longest_streak(updates, tz=settings.STREAK_TIMEZONE),
        last_activity=updates[0].created_at if updates else None,
    )
