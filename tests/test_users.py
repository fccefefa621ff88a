from datetime import datetime, timedelta, timezone

from app.model.progress_updates import ProgressUpdate, UpdateType
from tests.test_goals import create_goal


def backdate(db, user_id, goal_id, *days_ago):
    now = datetime.now(timezone.utc)
    db.add_all([
        ProgressUpdate(
            goal_id=goal_id,
            user_id=user_id,
            update_type=UpdateType.progress_note,
            title=f"{n} days ago",
            created_at=now - timedelta(days=n),
        )
        for n in days_ago
    ])
    db.commit()


def test_profile_roundtrip(client, auth):
    headers, _ = auth
    res = client.put("/users/profile", json={
        "location": "Glasgow",
        "employmentStatus": "student",
        "dateOfBirth": "1990-05-01",
    }, headers=headers)
    assert res.status_code == 200

    profile = client.get("/users/profile", headers=headers).json()
    assert profile["location"] == "Glasgow"
    assert profile["employmentStatus"] == "student"
    assert profile["dateOfBirth"] == "1990-05-01"
    assert profile["firstName"] == "Ada"


def test_dashboard_without_goals(client, auth):
    headers, _ = auth
    res = client.get("/users/dashboard", headers=headers)
    assert res.status_code == 200
    assert res.json() == {
        "totalGoals": 0,
        "activeGoals": 0,
        "completedGoals": 0,
        "progressPercentage": 0,
        "streak": 0,
        "nextFocus": {"title": "Set your first goal to get started!", "targetDate": None},
        "recentActivityCount": 0,
    }


def test_dashboard_streak_and_next_focus(client, auth, db):
    headers, user = auth
    goal = create_goal(client, headers)
    backdate(db, user["id"], goal["id"], 0, 0, 1, 2, 4)

    body = client.get("/users/dashboard", headers=headers).json()
    assert body["streak"] == 3
    assert body["totalGoals"] == 1
    assert body["activeGoals"] == 1
    assert body["recentActivityCount"] == 5
    assert body["nextFocus"] == {"title": "Update CV", "targetDate": "2026-01-15"}


def test_dashboard_streak_is_not_capped_by_recent_limit(client, auth, db):
    headers, user = auth
    goal = create_goal(client, headers, milestones=[])
    # 12 consecutive days, more than the 10 most recent records
    backdate(db, user["id"], goal["id"], *range(12))

    body = client.get("/users/dashboard", headers=headers).json()
    assert body["streak"] == 12
    assert body["recentActivityCount"] == 10


def test_dashboard_stale_streak(client, auth, db):
    headers, user = auth
    goal = create_goal(client, headers, milestones=[])
    backdate(db, user["id"], goal["id"], 2, 3, 4)

    assert client.get("/users/dashboard", headers=headers).json()["streak"] == 0


def test_streak_summary(client, auth, db):
    headers, user = auth
    goal = create_goal(client, headers, milestones=[])
    backdate(db, user["id"], goal["id"], 1, 5, 6, 7, 8)

    res = client.get("/users/streaks", headers=headers)
    assert res.status_code == 200
    body = res.json()
    assert body["currentStreak"] == 1
    assert body["longestStreak"] == 4
    assert body["lastActivity"] is not None


def test_streak_summary_without_activity(client, auth):
    headers, _ = auth
    body = client.get("/users/streaks", headers=headers).json()
    assert body == {"currentStreak": 0, "longestStreak": 0, "lastActivity": None}
