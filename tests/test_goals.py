from tests.conftest import register

GOAL = {
    "title": "Find a job",
    "description": "Land a part-time admin role",
    "category": "employment",
    "targetDate": "2026-12-31",
    "milestones": [
        {"title": "Update CV", "targetDate": "2026-01-15", "order": 1},
        {"title": "Apply to 5 jobs", "targetDate": "2026-02-01", "order": 2},
    ],
}


def create_goal(client, headers, **overrides):
    res = client.post("/goals", json={**GOAL, **overrides}, headers=headers)
    assert res.status_code == 201, res.text
    return res.json()


def other_user_headers(client):
    body = register(client, email="bob@buildu.org", first_name="Bob", last_name="Smith")
    return {"Authorization": f"Bearer {body['accessToken']}"}


def test_goals_require_auth(client):
    assert client.get("/goals").status_code == 401


def test_create_goal_with_milestones(client, auth):
    headers, user = auth
    goal = create_goal(client, headers)
    assert goal["userId"] == user["id"]
    assert goal["status"] == "active"
    assert goal["priority"] == "medium"
    assert goal["isSmartGoal"] is False
    assert goal["specific"] == ""
    assert [m["title"] for m in goal["milestones"]] == ["Update CV", "Apply to 5 jobs"]
    assert all(m["status"] == "pending" for m in goal["milestones"])


def test_create_goal_missing_fields(client, auth):
    headers, _ = auth
    res = client.post("/goals", json={"title": "Only a title"}, headers=headers)
    assert res.status_code == 422


def test_create_goal_rejects_unknown_category(client, auth):
    headers, _ = auth
    res = client.post("/goals", json={**GOAL, "category": "career"}, headers=headers)
    assert res.status_code == 422


def test_list_goals_paginates_and_filters(client, auth):
    headers, _ = auth
    for i in range(3):
        create_goal(client, headers, title=f"Goal {i}", milestones=[])
    create_goal(client, headers, title="Yoga", category="wellbeing", milestones=[])

    res = client.get("/goals", params={"page": 1, "limit": 2}, headers=headers)
    assert res.status_code == 200
    body = res.json()
    assert len(body["data"]) == 2
    assert body["pagination"] == {"page": 1, "limit": 2, "total": 4, "totalPages": 2}

    res = client.get("/goals", params={"category": "wellbeing"}, headers=headers)
    assert [g["title"] for g in res.json()["data"]] == ["Yoga"]


def test_get_goal_detail_includes_progress(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    client.post("/progress", json={"goalId": goal["id"], "updateType": "progress_note", "title": "Started"}, headers=headers)

    res = client.get(f"/goals/{goal['id']}", headers=headers)
    assert res.status_code == 200
    body = res.json()
    assert len(body["milestones"]) == 2
    assert [p["title"] for p in body["progressUpdates"]] == ["Started"]


def test_goal_of_another_user_is_not_found(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    other = other_user_headers(client)

    assert client.get(f"/goals/{goal['id']}", headers=other).status_code == 404
    assert client.put(f"/goals/{goal['id']}", json={"title": "Mine"}, headers=other).status_code == 404
    assert client.delete(f"/goals/{goal['id']}", headers=other).status_code == 404


def test_update_goal(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    res = client.put(f"/goals/{goal['id']}", json={"status": "completed", "priority": "high"}, headers=headers)
    assert res.status_code == 200
    body = res.json()
    assert body["status"] == "completed"
    assert body["priority"] == "high"
    assert body["title"] == GOAL["title"]


def test_delete_goal(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    res = client.delete(f"/goals/{goal['id']}", headers=headers)
    assert res.status_code == 200
    assert res.json() == {"message": "Goal deleted successfully"}
    assert client.get(f"/goals/{goal['id']}", headers=headers).status_code == 404


def test_complete_milestone_stamps_completed_at(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    milestone = goal["milestones"][0]
    url = f"/goals/{goal['id']}/milestones/{milestone['id']}"

    res = client.put(url, json={"status": "completed"}, headers=headers)
    assert res.status_code == 200
    assert res.json()["completedAt"] is not None

    res = client.put(url, json={"status": "in_progress"}, headers=headers)
    assert res.json()["completedAt"] is None


def test_unknown_milestone(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    res = client.put(f"/goals/{goal['id']}/milestones/nope", json={"status": "completed"}, headers=headers)
    assert res.status_code == 404


def test_goal_stats(client, auth):
    headers, _ = auth
    first = create_goal(client, headers, milestones=[])
    create_goal(client, headers, milestones=[])
    third = create_goal(client, headers, milestones=[])
    client.put(f"/goals/{first['id']}", json={"status": "completed"}, headers=headers)
    client.put(f"/goals/{third['id']}", json={"status": "paused"}, headers=headers)
    client.post("/progress", json={"goalId": first["id"], "updateType": "progress_note", "title": "Done"}, headers=headers)

    res = client.get("/goals/stats/overview", headers=headers)
    assert res.status_code == 200
    assert res.json() == {
        "totalGoals": 3,
        "activeGoals": 1,
        "completedGoals": 1,
        "pausedGoals": 1,
        "cancelledGoals": 0,
        "progressPercentage": 33,
        "streak": 1,
    }
