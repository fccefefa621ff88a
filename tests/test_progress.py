from tests.test_goals import create_goal, other_user_headers


def test_create_progress_update(client, auth):
    headers, user = auth
    goal = create_goal(client, headers)
    res = client.post("/progress", json={
        "goalId": goal["id"],
        "milestoneId": goal["milestones"][0]["id"],
        "updateType": "milestone_completed",
        "title": "CV updated",
        "progressPercentage": 40,
        "mood": 4,
    }, headers=headers)
    assert res.status_code == 201, res.text
    body = res.json()
    assert body["userId"] == user["id"]
    assert body["goalId"] == goal["id"]
    assert body["updateType"] == "milestone_completed"
    assert body["mood"] == 4
    assert body["createdAt"]


def test_progress_requires_fields(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    res = client.post("/progress", json={"goalId": goal["id"]}, headers=headers)
    assert res.status_code == 422


def test_progress_validates_ranges(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    base = {"goalId": goal["id"], "updateType": "progress_note", "title": "x"}
    assert client.post("/progress", json={**base, "mood": 6}, headers=headers).status_code == 422
    assert client.post("/progress", json={**base, "progressPercentage": 101}, headers=headers).status_code == 422


def test_progress_on_foreign_goal(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    other = other_user_headers(client)
    res = client.post("/progress", json={"goalId": goal["id"], "updateType": "progress_note", "title": "x"}, headers=other)
    assert res.status_code == 404
    assert res.json()["detail"] == "Goal not found"


def test_progress_with_milestone_of_another_goal(client, auth):
    headers, _ = auth
    first = create_goal(client, headers)
    second = create_goal(client, headers, title="Second")
    res = client.post("/progress", json={
        "goalId": second["id"],
        "milestoneId": first["milestones"][0]["id"],
        "updateType": "progress_note",
        "title": "x",
    }, headers=headers)
    assert res.status_code == 404
    assert res.json()["detail"] == "Milestone not found"


def test_list_goal_progress(client, auth):
    headers, _ = auth
    goal = create_goal(client, headers)
    for title in ("one", "two"):
        client.post("/progress", json={"goalId": goal["id"], "updateType": "progress_note", "title": title}, headers=headers)

    res = client.get(f"/progress/goal/{goal['id']}", headers=headers)
    assert res.status_code == 200
    assert sorted(p["title"] for p in res.json()) == ["one", "two"]

    other = other_user_headers(client)
    assert client.get(f"/progress/goal/{goal['id']}", headers=other).status_code == 404
