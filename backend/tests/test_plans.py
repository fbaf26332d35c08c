"""Plans, custom activities, activity blocks and the selected-plan preference."""

from uuid import uuid4

from httpx import AsyncClient

PLAN = {
    "name": "Crunch Week",
    "day_type": "weekday",
    "activities": [
        {"name": "DSA", "start_time": "08:00", "end_time": "09:30", "category": "learning"},
        {"name": "Late shift", "start_time": "22:00", "end_time": "02:00", "category": "work"},
    ],
}


async def _create_plan(client: AsyncClient, headers: dict[str, str]) -> dict:
    response = await client.post("/plans/", json=PLAN, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_create_plan_with_activities(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    plan = await _create_plan(client, auth_headers)

    response = await client.get(f"/plans/{plan['id']}/activities", headers=auth_headers)

    activities = response.json()
    assert [a["name"] for a in activities] == ["DSA", "Late shift"]
    assert [a["order"] for a in activities] == [0, 1]
    # Overnight spans keep their negative duration
    assert [a["duration_minutes"] for a in activities] == [90, -1200]


async def test_custom_activity_order_is_max_plus_one(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    plan = await _create_plan(client, auth_headers)
    activities = (await client.get(f"/plans/{plan['id']}/activities", headers=auth_headers)).json()

    deleted = await client.delete(
        f"/plans/{plan['id']}/activities/{activities[0]['id']}", headers=auth_headers
    )
    assert deleted.status_code == 204

    added = await client.post(
        f"/plans/{plan['id']}/activities",
        json={"name": "Walk", "start_time": "12:00", "end_time": "12:20", "category": "exercise"},
        headers=auth_headers,
    )
    assert added.status_code == 201
    assert added.json()["order"] == 2
    assert added.json()["duration_minutes"] == 20


async def test_update_activity_rederives_duration(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    plan = await _create_plan(client, auth_headers)
    activity = (await client.get(f"/plans/{plan['id']}/activities", headers=auth_headers)).json()[0]

    response = await client.patch(
        f"/plans/{plan['id']}/activities/{activity['id']}",
        json={"end_time": "10:00"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert response.json()["duration_minutes"] == 120


async def test_invalid_clock_time_is_400(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    payload = {**PLAN, "activities": [{**PLAN["activities"][0], "start_time": "25:00"}]}
    response = await client.post("/plans/", json=payload, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["kind"] == "validation_error"


async def test_list_plans_filters_by_day_type(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    await _create_plan(client, auth_headers)
    await client.post("/plans/", json={"name": "Lazy Sunday", "day_type": "weekend"}, headers=auth_headers)

    weekend = await client.get("/plans/", params={"day_type": "weekend"}, headers=auth_headers)

    assert [p["name"] for p in weekend.json()] == ["Lazy Sunday"]


async def test_plans_are_scoped_to_their_owner(
    client: AsyncClient, auth_headers: dict[str, str], other_auth_headers: dict[str, str]
) -> None:
    plan = await _create_plan(client, auth_headers)

    assert (await client.get("/plans/", headers=other_auth_headers)).json() == []

    for method, path in (
        ("GET", f"/plans/{plan['id']}"),
        ("PATCH", f"/plans/{plan['id']}"),
        ("DELETE", f"/plans/{plan['id']}"),
        ("GET", f"/plans/{plan['id']}/activities"),
    ):
        kwargs = {"json": {"name": "Mine now"}} if method == "PATCH" else {}
        response = await client.request(method, path, headers=other_auth_headers, **kwargs)
        assert response.status_code == 404, (method, path)
        assert response.json() == {"error": "Plan not found", "kind": "not_found"}

    blocks = await client.get(
        "/activity-blocks/", params={"plan_id": plan["id"]}, headers=other_auth_headers
    )
    assert blocks.status_code == 404


async def test_delete_plan_removes_blocks_and_clears_selection(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    cloned = await client.post(
        "/default-plans/clone", json={"plan_name": "Weekday Grind"}, headers=auth_headers
    )
    plan_id = cloned.json()["plan"]["id"]
    selected = await client.put(
        "/user-preference/", json={"plan_id": plan_id}, headers=auth_headers
    )
    assert selected.json() == {"selected_plan_id": plan_id, "selected_plan_name": "Weekday Grind"}

    response = await client.delete(f"/plans/{plan_id}", headers=auth_headers)
    assert response.status_code == 204

    assert (await client.get(f"/plans/{plan_id}", headers=auth_headers)).status_code == 404
    preference = await client.get("/user-preference/", headers=auth_headers)
    assert preference.json() == {"selected_plan_id": None, "selected_plan_name": None}


async def test_preference_must_name_an_owned_plan(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.put(
        "/user-preference/", json={"plan_id": str(uuid4())}, headers=auth_headers
    )
    assert response.status_code == 404

    plan = await _create_plan(client, auth_headers)
    named = await client.put(
        "/user-preference/",
        json={"plan_id": plan["id"], "plan_name": "Exam week"},
        headers=auth_headers,
    )
    assert named.json()["selected_plan_name"] == "Exam week"

    cleared = await client.delete("/user-preference/", headers=auth_headers)
    assert cleared.json()["selected_plan_id"] is None


async def test_activity_block_appends_after_last(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    cloned = await client.post(
        "/default-plans/clone", json={"plan_name": "Weekend Recharge"}, headers=auth_headers
    )
    plan_id = cloned.json()["plan"]["id"]

    response = await client.post(
        "/activity-blocks/",
        json={
            "plan_id": plan_id,
            "name": "Early Coffee",
            "start_time": "07:00",
            "end_time": "07:30",
            "category": "meal",
            "day_type": "weekend",
        },
        headers=auth_headers,
    )

    assert response.status_code == 201
    assert response.json()["order"] == 5
    listed = await client.get("/activity-blocks/", params={"plan_id": plan_id}, headers=auth_headers)
    # Sorted by start time, so the new block comes first
    assert listed.json()[0]["name"] == "Early Coffee"


async def test_duration_endpoint(client: AsyncClient) -> None:
    response = await client.get(
        "/activity-blocks/duration", params={"start_time": "09:00", "end_time": "10:30"}
    )
    assert response.status_code == 200
    assert response.json()["duration_minutes"] == 90

    invalid = await client.get(
        "/activity-blocks/duration", params={"start_time": "9am", "end_time": "10:30"}
    )
    assert invalid.status_code == 400
