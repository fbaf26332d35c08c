"""Built-in plan catalog and cloning."""

import pytest
from httpx import AsyncClient
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from grindlog.db.models import Plan, User
from grindlog.services.catalog import get_default_plan
from grindlog.services.plan_cloning import clone_default_plan
from grindlog.services.timekeeping import compute_duration


def fail_second_flush(monkeypatch: pytest.MonkeyPatch, error: Exception) -> None:
    """Let the plan insert through, then fail the block insert."""
    real_flush = AsyncSession.flush
    calls = 0

    async def flush(self, *args, **kwargs):
        nonlocal calls
        calls += 1
        if calls == 2:
            raise error
        return await real_flush(self, *args, **kwargs)

    monkeypatch.setattr(AsyncSession, "flush", flush)


async def test_catalog_is_public(client: AsyncClient) -> None:
    response = await client.get("/default-plans/")
    assert response.status_code == 200
    names = [plan["name"] for plan in response.json()]
    assert "Weekday Grind" in names
    assert "Weekend Recharge" in names


async def test_clone_copies_every_activity_in_order(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    template = get_default_plan("Weekday Grind")

    response = await client.post(
        "/default-plans/clone", json={"plan_name": "Weekday Grind"}, headers=auth_headers
    )

    assert response.status_code == 201
    body = response.json()
    assert body["plan"]["name"] == "Weekday Grind"
    assert body["plan"]["day_type"] == "weekday"
    activities = body["activities"]
    assert len(activities) == len(template.activities) == 10
    assert [a["order"] for a in activities] == list(range(10))
    assert [a["name"] for a in activities] == [a.name for a in template.activities]
    assert all(a["plan_id"] == body["plan"]["id"] for a in activities)
    assert activities[0]["duration_minutes"] == 45  # 06:30 -> 07:15
    assert body["plan"]["description"] == template.description
    assert all(
        a["duration_minutes"] == compute_duration(a["start_time"], a["end_time"])
        for a in activities
    )
    assert all(a["day_type"] == "weekday" for a in activities)

    listed = await client.get(
        "/activity-blocks/", params={"plan_id": body["plan"]["id"]}, headers=auth_headers
    )
    assert listed.status_code == 200
    assert len(listed.json()) == 10


async def test_clone_unknown_template_is_404(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/default-plans/clone", json={"plan_name": "weekday grind"}, headers=auth_headers
    )

    assert response.status_code == 404
    assert response.json() == {"error": "Default plan not found", "kind": "not_found"}

    plans = await client.get("/plans/", headers=auth_headers)
    assert plans.json() == []


async def test_cloning_twice_makes_independent_plans(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    first = await client.post(
        "/default-plans/clone", json={"plan_name": "Weekend Recharge"}, headers=auth_headers
    )
    second = await client.post(
        "/default-plans/clone", json={"plan_name": "Weekend Recharge"}, headers=auth_headers
    )

    assert first.status_code == second.status_code == 201
    assert first.json()["plan"]["id"] != second.json()["plan"]["id"]

    plans = await client.get("/plans/", headers=auth_headers)
    assert len(plans.json()) == 2


async def test_clone_requires_authentication(client: AsyncClient) -> None:
    response = await client.post("/default-plans/clone", json={"plan_name": "Weekday Grind"})
    assert response.status_code == 401
    assert response.json()["kind"] == "unauthorized"


async def test_failed_block_insert_leaves_no_plan(
    client: AsyncClient, auth_headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    fail_second_flush(
        monkeypatch,
        OperationalError("INSERT INTO activity_blocks", {}, Exception("connection lost")),
    )

    response = await client.post(
        "/default-plans/clone", json={"plan_name": "Weekday Grind"}, headers=auth_headers
    )

    assert response.status_code == 503
    assert response.json() == {
        "error": "Could not copy the plan. Nothing was saved.",
        "kind": "store_unavailable",
    }

    monkeypatch.undo()
    plans = await client.get("/plans/", headers=auth_headers)
    assert plans.json() == []


async def test_rejected_block_insert_is_not_reported_as_unavailable(
    database, monkeypatch: pytest.MonkeyPatch
) -> None:
    async with database.session_factory() as db:
        user = User(email="erin@example.com", password_hash="x")
        db.add(user)
        await db.commit()

        fail_second_flush(
            monkeypatch,
            IntegrityError("INSERT INTO activity_blocks", {}, Exception("constraint failed")),
        )
        with pytest.raises(IntegrityError):
            await clone_default_plan(db, user.id, "Weekend Recharge")
        monkeypatch.undo()

        count = await db.execute(select(func.count()).select_from(Plan))
        assert count.scalar_one() == 0
