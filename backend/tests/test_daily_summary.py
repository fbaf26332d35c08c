"""Daily summary upsert, listing and patching."""

from datetime import date

import pytest
from httpx import AsyncClient

from grindlog.services import summaries


async def test_upsert_creates_then_replaces(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    created = await client.post(
        "/daily-summary/",
        json={"log_date": "2024-01-15", "dsa_problems": 3, "blocker": "Flaky CI"},
        headers=auth_headers,
    )
    assert created.status_code == 201
    assert created.json()["log_date"] == "2024-01-15"

    replaced = await client.post(
        "/daily-summary/",
        json={"log_date": "2024-01-15T18:00:00Z", "dsa_problems": 5},
        headers=auth_headers,
    )
    assert replaced.status_code == 200
    body = replaced.json()
    assert body["id"] == created.json()["id"]
    assert body["dsa_problems"] == 5
    # Replace, not merge: the omitted blocker is cleared
    assert body["blocker"] is None

    listed = await client.get("/daily-summary/", params={"date": "2024-01-15"}, headers=auth_headers)
    assert len(listed.json()) == 1


async def test_instants_either_side_of_utc_midnight_are_separate_days(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    late = await client.post(
        "/daily-summary/", json={"log_date": "2024-01-15T23:59:00Z"}, headers=auth_headers
    )
    early = await client.post(
        "/daily-summary/", json={"log_date": "2024-01-16T00:01:00Z"}, headers=auth_headers
    )

    assert late.status_code == early.status_code == 201
    assert late.json()["log_date"] == "2024-01-15"
    assert early.json()["log_date"] == "2024-01-16"


async def test_offset_timestamp_is_filed_under_its_utc_day(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/daily-summary/", json={"log_date": "2024-01-15T21:00:00-05:00"}, headers=auth_headers
    )
    assert response.json()["log_date"] == "2024-01-16"


async def test_blank_priorities_are_dropped(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.post(
        "/daily-summary/",
        json={"log_date": "2024-01-15", "top3_priorities": ["Ship feature", "", "  "]},
        headers=auth_headers,
    )
    assert response.status_code == 201
    assert response.json()["top3_priorities"] == ["Ship feature"]


async def test_more_than_three_priorities_rejected(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    response = await client.post(
        "/daily-summary/",
        json={"log_date": "2024-01-15", "top3_priorities": ["a", "b", "c", "d"]},
        headers=auth_headers,
    )
    assert response.status_code == 400
    assert response.json()["kind"] == "validation_error"


@pytest.mark.parametrize(
    "payload",
    [
        {"dsa_problems": 2},
        {"log_date": "2024-01-15", "energy_rating": 6},
        {"log_date": "2024-01-15", "dsa_problems": -1},
        {"log_date": "yesterday"},
    ],
)
async def test_invalid_summary_is_400(
    client: AsyncClient, auth_headers: dict[str, str], payload: dict
) -> None:
    response = await client.post("/daily-summary/", json=payload, headers=auth_headers)
    assert response.status_code == 400
    assert response.json()["kind"] == "validation_error"


async def test_losing_insert_race_updates_winner(
    client: AsyncClient, auth_headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    winner = await client.post(
        "/daily-summary/", json={"log_date": "2024-01-15", "dsa_problems": 1}, headers=auth_headers
    )
    assert winner.status_code == 201

    real_find = summaries.find_summary_for_day
    calls = 0

    async def stale_first_read(db, user_id, day):
        # First lookup misses, as if the winner had not committed yet
        nonlocal calls
        calls += 1
        if calls == 1:
            return None
        return await real_find(db, user_id, day)

    monkeypatch.setattr(summaries, "find_summary_for_day", stale_first_read)

    loser = await client.post(
        "/daily-summary/", json={"log_date": "2024-01-15", "dsa_problems": 4}, headers=auth_headers
    )

    assert loser.status_code == 200
    assert loser.json()["id"] == winner.json()["id"]
    assert loser.json()["dsa_problems"] == 4
    assert calls == 2

    monkeypatch.undo()
    listed = await client.get("/daily-summary/", params={"date": "2024-01-15"}, headers=auth_headers)
    assert [s["dsa_problems"] for s in listed.json()] == [4]


async def test_race_with_vanished_winner_is_conflict(
    client: AsyncClient, auth_headers: dict[str, str], monkeypatch: pytest.MonkeyPatch
) -> None:
    await client.post("/daily-summary/", json={"log_date": "2024-01-15"}, headers=auth_headers)

    async def never_found(db, user_id, day):
        return None

    monkeypatch.setattr(summaries, "find_summary_for_day", never_found)

    response = await client.post(
        "/daily-summary/", json={"log_date": "2024-01-15"}, headers=auth_headers
    )
    assert response.status_code == 409
    assert response.json()["kind"] == "conflict"


async def test_list_by_range_newest_first(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    for day in ("2024-01-10", "2024-01-12", "2024-01-20"):
        await client.post("/daily-summary/", json={"log_date": day}, headers=auth_headers)

    response = await client.get(
        "/daily-summary/",
        params={"start_date": "2024-01-10", "end_date": "2024-01-15"},
        headers=auth_headers,
    )

    assert response.status_code == 200
    assert [s["log_date"] for s in response.json()] == ["2024-01-12", "2024-01-10"]


async def test_half_open_range_is_rejected(client: AsyncClient, auth_headers: dict[str, str]) -> None:
    response = await client.get(
        "/daily-summary/", params={"start_date": "2024-01-10"}, headers=auth_headers
    )
    assert response.status_code == 400
    assert response.json()["kind"] == "validation_error"


async def test_patch_changes_only_supplied_fields(
    client: AsyncClient, auth_headers: dict[str, str]
) -> None:
    created = await client.post(
        "/daily-summary/",
        json={"log_date": "2024-01-15", "dsa_problems": 2, "blocker": "Sleep"},
        headers=auth_headers,
    )
    summary_id = created.json()["id"]

    response = await client.patch(
        f"/daily-summary/{summary_id}",
        json={"commits_pushed": 7, "top3_priorities": ["Apply", " "]},
        headers=auth_headers,
    )

    assert response.status_code == 200
    body = response.json()
    assert body["commits_pushed"] == 7
    assert body["dsa_problems"] == 2
    assert body["blocker"] == "Sleep"
    assert body["top3_priorities"] == ["Apply"]
    assert body["log_date"] == date(2024, 1, 15).isoformat()


async def test_summaries_are_private(
    client: AsyncClient, auth_headers: dict[str, str], other_auth_headers: dict[str, str]
) -> None:
    created = await client.post(
        "/daily-summary/", json={"log_date": "2024-01-15"}, headers=auth_headers
    )

    listed = await client.get("/daily-summary/", headers=other_auth_headers)
    assert listed.json() == []

    patched = await client.patch(
        f"/daily-summary/{created.json()['id']}",
        json={"dsa_problems": 9},
        headers=other_auth_headers,
    )
    assert patched.status_code == 404
