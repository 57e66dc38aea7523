"""Activity Log — GET /api/exercise/log.

Invariants:
    - Entries within [from, to] inclusive, newest first
    - limit caps the result at the most recent entries
    - Absent or unparsable bounds default to epoch / now
    - Unknown userId → 400 "Unknown UserID"
"""

from uuid import uuid4


async def test_log_returns_all_exercises_newest_first(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={"userId": str(seed_user.id)})
    assert res.status_code == 200
    body = res.json()
    assert body["id"] == str(seed_user.id)
    assert body["username"] == "fcc_test"
    assert body["log"] == [
        {"description": "bike", "duration": 60, "date": "Thu Feb 01 2024"},
        {"description": "swim", "duration": 45, "date": "Mon Jan 15 2024"},
        {"description": "run", "duration": 30, "date": "Mon Jan 01 2024"},
    ]


async def test_log_range_is_inclusive(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "from": "2024-01-01", "to": "2024-01-15",
    })
    dates = [e["date"] for e in res.json()["log"]]
    assert dates == ["Mon Jan 15 2024", "Mon Jan 01 2024"]


async def test_log_accepts_human_readable_bounds(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "from": "Tue Jan 02 2024",
    })
    dates = [e["date"] for e in res.json()["log"]]
    assert dates == ["Thu Feb 01 2024", "Mon Jan 15 2024"]


async def test_log_limit_returns_most_recent(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "limit": "1",
    })
    log = res.json()["log"]
    assert len(log) == 1
    assert log[0]["description"] == "bike"


async def test_log_non_numeric_limit_means_unbounded(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "limit": "many",
    })
    assert len(res.json()["log"]) == 3


async def test_log_invalid_bounds_fall_back_to_defaults(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "from": "garbage", "to": "garbage",
    })
    assert len(res.json()["log"]) == 3


async def test_log_empty_for_user_without_exercises(client, seed_user):
    res = await client.get("/api/exercise/log", params={"userId": str(seed_user.id)})
    assert res.status_code == 200
    assert res.json()["log"] == []


async def test_log_unknown_user(client):
    res = await client.get("/api/exercise/log", params={"userId": str(uuid4())})
    assert res.status_code == 400
    assert res.text == "Unknown UserID"


async def test_log_missing_user_id(client):
    res = await client.get("/api/exercise/log")
    assert res.status_code == 400
    assert res.text == "Unknown UserID"


async def test_log_after_adding_through_api(client, seed_user):
    for day in ("2023-05-01", "2023-05-03", "2023-05-02"):
        await client.post("/api/exercise/add", data={
            "userId": str(seed_user.id), "description": day,
            "duration": "10", "date": day,
        })
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "from": "2023-05-02", "to": "2023-05-03",
    })
    assert [e["description"] for e in res.json()["log"]] == [
        "2023-05-03", "2023-05-02",
    ]


async def test_log_out_of_range_bound_falls_back_to_now(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "to": "0001-01-01T00:00:00+05:00",
    })
    assert res.status_code == 200
    assert len(res.json()["log"]) == 3


async def test_log_oversized_limit_means_unbounded(client, seed_user, seed_exercises):
    res = await client.get("/api/exercise/log", params={
        "userId": str(seed_user.id), "limit": "1e30",
    })
    assert res.status_code == 200
    assert len(res.json()["log"]) == 3
