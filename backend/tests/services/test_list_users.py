"""List Users and routing fallback — GET /api/exercise/users, static index, 404s.

Invariants:
    - /users returns a bare array, one raw record per created user
    - Unmatched paths and wrong methods → 404 "Not Found" as plain text
    - Unexpected persistence failures → 500 "Internal Server Error" as plain text
"""

from app.core.errors import InternalError
from app.services.exercise_tracker import ExerciseTracker


async def test_list_users_returns_every_user(client):
    for name in ("u1", "u2", "u3"):
        await client.post("/api/exercise/new-user", data={"username": name})
    res = await client.get("/api/exercise/users")
    assert res.status_code == 200
    users = res.json()
    assert isinstance(users, list)
    assert len(users) == 3
    assert {u["username"] for u in users} == {"u1", "u2", "u3"}
    assert all(u["id"] for u in users)


async def test_list_users_exposes_raw_record(client, seed_user):
    res = await client.get("/api/exercise/users")
    (record,) = res.json()
    assert set(record) == {"id", "username", "created_at"}


async def test_list_users_empty(client):
    res = await client.get("/api/exercise/users")
    assert res.json() == []


async def test_unknown_path_is_not_found(client):
    res = await client.get("/api/exercise/nope")
    assert res.status_code == 404
    assert res.text == "Not Found"
    assert res.headers["content-type"].startswith("text/plain")


async def test_wrong_method_is_not_found(client):
    res = await client.get("/api/exercise/add")
    assert res.status_code == 404
    assert res.text == "Not Found"


async def test_post_to_unknown_path_is_not_found(client):
    res = await client.post("/somewhere", data={"a": "b"})
    assert res.status_code == 404
    assert res.text == "Not Found"


async def test_index_page_is_served(client):
    res = await client.get("/")
    assert res.status_code == 200
    assert "text/html" in res.headers["content-type"]
    assert "/api/exercise/new-user" in res.text


async def test_persistence_failure_is_internal_error(client, monkeypatch):
    async def broken(self):
        raise InternalError.database("query", RuntimeError("connection reset"))

    monkeypatch.setattr(ExerciseTracker, "list_users", broken)
    res = await client.get("/api/exercise/users")
    assert res.status_code == 500
    assert res.text == "Internal Server Error"
