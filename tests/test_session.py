from concurrent.futures import ThreadPoolExecutor

import pytest
from fastapi.testclient import TestClient

from app.db import session as db_session
from app.main import app
from tests.conftest import API, bearer

TODOS = f"{API}/todos"


@pytest.fixture
def live_client(engine, monkeypatch):
    # vraie dépendance get_session (avec son verrou), sur la base du test
    monkeypatch.setattr(db_session, "engine", engine)
    app.dependency_overrides.clear()
    with TestClient(app) as c:
        yield c


def test_concurrent_writes_are_all_kept(live_client):
    res = live_client.post(
        f"{API}/auth/register",
        json={"name": "Alice", "email": "alice@test.com", "password": "pass123"},
    )
    token = res.json()["token"]

    def create(i):
        return live_client.post(TODOS, json={"title": f"task {i}"}, headers=bearer(token)).status_code

    with ThreadPoolExecutor(max_workers=8) as pool:
        statuses = list(pool.map(create, range(40)))

    assert set(statuses) == {201}
    todos = live_client.get(TODOS, headers=bearer(token)).json()
    assert sorted(t["title"] for t in todos) == sorted(f"task {i}" for i in range(40))
    entries = live_client.get(f"{TODOS}/activity", headers=bearer(token)).json()
    assert len(entries) == 40
    assert {e["action"] for e in entries} == {"created"}


def test_concurrent_logins_get_distinct_sessions(live_client):
    live_client.post(
        f"{API}/auth/register",
        json={"name": "Bob", "email": "bob@test.com", "password": "pass123"},
    )

    def login(_):
        res = live_client.post(f"{API}/auth/login", json={"email": "bob@test.com", "password": "pass123"})
        assert res.status_code == 200
        return res.json()["token"]

    with ThreadPoolExecutor(max_workers=8) as pool:
        tokens = list(pool.map(login, range(20)))

    assert len(set(tokens)) == 20
    for token in tokens:
        assert live_client.get(f"{API}/auth/me", headers=bearer(token)).status_code == 200
