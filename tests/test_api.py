import pytest
from fastapi.testclient import TestClient

from stormharm.api.dependencies import set_store
from stormharm.data.store import DataStore
from stormharm.main import create_app


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as c:
        yield c
    set_store(None)


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "rows": 6, "event_types": 4, "source_files": 0}


def test_event_types(client):
    body = client.get("/api/event-types").json()
    assert body["event_types"] == ["FLOOD", "HAIL", "HURRICANE", "TORNADO"]
    assert body["count"] == 4


def test_ranking(client):
    body = client.get("/api/rankings/fatalities", params={"top": 2}).json()
    assert body["field"] == "fatalities"
    assert [e["event_type"] for e in body["entries"]] == ["TORNADO", "HURRICANE"]


def test_cost_ranking_in_billions(client):
    body = client.get("/api/rankings/property_cost").json()
    assert body["unit"] == "Billions of USD"
    assert body["entries"][0] == {"rank": 1, "event_type": "HURRICANE", "value": 3.0}


def test_unknown_field(client):
    resp = client.get("/api/rankings/deaths")
    assert resp.status_code == 400


def test_invalid_top(client):
    assert client.get("/api/rankings/injuries", params={"top": 0}).status_code == 422


def test_report(client):
    body = client.get("/api/report", params={"top": 1}).json()
    questions = body["data"]["questions"]
    assert len(questions) == 2
    assert all(len(r["entries"]) == 1 for q in questions for r in q["rankings"])


def test_store_not_loaded():
    set_store(DataStore())
    app = create_app()
    # No lifespan run: the unloaded store is still in place
    client = TestClient(app)
    assert client.get("/api/health").status_code == 503
    set_store(None)


def test_count_rankings_stay_integral(client):
    ranked = client.get("/api/rankings/fatalities").json()["entries"][0]
    reported = client.get("/api/report").json()["data"]["questions"][0]["rankings"][0]["entries"][0]

    assert ranked == reported == {"rank": 1, "event_type": "TORNADO", "value": 8}
    assert isinstance(ranked["value"], int)
