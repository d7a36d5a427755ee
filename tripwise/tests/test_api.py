from __future__ import annotations

from fastapi.testclient import TestClient

from tripwise.app import app
from tripwise.browse.cache import clear_cache
from tripwise.browse.registry import active_session_count, clear_sessions


def _client() -> TestClient:
    # fresh cookie jar, so every test gets its own browse session
    return TestClient(app)


def _names(resp) -> list[str]:
    return [p["name"] for p in resp.json()["places"]]


def test_health():
    resp = _client().get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


def test_categories():
    assert _client().get("/categories").json() == ["attraction", "restaurant", "hotel"]


def test_places_without_filters():
    resp = _client().get("/places")
    assert resp.status_code == 200
    body = resp.json()
    assert body["search_text"] == ""
    assert body["selected_category"] is None
    assert body["total_places"] == 6
    assert [p["id"] for p in body["places"]] == ["1", "2", "3", "4", "5", "6"]
    assert all(p["is_favorite"] is False for p in body["places"])


def test_search_filters_by_name():
    client = _client()
    resp = client.put("/browse/search", json={"text": "HARBOR"})
    assert resp.status_code == 200
    assert _names(resp) == ["Blue Harbor Hotel"]
    # filter state sticks for the session
    assert _names(client.get("/places")) == ["Blue Harbor Hotel"]


def test_category_select_and_toggle_off():
    client = _client()
    resp = client.post("/browse/category", json={"category": "hotel"})
    assert resp.json()["selected_category"] == "hotel"
    assert _names(resp) == ["Blue Harbor Hotel", "Maple Inn"]

    resp = client.post("/browse/category", json={"category": "hotel"})
    assert resp.json()["selected_category"] is None
    assert len(resp.json()["places"]) == 6


def test_category_rejects_unknown_value():
    resp = _client().post("/browse/category", json={"category": "spa"})
    assert resp.status_code == 422


def test_toggle_favorite():
    client = _client()
    resp = client.post("/favorites/3/toggle")
    assert resp.status_code == 200
    flags = {p["id"]: p["is_favorite"] for p in resp.json()["places"]}
    assert flags["3"] is True
    assert sum(flags.values()) == 1

    client.post("/favorites/1/toggle")
    assert client.get("/favorites").json() == {"favorites": ["1", "3"]}

    client.post("/favorites/3/toggle")
    assert client.get("/favorites").json() == {"favorites": ["1"]}


def test_toggle_unknown_favorite_is_noop():
    client = _client()
    resp = client.post("/favorites/nope/toggle")
    assert resp.status_code == 200
    assert client.get("/favorites").json() == {"favorites": []}


def test_sessions_are_independent():
    alice, bob = _client(), _client()
    alice.post("/favorites/2/toggle")
    alice.put("/browse/search", json={"text": "sky"})

    assert bob.get("/favorites").json() == {"favorites": []}
    assert len(bob.get("/places").json()["places"]) == 6


def test_ending_session_resets_favorites_and_filters():
    clear_sessions()
    client = _client()
    client.post("/favorites/4/toggle")
    client.post("/browse/category", json={"category": "restaurant"})
    assert active_session_count() == 1

    resp = client.post("/session/end")
    assert resp.json() == {"status": "ended"}
    assert active_session_count() == 0

    body = client.get("/places").json()
    assert body["selected_category"] is None
    assert not any(p["is_favorite"] for p in body["places"])


def test_end_without_session():
    assert _client().post("/session/end").json() == {"status": "no_session"}


def test_cache_stats_endpoint():
    clear_cache()
    client = _client()
    client.get("/places")
    client.get("/places")
    body = client.get("/cache/stats").json()
    assert body["hits"] >= 1
    assert "hit_rate" in body


def test_long_search_text_is_accepted():
    resp = _client().put("/browse/search", json={"text": "x" * 1000})
    assert resp.status_code == 200
    assert resp.json()["places"] == []
