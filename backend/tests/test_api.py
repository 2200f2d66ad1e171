def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "service": "travelmate"}


# ── Users ──


def test_get_user(client):
    resp = client.get("/api/user/1")
    assert resp.status_code == 200
    body = resp.json()
    assert body["email"] == "john@example.com"
    assert body["preferences"]["destinations"] == ["Europe", "Asia"]


def test_get_user_not_found(client):
    assert client.get("/api/user/42").status_code == 404


def test_get_user_bad_id_is_400(client):
    assert client.get("/api/user/abc").status_code == 400


def test_replace_preferences(client):
    prefs = {"budget": "$500 - $1,000", "style": ["City Breaks"], "alerts": ["Price drop alerts"]}
    resp = client.put("/api/user/1/preferences", json={"preferences": prefs})
    assert resp.status_code == 200
    assert resp.json()["preferences"] == {
        "budget": "$500 - $1,000",
        "style": ["City Breaks"],
        "destinations": [],
        "accommodation": None,
        "alerts": ["Price drop alerts"],
    }
    assert client.get("/api/user/1").json()["preferences"]["budget"] == "$500 - $1,000"


def test_replace_preferences_from_form_keys(client):
    prefs = {
        "travelStyle": ["Adventure & Outdoor"],
        "budget": "$500",
        "accommodation": "",
        "destinations": ["Asia"],
        "alerts": [],
    }
    resp = client.put("/api/user/1/preferences", json={"preferences": prefs})
    assert resp.status_code == 200
    assert resp.json()["preferences"]["style"] == ["Adventure & Outdoor"]
    assert client.get("/api/user/1").json()["preferences"]["style"] == ["Adventure & Outdoor"]


def test_replace_preferences_unknown_key_is_rejected(client):
    resp = client.put("/api/user/1/preferences", json={"preferences": {"budget": "$500", "seat": "window"}})
    assert resp.status_code == 400
    # stored preferences untouched
    assert client.get("/api/user/1").json()["preferences"]["budget"] == "$1,000 - $2,500"


def test_replace_preferences_unknown_user(client):
    resp = client.put("/api/user/7/preferences", json={"preferences": {}})
    assert resp.status_code == 404


def test_create_user(client):
    resp = client.post("/api/user", json={"name": "Jane Roe", "email": "jane@example.com"})
    assert resp.status_code == 201
    assert resp.json()["id"] == 2


def test_create_user_duplicate_email(client):
    resp = client.post("/api/user", json={"name": "John Again", "email": "john@example.com"})
    assert resp.status_code == 409


def test_create_user_invalid_email(client):
    resp = client.post("/api/user", json={"name": "Bad", "email": "not-an-email"})
    assert resp.status_code == 400


# ── Catalog ──


def test_flight_search(client):
    resp = client.post(
        "/api/flights/search",
        json={"from": "Boston", "to": "Paris", "departure_date": "2024-12-15", "passengers": 2, "class": "business"},
    )
    assert resp.status_code == 200
    flights = resp.json()
    assert len(flights) == 1
    assert flights[0]["airline"] == "Delta Airlines"
    assert flights[0]["class"] == "economy"
    assert flights[0]["price"] == "599.00"


def test_flight_search_invalid(client):
    base = {"from": "Boston", "to": "Paris", "departure_date": "2024-12-15"}
    assert client.post("/api/flights/search", json={**base, "passengers": 0}).status_code == 400
    assert client.post("/api/flights/search", json={**base, "class": "premium"}).status_code == 400
    assert client.post("/api/flights/search", json={**base, "from": ""}).status_code == 400
    assert client.post("/api/flights/search", json={"to": "Paris"}).status_code == 400


def test_get_flight(client):
    assert client.get("/api/flights/2").json()["to_city"] == "Tokyo"
    assert client.get("/api/flights/3").status_code == 404


def test_hotel_search(client):
    resp = client.post(
        "/api/hotels/search",
        json={"destination": "rome", "check_in": "2024-12-15", "check_out": "2024-12-22"},
    )
    assert resp.status_code == 200
    hotels = resp.json()
    assert [h["location"] for h in hotels] == ["Rome, Italy"]
    assert hotels[0]["amenities"] == ["WiFi", "Pool", "Spa", "Restaurant"]


def test_hotel_search_invalid(client):
    resp = client.post(
        "/api/hotels/search",
        json={"destination": "Rome", "check_in": "2024-12-15", "check_out": "2024-12-22", "rooms": 0},
    )
    assert resp.status_code == 400


def test_get_hotel(client):
    assert client.get("/api/hotels/1").json()["name"] == "Grand Hotel Rome"
    assert client.get("/api/hotels/9").status_code == 404


def test_activity_search(client):
    resp = client.post("/api/activities/search", json={"destination": "Tokyo", "type": "adventure"})
    assert resp.status_code == 200
    assert [a["name"] for a in resp.json()] == ["Mount Fuji Day Trip"]


def test_activity_search_requires_destination(client):
    assert client.post("/api/activities/search", json={"type": "Cultural"}).status_code == 400


def test_get_activity(client):
    assert client.get("/api/activities/1").status_code == 200
    assert client.get("/api/activities/3").status_code == 404


def test_deals(client):
    assert len(client.get("/api/deals").json()) == 4
    assert len(client.get("/api/deals", params={"type": "all"}).json()) == 4
    hotels = client.get("/api/deals", params={"type": "hotels"}).json()
    assert [d["badge"] for d in hotels] == ["LIMITED"]


def test_get_deal(client):
    assert client.get("/api/deals/4").json()["title"] == "Maldives Package"
    assert client.get("/api/deals/5").status_code == 404


# ── Trips ──


def _new_trip(**overrides):
    body = {
        "user_id": 1,
        "name": "Iceland Road Trip",
        "destination": "Reykjavik, Iceland",
        "start_date": "2025-06-01",
        "end_date": "2025-06-10",
        "status": "upcoming",
        "total_price": "2100.00",
        "details": {"flights": [], "hotels": [], "activities": []},
    }
    body.update(overrides)
    return body


def test_user_trips(client):
    trips = client.get("/api/trips/user/1").json()
    assert [t["name"] for t in trips] == ["Swiss Alps Adventure", "Thailand Explorer", "Greek Islands Getaway"]


def test_user_trips_unknown_user(client):
    resp = client.get("/api/trips/user/999")
    assert resp.status_code == 200
    assert resp.json() == []


def test_create_trip(client):
    resp = client.post("/api/trips", json=_new_trip())
    assert resp.status_code == 201
    trip = resp.json()
    assert trip["id"] == 4
    assert trip["total_price"] == "2100.00"
    assert trip["created_at"]
    assert client.get("/api/trips/4").json() == trip


def test_create_trip_invalid(client):
    assert client.post("/api/trips", json=_new_trip(status="cancelled")).status_code == 400
    body = _new_trip()
    del body["name"]
    assert client.post("/api/trips", json=body).status_code == 400


def test_update_trip_partial(client):
    resp = client.put("/api/trips/1", json={"status": "completed", "notes": "ignored"})
    assert resp.status_code == 200
    trip = resp.json()
    assert trip["status"] == "completed"
    assert trip["name"] == "Swiss Alps Adventure"
    assert "notes" not in trip


def test_update_trip_not_found(client):
    assert client.put("/api/trips/99", json={"name": "Ghost"}).status_code == 404


def test_update_trip_rejects_null_required_field(client):
    assert client.put("/api/trips/1", json={"name": None}).status_code == 400


def test_update_trip_can_clear_dates(client):
    trip = client.put("/api/trips/1", json={"start_date": None, "end_date": None}).json()
    assert trip["start_date"] is None
    assert trip["end_date"] is None


def test_delete_trip(client):
    assert client.delete("/api/trips/2").status_code == 204
    assert client.delete("/api/trips/2").status_code == 404
    assert client.get("/api/trips/2").status_code == 404


# ── Saved trips ──


def test_saved_trips_flow(client):
    assert client.get("/api/saved-trips/user/1").json() == []

    resp = client.post(
        "/api/saved-trips",
        json={"user_id": 1, "hotel_id": 1, "activity_ids": [1], "custom_name": "Rome shortlist"},
    )
    assert resp.status_code == 201
    saved = resp.json()
    assert saved["id"] == 1
    assert saved["activity_ids"] == [1]

    assert client.get("/api/saved-trips/user/1").json() == [saved]
    assert client.delete(f"/api/saved-trips/{saved['id']}").status_code == 204
    assert client.delete(f"/api/saved-trips/{saved['id']}").status_code == 404


def test_saved_trip_requires_user(client):
    assert client.post("/api/saved-trips", json={"hotel_id": 1}).status_code == 400


# ── Recommendations ──


def test_recommendations_seed_user(client):
    resp = client.get("/api/recommendations/user/1")
    assert resp.status_code == 200
    assert resp.json() == []


def test_recommendations_other_users_trips(client):
    jane = client.post("/api/user", json={"name": "Jane Roe", "email": "jane@example.com"}).json()
    recs = client.get(f"/api/recommendations/user/{jane['id']}").json()
    assert [t["id"] for t in recs] == [1, 2, 3]


def test_each_client_gets_fresh_store(client):
    # trip 1 was deleted/updated by earlier tests on their own store
    assert client.get("/api/trips/1").json()["status"] == "upcoming"
    assert len(client.get("/api/trips/user/1").json()) == 3
