"""Integration tests for the events and bookings HTTP API.

Run with: pytest tests/test_event_catalog.py -v
"""

from uuid import uuid4

import pytest
from rest_framework.test import APIClient


def create_event(api_client: APIClient, data: dict) -> dict:
    response = api_client.post("/api/events", data, format="json")
    assert response.status_code == 201, response.content
    return response.json()


@pytest.mark.django_db
class TestEventCreate:
    """Tests for POST /api/events"""

    def test_create_event_returns_normalized_event(self, api_client: APIClient, event_data):
        """Given loose input, stores and returns canonical fields."""
        body = create_event(api_client, event_data)
        assert body["slug"] == "my-cool-event"
        assert body["date"] == "2025-03-05"
        assert body["time"] == "09:05"
        assert body["tags"] == ["react", "nextjs"]

    def test_create_duplicate_title_conflicts(self, api_client: APIClient, event_data):
        """Given an event titled "Launch Day", a second one returns 409."""
        create_event(api_client, {**event_data, "title": "Launch Day"})
        response = api_client.post(
            "/api/events", {**event_data, "title": "Launch Day"}, format="json"
        )
        assert response.status_code == 409
        assert response.json()["error"]["code"] == "UNIQUENESS_VIOLATION"

    def test_create_missing_field(self, api_client: APIClient, event_data):
        """Given no venue, returns 400 naming the field."""
        data = {k: v for k, v in event_data.items() if k != "venue"}
        response = api_client.post("/api/events", data, format="json")
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "MISSING_REQUIRED_FIELD",
            "message": "Field 'venue' is required",
            "field": "venue",
        }

    @pytest.mark.parametrize(
        "field,value,code",
        [
            ("mode", "in-person", "INVALID_ENUM_VALUE"),
            ("date", "not a date", "INVALID_DATE_FORMAT"),
            ("time", "not a time", "INVALID_TIME_FORMAT"),
            ("tags", [], "EMPTY_COLLECTION_FIELD"),
        ],
    )
    def test_create_invalid_field(self, api_client: APIClient, event_data, field, value, code):
        response = api_client.post("/api/events", {**event_data, field: value}, format="json")
        assert response.status_code == 400
        assert response.json()["error"]["code"] == code
        assert response.json()["error"]["field"] == field

    def test_create_malformed_body(self, api_client: APIClient, event_data):
        """Given agenda that is not a list, returns 400 before reaching the service."""
        response = api_client.post(
            "/api/events", {**event_data, "agenda": "Keynote"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_INPUT"


@pytest.mark.django_db
class TestEventRead:
    """Tests for GET /api/events and GET /api/events/{slug}"""

    def test_list_events(self, api_client: APIClient, event_data):
        create_event(api_client, event_data)
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert [e["slug"] for e in response.json()] == ["my-cool-event"]

    def test_list_events_empty_catalog(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        assert response.json() == []

    def test_get_event_returns_details(self, api_client: APIClient, event_data):
        created = create_event(api_client, event_data)
        response = api_client.get("/api/events/my-cool-event")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/missing")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "EVENT_NOT_FOUND"

    def test_get_event_with_non_ascii_slug(self, api_client: APIClient, event_data):
        created = create_event(api_client, {**event_data, "title": "東京 Tour"})
        assert created["slug"] == "東京-tour"
        response = api_client.get("/api/events/東京-tour")
        assert response.status_code == 200
        assert response.json()["title"] == "東京 Tour"

    def test_get_event_with_edge_hyphen_slug(self, api_client: APIClient, event_data):
        created = create_event(api_client, {**event_data, "title": "-- Launch --"})
        assert created["slug"] == "-launch-"
        response = api_client.get("/api/events/-launch-/bookings")
        assert response.status_code == 200


@pytest.mark.django_db
class TestEventUpdate:
    """Tests for PATCH /api/events/{slug}"""

    def test_patch_unrelated_field(self, api_client: APIClient, event_data):
        create_event(api_client, event_data)
        response = api_client.patch("/api/events/my-cool-event", {"venue": "Hall B"}, format="json")
        assert response.status_code == 200
        body = response.json()
        assert body["venue"] == "Hall B"
        assert body["slug"] == "my-cool-event"
        assert body["date"] == "2025-03-05"

    def test_patch_title_moves_slug(self, api_client: APIClient, event_data):
        create_event(api_client, event_data)
        response = api_client.patch("/api/events/my-cool-event", {"title": "Launch Day"}, format="json")
        assert response.status_code == 200
        assert response.json()["slug"] == "launch-day"
        assert api_client.get("/api/events/my-cool-event").status_code == 404

    def test_patch_bad_time_changes_nothing(self, api_client: APIClient, event_data):
        create_event(api_client, event_data)
        response = api_client.patch(
            "/api/events/my-cool-event", {"venue": "Hall B", "time": "teatime"}, format="json"
        )
        assert response.status_code == 400
        assert api_client.get("/api/events/my-cool-event").json()["venue"] == event_data["venue"]


@pytest.mark.django_db
class TestBookings:
    """Tests for POST /api/bookings and GET /api/events/{slug}/bookings"""

    def test_create_booking(self, api_client: APIClient, event_data):
        event = create_event(api_client, event_data)
        response = api_client.post(
            "/api/bookings",
            {"event_id": event["id"], "email": "  USER@Example.com "},
            format="json",
        )
        assert response.status_code == 201
        assert response.json()["email"] == "user@example.com"
        assert response.json()["event_id"] == event["id"]

        listed = api_client.get("/api/events/my-cool-event/bookings").json()
        assert [b["email"] for b in listed] == ["user@example.com"]

    def test_create_booking_unknown_event(self, api_client: APIClient):
        response = api_client.post(
            "/api/bookings", {"event_id": str(uuid4()), "email": "user@example.com"}, format="json"
        )
        assert response.status_code == 422
        assert response.json()["error"]["code"] == "REFERENTIAL_INTEGRITY"

    def test_create_booking_invalid_event_id(self, api_client: APIClient):
        response = api_client.post(
            "/api/bookings", {"event_id": "123", "email": "user@example.com"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"]["code"] == "INVALID_EVENT_ID"

    @pytest.mark.parametrize(
        "body",
        [{"email": "user@example.com"}, {"event_id": "", "email": "user@example.com"}],
    )
    def test_create_booking_missing_event_id(self, api_client: APIClient, body):
        response = api_client.post("/api/bookings", body, format="json")
        assert response.status_code == 400
        assert response.json()["error"] == {
            "code": "MISSING_REQUIRED_FIELD",
            "message": "Field 'event_id' is required",
            "field": "event_id",
        }

    def test_create_booking_bad_email(self, api_client: APIClient, event_data):
        event = create_event(api_client, event_data)
        response = api_client.post(
            "/api/bookings", {"event_id": event["id"], "email": "nope"}, format="json"
        )
        assert response.status_code == 400
        assert response.json()["error"]["field"] == "email"

    def test_bookings_for_unknown_event(self, api_client: APIClient):
        response = api_client.get("/api/events/missing/bookings")
        assert response.status_code == 404
