"""Integration tests for the HTTP API.

Run with: pytest tests/test_api.py -v
"""

from datetime import datetime

import pytest
from django.utils import timezone
from rest_framework.test import APIClient

REGISTRATION = {
    "full_name": "Ada Lovelace",
    "email": "ada@example.com",
    "phone": "+1 (555) 010-0100",
    "number_of_attendees": 2,
    "special_requests": "Vegetarian meal",
}


class TestEventList:
    """Tests for GET /api/events"""

    def test_list_events_sorted_by_date(self, api_client: APIClient):
        response = api_client.get("/api/events")
        assert response.status_code == 200
        ids = [e["id"] for e in response.json()["results"]]
        assert ids == [4, 2, 3, 5, 1]

    def test_list_upcoming_events(self, api_client: APIClient):
        """Upcoming events all start at or after the current time."""
        response = api_client.get("/api/events", {"upcoming": "true"})
        assert response.status_code == 200
        now = timezone.now()
        for event in response.json()["results"]:
            assert datetime.fromisoformat(event["date"].replace("Z", "+00:00")) >= now


class TestEventDetail:
    """Tests for GET /api/events/{id}"""

    def test_get_event_returns_details(self, api_client: APIClient):
        response = api_client.get("/api/events/1")
        assert response.status_code == 200
        assert response.json()["name"] == "Tech Conference 2025"

    def test_get_event_not_found(self, api_client: APIClient):
        response = api_client.get("/api/events/999")
        assert response.status_code == 404
        assert response.json()["code"] == "EVENT_NOT_FOUND"

    def test_get_event_invalid_id_format(self, api_client: APIClient):
        response = api_client.get("/api/events/abc")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_ID"

    def test_get_event_tracks_view_in_session(self, api_client: APIClient):
        api_client.get("/api/events/3")
        api_client.get("/api/events/3")
        session = api_client.get("/api/session").json()
        assert session["viewed_events"] == [3]
        assert session["page_views"] == 2


class TestRegistrations:
    """Tests for /api/events/{id}/registrations"""

    def test_register_for_event(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/2/registrations", REGISTRATION, format="json"
        )
        assert response.status_code == 201
        body = response.json()
        assert body["id"] == 1
        assert body["event_id"] == 2
        assert body["registration_date"] is not None

        listing = api_client.get("/api/events/2/registrations").json()
        assert listing["total_registered_attendees"] == 2
        assert [r["id"] for r in listing["results"]] == [1]

    def test_register_records_session(self, api_client: APIClient):
        api_client.post("/api/events/2/registrations", REGISTRATION, format="json")
        session = api_client.get("/api/session").json()
        assert session["registered_events"] == [2]

    def test_register_unknown_event(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/99/registrations", REGISTRATION, format="json"
        )
        assert response.status_code == 404
        assert response.json()["code"] == "REFERENCE_NOT_FOUND"

    @pytest.mark.parametrize(
        "field, value",
        [
            ("full_name", "A"),
            ("email", "not-an-email"),
            ("phone", "call me"),
            ("number_of_attendees", 11),
            ("number_of_attendees", 0),
            ("special_requests", "x" * 501),
        ],
    )
    def test_register_rejects_invalid_fields(self, api_client: APIClient, field, value):
        payload = {**REGISTRATION, field: value}
        response = api_client.post("/api/events/1/registrations", payload, format="json")
        assert response.status_code == 400
        assert field in response.json()["errors"]

    def test_register_requires_contact_fields(self, api_client: APIClient):
        response = api_client.post("/api/events/1/registrations", {}, format="json")
        assert response.status_code == 400
        assert response.json()["errors"]["full_name"] == ["Full name is required"]


class TestAttendees:
    """Tests for attendee sign-up, listing, lookup and check-in."""

    def add(self, api_client: APIClient, name: str, email: str, count: int) -> dict:
        response = api_client.post(
            "/api/events/1/attendees",
            {
                "full_name": name,
                "email": email,
                "phone": "555-0100",
                "number_of_attendees": count,
            },
            format="json",
        )
        assert response.status_code == 201
        return response.json()

    def test_attendee_tagged_with_session(self, api_client: APIClient):
        attendee = self.add(api_client, "Ada Lovelace", "ada@example.com", 1)
        session = api_client.get("/api/session").json()
        assert attendee["session_id"] == session["session_id"]
        assert attendee["initials"] == "AL"
        assert attendee["checked_in"] is False

    def test_attendance_counts_and_check_in(self, api_client: APIClient):
        first = self.add(api_client, "Ada Lovelace", "ada@example.com", 2)
        self.add(api_client, "Grace Hopper", "grace@example.com", 1)

        response = api_client.post(f"/api/attendees/{first['id']}/check-in")
        assert response.status_code == 200
        assert response.json()["checked_in"] is True
        assert response.json()["check_in_time"] is not None

        listing = api_client.get("/api/events/1/attendees").json()
        assert listing["total_attendees"] == 3
        assert listing["checked_in"] == 2
        assert [a["full_name"] for a in listing["results"]] == [
            "Grace Hopper",
            "Ada Lovelace",
        ]

    def test_check_in_unknown_attendee(self, api_client: APIClient):
        response = api_client.post("/api/attendees/42/check-in")
        assert response.status_code == 404
        assert response.json()["code"] == "ATTENDEE_NOT_FOUND"

    def test_lookup_by_email_ignores_case(self, api_client: APIClient):
        attendee = self.add(api_client, "Ada Lovelace", "A@B.com", 1)
        response = api_client.get("/api/events/1/attendees/lookup", {"email": "a@b.com"})
        assert response.status_code == 200
        assert response.json()["id"] == attendee["id"]

    def test_lookup_missing_email(self, api_client: APIClient):
        response = api_client.get(
            "/api/events/1/attendees/lookup", {"email": "nobody@example.com"}
        )
        assert response.status_code == 404

    def test_lookup_requires_email(self, api_client: APIClient):
        response = api_client.get("/api/events/1/attendees/lookup")
        assert response.status_code == 400

    def test_attendee_unknown_event(self, api_client: APIClient):
        response = api_client.post(
            "/api/events/77/attendees",
            {"full_name": "Ada", "email": "a@b.com", "phone": "555-0100"},
            format="json",
        )
        assert response.status_code == 404
        assert response.json()["code"] == "REFERENCE_NOT_FOUND"


class TestSession:
    """Tests for /api/session"""

    def test_new_session_snapshot(self, api_client: APIClient):
        body = api_client.get("/api/session").json()
        assert body["page_views"] == 0
        assert body["initials"] == "?"
        assert body["stats"].endswith("Views: 0 | Events Viewed: 0 | Registered: 0")

    def test_page_views_accumulate(self, api_client: APIClient):
        for _ in range(3):
            api_client.post("/api/session/page-views")
        body = api_client.get("/api/session").json()
        assert body["stats"].endswith("Views: 3 | Events Viewed: 0 | Registered: 0")

    def test_set_user_info(self, api_client: APIClient):
        response = api_client.put(
            "/api/session/user",
            {"user_name": "Grace Hopper", "email": "grace@example.com"},
            format="json",
        )
        assert response.status_code == 200
        assert response.json()["user_name"] == "Grace Hopper"
        assert response.json()["initials"] == "GH"

    def test_sessions_are_isolated(self, api_client: APIClient):
        api_client.get("/api/events/1")
        other = APIClient()
        assert other.get("/api/session").json()["viewed_events"] == []
