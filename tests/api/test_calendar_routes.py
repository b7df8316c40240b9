"""Integration tests for the calendar page endpoints.

These tests drive the page through HTTP the way the browser would: render,
click cells, submit the form, and read back notifications.
"""

from unittest.mock import AsyncMock, Mock

from tests.fixtures.events import TEST_TOKEN


def sign_in(client) -> None:
    response = client.post("/auth/session", json={"access_token": TEST_TOKEN})
    assert response.status_code == 200


def save_intent(title: str = "Standup", **draft) -> dict:
    return {
        "type": "save_event",
        "draft": {
            "title": title,
            "start_time": "2024-06-15T14:00",
            "end_time": "2024-06-15T15:00",
            **draft,
        },
    }


class TestGetCalendar:
    def test_renders_month_page(self, client_with_controller):
        client, _ = client_with_controller

        response = client.get("/calendar")

        assert response.status_code == 200
        data = response.json()
        assert data["header"]["title"] == "June 2024"
        assert data["header"]["view_label"] == "Month"
        assert data["header"]["user_initial"] == "U"
        assert data["view"]["view"] == "month"
        assert len(data["view"]["weeks"]) == 6
        assert data["modal"] is None
        assert data["notifications"] == []

    def test_state(self, client_with_controller):
        client, _ = client_with_controller

        response = client.get("/calendar/state")

        assert response.status_code == 200
        assert response.json() == {
            "current_date": "2024-06-15T10:30:00",
            "view_mode": "month",
            "event_count": 0,
            "modal": "closed",
            "user_id": None,
        }


class TestIntents:
    def test_view_change(self, client_with_controller):
        client, controller = client_with_controller

        response = client.post("/calendar/intents", json={"type": "view_change", "mode": "week"})

        assert response.status_code == 200
        assert response.json()["view"]["view"] == "week"
        assert controller.state.view_mode == "week"

    def test_navigation(self, client_with_controller):
        client, _ = client_with_controller

        response = client.post("/calendar/intents", json={"type": "next"})

        assert response.json()["header"]["title"] == "July 2024"

    def test_unknown_intent_is_rejected(self, client_with_controller):
        client, _ = client_with_controller

        response = client.post("/calendar/intents", json={"type": "explode"})

        assert response.status_code == 422

    def test_create_flow(self, client_with_controller):
        client, controller = client_with_controller
        sign_in(client)

        response = client.post("/calendar/intents", json=save_intent("Standup"))

        assert response.status_code == 200
        data = response.json()
        assert data["modal"] is None
        assert [n["title"] for n in data["notifications"]] == ["Event created"]
        cell = next(
            day
            for week in data["view"]["weeks"]
            for day in week
            if day["date"] == "2024-06-15"
        )
        assert cell["visible_events"][0]["label"] == "2:00 PM Standup"
        assert len(controller.state.events) == 1

    def test_delete_unknown_event_reports_error(self, client_with_controller):
        client, controller = client_with_controller
        sign_in(client)
        client.post("/calendar/intents", json=save_intent("Standup"))

        response = client.post(
            "/calendar/intents", json={"type": "delete_event", "event_id": "missing"}
        )

        assert response.status_code == 200
        [notification] = response.json()["notifications"]
        assert notification["title"] == "Error deleting event"
        assert notification["variant"] == "destructive"
        assert len(controller.state.events) == 1

    def test_invalid_draft_is_rejected(self, client_with_controller):
        client, _ = client_with_controller

        response = client.post("/calendar/intents", json=save_intent("", color="#000000"))

        assert response.status_code == 422


class TestClick:
    def test_time_slot_click_opens_create_form(self, client_with_controller):
        client, _ = client_with_controller

        response = client.post("/calendar/click", json={"date": "2024-06-15", "hour": 14})

        modal = response.json()["modal"]
        assert modal["mode"] == "create"
        assert modal["heading"] == "Create Event"
        assert modal["start_time"] == "2024-06-15T14:00"
        assert modal["end_time"] == "2024-06-15T15:00"

    def test_day_click_opens_create_form_at_midnight(self, client_with_controller):
        client, _ = client_with_controller

        response = client.post("/calendar/click", json={"date": "2024-06-20"})

        assert response.json()["modal"]["start_time"] == "2024-06-20T00:00"

    def test_event_click_opens_edit_form(self, client_with_controller):
        client, controller = client_with_controller
        sign_in(client)
        client.post("/calendar/intents", json=save_intent("Standup"))
        event_id = controller.state.events[0].id

        response = client.post(
            "/calendar/click",
            json={"date": "2024-06-15", "hour": 14, "event_id": event_id},
        )

        modal = response.json()["modal"]
        assert modal["mode"] == "edit"
        assert modal["event_id"] == event_id
        assert modal["can_delete"] is True

    def test_unknown_event_is_404(self, client_with_controller):
        client, _ = client_with_controller

        response = client.post(
            "/calendar/click", json={"date": "2024-06-15", "event_id": "missing"}
        )

        assert response.status_code == 404
        assert response.json()["event_id"] == "missing"

    def test_hour_out_of_range(self, client_with_controller):
        client, _ = client_with_controller

        response = client.post("/calendar/click", json={"date": "2024-06-15", "hour": 24})

        assert response.status_code == 422


class TestErrorHandlers:
    def test_value_error_is_400(self, client_with_controller):
        client, controller = client_with_controller
        controller.dispatch = AsyncMock(side_effect=ValueError("bad intent"))

        response = client.post("/calendar/intents", json={"type": "today"})

        assert response.status_code == 400
        assert response.json()["detail"] == "bad intent"

    def test_unexpected_error_is_500(self, client_with_controller):
        client, controller = client_with_controller
        controller.render = Mock(side_effect=RuntimeError("kaboom"))

        response = client.get("/calendar")

        assert response.status_code == 500
        assert response.json()["error"] == "Internal Server Error"
        assert "kaboom" not in response.text
