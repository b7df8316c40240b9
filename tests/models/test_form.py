"""Unit tests for the EventForm model."""

from datetime import datetime

import pytest
from pydantic import ValidationError

from models.form import EventForm
from models.intents import DeleteEvent, SaveEvent
from models.modal import ModalCreating, ModalEditing
from tests.fixtures.events import create_event


class TestCreateMode:
    def test_hour_click_prefills_one_hour_window(self):
        form = EventForm.for_create(datetime(2024, 6, 15), hour=14)

        assert form.mode == "create"
        assert form.start_time == "2024-06-15T14:00"
        assert form.end_time == "2024-06-15T15:00"

    def test_last_hour_rolls_over_to_next_day(self):
        form = EventForm.for_create(datetime(2024, 6, 15), hour=23)

        assert form.start_time == "2024-06-15T23:00"
        assert form.end_time == "2024-06-16T00:00"

    def test_without_hour_starts_at_given_moment(self):
        form = EventForm.for_create(datetime(2024, 6, 15, 10, 37, 12))

        assert form.start_time == "2024-06-15T10:37"
        assert form.end_time == "2024-06-15T11:37"

    def test_blank_fields_and_defaults(self):
        form = EventForm.for_create(datetime(2024, 6, 15))

        assert form.title == ""
        assert form.event_id is None
        assert form.color == "#4285f4"
        assert form.all_day is False
        assert len(form.color_options) == 6

    def test_presentation(self):
        form = EventForm.for_create(datetime(2024, 6, 15))

        assert form.heading == "Create Event"
        assert form.subheading == "Add a new event to your calendar"
        assert form.submit_label == "Create Event"
        assert form.can_delete is False

    def test_submit_emits_insert_draft(self):
        form = EventForm.for_create(datetime(2024, 6, 15), hour=9)
        form.title = "Standup"

        intent = form.submit()

        assert isinstance(intent, SaveEvent)
        assert intent.draft.id is None
        assert intent.draft.title == "Standup"
        assert intent.draft.start_time == "2024-06-15T09:00"

    def test_submit_without_title_fails(self):
        form = EventForm.for_create(datetime(2024, 6, 15), hour=9)

        with pytest.raises(ValidationError):
            form.submit()

    def test_delete_is_not_allowed(self):
        form = EventForm.for_create(datetime(2024, 6, 15))

        with pytest.raises(ValueError):
            form.delete()


class TestEditMode:
    def test_loads_exact_values(self):
        event = create_event(
            id="evt-9",
            title="Dentist",
            start_time="2024-06-20T08:15:00+00:00",
            end_time="2024-06-20T09:00:00+00:00",
            description="Bring forms",
            color="#ea4335",
            all_day=True,
            location="Main St",
        )

        form = EventForm.for_edit(event)

        assert form.mode == "edit"
        assert form.event_id == "evt-9"
        assert form.title == "Dentist"
        assert form.start_time == "2024-06-20T08:15:00+00:00"
        assert form.end_time == "2024-06-20T09:00:00+00:00"
        assert form.description == "Bring forms"
        assert form.color == "#ea4335"
        assert form.all_day is True
        assert form.location == "Main St"

    def test_presentation(self):
        form = EventForm.for_edit(create_event())

        assert form.heading == "Edit Event"
        assert form.subheading == "Update your event details"
        assert form.submit_label == "Update Event"
        assert form.can_delete is True

    def test_submit_carries_id(self):
        form = EventForm.for_edit(create_event(id="evt-9"))
        form.title = "Renamed"

        intent = form.submit()

        assert intent.draft.id == "evt-9"
        assert intent.draft.title == "Renamed"

    def test_delete_emits_event_id(self):
        form = EventForm.for_edit(create_event(id="evt-9"))

        assert form.delete() == DeleteEvent(event_id="evt-9")


class TestFromModal:
    def test_creating(self):
        form = EventForm.from_modal(ModalCreating(date=datetime(2024, 6, 15), hour=14))
        assert form.mode == "create"
        assert form.start_time == "2024-06-15T14:00"

    def test_editing(self):
        form = EventForm.from_modal(ModalEditing(event=create_event(id="evt-3")))
        assert form.mode == "edit"
        assert form.event_id == "evt-3"
