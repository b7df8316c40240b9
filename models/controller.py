"""Page controller for the calendar.

PageController owns all page state: the session's user, the reference date
and view mode, the fetched event list, and the modal. The header, the
grids, and the form only read that state and emit intents; the controller
performs every side effect (backend calls, date arithmetic) in response.

After every successful create, update, or delete the event list is
re-fetched in full. If that fetch fails the previous list is kept.
"""

import logging
from datetime import datetime, time
from typing import Annotated, Callable, Optional, Union

from dateutil.relativedelta import relativedelta
from pydantic import BaseModel, Field

from backend.exceptions import BackendError
from backend.interfaces import AuthProvider, EventStore, Subscription
from backend.models import AuthChangeEvent, Session, User
from models.event import Event, EventDraft, ViewMode
from models.form import EventForm
from models.header import Header
from models.intents import (
    CloseModal,
    CreateEvent,
    DateClick,
    DeleteEvent,
    EventClick,
    Intent,
    Logout,
    Next,
    Previous,
    SaveEvent,
    TimeSlotClick,
    Today,
    ViewChange,
)
from models.modal import ModalClosed, ModalCreating, ModalEditing, ModalState
from models.notifications import Notification, NotificationCenter
from models.views import (
    DayView,
    MonthView,
    WeekView,
    build_day_view,
    build_month_view,
    build_week_view,
)

logger = logging.getLogger(__name__)


# One navigation step per view mode.
NAVIGATION_STEPS: dict[str, relativedelta] = {
    "month": relativedelta(months=1),
    "week": relativedelta(weeks=1),
    "day": relativedelta(days=1),
}


class EventNotFoundError(Exception):
    """Raised when an intent names an event that isn't in the current list.

    Args:
        event_id: The id that wasn't found.
    """

    def __init__(self, event_id: str):
        self.event_id = event_id
        super().__init__(f"Event '{event_id}' not found")


class CalendarState(BaseModel):
    """Everything the calendar page shows.

    Args:
        current_date: Reference date anchoring the displayed grid.
        view_mode: Active grid shape.
        events: Last successfully fetched events, ordered by start time.
        modal: Modal purpose: closed, creating, or editing.
        user: Signed-in user, or None.
    """

    current_date: datetime
    view_mode: ViewMode = "month"
    events: list[Event] = Field(default_factory=list)
    modal: ModalState = Field(default_factory=ModalClosed)
    user: Optional[User] = None


CalendarView = Annotated[
    Union[MonthView, WeekView, DayView], Field(discriminator="view")
]


class CalendarPage(BaseModel):
    """A rendered page: header, active grid, open form, and toasts."""

    header: Header
    view: CalendarView
    modal: Optional[EventForm] = None
    notifications: list[Notification] = Field(default_factory=list)


class PageController:
    """Routes UI intents to state changes and backend calls.

    Args:
        store: The events table.
        auth: The auth service.
        clock: Returns the current local time; injectable for tests.
        default_view: View mode shown first.
        week_starts_on: First weekday of grids, 0 = Sunday ... 6 = Saturday.
    """

    def __init__(
        self,
        store: EventStore,
        auth: AuthProvider,
        clock: Callable[[], datetime] = datetime.now,
        default_view: ViewMode = "month",
        week_starts_on: int = 0,
    ) -> None:
        self.store = store
        self.auth = auth
        self.clock = clock
        self.week_starts_on = week_starts_on
        self.notifications = NotificationCenter()
        self.state = CalendarState(current_date=clock(), view_mode=default_view)
        self._subscription: Optional[Subscription] = None

    # Session

    async def start(self) -> None:
        """Load the current session and follow auth-state changes."""
        session = await self.auth.get_session()
        self._subscription = self.auth.on_auth_state_change(self._on_auth_state_change)
        await self._set_user(session.user if session else None)

    def stop(self) -> None:
        if self._subscription is not None:
            self._subscription.unsubscribe()
            self._subscription = None

    async def _on_auth_state_change(
        self, event: AuthChangeEvent, session: Optional[Session]
    ) -> None:
        logger.debug("Auth state change: %s", event)
        await self._set_user(session.user if session else None)

    async def _set_user(self, user: Optional[User]) -> None:
        self.state.user = user
        if user is None:
            self.state.events = []
            self.state.modal = ModalClosed()
            return
        await self.fetch_events()

    # Intents

    async def dispatch(self, intent: Intent) -> None:
        """Apply one UI intent.

        Raises:
            EventNotFoundError: For an EventClick naming an unknown event.
        """
        logger.debug("Dispatching intent %s", intent.type)

        if isinstance(intent, Previous):
            self.previous()
        elif isinstance(intent, Next):
            self.next()
        elif isinstance(intent, Today):
            self.today()
        elif isinstance(intent, ViewChange):
            self.change_view(intent.mode)
        elif isinstance(intent, CreateEvent):
            self.open_create(self.clock())
        elif isinstance(intent, DateClick):
            self.open_create(datetime.combine(intent.date, time()))
        elif isinstance(intent, TimeSlotClick):
            self.open_create(datetime.combine(intent.date, time()), intent.hour)
        elif isinstance(intent, EventClick):
            self.open_edit(intent.event_id)
        elif isinstance(intent, CloseModal):
            self.close_modal()
        elif isinstance(intent, SaveEvent):
            await self.save_event(intent.draft)
        elif isinstance(intent, DeleteEvent):
            await self.delete_event(intent.event_id)
        elif isinstance(intent, Logout):
            await self.logout()
        else:
            raise ValueError(f"Unsupported intent: {intent!r}")

    # Navigation

    def previous(self) -> None:
        self.state.current_date -= NAVIGATION_STEPS[self.state.view_mode]

    def next(self) -> None:
        self.state.current_date += NAVIGATION_STEPS[self.state.view_mode]

    def today(self) -> None:
        self.state.current_date = self.clock()

    def change_view(self, mode: ViewMode) -> None:
        self.state.view_mode = mode

    # Modal

    def open_create(self, when: datetime, hour: Optional[int] = None) -> None:
        self.state.modal = ModalCreating(date=when, hour=hour)

    def open_edit(self, event_id: str) -> None:
        self.state.modal = ModalEditing(event=self._find_event(event_id))

    def close_modal(self) -> None:
        self.state.modal = ModalClosed()

    def _find_event(self, event_id: str) -> Event:
        for event in self.state.events:
            if event.id == event_id:
                return event
        raise EventNotFoundError(event_id)

    # Backend calls

    async def fetch_events(self) -> None:
        """Replace the event list with the user's events from the backend.

        On failure the current list is kept and an error is shown.
        """
        user = self.state.user
        if user is None:
            return
        try:
            events = await self.store.select_events(user.id)
        except BackendError as e:
            logger.warning("Fetching events failed: %s", e)
            self.notifications.error("Error fetching events", e.message)
            return
        self.state.events = events

    async def save_event(self, draft: EventDraft) -> None:
        """Insert or update an event, then re-fetch.

        The modal closes before the backend call; failures only surface as
        notifications.
        """
        self.close_modal()
        user = self.state.user
        if user is None:
            return

        if draft.id:
            try:
                await self.store.update_event(draft.id, draft)
            except BackendError as e:
                logger.warning("Updating event %s failed: %s", draft.id, e)
                self.notifications.error("Error updating event", e.message)
                return
            self.notifications.success(
                "Event updated", "Your event has been updated successfully."
            )
        else:
            try:
                await self.store.insert_event(user.id, draft)
            except BackendError as e:
                logger.warning("Creating event failed: %s", e)
                self.notifications.error("Error creating event", e.message)
                return
            self.notifications.success(
                "Event created", "Your event has been created successfully."
            )

        await self.fetch_events()

    async def delete_event(self, event_id: str) -> None:
        """Delete an event, then re-fetch. The modal closes first."""
        self.close_modal()
        try:
            await self.store.delete_event(event_id)
        except BackendError as e:
            logger.warning("Deleting event %s failed: %s", event_id, e)
            self.notifications.error("Error deleting event", e.message)
            return
        self.notifications.success(
            "Event deleted", "Your event has been deleted successfully."
        )
        await self.fetch_events()

    async def logout(self) -> None:
        try:
            await self.auth.sign_out()
        except BackendError as e:
            logger.warning("Sign-out failed: %s", e)
            self.notifications.error("Error signing out", e.message)

    # Rendering

    def build_view(self) -> MonthView | WeekView | DayView:
        """Build the grid for the active view mode."""
        state = self.state
        today = self.clock().date()
        if state.view_mode == "month":
            return build_month_view(
                state.current_date, state.events, today, self.week_starts_on
            )
        if state.view_mode == "week":
            return build_week_view(
                state.current_date, state.events, today, self.week_starts_on
            )
        return build_day_view(state.current_date, state.events)

    def build_form(self) -> Optional[EventForm]:
        modal = self.state.modal
        if isinstance(modal, ModalClosed):
            return None
        return EventForm.from_modal(modal)

    def render(self, drain_notifications: bool = True) -> CalendarPage:
        """Render the whole page from the current state.

        Args:
            drain_notifications: Hand out pending notifications and clear them.
        """
        user = self.state.user
        header = Header(
            current_date=self.state.current_date,
            view_mode=self.state.view_mode,
            user_name=user.display_name if user else None,
        )
        notifications = (
            self.notifications.drain()
            if drain_notifications
            else self.notifications.pending
        )
        return CalendarPage(
            header=header,
            view=self.build_view(),
            modal=self.build_form(),
            notifications=notifications,
        )

    def snapshot(self) -> dict:
        """Compact state summary for debugging endpoints."""
        state = self.state
        return {
            "current_date": state.current_date.isoformat(),
            "view_mode": state.view_mode,
            "event_count": len(state.events),
            "modal": state.modal.kind,
            "user_id": state.user.id if state.user else None,
        }
