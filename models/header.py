"""Calendar header: title, navigation, view switch, and user menu."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, computed_field

from models.event import VIEW_MODES, ViewMode


def format_title(current: date | datetime, view_mode: ViewMode) -> str:
    """Header title for the reference date.

    Month and week views show "June 2024"; the day view shows the full
    date, e.g. "Saturday, June 15, 2024".
    """
    if view_mode == "day":
        return f"{current.strftime('%A')}, {current.strftime('%B')} {current.day}, {current.year}"
    return f"{current.strftime('%B')} {current.year}"


class Header(BaseModel):
    """Header view model.

    The header's buttons emit the Previous, Next, Today, ViewChange,
    CreateEvent, and Logout intents.
    """

    current_date: datetime
    view_mode: ViewMode
    user_name: Optional[str] = None

    @computed_field
    @property
    def title(self) -> str:
        return format_title(self.current_date, self.view_mode)

    @computed_field
    @property
    def view_label(self) -> str:
        return self.view_mode.capitalize()

    @computed_field
    @property
    def view_options(self) -> list[str]:
        return list(VIEW_MODES)

    @computed_field
    @property
    def user_initial(self) -> str:
        if self.user_name:
            return self.user_name[0].upper()
        return "U"
