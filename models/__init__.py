"""Calendar data models package.

This package contains the event model, the UI intents, the modal and form
models, the grid builders, and the page controller that ties them together.
The controller lives in ``models.controller`` and is not re-exported here,
since it depends on the ``backend`` package.
"""

from models.event import COLOR_OPTIONS, Event, EventDraft, ViewMode
from models.form import EventForm
from models.header import Header
from models.modal import ModalClosed, ModalCreating, ModalEditing, ModalState
from models.notifications import Notification, NotificationCenter

__all__ = [
    "COLOR_OPTIONS",
    "Event",
    "EventDraft",
    "ViewMode",
    "EventForm",
    "Header",
    "ModalClosed",
    "ModalCreating",
    "ModalEditing",
    "ModalState",
    "Notification",
    "NotificationCenter",
]
