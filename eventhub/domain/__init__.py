from eventhub.domain.changes import ChangeSet
from eventhub.domain.models import Booking, Event
from eventhub.domain.value_objects import BookingId, EventId, EventMode

__all__ = [
    "Event",
    "Booking",
    "EventId",
    "BookingId",
    "EventMode",
    "ChangeSet",
]
