"""Booking service - creates and updates bookings against the event catalog."""

import logging
from dataclasses import replace

from eventhub.domain import Booking, BookingId, ChangeSet
from eventhub.domain.errors import (
    BookingNotFoundError,
    EventNotFoundError,
    InvalidBookingIdError,
)
from eventhub.services.event_service import parse_event_id
from eventhub.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)


def parse_booking_id(booking_id: str) -> BookingId:
    try:
        return BookingId.from_string(booking_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidBookingIdError() from exc


class BookingService:
    """Service for booking operations."""

    def __init__(self, bookings: BookingStore, events: EventStore) -> None:
        self._bookings = bookings
        self._events = events

    def get_booking(self, booking_id: str) -> Booking:
        booking = self._bookings.get_booking(parse_booking_id(booking_id))
        if booking is None:
            raise BookingNotFoundError(booking_id)
        return booking

    def create_booking(self, event_id: str | None, email: str | None) -> Booking:
        """Book an email onto an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            FieldValidationError: If the event_id or email is missing, or the email is malformed.
            ReferentialIntegrityError: If the event does not exist.
        """
        candidate = Booking(
            event_id=parse_event_id(event_id) if event_id else None, email=email
        )
        logger.debug("Creating booking for event %s", candidate.event_id)
        return self._bookings.save_booking(candidate, ChangeSet.for_new())

    def update_booking(
        self,
        booking_id: str,
        event_id: str | None = None,
        email: str | None = None,
    ) -> Booking:
        """Move a booking to another event and/or change its email.

        The event existence check only runs when event_id actually changes.
        """
        existing = self.get_booking(booking_id)
        candidate = existing
        if event_id is not None:
            candidate = replace(candidate, event_id=parse_event_id(event_id))
        if email is not None:
            candidate = replace(candidate, email=email)
        return self._bookings.save_booking(candidate, ChangeSet.between(existing, candidate))

    def list_bookings_for_event(self, event_id: str) -> list[Booking]:
        """Return bookings for an event.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        parsed = parse_event_id(event_id)
        if not self._events.event_exists(parsed):
            raise EventNotFoundError(event_id)
        return self._bookings.list_bookings_for_event(parsed)

    def has_booking(self, event_id: str, email: str) -> bool:
        return self._bookings.has_booking(parse_event_id(event_id), email)
