"""Store interfaces (repository pattern).

Stores must be swappable and return domain models. Every save_* method runs
``validate_and_normalize`` on the candidate before anything is written, and a
rejected candidate leaves storage untouched.
"""

from abc import ABC, abstractmethod

from eventhub.domain import Booking, BookingId, ChangeSet, Event, EventId


class EventStore(ABC):
    """Interface for event persistence operations."""

    @abstractmethod
    def list_events(self) -> list[Event]:
        """Return all events ordered by created_at descending."""
        ...

    @abstractmethod
    def get_event(self, event_id: EventId) -> Event | None:
        """Return an event by ID, or None if not found."""
        ...

    @abstractmethod
    def get_event_by_slug(self, slug: str) -> Event | None:
        """Return an event by slug, or None if not found."""
        ...

    @abstractmethod
    def event_exists(self, event_id: EventId) -> bool:
        """Check if an event exists."""
        ...

    @abstractmethod
    def save_event(self, candidate: Event, changes: ChangeSet) -> Event:
        """Normalize and persist an event, returning the stored version.

        Raises:
            FieldValidationError: The candidate failed validation.
            UniquenessViolationError: Another event already has the slug.
        """
        ...


class BookingStore(ABC):
    """Interface for booking persistence operations."""

    @abstractmethod
    def get_booking(self, booking_id: BookingId) -> Booking | None:
        """Return a booking by ID, or None if not found."""
        ...

    @abstractmethod
    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        """Return bookings for an event ordered by created_at descending."""
        ...

    @abstractmethod
    def has_booking(self, event_id: EventId, email: str) -> bool:
        """Check if an email already holds a booking for an event."""
        ...

    @abstractmethod
    def save_booking(self, candidate: Booking, changes: ChangeSet) -> Booking:
        """Validate and persist a booking, returning the stored version.

        Raises:
            FieldValidationError: The candidate failed validation.
            ReferentialIntegrityError: The referenced event does not exist.
        """
        ...
