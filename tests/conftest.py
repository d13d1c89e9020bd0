"""Pytest configuration and shared fixtures."""

from dataclasses import replace
from datetime import datetime, timezone
from uuid import uuid4

import pytest
from rest_framework.test import APIClient

from eventhub.domain import Booking, BookingId, ChangeSet, Event, EventId
from eventhub.domain.errors import UniquenessViolationError
from eventhub.domain.validation import validate_and_normalize
from eventhub.stores.interfaces import BookingStore, EventStore


class InMemoryEventStore(EventStore):
    """Dict-backed EventStore that follows the same save contract as the ORM store."""

    def __init__(self) -> None:
        self.events: dict[EventId, Event] = {}

    def list_events(self) -> list[Event]:
        return sorted(self.events.values(), key=lambda e: e.created_at, reverse=True)

    def get_event(self, event_id: EventId) -> Event | None:
        return self.events.get(event_id)

    def get_event_by_slug(self, slug: str) -> Event | None:
        return next((e for e in self.events.values() if e.slug == slug), None)

    def event_exists(self, event_id: EventId) -> bool:
        return event_id in self.events

    def save_event(self, candidate: Event, changes: ChangeSet) -> Event:
        normalized = validate_and_normalize(candidate, changes)
        clash = self.get_event_by_slug(normalized.slug)
        if clash is not None and clash.id != normalized.id:
            raise UniquenessViolationError("slug", normalized.slug)
        now = datetime.now(timezone.utc)
        if normalized.id is None:
            normalized = replace(normalized, id=EventId(uuid4()), created_at=now)
        stored = replace(normalized, updated_at=now)
        self.events[stored.id] = stored
        return stored


class InMemoryBookingStore(BookingStore):
    """Dict-backed BookingStore checking events through an EventStore."""

    def __init__(self, events: EventStore) -> None:
        self._events = events
        self.bookings: dict[BookingId, Booking] = {}

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        return self.bookings.get(booking_id)

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        return [b for b in self.bookings.values() if b.event_id == event_id]

    def has_booking(self, event_id: EventId, email: str) -> bool:
        email = email.strip().lower()
        return any(
            b.event_id == event_id and b.email == email for b in self.bookings.values()
        )

    def save_booking(self, candidate: Booking, changes: ChangeSet) -> Booking:
        normalized = validate_and_normalize(candidate, changes, self._events)
        now = datetime.now(timezone.utc)
        if normalized.id is None:
            normalized = replace(normalized, id=BookingId(uuid4()), created_at=now)
        stored = replace(normalized, updated_at=now)
        self.bookings[stored.id] = stored
        return stored


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture
def event_data() -> dict:
    """Raw input for a valid event, in the loose formats callers send."""
    return {
        "title": "My Cool Event!!",
        "description": "A full day of talks on building for the web.",
        "overview": "Talks, workshops and networking.",
        "image": "/images/event1.png",
        "venue": "Moscone Center",
        "location": "San Francisco, CA",
        "date": "March 5, 2025",
        "time": "9:05am",
        "mode": "hybrid",
        "audience": "Developers",
        "agenda": ["Keynote", "Workshops", "Closing remarks"],
        "organizer": "Dev Community",
        "tags": ["react", "nextjs", "react"],
    }


@pytest.fixture
def event_store() -> InMemoryEventStore:
    return InMemoryEventStore()


@pytest.fixture
def booking_store(event_store: InMemoryEventStore) -> InMemoryBookingStore:
    return InMemoryBookingStore(event_store)
