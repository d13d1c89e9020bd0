"""Domain models representing persisted state and write candidates.

These are pure domain objects with no API input rules.
Django ORM models are in eventhub/models.py (persistence layer).

A model with ``id=None`` is a candidate that has not been written yet.
Content fields default to ``None`` so that a candidate built from partial
input can still be constructed and then rejected by validation.
"""

from dataclasses import dataclass
from datetime import datetime

from eventhub.domain.value_objects import BookingId, EventId


@dataclass(frozen=True)
class Event:
    """Domain representation of an Event."""

    id: EventId | None = None
    title: str | None = None
    slug: str | None = None
    description: str | None = None
    overview: str | None = None
    image: str | None = None
    venue: str | None = None
    location: str | None = None
    date: str | None = None
    time: str | None = None
    mode: str | None = None
    audience: str | None = None
    agenda: tuple[str, ...] | None = None
    organizer: str | None = None
    tags: tuple[str, ...] | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class Booking:
    """Domain representation of a Booking."""

    id: BookingId | None = None
    event_id: EventId | None = None
    email: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
