"""Write-time validation and normalization for events and bookings.

Stores call ``validate_and_normalize`` immediately before persisting a
candidate. Static constraints (required fields, enum membership, non-empty
lists, email shape) are checked on every write. Derived and canonicalized
fields (slug, date, time) are only recomputed when the ChangeSet says their
source field was set or modified on this write.

Nothing here touches the database except through the ``EventLookup`` passed
in for booking checks.
"""

import logging
from dataclasses import replace
from typing import Protocol

from eventhub.domain.changes import ChangeSet
from eventhub.domain.errors import (
    EmptyCollectionFieldError,
    InvalidEnumValueError,
    MissingRequiredFieldError,
    ReferentialIntegrityError,
)
from eventhub.domain.models import Booking, Event
from eventhub.domain.normalizers import (
    generate_slug,
    normalize_date,
    normalize_email,
    normalize_time,
)
from eventhub.domain.value_objects import EventId, EventMode

logger = logging.getLogger(__name__)

EVENT_TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)


class EventLookup(Protocol):
    def event_exists(self, event_id: EventId) -> bool: ...


def _required_text(value: str | None, field: str) -> str:
    if value is None:
        raise MissingRequiredFieldError(field)
    text = value.strip()
    if not text:
        raise MissingRequiredFieldError(field)
    return text


def _required_items(values: tuple[str, ...] | None, field: str) -> tuple[str, ...]:
    if values is None:
        raise MissingRequiredFieldError(field)
    items = tuple(item.strip() for item in values if item and item.strip())
    if not items:
        raise EmptyCollectionFieldError(field)
    return items


def validate_and_normalize_event(candidate: Event, changes: ChangeSet) -> Event:
    """Return the candidate with trimmed text and canonical slug/date/time.

    Raises:
        MissingRequiredFieldError: A required field is absent or blank.
        InvalidEnumValueError: ``mode`` is not online, offline or hybrid.
        EmptyCollectionFieldError: ``agenda`` or ``tags`` holds no items.
        InvalidDateFormatError: ``date`` could not be parsed.
        InvalidTimeFormatError: ``time`` could not be parsed.
    """
    updates: dict[str, object] = {
        name: _required_text(getattr(candidate, name), name)
        for name in EVENT_TEXT_FIELDS
    }

    if updates["mode"] not in EventMode.values():
        raise InvalidEnumValueError("mode", EventMode.values())

    updates["agenda"] = _required_items(candidate.agenda, "agenda")
    # Tags behave like a set; keep first-seen order.
    updates["tags"] = tuple(dict.fromkeys(_required_items(candidate.tags, "tags")))

    if changes.touches("title") or not candidate.slug:
        slug = generate_slug(updates["title"])
        if not slug:
            raise MissingRequiredFieldError("slug")
        updates["slug"] = slug

    if changes.touches("date"):
        updates["date"] = normalize_date(updates["date"])

    if changes.touches("time"):
        updates["time"] = normalize_time(updates["time"])

    return replace(candidate, **updates)


def validate_and_normalize_booking(
    candidate: Booking, changes: ChangeSet, events: EventLookup
) -> Booking:
    """Return the candidate with a canonical email once its event is confirmed.

    The existence lookup only happens when ``event_id`` is new or changed.

    Raises:
        MissingRequiredFieldError: ``event_id`` or ``email`` is absent.
        InvalidEmailFormatError: ``email`` does not look like an address.
        ReferentialIntegrityError: The referenced event does not exist.
    """
    if candidate.event_id is None:
        raise MissingRequiredFieldError("event_id")
    email = normalize_email(_required_text(candidate.email, "email"))

    if changes.touches("event_id") and not events.event_exists(candidate.event_id):
        logger.warning("Rejected booking for missing event %s", candidate.event_id)
        raise ReferentialIntegrityError(str(candidate.event_id))

    return replace(candidate, email=email)


def validate_and_normalize(
    candidate: Event | Booking,
    changes: ChangeSet,
    events: EventLookup | None = None,
) -> Event | Booking:
    """Dispatch a candidate to the validator for its type."""
    if isinstance(candidate, Event):
        return validate_and_normalize_event(candidate, changes)
    if isinstance(candidate, Booking):
        if events is None:
            raise ValueError("Booking validation needs an event lookup")
        return validate_and_normalize_booking(candidate, changes, events)
    raise TypeError(f"No validator for {type(candidate).__name__}")
