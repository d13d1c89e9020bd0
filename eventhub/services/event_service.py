"""Event service - business logic for the event catalog.

Services:
- Depend only on interfaces (stores)
- Build write candidates and their ChangeSet
- Perform orchestration and error mapping
- Return domain models or domain errors
"""

import logging
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from eventhub.domain import ChangeSet, Event, EventId
from eventhub.domain.errors import EventNotFoundError, InvalidEventIdError
from eventhub.domain.validation import EVENT_TEXT_FIELDS
from eventhub.stores.interfaces import EventStore

logger = logging.getLogger(__name__)

EVENT_LIST_FIELDS = ("agenda", "tags")
EDITABLE_EVENT_FIELDS = EVENT_TEXT_FIELDS + EVENT_LIST_FIELDS


def parse_event_id(event_id: str) -> EventId:
    try:
        return EventId.from_string(event_id)
    except (ValueError, TypeError, AttributeError) as exc:
        raise InvalidEventIdError() from exc


def _editable_values(data: Mapping[str, Any]) -> dict[str, Any]:
    """Pick the caller-editable fields; slug and timestamps are never taken as input."""
    values = {name: data[name] for name in EDITABLE_EVENT_FIELDS if name in data}
    for name in EVENT_LIST_FIELDS:
        if values.get(name) is not None:
            values[name] = tuple(values[name])
    return values


class EventService:
    """Service for event catalog operations."""

    def __init__(self, store: EventStore) -> None:
        self._store = store

    def list_events(self) -> list[Event]:
        """Return all events."""
        return self._store.list_events()

    def get_event(self, event_id: str) -> Event:
        """Return an event by ID.

        Raises:
            InvalidEventIdError: If the event_id is not a valid UUID.
            EventNotFoundError: If the event does not exist.
        """
        event = self._store.get_event(parse_event_id(event_id))
        if event is None:
            raise EventNotFoundError(event_id)
        return event

    def get_event_by_slug(self, slug: str) -> Event:
        """Return an event by slug.

        Raises:
            EventNotFoundError: If no event has this slug.
        """
        event = self._store.get_event_by_slug(slug)
        if event is None:
            raise EventNotFoundError(slug)
        return event

    def create_event(self, data: Mapping[str, Any]) -> Event:
        """Create an event from raw field values.

        Raises:
            FieldValidationError: If any field fails validation.
            UniquenessViolationError: If the derived slug is taken.
        """
        candidate = Event(**_editable_values(data))
        logger.debug("Creating event %r", candidate.title)
        return self._store.save_event(candidate, ChangeSet.for_new())

    def update_event(self, slug: str, data: Mapping[str, Any]) -> Event:
        """Apply a partial update to the event with this slug.

        Only fields that actually change are marked dirty, so an update that
        leaves title, date and time alone does not re-derive them.

        Raises:
            EventNotFoundError: If no event has this slug.
            FieldValidationError: If any field fails validation.
            UniquenessViolationError: If a new title yields a taken slug.
        """
        existing = self.get_event_by_slug(slug)
        candidate = replace(existing, **_editable_values(data))
        changes = ChangeSet.between(existing, candidate)
        logger.debug("Updating event %s, changed fields: %s", existing.id, sorted(changes.fields))
        return self._store.save_event(candidate, changes)
