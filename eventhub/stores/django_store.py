"""Django ORM implementation of the EventStore and BookingStore."""

import logging

from django.db import IntegrityError, transaction

from eventhub import models
from eventhub.domain import Booking, BookingId, ChangeSet, Event, EventId
from eventhub.domain.errors import (
    BookingNotFoundError,
    EventNotFoundError,
    UniquenessViolationError,
)
from eventhub.domain.validation import validate_and_normalize
from eventhub.stores.interfaces import BookingStore, EventStore

logger = logging.getLogger(__name__)

EVENT_FIELDS = (
    "title",
    "slug",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "agenda",
    "organizer",
    "tags",
)


def to_domain_event(row: models.Event) -> Event:
    return Event(
        id=EventId(row.id),
        title=row.title,
        slug=row.slug,
        description=row.description,
        overview=row.overview,
        image=row.image,
        venue=row.venue,
        location=row.location,
        date=row.date,
        time=row.time,
        mode=row.mode,
        audience=row.audience,
        agenda=tuple(row.agenda),
        organizer=row.organizer,
        tags=tuple(row.tags),
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def to_domain_booking(row: models.Booking) -> Booking:
    return Booking(
        id=BookingId(row.id),
        event_id=EventId(row.event_id),
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


class DjangoEventStore(EventStore):
    """Relational event store using Django ORM."""

    def list_events(self) -> list[Event]:
        return [to_domain_event(row) for row in models.Event.objects.all()]

    def get_event(self, event_id: EventId) -> Event | None:
        row = models.Event.objects.filter(pk=event_id.value).first()
        return to_domain_event(row) if row else None

    def get_event_by_slug(self, slug: str) -> Event | None:
        row = models.Event.objects.filter(slug=slug).first()
        return to_domain_event(row) if row else None

    def event_exists(self, event_id: EventId) -> bool:
        return models.Event.objects.filter(pk=event_id.value).exists()

    def save_event(self, candidate: Event, changes: ChangeSet) -> Event:
        normalized = validate_and_normalize(candidate, changes)
        values = {name: getattr(normalized, name) for name in EVENT_FIELDS}
        values["agenda"] = list(normalized.agenda)
        values["tags"] = list(normalized.tags)

        try:
            with transaction.atomic():
                if normalized.id is None:
                    row = models.Event.objects.create(**values)
                else:
                    row = (
                        models.Event.objects.select_for_update()
                        .filter(pk=normalized.id.value)
                        .first()
                    )
                    if row is None:
                        raise EventNotFoundError(str(normalized.id))
                    for name, value in values.items():
                        setattr(row, name, value)
                    row.save()
        except IntegrityError as exc:
            logger.warning("Rejected event with duplicate slug %r", normalized.slug)
            raise UniquenessViolationError("slug", normalized.slug) from exc

        logger.info("Saved event %s (%s)", row.id, row.slug)
        return to_domain_event(row)


class DjangoBookingStore(BookingStore):
    """Relational booking store using Django ORM.

    The event existence check runs inside the same transaction as the write.
    """

    def __init__(self, events: EventStore | None = None) -> None:
        self._events = events or DjangoEventStore()

    def get_booking(self, booking_id: BookingId) -> Booking | None:
        row = models.Booking.objects.filter(pk=booking_id.value).first()
        return to_domain_booking(row) if row else None

    def list_bookings_for_event(self, event_id: EventId) -> list[Booking]:
        rows = models.Booking.objects.filter(event_id=event_id.value)
        return [to_domain_booking(row) for row in rows]

    def has_booking(self, event_id: EventId, email: str) -> bool:
        return models.Booking.objects.filter(
            event_id=event_id.value, email=email.strip().lower()
        ).exists()

    def save_booking(self, candidate: Booking, changes: ChangeSet) -> Booking:
        with transaction.atomic():
            normalized = validate_and_normalize(candidate, changes, self._events)
            if normalized.id is None:
                row = models.Booking.objects.create(
                    event_id=normalized.event_id.value,
                    email=normalized.email,
                )
            else:
                row = (
                    models.Booking.objects.select_for_update()
                    .filter(pk=normalized.id.value)
                    .first()
                )
                if row is None:
                    raise BookingNotFoundError(str(normalized.id))
                row.event_id = normalized.event_id.value
                row.email = normalized.email
                row.save()

        logger.info("Saved booking %s for event %s", row.id, row.event_id)
        return to_domain_booking(row)
