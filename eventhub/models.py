"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/, and
write-time normalization runs in the stores before save() is called.
"""

import uuid

from django.db import models

from eventhub.domain.value_objects import EventMode


class Event(models.Model):
    """Persistence model for events."""

    MODE_CHOICES = [(mode.value, mode.value.title()) for mode in EventMode]

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    slug = models.SlugField(max_length=255, unique=True, allow_unicode=True)
    description = models.TextField()
    overview = models.TextField()
    image = models.CharField(max_length=500)
    venue = models.CharField(max_length=255)
    location = models.CharField(max_length=255)
    date = models.CharField(max_length=10)
    time = models.CharField(max_length=5)
    mode = models.CharField(max_length=16, choices=MODE_CHOICES)
    audience = models.CharField(max_length=255)
    agenda = models.JSONField(default=list)
    organizer = models.CharField(max_length=255)
    tags = models.JSONField(default=list)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["-created_at"], name="eventhub_ev_created_idx"),
        ]

    def __str__(self) -> str:
        return self.title


class Booking(models.Model):
    """Persistence model for bookings."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(Event, on_delete=models.PROTECT, related_name="bookings")
    email = models.EmailField(max_length=254)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]
        indexes = [
            models.Index(fields=["event", "email"], name="eventhub_bk_event_email_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.email} - {self.event_id}"
