"""Field normalizers producing the canonical stored form of event and booking data.

Each normalizer takes raw text and either returns the canonical string or
raises the matching field error. They are pure and idempotent: feeding a
canonical value back in returns it unchanged.
"""

import re
from datetime import datetime, timezone

from dateutil import parser as date_parser
from django.core.exceptions import ValidationError
from django.core.validators import validate_email

from eventhub.domain.errors import (
    InvalidDateFormatError,
    InvalidEmailFormatError,
    InvalidTimeFormatError,
)

TIME_24H = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")

_SLUG_STRIP = re.compile(r"[^\w\s-]")
_SLUG_SPACES = re.compile(r"\s+")
_SLUG_HYPHENS = re.compile(r"-+")

# Two defaults that differ in year, month, day and hour. A component the input
# does not mention comes back different between the two parses.
_DEFAULT = datetime(1970, 1, 1, 0, 0)
_ALT_DEFAULT = datetime(1971, 2, 2, 1, 0)


def generate_slug(title: str) -> str:
    """Return the URL-safe slug for a title, e.g. "My Cool Event!!" -> "my-cool-event".

    Letters and digits from any script are kept, so "東京 Tour" -> "東京-tour".
    """
    slug = _SLUG_STRIP.sub("", title.lower().strip())
    slug = _SLUG_SPACES.sub("-", slug)
    return _SLUG_HYPHENS.sub("-", slug)


def _parse_twice(value: str) -> tuple[datetime, datetime]:
    return (
        date_parser.parse(value, default=_DEFAULT),
        date_parser.parse(value, default=_ALT_DEFAULT),
    )


def normalize_date(value: str, field: str = "date") -> str:
    """Parse a calendar date in any common notation and return YYYY-MM-DD.

    The year is required; a missing month or day is taken as 1, so
    "March 2025" -> "2025-03-01". Timezone-aware inputs are converted to
    UTC before the date is taken.
    """
    try:
        parsed, alt = _parse_twice(value.strip())
    except (ValueError, OverflowError) as exc:
        raise InvalidDateFormatError(field) from exc
    if parsed.year != alt.year:
        raise InvalidDateFormatError(field)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def normalize_time(value: str, field: str = "time") -> str:
    """Return a time of day as zero-padded 24-hour HH:MM.

    Strict HH:MM input is returned as-is. Anything else ("9:05am",
    "2:30 PM", "7pm") goes through the permissive parser, which must find
    an hour in the input; a missing minute is taken as 0.
    """
    candidate = value.strip()
    if TIME_24H.match(candidate):
        return candidate
    try:
        parsed, alt = _parse_twice(candidate)
    except (ValueError, OverflowError) as exc:
        raise InvalidTimeFormatError(field) from exc
    if parsed.hour != alt.hour:
        raise InvalidTimeFormatError(field)
    return f"{parsed.hour:02d}:{parsed.minute:02d}"


def normalize_email(value: str, field: str = "email") -> str:
    """Trim and lowercase an email address, then check its shape."""
    email = value.strip().lower()
    try:
        validate_email(email)
    except ValidationError as exc:
        raise InvalidEmailFormatError(field) from exc
    return email
