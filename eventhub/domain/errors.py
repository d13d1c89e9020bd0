"""Domain error codes for the eventhub module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_EVENT_ID = "INVALID_EVENT_ID"
    INVALID_BOOKING_ID = "INVALID_BOOKING_ID"
    MISSING_REQUIRED_FIELD = "MISSING_REQUIRED_FIELD"
    INVALID_ENUM_VALUE = "INVALID_ENUM_VALUE"
    INVALID_DATE_FORMAT = "INVALID_DATE_FORMAT"
    INVALID_TIME_FORMAT = "INVALID_TIME_FORMAT"
    INVALID_EMAIL_FORMAT = "INVALID_EMAIL_FORMAT"
    EMPTY_COLLECTION_FIELD = "EMPTY_COLLECTION_FIELD"
    REFERENTIAL_INTEGRITY = "REFERENTIAL_INTEGRITY"
    UNIQUENESS_VIOLATION = "UNIQUENESS_VIOLATION"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class EventNotFoundError(DomainError):
    """Raised when an event is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class InvalidEventIdError(DomainError):
    """Raised when an event ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_EVENT_ID,
            message="Invalid event ID format",
        )


class InvalidBookingIdError(DomainError):
    """Raised when a booking ID is invalid."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_BOOKING_ID,
            message="Invalid booking ID format",
        )


class FieldValidationError(DomainError):
    """Base for errors that point at a single offending field."""

    def __init__(self, code: ErrorCode, field: str, message: str) -> None:
        super().__init__(code=code, message=message)
        self.field = field


class MissingRequiredFieldError(FieldValidationError):
    """Raised when a required field is absent or blank."""

    def __init__(self, field: str) -> None:
        super().__init__(
            ErrorCode.MISSING_REQUIRED_FIELD,
            field,
            f"Field '{field}' is required",
        )


class InvalidEnumValueError(FieldValidationError):
    """Raised when a field holds a value outside its allowed set."""

    def __init__(self, field: str, allowed: tuple[str, ...]) -> None:
        super().__init__(
            ErrorCode.INVALID_ENUM_VALUE,
            field,
            f"Field '{field}' must be one of: {', '.join(allowed)}",
        )
        self.allowed = allowed


class InvalidDateFormatError(FieldValidationError):
    """Raised when a date cannot be parsed."""

    def __init__(self, field: str = "date") -> None:
        super().__init__(
            ErrorCode.INVALID_DATE_FORMAT,
            field,
            f"Field '{field}' is not a valid date",
        )


class InvalidTimeFormatError(FieldValidationError):
    """Raised when a time of day cannot be parsed."""

    def __init__(self, field: str = "time") -> None:
        super().__init__(
            ErrorCode.INVALID_TIME_FORMAT,
            field,
            f"Field '{field}' is not a valid time, use HH:MM (24-hour)",
        )


class InvalidEmailFormatError(FieldValidationError):
    """Raised when an email address has the wrong shape."""

    def __init__(self, field: str = "email") -> None:
        super().__init__(
            ErrorCode.INVALID_EMAIL_FORMAT,
            field,
            "Please provide a valid email address",
        )


class EmptyCollectionFieldError(FieldValidationError):
    """Raised when a list field is provided but holds no items."""

    def __init__(self, field: str) -> None:
        super().__init__(
            ErrorCode.EMPTY_COLLECTION_FIELD,
            field,
            f"Field '{field}' must contain at least one item",
        )


class ReferentialIntegrityError(DomainError):
    """Raised when a booking references an event that does not exist."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.REFERENTIAL_INTEGRITY,
            message=f"Event with ID {event_id} does not exist",
        )
        self.event_id = event_id


class UniquenessViolationError(DomainError):
    """Raised when a unique field collides with an existing record."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            code=ErrorCode.UNIQUENESS_VIOLATION,
            message=f"An event with this {field} already exists",
        )
        self.field = field
        self.value = value
