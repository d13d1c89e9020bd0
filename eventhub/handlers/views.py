"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from eventhub.domain.errors import DomainError, ErrorCode
from eventhub.handlers.serializers import (
    BookingInputSerializer,
    BookingSerializer,
    EventInputSerializer,
    EventSerializer,
)
from eventhub.services.booking_service import BookingService
from eventhub.services.event_service import EventService
from eventhub.stores.django_store import DjangoBookingStore, DjangoEventStore

logger = logging.getLogger(__name__)

STATUS_BY_CODE = {
    ErrorCode.EVENT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.REFERENTIAL_INTEGRITY: status.HTTP_422_UNPROCESSABLE_ENTITY,
    ErrorCode.UNIQUENESS_VIOLATION: status.HTTP_409_CONFLICT,
}


def error_response(error: DomainError) -> Response:
    body = {"code": error.code.value, "message": error.message}
    field = getattr(error, "field", None)
    if field:
        body["field"] = field
    return Response(
        {"error": body},
        status=STATUS_BY_CODE.get(error.code, status.HTTP_400_BAD_REQUEST),
    )


def invalid_input_response(errors: dict) -> Response:
    return Response(
        {"error": {"code": "INVALID_INPUT", "message": "Malformed request body", "details": errors}},
        status=status.HTTP_400_BAD_REQUEST,
    )


def event_service() -> EventService:
    return EventService(DjangoEventStore())


def booking_service() -> BookingService:
    events = DjangoEventStore()
    return BookingService(DjangoBookingStore(events), events)


class EventListView(APIView):
    """Handler for GET/POST /api/events"""

    def get(self, request: Request) -> Response:
        events = event_service().list_events()
        return Response(EventSerializer(events, many=True).data)

    def post(self, request: Request) -> Response:
        serializer = EventInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        try:
            event = event_service().create_event(serializer.validated_data)
        except DomainError as exc:
            logger.info("Event create rejected: %s", exc)
            return error_response(exc)
        return Response(EventSerializer(event).data, status=status.HTTP_201_CREATED)


class EventDetailView(APIView):
    """Handler for GET/PATCH /api/events/{slug}"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = event_service().get_event_by_slug(slug)
        except DomainError as exc:
            return error_response(exc)
        return Response(EventSerializer(event).data)

    def patch(self, request: Request, slug: str) -> Response:
        serializer = EventInputSerializer(data=request.data, partial=True)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        try:
            event = event_service().update_event(slug, serializer.validated_data)
        except DomainError as exc:
            logger.info("Event update rejected for %s: %s", slug, exc)
            return error_response(exc)
        return Response(EventSerializer(event).data)


class EventBookingListView(APIView):
    """Handler for GET /api/events/{slug}/bookings"""

    def get(self, request: Request, slug: str) -> Response:
        try:
            event = event_service().get_event_by_slug(slug)
            bookings = booking_service().list_bookings_for_event(str(event.id))
        except DomainError as exc:
            return error_response(exc)
        return Response(BookingSerializer(bookings, many=True).data)


class BookingCreateView(APIView):
    """Handler for POST /api/bookings"""

    def post(self, request: Request) -> Response:
        serializer = BookingInputSerializer(data=request.data)
        if not serializer.is_valid():
            return invalid_input_response(serializer.errors)
        try:
            booking = booking_service().create_booking(
                serializer.validated_data.get("event_id"),
                serializer.validated_data.get("email"),
            )
        except DomainError as exc:
            logger.info("Booking create rejected: %s", exc)
            return error_response(exc)
        return Response(BookingSerializer(booking).data, status=status.HTTP_201_CREATED)
