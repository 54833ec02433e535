"""Booking service - time-slot reservations at bookable services."""

import logging
from datetime import date, timezone, tzinfo

from planning.domain import BookingRequest, ItemKind, ServiceBooking, Ticket
from planning.domain.bookings import build_booking, sort_bookings
from planning.domain.catalog import is_bookable_service
from planning.domain.eligibility import is_eligible
from planning.domain.errors import (
    BookingNotFoundError,
    DomainError,
    ItemNotFoundError,
    ServiceNotBookableError,
    TicketNotEligibleError,
    TicketNotFoundError,
)
from planning.domain.models import ItemId, Service
from planning.domain.value_objects import same_id
from planning.stores.interfaces import BookingStore, CatalogStore, TicketStore

logger = logging.getLogger(__name__)


class BookingService:
    """Service for creating and managing service bookings."""

    def __init__(
        self,
        catalog: CatalogStore,
        tickets: TicketStore,
        bookings: BookingStore,
        tz: tzinfo = timezone.utc,
    ) -> None:
        self._catalog = catalog
        self._tickets = tickets
        self._bookings = bookings
        self._tz = tz

    def list_bookings(self, user_id: ItemId) -> list[ServiceBooking]:
        """Return the user's bookings, newest first."""
        return sort_bookings(self._bookings.list_service_bookings(user_id))

    def book_service(
        self,
        user_id: ItemId,
        service_id: ItemId,
        ticket_id: ItemId | None,
        booking_date: str | None,
        booking_time: str | None,
        number_of_people: int | None = None,
        special_requests: str | None = None,
        today: date | None = None,
    ) -> ServiceBooking:
        """Reserve a time slot at a bookable service.

        Raises:
            ItemNotFoundError: If the service does not exist.
            ServiceNotBookableError: If the service takes no reservations.
            TicketNotFoundError: If the user holds no such ticket.
            TicketNotEligibleError: If the ticket does not grant the service.
            Errors of build_booking for the schedule.
        """
        try:
            request = self._build(
                user_id, service_id, ticket_id, booking_date, booking_time,
                number_of_people, special_requests, today,
            )
        except DomainError as exc:
            logger.warning("Rejected booking of service %s for user %s: %s", service_id, user_id, exc)
            raise

        booking = self._bookings.create_service_booking(request)
        logger.info("Booked service %s at %s (booking %s)", service_id, request.booking_time.isoformat(), booking.id)
        return booking

    def update_booking(
        self,
        user_id: ItemId,
        booking_id: ItemId,
        booking_date: str | None,
        booking_time: str | None,
        number_of_people: int | None = None,
        special_requests: str | None = None,
        today: date | None = None,
    ) -> ServiceBooking:
        """Reschedule one of the user's bookings, keeping its service and ticket.

        A missing party size keeps the booking's current one.

        Raises:
            BookingNotFoundError: If the user has no such booking.
            Errors of book_service for the new schedule.
        """
        try:
            existing = self._bookings.get_service_booking(booking_id)
            if existing is None or not same_id(existing.user_id, user_id):
                raise BookingNotFoundError(booking_id)
            if number_of_people is None:
                number_of_people = existing.number_of_people
            request = self._build(
                user_id, existing.service_id, existing.ticket_id, booking_date, booking_time,
                number_of_people, special_requests, today,
            )
        except DomainError as exc:
            logger.warning("Rejected update of booking %s for user %s: %s", booking_id, user_id, exc)
            raise

        booking = self._bookings.update_service_booking(booking_id, request)
        logger.info("Updated booking %s to %s", booking_id, request.booking_time.isoformat())
        return booking

    def cancel_booking(self, user_id: ItemId, booking_id: ItemId) -> None:
        """Cancel one of the user's bookings.

        Raises:
            BookingNotFoundError: If the user has no such booking.
        """
        existing = self._bookings.get_service_booking(booking_id)
        if existing is None or not same_id(existing.user_id, user_id):
            logger.warning("Rejected cancellation of booking %s for user %s", booking_id, user_id)
            raise BookingNotFoundError(booking_id)

        self._bookings.delete_service_booking(booking_id)
        logger.info("Cancelled booking %s", booking_id)

    def _build(
        self,
        user_id: ItemId,
        service_id: ItemId,
        ticket_id: ItemId | None,
        booking_date: str | None,
        booking_time: str | None,
        number_of_people: int | None,
        special_requests: str | None,
        today: date | None,
    ) -> BookingRequest:
        service = self._get_service(service_id)
        ticket = self._get_ticket(user_id, ticket_id) if ticket_id is not None else None
        if ticket is not None and not is_eligible(service, ticket, ItemKind.SERVICE):
            raise TicketNotEligibleError(ticket.id, ItemKind.SERVICE.value)
        return build_booking(
            service,
            ticket,
            booking_date,
            booking_time,
            number_of_people,
            special_requests,
            user_id=user_id,
            today=today,
            tz=self._tz,
        )

    def _get_service(self, service_id: ItemId) -> Service:
        service = self._catalog.get_item(ItemKind.SERVICE, service_id)
        if service is None:
            raise ItemNotFoundError(ItemKind.SERVICE.value, service_id)
        if not is_bookable_service(service):
            raise ServiceNotBookableError(service_id)
        return service

    def _get_ticket(self, user_id: ItemId, ticket_id: ItemId) -> Ticket:
        tickets = self._tickets.fetch_purchased_tickets(user_id)
        ticket = next((t for t in tickets if same_id(t.id, ticket_id)), None)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return ticket
