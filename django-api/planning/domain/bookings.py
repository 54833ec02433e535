"""Service booking requests."""

from collections.abc import Iterable
from datetime import date, datetime, time, timezone, tzinfo

from planning.domain.dates import to_date_key
from planning.domain.errors import BookingDateMismatchError, InvalidScheduleError, MissingScheduleError
from planning.domain.models import BookingRequest, ItemId, Service, ServiceBooking, Ticket
from planning.domain.value_objects import BookingStatus, PartySize


def _combine(booking_date: str, booking_time: str, tz: tzinfo) -> datetime:
    try:
        day = date.fromisoformat(to_date_key(booking_date))
        at = time.fromisoformat(str(booking_time).strip())
    except (TypeError, ValueError):
        raise InvalidScheduleError() from None
    return datetime.combine(day, at.replace(second=0, microsecond=0, tzinfo=None), tzinfo=tz)


def build_booking(
    service: Service,
    selected_ticket: Ticket | None,
    booking_date: str | None,
    booking_time: str | None,
    party_count: int | str | None = None,
    special_requests: str | None = None,
    user_id: ItemId | None = None,
    today: date | None = None,
    tz: tzinfo = timezone.utc,
) -> BookingRequest:
    """Compose a confirmed booking request for `service`.

    With a ticket, the booking must fall on the ticket's valid day. Without
    one, any day from `today` on is accepted (no check when `today` is None).

    Raises:
        MissingScheduleError: If the date or the time is missing.
        InvalidScheduleError: If the date or time is malformed, or in the past.
        BookingDateMismatchError: If the date differs from the ticket's day.
    """
    if not booking_date or not booking_time:
        raise MissingScheduleError()

    booking_day = to_date_key(booking_date)
    booking_at = _combine(booking_day, booking_time, tz)
    if selected_ticket is not None:
        ticket_day = to_date_key(selected_ticket.valid_for)
        if booking_day != ticket_day:
            raise BookingDateMismatchError(booking_day, ticket_day)

    if selected_ticket is None and today is not None and booking_at.date() < today:
        raise InvalidScheduleError("Booking date cannot be in the past")

    try:
        party = PartySize.clamp(party_count)
    except (TypeError, ValueError):
        raise InvalidScheduleError("Number of people must be a whole number") from None

    return BookingRequest(
        service_id=service.id,
        ticket_id=selected_ticket.id if selected_ticket is not None else None,
        user_id=selected_ticket.user_id if selected_ticket is not None else user_id,
        booking_time=booking_at,
        number_of_people=party.value,
        special_requests=(special_requests or "").strip() or None,
        status=BookingStatus.CONFIRMED,
    )


def sort_bookings(bookings: Iterable[ServiceBooking]) -> list[ServiceBooking]:
    """Newest booking first."""
    return sorted(bookings, key=lambda booking: booking.booking_time, reverse=True)


def split_booking_time(booking_time: datetime) -> tuple[str, str]:
    """Split a stored booking instant into the date and HH:MM form fields."""
    return booking_time.date().isoformat(), booking_time.strftime("%H:%M")
