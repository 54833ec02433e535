"""Catalog lookups relative to a ticket."""

from collections.abc import Iterable

from planning.domain.dates import to_date_key
from planning.domain.models import Attraction, AvailableItems, Service, Show, Ticket
from planning.domain.value_objects import ItemKind

BOOKABLE_SERVICE_TYPES = frozenset({"restaurant", "café", "rental"})


def is_bookable_service(service: Service | None) -> bool:
    """Whether the service takes time-slot reservations besides planner inclusion."""
    if service is None or not service.type:
        return False
    return service.type.strip().lower() in BOOKABLE_SERVICE_TYPES


def available_items(
    ticket: Ticket | None,
    attractions: Iterable[Attraction] = (),
    shows: Iterable[Show] = (),
    services: Iterable[Service] = (),
) -> AvailableItems:
    """Items the ticket's type unlocks; shows only on the ticket's own day."""
    if ticket is None or ticket.ticket_type is None:
        return AvailableItems()
    ticket_type = ticket.ticket_type
    ticket_day = to_date_key(ticket.valid_for)
    return AvailableItems(
        attractions=tuple(a for a in attractions if ticket_type.grants(ItemKind.ATTRACTION, a.id)),
        shows=tuple(
            s
            for s in shows
            if ticket_day is not None
            and ticket_type.grants(ItemKind.SHOW, s.id)
            and to_date_key(s.date) == ticket_day
        ),
        services=tuple(s for s in services if ticket_type.grants(ItemKind.SERVICE, s.id)),
    )
