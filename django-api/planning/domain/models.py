"""Domain models representing the park catalog, tickets and planners.

These are pure domain objects with no API input rules.
Django ORM models are in planning/models.py (persistence layer).
Identifiers are opaque values issued by the data service.
"""

from collections.abc import Hashable
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from typing import Self

from planning.domain.value_objects import (
    BookingStatus,
    ItemKind,
    MutationOp,
    PlannerMode,
    TicketStatus,
    contains_id,
)

ItemId = Hashable


@dataclass(frozen=True)
class Attraction:
    """Domain representation of an Attraction. No date dimension."""

    id: ItemId
    name: str
    category: str = ""
    wait_time: int | None = None
    location: str = ""
    description: str = ""

    @property
    def label(self) -> str:
        return self.name


@dataclass(frozen=True)
class Show:
    """Domain representation of a Show, held on a fixed calendar day."""

    id: ItemId
    title: str
    date: date | datetime | str | None = None
    time: time | str | None = None
    location: str = ""
    description: str = ""

    @property
    def label(self) -> str:
        return self.title


@dataclass(frozen=True)
class Service:
    """Domain representation of a Service (restaurant, café, rental, ...)."""

    id: ItemId
    name: str
    type: str = ""
    operating_hours: str = ""
    location: str = ""
    description: str = ""

    @property
    def label(self) -> str:
        return self.name


Item = Attraction | Show | Service


@dataclass(frozen=True)
class TicketType:
    """Catalog class listing the items a ticket unlocks."""

    id: ItemId
    name: str
    attraction_ids: tuple[ItemId, ...] = ()
    show_ids: tuple[ItemId, ...] = ()
    service_ids: tuple[ItemId, ...] = ()

    def grants(self, kind: ItemKind, item_id: ItemId) -> bool:
        return contains_id(getattr(self, kind.ids_field), item_id)


@dataclass(frozen=True)
class Ticket:
    """A purchased admission credential, usable on the `valid_for` day."""

    id: ItemId
    user_id: ItemId
    status: TicketStatus
    valid_for: datetime | date | str | None
    ticket_type: TicketType | None = None


@dataclass(frozen=True)
class Planner:
    """A per-visit itinerary bound to one ticket and one calendar day."""

    id: ItemId
    ticket_id: ItemId
    user_id: ItemId
    title: str
    description: str
    date: date | datetime | str
    attraction_ids: tuple[ItemId, ...] = ()
    show_ids: tuple[ItemId, ...] = ()
    service_ids: tuple[ItemId, ...] = ()

    def contains(self, kind: ItemKind, item_id: ItemId) -> bool:
        return contains_id(getattr(self, kind.ids_field), item_id)


@dataclass(frozen=True)
class PlannerPayload:
    """Body of a create-planner or update-planner call."""

    ticket_id: ItemId
    user_id: ItemId
    title: str
    description: str
    date: str
    attraction_ids: tuple[ItemId, ...] = ()
    show_ids: tuple[ItemId, ...] = ()
    service_ids: tuple[ItemId, ...] = ()

    @classmethod
    def from_planner(cls, planner: Planner, date_key: str) -> Self:
        return cls(
            ticket_id=planner.ticket_id,
            user_id=planner.user_id,
            title=planner.title,
            description=planner.description,
            date=date_key,
            attraction_ids=tuple(planner.attraction_ids),
            show_ids=tuple(planner.show_ids),
            service_ids=tuple(planner.service_ids),
        )

    def with_item(self, kind: ItemKind, item_id: ItemId) -> Self:
        ids = getattr(self, kind.ids_field)
        return replace(self, **{kind.ids_field: (*ids, item_id)})


@dataclass(frozen=True)
class PlannerMutation:
    """A create or update decision; `planner_id` is set only for updates."""

    op: MutationOp
    payload: PlannerPayload
    planner_id: ItemId | None = None


@dataclass(frozen=True)
class BookingRequest:
    """A reservation request for a service time slot."""

    service_id: ItemId
    booking_time: datetime
    number_of_people: int
    ticket_id: ItemId | None = None
    user_id: ItemId | None = None
    special_requests: str | None = None
    status: BookingStatus = BookingStatus.CONFIRMED


@dataclass(frozen=True)
class ServiceBooking:
    """A booking as stored by the booking service."""

    id: ItemId
    service_id: ItemId
    booking_time: datetime
    number_of_people: int
    ticket_id: ItemId | None = None
    user_id: ItemId | None = None
    special_requests: str | None = None
    status: BookingStatus = BookingStatus.CONFIRMED


@dataclass(frozen=True)
class PlannerDraft:
    """Transient selection state owned by the caller between requests."""

    selected_ticket_id: ItemId | None = None
    mode: PlannerMode = PlannerMode.NEW
    chosen_planner_id: ItemId | None = None
    title: str = ""
    description: str = ""

    def reset(self) -> Self:
        return type(self)()


@dataclass(frozen=True)
class AvailableItems:
    """Catalog items a ticket unlocks, grouped by kind."""

    attractions: tuple[Attraction, ...] = ()
    shows: tuple[Show, ...] = ()
    services: tuple[Service, ...] = ()
