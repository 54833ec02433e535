"""Django ORM implementation of the planning stores.

Catalog reads are cached; tickets, planners and bookings always hit the
database. Cache keys are invalidated from planning/signals.py.
"""

import logging
from datetime import date

from django.conf import settings
from django.core.cache import cache
from django.db import transaction

from planning import models
from planning.domain import (
    Attraction,
    BookingRequest,
    BookingStatus,
    ItemKind,
    Planner,
    PlannerPayload,
    Service,
    ServiceBooking,
    Show,
    Ticket,
    TicketStatus,
    TicketType,
)
from planning.domain.errors import BookingNotFoundError, PlannerNotFoundError
from planning.domain.models import Item, ItemId
from planning.stores.interfaces import BookingStore, CatalogStore, PlannerStore, TicketStore

logger = logging.getLogger(__name__)


def catalog_list_key(kind: ItemKind) -> str:
    return f"catalog:{kind.value}:list"


def catalog_item_key(kind: ItemKind, item_id: ItemId) -> str:
    return f"catalog:{kind.value}:{item_id}"


def _cache_timeout() -> int:
    return getattr(settings, "PLANNING_CACHE_TIMEOUT", 300)


def to_attraction(obj: models.Attraction) -> Attraction:
    return Attraction(
        id=obj.id,
        name=obj.name,
        category=obj.category,
        wait_time=obj.wait_time,
        location=obj.location,
        description=obj.description,
    )


def to_show(obj: models.Show) -> Show:
    return Show(
        id=obj.id,
        title=obj.title,
        date=obj.date,
        time=obj.time,
        location=obj.location,
        description=obj.description,
    )


def to_service(obj: models.Service) -> Service:
    return Service(
        id=obj.id,
        name=obj.name,
        type=obj.type,
        operating_hours=obj.operating_hours,
        location=obj.location,
        description=obj.description,
    )


def to_ticket(obj: models.Ticket) -> Ticket:
    ticket_type = obj.ticket_type
    return Ticket(
        id=obj.id,
        user_id=obj.user_id,
        status=TicketStatus(obj.status),
        valid_for=obj.valid_for,
        ticket_type=TicketType(
            id=ticket_type.id,
            name=ticket_type.name,
            attraction_ids=tuple(a.id for a in ticket_type.attractions.all()),
            show_ids=tuple(s.id for s in ticket_type.shows.all()),
            service_ids=tuple(s.id for s in ticket_type.services.all()),
        ),
    )


def to_planner(obj: models.Planner) -> Planner:
    return Planner(
        id=obj.id,
        ticket_id=obj.ticket_id,
        user_id=obj.user_id,
        title=obj.title,
        description=obj.description,
        date=obj.date,
        attraction_ids=tuple(a.id for a in obj.attractions.all()),
        show_ids=tuple(s.id for s in obj.shows.all()),
        service_ids=tuple(s.id for s in obj.services.all()),
    )


def to_booking(obj: models.ServiceBooking) -> ServiceBooking:
    return ServiceBooking(
        id=obj.id,
        service_id=obj.service_id,
        ticket_id=obj.ticket_id,
        user_id=obj.user_id,
        booking_time=obj.booking_time,
        number_of_people=obj.number_of_people,
        special_requests=obj.special_requests,
        status=BookingStatus(obj.status),
    )


_CATALOG = {
    ItemKind.ATTRACTION: (models.Attraction, to_attraction),
    ItemKind.SHOW: (models.Show, to_show),
    ItemKind.SERVICE: (models.Service, to_service),
}


class DjangoCatalogStore(CatalogStore):
    """Catalog store backed by the Django ORM and the default cache."""

    def get_item(self, kind: ItemKind, item_id: ItemId) -> Item | None:
        key = catalog_item_key(kind, item_id)
        item = cache.get(key)
        if item is not None:
            return item
        model, convert = _CATALOG[kind]
        obj = model.objects.filter(pk=item_id).first()
        if obj is None:
            return None
        item = convert(obj)
        cache.set(key, item, _cache_timeout())
        return item

    def _list(self, kind: ItemKind) -> list:
        key = catalog_list_key(kind)
        items = cache.get(key)
        if items is None:
            model, convert = _CATALOG[kind]
            items = [convert(obj) for obj in model.objects.all()]
            cache.set(key, items, _cache_timeout())
        return items

    def list_attractions(self) -> list[Attraction]:
        return self._list(ItemKind.ATTRACTION)

    def list_shows(self) -> list[Show]:
        return self._list(ItemKind.SHOW)

    def list_services(self) -> list[Service]:
        return self._list(ItemKind.SERVICE)


class DjangoTicketStore(TicketStore):
    def fetch_purchased_tickets(self, user_id: ItemId) -> list[Ticket]:
        tickets = (
            models.Ticket.objects.filter(user_id=user_id)
            .select_related("ticket_type")
            .prefetch_related(
                "ticket_type__attractions",
                "ticket_type__shows",
                "ticket_type__services",
            )
        )
        return [to_ticket(t) for t in tickets]


class DjangoPlannerStore(PlannerStore):
    def _queryset(self):
        return models.Planner.objects.prefetch_related("attractions", "shows", "services")

    def list_planners(self, user_id: ItemId) -> list[Planner]:
        return [to_planner(p) for p in self._queryset().filter(user_id=user_id)]

    def _apply_items(self, planner: models.Planner, payload: PlannerPayload) -> None:
        planner.attractions.set(payload.attraction_ids)
        planner.shows.set(payload.show_ids)
        planner.services.set(payload.service_ids)

    def create_planner(self, payload: PlannerPayload) -> Planner:
        with transaction.atomic():
            planner = models.Planner.objects.create(
                ticket_id=payload.ticket_id,
                user_id=payload.user_id,
                title=payload.title,
                description=payload.description,
                date=date.fromisoformat(payload.date),
            )
            self._apply_items(planner, payload)
        logger.debug("Stored planner %s for ticket %s", planner.id, payload.ticket_id)
        return to_planner(self._queryset().get(pk=planner.pk))

    def update_planner(self, planner_id: ItemId, payload: PlannerPayload) -> Planner:
        with transaction.atomic():
            planner = models.Planner.objects.select_for_update().filter(pk=planner_id).first()
            if planner is None:
                raise PlannerNotFoundError(planner_id)
            planner.ticket_id = payload.ticket_id
            planner.user_id = payload.user_id
            planner.title = payload.title
            planner.description = payload.description
            planner.date = date.fromisoformat(payload.date)
            planner.save()
            self._apply_items(planner, payload)
        return to_planner(self._queryset().get(pk=planner.pk))


class DjangoBookingStore(BookingStore):
    def list_service_bookings(self, user_id: ItemId) -> list[ServiceBooking]:
        return [to_booking(b) for b in models.ServiceBooking.objects.filter(user_id=user_id)]

    def get_service_booking(self, booking_id: ItemId) -> ServiceBooking | None:
        booking = models.ServiceBooking.objects.filter(pk=booking_id).first()
        return to_booking(booking) if booking is not None else None

    def create_service_booking(self, request: BookingRequest) -> ServiceBooking:
        booking = models.ServiceBooking.objects.create(
            service_id=request.service_id,
            ticket_id=request.ticket_id,
            user_id=request.user_id,
            booking_time=request.booking_time,
            number_of_people=request.number_of_people,
            special_requests=request.special_requests,
            status=request.status.value,
        )
        return to_booking(booking)

    def update_service_booking(self, booking_id: ItemId, request: BookingRequest) -> ServiceBooking:
        updated = models.ServiceBooking.objects.filter(pk=booking_id).update(
            service_id=request.service_id,
            ticket_id=request.ticket_id,
            user_id=request.user_id,
            booking_time=request.booking_time,
            number_of_people=request.number_of_people,
            special_requests=request.special_requests,
            status=request.status.value,
        )
        if not updated:
            raise BookingNotFoundError(booking_id)
        return to_booking(models.ServiceBooking.objects.get(pk=booking_id))

    def delete_service_booking(self, booking_id: ItemId) -> None:
        deleted, _ = models.ServiceBooking.objects.filter(pk=booking_id).delete()
        if not deleted:
            raise BookingNotFoundError(booking_id)
