"""Pytest configuration and shared fixtures."""

from datetime import timezone
from itertools import count

import pytest
from rest_framework.test import APIClient

from planning.domain import (
    Attraction,
    ItemKind,
    Planner,
    Service,
    ServiceBooking,
    Show,
    Ticket,
    TicketStatus,
    TicketType,
)
from planning.domain.errors import BookingNotFoundError, PlannerNotFoundError
from planning.domain.value_objects import same_id
from planning.services.booking_service import BookingService
from planning.services.planner_service import PlannerService
from planning.stores.interfaces import BookingStore, CatalogStore, PlannerStore, TicketStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def clear_cache():
    from django.core.cache import cache
    cache.clear()
    yield
    cache.clear()


class InMemoryStore(CatalogStore, TicketStore, PlannerStore, BookingStore):
    """Single in-memory stand-in for the park data service."""

    def __init__(self) -> None:
        self.attractions: dict = {}
        self.shows: dict = {}
        self.services: dict = {}
        self.tickets: list[Ticket] = []
        self.planners: dict = {}
        self.bookings: dict = {}
        self.writes: list[tuple] = []
        self._ids = count(100)

    def get_item(self, kind, item_id):
        table = {
            ItemKind.ATTRACTION: self.attractions,
            ItemKind.SHOW: self.shows,
            ItemKind.SERVICE: self.services,
        }[kind]
        return table.get(item_id)

    def list_attractions(self):
        return list(self.attractions.values())

    def list_shows(self):
        return list(self.shows.values())

    def list_services(self):
        return list(self.services.values())

    def fetch_purchased_tickets(self, user_id):
        return [t for t in self.tickets if same_id(t.user_id, user_id)]

    def list_planners(self, user_id):
        return [p for p in self.planners.values() if same_id(p.user_id, user_id)]

    def create_planner(self, payload):
        planner = Planner(id=next(self._ids), **vars(payload))
        self.planners[planner.id] = planner
        self.writes.append(("create_planner", payload))
        return planner

    def update_planner(self, planner_id, payload):
        if planner_id not in self.planners:
            raise PlannerNotFoundError(planner_id)
        planner = Planner(id=planner_id, **vars(payload))
        self.planners[planner_id] = planner
        self.writes.append(("update_planner", planner_id, payload))
        return planner

    def list_service_bookings(self, user_id):
        return [b for b in self.bookings.values() if same_id(b.user_id, user_id)]

    def get_service_booking(self, booking_id):
        return self.bookings.get(booking_id)

    def create_service_booking(self, request):
        booking = ServiceBooking(id=next(self._ids), **vars(request))
        self.bookings[booking.id] = booking
        self.writes.append(("create_service_booking", request))
        return booking

    def update_service_booking(self, booking_id, request):
        if booking_id not in self.bookings:
            raise BookingNotFoundError(booking_id)
        booking = ServiceBooking(id=booking_id, **vars(request))
        self.bookings[booking_id] = booking
        self.writes.append(("update_service_booking", booking_id, request))
        return booking

    def delete_service_booking(self, booking_id):
        if self.bookings.pop(booking_id, None) is None:
            raise BookingNotFoundError(booking_id)
        self.writes.append(("delete_service_booking", booking_id))


USER_ID = 9


@pytest.fixture
def laser_show() -> Show:
    return Show(id=7, title="Laser Show", date="2025-06-18", time="21:00", location="Lagoon")


@pytest.fixture
def coaster() -> Attraction:
    return Attraction(id=3, name="Hyper Coaster", category="thrill", wait_time=40)


@pytest.fixture
def restaurant() -> Service:
    return Service(id=11, name="Blue Bistro", type="Restaurant", operating_hours="12:00-22:00")


@pytest.fixture
def gift_shop() -> Service:
    return Service(id=12, name="Gift Shop", type="Shop")


@pytest.fixture
def full_access() -> TicketType:
    return TicketType(
        id=1,
        name="Full Access",
        attraction_ids=(3,),
        show_ids=(7,),
        service_ids=(11, 12),
    )


@pytest.fixture
def make_ticket(full_access):
    def _make(ticket_id=1, status=TicketStatus.ACTIVE, valid_for="2025-06-18T00:00:00Z", **kwargs):
        fields = {"user_id": USER_ID, "ticket_type": full_access, **kwargs}
        return Ticket(id=ticket_id, status=status, valid_for=valid_for, **fields)

    return _make


@pytest.fixture
def make_planner():
    def _make(planner_id=50, ticket_id=1, date="2025-06-18", **kwargs):
        fields = {
            "user_id": USER_ID,
            "title": "My day",
            "description": "",
            **kwargs,
        }
        return Planner(id=planner_id, ticket_id=ticket_id, date=date, **fields)

    return _make


@pytest.fixture
def store(laser_show, coaster, restaurant, gift_shop) -> InMemoryStore:
    store = InMemoryStore()
    store.attractions[coaster.id] = coaster
    store.shows[laser_show.id] = laser_show
    store.services[restaurant.id] = restaurant
    store.services[gift_shop.id] = gift_shop
    return store


@pytest.fixture
def planner_service(store) -> PlannerService:
    return PlannerService(store, store, store)


@pytest.fixture
def booking_service(store) -> BookingService:
    return BookingService(store, store, store, tz=timezone.utc)
