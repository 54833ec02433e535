"""Store interfaces (repository pattern).

Stores stand in for the park's external data service. They must be
swappable and return domain models. Failures propagate to the caller.
"""

from abc import ABC, abstractmethod

from planning.domain import (
    Attraction,
    BookingRequest,
    ItemKind,
    Planner,
    PlannerPayload,
    Service,
    ServiceBooking,
    Show,
    Ticket,
)
from planning.domain.models import Item, ItemId


class CatalogStore(ABC):
    """Interface for reading the park catalog."""

    @abstractmethod
    def get_item(self, kind: ItemKind, item_id: ItemId) -> Item | None:
        """Return an attraction, show or service by ID, or None if not found."""
        ...

    @abstractmethod
    def list_attractions(self) -> list[Attraction]:
        ...

    @abstractmethod
    def list_shows(self) -> list[Show]:
        """Return all shows ordered by date and time."""
        ...

    @abstractmethod
    def list_services(self) -> list[Service]:
        ...


class TicketStore(ABC):
    """Interface for the visitor's purchased tickets."""

    @abstractmethod
    def fetch_purchased_tickets(self, user_id: ItemId) -> list[Ticket]:
        """Return every ticket the user has purchased, with its ticket type."""
        ...


class PlannerStore(ABC):
    """Interface for planner persistence operations."""

    @abstractmethod
    def list_planners(self, user_id: ItemId) -> list[Planner]:
        """Return the user's planners ordered by date."""
        ...

    @abstractmethod
    def create_planner(self, payload: PlannerPayload) -> Planner:
        """Persist a new planner and return it with its assigned ID."""
        ...

    @abstractmethod
    def update_planner(self, planner_id: ItemId, payload: PlannerPayload) -> Planner:
        """Replace the planner's fields and item lists with `payload`."""
        ...


class BookingStore(ABC):
    """Interface for service booking operations."""

    @abstractmethod
    def list_service_bookings(self, user_id: ItemId) -> list[ServiceBooking]:
        ...

    @abstractmethod
    def get_service_booking(self, booking_id: ItemId) -> ServiceBooking | None:
        ...

    @abstractmethod
    def create_service_booking(self, request: BookingRequest) -> ServiceBooking:
        """Persist a booking and return it with its assigned ID."""
        ...

    @abstractmethod
    def update_service_booking(self, booking_id: ItemId, request: BookingRequest) -> ServiceBooking:
        ...

    @abstractmethod
    def delete_service_booking(self, booking_id: ItemId) -> None:
        """Remove a booking.

        Raises:
            BookingNotFoundError: If the booking does not exist.
        """
        ...
