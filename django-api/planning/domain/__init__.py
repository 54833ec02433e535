from planning.domain.models import (
    Attraction,
    AvailableItems,
    BookingRequest,
    Planner,
    PlannerDraft,
    PlannerMutation,
    PlannerPayload,
    Service,
    ServiceBooking,
    Show,
    Ticket,
    TicketType,
)
from planning.domain.value_objects import (
    BookingStatus,
    ItemKind,
    MutationOp,
    PartySize,
    PlannerMode,
    TicketStatus,
)

__all__ = [
    "Attraction",
    "Show",
    "Service",
    "TicketType",
    "Ticket",
    "Planner",
    "PlannerPayload",
    "PlannerMutation",
    "PlannerDraft",
    "BookingRequest",
    "ServiceBooking",
    "AvailableItems",
    "ItemKind",
    "TicketStatus",
    "BookingStatus",
    "PlannerMode",
    "MutationOp",
    "PartySize",
]
