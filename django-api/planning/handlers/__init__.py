from planning.handlers.views import (
    AvailableItemsView,
    BookingDetailView,
    BookingListView,
    CandidatePlannerListView,
    EligibleTicketListView,
    PlannerDetailView,
    PlannerItemView,
    PlannerListView,
    ServiceBookingCreateView,
)

__all__ = [
    "EligibleTicketListView",
    "CandidatePlannerListView",
    "AvailableItemsView",
    "PlannerItemView",
    "PlannerListView",
    "PlannerDetailView",
    "BookingListView",
    "ServiceBookingCreateView",
    "BookingDetailView",
]
