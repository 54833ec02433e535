from django.urls import path

from planning.handlers import (
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

urlpatterns = [
    path(
        "items/<str:kind>/<str:item_id>/eligible-tickets",
        EligibleTicketListView.as_view(),
        name="eligible-tickets",
    ),
    path("items/<str:kind>/<str:item_id>/planner", PlannerItemView.as_view(), name="planner-item"),
    path("tickets/<str:ticket_id>/planners", CandidatePlannerListView.as_view(), name="candidate-planners"),
    path("tickets/<str:ticket_id>/available-items", AvailableItemsView.as_view(), name="available-items"),
    path("planners", PlannerListView.as_view(), name="planner-list"),
    path("planners/<str:planner_id>", PlannerDetailView.as_view(), name="planner-detail"),
    path("bookings", BookingListView.as_view(), name="booking-list"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path(
        "services/<str:service_id>/bookings",
        ServiceBookingCreateView.as_view(),
        name="service-booking-create",
    ),
]
