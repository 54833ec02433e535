"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging
from zoneinfo import ZoneInfo

from django.conf import settings
from django.core.exceptions import PermissionDenied
from django.http import Http404
from django.utils import timezone
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from planning.domain import ItemKind, MutationOp, PlannerDraft, PlannerMode
from planning.domain.errors import DomainError, ErrorCode
from planning.domain.value_objects import parse_uuid
from planning.handlers.serializers import (
    AddItemRequestSerializer,
    AvailableItemsSerializer,
    BookingRequestSerializer,
    BookingUpdateRequestSerializer,
    PlannerSaveRequestSerializer,
    PlannerSerializer,
    ServiceBookingSerializer,
    TicketSerializer,
)
from planning.services.booking_service import BookingService
from planning.services.planner_service import PlannerService
from planning.stores.django_store import (
    DjangoBookingStore,
    DjangoCatalogStore,
    DjangoPlannerStore,
    DjangoTicketStore,
)

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = {
    ErrorCode.PLANNER_NOT_FOUND,
    ErrorCode.ITEM_NOT_FOUND,
    ErrorCode.TICKET_NOT_FOUND,
    ErrorCode.BOOKING_NOT_FOUND,
}
CONFLICT_CODES = {
    ErrorCode.DUPLICATE_ITEM,
    ErrorCode.PLANNER_MISMATCH,
    ErrorCode.BOOKING_DATE_MISMATCH,
}


def status_for(error: DomainError) -> int:
    if error.code in NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    if error.code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def planner_service() -> PlannerService:
    return PlannerService(DjangoCatalogStore(), DjangoTicketStore(), DjangoPlannerStore())


def booking_zone() -> ZoneInfo:
    """Zone in which booking dates and times are read."""
    return ZoneInfo(getattr(settings, "PLANNING_TIME_ZONE", settings.TIME_ZONE))


def booking_today():
    return timezone.localdate(timezone=booking_zone())


def booking_service() -> BookingService:
    return BookingService(
        DjangoCatalogStore(), DjangoTicketStore(), DjangoBookingStore(), tz=booking_zone()
    )


class PlanningAPIView(APIView):
    """Base view mapping domain errors to `{"code", "message"}` responses."""

    def handle_exception(self, exc: Exception) -> Response:
        if isinstance(exc, DomainError):
            return Response(
                {"code": exc.code.value, "message": exc.message},
                status=status_for(exc),
            )
        if not isinstance(exc, (APIException, Http404, PermissionDenied)):
            logger.exception("Unhandled error in %s", type(self).__name__)
        return super().handle_exception(exc)

    def user_id_param(self, request: Request):
        return parse_uuid(request.query_params.get("user_id", ""), field="user_id")

    def validated(self, serializer_class, data) -> dict | Response:
        serializer = serializer_class(data=data)
        if not serializer.is_valid():
            return Response(
                {"code": "INVALID_REQUEST", "message": "Invalid request", "errors": serializer.errors},
                status=status.HTTP_400_BAD_REQUEST,
            )
        return serializer.validated_data


class EligibleTicketListView(PlanningAPIView):
    """Handler for GET /api/items/{kind}/{item_id}/eligible-tickets"""

    def get(self, request: Request, kind: str, item_id: str) -> Response:
        item_kind = ItemKind.from_string(kind)
        tickets = planner_service().eligible_tickets(
            self.user_id_param(request), item_kind, parse_uuid(item_id, field="item_id")
        )
        return Response(TicketSerializer(tickets, many=True).data)


class CandidatePlannerListView(PlanningAPIView):
    """Handler for GET /api/tickets/{ticket_id}/planners"""

    def get(self, request: Request, ticket_id: str) -> Response:
        planners = planner_service().candidate_planners(
            self.user_id_param(request), parse_uuid(ticket_id, field="ticket_id")
        )
        return Response(PlannerSerializer(planners, many=True).data)


class AvailableItemsView(PlanningAPIView):
    """Handler for GET /api/tickets/{ticket_id}/available-items"""

    def get(self, request: Request, ticket_id: str) -> Response:
        items = planner_service().available_items(
            self.user_id_param(request), parse_uuid(ticket_id, field="ticket_id")
        )
        return Response(AvailableItemsSerializer(items).data)


class PlannerItemView(PlanningAPIView):
    """Handler for POST /api/items/{kind}/{item_id}/planner"""

    def post(self, request: Request, kind: str, item_id: str) -> Response:
        item_kind = ItemKind.from_string(kind)
        data = self.validated(AddItemRequestSerializer, request.data)
        if isinstance(data, Response):
            return data
        draft = PlannerDraft(
            selected_ticket_id=data["ticket_id"],
            mode=PlannerMode(data["mode"]),
            chosen_planner_id=data["planner_id"],
            title=data["title"],
            description=data["description"],
        )
        result = planner_service().add_item(
            data["user_id"], item_kind, parse_uuid(item_id, field="item_id"), draft
        )
        return Response(
            {"op": result.op.value, "planner": PlannerSerializer(result.planner).data},
            status=status.HTTP_201_CREATED if result.op is MutationOp.CREATE else status.HTTP_200_OK,
        )


class PlannerListView(PlanningAPIView):
    """Handler for GET and POST /api/planners"""

    def get(self, request: Request) -> Response:
        user_id = self.user_id_param(request)
        planners = planner_service().list_planners(user_id)
        return Response(PlannerSerializer(planners, many=True).data)

    def post(self, request: Request) -> Response:
        data = self.validated(PlannerSaveRequestSerializer, request.data)
        if isinstance(data, Response):
            return data
        planner = planner_service().save_planner(
            data["user_id"],
            data["ticket_id"],
            None,
            data["title"],
            data["description"],
            data["attraction_ids"],
            data["show_ids"],
            data["service_ids"],
        )
        return Response(PlannerSerializer(planner).data, status=status.HTTP_201_CREATED)


class PlannerDetailView(PlanningAPIView):
    """Handler for PUT /api/planners/{planner_id}"""

    def put(self, request: Request, planner_id: str) -> Response:
        planner_uuid = parse_uuid(planner_id, field="planner_id")
        data = self.validated(PlannerSaveRequestSerializer, request.data)
        if isinstance(data, Response):
            return data
        planner = planner_service().save_planner(
            data["user_id"],
            data["ticket_id"],
            planner_uuid,
            data["title"],
            data["description"],
            data["attraction_ids"],
            data["show_ids"],
            data["service_ids"],
        )
        return Response(PlannerSerializer(planner).data)


class BookingListView(PlanningAPIView):
    """Handler for GET /api/bookings"""

    def get(self, request: Request) -> Response:
        bookings = booking_service().list_bookings(self.user_id_param(request))
        return Response(ServiceBookingSerializer(bookings, many=True).data)


class ServiceBookingCreateView(PlanningAPIView):
    """Handler for POST /api/services/{service_id}/bookings"""

    def post(self, request: Request, service_id: str) -> Response:
        service_uuid = parse_uuid(service_id, field="service_id")
        data = self.validated(BookingRequestSerializer, request.data)
        if isinstance(data, Response):
            return data
        booking = booking_service().book_service(
            data["user_id"],
            service_uuid,
            data["ticket_id"],
            data["date"],
            data["time"],
            data["number_of_people"],
            data["special_requests"],
            today=booking_today(),
        )
        return Response(ServiceBookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailView(PlanningAPIView):
    """Handler for PUT and DELETE /api/bookings/{booking_id}"""

    def put(self, request: Request, booking_id: str) -> Response:
        booking_uuid = parse_uuid(booking_id, field="booking_id")
        data = self.validated(BookingUpdateRequestSerializer, request.data)
        if isinstance(data, Response):
            return data
        booking = booking_service().update_booking(
            data["user_id"],
            booking_uuid,
            data["date"],
            data["time"],
            data["number_of_people"],
            data["special_requests"],
            today=booking_today(),
        )
        return Response(ServiceBookingSerializer(booking).data)

    def delete(self, request: Request, booking_id: str) -> Response:
        booking_uuid = parse_uuid(booking_id, field="booking_id")
        booking_service().cancel_booking(self.user_id_param(request), booking_uuid)
        return Response(status=status.HTTP_204_NO_CONTENT)
