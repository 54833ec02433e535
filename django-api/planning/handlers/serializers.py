"""Serializers for request input and domain model responses."""

from rest_framework import serializers

from planning.domain.dates import to_date_key
from planning.domain.value_objects import PlannerMode


class IdListField(serializers.ListField):
    child = serializers.CharField()


class AttractionSerializer(serializers.Serializer):
    """Serializer for Attraction domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    category = serializers.CharField()
    wait_time = serializers.IntegerField(allow_null=True)
    location = serializers.CharField()
    description = serializers.CharField()


class ShowSerializer(serializers.Serializer):
    """Serializer for Show domain model."""

    id = serializers.CharField()
    title = serializers.CharField()
    date = serializers.SerializerMethodField()
    time = serializers.SerializerMethodField()
    location = serializers.CharField()
    description = serializers.CharField()

    def get_date(self, show) -> str | None:
        return to_date_key(show.date)

    def get_time(self, show) -> str | None:
        if show.time is None:
            return None
        return str(show.time)[:5]


class ServiceSerializer(serializers.Serializer):
    """Serializer for Service domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    type = serializers.CharField()
    operating_hours = serializers.CharField()
    location = serializers.CharField()
    description = serializers.CharField()


class TicketTypeSerializer(serializers.Serializer):
    """Serializer for TicketType domain model."""

    id = serializers.CharField()
    name = serializers.CharField()
    attraction_ids = IdListField()
    show_ids = IdListField()
    service_ids = IdListField()


class TicketSerializer(serializers.Serializer):
    """Serializer for Ticket domain model."""

    id = serializers.CharField()
    user_id = serializers.CharField()
    status = serializers.CharField(source="status.value")
    valid_for = serializers.SerializerMethodField()
    ticket_type = TicketTypeSerializer(allow_null=True)

    def get_valid_for(self, ticket) -> str | None:
        return to_date_key(ticket.valid_for)


class PlannerSerializer(serializers.Serializer):
    """Serializer for Planner domain model."""

    id = serializers.CharField()
    ticket_id = serializers.CharField()
    user_id = serializers.CharField()
    title = serializers.CharField()
    description = serializers.CharField(allow_blank=True)
    date = serializers.SerializerMethodField()
    attraction_ids = IdListField()
    show_ids = IdListField()
    service_ids = IdListField()

    def get_date(self, planner) -> str | None:
        return to_date_key(planner.date)


class AvailableItemsSerializer(serializers.Serializer):
    attractions = AttractionSerializer(many=True)
    shows = ShowSerializer(many=True)
    services = ServiceSerializer(many=True)


class ServiceBookingSerializer(serializers.Serializer):
    """Serializer for ServiceBooking domain model."""

    id = serializers.CharField()
    service_id = serializers.CharField()
    ticket_id = serializers.CharField(allow_null=True)
    user_id = serializers.CharField(allow_null=True)
    booking_time = serializers.DateTimeField()
    number_of_people = serializers.IntegerField()
    special_requests = serializers.CharField(allow_null=True)
    status = serializers.CharField(source="status.value")


class AddItemRequestSerializer(serializers.Serializer):
    """Input for adding an item to a new or existing planner.

    Selection rules (ticket chosen, planner chosen) are enforced by the
    domain so that the same errors reach every caller.
    """

    user_id = serializers.UUIDField()
    ticket_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    mode = serializers.ChoiceField(choices=[m.value for m in PlannerMode], default=PlannerMode.NEW.value)
    planner_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    title = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")


class PlannerSaveRequestSerializer(serializers.Serializer):
    """Input for saving a whole planner from the planner editor."""

    user_id = serializers.UUIDField()
    ticket_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    title = serializers.CharField(required=False, allow_blank=True, default="")
    description = serializers.CharField(required=False, allow_blank=True, default="")
    attraction_ids = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)
    show_ids = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)
    service_ids = serializers.ListField(child=serializers.UUIDField(), required=False, default=list)


class BookingRequestSerializer(serializers.Serializer):
    """Input for booking a service time slot; date is YYYY-MM-DD and time HH:MM."""

    user_id = serializers.UUIDField()
    ticket_id = serializers.UUIDField(required=False, allow_null=True, default=None)
    date = serializers.CharField(required=False, allow_blank=True, default="")
    time = serializers.CharField(required=False, allow_blank=True, default="")
    number_of_people = serializers.IntegerField(required=False, allow_null=True, default=None)
    special_requests = serializers.CharField(required=False, allow_blank=True, allow_null=True, default=None)


class BookingUpdateRequestSerializer(BookingRequestSerializer):
    ticket_id = None
