from django.contrib import admin

from planning.models import Attraction, Planner, Service, ServiceBooking, Show, Ticket, TicketType


@admin.register(Attraction)
class AttractionAdmin(admin.ModelAdmin):
    list_display = ["name", "category", "location", "wait_time"]
    search_fields = ["name", "location"]
    list_filter = ["category"]


@admin.register(Show)
class ShowAdmin(admin.ModelAdmin):
    list_display = ["title", "date", "time", "location"]
    search_fields = ["title"]
    list_filter = ["date"]


@admin.register(Service)
class ServiceAdmin(admin.ModelAdmin):
    list_display = ["name", "type", "operating_hours", "location"]
    list_filter = ["type"]


@admin.register(TicketType)
class TicketTypeAdmin(admin.ModelAdmin):
    list_display = ["name"]
    filter_horizontal = ["attractions", "shows", "services"]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = ["id", "ticket_type", "user_id", "status", "valid_for"]
    list_filter = ["status", "ticket_type"]


@admin.register(Planner)
class PlannerAdmin(admin.ModelAdmin):
    list_display = ["title", "user_id", "ticket", "date"]
    list_filter = ["date"]
    filter_horizontal = ["attractions", "shows", "services"]


@admin.register(ServiceBooking)
class ServiceBookingAdmin(admin.ModelAdmin):
    list_display = ["service", "user_id", "booking_time", "number_of_people", "status"]
    list_filter = ["service__type"]
