"""Django ORM models (persistence layer).

These models stand in for the park's data service. Domain logic lives in
planning/domain/.
"""

import uuid

from django.db import models

from planning.domain.dates import to_display_date


class Attraction(models.Model):
    """Persistence model for attractions."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    category = models.CharField(max_length=100, blank=True)
    wait_time = models.PositiveIntegerField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name


class Show(models.Model):
    """Persistence model for shows."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    title = models.CharField(max_length=255)
    date = models.DateField()
    time = models.TimeField(blank=True, null=True)
    location = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ["date", "time"]
        indexes = [
            models.Index(fields=["date"]),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.date}"


class Service(models.Model):
    """Persistence model for park services."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=255)
    type = models.CharField(max_length=50)
    operating_hours = models.CharField(max_length=100, blank=True)
    location = models.CharField(max_length=255, blank=True)
    description = models.TextField(blank=True)

    class Meta:
        ordering = ["name"]

    def __str__(self) -> str:
        return f"{self.name} ({self.type})"


class TicketType(models.Model):
    """Persistence model for ticket types and the items they unlock."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    attractions = models.ManyToManyField(Attraction, blank=True, related_name="ticket_types")
    shows = models.ManyToManyField(Show, blank=True, related_name="ticket_types")
    services = models.ManyToManyField(Service, blank=True, related_name="ticket_types")

    def __str__(self) -> str:
        return self.name


class Ticket(models.Model):
    """Persistence model for purchased tickets."""

    class Status(models.TextChoices):
        ACTIVE = "ACTIVE"
        USED = "USED"
        EXPIRED = "EXPIRED"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user_id = models.UUIDField()
    ticket_type = models.ForeignKey(TicketType, on_delete=models.PROTECT, related_name="tickets")
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.ACTIVE)
    valid_for = models.DateField(blank=True, null=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["valid_for"]
        indexes = [
            models.Index(fields=["user_id"]),
        ]

    def save(self, *args, **kwargs):
        # The day as written, not the TIME_ZONE day of an aware datetime.
        day = to_display_date(self.valid_for)
        if day is not None:
            self.valid_for = day
        super().save(*args, **kwargs)

    def __str__(self) -> str:
        return f"{self.ticket_type.name} - {self.valid_for} ({self.status})"


class Planner(models.Model):
    """Persistence model for visitor planners."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    ticket = models.ForeignKey(Ticket, on_delete=models.CASCADE, related_name="planners")
    user_id = models.UUIDField()
    title = models.CharField(max_length=255)
    description = models.TextField(blank=True)
    date = models.DateField()
    attractions = models.ManyToManyField(Attraction, blank=True, related_name="planners")
    shows = models.ManyToManyField(Show, blank=True, related_name="planners")
    services = models.ManyToManyField(Service, blank=True, related_name="planners")
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["date", "created_at"]
        indexes = [
            models.Index(fields=["user_id", "date"]),
        ]

    def __str__(self) -> str:
        return f"{self.title} - {self.date}"


class ServiceBooking(models.Model):
    """Persistence model for service reservations."""

    class Status(models.TextChoices):
        CONFIRMED = "CONFIRMED"

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    service = models.ForeignKey(Service, on_delete=models.CASCADE, related_name="bookings")
    ticket = models.ForeignKey(
        Ticket, on_delete=models.SET_NULL, blank=True, null=True, related_name="bookings"
    )
    user_id = models.UUIDField(blank=True, null=True)
    booking_time = models.DateTimeField()
    number_of_people = models.PositiveIntegerField(default=2)
    special_requests = models.TextField(blank=True, null=True)
    status = models.CharField(max_length=10, choices=Status.choices, default=Status.CONFIRMED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["-booking_time"]
        indexes = [
            models.Index(fields=["user_id", "-booking_time"]),
        ]

    def __str__(self) -> str:
        return f"{self.service.name} - {self.booking_time}"
