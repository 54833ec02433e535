"""Domain error codes for the planning module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    NO_TICKET_SELECTED = "NO_TICKET_SELECTED"
    NO_PLANNER_SELECTED = "NO_PLANNER_SELECTED"
    PLANNER_NOT_FOUND = "PLANNER_NOT_FOUND"
    DUPLICATE_ITEM = "DUPLICATE_ITEM"
    PLANNER_MISMATCH = "PLANNER_MISMATCH"
    INVALID_PLANNER_MODE = "INVALID_PLANNER_MODE"
    MISSING_TITLE = "MISSING_TITLE"
    MISSING_SCHEDULE = "MISSING_SCHEDULE"
    INVALID_SCHEDULE = "INVALID_SCHEDULE"
    BOOKING_DATE_MISMATCH = "BOOKING_DATE_MISMATCH"
    ITEM_NOT_FOUND = "ITEM_NOT_FOUND"
    TICKET_NOT_FOUND = "TICKET_NOT_FOUND"
    TICKET_NOT_ELIGIBLE = "TICKET_NOT_ELIGIBLE"
    SERVICE_NOT_BOOKABLE = "SERVICE_NOT_BOOKABLE"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    INVALID_IDENTIFIER = "INVALID_IDENTIFIER"
    INVALID_ITEM_KIND = "INVALID_ITEM_KIND"


@dataclass(eq=False)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class NoTicketSelectedError(DomainError):
    """Raised when a planner operation is attempted without a ticket."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_TICKET_SELECTED,
            message="Please select a valid ticket",
        )


class NoPlannerSelectedError(DomainError):
    """Raised when adding to an existing planner without choosing one."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.NO_PLANNER_SELECTED,
            message="Please select an existing planner",
        )


class PlannerNotFoundError(DomainError):
    """Raised when the chosen planner is not among the visitor's planners."""

    def __init__(self, planner_id) -> None:
        super().__init__(
            code=ErrorCode.PLANNER_NOT_FOUND,
            message="Selected planner not found",
        )
        self.planner_id = planner_id


class DuplicateItemError(DomainError):
    """Raised when the item is already part of the target planner."""

    def __init__(self, kind: str, item_id) -> None:
        super().__init__(
            code=ErrorCode.DUPLICATE_ITEM,
            message=f"This {kind} is already in the selected planner",
        )
        self.kind = kind
        self.item_id = item_id


class PlannerMismatchError(DomainError):
    """Raised when an existing planner belongs to another ticket or day."""

    def __init__(self, planner_id) -> None:
        super().__init__(
            code=ErrorCode.PLANNER_MISMATCH,
            message="The selected planner is not compatible with the selected ticket",
        )
        self.planner_id = planner_id


class InvalidPlannerModeError(DomainError):
    """Raised for a planner mode other than "new" or "existing"."""

    def __init__(self, mode) -> None:
        super().__init__(
            code=ErrorCode.INVALID_PLANNER_MODE,
            message="Planner mode must be 'new' or 'existing'",
        )
        self.mode = mode


class MissingTitleError(DomainError):
    """Raised when an edited planner is saved without a title."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_TITLE,
            message="Title is required",
        )


class MissingScheduleError(DomainError):
    """Raised when a booking lacks a date or a time."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.MISSING_SCHEDULE,
            message="Please select date and time for the booking",
        )


class InvalidScheduleError(DomainError):
    """Raised when a booking date or time cannot be used."""

    def __init__(self, message: str = "Invalid booking date or time") -> None:
        super().__init__(code=ErrorCode.INVALID_SCHEDULE, message=message)


class BookingDateMismatchError(DomainError):
    """Raised when a ticket-backed booking is not on the ticket's day."""

    def __init__(self, booking_date: str, ticket_date: str | None) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_DATE_MISMATCH,
            message="Booking date must match the selected ticket's valid date",
        )
        self.booking_date = booking_date
        self.ticket_date = ticket_date


class ItemNotFoundError(DomainError):
    """Raised when an attraction, show or service does not exist."""

    def __init__(self, kind: str, item_id) -> None:
        super().__init__(
            code=ErrorCode.ITEM_NOT_FOUND,
            message=f"The requested {kind} was not found",
        )
        self.kind = kind
        self.item_id = item_id


class TicketNotFoundError(DomainError):
    """Raised when a ticket is not among the visitor's purchased tickets."""

    def __init__(self, ticket_id) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_FOUND,
            message="Ticket not found",
        )
        self.ticket_id = ticket_id


class TicketNotEligibleError(DomainError):
    """Raised when the selected ticket does not grant access to the item."""

    def __init__(self, ticket_id, kind: str) -> None:
        super().__init__(
            code=ErrorCode.TICKET_NOT_ELIGIBLE,
            message=f"The selected ticket does not grant access to this {kind}",
        )
        self.ticket_id = ticket_id
        self.kind = kind


class ServiceNotBookableError(DomainError):
    """Raised when booking a service whose type takes no reservations."""

    def __init__(self, service_id) -> None:
        super().__init__(
            code=ErrorCode.SERVICE_NOT_BOOKABLE,
            message="This service does not accept bookings",
        )
        self.service_id = service_id


class BookingNotFoundError(DomainError):
    """Raised when a booking does not exist for the visitor."""

    def __init__(self, booking_id) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class InvalidIdentifierError(DomainError):
    """Raised when an identifier is malformed."""

    def __init__(self, field: str = "id") -> None:
        super().__init__(
            code=ErrorCode.INVALID_IDENTIFIER,
            message=f"Invalid {field} format",
        )
        self.field = field


class InvalidItemKindError(DomainError):
    """Raised for an item kind other than attraction, show or service."""

    def __init__(self, kind) -> None:
        super().__init__(
            code=ErrorCode.INVALID_ITEM_KIND,
            message="Item kind must be one of: attraction, show, service",
        )
        self.kind = kind
