"""Domain primitives that enforce validity at creation time."""

from dataclasses import dataclass
from enum import Enum
from typing import Self
from uuid import UUID

from planning.domain.errors import InvalidIdentifierError, InvalidItemKindError

DEFAULT_PARTY_SIZE = 2


class ItemKind(Enum):
    """Kinds of bookable items a ticket can unlock."""

    ATTRACTION = "attraction"
    SHOW = "show"
    SERVICE = "service"

    @classmethod
    def from_string(cls, value: str) -> Self:
        try:
            return cls(str(value).lower())
        except ValueError:
            raise InvalidItemKindError(value) from None

    @property
    def ids_field(self) -> str:
        """Name of the planner/ticket-type id list holding this kind."""
        return f"{self.value}_ids"


class TicketStatus(Enum):
    ACTIVE = "ACTIVE"
    USED = "USED"
    EXPIRED = "EXPIRED"


class BookingStatus(Enum):
    CONFIRMED = "CONFIRMED"


class PlannerMode(Enum):
    """How a chosen item is merged into the visitor's planners."""

    NEW = "new"
    EXISTING = "existing"


class MutationOp(Enum):
    CREATE = "CREATE"
    UPDATE = "UPDATE"


@dataclass(frozen=True)
class PartySize:
    """Number of people on a booking, never below one."""

    value: int

    def __post_init__(self) -> None:
        if self.value < 1:
            raise ValueError("Party size must be at least 1")

    @classmethod
    def clamp(cls, raw: int | str | None) -> Self:
        """Build from loose form input: missing means the default, low values become 1."""
        if raw is None or raw == "":
            return cls(value=DEFAULT_PARTY_SIZE)
        return cls(value=max(1, int(raw)))


def parse_uuid(value: str, field: str = "id") -> UUID:
    """Parse a path or body identifier issued by the data service."""
    try:
        return UUID(str(value))
    except ValueError:
        raise InvalidIdentifierError(field) from None


def same_id(left, right) -> bool:
    """Compare identifiers that may arrive as strings from forms or URLs."""
    return left == right or str(left) == str(right)


def contains_id(ids, item_id) -> bool:
    """Membership test using `same_id`."""
    return any(same_id(candidate, item_id) for candidate in ids)
