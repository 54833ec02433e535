"""Which purchased tickets grant access to a bookable item.

One engine serves attractions, shows and services; the per-kind
differences live in ELIGIBILITY_RULES.

- Attractions are planned for tickets already activated at the gate (USED).
- Shows need an ACTIVE ticket valid on the show's own day.
- Services accept ACTIVE or USED tickets.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from planning.domain.dates import to_date_key
from planning.domain.models import Item, Ticket
from planning.domain.value_objects import ItemKind, TicketStatus


@dataclass(frozen=True)
class EligibilityRule:
    """Status set and date requirement a ticket must meet for one item kind."""

    statuses: frozenset[TicketStatus]
    requires_same_day: bool = False


ELIGIBILITY_RULES: dict[ItemKind, EligibilityRule] = {
    ItemKind.ATTRACTION: EligibilityRule(statuses=frozenset({TicketStatus.USED})),
    ItemKind.SHOW: EligibilityRule(
        statuses=frozenset({TicketStatus.ACTIVE}),
        requires_same_day=True,
    ),
    ItemKind.SERVICE: EligibilityRule(
        statuses=frozenset({TicketStatus.ACTIVE, TicketStatus.USED}),
    ),
}


def is_eligible(item: Item, ticket: Ticket, kind: ItemKind) -> bool:
    rule = ELIGIBILITY_RULES[kind]
    if ticket.status not in rule.statuses or not ticket.valid_for:
        return False
    if ticket.ticket_type is None or not ticket.ticket_type.grants(kind, item.id):
        return False
    if rule.requires_same_day:
        show_day = to_date_key(getattr(item, "date", None))
        return show_day is not None and show_day == to_date_key(ticket.valid_for)
    return True


def eligible_tickets(item: Item | None, tickets: Iterable[Ticket] | None, kind: ItemKind) -> list[Ticket]:
    """Return the tickets, in input order, that grant access to `item`."""
    if item is None or not tickets:
        return []
    return [ticket for ticket in tickets if is_eligible(item, ticket, kind)]
