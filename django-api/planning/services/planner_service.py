"""Planner service - orchestrates eligibility and planner mutations.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants before any external write
- Perform exactly one planner write per accepted request
- Return domain models or raise domain errors
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from planning.domain import (
    AvailableItems,
    ItemKind,
    MutationOp,
    Planner,
    PlannerDraft,
    PlannerMutation,
    Ticket,
)
from planning.domain.catalog import available_items
from planning.domain.eligibility import eligible_tickets, is_eligible
from planning.domain.errors import (
    DomainError,
    ItemNotFoundError,
    NoTicketSelectedError,
    PlannerNotFoundError,
    TicketNotEligibleError,
    TicketNotFoundError,
)
from planning.domain.models import Item, ItemId
from planning.domain.mutations import candidate_planners, plan_mutation, plan_save
from planning.domain.value_objects import same_id
from planning.stores.interfaces import CatalogStore, PlannerStore, TicketStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AddItemResult:
    """Outcome of adding an item: the stored planner and the cleared draft."""

    planner: Planner
    op: MutationOp
    draft: PlannerDraft


class PlannerService:
    """Service for ticket eligibility and planner building."""

    def __init__(self, catalog: CatalogStore, tickets: TicketStore, planners: PlannerStore) -> None:
        self._catalog = catalog
        self._tickets = tickets
        self._planners = planners

    def get_item(self, kind: ItemKind, item_id: ItemId) -> Item:
        """Return a catalog item.

        Raises:
            ItemNotFoundError: If the item does not exist.
        """
        item = self._catalog.get_item(kind, item_id)
        if item is None:
            raise ItemNotFoundError(kind.value, item_id)
        return item

    def get_ticket(self, user_id: ItemId, ticket_id: ItemId) -> Ticket:
        """Return one of the user's purchased tickets.

        Raises:
            TicketNotFoundError: If the user holds no such ticket.
        """
        return self._find_ticket(self._tickets.fetch_purchased_tickets(user_id), ticket_id)

    def _find_ticket(self, tickets: Iterable[Ticket], ticket_id: ItemId) -> Ticket:
        ticket = next((t for t in tickets if same_id(t.id, ticket_id)), None)
        if ticket is None:
            raise TicketNotFoundError(ticket_id)
        return ticket

    def list_planners(self, user_id: ItemId) -> list[Planner]:
        return self._planners.list_planners(user_id)

    def eligible_tickets(self, user_id: ItemId, kind: ItemKind, item_id: ItemId) -> list[Ticket]:
        """Return the user's tickets granting access to the item."""
        item = self.get_item(kind, item_id)
        return eligible_tickets(item, self._tickets.fetch_purchased_tickets(user_id), kind)

    def candidate_planners(self, user_id: ItemId, ticket_id: ItemId) -> list[Planner]:
        """Return the user's planners an item could be added to for this ticket."""
        ticket = self.get_ticket(user_id, ticket_id)
        return candidate_planners(self._planners.list_planners(user_id), ticket)

    def available_items(self, user_id: ItemId, ticket_id: ItemId) -> AvailableItems:
        ticket = self.get_ticket(user_id, ticket_id)
        return available_items(
            ticket,
            self._catalog.list_attractions(),
            self._catalog.list_shows(),
            self._catalog.list_services(),
        )

    def add_item(self, user_id: ItemId, kind: ItemKind, item_id: ItemId, draft: PlannerDraft) -> AddItemResult:
        """Add an item to a new or existing planner following the visitor's draft.

        Raises:
            ItemNotFoundError: If the item does not exist.
            NoTicketSelectedError: If the draft has no ticket.
            TicketNotFoundError: If the user holds no such ticket.
            TicketNotEligibleError: If the ticket does not grant the item.
            Errors of plan_mutation for planner selection and duplicates.
        """
        try:
            item = self.get_item(kind, item_id)
            if draft.selected_ticket_id is None:
                raise NoTicketSelectedError()
            ticket = self.get_ticket(user_id, draft.selected_ticket_id)
            if not is_eligible(item, ticket, kind):
                raise TicketNotEligibleError(ticket.id, kind.value)
            mutation = plan_mutation(
                draft.mode,
                item,
                kind,
                ticket,
                draft.chosen_planner_id,
                self._planners.list_planners(user_id),
                draft.title,
                draft.description,
            )
        except DomainError as exc:
            logger.warning("Rejected %s %s for user %s: %s", kind.value, item_id, user_id, exc)
            raise

        planner = self._apply(mutation)
        logger.info("%s planner %s with %s %s", mutation.op.value, planner.id, kind.value, item_id)
        return AddItemResult(planner=planner, op=mutation.op, draft=draft.reset())

    def save_planner(
        self,
        user_id: ItemId,
        ticket_id: ItemId | None,
        planner_id: ItemId | None,
        title: str,
        description: str = "",
        attraction_ids: Iterable[ItemId] = (),
        show_ids: Iterable[ItemId] = (),
        service_ids: Iterable[ItemId] = (),
    ) -> Planner:
        """Create or replace a whole planner from the planner editor.

        Every selected item must be available to the ticket.

        Raises:
            NoTicketSelectedError: If no ticket is given.
            TicketNotFoundError: If the user holds no such ticket.
            PlannerNotFoundError: If `planner_id` is not one of the user's planners.
            TicketNotEligibleError: If an item is not available to the ticket.
            MissingTitleError: If the title is blank.
        """
        try:
            if ticket_id is None:
                raise NoTicketSelectedError()
            ticket = self.get_ticket(user_id, ticket_id)
            planner = None
            if planner_id is not None:
                planner = next(
                    (p for p in self._planners.list_planners(user_id) if same_id(p.id, planner_id)),
                    None,
                )
                if planner is None:
                    raise PlannerNotFoundError(planner_id)
            mutation = plan_save(
                ticket, planner, title, description, attraction_ids, show_ids, service_ids
            )
            self._check_available(ticket, mutation)
        except DomainError as exc:
            logger.warning("Rejected planner save for user %s: %s", user_id, exc)
            raise

        saved = self._apply(mutation)
        logger.info("%s planner %s from editor", mutation.op.value, saved.id)
        return saved

    def _check_available(self, ticket: Ticket, mutation: PlannerMutation) -> None:
        available = available_items(
            ticket,
            self._catalog.list_attractions(),
            self._catalog.list_shows(),
            self._catalog.list_services(),
        )
        offered = {
            ItemKind.ATTRACTION: {str(a.id) for a in available.attractions},
            ItemKind.SHOW: {str(s.id) for s in available.shows},
            ItemKind.SERVICE: {str(s.id) for s in available.services},
        }
        for kind, ids in offered.items():
            requested = getattr(mutation.payload, kind.ids_field)
            if any(str(item_id) not in ids for item_id in requested):
                raise TicketNotEligibleError(ticket.id, kind.value)

    def _apply(self, mutation: PlannerMutation) -> Planner:
        if mutation.op is MutationOp.CREATE:
            return self._planners.create_planner(mutation.payload)
        return self._planners.update_planner(mutation.planner_id, mutation.payload)
