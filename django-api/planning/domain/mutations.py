"""Planner matching and the create-or-update decision for a chosen item.

Nothing here performs I/O; callers send the returned mutation to the
planner store and reset their draft on success.
"""

from collections.abc import Iterable, Sequence

from planning.domain.dates import to_date_key
from planning.domain.errors import (
    DuplicateItemError,
    InvalidPlannerModeError,
    MissingTitleError,
    NoPlannerSelectedError,
    NoTicketSelectedError,
    PlannerMismatchError,
    PlannerNotFoundError,
)
from planning.domain.models import Item, ItemId, Planner, PlannerMutation, PlannerPayload, Ticket
from planning.domain.value_objects import ItemKind, MutationOp, PlannerMode, contains_id, same_id


def candidate_planners(planners: Iterable[Planner] | None, ticket: Ticket | None) -> list[Planner]:
    """Planners sharing the ticket and its calendar day."""
    if ticket is None or not planners:
        return []
    ticket_day = to_date_key(ticket.valid_for)
    return [
        planner
        for planner in planners
        if same_id(planner.ticket_id, ticket.id) and to_date_key(planner.date) == ticket_day
    ]


def default_title(item: Item) -> str:
    return f"Planner for {item.label}"


def default_description(item: Item, kind: ItemKind) -> str:
    return f"Planner for the {kind.value} {item.label}"


def _find_planner(planners: Iterable[Planner], planner_id: ItemId) -> Planner | None:
    return next((p for p in planners if same_id(p.id, planner_id)), None)


def plan_mutation(
    mode: PlannerMode | str,
    item: Item,
    kind: ItemKind,
    selected_ticket: Ticket | None,
    chosen_planner_id: ItemId | None,
    planners: Sequence[Planner],
    form_title: str | None = "",
    form_description: str | None = "",
) -> PlannerMutation:
    """Decide how `item` enters the visitor's planners.

    Raises:
        NoTicketSelectedError: If no ticket is selected.
        InvalidPlannerModeError: If mode is neither "new" nor "existing".
        NoPlannerSelectedError: If mode is "existing" without a chosen planner.
        PlannerNotFoundError: If the chosen planner is not in `planners`.
        PlannerMismatchError: If the chosen planner belongs to another ticket or day.
        DuplicateItemError: If the planner already lists the item.
    """
    if selected_ticket is None:
        raise NoTicketSelectedError()
    try:
        mode = PlannerMode(mode)
    except ValueError:
        raise InvalidPlannerModeError(mode) from None

    ticket_day = to_date_key(selected_ticket.valid_for)

    if mode is PlannerMode.NEW:
        payload = PlannerPayload(
            ticket_id=selected_ticket.id,
            user_id=selected_ticket.user_id,
            title=(form_title or "").strip() or default_title(item),
            description=form_description or default_description(item, kind),
            date=ticket_day,
        ).with_item(kind, item.id)
        return PlannerMutation(op=MutationOp.CREATE, payload=payload)

    if chosen_planner_id is None or chosen_planner_id == "":
        raise NoPlannerSelectedError()
    planner = _find_planner(planners or (), chosen_planner_id)
    if planner is None:
        raise PlannerNotFoundError(chosen_planner_id)
    if not same_id(planner.ticket_id, selected_ticket.id) or to_date_key(planner.date) != ticket_day:
        raise PlannerMismatchError(planner.id)
    if planner.contains(kind, item.id):
        raise DuplicateItemError(kind.value, item.id)

    payload = PlannerPayload.from_planner(planner, to_date_key(planner.date)).with_item(kind, item.id)
    return PlannerMutation(op=MutationOp.UPDATE, payload=payload, planner_id=planner.id)


def toggle_item(ids: Iterable[ItemId], item_id: ItemId) -> tuple[ItemId, ...]:
    """Add `item_id` if absent, remove it if present."""
    ids = tuple(ids)
    if contains_id(ids, item_id):
        return tuple(i for i in ids if not same_id(i, item_id))
    return (*ids, item_id)


def _unique(ids: Iterable[ItemId] | None) -> tuple[ItemId, ...]:
    unique: list[ItemId] = []
    for item_id in ids or ():
        if not contains_id(unique, item_id):
            unique.append(item_id)
    return tuple(unique)


def plan_save(
    ticket: Ticket | None,
    planner: Planner | None,
    title: str | None,
    description: str | None = "",
    attraction_ids: Iterable[ItemId] | None = (),
    show_ids: Iterable[ItemId] | None = (),
    service_ids: Iterable[ItemId] | None = (),
) -> PlannerMutation:
    """Decide how an edited planner is saved: created when `planner` is None, else replaced.

    The planner's day always follows the ticket.

    Raises:
        NoTicketSelectedError: If no ticket is selected.
        MissingTitleError: If the title is blank.
        PlannerMismatchError: If `planner` belongs to another ticket.
    """
    if ticket is None:
        raise NoTicketSelectedError()
    if not (title or "").strip():
        raise MissingTitleError()
    if planner is not None and not same_id(planner.ticket_id, ticket.id):
        raise PlannerMismatchError(planner.id)

    payload = PlannerPayload(
        ticket_id=ticket.id,
        user_id=ticket.user_id,
        title=title.strip(),
        description=description or "",
        date=to_date_key(ticket.valid_for),
        attraction_ids=_unique(attraction_ids),
        show_ids=_unique(show_ids),
        service_ids=_unique(service_ids),
    )
    if planner is None:
        return PlannerMutation(op=MutationOp.CREATE, payload=payload)
    return PlannerMutation(op=MutationOp.UPDATE, payload=payload, planner_id=planner.id)
