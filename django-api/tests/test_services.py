"""Unit tests for PlannerService and BookingService.

These run against the in-memory store and check that rejected requests
never reach a store write.
Run with: pytest tests/test_services.py -v
"""

import logging
from datetime import date, datetime, timezone

import pytest

from planning.domain import ItemKind, MutationOp, PlannerDraft, PlannerMode, TicketStatus
from planning.domain.errors import (
    BookingDateMismatchError,
    BookingNotFoundError,
    DuplicateItemError,
    ItemNotFoundError,
    NoTicketSelectedError,
    PlannerNotFoundError,
    ServiceNotBookableError,
    TicketNotEligibleError,
    TicketNotFoundError,
)

USER_ID = 9


class TestPlannerServiceQueries:
    def test_eligible_tickets(self, store, planner_service, make_ticket):
        active = make_ticket(ticket_id=1)
        other_day = make_ticket(ticket_id=2, valid_for="2025-06-19T00:00:00Z")
        store.tickets.extend([active, other_day])

        assert planner_service.eligible_tickets(USER_ID, ItemKind.SHOW, 7) == [active]

    def test_eligible_tickets_for_unknown_item(self, planner_service):
        with pytest.raises(ItemNotFoundError):
            planner_service.eligible_tickets(USER_ID, ItemKind.SHOW, 999)

    def test_tickets_of_other_users_are_ignored(self, store, planner_service, make_ticket):
        store.tickets.append(make_ticket(user_id=77))
        assert planner_service.eligible_tickets(USER_ID, ItemKind.SHOW, 7) == []

    def test_candidate_planners(self, store, planner_service, make_ticket, make_planner):
        store.tickets.append(make_ticket())
        matching = make_planner(planner_id=50)
        store.planners[50] = matching
        store.planners[51] = make_planner(planner_id=51, date="2025-06-19")

        assert planner_service.candidate_planners(USER_ID, 1) == [matching]

    def test_candidate_planners_unknown_ticket(self, planner_service):
        with pytest.raises(TicketNotFoundError):
            planner_service.candidate_planners(USER_ID, 1)

    def test_available_items(self, store, planner_service, make_ticket, laser_show, coaster):
        store.tickets.append(make_ticket())
        items = planner_service.available_items(USER_ID, 1)
        assert items.shows == (laser_show,)
        assert items.attractions == (coaster,)


class TestAddItem:
    def test_new_planner(self, store, planner_service, make_ticket, caplog):
        store.tickets.append(make_ticket())
        draft = PlannerDraft(selected_ticket_id=1, mode=PlannerMode.NEW, title="Evening")

        with caplog.at_level(logging.INFO, logger="planning"):
            result = planner_service.add_item(USER_ID, ItemKind.SHOW, 7, draft)

        assert result.op is MutationOp.CREATE
        assert result.planner.title == "Evening"
        assert result.planner.show_ids == (7,)
        assert result.draft == PlannerDraft()
        assert [w[0] for w in store.writes] == ["create_planner"]
        assert "CREATE planner" in caplog.text

    def test_existing_planner(self, store, planner_service, make_ticket, make_planner):
        store.tickets.append(make_ticket(status=TicketStatus.USED))
        store.planners[50] = make_planner(show_ids=(7,))
        draft = PlannerDraft(selected_ticket_id=1, mode=PlannerMode.EXISTING, chosen_planner_id=50)

        result = planner_service.add_item(USER_ID, ItemKind.ATTRACTION, 3, draft)

        assert result.op is MutationOp.UPDATE
        assert result.planner.id == 50
        assert result.planner.attraction_ids == (3,)
        assert result.planner.show_ids == (7,)
        assert store.writes[0][:2] == ("update_planner", 50)

    def test_duplicate_is_logged_and_not_written(self, store, planner_service, make_ticket, make_planner, caplog):
        store.tickets.append(make_ticket())
        store.planners[50] = make_planner(show_ids=(7,))
        draft = PlannerDraft(selected_ticket_id=1, mode=PlannerMode.EXISTING, chosen_planner_id=50)

        with caplog.at_level(logging.WARNING, logger="planning"):
            with pytest.raises(DuplicateItemError):
                planner_service.add_item(USER_ID, ItemKind.SHOW, 7, draft)

        assert store.writes == []
        assert "DUPLICATE_ITEM" in caplog.text

    def test_no_ticket_selected(self, store, planner_service):
        with pytest.raises(NoTicketSelectedError):
            planner_service.add_item(USER_ID, ItemKind.SHOW, 7, PlannerDraft())
        assert store.writes == []

    def test_ineligible_ticket(self, store, planner_service, make_ticket):
        # attractions need a ticket already used at the gate
        store.tickets.append(make_ticket(status=TicketStatus.ACTIVE))
        with pytest.raises(TicketNotEligibleError):
            planner_service.add_item(USER_ID, ItemKind.ATTRACTION, 3, PlannerDraft(selected_ticket_id=1))
        assert store.writes == []

    def test_unknown_item(self, store, planner_service, make_ticket):
        store.tickets.append(make_ticket())
        with pytest.raises(ItemNotFoundError):
            planner_service.add_item(USER_ID, ItemKind.SERVICE, 999, PlannerDraft(selected_ticket_id=1))


class TestSavePlanner:
    def test_create(self, store, planner_service, make_ticket):
        store.tickets.append(make_ticket())
        planner = planner_service.save_planner(USER_ID, 1, None, "Day out", "", [], [7], [11])

        assert planner.date == "2025-06-18"
        assert planner.service_ids == (11,)
        assert store.writes[0][0] == "create_planner"

    def test_replace(self, store, planner_service, make_ticket, make_planner):
        store.tickets.append(make_ticket())
        store.planners[50] = make_planner(show_ids=(7,))

        planner = planner_service.save_planner(USER_ID, 1, 50, "Renamed")

        assert planner.title == "Renamed"
        assert planner.show_ids == ()

    def test_unknown_planner(self, store, planner_service, make_ticket):
        store.tickets.append(make_ticket())
        with pytest.raises(PlannerNotFoundError):
            planner_service.save_planner(USER_ID, 1, 50, "Renamed")

    def test_item_outside_ticket(self, store, planner_service, make_ticket):
        store.tickets.append(make_ticket(valid_for="2025-06-19T00:00:00Z"))
        with pytest.raises(TicketNotEligibleError):
            planner_service.save_planner(USER_ID, 1, None, "Day out", show_ids=[7])
        assert store.writes == []

    def test_requires_ticket(self, planner_service):
        with pytest.raises(NoTicketSelectedError):
            planner_service.save_planner(USER_ID, None, None, "Day out")


class TestBookingService:
    def test_book_without_ticket(self, store, booking_service):
        booking = booking_service.book_service(
            USER_ID, 11, None, "2025-06-20", "14:30", today=date(2025, 6, 1)
        )

        assert booking.id == 100
        assert booking.user_id == USER_ID
        assert booking.booking_time == datetime(2025, 6, 20, 14, 30, tzinfo=timezone.utc)
        assert [w[0] for w in store.writes] == ["create_service_booking"]

    def test_book_with_ticket(self, store, booking_service, make_ticket):
        store.tickets.append(make_ticket(status=TicketStatus.USED))
        booking = booking_service.book_service(USER_ID, 11, 1, "2025-06-18", "12:00", 3)
        assert booking.ticket_id == 1
        assert booking.number_of_people == 3

    def test_date_mismatch_is_not_written(self, store, booking_service, make_ticket, caplog):
        store.tickets.append(make_ticket())
        with caplog.at_level(logging.WARNING, logger="planning"):
            with pytest.raises(BookingDateMismatchError):
                booking_service.book_service(USER_ID, 11, 1, "2025-06-19", "12:00")
        assert store.writes == []
        assert "BOOKING_DATE_MISMATCH" in caplog.text

    def test_shop_is_not_bookable(self, booking_service):
        with pytest.raises(ServiceNotBookableError):
            booking_service.book_service(USER_ID, 12, None, "2025-06-20", "12:00")

    def test_expired_ticket(self, store, booking_service, make_ticket):
        store.tickets.append(make_ticket(status=TicketStatus.EXPIRED))
        with pytest.raises(TicketNotEligibleError):
            booking_service.book_service(USER_ID, 11, 1, "2025-06-18", "12:00")

    def test_unknown_ticket(self, booking_service):
        with pytest.raises(TicketNotFoundError):
            booking_service.book_service(USER_ID, 11, 1, "2025-06-18", "12:00")

    def test_list_bookings_newest_first(self, booking_service):
        first = booking_service.book_service(USER_ID, 11, None, "2025-06-20", "09:00")
        second = booking_service.book_service(USER_ID, 11, None, "2025-06-21", "09:00")
        assert booking_service.list_bookings(USER_ID) == [second, first]

    def test_update_booking(self, store, booking_service):
        booking = booking_service.book_service(USER_ID, 11, None, "2025-06-20", "09:00")

        updated = booking_service.update_booking(USER_ID, booking.id, "2025-06-21", "18:15", 4, "cake")

        assert updated.id == booking.id
        assert updated.service_id == 11
        assert updated.booking_time == datetime(2025, 6, 21, 18, 15, tzinfo=timezone.utc)
        assert updated.special_requests == "cake"
        assert store.writes[-1][:2] == ("update_service_booking", booking.id)

    def test_update_someone_elses_booking(self, booking_service):
        booking = booking_service.book_service(USER_ID, 11, None, "2025-06-20", "09:00")
        with pytest.raises(BookingNotFoundError):
            booking_service.update_booking(77, booking.id, "2025-06-21", "18:15")

    def test_update_unknown_booking(self, booking_service):
        with pytest.raises(BookingNotFoundError):
            booking_service.update_booking(USER_ID, 404, "2025-06-21", "18:15")

    def test_update_keeps_party_size_when_omitted(self, booking_service):
        booking = booking_service.book_service(USER_ID, 11, None, "2025-06-20", "09:00", 5)

        updated = booking_service.update_booking(USER_ID, booking.id, "2025-06-21", "10:00")

        assert updated.number_of_people == 5


class TestCancelBooking:
    def test_cancel(self, store, booking_service, caplog):
        booking = booking_service.book_service(USER_ID, 11, None, "2025-06-20", "09:00")

        with caplog.at_level(logging.INFO, logger="planning"):
            booking_service.cancel_booking(USER_ID, booking.id)

        assert booking_service.list_bookings(USER_ID) == []
        assert store.writes[-1] == ("delete_service_booking", booking.id)
        assert f"Cancelled booking {booking.id}" in caplog.text

    def test_cannot_cancel_someone_elses_booking(self, store, booking_service):
        booking = booking_service.book_service(USER_ID, 11, None, "2025-06-20", "09:00")

        with pytest.raises(BookingNotFoundError):
            booking_service.cancel_booking(77, booking.id)

        assert booking.id in store.bookings
        assert [w[0] for w in store.writes] == ["create_service_booking"]

    def test_cancel_unknown_booking(self, booking_service):
        with pytest.raises(BookingNotFoundError):
            booking_service.cancel_booking(USER_ID, 404)
