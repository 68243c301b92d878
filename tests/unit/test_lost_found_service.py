"""Test LostAndFoundService: intake, disposition and queries."""

from datetime import timedelta

import pytest

from venue_ops.core.config import Settings
from venue_ops.core.enums import ItemCategory, ItemStatus
from venue_ops.core.errors import NotFoundError, ValidationError
from venue_ops.core.models import LostItem
from venue_ops.services import LostAndFoundService


@pytest.fixture
def umbrella(lost_found_service, fixed_clock, venue) -> LostItem:
    return lost_found_service.log_item(
        venue.id,
        "Blue umbrella",
        "Lobby",
        color="Blue",
        found_date=fixed_clock.now() - timedelta(days=200),
    ).unwrap()


@pytest.fixture
def phone(lost_found_service, fixed_clock, venue) -> LostItem:
    return lost_found_service.log_item(
        venue.id,
        "Black phone",
        "Balcony",
        category=ItemCategory.ELECTRONICS,
        found_date=fixed_clock.now() - timedelta(days=10),
    ).unwrap()


class TestLogItem:
    def test_defaults(self, lost_found_service, store, fixed_clock, venue):
        item = lost_found_service.log_item(venue.id, " Hat ", "Lobby").unwrap()
        assert item.description == "Hat"
        assert item.status == ItemStatus.PENDING
        assert item.category == ItemCategory.OTHER
        assert item.found_date == fixed_clock.now()
        assert store.get(LostItem, item.id) == item

    def test_validation(self, lost_found_service, venue):
        result = lost_found_service.log_item(venue.id, "", "")
        assert len(result.error.failures) == 2

    def test_unknown_venue(self, lost_found_service):
        assert isinstance(lost_found_service.log_item("nope", "Hat", "Lobby").error, NotFoundError)

    def test_unknown_event(self, lost_found_service, venue):
        result = lost_found_service.log_item(venue.id, "Hat", "Lobby", event_id="nope")
        assert result.error == NotFoundError("Event", "nope")

    def test_disabled(self, lost_found_service, setup_service, venue):
        setup_service.update_venue(venue.id, is_lost_and_found_enabled=False).unwrap()
        result = lost_found_service.log_item(venue.id, "Hat", "Lobby")
        assert result.error.message == "Venue: lost & found is disabled"


class TestDisposition:
    def test_claim_and_release(self, lost_found_service, store, phone):
        claimed = lost_found_service.claim(phone.id, "Jordan", "555-1234").unwrap()
        assert store.get(LostItem, phone.id).claimed_by == "Jordan"
        assert claimed.status == ItemStatus.CLAIMED

        released = lost_found_service.release_claim(phone.id).unwrap()
        assert released.status == ItemStatus.PENDING
        assert store.get(LostItem, phone.id).claimed_by == ""

    def test_claim_without_name(self, lost_found_service, store, phone):
        result = lost_found_service.claim(phone.id, "")
        assert isinstance(result.error, ValidationError)
        assert store.get(LostItem, phone.id).status == ItemStatus.PENDING

    def test_donate_respects_hold(self, lost_found_service, umbrella, phone):
        assert lost_found_service.donate(umbrella.id).unwrap().status == ItemStatus.DONATED
        assert lost_found_service.donate(phone.id).is_failure

    def test_dispose(self, lost_found_service, phone):
        assert lost_found_service.dispose(phone.id).unwrap().status == ItemStatus.DISPOSED

    def test_unknown_item(self, lost_found_service):
        assert lost_found_service.dispose("nope").error == NotFoundError("LostItem", "nope")

    def test_custom_hold_period(self, store, fixed_clock, venue, phone):
        service = LostAndFoundService(
            store, fixed_clock, Settings(lost_and_found={"donation_hold_days": 7})
        )
        assert service.donate(phone.id).is_success


class TestQueries:
    def test_list_newest_found_first(self, lost_found_service, venue, umbrella, phone):
        items = lost_found_service.list_items(venue.id)
        assert [i.id for i in items] == [phone.id, umbrella.id]

    def test_list_by_status(self, lost_found_service, venue, umbrella, phone):
        lost_found_service.dispose(umbrella.id)
        pending = lost_found_service.list_items(venue.id, status=ItemStatus.PENDING)
        assert [i.id for i in pending] == [phone.id]

    def test_search(self, lost_found_service, venue, umbrella, phone):
        assert [i.id for i in lost_found_service.list_items(venue.id, search="blue")] == [umbrella.id]
        assert [i.id for i in lost_found_service.list_items(venue.id, search="BALCONY")] == [phone.id]

    def test_donation_due(self, lost_found_service, venue, umbrella, phone):
        assert [i.id for i in lost_found_service.donation_due(venue.id)] == [umbrella.id]
