"""Lost & found: intake, disposition and the donation queue."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.config import Settings
from venue_ops.core.enums import ItemCategory, ItemStatus
from venue_ops.core.errors import NotFoundError, ValidationError
from venue_ops.core.interfaces import IStore
from venue_ops.core.models import Event, LostItem, Venue
from venue_ops.core.result import Failure, Result
from venue_ops.lifecycle import lost_items
from venue_ops.validation.domain import validate_lost_item_input
from venue_ops.validation.failures import ValidationFailure

logger = logging.getLogger(__name__)


class LostAndFoundService:
    def __init__(
        self,
        store: IStore,
        clock: IClock = DEFAULT_CLOCK,
        settings: Settings | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._hold_days = (settings or Settings()).lost_and_found.donation_hold_days

    def log_item(
        self,
        venue_id: str,
        description: str,
        found_zone: str,
        *,
        category: ItemCategory = ItemCategory.OTHER,
        found_date: datetime | None = None,
        event_id: str | None = None,
        color: str = "",
        brand: str = "",
        identifying_marks: str = "",
        reported_by: str = "",
        notes: str = "",
    ) -> Result[LostItem]:
        venue = self._store.get(Venue, venue_id)
        if venue is None:
            return Failure(NotFoundError("Venue", venue_id))
        if not venue.is_lost_and_found_enabled:
            return Failure(
                ValidationError(
                    [ValidationFailure.custom("Venue", "lost & found is disabled")]
                )
            )
        if event_id is not None and self._store.get(Event, event_id) is None:
            return Failure(NotFoundError("Event", event_id))

        check = validate_lost_item_input(description, found_zone, notes)
        if isinstance(check, Failure):
            return check

        now = self._clock.now()
        item = LostItem(
            venue_id=venue_id,
            event_id=event_id,
            description=description.strip(),
            category=category,
            found_zone=found_zone.strip(),
            found_date=found_date or now,
            color=color,
            brand=brand,
            identifying_marks=identifying_marks,
            reported_by=reported_by,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        return self._store.save(item).map(lambda _: item)

    # ------------------------------------------------------------------
    # Disposition
    # ------------------------------------------------------------------

    def claim(
        self,
        item_id: str,
        claimed_by: str,
        claimer_contact: str = "",
        verification_notes: str = "",
    ) -> Result[LostItem]:
        return self._apply(
            item_id,
            lambda item: lost_items.claim(
                item, claimed_by, claimer_contact, verification_notes, self._clock
            ),
        )

    def release_claim(self, item_id: str) -> Result[LostItem]:
        return self._apply(item_id, lambda item: lost_items.release_claim(item, self._clock))

    def donate(self, item_id: str) -> Result[LostItem]:
        return self._apply(
            item_id, lambda item: lost_items.donate(item, self._clock, self._hold_days)
        )

    def dispose(self, item_id: str) -> Result[LostItem]:
        return self._apply(item_id, lambda item: lost_items.dispose(item, self._clock))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def list_items(
        self,
        venue_id: str,
        *,
        status: ItemStatus | None = None,
        search: str = "",
    ) -> list[LostItem]:
        """Items of a venue, most recently found first."""
        needle = search.strip().lower()

        def matches(item: LostItem) -> bool:
            if item.venue_id != venue_id:
                return False
            if status is not None and item.status != status:
                return False
            if needle:
                haystack = " ".join(
                    (item.description, item.found_zone, item.color, item.brand)
                ).lower()
                return needle in haystack
            return True

        return self._store.query(
            LostItem, matches, sort_key=lambda i: i.found_date, reverse=True
        )

    def donation_due(self, venue_id: str) -> list[LostItem]:
        """Pending items whose hold period has elapsed, oldest first."""
        return self._store.query(
            LostItem,
            lambda i: i.venue_id == venue_id
            and lost_items.can_be_donated(i, self._clock, self._hold_days),
            sort_key=lambda i: i.found_date,
        )

    def _apply(
        self, item_id: str, step: Callable[[LostItem], Result[LostItem]]
    ) -> Result[LostItem]:
        item = self._store.get(LostItem, item_id)
        if item is None:
            return Failure(NotFoundError("LostItem", item_id))
        moved = step(item)
        if isinstance(moved, Failure):
            return moved
        updated = moved.value
        if updated.status != item.status:
            logger.info(
                "Lost item %s: %s -> %s",
                item.id,
                item.status.value,
                updated.status.value,
            )
        return self._store.save(updated).map(lambda _: updated)
