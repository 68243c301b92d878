"""Event start, reopening and attendance reporting.

An event and its area counts are created together: one ``AreaCount`` per
active area template, with the template's capacity copied at that moment.
Later capacity edits on the template never touch past events.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.config import Settings
from venue_ops.core.errors import NotFoundError, ValidationError
from venue_ops.core.ids import as_utc
from venue_ops.core.interfaces import IStore
from venue_ops.core.models import AreaCount, AreaTemplate, Event, EventType, Venue
from venue_ops.core.result import Failure, Result, Success
from venue_ops.tally.engine import TallyEngine
from venue_ops.validation.domain import validate_event_input, validate_report_date_range
from venue_ops.validation.failures import ValidationFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AttendanceSummary:
    """Aggregate over the events of a report range."""

    event_count: int
    total_attendance: int
    average_attendance: float


class CountingService:
    """Start and reopen counting sessions; report on past events."""

    def __init__(
        self,
        store: IStore,
        clock: IClock = DEFAULT_CLOCK,
        settings: Settings | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._settings = settings or Settings()

    # ------------------------------------------------------------------
    # Sessions
    # ------------------------------------------------------------------

    def start_event(
        self,
        venue_id: str,
        counted_by: str,
        *,
        event_type_id: str | None = None,
        event_name: str | None = None,
        notes: str = "",
        date: datetime | None = None,
        counted_by_user_id: str = "",
    ) -> Result[TallyEngine]:
        """Create an event with its area counts and return an engine on it."""
        venue = self._store.get(Venue, venue_id)
        if venue is None:
            return Failure(NotFoundError("Venue", venue_id))
        if not venue.is_head_count_enabled:
            return Failure(
                ValidationError(
                    [ValidationFailure.custom("Venue", "head counting is disabled")]
                )
            )

        event_type = None
        if event_type_id is not None:
            event_type = self._store.get(EventType, event_type_id)
            if event_type is None:
                return Failure(NotFoundError("EventType", event_type_id))

        when = date or self._clock.now()
        check = validate_event_input(
            venue_id,
            event_type_id,
            when,
            counted_by,
            event_name=event_name,
            notes=notes,
            clock=self._clock,
        )
        if isinstance(check, Failure):
            return check

        now = self._clock.now()
        event = Event(
            venue_id=venue_id,
            event_type_id=event_type_id,
            date=when,
            event_name=event_name or (event_type.name if event_type else "Event"),
            counted_by=counted_by.strip(),
            counted_by_user_id=counted_by_user_id,
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        areas = self._store.query(
            AreaTemplate,
            lambda a: a.venue_id == venue_id and a.is_active,
            sort_key=lambda a: a.display_order,
        )
        counts = [
            AreaCount(
                event_id=event.id,
                area_template_id=area.id,
                area_name=area.name,
                capacity=area.capacity,
                created_at=now,
                updated_at=now,
            )
            for area in areas
        ]

        engine = TallyEngine(
            event,
            counts,
            store=self._store,
            clock=self._clock,
            config=self._settings.tally,
        )
        saved = self._store.save(event)
        if isinstance(saved, Failure):
            return saved
        for ac in counts:
            saved = self._store.save(ac)
            if isinstance(saved, Failure):
                # Deleting the event cascades to the counts saved so far
                self._store.delete(Event, event.id)
                logger.warning(
                    "Event start rolled back: event=%s venue=%s", event.id, venue.code
                )
                return saved

        logger.info(
            "Event started: event=%s venue=%s areas=%d capacity=%d",
            event.id,
            venue.code,
            len(counts),
            event.total_capacity,
        )
        return Success(engine)

    def open_event(self, event_id: str) -> Result[TallyEngine]:
        """Load an existing event (locked or not) into a fresh engine."""
        event = self._store.get(Event, event_id)
        if event is None:
            return Failure(NotFoundError("Event", event_id))
        counts = self._store.query(AreaCount, lambda c: c.event_id == event_id)
        return Success(
            TallyEngine(
                event,
                counts,
                store=self._store,
                clock=self._clock,
                config=self._settings.tally,
            )
        )

    def delete_event(self, event_id: str) -> Result[None]:
        """Delete an event and its area counts."""
        return self._store.delete(Event, event_id)

    # ------------------------------------------------------------------
    # Reports
    # ------------------------------------------------------------------

    def events_in_range(
        self, venue_id: str, start: datetime, end: datetime
    ) -> Result[list[Event]]:
        """Events of a venue within [start, end], newest first."""
        start, end = as_utc(start), as_utc(end)
        check = validate_report_date_range(
            start,
            end,
            clock=self._clock,
            max_range_days=self._settings.reports.max_range_days,
        )
        if isinstance(check, Failure):
            return check
        return Success(
            self._store.query(
                Event,
                lambda e: e.venue_id == venue_id and start <= e.date <= end,
                sort_key=lambda e: e.date,
                reverse=True,
            )
        )

    def summarize(
        self, venue_id: str, start: datetime, end: datetime
    ) -> Result[AttendanceSummary]:
        return self.events_in_range(venue_id, start, end).map(_summarize)


def _summarize(events: list[Event]) -> AttendanceSummary:
    total = sum(e.total_attendance for e in events)
    return AttendanceSummary(
        event_count=len(events),
        total_attendance=total,
        average_attendance=total / len(events) if events else 0.0,
    )
