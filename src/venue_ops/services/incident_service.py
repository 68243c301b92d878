"""Incident reporting and resolution tracking."""

from __future__ import annotations

import logging
from datetime import datetime

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.enums import IncidentSeverity, IncidentStatus
from venue_ops.core.errors import NotFoundError, ValidationError
from venue_ops.core.interfaces import IStore
from venue_ops.core.models import Event, Incident, Venue
from venue_ops.core.result import Failure, Result
from venue_ops.lifecycle import incidents
from venue_ops.validation.domain import validate_incident_input
from venue_ops.validation.failures import ValidationFailure

logger = logging.getLogger(__name__)


class IncidentService:
    def __init__(self, store: IStore, clock: IClock = DEFAULT_CLOCK) -> None:
        self._store = store
        self._clock = clock

    def report(
        self,
        venue_id: str,
        title: str,
        description: str,
        location: str,
        *,
        severity: IncidentSeverity = IncidentSeverity.LOW,
        status: IncidentStatus = IncidentStatus.REPORTED,
        category: str = "",
        reported_by: str = "",
        assigned_to: str = "",
        event_id: str | None = None,
        notes: str = "",
        actions_taken: str = "",
        reported_at: datetime | None = None,
    ) -> Result[Incident]:
        venue = self._store.get(Venue, venue_id)
        if venue is None:
            return Failure(NotFoundError("Venue", venue_id))
        if not venue.is_incident_reporting_enabled:
            return Failure(
                ValidationError(
                    [ValidationFailure.custom("Venue", "incident reporting is disabled")]
                )
            )
        if event_id is not None and self._store.get(Event, event_id) is None:
            return Failure(NotFoundError("Event", event_id))

        check = validate_incident_input(title, description, location, notes)
        if isinstance(check, Failure):
            return check

        now = self._clock.now()
        incident = incidents.stamp_resolution(
            Incident(
                venue_id=venue_id,
                event_id=event_id,
                title=title.strip(),
                description=description.strip(),
                severity=severity,
                status=status,
                category=category,
                location=location.strip(),
                reported_by=reported_by,
                assigned_to=assigned_to,
                reported_at=reported_at or now,
                notes=notes,
                actions_taken=actions_taken,
                created_at=now,
                updated_at=now,
            ),
            self._clock,
        )
        if incident.severity == IncidentSeverity.CRITICAL:
            logger.warning(
                "Critical incident reported: venue=%s incident=%s title=%r",
                venue.code,
                incident.id,
                incident.title,
            )
        return self._store.save(incident).map(lambda _: incident)

    def update_status(self, incident_id: str, status: IncidentStatus) -> Result[Incident]:
        incident = self._store.get(Incident, incident_id)
        if incident is None:
            return Failure(NotFoundError("Incident", incident_id))
        moved = incidents.transition(incident, status, self._clock)
        if isinstance(moved, Failure):
            return moved
        updated = moved.value
        return self._store.save(updated).map(lambda _: updated)

    def list_incidents(
        self,
        venue_id: str,
        *,
        severity: IncidentSeverity | None = None,
        status: IncidentStatus | None = None,
        search: str = "",
    ) -> list[Incident]:
        """Incidents of a venue, most recently reported first."""
        needle = search.strip().lower()

        def matches(incident: Incident) -> bool:
            if incident.venue_id != venue_id:
                return False
            if severity is not None and incident.severity != severity:
                return False
            if status is not None and incident.status != status:
                return False
            if needle:
                haystack = " ".join(
                    (incident.title, incident.description, incident.location)
                ).lower()
                return needle in haystack
            return True

        return self._store.query(
            Incident, matches, sort_key=lambda i: i.reported_at, reverse=True
        )

    def open_incidents(self, venue_id: str) -> list[Incident]:
        return [i for i in self.list_incidents(venue_id) if incidents.is_open(i)]
