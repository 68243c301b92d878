"""Venue, event-type and area setup.

Services:
- Depend only on the store interface
- Validate input through the domain validators
- Check uniqueness against the store and map conflicts to AlreadyExistsError
- Return Result values; store failures pass through untouched
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.enums import ZoneType
from venue_ops.core.errors import AlreadyExistsError, NotFoundError, ValidationError
from venue_ops.core.interfaces import IStore
from venue_ops.core.models import AreaTemplate, EventType, Venue
from venue_ops.core.result import Failure, Result, Success
from venue_ops.validation.domain import (
    validate_area_template_input,
    validate_event_type_input,
    validate_venue_input,
)
from venue_ops.validation.failures import ValidationFailure

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


class SetupService:
    """Create and edit venues, event types and area templates."""

    def __init__(self, store: IStore, clock: IClock = DEFAULT_CLOCK) -> None:
        self._store = store
        self._clock = clock

    # ------------------------------------------------------------------
    # Venues
    # ------------------------------------------------------------------

    def create_venue(
        self,
        name: str,
        location: str,
        code: str,
        *,
        contact_person: str = "",
        contact_email: str | None = None,
        contact_phone: str | None = None,
        color: str = "#6200EE",
    ) -> Result[Venue]:
        code = code.strip().upper()
        check = validate_venue_input(name, location, code, contact_email, contact_phone)
        if isinstance(check, Failure):
            return check
        if self._store.exists(Venue, lambda v: v.code == code):
            logger.info("Venue code already taken: %s", code)
            return Failure(AlreadyExistsError("Venue", "code", code))

        now = self._clock.now()
        venue = Venue(
            name=name.strip(),
            location=location.strip(),
            code=code,
            color=color,
            contact_person=contact_person,
            contact_email=contact_email or "",
            contact_phone=contact_phone or "",
            created_at=now,
            updated_at=now,
        )
        return self._store.save(venue).map(lambda _: venue)

    def update_venue(self, venue_id: str, **changes) -> Result[Venue]:
        """Apply field changes to a venue, re-validating the result."""
        venue = self._store.get(Venue, venue_id)
        if venue is None:
            return Failure(NotFoundError("Venue", venue_id))

        rebuilt = _with_changes(venue, changes)
        if isinstance(rebuilt, Failure):
            return rebuilt
        updated = rebuilt.value
        check = validate_venue_input(
            updated.name,
            updated.location,
            updated.code,
            updated.contact_email,
            updated.contact_phone,
        )
        if isinstance(check, Failure):
            return check
        if self._store.exists(
            Venue, lambda v: v.code == updated.code and v.id != venue_id
        ):
            return Failure(AlreadyExistsError("Venue", "code", updated.code))

        updated.updated_at = self._clock.now()
        return self._store.save(updated).map(lambda _: updated)

    # ------------------------------------------------------------------
    # Event types
    # ------------------------------------------------------------------

    def create_event_type(
        self,
        name: str,
        day_type: str,
        time: str,
        description: str = "",
    ) -> Result[EventType]:
        name = name.strip()
        check = validate_event_type_input(name, day_type, time, description)
        if isinstance(check, Failure):
            return check
        if self._store.exists(EventType, lambda t: t.name == name):
            return Failure(AlreadyExistsError("EventType", "name", name))

        now = self._clock.now()
        event_type = EventType(
            name=name,
            day_type=day_type.strip(),
            time=time.strip(),
            description=description,
            display_order=len(self._store.query(EventType)),
            created_at=now,
            updated_at=now,
        )
        return self._store.save(event_type).map(lambda _: event_type)

    # ------------------------------------------------------------------
    # Areas
    # ------------------------------------------------------------------

    def list_areas(self, venue_id: str, *, active_only: bool = False) -> list[AreaTemplate]:
        """Areas of a venue in display order."""
        return self._store.query(
            AreaTemplate,
            lambda a: a.venue_id == venue_id and (a.is_active or not active_only),
            sort_key=lambda a: a.display_order,
        )

    def add_area(
        self,
        venue_id: str,
        name: str,
        capacity: int,
        *,
        zone_type: ZoneType = ZoneType.GENERAL_ADMISSION,
        notes: str = "",
    ) -> Result[AreaTemplate]:
        if self._store.get(Venue, venue_id) is None:
            return Failure(NotFoundError("Venue", venue_id))
        check = validate_area_template_input(name, capacity, notes)
        if isinstance(check, Failure):
            return check

        now = self._clock.now()
        area = AreaTemplate(
            venue_id=venue_id,
            name=name.strip(),
            zone_type=zone_type,
            capacity=capacity,
            display_order=len(self.list_areas(venue_id)),
            notes=notes,
            created_at=now,
            updated_at=now,
        )
        return self._store.save(area).map(lambda _: area)

    def update_area(self, area_id: str, **changes) -> Result[AreaTemplate]:
        """Edit a template. Past events keep their capacity snapshots."""
        area = self._store.get(AreaTemplate, area_id)
        if area is None:
            return Failure(NotFoundError("AreaTemplate", area_id))
        rebuilt = _with_changes(area, changes)
        if isinstance(rebuilt, Failure):
            return rebuilt
        updated = rebuilt.value
        check = validate_area_template_input(updated.name, updated.capacity, updated.notes)
        if isinstance(check, Failure):
            return check
        updated.updated_at = self._clock.now()
        return self._store.save(updated).map(lambda _: updated)

    def move_area(
        self, venue_id: str, from_index: int, to_index: int
    ) -> Result[list[AreaTemplate]]:
        """Move one area within the display order and renumber 0..n-1."""
        areas = self.list_areas(venue_id)
        if not (0 <= from_index < len(areas)) or not (0 <= to_index < len(areas)):
            return Failure(
                ValidationError(
                    [
                        ValidationFailure.invalid_range(
                            "Display order", 0, max(len(areas) - 1, 0)
                        )
                    ]
                )
            )
        areas.insert(to_index, areas.pop(from_index))
        return self._renumber(areas)

    def delete_area(self, venue_id: str, area_id: str) -> Result[list[AreaTemplate]]:
        """Delete a template; historical counts keep their numbers."""
        area = self._store.get(AreaTemplate, area_id)
        if area is None or area.venue_id != venue_id:
            return Failure(NotFoundError("AreaTemplate", area_id))
        deleted = self._store.delete(AreaTemplate, area_id)
        if isinstance(deleted, Failure):
            return deleted
        return self._renumber(self.list_areas(venue_id))

    def _renumber(self, areas: list[AreaTemplate]) -> Result[list[AreaTemplate]]:
        now = self._clock.now()
        for index, area in enumerate(areas):
            if area.display_order == index:
                continue
            area.display_order = index
            area.updated_at = now
            saved = self._store.save(area)
            if isinstance(saved, Failure):
                return saved
        return Success(areas)


def _with_changes(entity: _M, changes: dict[str, Any]) -> Result[_M]:
    """Rebuild ``entity`` with ``changes`` applied, running field validation."""
    unknown = sorted(set(changes) - set(type(entity).model_fields))
    if unknown:
        return Failure(
            ValidationError(
                [ValidationFailure.custom(name, "is not an editable field") for name in unknown]
            )
        )
    try:
        return Success(type(entity).model_validate({**entity.model_dump(), **changes}))
    except PydanticValidationError as exc:
        return Failure(
            ValidationError(
                [
                    ValidationFailure.custom(
                        ".".join(str(part) for part in err["loc"]), err["msg"]
                    )
                    for err in exc.errors()
                ]
            )
        )
