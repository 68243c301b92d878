"""Core domain entities.

Plain pydantic models. Relationships are foreign-key id fields resolved
through the store, never live object references. Sync fields
(``is_synced_to_cloud``, ``cloud_id``) are carried opaquely.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, BaseModel, Field, field_validator

from .enums import IncidentSeverity, IncidentStatus, ItemCategory, ItemStatus, ZoneType
from .ids import new_id as _uuid
from .ids import as_utc
from .ids import utc_now as _now

# Naive datetimes are taken to be UTC
UtcDatetime = Annotated[datetime, AfterValidator(as_utc)]


class Entity(BaseModel):
    """Identity, audit timestamps and opaque sync bookkeeping."""

    id: str = Field(default_factory=_uuid)
    created_at: UtcDatetime = Field(default_factory=_now)
    updated_at: UtcDatetime = Field(default_factory=_now)

    is_synced_to_cloud: bool = False
    cloud_id: str | None = None

    model_config = {"validate_assignment": True}


# ---------------------------------------------------------------------------
# Setup entities
# ---------------------------------------------------------------------------

class Venue(Entity):
    name: str
    location: str
    code: str  # Unique, always uppercase
    color: str = "#6200EE"
    contact_person: str = ""
    contact_phone: str = ""
    contact_email: str = ""
    is_active: bool = True

    # Feature toggles
    is_head_count_enabled: bool = True
    is_lost_and_found_enabled: bool = True
    is_incident_reporting_enabled: bool = True

    @field_validator("code")
    @classmethod
    def _uppercase_code(cls, v: str) -> str:
        return v.strip().upper()


class EventType(Entity):
    name: str  # Unique
    day_type: str = ""  # e.g. "Sunday"
    time: str = ""  # e.g. "9:00 AM"
    description: str = ""
    display_order: int = 0
    is_active: bool = True


class AreaTemplate(Entity):
    venue_id: str
    name: str
    zone_type: ZoneType = ZoneType.GENERAL_ADMISSION
    capacity: int = 0
    display_order: int = 0
    notes: str = ""
    is_active: bool = True


# ---------------------------------------------------------------------------
# Counting
# ---------------------------------------------------------------------------

class Event(Entity):
    venue_id: str
    event_type_id: str | None = None
    date: UtcDatetime = Field(default_factory=_now)
    event_name: str = ""
    counted_by: str = ""
    counted_by_user_id: str = ""
    is_locked: bool = False
    notes: str = ""
    weather: str = ""

    # Derived from the event's AreaCounts; rewritten by the tally engine
    total_attendance: int = 0
    total_capacity: int = 0


class AreaCount(Entity):
    """Live tally for one area within one event."""

    event_id: str
    area_template_id: str | None = None  # Weak: nulled when template deleted
    area_name: str = ""
    count: int = Field(default=0, ge=0)
    capacity: int = 0  # Snapshot from template at event creation
    history: list[int] = Field(default_factory=list)  # Append-only
    notes: str = ""


# ---------------------------------------------------------------------------
# Lost & found
# ---------------------------------------------------------------------------

class LostItem(Entity):
    venue_id: str
    event_id: str | None = None
    description: str
    category: ItemCategory = ItemCategory.OTHER
    found_zone: str = ""
    found_date: UtcDatetime = Field(default_factory=_now)
    photo_uri: str = ""
    color: str = ""
    brand: str = ""
    identifying_marks: str = ""
    reported_by: str = ""
    notes: str = ""

    status: ItemStatus = ItemStatus.PENDING
    # Set only while status == CLAIMED
    claimed_by: str = ""
    claimer_contact: str = ""
    verification_notes: str = ""
    claimed_date: UtcDatetime | None = None


# ---------------------------------------------------------------------------
# Incidents
# ---------------------------------------------------------------------------

class Incident(Entity):
    venue_id: str
    event_id: str | None = None
    title: str
    description: str
    severity: IncidentSeverity = IncidentSeverity.LOW
    status: IncidentStatus = IncidentStatus.REPORTED
    category: str = ""
    location: str = ""
    photo_uri: str = ""
    reported_by: str = ""
    assigned_to: str = ""
    reported_at: UtcDatetime = Field(default_factory=_now)
    resolved_at: UtcDatetime | None = None  # Stamped once, never cleared
    notes: str = ""
    actions_taken: str = ""
