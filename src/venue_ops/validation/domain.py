"""Per-entity composite validators.

Each validator is a pure function from raw field values to
``Result[None]``: it lists the field rules for the entity, collects every
failure, and wraps them. Uniqueness (venue code, event-type name) needs the
store and is checked by the caller, not here.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.errors import LockedError
from venue_ops.core.ids import as_utc
from venue_ops.core.result import Failure, Result

from . import rules
from .failures import FailureKind, ValidationFailure

VENUE_CODE_PATTERN = r"^[A-Z0-9]{2,10}$"
TIME_PATTERN = r"^([0-1]?[0-9]|2[0-3]):[0-5][0-9](\s?(AM|PM|am|pm))?$"

MAX_AREA_CAPACITY = 10_000
MAX_ATTENDANCE = 99_999
MAX_REPORT_RANGE_DAYS = 365

CAPACITY_WARNING = "Count ({count}) exceeds capacity ({capacity})"
_CAPACITY_WARNING_RE = re.compile(r"Count \(-?\d+\) exceeds capacity \(-?\d+\)")


# ---------------------------------------------------------------------------
# Venue
# ---------------------------------------------------------------------------

def validate_venue_input(
    name: str,
    location: str,
    code: str,
    contact_email: str | None = None,
    contact_phone: str | None = None,
) -> Result[None]:
    return rules.validate(
        rules.not_empty(name, "Venue name"),
        rules.length_between(name, "Venue name", max_length=100),
        rules.not_empty(location, "Location"),
        rules.length_between(location, "Location", max_length=200),
        rules.not_empty(code, "Venue code"),
        rules.length_between(code, "Venue code", min_length=2, max_length=10),
        validate_venue_code(code),
        rules.email(contact_email, "Contact email") if contact_email is not None else None,
        rules.phone(contact_phone, "Contact phone") if contact_phone is not None else None,
    )


def validate_venue_code(code: str) -> ValidationFailure | None:
    """2-10 uppercase letters or digits, checked on the trimmed input."""
    return rules.matches_format(
        code,
        "Venue code",
        VENUE_CODE_PATTERN,
        "2-10 uppercase letters or numbers (e.g., MC, NV, DT)",
    )


# ---------------------------------------------------------------------------
# Event type
# ---------------------------------------------------------------------------

def validate_event_type_input(
    name: str,
    day_type: str,
    time: str,
    description: str | None = None,
) -> Result[None]:
    return rules.validate(
        rules.not_empty(name, "Event type name"),
        rules.length_between(name, "Event type name", max_length=100),
        rules.not_empty(day_type, "Day type"),
        rules.length_between(day_type, "Day type", max_length=50),
        rules.not_empty(time, "Time"),
        rules.length_between(time, "Time", max_length=20),
        validate_time_format(time),
        rules.length_between(description, "Description", max_length=500)
        if description is not None
        else None,
    )


def validate_time_format(time: str) -> ValidationFailure | None:
    """Accepts "9:00 AM", "09:00", "19:00"."""
    if not time.strip():
        return ValidationFailure.empty_string("Time")
    return rules.matches_format(
        time,
        "Time",
        TIME_PATTERN,
        "HH:MM or HH:MM AM/PM (e.g., 9:00 AM, 19:00)",
    )


# ---------------------------------------------------------------------------
# Area template
# ---------------------------------------------------------------------------

def validate_area_template_input(
    name: str,
    capacity: int,
    notes: str | None = None,
) -> Result[None]:
    return rules.validate(
        rules.not_empty(name, "Area name"),
        rules.length_between(name, "Area name", max_length=100),
        rules.positive(capacity, "Capacity"),
        rules.in_range(capacity, "Capacity", minimum=1, maximum=MAX_AREA_CAPACITY),
        rules.length_between(notes, "Notes", max_length=500) if notes is not None else None,
    )


# ---------------------------------------------------------------------------
# Event
# ---------------------------------------------------------------------------

def validate_event_input(
    venue_id: str,
    event_type_id: str | None,
    date: datetime,
    counted_by: str,
    event_name: str | None = None,
    notes: str | None = None,
    clock: IClock = DEFAULT_CLOCK,
) -> Result[None]:
    checks: list[ValidationFailure | None] = [
        rules.not_empty(venue_id, "Venue"),
        rules.not_future(date, "Event date", clock),
        rules.not_empty(counted_by, "Counter name"),
        rules.length_between(counted_by, "Counter name", max_length=100),
    ]
    if event_type_id is not None:
        checks.append(rules.not_empty(event_type_id, "Event type"))
    if event_name is not None:
        checks.append(rules.length_between(event_name, "Event name", max_length=100))
    if notes is not None:
        checks.append(rules.length_between(notes, "Notes", max_length=1000))

    return rules.to_result(rules.collect_errors(checks))


# ---------------------------------------------------------------------------
# Attendance
# ---------------------------------------------------------------------------

def validate_attendance_count(count: int, capacity: int) -> Result[None]:
    """Count bounds, plus an informational over-capacity failure.

    The over-capacity entry is a ``CUSTOM`` failure like any other; use
    ``is_capacity_warning`` to treat it as a warning instead of a block.
    """
    return rules.validate(
        rules.non_negative(count, "Count"),
        rules.in_range(count, "Count", maximum=MAX_ATTENDANCE),
        rules.positive(capacity, "Capacity"),
        rules.custom_if(
            count > capacity,
            "Count",
            CAPACITY_WARNING.format(count=count, capacity=capacity),
        ),
    )


def is_capacity_warning(failure: ValidationFailure) -> bool:
    """True for the over-capacity entry produced by ``validate_attendance_count``."""
    return (
        failure.kind == FailureKind.CUSTOM
        and failure.field == "Count"
        and _CAPACITY_WARNING_RE.fullmatch(failure.detail) is not None
    )


def validate_manual_count_edit(
    new_count: int,
    capacity: int,
    is_locked: bool,
) -> Result[None]:
    if is_locked:
        return Failure(LockedError("Cannot edit count for locked event"))
    return validate_attendance_count(new_count, capacity)


# ---------------------------------------------------------------------------
# Reports
# ---------------------------------------------------------------------------

def validate_report_date_range(
    start_date: datetime,
    end_date: datetime,
    clock: IClock = DEFAULT_CLOCK,
    max_range_days: int = MAX_REPORT_RANGE_DAYS,
) -> Result[None]:
    start_date, end_date = as_utc(start_date), as_utc(end_date)
    return rules.validate(
        rules.not_future(start_date, "Start date", clock),
        rules.not_future(end_date, "End date", clock),
        rules.date_range_ordered(start_date, end_date, "Date range"),
        rules.custom_if(
            end_date - start_date > timedelta(days=max_range_days),
            "Date range",
            "Date range cannot exceed 1 year",
        ),
    )


# ---------------------------------------------------------------------------
# Lost & found / incidents
# ---------------------------------------------------------------------------

def validate_lost_item_input(
    description: str,
    found_zone: str,
    notes: str | None = None,
) -> Result[None]:
    return rules.validate(
        rules.not_empty(description, "Item description"),
        rules.length_between(description, "Item description", max_length=500),
        rules.not_empty(found_zone, "Found zone"),
        rules.length_between(found_zone, "Found zone", max_length=100),
        rules.length_between(notes, "Notes", max_length=1000) if notes is not None else None,
    )


def validate_claim_input(
    claimed_by: str,
    claimer_contact: str | None = None,
) -> Result[None]:
    return rules.validate(
        rules.not_empty(claimed_by, "Claimed by"),
        rules.length_between(claimed_by, "Claimed by", max_length=100),
        rules.length_between(claimer_contact, "Claimer contact", max_length=200)
        if claimer_contact is not None
        else None,
    )


def validate_incident_input(
    title: str,
    description: str,
    location: str,
    notes: str | None = None,
) -> Result[None]:
    return rules.validate(
        rules.not_empty(title, "Incident title"),
        rules.length_between(title, "Incident title", max_length=200),
        rules.not_empty(description, "Incident description"),
        rules.length_between(description, "Incident description", max_length=2000),
        rules.not_empty(location, "Location"),
        rules.length_between(location, "Location", max_length=200),
        rules.length_between(notes, "Notes", max_length=1000) if notes is not None else None,
    )
