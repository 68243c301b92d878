"""Incident resolution state machine.

Statuses are ordered reported < investigating < in_progress < resolved <
closed. An incident may move forward any number of steps but never back;
CLOSED is terminal. The first time an incident enters RESOLVED or CLOSED,
``resolved_at`` is stamped; it is never changed or cleared afterwards.
"""

from __future__ import annotations

import logging
from datetime import timedelta

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.enums import IncidentStatus
from venue_ops.core.errors import ValidationError
from venue_ops.core.models import Incident
from venue_ops.core.result import Failure, Result, Success
from venue_ops.validation.failures import ValidationFailure

logger = logging.getLogger(__name__)

_ORDER: tuple[IncidentStatus, ...] = tuple(IncidentStatus)

_VALID_TRANSITIONS: dict[IncidentStatus, frozenset[IncidentStatus]] = {
    status: frozenset(_ORDER[i + 1 :]) for i, status in enumerate(_ORDER)
}

RESOLVED_STATUSES = frozenset({IncidentStatus.RESOLVED, IncidentStatus.CLOSED})


def can_transition(current: IncidentStatus, target: IncidentStatus) -> bool:
    return target == current or target in _VALID_TRANSITIONS[current]


def is_open(incident: Incident) -> bool:
    return incident.status not in RESOLVED_STATUSES


def time_to_resolution(incident: Incident) -> timedelta | None:
    if incident.resolved_at is None:
        return None
    return incident.resolved_at - incident.reported_at


def stamp_resolution(incident: Incident, clock: IClock = DEFAULT_CLOCK) -> Incident:
    """Set ``resolved_at`` if the status is resolved/closed and it is unset."""
    if incident.status in RESOLVED_STATUSES and incident.resolved_at is None:
        return incident.model_copy(update={"resolved_at": clock.now()})
    return incident


def transition(
    incident: Incident,
    target: IncidentStatus,
    clock: IClock = DEFAULT_CLOCK,
) -> Result[Incident]:
    """Move ``incident`` forward to ``target``. Returns a new ``Incident``."""
    current = incident.status
    if target == current:
        return Success(incident)

    if not can_transition(current, target):
        logger.info(
            "Rejected incident transition: incident=%s %s -> %s",
            incident.id,
            current.value,
            target.value,
        )
        return Failure(
            ValidationError(
                [
                    ValidationFailure.custom(
                        "Status",
                        f"cannot change from {current.value} to {target.value}",
                    )
                ]
            )
        )

    updated = incident.model_copy(
        update={"status": target, "updated_at": clock.now()}
    )
    updated = stamp_resolution(updated, clock)
    logger.debug(
        "Incident transition: incident=%s %s -> %s",
        incident.id,
        current.value,
        target.value,
    )
    return Success(updated)
