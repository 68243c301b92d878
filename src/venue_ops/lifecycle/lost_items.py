"""Lost-item disposition state machine and the donation countdown.

Items are held for a fixed number of days after they were found. Once
the hold has elapsed a still-pending item may be donated. The countdown is
derived from ``found_date`` and the clock on every call; it is never
stored.

Transitions return a new ``LostItem``; the input is left untouched.
"""

from __future__ import annotations

import logging

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.enums import ItemStatus
from venue_ops.core.errors import ValidationError
from venue_ops.core.ids import as_utc
from venue_ops.core.models import LostItem
from venue_ops.core.result import Failure, Result, Success
from venue_ops.validation.domain import validate_claim_input
from venue_ops.validation.failures import ValidationFailure

logger = logging.getLogger(__name__)

DONATION_HOLD_DAYS = 180


# ---------------------------------------------------------------------------
# Valid state transitions
# ---------------------------------------------------------------------------

_VALID_TRANSITIONS: dict[ItemStatus, frozenset[ItemStatus]] = {
    ItemStatus.PENDING: frozenset(
        {ItemStatus.CLAIMED, ItemStatus.DONATED, ItemStatus.DISPOSED}
    ),
    # A claim can be released (e.g. wrong owner); the item goes back on hold.
    ItemStatus.CLAIMED: frozenset({ItemStatus.PENDING}),
    # Terminal states -- no further transitions allowed.
    ItemStatus.DONATED: frozenset(),
    ItemStatus.DISPOSED: frozenset(),
}

_CLEARED_CLAIM = {
    "claimed_by": "",
    "claimer_contact": "",
    "verification_notes": "",
    "claimed_date": None,
}


def can_transition(current: ItemStatus, target: ItemStatus) -> bool:
    return target == current or target in _VALID_TRANSITIONS.get(current, frozenset())


def is_terminal(status: ItemStatus) -> bool:
    return not _VALID_TRANSITIONS.get(status)


# ---------------------------------------------------------------------------
# Donation countdown
# ---------------------------------------------------------------------------

def days_since_found(item: LostItem, clock: IClock = DEFAULT_CLOCK) -> int:
    """Whole days elapsed since the item was found (never negative)."""
    return max(0, (clock.now() - as_utc(item.found_date)).days)


def days_until_donation(
    item: LostItem,
    clock: IClock = DEFAULT_CLOCK,
    hold_days: int = DONATION_HOLD_DAYS,
) -> int:
    return max(0, hold_days - days_since_found(item, clock))


def can_be_donated(
    item: LostItem,
    clock: IClock = DEFAULT_CLOCK,
    hold_days: int = DONATION_HOLD_DAYS,
) -> bool:
    return (
        days_until_donation(item, clock, hold_days) == 0
        and item.status == ItemStatus.PENDING
    )


# ---------------------------------------------------------------------------
# Transitions
# ---------------------------------------------------------------------------

def transition(
    item: LostItem,
    target: ItemStatus,
    *,
    claimed_by: str = "",
    claimer_contact: str = "",
    verification_notes: str = "",
    clock: IClock = DEFAULT_CLOCK,
    hold_days: int = DONATION_HOLD_DAYS,
) -> Result[LostItem]:
    """Move ``item`` to ``target``.

    Entering CLAIMED requires a claimer name and stamps ``claimed_date``;
    leaving CLAIMED clears every claim field. DONATED requires the hold
    period to have elapsed. Same-status is a no-op success.
    """
    current = item.status
    if target == current:
        return Success(item)

    if not can_transition(current, target):
        logger.info(
            "Rejected lost item transition: item=%s %s -> %s",
            item.id,
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

    now = clock.now()
    updates: dict = {"status": target, "updated_at": now}

    if target == ItemStatus.CLAIMED:
        check = validate_claim_input(claimed_by, claimer_contact)
        if isinstance(check, Failure):
            return check
        updates.update(
            claimed_by=claimed_by.strip(),
            claimer_contact=claimer_contact.strip(),
            verification_notes=verification_notes,
            claimed_date=now,
        )
    elif current == ItemStatus.CLAIMED:
        updates.update(_CLEARED_CLAIM)

    if target == ItemStatus.DONATED and not can_be_donated(item, clock, hold_days):
        remaining = days_until_donation(item, clock, hold_days)
        return Failure(
            ValidationError(
                [
                    ValidationFailure.custom(
                        "Status",
                        f"item can be donated in {remaining} days",
                    )
                ]
            )
        )

    logger.debug(
        "Lost item transition: item=%s %s -> %s",
        item.id,
        current.value,
        target.value,
    )
    return Success(item.model_copy(update=updates))


def claim(
    item: LostItem,
    claimed_by: str,
    claimer_contact: str = "",
    verification_notes: str = "",
    clock: IClock = DEFAULT_CLOCK,
) -> Result[LostItem]:
    return transition(
        item,
        ItemStatus.CLAIMED,
        claimed_by=claimed_by,
        claimer_contact=claimer_contact,
        verification_notes=verification_notes,
        clock=clock,
    )


def release_claim(item: LostItem, clock: IClock = DEFAULT_CLOCK) -> Result[LostItem]:
    return transition(item, ItemStatus.PENDING, clock=clock)


def donate(
    item: LostItem,
    clock: IClock = DEFAULT_CLOCK,
    hold_days: int = DONATION_HOLD_DAYS,
) -> Result[LostItem]:
    return transition(item, ItemStatus.DONATED, clock=clock, hold_days=hold_days)


def dispose(item: LostItem, clock: IClock = DEFAULT_CLOCK) -> Result[LostItem]:
    return transition(item, ItemStatus.DISPOSED, clock=clock)
