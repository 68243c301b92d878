"""Head-count tally engine with undo/redo and an append-only history.

Owns the working set of ``AreaCount`` values for one ``Event``. Every
forward mutation (increment, decrement, manual edit) pushes
``(area_count_id, previous_value)`` onto the undo stack, clears the redo
stack, and appends the new value to the counter's history. Undo and redo
only move the live ``count``; they never touch history.

A locked event rejects every mutation with ``LockedError`` and leaves the
working set untouched.
"""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.config import TallyConfig
from venue_ops.core.errors import LockedError, NotFoundError, ValidationError
from venue_ops.core.interfaces import IStore
from venue_ops.core.models import AreaCount, Event
from venue_ops.core.result import OK, Failure, Result, Success
from venue_ops.validation.domain import is_capacity_warning, validate_manual_count_edit

logger = logging.getLogger(__name__)

NOTHING_TO_UNDO = "nothing to undo"
NOTHING_TO_REDO = "nothing to redo"
ALREADY_AT_ZERO = "count already at zero"
UNCHANGED = "count unchanged"
ALREADY_LOCKED = "event already locked"

_LOCKED_MESSAGE = "Cannot modify counts for a locked event"


@dataclass(frozen=True)
class TallySnapshot:
    """What the caller needs after each operation."""

    total_attendance: int
    total_capacity: int
    can_undo: bool
    can_redo: bool
    applied: bool = True
    note: str = ""


@dataclass
class _Checkpoint:
    """Pre-mutation state, restored when a save fails and revert is on."""

    area_count: AreaCount | None
    count: int
    history_len: int
    undo: list[tuple[str, int]]
    redo: list[tuple[str, int]]
    is_locked: bool


# ---------------------------------------------------------------------------
# TallyEngine
# ---------------------------------------------------------------------------

class TallyEngine:
    """In-memory counter set for one event.

    Parameters
    ----------
    event:
        The event being counted.
    area_counts:
        One ``AreaCount`` per area of the event. Order is kept for display.
    store:
        Optional persistence collaborator. When given, each accepted
        mutation saves the touched counter and the event.
    clock:
        Source of ``updated_at`` stamps.
    config:
        Undo depth and save-failure policy.
    """

    def __init__(
        self,
        event: Event,
        area_counts: Iterable[AreaCount],
        *,
        store: IStore | None = None,
        clock: IClock = DEFAULT_CLOCK,
        config: TallyConfig | None = None,
    ) -> None:
        self._store = store
        self._clock = clock
        self._config = config or TallyConfig()
        self._undo: deque[tuple[str, int]] = deque(maxlen=self._config.max_undo_depth)
        self._redo: deque[tuple[str, int]] = deque(maxlen=self._config.max_undo_depth)
        self._event = event
        self._counts: dict[str, AreaCount] = {}
        self.load(event, area_counts)

    # ------------------------------------------------------------------
    # Loading / state
    # ------------------------------------------------------------------

    def load(self, event: Event, area_counts: Iterable[AreaCount]) -> TallySnapshot:
        """Switch to ``event``. Clears both stacks."""
        counts = list(area_counts)
        for ac in counts:
            if ac.event_id != event.id:
                raise ValueError(
                    f"AreaCount {ac.id} belongs to event {ac.event_id}, "
                    f"not {event.id}"
                )
        self._event = event
        self._counts = {ac.id: ac for ac in counts}
        self._undo.clear()
        self._redo.clear()
        self._recompute_totals()
        logger.debug(
            "Tally loaded: event=%s areas=%d total=%d/%d",
            event.id,
            len(counts),
            event.total_attendance,
            event.total_capacity,
        )
        return self.snapshot()

    @property
    def event(self) -> Event:
        return self._event

    @property
    def area_counts(self) -> list[AreaCount]:
        return list(self._counts.values())

    @property
    def can_undo(self) -> bool:
        return len(self._undo) > 0

    @property
    def can_redo(self) -> bool:
        return len(self._redo) > 0

    @property
    def total_attendance(self) -> int:
        return self._event.total_attendance

    @property
    def total_capacity(self) -> int:
        return self._event.total_capacity

    def get(self, area_count_id: str) -> AreaCount | None:
        return self._counts.get(area_count_id)

    def snapshot(self, *, applied: bool = True, note: str = "") -> TallySnapshot:
        return TallySnapshot(
            total_attendance=self._event.total_attendance,
            total_capacity=self._event.total_capacity,
            can_undo=self.can_undo,
            can_redo=self.can_redo,
            applied=applied,
            note=note,
        )

    # ------------------------------------------------------------------
    # Forward mutations
    # ------------------------------------------------------------------

    def increment(self, area_count_id: str) -> Result[TallySnapshot]:
        found = self._resolve(area_count_id)
        if isinstance(found, Failure):
            return found
        return self._apply_forward(found, found.count + 1)

    def decrement(self, area_count_id: str) -> Result[TallySnapshot]:
        """Decrease by one. At zero this is a no-op: no stack push, no history entry."""
        found = self._resolve(area_count_id)
        if isinstance(found, Failure):
            return found
        if found.count <= 0:
            return Success(self.snapshot(applied=False, note=ALREADY_AT_ZERO))
        return self._apply_forward(found, found.count - 1)

    def set_count(self, area_count_id: str, value: int) -> Result[TallySnapshot]:
        """Manual edit of a counter.

        Goes through ``validate_manual_count_edit``. Exceeding the area's
        capacity is logged as a warning and accepted; any other failure is
        returned unchanged.
        """
        found = self._resolve(area_count_id)
        if isinstance(found, Failure):
            return found

        check = validate_manual_count_edit(value, found.capacity, self._event.is_locked)
        if isinstance(check, Failure):
            err = check.error
            if not isinstance(err, ValidationError):
                return check
            blocking = [f for f in err.failures if not is_capacity_warning(f)]
            if blocking:
                return Failure(ValidationError(blocking))
            logger.warning(
                "Manual count exceeds capacity: area_count=%s count=%d capacity=%d",
                found.id,
                value,
                found.capacity,
            )

        if value == found.count:
            return Success(self.snapshot(applied=False, note=UNCHANGED))
        return self._apply_forward(found, value)

    # ------------------------------------------------------------------
    # Undo / redo
    # ------------------------------------------------------------------

    def undo(self) -> Result[TallySnapshot]:
        if self._event.is_locked:
            return self._locked()
        if not self._undo:
            return Success(self.snapshot(applied=False, note=NOTHING_TO_UNDO))

        ac = self._counts[self._undo[-1][0]]
        checkpoint = self._checkpoint(ac)
        area_count_id, previous = self._undo.pop()
        self._redo.append((area_count_id, ac.count))
        self._set_live_count(ac, previous)
        logger.debug("Undo: area_count=%s -> %d", area_count_id, previous)
        return self._commit(ac, checkpoint)

    def redo(self) -> Result[TallySnapshot]:
        if self._event.is_locked:
            return self._locked()
        if not self._redo:
            return Success(self.snapshot(applied=False, note=NOTHING_TO_REDO))

        ac = self._counts[self._redo[-1][0]]
        checkpoint = self._checkpoint(ac)
        area_count_id, value = self._redo.pop()
        self._undo.append((area_count_id, ac.count))
        self._set_live_count(ac, value)
        logger.debug("Redo: area_count=%s -> %d", area_count_id, value)
        return self._commit(ac, checkpoint)

    # ------------------------------------------------------------------
    # Locking
    # ------------------------------------------------------------------

    def lock(self) -> Result[TallySnapshot]:
        """Freeze the event's counters. Idempotent."""
        if self._event.is_locked:
            return Success(self.snapshot(applied=False, note=ALREADY_LOCKED))
        checkpoint = self._checkpoint(None)
        self._event.is_locked = True
        self._event.updated_at = self._clock.now()
        logger.info(
            "Event locked: event=%s total=%d/%d",
            self._event.id,
            self._event.total_attendance,
            self._event.total_capacity,
        )
        return self._commit(None, checkpoint)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _locked(self) -> Failure:
        logger.info("Rejected mutation on locked event=%s", self._event.id)
        return Failure(LockedError(_LOCKED_MESSAGE))

    def _resolve(self, area_count_id: str) -> AreaCount | Failure:
        if self._event.is_locked:
            return self._locked()
        ac = self._counts.get(area_count_id)
        if ac is None:
            return Failure(NotFoundError("AreaCount", area_count_id))
        return ac

    def _apply_forward(self, ac: AreaCount, new_value: int) -> Result[TallySnapshot]:
        checkpoint = self._checkpoint(ac)
        self._undo.append((ac.id, ac.count))
        self._redo.clear()
        self._set_live_count(ac, new_value)
        ac.history.append(new_value)
        logger.debug(
            "Count changed: area_count=%s %d -> %d",
            ac.id,
            checkpoint.count,
            new_value,
        )
        return self._commit(ac, checkpoint)

    def _set_live_count(self, ac: AreaCount, value: int) -> None:
        ac.count = value
        ac.updated_at = self._clock.now()
        self._recompute_totals()

    def _recompute_totals(self) -> None:
        self._event.total_attendance = sum(ac.count for ac in self._counts.values())
        self._event.total_capacity = sum(ac.capacity for ac in self._counts.values())
        self._event.updated_at = self._clock.now()

    def _checkpoint(self, ac: AreaCount | None) -> _Checkpoint:
        return _Checkpoint(
            area_count=ac,
            count=ac.count if ac is not None else 0,
            history_len=len(ac.history) if ac is not None else 0,
            undo=list(self._undo),
            redo=list(self._redo),
            is_locked=self._event.is_locked,
        )

    def _commit(
        self, ac: AreaCount | None, checkpoint: _Checkpoint
    ) -> Result[TallySnapshot]:
        saved = self._persist(ac)
        if isinstance(saved, Failure):
            logger.error(
                "Save failed for event=%s: %s", self._event.id, saved.error.message
            )
            if self._config.revert_on_save_failure:
                self._restore(checkpoint)
            return saved
        return Success(self.snapshot())

    def _persist(self, ac: AreaCount | None) -> Result[None]:
        if self._store is None:
            return OK
        if ac is not None:
            saved = self._store.save(ac)
            if isinstance(saved, Failure):
                return saved
        return self._store.save(self._event)

    def _restore(self, checkpoint: _Checkpoint) -> None:
        """Put the working set back to ``checkpoint``."""
        if checkpoint.area_count is not None:
            ac = checkpoint.area_count
            ac.count = checkpoint.count
            del ac.history[checkpoint.history_len:]
        self._undo = deque(checkpoint.undo, maxlen=self._config.max_undo_depth)
        self._redo = deque(checkpoint.redo, maxlen=self._config.max_undo_depth)
        self._event.is_locked = checkpoint.is_locked
        self._recompute_totals()
        logger.warning("Reverted in-memory tally for event=%s", self._event.id)

