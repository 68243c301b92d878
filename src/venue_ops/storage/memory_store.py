"""In-memory entity store.

An arena of entities keyed by ``(model, id)``. Relationships are the
foreign-key fields on the entities; deletes apply the ownership rules:

- Venue owns its areas, events, lost items and incidents (cascade).
- Event owns its area counts (cascade); lost items and incidents only
  reference it (``event_id`` nulled).
- AreaCount weakly references its template (``area_template_id`` nulled,
  numeric data kept).

Entities are stored and returned as deep copies so callers never share
mutable state with the store.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

from venue_ops.core.errors import DatabaseError, NotFoundError
from venue_ops.core.models import (
    AreaCount,
    AreaTemplate,
    Entity,
    Event,
    Incident,
    LostItem,
    Venue,
)
from venue_ops.core.result import OK, Failure, Result

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Entity)


class InMemoryStore:
    """Dict-backed store for tests, the CLI and single-session use."""

    def __init__(self) -> None:
        self._tables: dict[type[Entity], dict[str, Entity]] = {}
        self._pending_failure: str | None = None

    # ------------------------------------------------------------------
    # Failure injection
    # ------------------------------------------------------------------

    def fail_next_save(self, message: str = "simulated write failure") -> None:
        """Make the next ``save`` return ``DatabaseError(message)``."""
        self._pending_failure = message

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def save(self, entity: Entity) -> Result[None]:
        if self._pending_failure is not None:
            message, self._pending_failure = self._pending_failure, None
            logger.error(
                "Save failed: %s id=%s: %s", type(entity).__name__, entity.id, message
            )
            return Failure(DatabaseError(message))
        self._table(type(entity))[entity.id] = entity.model_copy(deep=True)
        return OK

    def delete(self, model: type[E], entity_id: str) -> Result[None]:
        table = self._table(model)
        if entity_id not in table:
            return Failure(NotFoundError(model.__name__, entity_id))
        del table[entity_id]

        if model is Venue:
            for child in (AreaTemplate, Event, LostItem, Incident):
                for eid in [e.id for e in self._rows(child) if e.venue_id == entity_id]:
                    self.delete(child, eid)
        elif model is Event:
            for eid in [c.id for c in self._rows(AreaCount) if c.event_id == entity_id]:
                del self._table(AreaCount)[eid]
            for child in (LostItem, Incident):
                for row in self._rows(child):
                    if row.event_id == entity_id:
                        row.event_id = None
        elif model is AreaTemplate:
            for row in self._rows(AreaCount):
                if row.area_template_id == entity_id:
                    row.area_template_id = None

        logger.debug("Deleted %s id=%s", model.__name__, entity_id)
        return OK

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, model: type[E], entity_id: str) -> E | None:
        row = self._table(model).get(entity_id)
        return row.model_copy(deep=True) if row is not None else None  # type: ignore[return-value]

    def exists(self, model: type[E], predicate: Callable[[E], bool]) -> bool:
        return any(predicate(row) for row in self._rows(model))

    def query(
        self,
        model: type[E],
        predicate: Callable[[E], bool] | None = None,
        sort_key: Callable[[E], Any] | None = None,
        reverse: bool = False,
    ) -> list[E]:
        rows = [r for r in self._rows(model) if predicate is None or predicate(r)]
        if sort_key is not None:
            rows.sort(key=sort_key, reverse=reverse)
        return [r.model_copy(deep=True) for r in rows]

    def count(self, model: type[E]) -> int:
        return len(self._table(model))

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _table(self, model: type[Entity]) -> dict[str, Entity]:
        return self._tables.setdefault(model, {})

    def _rows(self, model: type[E]) -> list[E]:
        return list(self._table(model).values())  # type: ignore[arg-type]
