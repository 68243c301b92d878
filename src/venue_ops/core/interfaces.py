"""Protocol interfaces for the venue-operations core.

The store is the only external collaborator. The core never calls it from
validators; services and the tally engine use it to persist accepted
mutations and to answer uniqueness questions.
"""

from __future__ import annotations

from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from .models import Entity
from .result import Result

E = TypeVar("E", bound=Entity)


@runtime_checkable
class IStore(Protocol):
    """Durable storage and querying of entities, keyed by id."""

    def save(self, entity: Entity) -> Result[None]:
        """Insert or replace an entity. Failure carries ``DatabaseError``."""
        ...

    def get(self, model: type[E], entity_id: str) -> E | None: ...

    def exists(self, model: type[E], predicate: Callable[[E], bool]) -> bool: ...

    def query(
        self,
        model: type[E],
        predicate: Callable[[E], bool] | None = None,
        sort_key: Callable[[E], Any] | None = None,
        reverse: bool = False,
    ) -> list[E]: ...

    def delete(self, model: type[E], entity_id: str) -> Result[None]: ...
