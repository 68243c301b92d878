"""Error taxonomy for the venue-operations core.

Errors are carried inside ``Failure`` results rather than raised for
expected bad input. ``Result.unwrap()`` raises them for callers that
prefer exception flow.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from venue_ops.validation.failures import ValidationFailure


class VenueOpsError(Exception):
    """Base exception for all venue-operations errors."""

    @property
    def message(self) -> str:
        return str(self)

    def __eq__(self, other: object) -> bool:
        return type(self) is type(other) and self.args == other.args  # type: ignore[union-attr]

    def __hash__(self) -> int:
        return hash((type(self), self.args))


# --- Input ---
class ValidationError(VenueOpsError):
    """One or more field-level validation failures."""

    def __init__(self, failures: Sequence[ValidationFailure]) -> None:
        self.failures: tuple[ValidationFailure, ...] = tuple(failures)
        super().__init__(self.failures)

    @property
    def message(self) -> str:
        return "\n".join(f.message for f in self.failures)

    def __str__(self) -> str:
        return self.message


class AlreadyExistsError(VenueOpsError):
    """Uniqueness conflict reported by the store."""

    def __init__(self, entity: str, field: str, value: str) -> None:
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(entity, field, value)

    def __str__(self) -> str:
        return f"{self.entity} with {self.field} '{self.value}' already exists"


class NotFoundError(VenueOpsError):
    """Referenced entity does not exist."""

    def __init__(self, entity: str, entity_id: str) -> None:
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(entity, entity_id)

    def __str__(self) -> str:
        return f"{self.entity} with id '{self.entity_id}' not found"


# --- State ---
class LockedError(VenueOpsError):
    """Resource is locked against mutation (e.g. a locked event)."""


# --- Storage ---
class DatabaseError(VenueOpsError):
    """Persistence failure surfaced by the store collaborator."""

    def __str__(self) -> str:
        return f"Database error: {self.args[0] if self.args else ''}"


class UnknownError(VenueOpsError):
    """Unclassified failure."""
