"""Two-case outcome type for operations that can fail.

``Success(value)`` or ``Failure(error)``; the error is always a
``VenueOpsError``. Expected failures travel as values, so callers check
``is_success`` (or pattern-match) instead of catching exceptions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar, Union

from .errors import VenueOpsError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class Success(Generic[T]):
    """Successful outcome carrying a value."""

    value: T

    @property
    def is_success(self) -> bool:
        return True

    @property
    def is_failure(self) -> bool:
        return False

    @property
    def error(self) -> None:
        return None

    def unwrap(self) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> Result[U]:
        return Success(fn(self.value))

    def __bool__(self) -> bool:
        return True


@dataclass(frozen=True)
class Failure:
    """Failed outcome carrying a ``VenueOpsError``."""

    error: VenueOpsError

    @property
    def is_success(self) -> bool:
        return False

    @property
    def is_failure(self) -> bool:
        return True

    @property
    def value(self) -> None:
        return None

    def unwrap(self):
        """Raise the carried error."""
        raise self.error

    def map(self, fn: Callable) -> Failure:
        return self

    def __bool__(self) -> bool:
        return False


Result = Union[Success[T], Failure]

OK: Success[None] = Success(None)
