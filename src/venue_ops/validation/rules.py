"""Field-level validation rules and the failure aggregator.

Each rule takes a value plus a human field label and returns either
``None`` or one ``ValidationFailure``. Rules are composed by listing them
inside ``collect_errors``; every rule runs, nothing short-circuits, and
failures come back in the order the rules were listed.

Date rules take an ``IClock`` so "now" can be pinned in tests. Naive
datetimes are read as UTC.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Iterable

from venue_ops.core.clock import DEFAULT_CLOCK, IClock
from venue_ops.core.errors import ValidationError
from venue_ops.core.ids import as_utc
from venue_ops.core.result import OK, Failure, Result

from .failures import ValidationFailure

EMAIL_PATTERN = r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}$"
PHONE_PATTERN = (
    r"^[+]?[(]?[0-9]{1,4}[)]?[-\s.]?[(]?[0-9]{1,4}[)]?[-\s.]?[0-9]{1,9}$"
)


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------

def not_empty(value: str, field: str) -> ValidationFailure | None:
    """Fail when the value is empty or whitespace only."""
    return ValidationFailure.empty_string(field) if not value.strip() else None


def length_between(
    value: str,
    field: str,
    min_length: int | None = None,
    max_length: int | None = None,
) -> ValidationFailure | None:
    length = len(value)
    if min_length is not None and length < min_length:
        return ValidationFailure.invalid_length(field, min_length, max_length)
    if max_length is not None and length > max_length:
        return ValidationFailure.invalid_length(field, min_length, max_length)
    return None


def matches_format(
    value: str,
    field: str,
    pattern: str,
    expected_format: str,
) -> ValidationFailure | None:
    """Fail unless the whole (trimmed) value matches ``pattern``."""
    if re.fullmatch(pattern, value.strip()):
        return None
    return ValidationFailure.invalid_format(field, expected_format)


def email(value: str, field: str = "Contact email") -> ValidationFailure | None:
    """Optional email: blank passes, anything else must look like an address."""
    if not value.strip():
        return None
    return matches_format(value, field, EMAIL_PATTERN, "valid email address")


def phone(value: str, field: str = "Contact phone") -> ValidationFailure | None:
    """Optional phone: accepts (123) 456-7890, 123-456-7890, 1234567890."""
    if not value.strip():
        return None
    return matches_format(value, field, PHONE_PATTERN, "valid phone number")


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------

def positive(value: int, field: str) -> ValidationFailure | None:
    """Strictly positive.

    Negative and zero are reported as different variants:
    ``NOT_NON_NEGATIVE`` for < 0, ``NOT_POSITIVE`` for == 0.
    """
    if value < 0:
        return ValidationFailure.not_non_negative(field)
    if value == 0:
        return ValidationFailure.not_positive(field)
    return None


def non_negative(value: int, field: str) -> ValidationFailure | None:
    return ValidationFailure.not_non_negative(field) if value < 0 else None


def in_range(
    value: int,
    field: str,
    minimum: int | None = None,
    maximum: int | None = None,
) -> ValidationFailure | None:
    if minimum is not None and value < minimum:
        return ValidationFailure.invalid_range(field, minimum, maximum)
    if maximum is not None and value > maximum:
        return ValidationFailure.invalid_range(field, minimum, maximum)
    return None


# ---------------------------------------------------------------------------
# Dates
# ---------------------------------------------------------------------------

def not_future(
    value: datetime, field: str, clock: IClock = DEFAULT_CLOCK
) -> ValidationFailure | None:
    return ValidationFailure.future_date(field) if as_utc(value) > clock.now() else None


def not_past(
    value: datetime, field: str, clock: IClock = DEFAULT_CLOCK
) -> ValidationFailure | None:
    if as_utc(value) < clock.now():
        return ValidationFailure.custom(field, "cannot be in the past")
    return None


def date_range_ordered(
    start: datetime, end: datetime, field: str = "Date range"
) -> ValidationFailure | None:
    if as_utc(start) > as_utc(end):
        return ValidationFailure.invalid_date_range(field)
    return None


# ---------------------------------------------------------------------------
# Custom
# ---------------------------------------------------------------------------

def custom(field: str, detail: str) -> ValidationFailure:
    return ValidationFailure.custom(field, detail)


def custom_if(condition: bool, field: str, detail: str) -> ValidationFailure | None:
    return ValidationFailure.custom(field, detail) if condition else None


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def collect_errors(
    *failures: ValidationFailure | None | Iterable[ValidationFailure | None],
) -> list[ValidationFailure]:
    """Drop the ``None`` entries, keeping input order.

    Accepts failures as positional arguments, or a single iterable of them.
    """
    items: Iterable[ValidationFailure | None]
    if len(failures) == 1 and not isinstance(
        failures[0], (ValidationFailure, type(None))
    ):
        items = failures[0]  # type: ignore[assignment]
    else:
        items = failures  # type: ignore[assignment]
    return [f for f in items if f is not None]


def to_result(failures: list[ValidationFailure]) -> Result[None]:
    """``Success(None)`` iff there are no failures."""
    if not failures:
        return OK
    return Failure(ValidationError(failures))


def validate(*failures: ValidationFailure | None) -> Result[None]:
    """Collect and wrap in one call."""
    return to_result(collect_errors(*failures))
