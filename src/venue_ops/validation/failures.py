"""Typed field-level validation failures.

A ``ValidationFailure`` is an immutable value: the variant (``kind``), the
human field label, and whatever data the variant needs to render its
sentence. Construct through the classmethods rather than by hand.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel


class FailureKind(str, Enum):
    """Variant of a validation failure."""

    EMPTY_STRING = "empty_string"
    INVALID_LENGTH = "invalid_length"
    INVALID_FORMAT = "invalid_format"
    INVALID_RANGE = "invalid_range"
    NOT_POSITIVE = "not_positive"
    NOT_NON_NEGATIVE = "not_non_negative"
    FUTURE_DATE = "future_date"
    INVALID_DATE_RANGE = "invalid_date_range"
    CUSTOM = "custom"


class ValidationFailure(BaseModel, frozen=True):
    """A single field-level validation problem."""

    kind: FailureKind
    field: str
    minimum: int | None = None
    maximum: int | None = None
    expected_format: str = ""
    detail: str = ""

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def empty_string(cls, field: str) -> ValidationFailure:
        return cls(kind=FailureKind.EMPTY_STRING, field=field)

    @classmethod
    def invalid_length(
        cls, field: str, minimum: int | None, maximum: int | None
    ) -> ValidationFailure:
        return cls(
            kind=FailureKind.INVALID_LENGTH,
            field=field,
            minimum=minimum,
            maximum=maximum,
        )

    @classmethod
    def invalid_format(cls, field: str, expected_format: str) -> ValidationFailure:
        return cls(
            kind=FailureKind.INVALID_FORMAT,
            field=field,
            expected_format=expected_format,
        )

    @classmethod
    def invalid_range(
        cls, field: str, minimum: int | None, maximum: int | None
    ) -> ValidationFailure:
        return cls(
            kind=FailureKind.INVALID_RANGE,
            field=field,
            minimum=minimum,
            maximum=maximum,
        )

    @classmethod
    def not_positive(cls, field: str) -> ValidationFailure:
        return cls(kind=FailureKind.NOT_POSITIVE, field=field)

    @classmethod
    def not_non_negative(cls, field: str) -> ValidationFailure:
        return cls(kind=FailureKind.NOT_NON_NEGATIVE, field=field)

    @classmethod
    def future_date(cls, field: str) -> ValidationFailure:
        return cls(kind=FailureKind.FUTURE_DATE, field=field)

    @classmethod
    def invalid_date_range(cls, field: str) -> ValidationFailure:
        return cls(kind=FailureKind.INVALID_DATE_RANGE, field=field)

    @classmethod
    def custom(cls, field: str, detail: str) -> ValidationFailure:
        return cls(kind=FailureKind.CUSTOM, field=field, detail=detail)

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    @property
    def message(self) -> str:
        f = self.field
        lo, hi = self.minimum, self.maximum

        if self.kind == FailureKind.EMPTY_STRING:
            return f"{f} cannot be empty"
        if self.kind == FailureKind.INVALID_LENGTH:
            if lo is not None and hi is not None:
                return f"{f} must be between {lo} and {hi} characters"
            if lo is not None:
                return f"{f} must be at least {lo} characters"
            if hi is not None:
                return f"{f} must be at most {hi} characters"
            return f"{f} has invalid length"
        if self.kind == FailureKind.INVALID_FORMAT:
            return f"{f} must be in format: {self.expected_format}"
        if self.kind == FailureKind.INVALID_RANGE:
            if lo is not None and hi is not None:
                return f"{f} must be between {lo} and {hi}"
            if lo is not None:
                return f"{f} must be at least {lo}"
            if hi is not None:
                return f"{f} must be at most {hi}"
            return f"{f} is out of range"
        if self.kind == FailureKind.NOT_POSITIVE:
            return f"{f} must be positive"
        if self.kind == FailureKind.NOT_NON_NEGATIVE:
            return f"{f} cannot be negative"
        if self.kind == FailureKind.FUTURE_DATE:
            return f"{f} cannot be in the future"
        if self.kind == FailureKind.INVALID_DATE_RANGE:
            return f"{f}: end date must be after start date"
        return f"{f}: {self.detail}"

    def __str__(self) -> str:
        return self.message
